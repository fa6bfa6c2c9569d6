"""Data store implementations."""

from .rest_store import RestAdminDataStore
from .sql_store import SqlAdminDataStore

__all__ = [
    "RestAdminDataStore",
    "SqlAdminDataStore",
]
