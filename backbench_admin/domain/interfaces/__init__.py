"""
Domain Interfaces (Ports)
"""

from .store import AdminDataStore, Row

__all__ = [
    "AdminDataStore",
    "Row",
]
