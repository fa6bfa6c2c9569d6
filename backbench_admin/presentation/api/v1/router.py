from fastapi import APIRouter

from .admin_auth import admin_auth_router
from .admin_stats import admin_stats_router
from .admin_students import admin_students_router
from .health import health_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(admin_auth_router, tags=["Admin Session"])
router.include_router(admin_stats_router, tags=["Admin Stats"])
router.include_router(admin_students_router, tags=["Admin Students"])
