"""API routes."""

from fastapi import APIRouter

from app.api.v1 import admin_radios, admin_users, auth, health, radios

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/admin", tags=["auth"])
router.include_router(radios.router, tags=["radios"])
router.include_router(admin_radios.router, prefix="/admin/radios", tags=["admin-radios"])
router.include_router(admin_users.router, prefix="/admin/users", tags=["admin-users"])
