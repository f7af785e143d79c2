"""Top-level API router — aggregates all endpoint routers."""

from fastapi import APIRouter

from app.presentation.api.endpoints.health import router as health_router
from app.presentation.api.endpoints.users import router as users_router

router = APIRouter()
router.include_router(health_router)
router.include_router(users_router)
