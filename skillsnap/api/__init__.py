"""API routes."""

from fastapi import APIRouter

from skillsnap.api import auth, health, portfolio

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(portfolio.router, prefix="/portfolio", tags=["portfolio"])
