"""Pydantic request/response schemas."""

from skillsnap.schemas.auth import (
    IdentityError,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    TokenClaims,
    TokenResponse,
)
from skillsnap.schemas.health import HealthResponse
from skillsnap.schemas.portfolio import PortfolioItemCreate, PortfolioItemRead

__all__ = [
    "HealthResponse",
    "IdentityError",
    "LoginRequest",
    "PortfolioItemCreate",
    "PortfolioItemRead",
    "RegisterRequest",
    "RegisterResponse",
    "TokenClaims",
    "TokenResponse",
]
