"""Registration, login and the bearer-token guard (get_current_claims)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from skillsnap.core.database import get_db
from skillsnap.core.security import TokenError, create_access_token, decode_access_token
from skillsnap.schemas.auth import (
    IdentityError,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    TokenClaims,
    TokenResponse,
)
from skillsnap.services.credentials import CredentialError, CredentialStore

logger = logging.getLogger(__name__)

router = APIRouter()
security = HTTPBearer(auto_error=False)


def _unauthorized() -> HTTPException:
    # Same response for every auth failure so callers cannot tell why.
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )


@router.post("/register", response_model=RegisterResponse)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> RegisterResponse:
    """Create an identity. No token is issued; call /login afterwards."""
    store = CredentialStore(db)
    try:
        user = store.create(
            username=body.username or body.email,
            email=body.email,
            password=body.password,
        )
    except CredentialError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=[IdentityError(code=e.code, description=e.description).model_dump()],
        ) from e
    return RegisterResponse(id=user.id, email=user.email)


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> TokenResponse:
    """
    Authenticate with email and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <access_token>
    """
    user = CredentialStore(db).authenticate(body.email, body.password)
    if user is None:
        logger.info("Login failed")
        raise _unauthorized()
    token = create_access_token(user)
    return TokenResponse(access_token=token, token_type="bearer")


def get_current_claims(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> TokenClaims:
    """Dependency: require a valid Bearer JWT and return its claims. Raises 401 otherwise."""
    if credentials is None:
        raise _unauthorized()
    try:
        return decode_access_token(credentials.credentials)
    except TokenError as e:
        logger.info("Bearer token rejected: reason=%s", e.reason)
        raise _unauthorized() from e
