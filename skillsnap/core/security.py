"""Password hashing and JWT issuance/validation for bearer authentication."""

from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt

from skillsnap.core.config import get_settings
from skillsnap.schemas.auth import TokenClaims

if TYPE_CHECKING:
    from skillsnap.core.config import Settings
    from skillsnap.models.user import User

# bcrypt only looks at the first 72 bytes of the password.
BCRYPT_MAX_BYTES = 72

REQUIRED_CLAIMS = ("sub", "email", "name", "iat", "exp", "iss", "aud")


class TokenError(Exception):
    """Base class for bearer token validation failures."""

    reason = "invalid"

    def __init__(self, message: str = "") -> None:
        self.message = message or self.__class__.__doc__ or self.reason
        super().__init__(self.message)


class MalformedTokenError(TokenError):
    """Token cannot be parsed or lacks required claims."""

    reason = "malformed"


class InvalidSignatureError(TokenError):
    """Token signature does not match the signing key."""

    reason = "invalid_signature"


class TokenExpiredError(TokenError):
    """Token is past its expiry time."""

    reason = "expired"


class WrongIssuerError(TokenError):
    """Token issuer does not match the configured issuer."""

    reason = "wrong_issuer"


class WrongAudienceError(TokenError):
    """Token audience does not match the configured audience."""

    reason = "wrong_audience"


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    if rounds is None:
        rounds = get_settings().BCRYPT_ROUNDS
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash (constant time; never raises)."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@lru_cache
def dummy_password_hash() -> str:
    """Hash compared against when no user matches, so lookups miss in equal time."""
    return hash_password("skillsnap-dummy-password")


def create_access_token(
    user: "User",
    now: datetime | None = None,
    settings: "Settings | None" = None,
) -> str:
    """
    Create a signed JWT for user.

    Claims: sub (user id), email, name (username), iat, exp, and iss/aud both
    set to JWT_ISSUER. Signed with JWT_SECRET using JWT_ALGORITHM (HS256).
    """
    settings = settings or get_settings()
    issued_at = (now or datetime.now(UTC)).replace(microsecond=0)
    expires_at = issued_at + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": str(user.id),
        "email": user.email,
        "name": user.username,
        "iat": int(issued_at.timestamp()),
        "exp": int(expires_at.timestamp()),
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_ISSUER,
    }
    return jwt.encode(
        payload,
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(
    token: str,
    now: datetime | None = None,
    settings: "Settings | None" = None,
) -> TokenClaims:
    """
    Validate a bearer token and return its claims.

    Checks signature, issuer, audience and expiry. Raises a TokenError subclass
    describing the first failure. Stateless: no database lookup.
    """
    settings = settings or get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET.get_secret_value(),
            algorithms=[settings.JWT_ALGORITHM],
            issuer=settings.JWT_ISSUER,
            audience=settings.JWT_ISSUER,
            # Expiry is checked below against an injectable clock.
            options={
                "require": list(REQUIRED_CLAIMS),
                "verify_exp": False,
                "verify_iat": False,
            },
        )
    except jwt.InvalidSignatureError as e:
        raise InvalidSignatureError() from e
    except jwt.InvalidIssuerError as e:
        raise WrongIssuerError() from e
    except jwt.InvalidAudienceError as e:
        raise WrongAudienceError() from e
    except jwt.InvalidTokenError as e:
        raise MalformedTokenError(str(e)) from e

    issued_at = payload.get("iat")
    expires_at = payload.get("exp")
    if not isinstance(issued_at, int | float) or not isinstance(expires_at, int | float):
        raise MalformedTokenError("iat and exp must be numeric timestamps")
    if expires_at <= issued_at:
        raise MalformedTokenError("exp must be after iat")
    if not payload.get("sub"):
        raise MalformedTokenError("sub must be non-empty")

    current = (now or datetime.now(UTC)).timestamp()
    if current >= expires_at:
        raise TokenExpiredError()

    return TokenClaims(
        sub=str(payload["sub"]),
        email=str(payload["email"]),
        name=str(payload["name"]),
        iat=datetime.fromtimestamp(issued_at, UTC),
        exp=datetime.fromtimestamp(expires_at, UTC),
    )
