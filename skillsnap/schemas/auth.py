"""Request/response schemas for auth endpoints and token claims."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

EMAIL_MAX_LENGTH = 256


class RegisterRequest(BaseModel):
    """Credentials for registration. username defaults to the email."""

    email: str = Field(..., min_length=3, max_length=EMAIL_MAX_LENGTH, description="Email")
    password: str = Field(..., description="Password")
    username: str | None = Field(
        default=None,
        min_length=1,
        max_length=256,
        description="Display name; defaults to the email",
    )

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        v = v.strip()
        local, sep, domain = v.rpartition("@")
        if not sep or not local or not domain or " " in v:
            raise ValueError("Email is not a valid address.")
        return v


class RegisterResponse(BaseModel):
    """New identity (never includes the password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str


class IdentityError(BaseModel):
    """One registration failure, e.g. DuplicateEmail or PasswordTooShort."""

    code: str
    description: str


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., max_length=EMAIL_MAX_LENGTH, description="Email")
    password: str = Field(..., description="Password")


class TokenResponse(BaseModel):
    """JWT access token returned after successful login."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")


class TokenClaims(BaseModel):
    """Claims recovered from a validated bearer token."""

    model_config = ConfigDict(frozen=True)

    sub: str = Field(..., description="Identity id (owner id for writes)")
    email: str
    name: str
    iat: datetime
    exp: datetime
