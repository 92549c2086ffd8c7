"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Allowed URL schemes for DATABASE_URL (module-level so validators can use it).
VALID_DATABASE_URL_PREFIXES = (
    "sqlite://",
    "postgresql://",
    "postgresql+psycopg2://",
    "postgres://",
    "postgres+psycopg2://",
)

# Development fallback; must be overridden outside dev.
DEFAULT_JWT_SECRET = "CHANGE_ME_REPLACE_IN_PRODUCTION"

ALLOWED_JWT_ALGORITHMS = frozenset({"HS256", "HS384", "HS512"})


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    API_PREFIX: str = "/api"

    # SQLite by default; any PostgreSQL URL works for real deployments.
    DATABASE_URL: str = "sqlite:///./skillsnap.db"
    # Drop every table before create_all on startup. Development only.
    DB_RESET_ON_STARTUP: bool = False
    # Create roles, sample users and sample portfolio items on startup if missing.
    SEED_ON_STARTUP: bool = True

    # JWT bearer tokens
    JWT_SECRET: SecretStr = SecretStr(DEFAULT_JWT_SECRET)
    JWT_ALGORITHM: str = "HS256"
    # Used for both the iss and aud claims.
    JWT_ISSUER: str = "skillsnap"
    JWT_EXPIRE_MINUTES: int = 360

    # Password hashing and policy
    BCRYPT_ROUNDS: int = 12
    PASSWORD_MIN_LENGTH: int = 6
    PASSWORD_MAX_LENGTH: int = 128
    PASSWORD_REQUIRE_DIGIT: bool = True
    PASSWORD_REQUIRE_LOWERCASE: bool = True

    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("DATABASE_URL must be set and non-empty")
        if not any(v.startswith(prefix) for prefix in VALID_DATABASE_URL_PREFIXES):
            raise ValueError(
                "DATABASE_URL must be a SQLite or PostgreSQL URL (e.g. sqlite:///./skillsnap.db)"
            )
        return v

    @field_validator("API_PREFIX")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            raise ValueError("API_PREFIX must start with '/' (e.g. /api)")
        return v

    @field_validator("JWT_SECRET")
    @classmethod
    def validate_jwt_secret(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value() or not v.get_secret_value().strip():
            raise ValueError("JWT_SECRET must be set and non-empty")
        return v

    @field_validator("JWT_ALGORITHM")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        v = (v or "").strip().upper()
        if v not in ALLOWED_JWT_ALGORITHMS:
            raise ValueError(
                f"JWT_ALGORITHM must be one of {sorted(ALLOWED_JWT_ALGORITHMS)}"
            )
        return v

    @field_validator("JWT_ISSUER")
    @classmethod
    def validate_jwt_issuer(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("JWT_ISSUER must be set and non-empty")
        return v.strip()

    @field_validator("JWT_EXPIRE_MINUTES")
    @classmethod
    def validate_jwt_expire_minutes(cls, v: int) -> int:
        if v < 1 or v > 10080:
            raise ValueError(
                "JWT_EXPIRE_MINUTES must be between 1 and 10080 (1 min to 7 days)"
            )
        return v

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        if v < 4 or v > 16:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 16")
        return v

    @field_validator("PASSWORD_MIN_LENGTH")
    @classmethod
    def validate_password_min_length(cls, v: int) -> int:
        if v < 1:
            raise ValueError("PASSWORD_MIN_LENGTH must be at least 1")
        return v

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        if self.PASSWORD_MAX_LENGTH < self.PASSWORD_MIN_LENGTH:
            raise ValueError("PASSWORD_MAX_LENGTH must be >= PASSWORD_MIN_LENGTH")
        if self.APP_ENV == "prod":
            if self.JWT_SECRET.get_secret_value() == DEFAULT_JWT_SECRET:
                raise ValueError("JWT_SECRET must be overridden when APP_ENV=prod")
            if self.DB_RESET_ON_STARTUP:
                raise ValueError("DB_RESET_ON_STARTUP is not allowed when APP_ENV=prod")
        return self

    @property
    def uses_default_jwt_secret(self) -> bool:
        return self.JWT_SECRET.get_secret_value() == DEFAULT_JWT_SECRET


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (safe to call from dependencies)."""
    return Settings()


settings = get_settings()
