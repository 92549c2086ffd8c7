"""ORM models for identities, roles and role memberships."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from skillsnap.models.base import Base, UTCDateTime

# Fixed role set; created idempotently at startup.
ROLE_ADMIN = "Admin"
ROLE_USER = "User"
DEFAULT_ROLES = (ROLE_ADMIN, ROLE_USER)

user_roles = Table(
    "user_roles",
    Base.metadata,
    Column("user_id", String(36), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("role_id", Integer, ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True),
)


def _new_user_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Role(Base):
    """Named role (Admin, User)."""

    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(64), nullable=False, unique=True, index=True)


class User(Base):
    """
    Registered identity used for bearer-token authentication.

    Emails are unique case-insensitively via normalized_email. Only a bcrypt
    hash of the password is stored.
    """

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=_new_user_id)
    username = Column(String(256), nullable=False)
    email = Column(String(256), nullable=False)
    normalized_email = Column(String(256), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(UTCDateTime(), nullable=False, default=_utcnow)

    roles = relationship(Role, secondary=user_roles, lazy="selectin")

    @property
    def role_names(self) -> set[str]:
        return {role.name for role in self.roles}
