"""Credential store: create, look up and verify user identities and roles."""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from skillsnap.core.config import get_settings
from skillsnap.core.security import dummy_password_hash, hash_password, verify_password
from skillsnap.models import Role, User

if TYPE_CHECKING:
    from skillsnap.core.config import Settings

logger = logging.getLogger(__name__)


class CredentialError(Exception):
    """Registration or role-assignment failure with a stable error code."""

    code = "CredentialError"

    def __init__(self, description: str) -> None:
        self.description = description
        super().__init__(description)


class DuplicateEmailError(CredentialError):
    code = "DuplicateEmail"


class WeakPasswordError(CredentialError):
    def __init__(self, code: str, description: str) -> None:
        self.code = code
        super().__init__(description)


class UnknownRoleError(CredentialError):
    code = "UnknownRole"


def normalize_email(email: str) -> str:
    """Canonical form used for uniqueness and lookups."""
    return email.strip().lower()


class CredentialStore:
    """Identity persistence over the users, roles and user_roles tables."""

    def __init__(self, db: Session, settings: "Settings | None" = None) -> None:
        self.db = db
        self.settings = settings or get_settings()

    def check_password_policy(self, password: str) -> None:
        """Raise WeakPasswordError if password fails the configured length or character rules."""
        if len(password) < self.settings.PASSWORD_MIN_LENGTH:
            raise WeakPasswordError(
                "PasswordTooShort",
                f"Passwords must be at least {self.settings.PASSWORD_MIN_LENGTH} characters.",
            )
        if len(password) > self.settings.PASSWORD_MAX_LENGTH:
            raise WeakPasswordError(
                "PasswordTooLong",
                f"Passwords must be at most {self.settings.PASSWORD_MAX_LENGTH} characters.",
            )
        if self.settings.PASSWORD_REQUIRE_DIGIT and not any(c.isdigit() for c in password):
            raise WeakPasswordError(
                "PasswordRequiresDigit",
                "Passwords must have at least one digit ('0'-'9').",
            )
        if self.settings.PASSWORD_REQUIRE_LOWERCASE and not any(c.islower() for c in password):
            raise WeakPasswordError(
                "PasswordRequiresLower",
                "Passwords must have at least one lowercase letter ('a'-'z').",
            )

    def create(self, username: str, email: str, password: str) -> User:
        """
        Register a new identity and commit it.

        Raises DuplicateEmailError if the email (case-insensitive) is taken and
        WeakPasswordError if the password fails policy. A blank username falls
        back to the email.
        """
        normalized = normalize_email(email)
        if self.find_by_email(normalized) is not None:
            raise DuplicateEmailError(f"Email '{email.strip()}' is already taken.")
        self.check_password_policy(password)

        user = User(
            username=(username or "").strip() or email.strip(),
            email=email.strip(),
            normalized_email=normalized,
            password_hash=hash_password(password, rounds=self.settings.BCRYPT_ROUNDS),
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            # Concurrent registration won the unique index race.
            self.db.rollback()
            raise DuplicateEmailError(f"Email '{email.strip()}' is already taken.") from e
        self.db.refresh(user)
        logger.info("Registered user id=%s", user.id)
        return user

    def find_by_email(self, email: str) -> User | None:
        return (
            self.db.query(User)
            .filter(User.normalized_email == normalize_email(email))
            .first()
        )

    def find_by_id(self, user_id: str) -> User | None:
        return self.db.get(User, user_id)

    def verify_password(self, user: User, password: str) -> bool:
        return verify_password(password, user.password_hash)

    def authenticate(self, email: str, password: str) -> User | None:
        """
        Return the user if email and password match, else None.

        An unknown email still costs one bcrypt check so both failure paths
        take the same time.
        """
        user = self.find_by_email(email)
        if user is None:
            verify_password(password, dummy_password_hash())
            return None
        if not self.verify_password(user, password):
            return None
        return user

    def ensure_roles(self, names: Iterable[str]) -> list[Role]:
        """Create any missing roles; return all requested roles."""
        roles = []
        for name in names:
            role = self.db.query(Role).filter(Role.name == name).first()
            if role is None:
                role = Role(name=name)
                self.db.add(role)
                self.db.commit()
                logger.info("Role '%s' created.", name)
            roles.append(role)
        return roles

    def add_to_role(self, user: User, role_name: str) -> None:
        role = self.db.query(Role).filter(Role.name == role_name).first()
        if role is None:
            raise UnknownRoleError(f"Role '{role_name}' does not exist.")
        if role in user.roles:
            return
        user.roles.append(role)
        self.db.commit()
        logger.info("Added user id=%s to role '%s'.", user.id, role_name)
