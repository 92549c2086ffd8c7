"""Startup seeding: roles, sample users and sample portfolio items."""

import logging
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from skillsnap.models.user import DEFAULT_ROLES, ROLE_ADMIN, ROLE_USER
from skillsnap.services.credentials import CredentialStore
from skillsnap.services.portfolio import PortfolioRepository

if TYPE_CHECKING:
    from skillsnap.core.config import Settings

logger = logging.getLogger(__name__)

SAMPLE_PASSWORD = "Password123!"
ADMIN_EMAIL = "admin@skillsnap.local"
USER_EMAIL = "user@skillsnap.local"


def _ensure_user(store: CredentialStore, email: str, role: str):
    user = store.find_by_email(email)
    if user is None:
        user = store.create(username=email, email=email, password=SAMPLE_PASSWORD)
        logger.info("Sample user '%s' created.", email)
    store.add_to_role(user, role)
    return user


def seed_database(session: Session, settings: "Settings | None" = None) -> bool:
    """
    Create roles, sample users and sample portfolio items where missing.

    Idempotent. Seeding is a convenience: any failure is logged and swallowed.
    Returns True when seeding completed.
    """
    try:
        store = CredentialStore(session, settings)
        store.ensure_roles(DEFAULT_ROLES)
        admin = _ensure_user(store, ADMIN_EMAIL, ROLE_ADMIN)
        user = _ensure_user(store, USER_EMAIL, ROLE_USER)

        portfolio = PortfolioRepository(session)
        if portfolio.count() == 0:
            now = datetime.now(timezone.utc)
            samples = [
                (
                    "Personal Website",
                    "A responsive personal website with a component-based frontend.",
                    user.id,
                    now - timedelta(days=10),
                ),
                (
                    "E-Commerce API",
                    "RESTful API with an ORM-backed relational store and token auth.",
                    admin.id,
                    now - timedelta(days=5),
                ),
                (
                    "Mobile App (MAUI)",
                    "Cross-platform mobile application with user authentication.",
                    user.id,
                    now - timedelta(days=2),
                ),
            ]
            for title, description, owner_id, created_at in samples:
                portfolio.create(title, description, owner_id, created_at=created_at)
            logger.info("Portfolio items seeded: count=%s", len(samples))
        return True
    except Exception as e:
        session.rollback()
        logger.exception("Error seeding database; continuing startup: %s", e)
        return False
