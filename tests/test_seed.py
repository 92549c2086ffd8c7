"""Tests for skillsnap.services.seed: idempotent seeding that never raises."""

import unittest
from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

from pydantic import SecretStr
from sqlalchemy.orm import sessionmaker

from skillsnap.core.config import Settings
from skillsnap.core.database import init_db, make_engine
from skillsnap.models import PortfolioItem, Role, User
from skillsnap.services.credentials import CredentialStore
from skillsnap.services.seed import ADMIN_EMAIL, SAMPLE_PASSWORD, USER_EMAIL, seed_database


def _settings() -> Settings:
    return Settings(_env_file=None, JWT_SECRET=SecretStr("test-secret"), BCRYPT_ROUNDS=4)


class TestSeedDatabase(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = make_engine("sqlite://")
        init_db(self.engine)
        self.db = sessionmaker(bind=self.engine, autoflush=False)()

    def tearDown(self) -> None:
        self.db.close()
        self.engine.dispose()

    def test_seeds_roles_users_and_items(self) -> None:
        self.assertTrue(seed_database(self.db, _settings()))
        self.assertEqual(sorted(r.name for r in self.db.query(Role).all()), ["Admin", "User"])
        store = CredentialStore(self.db, _settings())
        admin = store.find_by_email(ADMIN_EMAIL)
        user = store.find_by_email(USER_EMAIL)
        self.assertEqual(admin.role_names, {"Admin"})
        self.assertEqual(user.role_names, {"User"})
        self.assertTrue(store.verify_password(admin, SAMPLE_PASSWORD))
        items = self.db.query(PortfolioItem).order_by(PortfolioItem.created_at.desc()).all()
        self.assertEqual(
            [i.title for i in items],
            ["Mobile App (MAUI)", "E-Commerce API", "Personal Website"],
        )
        self.assertEqual(items[1].owner_id, admin.id)

    def test_is_idempotent(self) -> None:
        seed_database(self.db, _settings())
        seed_database(self.db, _settings())
        self.assertEqual(self.db.query(User).count(), 2)
        self.assertEqual(self.db.query(Role).count(), 2)
        self.assertEqual(self.db.query(PortfolioItem).count(), 3)

    def test_does_not_add_items_when_table_not_empty(self) -> None:
        self.db.add(PortfolioItem(title="Existing", description="", created_at=datetime.now(timezone.utc)))
        self.db.commit()
        seed_database(self.db, _settings())
        self.assertEqual(self.db.query(PortfolioItem).count(), 1)


class TestSeedFailureIsSwallowed(unittest.TestCase):
    """Storage errors during seeding are logged and swallowed."""

    def test_returns_false_and_rolls_back(self) -> None:
        session = MagicMock()
        with patch(
            "skillsnap.services.seed.CredentialStore.ensure_roles",
            side_effect=RuntimeError("database is locked"),
        ):
            with self.assertLogs("skillsnap.services.seed", level="ERROR"):
                result = seed_database(session, _settings())
        self.assertFalse(result)
        session.rollback.assert_called_once()
