"""Tests for skillsnap.services.portfolio: ordering, lookup, creation and validation."""

import unittest
from datetime import datetime, timedelta, timezone

from sqlalchemy.orm import sessionmaker

from skillsnap.core.database import init_db, make_engine
from skillsnap.models import PortfolioItem
from skillsnap.models.portfolio_item import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH
from skillsnap.services.portfolio import PortfolioRepository, PortfolioValidationError


class PortfolioRepositoryTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = make_engine("sqlite://")
        init_db(self.engine)
        self.Session = sessionmaker(bind=self.engine, autoflush=False)
        self.db = self.Session()
        self.repo = PortfolioRepository(self.db)

    def tearDown(self) -> None:
        self.db.close()
        self.engine.dispose()


class TestCreate(PortfolioRepositoryTestCase):
    """create assigns id and created_at server-side."""

    def test_assigns_id_and_utc_created_at(self) -> None:
        before = datetime.now(timezone.utc)
        item = self.repo.create("Site", "My site", owner_id="user-1")
        self.assertIsInstance(item.id, int)
        self.assertEqual(item.owner_id, "user-1")
        self.assertIsNotNone(item.created_at.tzinfo)
        self.assertGreaterEqual(item.created_at, before)

    def test_ids_are_unique(self) -> None:
        a = self.repo.create("A", "", owner_id=None)
        b = self.repo.create("B", "", owner_id=None)
        self.assertNotEqual(a.id, b.id)

    def test_owner_is_optional_and_description_defaults_empty(self) -> None:
        item = self.repo.create("A", None, owner_id=None)
        self.assertIsNone(item.owner_id)
        self.assertEqual(item.description, "")

    def test_title_required(self) -> None:
        for title in ("", "   "):
            with self.subTest(title=title):
                with self.assertRaises(PortfolioValidationError) as ctx:
                    self.repo.create(title, "d", owner_id=None)
                self.assertEqual(ctx.exception.field, "title")

    def test_title_max_length(self) -> None:
        self.repo.create("t" * TITLE_MAX_LENGTH, "", owner_id=None)
        with self.assertRaises(PortfolioValidationError) as ctx:
            self.repo.create("t" * (TITLE_MAX_LENGTH + 1), "", owner_id=None)
        self.assertEqual(ctx.exception.field, "title")

    def test_description_max_length(self) -> None:
        self.repo.create("ok", "d" * DESCRIPTION_MAX_LENGTH, owner_id=None)
        with self.assertRaises(PortfolioValidationError) as ctx:
            self.repo.create("ok", "d" * (DESCRIPTION_MAX_LENGTH + 1), owner_id=None)
        self.assertEqual(ctx.exception.field, "description")
        self.assertEqual(self.repo.count(), 1)


class TestListAndGet(PortfolioRepositoryTestCase):
    """list is newest first; get returns the stored record or None."""

    def test_list_orders_by_created_at_desc(self) -> None:
        t1 = datetime(2026, 1, 1, tzinfo=timezone.utc)
        t2 = t1 + timedelta(hours=1)
        t3 = t1 + timedelta(days=1)
        self.repo.create("second", "", None, created_at=t2)
        self.repo.create("third", "", None, created_at=t3)
        self.repo.create("first", "", None, created_at=t1)
        items = self.repo.list()
        self.assertEqual([i.title for i in items], ["third", "second", "first"])
        self.assertEqual([i.created_at for i in items], [t3, t2, t1])

    def test_list_empty(self) -> None:
        self.assertEqual(self.repo.list(), [])

    def test_list_is_requeried_each_call(self) -> None:
        self.assertEqual(len(self.repo.list()), 0)
        self.db.add(PortfolioItem(title="elsewhere", description="", created_at=datetime.now(timezone.utc)))
        self.db.commit()
        self.assertEqual(len(self.repo.list()), 1)

    def test_get_round_trip_equal_in_all_fields(self) -> None:
        created = self.repo.create("Site", "My site", owner_id="user-1")
        snapshot = (created.id, created.title, created.description, created.owner_id, created.created_at)
        fresh = PortfolioRepository(self.Session()).get(created.id)
        self.assertEqual(
            (fresh.id, fresh.title, fresh.description, fresh.owner_id, fresh.created_at),
            snapshot,
        )

    def test_get_missing(self) -> None:
        self.assertIsNone(self.repo.get(12345))

    def test_get_out_of_key_range(self) -> None:
        for item_id in (0, -1, 2**64):
            with self.subTest(item_id=item_id):
                self.assertIsNone(self.repo.get(item_id))
