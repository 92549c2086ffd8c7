"""Portfolio repository: ordered listing, lookup and creation of portfolio items."""

import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from skillsnap.models import PortfolioItem
from skillsnap.models.portfolio_item import (
    DESCRIPTION_MAX_LENGTH,
    MAX_ITEM_ID,
    TITLE_MAX_LENGTH,
)

logger = logging.getLogger(__name__)


class PortfolioValidationError(Exception):
    """A portfolio item field violates its length constraint."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


def _validate(title: str, description: str) -> None:
    if title is None or not title.strip():
        raise PortfolioValidationError("title", "Title is required.")
    if len(title) > TITLE_MAX_LENGTH:
        raise PortfolioValidationError(
            "title", f"Title must be at most {TITLE_MAX_LENGTH} characters."
        )
    if len(description) > DESCRIPTION_MAX_LENGTH:
        raise PortfolioValidationError(
            "description",
            f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters.",
        )


class PortfolioRepository:
    """Storage for portfolio items. Every call queries the database."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def list(self) -> list[PortfolioItem]:
        """All items, newest first."""
        return (
            self.db.query(PortfolioItem)
            .order_by(PortfolioItem.created_at.desc(), PortfolioItem.id.desc())
            .all()
        )

    def get(self, item_id: int) -> PortfolioItem | None:
        """Return the item, or None when it does not exist or item_id cannot be a key."""
        if not 1 <= item_id <= MAX_ITEM_ID:
            return None
        return self.db.get(PortfolioItem, item_id)

    def count(self) -> int:
        return self.db.query(PortfolioItem).count()

    def create(
        self,
        title: str,
        description: str | None,
        owner_id: str | None,
        created_at: datetime | None = None,
    ) -> PortfolioItem:
        """Persist a new item; created_at defaults to now (UTC)."""
        description = description or ""
        _validate(title, description)
        item = PortfolioItem(
            title=title,
            description=description,
            owner_id=owner_id,
            created_at=created_at or datetime.now(timezone.utc),
        )
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        logger.info("Portfolio item created: id=%s owner_id=%s", item.id, owner_id)
        return item
