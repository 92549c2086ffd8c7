"""ORM model for portfolio items."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text

from skillsnap.models.base import Base, UTCDateTime

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 2000
# Largest value a 64-bit signed INTEGER primary key can hold.
MAX_ITEM_ID = 2**63 - 1


class PortfolioItem(Base):
    """
    A portfolio entry created by an authenticated user.

    owner_id is taken from the creator's token subject; it is nullable and not
    checked on read.
    """

    __tablename__ = "portfolio_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(TITLE_MAX_LENGTH), nullable=False)
    description = Column(Text, nullable=False, default="")
    owner_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    created_at = Column(UTCDateTime(), nullable=False, index=True)
