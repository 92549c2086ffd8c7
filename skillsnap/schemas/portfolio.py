"""Pydantic schemas for portfolio items."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from skillsnap.models.portfolio_item import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH


class PortfolioItemCreate(BaseModel):
    """
    Body for POST /portfolio.

    Unknown fields (owner_id, created_at, id, ...) are ignored; the owner always
    comes from the caller's token.
    """

    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str = Field(default="", max_length=DESCRIPTION_MAX_LENGTH)


class PortfolioItemRead(BaseModel):
    """Stored portfolio item."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    owner_id: str | None
    created_at: datetime
