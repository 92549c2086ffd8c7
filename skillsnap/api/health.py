"""Health endpoint: reports version, environment and whether the portfolio store answers."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from skillsnap import __version__
from skillsnap.core.config import get_settings
from skillsnap.core.database import get_db
from skillsnap.schemas.health import HealthResponse
from skillsnap.services.portfolio import PortfolioRepository

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    """Always 200; a failed count reports the database as disconnected."""
    try:
        item_count: int | None = PortfolioRepository(db).count()
    except SQLAlchemyError as e:
        logger.warning("Health check could not reach the database: %s", e)
        item_count = None
    return HealthResponse(
        version=__version__,
        environment=get_settings().APP_ENV,
        database="disconnected" if item_count is None else "connected",
        portfolio_items=item_count,
    )
