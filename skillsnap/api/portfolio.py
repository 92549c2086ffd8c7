"""Portfolio endpoints: public listing and lookup, authenticated creation."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from skillsnap.api.auth import get_current_claims
from skillsnap.core.database import get_db
from skillsnap.schemas.auth import TokenClaims
from skillsnap.schemas.portfolio import PortfolioItemCreate, PortfolioItemRead
from skillsnap.services.portfolio import PortfolioRepository, PortfolioValidationError

router = APIRouter()


@router.get("", response_model=list[PortfolioItemRead])
def list_portfolio_items(
    db: Annotated[Session, Depends(get_db)],
) -> list[PortfolioItemRead]:
    """Return all portfolio items, newest first."""
    items = PortfolioRepository(db).list()
    return [PortfolioItemRead.model_validate(item) for item in items]


@router.get("/{item_id}", response_model=PortfolioItemRead)
def get_portfolio_item(
    item_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> PortfolioItemRead:
    item = PortfolioRepository(db).get(item_id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return PortfolioItemRead.model_validate(item)


@router.post("", response_model=PortfolioItemRead, status_code=status.HTTP_201_CREATED)
def create_portfolio_item(
    body: PortfolioItemCreate,
    request: Request,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    claims: Annotated[TokenClaims, Depends(get_current_claims)],
) -> PortfolioItemRead:
    """
    Create a portfolio item owned by the caller.

    The owner is the token's subject; any owner field in the body is ignored.
    Responds 201 with a Location header pointing at the new item.
    """
    try:
        item = PortfolioRepository(db).create(
            title=body.title,
            description=body.description,
            owner_id=claims.sub,
        )
    except PortfolioValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=[{"loc": ["body", e.field], "msg": e.message, "type": "value_error"}],
        ) from e
    response.headers["Location"] = str(
        request.url_for("get_portfolio_item", item_id=item.id)
    )
    return PortfolioItemRead.model_validate(item)
