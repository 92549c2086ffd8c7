"""SQLAlchemy ORM models."""

from skillsnap.models.base import Base
from skillsnap.models.portfolio_item import PortfolioItem
from skillsnap.models.user import Role, User, user_roles

__all__ = ["Base", "PortfolioItem", "Role", "User", "user_roles"]
