"""Core app configuration, database and security."""

from skillsnap.core.config import get_settings, settings
from skillsnap.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
