"""Schema for GET /health."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness plus a storage round-trip: database reachability and item count."""

    status: Literal["ok"] = "ok"
    version: str = Field(description="Package version of the running service")
    environment: Literal["dev", "prod"]
    database: Literal["connected", "disconnected"]
    portfolio_items: int | None = Field(
        default=None,
        description="Stored portfolio items; null when the database is unreachable",
    )
