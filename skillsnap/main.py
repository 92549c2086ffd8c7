"""FastAPI application entrypoint. No business logic; only wiring, startup and middleware."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from skillsnap.api import router as api_router
from skillsnap.core.config import settings
from skillsnap.core.database import SessionLocal, engine, init_db
from skillsnap.services.seed import seed_database

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def initialize_database() -> None:
    """Create the schema and seed sample data. Failures are logged, never raised."""
    try:
        init_db(engine, reset=settings.DB_RESET_ON_STARTUP)
    except Exception as e:
        logger.exception("Database initialization failed; app will continue: %s", e)
        return
    if not settings.SEED_ON_STARTUP:
        return
    db = SessionLocal()
    try:
        seed_database(db, settings)
    finally:
        db.close()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    if settings.uses_default_jwt_secret:
        logger.warning(
            "JWT_SECRET is the insecure development default; set JWT_SECRET before deploying."
        )
    initialize_database()
    yield


app = FastAPI(
    title="SkillSnap API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as 400 with field-level detail."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "SkillSnap API"}
