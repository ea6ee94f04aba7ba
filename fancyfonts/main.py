import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fancyfonts.api import (
    decorators_router,
    fonts_router,
    health_router,
    preferences_router,
)
from fancyfonts.config import settings
from fancyfonts.db.database import init_db
from fancyfonts.models.failure import ApiResponse, KnownError
from fancyfonts.services.font_data import get_catalog

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    await init_db()
    try:
        get_catalog()
    except FileNotFoundError as e:
        # Font routes answer 503 until the data tables exist
        logger.error("Font catalog unavailable: %s", e)
    yield


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("fancyfonts"),
    lifespan=lifespan,
)

app.include_router(decorators_router)
app.include_router(fonts_router)
app.include_router(health_router)
app.include_router(preferences_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(KnownError)
async def known_error_handler(_request: Request, exc: KnownError) -> JSONResponse:
    """Return known failures in the failure envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump(mode="json"),
    )


@app.exception_handler(Exception)
async def unknown_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Never let an unclassified error reach the client raw."""
    logger.exception("Unhandled error: %s", exc)
    return JSONResponse(
        status_code=500,
        content=ApiResponse.unknown_failure(detail=type(exc).__name__).model_dump(mode="json"),
    )
