"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (logging, API token
salt resolution, DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.api.v1.dependencies import get_secret_codec
from app.shared.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: logging, then API token salt resolution (fails startup with
    ConfigurationException when no salt is available). Shutdown: SQL engine
    dispose.
    """
    # ---- Startup ----
    setup_logging()
    get_secret_codec().ensure_salt_configured()
    logger.info("API token salt configured")

    yield

    # ---- Shutdown ----
    from app.infrastructure.persistence import database

    if getattr(database, "engine", None) is not None:
        await database.engine.dispose()
        logger.info("Database engine disposed")
