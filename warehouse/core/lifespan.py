# warehouse/core/lifespan.py
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from warehouse.db import mongo, redis as r
from warehouse.core.config import get_settings
from warehouse.domain.repositories.product_repo import ProductRepo

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # --- Startup ---
    await mongo.connect()
    try:
        await ProductRepo(mongo.get_db(), settings.products_collection).ensure_indexes()
        logger.info("Mongo indexes ensured on '%s'", settings.products_collection)
    except Exception as e:
        # lazy client: the unique index is retried on next startup
        logger.warning("Mongo index creation failed: %s", e)

    # Redis is optional
    await r.connect()

    yield

    # --- Shutdown ---
    try:
        await r.disconnect()
    except Exception as e:
        logger.warning("Redis disconnect failed: %s", e)

    try:
        await mongo.disconnect()
        logger.info("Mongo disconnected")
    except Exception as e:
        logger.warning("Mongo disconnect failed: %s", e)
