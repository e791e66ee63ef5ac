from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from warehouse.core.config import get_settings
from warehouse.core.lifespan import lifespan
from warehouse.api.v1.routers.health import router as health_router
from warehouse.api.v1.routers.products import router as products_router
from warehouse.api.v1.routers.reorder import router as reorder_router
from warehouse.api.v1.routers.simulation import router as simulation_router
from warehouse.api.v1.routers.seed import router as seed_router
from warehouse.core.logging import configure_logging
from warehouse.domain.errors import WarehouseError

from fastapi.middleware.cors import CORSMiddleware
import logging

settings = get_settings()
configure_logging(level=logging.DEBUG if settings.DEBUG else logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# ------- CORS -------
# ALLOWED_ORIGINS is a CSV, e.g. "http://localhost:3000,https://dashboard.example.com"
# Unset means any origin (the dashboard is served from a different port in dev).
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins or ["*"],
    allow_credentials=False,                        # "*" is not allowed with credentials
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    max_age=86400,
)

# ------- Errors -------
@app.exception_handler(WarehouseError)
async def warehouse_error_handler(request: Request, exc: WarehouseError):
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, type(exc).__name__, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # rejected values (NaN, Infinity) are not JSON; report location and reason only
    errors = [{k: v for k, v in e.items() if k not in ("input", "ctx")} for e in exc.errors()]
    logger.warning("%s %s -> invalid input: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid input", "errors": jsonable_encoder(errors)},
    )

# ------- Routes -------
app.include_router(health_router, prefix=settings.api_prefix)
app.include_router(products_router, prefix=settings.api_prefix)      # product CRUD
app.include_router(reorder_router, prefix=settings.api_prefix)       # reorder analysis + summaries
app.include_router(simulation_router, prefix=settings.api_prefix)    # demand spike
app.include_router(seed_router, prefix=settings.api_prefix)          # sample data
