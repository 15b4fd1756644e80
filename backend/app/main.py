"""FastAPI application - thin HTTP layer over the JSON trip store."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from backend.app.api.routes.activities import router as activities_router
from backend.app.api.routes.days import router as days_router
from backend.app.api.routes.health import router as health_router
from backend.app.api.routes.metrics import router as metrics_router
from backend.app.api.routes.places import router as places_router
from backend.app.api.routes.settings import router as settings_router
from backend.app.api.routes.transports import router as transports_router
from backend.app.api.routes.trips import router as trips_router
from backend.app.config import get_settings
from backend.app.db.json_store import StoreError
from backend.app.utils.logging import configure_logging

logger = logging.getLogger(__name__)

configure_logging(get_settings().log_level)

app = FastAPI(title="Trip Planner API", version="0.1.0")

# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(metrics_router, tags=["metrics"])
app.include_router(trips_router)
app.include_router(days_router)
app.include_router(activities_router)
app.include_router(transports_router)
app.include_router(settings_router)
app.include_router(places_router)


@app.exception_handler(StoreError)
@app.exception_handler(OSError)
async def store_failure_handler(request: Request, exc: Exception) -> JSONResponse:
    """Map storage failures to a generic 500; the store never retries."""
    logger.error(
        f"[{request.method} {request.url.path}] store failure: {type(exc).__name__}",
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"detail": "Store operation failed"})


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Trip Planner API", "version": "0.1.0"}
