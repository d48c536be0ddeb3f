# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Roster Service
==============
Rotation roster and compliance tracking for offshore medics, escort medics
and occupational health staff: who is on board on a given day, how long
they have been there, upcoming departures, the monthly roster, the staff
directory and the training/certification matrix.

Port: 8010
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.controllers import (
    catalog_controller,
    dashboard_controller,
    roster_controller,
    staff_controller,
    system_controller,
    training_controller,
)
from app.core.config import settings
from app.core.dependencies import (
    get_roster_repo,
    get_roster_service,
    get_staff_service,
    get_training_service,
)
from app.core.logging import get_logger
from app.middleware import MetricsMiddleware, RequestIDMiddleware

logger = get_logger(__name__)


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    """Seed demo data on startup when enabled; log on shutdown."""
    if settings.SEED_DEFAULT_ROSTER and get_roster_repo().count() == 0:
        get_roster_service().seed_defaults()
        get_staff_service().seed_defaults()
        get_training_service().seed_defaults()
    logger.info("Roster service started: version=%s", settings.SERVICE_VERSION)
    yield
    logger.info("Roster service shutting down: %d roster rows", get_roster_repo().count())


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="Roster Service",
    description="Rotation roster, on-board tracking and training compliance.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Global exception handler ─────────────────────────────────────────────
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    req_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled exception", extra={"request_id": req_id})
    return JSONResponse(
        status_code=500,
        content={"error": "internal_server_error", "detail": str(exc), "request_id": req_id},
    )


app.include_router(system_controller.router)
app.include_router(roster_controller.router)
app.include_router(dashboard_controller.router)
app.include_router(staff_controller.router)
app.include_router(training_controller.router)
app.include_router(catalog_controller.router)


# ── Entrypoint ────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level="info")
