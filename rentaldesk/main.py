# rentaldesk/main.py
"""
FastAPI application entry point.
Includes CORS for the browser client, error handlers, and all routers.
Run with: uvicorn rentaldesk.main:app --port 5000
"""

import time
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rentaldesk.config import settings
from rentaldesk.dependencies import build_repository
from rentaldesk.errors import RentalDeskError
from rentaldesk.repository import RentalRepository
from rentaldesk.routers import bookings, customers, health, stats, vehicles
from rentaldesk.utils.logger import get_logger

logger = get_logger(__name__)


def create_app(repository: Optional[RentalRepository] = None) -> FastAPI:
    """
    Builds the API. Pass `repository` to inject a ready store (tests do);
    otherwise one is built from settings on startup.
    """
    app = FastAPI(
        title="RentalDesk API",
        description="Fleet, bookings, availability and dashboard figures for a rental desk.",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.repository = repository

    # ── CORS (browser client) ────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Request Timing Middleware ────────────────────────────────────────────
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.time()
        response = await call_next(request)
        duration = round((time.time() - start) * 1000, 2)
        logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
        return response

    # ── Exception Handlers ───────────────────────────────────────────────────
    @app.exception_handler(RentalDeskError)
    async def rental_error_handler(request: Request, exc: RentalDeskError):
        logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message, "details": exc.details},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    # ── Routers ──────────────────────────────────────────────────────────────
    app.include_router(vehicles.router,  prefix="/api", tags=["Vehicles"])
    app.include_router(bookings.router,  prefix="/api", tags=["Bookings"])
    app.include_router(stats.router,     prefix="/api", tags=["Dashboard"])
    app.include_router(customers.router, prefix="/api", tags=["Customers"])
    app.include_router(health.router,    prefix="/api", tags=["Health"])

    # ── Startup ──────────────────────────────────────────────────────────────
    @app.on_event("startup")
    async def startup():
        logger.info("RentalDesk backend starting up...")
        if app.state.repository is None:
            app.state.repository = build_repository()
        logger.info(f"Storage backend: {app.state.repository.store.name}")
        logger.info(f"Listening on http://{settings.BACKEND_HOST}:{settings.BACKEND_PORT}")
        logger.info("API docs at /docs")

    @app.on_event("shutdown")
    async def shutdown():
        logger.info("RentalDesk backend shutting down...")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("rentaldesk.main:app", host=settings.BACKEND_HOST, port=settings.BACKEND_PORT)
