"""
SeatKit - FastAPI Backend Application
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import structlog

from seatkit import __version__
from seatkit.api import reservations
from seatkit.config import settings
from seatkit.core.errors import register_exception_handlers
from seatkit.database import close_database
from seatkit.logging_config import configure_logging

configure_logging(settings)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info("Starting SeatKit API", version=__version__, environment=settings.environment)
    try:
        yield
    finally:
        logger.info("Shutting down SeatKit API")
        await close_database()


# Create FastAPI application
app = FastAPI(
    title="SeatKit",
    description="Restaurant reservation management API",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/health")
async def health():
    """Basic health check"""
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.environment,
    }


# Include API routers
app.include_router(reservations.router, prefix="/api/reservations", tags=["Reservations"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "seatkit.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_debug,
    )
