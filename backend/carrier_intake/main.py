"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from carrier_intake.api.v1.router import api_router
from carrier_intake.config import settings
from carrier_intake.db.session import dispose_engine

# Configure root logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup configuration and release database connections on shutdown."""
    logger.info(
        f"Starting Carrier Intake API ({settings.ENVIRONMENT}, "
        f"status model: {settings.STATUS_MODEL})"
    )
    yield
    await dispose_engine()


# Create FastAPI application
app = FastAPI(
    title="Carrier Intake API",
    description="API for collecting life insurance intakes and evaluating carrier eligibility",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API router with v1 prefix
app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root() -> dict:
    """Root endpoint."""
    return {
        "message": "Carrier Intake API",
        "version": "1.0.0",
        "docs": "/api/docs",
    }
