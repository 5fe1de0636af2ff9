"""
Main FastAPI Application
Entry point for the Joke API.

This module creates and configures the FastAPI application instance,
sets up middleware, and defines the health check endpoint.
"""

import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.middleware.cors import setup_cors
from app.middleware.error_handler import setup_error_handlers
from app.db.session import engine, SessionLocal
from app.db.seed import seed_database
from app.models import Base
from app.services.error_logging import configure_logging


logger = logging.getLogger(__name__)

VERSION = "1.0.0"


# Create FastAPI application instance
# Swagger UI is served at /docs, ReDoc at /redoc
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    description="""
    Joke API - share jokes, rate and comment them.

    Features:
    - Public listing of jokes with average rate and comments
    - Random joke
    - Authors manage their own jokes (JWT bearer authentication)
    - Rating other users' jokes and commenting
    """
)


# Setup CORS middleware
setup_cors(app)

# Setup error handling
# Unhandled exceptions are logged and answered with {"error": ...}
setup_error_handlers(app)


@app.on_event("startup")
async def startup_event():
    """
    Application startup handler.

    Tasks performed:
    - Configure logging
    - Create all database tables if they don't exist
    - Seed default users and categories (SEED_ON_STARTUP)
    """
    configure_logging()

    # Only creates tables that don't already exist (safe to run multiple times)
    Base.metadata.create_all(bind=engine)
    logger.info("✓ Database tables created/verified")

    if settings.SEED_ON_STARTUP:
        db = SessionLocal()
        try:
            seed_database(db)
        finally:
            db.close()
        logger.info("✓ Seed data verified")

    logger.info("✓ API documentation available at /docs")


@app.on_event("shutdown")
async def shutdown_event():
    """
    Application shutdown handler.
    Releases pooled database connections.
    """
    engine.dispose()
    logger.info("✓ Application shutdown complete")


@app.get(
    "/health",
    tags=["Health"],
    summary="Health Check",
    description="Simple endpoint to verify API is running"
)
async def health_check():
    """
    Health check endpoint.

    Example Response:
        {
            "status": "ok",
            "version": "1.0.0",
            "api": "Joke API"
        }
    """
    return JSONResponse(
        status_code=200,
        content={
            "status": "ok",
            "version": VERSION,
            "api": settings.PROJECT_NAME
        }
    )


@app.get(
    "/",
    tags=["Root"],
    summary="API Root",
    description="Root endpoint with API information"
)
async def root():
    """
    API root endpoint.

    Provides basic information about the API and links to documentation.
    """
    return {
        "message": "Welcome to the Joke API",
        "version": VERSION,
        "docs": "/docs",
        "redoc": "/redoc",
        "health": "/health"
    }


# Include API v1 router
# All v1 endpoints are prefixed with /api/v1
from app.api.v1.router import api_router

app.include_router(
    api_router,
    prefix=f"/api/{settings.API_VERSION}",
)
