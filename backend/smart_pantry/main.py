"""
Main FastAPI Application
Entry point for the Smart Pantry API.

This module creates and configures the FastAPI application instance,
sets up middleware, and defines the health check endpoint.
"""

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from smart_pantry import __version__
from smart_pantry.core.config import settings
from smart_pantry.db.session import engine, SessionLocal
from smart_pantry.middleware.cors import setup_cors
from smart_pantry.middleware.error_handler import setup_error_handling
from smart_pantry.models import Base
from smart_pantry.services.error_logging import configure_error_logging
from smart_pantry.api.v1.router import api_router


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    description="""
    Smart Pantry API - barcode-driven pantry management.

    Features:
    - Barcode resolution: local product cache, then Open Food Facts
    - Category mapping and shelf-life estimation for new products
    - Per-user expiry dates and pantry stock
    - Smart scale weight readings (registered devices and simulator)
    - Expiring-items digest with per-user reminder preferences
    """
)


# Must be called before adding routes
setup_cors(app)

# Catches all unhandled exceptions and logs them
setup_error_handling(app)


@app.on_event("startup")
async def startup_event():
    """
    Application startup handler.

    - Create all database tables if they don't exist
    - Configure error logging system (file handlers + error_logs table)

    Note: In production, use Alembic migrations instead of
    Base.metadata.create_all() for better schema management.
    """
    Base.metadata.create_all(bind=engine)
    print("✓ Database tables created/verified")

    configure_error_logging(SessionLocal)
    print("✓ Error logging system configured")

    print("✓ API documentation available at http://localhost:8000/docs")


@app.on_event("shutdown")
async def shutdown_event():
    print("✓ Application shutdown complete")


@app.get(
    "/health",
    tags=["Health"],
    summary="Health Check",
    description="Simple endpoint to verify API is running"
)
async def health_check():
    """
    Health check endpoint.

    Used by monitoring tools and container orchestrators to verify
    the application is running correctly.

    Example Response:
        {
            "status": "ok",
            "version": "1.0.0",
            "api": "Smart Pantry API"
        }
    """
    return JSONResponse(
        status_code=200,
        content={
            "status": "ok",
            "version": __version__,
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
    return {
        "message": "Welcome to Smart Pantry API",
        "version": __version__,
        "docs": "/docs",
        "redoc": "/redoc",
        "health": "/health"
    }


# All v1 endpoints are prefixed with /api/v1
app.include_router(
    api_router,
    prefix=f"/api/{settings.API_VERSION}",
)
