"""
CORS Middleware Configuration
Enables Cross-Origin Resource Sharing for the pantry frontend.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from smart_pantry.core.config import settings


def setup_cors(app: FastAPI) -> None:
    """
    Configure CORS middleware for the FastAPI application.

    Allowed origins come from settings.CORS_ORIGINS; in production restrict
    them to the deployed frontend domain.
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,  # Allow cookies and auth headers
        allow_methods=["*"],
        allow_headers=["*"],
    )
