"""
Middleware Module
CORS setup and unhandled-exception logging for the FastAPI app.
"""
