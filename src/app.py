"""Main FastAPI application module.

This module initializes the FastAPI application and registers all route
handlers and error handlers.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.logging_config import setup_logging
from core.database import init_db
from core.status_mapper import register_exception_handlers
from config import (
    CORS_ALLOWED_ORIGINS,
    API_HOST,
    API_PORT,
    API_PREFIX,
)
from api.routes import replies, threads, users

# Setup logging
setup_logging()

# Initialize FastAPI application
app = FastAPI(
    title="Forum API",
    description="Backend API for a discussion forum with users, threads and replies.",
    version="1.0.0",
)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Map orchestration errors to status codes
register_exception_handlers(app)

# Register route handlers
app.include_router(users.router)
app.include_router(threads.router)
app.include_router(replies.router)


@app.on_event("startup")
def startup_tasks() -> None:
    """Create missing tables before the first request."""
    init_db()


@app.get("/", summary="API root", tags=["Info"])
def root() -> dict:
    """Return API information and documentation links.

    Returns:
        Dictionary with API information and documentation links.
    """
    return {
        "name": "Forum API",
        "version": "1.0.0",
        "description": "Backend API for a discussion forum with users, threads and replies.",
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc",
        },
        "health": f"{API_PREFIX}/health",
    }


@app.get(f"{API_PREFIX}/health", summary="Health check", tags=["Health"])
def health() -> dict:
    """Health check endpoint.

    Returns:
        Dictionary with status "ok".
    """
    return {"status": "ok"}


# --- Startup code for direct execution ---
if __name__ == "__main__":
    import uvicorn

    print(f"Starting Forum API on http://{API_HOST}:{API_PORT}")
    print(f"API docs: http://{API_HOST}:{API_PORT}/docs")
    uvicorn.run("app:app", host=API_HOST, port=API_PORT, reload=True)
