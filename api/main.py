"""
Person Works API - FastAPI application.

Hosts the person works widget over HTTP:
- Widget descriptor (modules, parameter schema, cache durations)
- All / actor / director / other works for a TMDb person
"""
from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routers import works
from person_works.utils.env import get_env, load_env

load_env()


def get_cors_origins() -> list[str]:
    """
    Get CORS allowed origins from environment.
    Set CORS_ALLOW_ORIGINS as comma-separated list of origins.
    Example: CORS_ALLOW_ORIGINS=https://example.com,https://app.example.com
    """
    origins_str = get_env("CORS_ALLOW_ORIGINS")
    if not origins_str:
        return []
    return [origin.strip() for origin in origins_str.split(",") if origin.strip()]


app = FastAPI(
    title="Person Works API",
    description="TMDb person filmography widget: cast and crew credits, filtered and sorted",
    version="1.0.4",
)

# CORS configuration
# If no origins configured, allows all origins but disables credentials
cors_origins = get_cors_origins()
allow_credentials = len(cors_origins) > 0

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins if cors_origins else ["*"],
    allow_credentials=allow_credentials,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(works.router, prefix="/api/v1")


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "person-works"}


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "healthy"}
