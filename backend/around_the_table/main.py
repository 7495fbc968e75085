"""
Around the Table - FastAPI Application

Main entry point for the web API.
"""

import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api.routes import standings_router, picks_router, players_router, results_router, backup_router
from .db import create_tables


logger = logging.getLogger("around_the_table")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    try:
        await create_tables()
    except Exception as e:
        logger.error(f"Failed to create tables on startup: {e}")
        # App still starts; DB may become available later
    yield
    # Shutdown


# Create FastAPI app
app = FastAPI(
    title="Around the Table",
    description="Standings, payouts and pick tracking for a five-player NFL underdog league.",
    version=__version__,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json"
)

# CORS configuration
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(standings_router, prefix="/api")
app.include_router(picks_router, prefix="/api")
app.include_router(players_router, prefix="/api")
app.include_router(results_router, prefix="/api")
app.include_router(backup_router, prefix="/api")


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Around the Table API",
        "version": __version__,
        "docs": "/api/docs",
        "health": "/api/health"
    }
