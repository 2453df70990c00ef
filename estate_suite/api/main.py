"""
Estate Suite FastAPI app
"""

import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from estate_suite import __version__
from estate_suite.config import settings
from .routes import router

logger.remove()
logger.add(sys.stderr, level=settings.LOG_LEVEL)

app = FastAPI(
    title=settings.API_TITLE,
    description="Property matching, pricing and lead scoring for Dubai real estate",
    version=settings.API_VERSION,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api/v1")


@app.get("/")
async def root():
    """Health check"""
    return {
        "name": settings.API_TITLE,
        "status": "running",
        "version": __version__,
    }


@app.get("/health")
async def health():
    """Detailed health check"""
    return {
        "status": "healthy",
        "env": settings.ENV,
        "seeded": settings.RANDOM_SEED is not None,
    }
