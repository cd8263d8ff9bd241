"""
Main FastAPI application for the MRZ verification service
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mrz_verifier.api.endpoints import router
from mrz_verifier.config import settings
from mrz_verifier.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    setup_logging(service_name="mrz-verifier")
    logger.info("Starting MRZ verification service")
    logger.info("Environment: %s", settings.ENVIRONMENT)
    logger.info("API Key auth: %s", settings.USE_API_KEY)
    logger.info(
        "Strict length: %s, expiry time zone: %s",
        settings.MRZ_STRICT_LENGTH,
        settings.MRZ_TIMEZONE,
    )

    yield

    logger.info("Shutting down MRZ verification service")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description=settings.PROJECT_DESCRIPTION,
    version=settings.VERSION,
    openapi_url="/openapi.json",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "docs": "/docs",
        "health": "/api/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "mrz_verifier.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="info",
    )
