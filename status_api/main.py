from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from status_api.api.v1.router import v1_router
from status_api.config import settings
from status_api.core.exceptions import StatusError, status_error_handler
from status_api.core.middleware import RequestLoggingMiddleware
from status_api.services.directory import SERVICE_DIRECTORY
from status_api.services.wormly import create_wormly_client

_NAME_TO_LEVEL = {
    "debug": 10,
    "info": 20,
    "warning": 30,
    "warn": 30,
    "error": 40,
    "critical": 50,
}

structlog.configure(
    processors=[
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        _NAME_TO_LEVEL.get(settings.log_level.lower(), 20)
    ),
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    client = create_wormly_client(settings)
    app.state.wormly_client = client

    logger.info(
        "status_api_starting",
        port=settings.port,
        environment=settings.environment,
        endpoints=["/api/status", "/api/wormly-raw", "/health", "/dashboard"],
    )
    if client.key_configured:
        logger.info("wormly_api_key_configured", mapped_services=len(SERVICE_DIRECTORY))
    else:
        logger.warning("wormly_api_key_missing", hint="Set WORMLY_API_KEY in the environment or .env file")
    yield

    await client.close()
    logger.info("status_api_stopping")


app = FastAPI(
    title="Wormly Status API",
    description="Service status proxy for Wormly uptime monitoring",
    version="0.1.0",
    lifespan=lifespan,
    docs_url=None if settings.is_production else "/docs",
    redoc_url=None if settings.is_production else "/redoc",
)

app.add_exception_handler(StatusError, status_error_handler)

# Starlette: last-added = outermost
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins.split(","),
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(v1_router)
