"""Unversioned service endpoints: status, health check and dev-only config."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.container import get_database

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> JSONResponse:
    """503 when the community store does not answer."""
    if not await get_database().check_connection():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unhealthy", "database": "unreachable"},
        )
    return JSONResponse(content={"status": "healthy", "database": "ok"})


def _public_config() -> dict:
    # The database URL may embed credentials
    return {
        "environment": settings.environment.value,
        "debug": settings.debug,
        "api": {
            "name": settings.app_name,
            "version": settings.app_version,
            "base_url": settings.api_base_url,
            "v1_prefix": settings.api_v1_prefix,
        },
        "database": {
            "url": "<redacted>",
            "echo": settings.db_echo,
            "create_tables": settings.db_create_tables,
        },
        "listing": {
            "default_page_size": settings.default_page_size,
            "max_page_size": settings.max_page_size,
        },
        "cors": {
            "origins": settings.cors_origins,
            "allow_credentials": settings.cors_allow_credentials,
        },
    }


@system_router.get("/config")
async def get_config() -> JSONResponse:
    """Effective settings, served in development only (403 elsewhere)."""
    if settings.is_development:
        return JSONResponse(content=_public_config())
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content={"detail": "Config endpoint only available in development"},
    )
