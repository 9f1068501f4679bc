"""Health check routes."""

from fastapi import APIRouter, Depends

from user_search.config import Settings, get_settings
from user_search.models.health import HealthCheckResponse
from user_search.services import get_database_client
from user_search_common.infra.database import DatabaseClient

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthCheckResponse)
def health_check(
    settings: Settings = Depends(get_settings),
    database: DatabaseClient = Depends(get_database_client),
) -> HealthCheckResponse:
    """Health check endpoint.

    Returns:
        HealthCheckResponse with status, version and database reachability
    """
    return HealthCheckResponse(
        status="ok",
        version=settings.app_version,
        environment=settings.environment,
        database="ok" if database.ping() else "unavailable",
    )
