"""Service initialization and dependency injection."""

import logging
from collections.abc import Iterator

from fastapi import Depends
from sqlalchemy.orm import Session

from user_search.config import Settings, get_settings
from user_search_common.infra.database import DatabaseClient
from user_search_common.repositories import UserRepository
from user_search_common.services import UserSearchService

logger = logging.getLogger(__name__)

# Service instances cache
_services_cache: dict[str, object] = {}


def get_database_client(settings: Settings = Depends(get_settings)) -> DatabaseClient:
    """Get the process-wide database client.

    Args:
        settings: Application settings

    Returns:
        DatabaseClient instance
    """
    if "database_client" not in _services_cache:
        _services_cache["database_client"] = DatabaseClient(
            database_url=settings.database_url,
            echo=settings.database_echo,
        )
        logger.info("Initialized DatabaseClient")

    return _services_cache["database_client"]


def get_session(database: DatabaseClient = Depends(get_database_client)) -> Iterator[Session]:
    """Yield one session per request."""
    with database.session() as session:
        yield session


def get_user_repository(session: Session = Depends(get_session)) -> UserRepository:
    return UserRepository(session)


def get_user_search_service(repository: UserRepository = Depends(get_user_repository)) -> UserSearchService:
    return UserSearchService(user_repository=repository)


def reset_services() -> None:
    """Dispose cached services, releasing database connections."""
    database = _services_cache.pop("database_client", None)
    if isinstance(database, DatabaseClient):
        database.dispose()
    _services_cache.clear()
