"""Infrastructure layer for external communication."""

from user_search_common.infra.database import Base, DatabaseClient

__all__ = [
    "Base",
    "DatabaseClient",
]
