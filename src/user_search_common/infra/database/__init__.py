"""Relational database infrastructure."""

from user_search_common.infra.database.base import Base
from user_search_common.infra.database.client import DatabaseClient

__all__ = ["Base", "DatabaseClient"]
