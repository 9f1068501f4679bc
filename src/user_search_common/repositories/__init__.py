"""Repositories package."""

from user_search_common.repositories.base import BaseRepository
from user_search_common.repositories.user_repository import UserRepository

__all__ = ["BaseRepository", "UserRepository"]
