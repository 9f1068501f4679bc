"""Common services package."""

from user_search_common.services.user_service import UserSearchService

__all__ = ["UserSearchService"]
