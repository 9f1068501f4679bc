"""User search service."""

import logging

from user_search_common.models.page import PageRequest
from user_search_common.models.user import UserEntity
from user_search_common.queries.user_query import build_user_search_query
from user_search_common.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserSearchService:
    """Searches users by exact name, one page at a time."""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    def search_by_name(self, name: str | None, page_request: PageRequest) -> list[UserEntity]:
        """Search users by name.

        Args:
            name: Exact name to match; None applies no name filter
            page_request: Page window

        Returns:
            Matching users of the requested page, absent rows removed
        """
        query = build_user_search_query(name)
        results = self.user_repository.find_all(query, page_request)
        users = [user for user in results if user is not None]
        logger.debug(
            "User search name=%r page=%d size=%d returned %d rows",
            name,
            page_request.page,
            page_request.size,
            len(users),
        )
        return users
