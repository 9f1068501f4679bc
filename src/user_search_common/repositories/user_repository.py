"""Repository for the users table."""

import logging

from sqlalchemy import Select

from user_search_common.models.page import PageRequest
from user_search_common.models.user import UserEntity
from user_search_common.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[UserEntity]):
    """CRUD over users plus execution of dynamically built queries."""

    model = UserEntity

    def find_all(self, query: Select[tuple[UserEntity]], page_request: PageRequest) -> list[UserEntity | None]:
        """Execute a built query restricted to a page window.

        Args:
            query: Select statement produced by a query builder
            page_request: Page window to apply

        Returns:
            Rows of the requested page, in query order
        """
        paged = query.offset(page_request.offset).limit(page_request.limit)
        logger.debug("Executing user query: offset=%d limit=%d", page_request.offset, page_request.limit)
        return list(self.session.scalars(paged))
