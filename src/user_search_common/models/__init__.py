"""Common models package."""

from user_search_common.models.page import MAX_PAGE_VALUE, InvalidPageRequestError, PageRequest
from user_search_common.models.user import UserEntity

__all__ = [
    "InvalidPageRequestError",
    "MAX_PAGE_VALUE",
    "PageRequest",
    "UserEntity",
]
