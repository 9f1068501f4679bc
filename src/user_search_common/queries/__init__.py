"""Query builders."""

from user_search_common.queries.user_query import UserField, build_user_search_query, field_eq, where_and

__all__ = [
    "UserField",
    "build_user_search_query",
    "field_eq",
    "where_and",
]
