"""Predicate builder for user search queries."""

from enum import Enum
from typing import Any

from sqlalchemy import ColumnElement, Select, and_, select
from sqlalchemy.orm import InstrumentedAttribute

from user_search_common.models.user import UserEntity


class UserField(Enum):
    """Queryable columns of the users table."""

    ID = "id"
    NAME = "name"

    @property
    def column(self) -> InstrumentedAttribute[Any]:
        return _USER_COLUMNS[self]


_USER_COLUMNS: dict[UserField, InstrumentedAttribute[Any]] = {
    UserField.ID: UserEntity.id,
    UserField.NAME: UserEntity.name,
}


def field_eq(field: UserField, value: Any) -> ColumnElement[bool] | None:
    """Build an equality predicate, or None when there is nothing to compare against.

    Args:
        field: Column to compare
        value: Expected value; None means "no restriction"

    Returns:
        Equality predicate, or None
    """
    if value is None:
        return None
    return field.column == value


def where_and(*predicates: ColumnElement[bool] | None) -> ColumnElement[bool] | None:
    """AND together the given predicates, skipping None entries."""
    present = [p for p in predicates if p is not None]
    if not present:
        return None
    if len(present) == 1:
        return present[0]
    return and_(*present)


def build_user_search_query(name: str | None = None) -> Select[tuple[UserEntity]]:
    """Select users, optionally restricted to an exact name, in id order.

    Args:
        name: Exact, case-sensitive name to match; None selects every user

    Returns:
        Composed select statement without any page window applied
    """
    query = select(UserEntity)
    predicate = where_and(field_eq(UserField.NAME, name))
    if predicate is not None:
        query = query.where(predicate)
    return query.order_by(UserField.ID.column.asc())
