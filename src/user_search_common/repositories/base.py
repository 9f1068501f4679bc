"""Generic base class for relational repositories."""

from collections.abc import Iterable
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import func, inspect, select
from sqlalchemy.orm import Session

from user_search_common.infra.database.base import Base
from user_search_common.models.page import PageRequest

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """Infrastructure layer: CRUD and pagination over one mapped model."""

    model: ClassVar[type[Base]]

    def __init__(self, session: Session) -> None:
        """Initialize the repository.

        Args:
            session: Active SQLAlchemy session, owned by the caller
        """
        self.session = session

    @property
    def _primary_key(self) -> Any:
        return inspect(self.model).primary_key[0]

    def save(self, entity: T) -> T:
        """Persist an entity and populate its generated identifier."""
        self.session.add(entity)
        self.session.flush()
        return entity

    def save_all(self, entities: Iterable[T]) -> list[T]:
        """Persist several entities in one flush."""
        items = list(entities)
        self.session.add_all(items)
        self.session.flush()
        return items

    def find_by_id(self, entity_id: Any) -> T | None:
        return self.session.get(self.model, entity_id)

    def exists_by_id(self, entity_id: Any) -> bool:
        return self.find_by_id(entity_id) is not None

    def count(self) -> int:
        return self.session.scalar(select(func.count()).select_from(self.model)) or 0

    def find_page(self, page_request: PageRequest) -> list[T]:
        """Return one page of entities in primary key order."""
        query = (
            select(self.model)
            .order_by(self._primary_key.asc())
            .offset(page_request.offset)
            .limit(page_request.limit)
        )
        return list(self.session.scalars(query))

    def delete(self, entity: T) -> None:
        self.session.delete(entity)
        self.session.flush()
