"""ORM model for the users table."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from user_search_common.infra.database.base import Base


class UserEntity(Base):
    """User record persisted in the users table.

    The id is generated by the database on insert and is never assigned by
    application code.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(
        String(255).with_variant(String(255, collation="utf8mb4_bin"), "mysql"),
        nullable=True,
        index=True,
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<UserEntity(id={self.id}, name={self.name!r})>"
