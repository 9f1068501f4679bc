"""SQLAlchemy engine and session management."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from user_search_common.infra.database.base import Base

logger = logging.getLogger(__name__)


class DatabaseClient:
    """Infrastructure layer: owns the engine and hands out sessions."""

    def __init__(self, database_url: str, echo: bool = False) -> None:
        """Initialize the database client.

        Args:
            database_url: SQLAlchemy database URL
            echo: Log every SQL statement emitted by the engine
        """
        self.url = make_url(database_url)
        self.engine: Engine = self._create_engine(echo)
        self.session_factory = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)

    def _create_engine(self, echo: bool) -> Engine:
        if self.url.get_backend_name() != "sqlite":
            return create_engine(self.url, echo=echo, pool_pre_ping=True)

        connect_args = {"check_same_thread": False}
        if self.url.database in (None, "", ":memory:"):
            # In-memory databases live per connection, so every session must share one
            return create_engine(self.url, echo=echo, connect_args=connect_args, poolclass=StaticPool)
        return create_engine(self.url, echo=echo, connect_args=connect_args)

    def create_schema(self) -> None:
        """Create tables for all mapped models if they don't exist."""
        # Register models on the shared metadata
        import user_search_common.models  # noqa: F401

        try:
            Base.metadata.create_all(self.engine)
            logger.info("Database schema ready at %s", self.url.render_as_string(hide_password=True))
        except SQLAlchemyError as e:
            logger.error("Failed to create database schema: %s", e)
            raise

    def ping(self) -> bool:
        """Check that the database answers a trivial query."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.warning("Database ping failed: %s", e)
            return False

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a session, committing on success and rolling back on error."""
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        """Release pooled connections."""
        self.engine.dispose()
