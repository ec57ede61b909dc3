"""
Database session management.
"""
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from trip_planner.core.errors import StoreError
from trip_planner.db.base import Base

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ships with FK enforcement off; turn it on per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Store:
    """Handle on the relational store.

    Constructed explicitly, opened at process start and closed at shutdown.
    Operations receive it as an argument and run their statements inside
    ``transaction()``.
    """

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.echo = echo
        self._engine: Optional[Engine] = None
        self._sessionmaker: Optional[sessionmaker] = None

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise StoreError("Store is not open")
        return self._engine

    def open(self, create_all: bool = True) -> "Store":
        """Create the engine and, if requested, any missing tables."""
        if self._engine is not None:
            return self

        kwargs = {"echo": self.echo, "pool_pre_ping": True}
        if self.is_sqlite:
            kwargs["connect_args"] = {"check_same_thread": False}
            if ":memory:" in self.database_url or self.database_url.rstrip("/") == "sqlite:":
                # In-memory databases live and die with a single connection
                kwargs["poolclass"] = StaticPool
        else:
            kwargs["pool_recycle"] = 3600

        self._engine = create_engine(self.database_url, **kwargs)
        if self.is_sqlite:
            event.listen(self._engine, "connect", _enable_sqlite_foreign_keys)
        self._sessionmaker = sessionmaker(
            bind=self._engine, autoflush=False, expire_on_commit=False
        )

        if create_all:
            self.create_all()
        logger.info(f"Store opened ({self._engine.url.render_as_string(hide_password=True)})")
        return self

    def create_all(self) -> None:
        """Initialize database tables."""
        # Import models so they register on Base.metadata
        import trip_planner.models  # noqa: F401

        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to create schema: {e}") from e

    def close(self) -> None:
        """Dispose of the engine and its pooled connections."""
        if self._engine is not None:
            self._engine.dispose()
            logger.info("Store closed")
        self._engine = None
        self._sessionmaker = None

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """Yield a session whose work is committed on success and rolled back otherwise."""
        if self._sessionmaker is None:
            raise StoreError("Store is not open")

        db = self._sessionmaker()
        try:
            yield db
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise StoreError(f"Database error: {e}") from e
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def __enter__(self) -> "Store":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
