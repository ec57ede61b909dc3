"""
Database initialization script.

Usage: python -m trip_planner.db.init_db
"""
import logging

from trip_planner.core.config import get_settings
from trip_planner.core.logging import setup_logging
from trip_planner.db.session import Store

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)
    logger.info("Initializing database...")
    store = Store(settings.DATABASE_URL, echo=settings.DB_ECHO)
    try:
        store.open(create_all=True)
    finally:
        store.close()
    logger.info("Database initialized successfully!")


if __name__ == "__main__":
    main()
