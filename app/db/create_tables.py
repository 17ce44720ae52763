"""
Create the roadmap tables on the configured database.

Usage: python -m app.db.create_tables
"""
import logging

from app.db.base import Base
from app.db.models.roadmap import Roadmap  # noqa: F401  registers the table
from app.db.session import create_db_engine
from app.logging_config import configure_logging
from app.settings import load_settings

logger = logging.getLogger(__name__)


def create_tables(engine) -> None:
    Base.metadata.create_all(bind=engine)


if __name__ == "__main__":
    settings = load_settings()
    configure_logging(settings.log_level)
    engine = create_db_engine(settings.database_url)
    create_tables(engine)
    logger.info("Tables created: %s", ", ".join(sorted(Base.metadata.tables)))
