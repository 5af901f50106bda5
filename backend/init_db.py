from database import engine as default_engine, Base
from sqlalchemy import inspect
from sqlalchemy.engine import Engine
import logging

# Registers the tables on Base.metadata
import models  # noqa: F401

logger = logging.getLogger(__name__)


def init_database(engine: Engine = None):
    """
    Create any missing tables.

    Existing tables are left untouched.
    """
    engine = engine or default_engine
    existing = set(inspect(engine).get_table_names())
    Base.metadata.create_all(bind=engine)
    created = sorted(set(Base.metadata.tables) - existing)
    if created:
        logger.info(f"Created tables: {', '.join(created)}")
    else:
        logger.info("Database schema up to date")
