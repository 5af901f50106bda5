from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker, declarative_base
from pathlib import Path

from config.settings import DATABASE_URL, SQL_ECHO


def _set_sqlite_pragma(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA busy_timeout=5000")  # Wait up to 5s for locks instead of failing immediately
    cursor.execute("PRAGMA foreign_keys=ON")  # Required for ON DELETE CASCADE
    cursor.close()


def _set_sqlite_wal(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA synchronous=NORMAL")
    cursor.close()


def _is_sqlite_file(database: str | None) -> bool:
    return bool(database) and database != ":memory:"


def create_db_engine(url: str, echo: bool = False, **engine_kwargs) -> Engine:
    """
    Create an engine for the given URL.

    SQLite connections get foreign key enforcement. File databases also
    get WAL journaling and have their parent directory created first.
    """
    parsed = make_url(url)
    is_sqlite = parsed.get_backend_name() == 'sqlite'

    if is_sqlite:
        engine_kwargs.setdefault('connect_args', {'check_same_thread': False})
        if _is_sqlite_file(parsed.database):
            Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)
    else:
        engine_kwargs.setdefault('pool_pre_ping', True)  # Verify connections are alive before using
        engine_kwargs.setdefault('pool_recycle', 3600)

    engine = create_engine(url, echo=echo, **engine_kwargs)

    if is_sqlite:
        event.listen(engine, "connect", _set_sqlite_pragma)
        if _is_sqlite_file(parsed.database):
            event.listen(engine, "connect", _set_sqlite_wal)

    return engine


engine = create_db_engine(DATABASE_URL, echo=SQL_ECHO)

SessionLocal = sessionmaker(bind=engine)
Base = declarative_base()

def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
