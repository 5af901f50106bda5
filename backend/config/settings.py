"""
Runtime Configuration

Reads the service configuration from environment variables once at import time.

Variables:
- COMPANY_DATA_DIR: directory holding the default SQLite database (default ~/.company-registry)
- COMPANY_DB_URL: SQLAlchemy database URL (default sqlite:///<data dir>/companies.db)
- COMPANY_LOG_LEVEL: root log level name (default INFO)
- COMPANY_LOG_FILE: optional path for a rotating log file
- COMPANY_SQL_ECHO: 'true'/'1'/'yes' turns on SQLAlchemy statement echo
"""
import os
import logging
from pathlib import Path
from typing import Optional

from exceptions import ConfigurationError

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def _env_flag(name: str, default: str = 'false') -> bool:
    """Interpret an environment variable as a boolean flag."""
    return os.environ.get(name, default).lower() in ('true', '1', 'yes')


def get_data_dir() -> Path:
    """Directory for local data files."""
    return Path(os.environ.get('COMPANY_DATA_DIR', str(Path.home() / ".company-registry")))


def get_database_url() -> str:
    """
    Resolve the database URL.

    Falls back to a SQLite file inside the data directory when COMPANY_DB_URL is unset.
    """
    url = os.environ.get('COMPANY_DB_URL')
    if url:
        return url
    return f"sqlite:///{get_data_dir() / 'companies.db'}"


def get_log_level() -> str:
    """
    Resolve the log level name.

    Raises:
        ConfigurationError: If COMPANY_LOG_LEVEL is not a standard level name
    """
    level = os.environ.get('COMPANY_LOG_LEVEL', 'INFO').upper()
    if level not in VALID_LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid COMPANY_LOG_LEVEL '{level}'",
            missing_keys=['COMPANY_LOG_LEVEL']
        )
    return level


def get_log_file() -> Optional[Path]:
    log_file = os.environ.get('COMPANY_LOG_FILE')
    return Path(log_file) if log_file else None


def is_sql_echo_enabled() -> bool:
    return _env_flag('COMPANY_SQL_ECHO')


DATABASE_URL = get_database_url()
SQL_ECHO = is_sql_echo_enabled()
