"""
=====================================================
Configuration management for the statement builders.
=====================================================

Loads all configuration from environment variables (.env file) and provides
a centralized Config singleton for application-wide access.

The configuration system covers:
- SQL driver selection (drives the null-coalescing function used on read)
- Positional paramstyle used when resolving named placeholders
- Default log level

Example:
    >>> from core.config import config
    >>>
    >>> # Which driver profile is active
    >>> print(f"Driver: {config.sql_driver}, paramstyle: {config.sql_paramstyle}")
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

DEFAULT_SQL_DRIVER = 'mysql'
DEFAULT_PARAMSTYLE = 'qmark'
SUPPORTED_PARAMSTYLES = ('qmark', 'format')


@dataclass(frozen=True)
class SqlConfig:
    """SQL generation settings.

    Attributes:
        driver: Driver name selecting the dialect profile (e.g. 'mysql', 'pgsql')
        paramstyle: Positional marker style for resolved statements ('qmark' or 'format')
    """

    driver: str
    paramstyle: str


@dataclass(frozen=True)
class LoggingConfig:
    """Logging settings.

    Attributes:
        level: Default log level name (DEBUG/INFO/WARNING/ERROR/CRITICAL)
    """

    level: str


class Config:
    """Centralized configuration manager.

    Values are read once, when the instance is created, and are treated as
    read-only for the lifetime of the process.

    Attributes:
        sql: SqlConfig instance with driver and paramstyle settings
        logging: LoggingConfig instance with the default log level

    Example:
        >>> config = Config()
        >>> config.sql_driver
        'mysql'
    """

    def __init__(self):
        """Initialize configuration from environment variables."""
        paramstyle = os.getenv('SQL_PARAMSTYLE', DEFAULT_PARAMSTYLE).strip().lower()
        if paramstyle not in SUPPORTED_PARAMSTYLES:
            paramstyle = DEFAULT_PARAMSTYLE

        self.sql = SqlConfig(
            driver=os.getenv('GRPC_SQL_DRIVER', DEFAULT_SQL_DRIVER).strip().lower(),
            paramstyle=paramstyle
        )

        self.logging = LoggingConfig(
            level=os.getenv('LOG_LEVEL', 'INFO').strip().upper()
        )

    @property
    def sql_driver(self) -> str:
        """Get configured SQL driver name."""
        return self.sql.driver

    @property
    def sql_paramstyle(self) -> str:
        """Get configured positional paramstyle."""
        return self.sql.paramstyle

    @property
    def log_level(self) -> str:
        """Get default log level name."""
        return self.logging.level


# Global configuration instance
config = Config()
