"""
==========================
SQL dialect profiles.
==========================

Read queries wrap nullable columns in the driver's null-coalescing function.
Two profiles are recognized; any other driver value selects the primary one.

Profiles:
- MYSQL (primary, driver 'mysql'): ifnull(col, default)
- POSTGRESQL (alternate, driver 'pgsql'): coalesce(col, default)

Usage:
    from sql.dialects import get_dialect

    dialect = get_dialect('pgsql')
    dialect.coalesce('name', "''")   # "coalesce(name, '')"
"""

from dataclasses import dataclass
from typing import Dict, Optional

from core.config import config
from core.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Dialect:
    """Dialect profile.

    Attributes:
        name: Driver name the profile is registered under
        null_function: SQL function substituting a default for NULL
    """

    name: str
    null_function: str

    def coalesce(self, column: str, default: str) -> str:
        return f"{self.null_function}({column}, {default})"


MYSQL = Dialect(name='mysql', null_function='ifnull')
POSTGRESQL = Dialect(name='pgsql', null_function='coalesce')

DIALECTS: Dict[str, Dialect] = {
    MYSQL.name: MYSQL,
    POSTGRESQL.name: POSTGRESQL,
}


def get_dialect(driver: Optional[str] = None) -> Dialect:
    """
    Select the dialect profile for a driver name.

    Args:
        driver: Driver name; defaults to the configured GRPC_SQL_DRIVER

    Returns:
        Matching Dialect, or MYSQL when the driver is not recognized
    """
    if driver is None:
        driver = config.sql_driver

    dialect = DIALECTS.get(driver.strip().lower()) if driver else None
    if dialect is None:
        logger.debug(f"Unrecognized SQL driver {driver!r}, falling back to {MYSQL.name}")
        return MYSQL
    return dialect
