"""
=================================================
Named placeholder resolution.
=================================================

Turns SQL containing :column placeholders into SQL with positional markers
plus the ordered list of values taken from a record.

Parsing follows SQLAlchemy's text() rules: the statement is compiled against
a dialect-neutral DefaultDialect using a positional paramstyle, and the
compiled positiontup gives the placeholder names in occurrence order.
Repeated placeholders are bound once per occurrence.

Usage:
    from sql.placeholders import resolve_placeholders

    sql, bindings = resolve_placeholders(
        "UPDATE users SET is_active = :is_active WHERE id = :id", user
    )
    # sql      -> "UPDATE users SET is_active = ? WHERE id = ?"
    # bindings -> [user.is_active, user.id]
"""

from functools import lru_cache
from typing import Any, List, Optional, Tuple

from sqlalchemy import text
from sqlalchemy.engine.default import DefaultDialect

from core.config import SUPPORTED_PARAMSTYLES, config
from core.logger import get_logger
from sql.exceptions import BindingError
from sql.fields import column_values

logger = get_logger(__name__)


@lru_cache(maxsize=None)
def _positional_dialect(paramstyle: str) -> DefaultDialect:
    return DefaultDialect(paramstyle=paramstyle)


def resolve_placeholders(
    sql: str,
    record: Any,
    paramstyle: Optional[str] = None
) -> Tuple[str, List[Any]]:
    """
    Replace :name placeholders with positional markers and collect their values.

    Args:
        sql: Statement with :column placeholders
        record: Record dataclass instance supplying the values
        paramstyle: 'qmark' (?) or 'format' (%s); defaults to config.sql_paramstyle

    Returns:
        Tuple of (statement with positional markers, values in marker order)

    Raises:
        BindingError: A placeholder does not match any column on the record
        ValueError: Unsupported paramstyle
    """
    paramstyle = paramstyle or config.sql_paramstyle
    if paramstyle not in SUPPORTED_PARAMSTYLES:
        raise ValueError(
            f"Unsupported paramstyle {paramstyle!r}; expected one of {', '.join(SUPPORTED_PARAMSTYLES)}"
        )

    compiled = text(sql).compile(dialect=_positional_dialect(paramstyle))
    values = column_values(record)

    bindings = []
    for name in compiled.positiontup or ():
        if name not in values:
            error_msg = f"Could not find name {name!r} in {type(record).__name__}"
            logger.error(f"❌ {error_msg}")
            raise BindingError(error_msg)
        bindings.append(values[name])

    return str(compiled), bindings
