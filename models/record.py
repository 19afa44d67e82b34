"""
=====================================
Record annotation helpers.
=====================================

Records are plain dataclasses. Column metadata is attached to each field
through dataclasses.field(metadata=...); column() is the shorthand for it.

Metadata keys:
    column: Persisted column name. Fields without one are never written to SQL.
    nullable: Column may hold NULL; read queries wrap it in a null-coalescing call.
    primary_key: Identity column used by UPDATE and DELETE.
    foreign_key / foreign_table: Relationship metadata (informational).

Example:
    >>> from dataclasses import dataclass
    >>> from models.record import column
    >>>
    >>> @dataclass
    ... class User:
    ...     id: int = column('id', primary_key=True)
    ...     name: str = column('name', nullable=True)
    ...     is_active: int = column('is_active', default=1)
    ...     order_by: str = ''
"""

import dataclasses
from typing import Any, Callable, Optional

COLUMN = 'column'
NULLABLE = 'nullable'
PRIMARY_KEY = 'primary_key'
FOREIGN_KEY = 'foreign_key'
FOREIGN_TABLE = 'foreign_table'

_MISSING = dataclasses.MISSING


def column(
    name: str,
    *,
    nullable: bool = False,
    primary_key: bool = False,
    foreign_key: Optional[str] = None,
    foreign_table: Optional[str] = None,
    default: Any = _MISSING,
    default_factory: Callable[[], Any] = _MISSING
) -> Any:
    """
    Declare a persisted dataclass field.

    When neither default nor default_factory is given the field defaults to
    None, which the builders treat the same as the type's zero value.

    Args:
        name: Column name in the table
        nullable: Wrap the column in a null-coalescing call on read
        primary_key: Mark the field as the identity column
        foreign_key: Referenced column name
        foreign_table: Referenced table name
        default: Field default value
        default_factory: Zero-argument callable producing the default

    Returns:
        A dataclasses.Field carrying the column metadata
    """
    metadata = {
        COLUMN: name,
        NULLABLE: nullable,
        PRIMARY_KEY: primary_key,
        FOREIGN_KEY: foreign_key,
        FOREIGN_TABLE: foreign_table,
    }
    if default is _MISSING and default_factory is _MISSING:
        default = None
    return dataclasses.field(default=default, default_factory=default_factory, metadata=metadata)
