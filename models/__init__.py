"""
========================================
Record declaration helpers
========================================

Records handed to the sql builders are dataclasses whose fields carry
column metadata. This package holds the helpers used to declare them.

Modules:
    record: column() field helper and the metadata key names

Example:
    >>> from dataclasses import dataclass
    >>> from models import column
    >>>
    >>> @dataclass
    ... class Property:
    ...     id: int = column('id', primary_key=True)
    ...     address: str = column('address', nullable=True)
"""

__version__ = "0.1.0"
__all__ = [
    'column',
    'COLUMN',
    'NULLABLE',
    'PRIMARY_KEY',
    'FOREIGN_KEY',
    'FOREIGN_TABLE',
]

from .record import (
    COLUMN,
    FOREIGN_KEY,
    FOREIGN_TABLE,
    NULLABLE,
    PRIMARY_KEY,
    column,
)
