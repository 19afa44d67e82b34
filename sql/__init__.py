"""
====================================================
Record-driven SQL statement generation.
====================================================

This package compiles single-table CRUD statements from record dataclasses.
Every builder returns the final SQL text with positional markers plus the
ordered list of bound values; nothing is executed.

The package follows a clear organization:
    - fields.py: Record introspection (value kinds, field and record descriptors)
    - dialects.py: Dialect profiles selecting the null-coalescing function
    - placeholders.py: Named :column placeholder resolution to positional markers
    - crud.py: build_create, build_read, build_update, build_delete
    - exceptions.py: QueryBuildError hierarchy

Example:
    >>> from dataclasses import dataclass
    >>> from models import column
    >>> from sql import build_delete
    >>>
    >>> @dataclass
    ... class Task:
    ...     id: int = column('id', primary_key=True)
    ...     is_active: int = column('is_active')
    >>>
    >>> build_delete('task', Task(id=7, is_active=0))
    ('UPDATE task SET is_active = ? WHERE id = ?', [0, 7])
"""

__version__ = "1.0.0"
__all__ = [
    # Builders
    'build_create', 'build_read', 'build_update', 'build_delete',
    'ACTIVE_FLAG_FIELD',
    # Introspection
    'describe_record', 'iter_field_values', 'column_values',
    'FieldDescriptor', 'RecordDescriptor', 'ValueKind',
    # Dialects and placeholders
    'Dialect', 'get_dialect', 'MYSQL', 'POSTGRESQL', 'resolve_placeholders',
    # Exceptions
    'QueryBuildError', 'BindingError', 'RecordDefinitionError',
    'UnsupportedNullableTypeError', 'MissingPrimaryKeyError', 'EmptyUpdateError',
]

from .crud import (
    ACTIVE_FLAG_FIELD,
    build_create,
    build_delete,
    build_read,
    build_update,
)
from .dialects import MYSQL, POSTGRESQL, Dialect, get_dialect
from .exceptions import (
    BindingError,
    EmptyUpdateError,
    MissingPrimaryKeyError,
    QueryBuildError,
    RecordDefinitionError,
    UnsupportedNullableTypeError,
)
from .fields import (
    FieldDescriptor,
    RecordDescriptor,
    ValueKind,
    column_values,
    describe_record,
    iter_field_values,
)
from .placeholders import resolve_placeholders
