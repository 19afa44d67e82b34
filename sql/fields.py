"""
======================================
Record field introspection.
======================================

Turns a record dataclass into a descriptor table the statement builders
walk: one FieldDescriptor per dataclass field, in declaration order.

Descriptors depend only on the record type and are cached per type.
Field values are never cached; they are read from the instance on every call.

Functions:
- describe_record: Build (or fetch) the RecordDescriptor for a record or record type
- iter_field_values: Yield (FieldDescriptor, current value) pairs for an instance
- column_values: Map column name to current value for an instance

Usage:
    from sql.fields import describe_record, iter_field_values

    descriptor = describe_record(user)
    for field, value in iter_field_values(user):
        if field.persisted and not field.kind.is_zero(value):
            ...
"""

import dataclasses
import types
import typing
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Dict, Iterator, Optional, Tuple, Union

from core.logger import get_logger
from models.record import COLUMN, FOREIGN_KEY, FOREIGN_TABLE, NULLABLE, PRIMARY_KEY
from sql.exceptions import RecordDefinitionError, UnsupportedNullableTypeError

logger = get_logger(__name__)

_UNION_TYPES = tuple(t for t in (Union, getattr(types, 'UnionType', None)) if t is not None)


class ValueKind(Enum):
    """Closed set of value kinds that drive zero testing and null defaults."""

    INTEGER = 'integer'
    FLOAT = 'float'
    STRING = 'string'
    OTHER = 'other'

    def is_zero(self, value: Any) -> bool:
        """
        Check whether value is the zero value of this kind.

        None counts as zero for every kind. Values of OTHER kind are never
        zero otherwise, so they are always included in generated SQL.
        """
        if value is None:
            return True
        if self is ValueKind.INTEGER:
            return value == 0
        if self is ValueKind.FLOAT:
            return value == 0.0
        if self is ValueKind.STRING:
            return value == ''
        return False

    def null_default(self) -> str:
        """
        SQL literal substituted for NULL by the null-coalescing call.

        Raises:
            UnsupportedNullableTypeError: OTHER kind has no default literal
        """
        if self is ValueKind.INTEGER:
            return '0'
        if self is ValueKind.FLOAT:
            return '0.0'
        if self is ValueKind.STRING:
            return "''"
        raise UnsupportedNullableTypeError("No default literal for values of kind 'other'")


def kind_of(annotation: Any) -> ValueKind:
    """Map a resolved type hint to its ValueKind; Optional[X] maps like X."""
    if typing.get_origin(annotation) in _UNION_TYPES:
        members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        return kind_of(members[0]) if len(members) == 1 else ValueKind.OTHER

    if not isinstance(annotation, type):
        return ValueKind.OTHER
    # bool is an int subclass and shares the integer literal
    if issubclass(annotation, int):
        return ValueKind.INTEGER
    if issubclass(annotation, float):
        return ValueKind.FLOAT
    if issubclass(annotation, str):
        return ValueKind.STRING
    return ValueKind.OTHER


@dataclass(frozen=True)
class FieldDescriptor:
    """Column metadata for a single record field.

    Attributes:
        name: Attribute name on the record (the key used by field masks)
        column: Persisted column name, empty when the field is not persisted
        kind: ValueKind derived from the field's type hint
        nullable: Column is wrapped in a null-coalescing call on read
        primary_key: Field is the identity column
        foreign_key: Referenced column, if any
        foreign_table: Referenced table, if any
    """

    name: str
    column: str
    kind: ValueKind
    nullable: bool = False
    primary_key: bool = False
    foreign_key: Optional[str] = None
    foreign_table: Optional[str] = None

    @property
    def persisted(self) -> bool:
        return bool(self.column)

    def value_of(self, record: Any) -> Any:
        return getattr(record, self.name)


@dataclass(frozen=True)
class RecordDescriptor:
    """Ordered field descriptors of a record type."""

    record_type: type
    fields: Tuple[FieldDescriptor, ...]
    primary_key: Optional[FieldDescriptor] = None

    def field_named(self, name: str) -> Optional[FieldDescriptor]:
        for field in self.fields:
            if field.name == name:
                return field
        return None


def describe_record(record: Any) -> RecordDescriptor:
    """
    Get the RecordDescriptor for a record instance or record type.

    Args:
        record: Dataclass instance or dataclass type

    Returns:
        Cached RecordDescriptor for the record's type

    Raises:
        RecordDefinitionError: Not a dataclass, unresolvable type hints,
            more than one primary key, or a primary key without a column
        UnsupportedNullableTypeError: A persisted nullable field has a
            type with no null default literal
    """
    record_type = record if isinstance(record, type) else type(record)
    return _describe_type(record_type)


@lru_cache(maxsize=None)
def _describe_type(record_type: type) -> RecordDescriptor:
    if not dataclasses.is_dataclass(record_type):
        raise RecordDefinitionError(f"{record_type.__name__} is not a dataclass record")

    try:
        hints = typing.get_type_hints(record_type)
    except (NameError, TypeError) as e:
        raise RecordDefinitionError(
            f"Cannot resolve field types of {record_type.__name__}: {e}"
        ) from e

    descriptors = []
    for field in dataclasses.fields(record_type):
        meta = field.metadata
        descriptor = FieldDescriptor(
            name=field.name,
            column=meta.get(COLUMN) or '',
            kind=kind_of(hints.get(field.name, field.type)),
            nullable=bool(meta.get(NULLABLE)),
            primary_key=bool(meta.get(PRIMARY_KEY)),
            foreign_key=meta.get(FOREIGN_KEY) or None,
            foreign_table=meta.get(FOREIGN_TABLE) or None,
        )

        if descriptor.persisted and descriptor.nullable and descriptor.kind is ValueKind.OTHER:
            raise UnsupportedNullableTypeError(
                f"{record_type.__name__}.{field.name} is nullable but its type "
                f"{hints.get(field.name, field.type)!r} has no default literal"
            )
        descriptors.append(descriptor)

    primary_keys = [d for d in descriptors if d.primary_key]
    if len(primary_keys) > 1:
        names = ', '.join(d.name for d in primary_keys)
        raise RecordDefinitionError(
            f"{record_type.__name__} declares more than one primary key: {names}"
        )
    if primary_keys and not primary_keys[0].persisted:
        raise RecordDefinitionError(
            f"{record_type.__name__}.{primary_keys[0].name} is a primary key without a column"
        )

    logger.debug(f"Described {record_type.__name__}: {len(descriptors)} fields")
    return RecordDescriptor(
        record_type=record_type,
        fields=tuple(descriptors),
        primary_key=primary_keys[0] if primary_keys else None,
    )


def iter_field_values(record: Any) -> Iterator[Tuple[FieldDescriptor, Any]]:
    """Yield (FieldDescriptor, current value) for every field, in declaration order."""
    for field in describe_record(record).fields:
        yield field, field.value_of(record)


def column_values(record: Any) -> Dict[str, Any]:
    """Map each persisted column name to the record's current value for it."""
    return {
        field.column: value
        for field, value in iter_field_values(record)
        if field.persisted
    }
