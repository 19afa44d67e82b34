"""
===========================================
Record-driven CRUD statement builders.
===========================================

Builds single-table INSERT, SELECT, UPDATE and DELETE statements from a
record dataclass and its current values. Each builder assembles SQL with
:column placeholders and resolves them to positional markers, returning
the final statement and the bound values in marker order.

Functions:
- build_create: INSERT of every persisted, non-key, non-zero field
- build_read: SELECT of every persisted column, filtered by non-zero fields
- build_update: UPDATE of the fields named in a field mask, keyed by primary key
- build_delete: Soft delete through is_active when present, DELETE otherwise

Zero values (0, 0.0, '' and None) mean "not set": they are left out of
INSERT column lists and SELECT filters. UPDATE ignores values and relies on
the field mask instead.

Usage:
    from sql.crud import build_create, build_read, build_update, build_delete

    sql, args = build_read('users', User(name='al%'))
    # SELECT id, ifnull(name, '') as name, is_active FROM users WHERE true AND name LIKE ?

    sql, args = build_update('users', user, {'name'})
    # UPDATE users SET name = ? WHERE id = ?
"""

from typing import Any, Iterable, List, Optional, Tuple

from core.logger import get_logger
from sql.dialects import Dialect, get_dialect
from sql.exceptions import EmptyUpdateError, MissingPrimaryKeyError
from sql.fields import FieldDescriptor, RecordDescriptor, ValueKind, describe_record, iter_field_values
from sql.placeholders import resolve_placeholders

logger = get_logger(__name__)

# Attribute name that switches DELETE to a soft delete
ACTIVE_FLAG_FIELD = 'is_active'


def build_create(table: str, record: Any) -> Tuple[str, List[Any]]:
    """
    Build an INSERT statement for the record's set fields.

    Primary-key fields are always left out (the database generates them),
    as are fields holding their zero value. A record with nothing to insert
    yields "INSERT INTO <table> () VALUES ()".

    Args:
        table: Target table name
        record: Record dataclass instance

    Returns:
        Tuple of (SQL with positional markers, bound values)
    """
    columns = [
        field.column
        for field, value in iter_field_values(record)
        if field.persisted and not field.primary_key and not field.kind.is_zero(value)
    ]
    column_list = ", ".join(columns)
    placeholder_list = ", ".join([f":{col}" for col in columns])

    sql = f"INSERT INTO {table} ({column_list}) VALUES ({placeholder_list})"
    return _resolve('INSERT', table, sql, record)


def build_read(
    table: str,
    record: Any,
    dialect: Optional[Dialect] = None
) -> Tuple[str, List[Any]]:
    """
    Build a SELECT statement using the record as projection and filter template.

    Every persisted column is selected; nullable columns are wrapped in the
    dialect's null-coalescing function and aliased back to their own name.
    Every persisted field holding a non-zero value adds a filter: LIKE for
    strings (wildcards are the caller's business), equality otherwise.

    Args:
        table: Target table name
        record: Record dataclass instance
        dialect: Dialect profile; defaults to the one selected by configuration

    Returns:
        Tuple of (SQL with positional markers, bound values)
    """
    if dialect is None:
        dialect = get_dialect()

    projection = []
    conditions = ["true"]
    for field, value in iter_field_values(record):
        if not field.persisted:
            continue

        if field.nullable:
            projection.append(
                f"{dialect.coalesce(field.column, field.kind.null_default())} as {field.column}"
            )
        else:
            projection.append(field.column)

        if not field.kind.is_zero(value):
            operator = "LIKE" if field.kind is ValueKind.STRING else "="
            conditions.append(f"{field.column} {operator} :{field.column}")

    sql = f"SELECT {', '.join(projection)} FROM {table} WHERE {' AND '.join(conditions)}"
    return _resolve('SELECT', table, sql, record)


def build_update(
    table: str,
    record: Any,
    field_mask: Iterable[str]
) -> Tuple[str, List[Any]]:
    """
    Build an UPDATE statement for the fields named in field_mask.

    The mask holds record attribute names, not column names. Only persisted,
    non-key fields in the mask are assigned, whatever their value. The
    primary key always forms the WHERE clause.

    Args:
        table: Target table name
        record: Record dataclass instance
        field_mask: Attribute names eligible for update

    Returns:
        Tuple of (SQL with positional markers, bound values)

    Raises:
        MissingPrimaryKeyError: The record has no primary-key field
        EmptyUpdateError: No persisted non-key field is in the mask
    """
    mask = {field_mask} if isinstance(field_mask, str) else set(field_mask)
    descriptor = describe_record(record)
    primary_key = _require_primary_key(descriptor, 'UPDATE', table)

    assignments = [
        f"{field.column} = :{field.column}"
        for field in descriptor.fields
        if field.persisted and not field.primary_key and field.name in mask
    ]
    if not assignments:
        error_msg = (
            f"Field mask {sorted(mask)} selects no updatable columns of "
            f"{descriptor.record_type.__name__} for {table}"
        )
        logger.warning(error_msg)
        raise EmptyUpdateError(error_msg)

    sql = f"UPDATE {table} SET {', '.join(assignments)} WHERE {_key_condition(primary_key)}"
    return _resolve('UPDATE', table, sql, record)


def build_delete(table: str, record: Any) -> Tuple[str, List[Any]]:
    """
    Build a soft or hard delete keyed by the record's primary key.

    Records with a persisted is_active field are soft deleted: the statement
    sets is_active to whatever value the caller left on the instance.
    Otherwise a DELETE is produced.

    Args:
        table: Target table name
        record: Record dataclass instance

    Returns:
        Tuple of (SQL with positional markers, bound values)

    Raises:
        MissingPrimaryKeyError: The record has no primary-key field
    """
    descriptor = describe_record(record)
    primary_key = _require_primary_key(descriptor, 'DELETE', table)

    active_flag = descriptor.field_named(ACTIVE_FLAG_FIELD)
    if active_flag is not None and active_flag.persisted:
        sql = (
            f"UPDATE {table} SET {active_flag.column} = :{active_flag.column} "
            f"WHERE {_key_condition(primary_key)}"
        )
    else:
        sql = f"DELETE FROM {table} WHERE {_key_condition(primary_key)}"

    return _resolve('DELETE', table, sql, record)


def _key_condition(primary_key: FieldDescriptor) -> str:
    return f"{primary_key.column} = :{primary_key.column}"


def _require_primary_key(
    descriptor: RecordDescriptor,
    operation: str,
    table: str
) -> FieldDescriptor:
    if descriptor.primary_key is None:
        error_msg = (
            f"{operation} on {table} requires a primary key but "
            f"{descriptor.record_type.__name__} declares none"
        )
        logger.error(f"❌ {error_msg}")
        raise MissingPrimaryKeyError(error_msg)
    return descriptor.primary_key


def _resolve(operation: str, table: str, sql: str, record: Any) -> Tuple[str, List[Any]]:
    statement, bindings = resolve_placeholders(sql, record)
    logger.debug(f"{operation} {table}: {statement} ({len(bindings)} bindings)")
    return statement, bindings
