"""
=================================
Exceptions raised by SQL builders.
=================================

Every failure while describing a record or building a statement derives
from QueryBuildError, so callers can catch one type.
"""


class QueryBuildError(Exception):
    """Base exception for statement building failures."""
    pass


class BindingError(QueryBuildError):
    """A named placeholder has no matching tagged field on the record."""
    pass


class RecordDefinitionError(QueryBuildError):
    """The record type is declared in a way the builders cannot use."""
    pass


class UnsupportedNullableTypeError(RecordDefinitionError):
    """A nullable column's value type has no default literal for null-coalescing."""
    pass


class MissingPrimaryKeyError(QueryBuildError):
    """UPDATE or DELETE was requested for a record without a primary-key field."""
    pass


class EmptyUpdateError(QueryBuildError):
    """The field mask selects no updatable columns."""
    pass
