"""
========================================================
Comprehensive pytest suite for sql/fields.py
========================================================

Sections:
---------
1. Unit tests - ValueKind zero tests and null defaults, kind_of
2. Unit tests - describe_record, iter_field_values, column_values
3. Edge case tests - invalid record declarations

Available markers:
------------------
unit, edge_case

How to Execute:
---------------
All tests:          pytest tests/tests_sql/test_fields.py -v
By category:        pytest tests/tests_sql/test_fields.py -m unit
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Optional, Union

import pytest

from models import column
from sql.exceptions import RecordDefinitionError, UnsupportedNullableTypeError
from sql.fields import (
    RecordDescriptor,
    ValueKind,
    column_values,
    describe_record,
    iter_field_values,
    kind_of,
)

# =========================
# UNIT TESTS - ValueKind
# =========================

@pytest.mark.unit
@pytest.mark.parametrize(
    "kind, value, expected",
    [
        (ValueKind.INTEGER, 0, True),
        (ValueKind.INTEGER, 42, False),
        (ValueKind.INTEGER, -1, False),
        (ValueKind.INTEGER, False, True),
        (ValueKind.INTEGER, True, False),
        (ValueKind.FLOAT, 0.0, True),
        (ValueKind.FLOAT, 0.5, False),
        (ValueKind.STRING, '', True),
        (ValueKind.STRING, ' ', False),
        (ValueKind.STRING, 'abc', False),
        (ValueKind.OTHER, [], False),
        (ValueKind.OTHER, Decimal('0'), False),
    ],
)
def test_is_zero(kind, value, expected):
    """Test zero detection per value kind; OTHER values are never zero."""
    assert kind.is_zero(value) is expected


@pytest.mark.unit
@pytest.mark.parametrize("kind", list(ValueKind))
def test_none_is_zero_for_every_kind(kind):
    """Test None counts as unset for every kind."""
    assert kind.is_zero(None) is True


@pytest.mark.unit
@pytest.mark.parametrize(
    "kind, literal",
    [
        (ValueKind.INTEGER, '0'),
        (ValueKind.FLOAT, '0.0'),
        (ValueKind.STRING, "''"),
    ],
)
def test_null_default(kind, literal):
    """Test default literals used inside null-coalescing calls."""
    assert kind.null_default() == literal


@pytest.mark.unit
def test_null_default_other_raises():
    """Test OTHER kind has no default literal."""
    with pytest.raises(UnsupportedNullableTypeError):
        ValueKind.OTHER.null_default()


@pytest.mark.unit
@pytest.mark.parametrize(
    "annotation, expected",
    [
        (int, ValueKind.INTEGER),
        (bool, ValueKind.INTEGER),
        (float, ValueKind.FLOAT),
        (str, ValueKind.STRING),
        (Optional[int], ValueKind.INTEGER),
        (Optional[str], ValueKind.STRING),
        (Union[float, None], ValueKind.FLOAT),
        (Union[int, str], ValueKind.OTHER),
        (List[str], ValueKind.OTHER),
        (Dict[str, int], ValueKind.OTHER),
        (Decimal, ValueKind.OTHER),
        (bytes, ValueKind.OTHER),
    ],
)
def test_kind_of(annotation, expected):
    """Test mapping of type hints to value kinds."""
    assert kind_of(annotation) is expected


# =========================
# UNIT TESTS - describe_record
# =========================

@pytest.mark.unit
def test_describe_record_field_order_and_metadata(listing_type):
    """Test descriptors follow declaration order and carry column metadata."""
    descriptor = describe_record(listing_type)

    assert isinstance(descriptor, RecordDescriptor)
    assert descriptor.record_type is listing_type
    assert [f.name for f in descriptor.fields] == [
        'id', 'name', 'date', 'geo_lat', 'geo_lng', 'is_active',
        'property_id', 'not_equals', 'order_by', 'order_dir',
    ]

    geo_lat = descriptor.field_named('geo_lat')
    assert geo_lat.column == 'geolocation_lat'
    assert geo_lat.kind is ValueKind.FLOAT
    assert geo_lat.nullable is True
    assert geo_lat.primary_key is False
    assert geo_lat.persisted is True


@pytest.mark.unit
def test_describe_record_primary_key(listing_type):
    """Test the primary-key field is exposed on the descriptor."""
    descriptor = describe_record(listing_type)

    assert descriptor.primary_key is descriptor.field_named('id')
    assert descriptor.primary_key.column == 'id'
    assert descriptor.primary_key.kind is ValueKind.INTEGER


@pytest.mark.unit
def test_describe_record_foreign_key_metadata(listing_type):
    """Test relationship metadata is carried through."""
    property_id = describe_record(listing_type).field_named('property_id')

    assert property_id.foreign_key == 'property_id'
    assert property_id.foreign_table == 'properties'
    assert describe_record(listing_type).field_named('name').foreign_key is None


@pytest.mark.unit
def test_describe_record_unpersisted_fields(listing_type):
    """Test fields without a column are described but not persisted."""
    descriptor = describe_record(listing_type)

    for name in ('not_equals', 'order_by', 'order_dir'):
        field = descriptor.field_named(name)
        assert field.column == ''
        assert field.persisted is False


@pytest.mark.unit
def test_describe_record_is_cached_per_type(listing_type, listing):
    """Test instance and type lookups share one cached descriptor."""
    assert describe_record(listing) is describe_record(listing_type)


@pytest.mark.unit
def test_describe_record_without_primary_key(summary_type):
    """Test a record without a primary key describes with primary_key None."""
    assert describe_record(summary_type).primary_key is None


@pytest.mark.unit
def test_field_named_unknown_returns_none(listing_type):
    """Test field_named returns None for unknown attributes."""
    assert describe_record(listing_type).field_named('missing') is None


@pytest.mark.unit
def test_iter_field_values_reads_current_values(listing):
    """Test values are read from the instance on every call."""
    values = {field.name: value for field, value in iter_field_values(listing)}
    assert values['id'] == 1
    assert values['date'] == '2019-01-01'
    assert values['name'] is None

    listing.name = 'Harbour View'
    values = {field.name: value for field, value in iter_field_values(listing)}
    assert values['name'] == 'Harbour View'


@pytest.mark.unit
def test_column_values_only_persisted(listing):
    """Test column_values maps column names and skips unpersisted fields."""
    values = column_values(listing)

    assert values == {
        'id': 1,
        'name': None,
        'date': '2019-01-01',
        'geolocation_lat': 123.456,
        'geolocation_lng': 654.321,
        'is_active': 0,
        'property_id': None,
    }


# =========================
# EDGE CASE TESTS
# =========================

@pytest.mark.edge_case
def test_describe_record_rejects_non_dataclass():
    """Test plain classes are rejected."""
    class Plain:
        id = 1

    with pytest.raises(RecordDefinitionError, match="not a dataclass"):
        describe_record(Plain())


@pytest.mark.edge_case
def test_describe_record_rejects_multiple_primary_keys():
    """Test records with two primary keys are rejected up front."""
    @dataclass
    class TwoKeys:
        a: int = column('a', primary_key=True)
        b: int = column('b', primary_key=True)

    with pytest.raises(RecordDefinitionError, match="more than one primary key: a, b"):
        describe_record(TwoKeys)


@pytest.mark.edge_case
def test_describe_record_rejects_primary_key_without_column():
    """Test a primary key must be persisted."""
    @dataclass
    class HiddenKey:
        a: int = column('', primary_key=True)

    with pytest.raises(RecordDefinitionError, match="primary key without a column"):
        describe_record(HiddenKey)


@pytest.mark.edge_case
def test_describe_record_rejects_nullable_other_kind():
    """Test nullable columns need a type with a default literal."""
    @dataclass
    class Priced:
        id: int = column('id', primary_key=True)
        price: Decimal = column('price', nullable=True)

    with pytest.raises(UnsupportedNullableTypeError, match="Priced.price"):
        describe_record(Priced)


@pytest.mark.edge_case
def test_nullable_other_kind_without_column_is_allowed():
    """Test the nullable check only applies to persisted fields."""
    @dataclass
    class Loose:
        id: int = column('id', primary_key=True)
        tags: List[str] = column('', nullable=True, default_factory=list)

    assert describe_record(Loose).field_named('tags').persisted is False


@pytest.mark.edge_case
def test_unsupported_nullable_is_record_definition_error():
    """Test callers can catch every declaration problem with one type."""
    assert issubclass(UnsupportedNullableTypeError, RecordDefinitionError)
