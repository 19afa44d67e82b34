"""
Shared record types and fixtures for sql/ module tests.

Key fixtures:
- listing_type / listing: record with every value kind, a primary key,
  nullable columns, a foreign key, an is_active flag and unpersisted fields
- note_type: record without an is_active flag (hard delete)
- summary_type: record without a primary key
- default_sql_settings (autouse): pins driver 'mysql' and paramstyle 'qmark'
"""

from dataclasses import dataclass, field
from typing import List, Optional

import pytest

from models import column


@dataclass
class Listing:
    id: int = column('id', primary_key=True)
    name: str = column('name', nullable=True)
    date: str = column('date', nullable=True)
    geo_lat: float = column('geolocation_lat', nullable=True)
    geo_lng: float = column('geolocation_lng', nullable=True)
    is_active: int = column('is_active')
    property_id: int = column('property_id', foreign_key='property_id', foreign_table='properties')
    not_equals: List[str] = field(default_factory=list)
    order_by: str = ''
    order_dir: str = ''


@dataclass
class Note:
    note_id: int = column('note_id', primary_key=True)
    body: str = column('body')
    score: Optional[float] = column('score', nullable=True)
    draft: bool = column('draft', default=False)


@dataclass
class Summary:
    label: str = column('label')
    total: int = column('total')


@pytest.fixture(autouse=True)
def default_sql_settings(sql_settings):
    """Pin driver and paramstyle so environment variables cannot leak into tests."""
    return sql_settings(driver='mysql', paramstyle='qmark')


@pytest.fixture
def listing_type():
    return Listing


@pytest.fixture
def note_type():
    return Note


@pytest.fixture
def summary_type():
    return Summary


@pytest.fixture
def listing():
    """Listing populated the way a caller filling a search form would."""
    return Listing(
        id=1,
        date='2019-01-01',
        geo_lat=123.456,
        geo_lng=654.321,
        is_active=0,
        order_by='id',
    )
