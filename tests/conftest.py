from datetime import datetime, timedelta, UTC

import pytest

from urlregistry.dao.memory import EntryMemoryDAO
from urlregistry.models import ClickModel, EntryModel
from urlregistry.registry import Registry


class FakeClock:
    """Controllable clock returning timezone-aware UTC datetimes."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture
def start_time():
    return datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def clock(start_time):
    return FakeClock(start_time)


@pytest.fixture
def memory_dao():
    return EntryMemoryDAO()


@pytest.fixture
def registry(memory_dao, clock):
    return Registry(dao=memory_dao, clock=clock)


@pytest.fixture
def entry(start_time):
    return EntryModel(
        id='5f0c6a2e4b7d4d0f9a3c2b1e0d9f8a7b',
        original_url='https://example.com/article/123',
        shortcode='abc123',
        custom_code='abc123',
        created_at=start_time,
        expires_at=start_time + timedelta(minutes=30),
        validity_minutes=30,
        clicks=(
            ClickModel(timestamp=start_time + timedelta(minutes=1), referrer='Direct', location='Unknown'),
            ClickModel(timestamp=start_time + timedelta(minutes=2), referrer='https://news.ycombinator.com', location='Unknown'),
        ),
    )
