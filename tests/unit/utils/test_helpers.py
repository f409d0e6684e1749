"""Unit tests for helper functions in helpers.py.

Test coverage includes:

1. get_short_url() retrieves short URL string representation

2. utc_now() returns timezone-aware UTC datetimes; as_utc() reads naive datetimes as UTC

3. require_environment() decorator behavior
   - 3.1. Ensures decorated functions execute when all env vars are present.
   - 3.2. Ensures missing or empty env vars raise MissingEnvironmentVariableError.
"""

from datetime import datetime, timedelta, timezone, UTC

import pytest
from freezegun import freeze_time

from urlregistry.exceptions import MissingEnvironmentVariableError
from urlregistry.utils.helpers import get_short_url, utc_now, as_utc, require_environment


# -------------------------------
# 1. get_short_url()
# -------------------------------


@pytest.mark.parametrize(
    'base_origin, shortcode, expected',
    [
        ('https://sho.rt', 'abc123', 'https://sho.rt/abc123'),
        ('https://sho.rt/', 'abc123', 'https://sho.rt/abc123'),
        ('http://localhost:3000', 'Xy12Zq', 'http://localhost:3000/Xy12Zq'),
    ],
)
def test_get_short_url(base_origin, shortcode, expected):
    assert get_short_url(base_origin, shortcode) == expected


# -------------------------------
# 2. utc_now()
# -------------------------------


@freeze_time('2025-10-15 12:00:00')
def test_utc_now():
    now = utc_now()
    assert now == datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC)
    assert now.tzinfo is not None


@pytest.mark.parametrize(
    'value, expected',
    [
        (datetime(2025, 10, 15, 12, 0, 0), datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC)),
        (datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC), datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC)),
        (datetime(2025, 10, 15, 14, 0, 0, tzinfo=timezone(timedelta(hours=2))), datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC)),
    ],
)
def test_as_utc(value, expected):
    result = as_utc(value)
    assert result == expected
    assert result.tzinfo is not None


# -------------------------------
# 3.1. require_environment() success
# -------------------------------


def test_require_environment_passes(monkeypatch):
    monkeypatch.setenv('FIRST_VAR', 'one')
    monkeypatch.setenv('SECOND_VAR', 'two')

    @require_environment('FIRST_VAR', 'SECOND_VAR')
    def configured():
        return 'OK'

    assert configured() == 'OK'


# -------------------------------
# 3.2. require_environment() failure
# -------------------------------


def test_require_environment_missing(monkeypatch):
    monkeypatch.delenv('FIRST_VAR', raising=False)
    monkeypatch.setenv('SECOND_VAR', '')

    @require_environment('FIRST_VAR', 'SECOND_VAR')
    def configured():
        return 'OK'

    with pytest.raises(MissingEnvironmentVariableError, match="'FIRST_VAR', 'SECOND_VAR'"):
        configured()
