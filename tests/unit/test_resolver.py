"""Unit tests for the short code resolution state machine in resolver.py

Test coverage includes:

1. NOT_FOUND
   - Unknown codes resolve to NOT_FOUND without any store write.

2. EXPIRED
   - Codes past expiry resolve to EXPIRED without recording a click.
   - Naive reference times are read as UTC.

3. ACTIVE
   - Active codes record exactly one click and expose the target URL.
   - A rejected click write still resolves to ACTIVE.
"""

from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest

from urlregistry.constants import REDIRECT_COUNTDOWN_SECONDS
from urlregistry.registry import Registry
from urlregistry.resolver import Resolution, ResolutionState, resolve


# -------------------------------
# 1. NOT_FOUND
# -------------------------------


def test_unknown_code_is_not_found(registry, memory_dao):
    registry.create('https://example.com', custom_code='promo')
    writes = memory_dao.writes

    resolution = resolve(registry, 'missing')

    assert resolution == Resolution(state=ResolutionState.NOT_FOUND, shortcode='missing')
    assert resolution.target is None
    assert memory_dao.writes == writes


# -------------------------------
# 2. EXPIRED
# -------------------------------


def test_expired_code(registry, clock):
    registry.create('https://example.com', custom_code='promo', validity_minutes=1)
    clock.advance(minutes=2)

    resolution = resolve(registry, 'promo')

    assert resolution.state is ResolutionState.EXPIRED
    assert resolution.entry.shortcode == 'promo'
    assert resolution.target is None
    assert registry.lookup('promo').click_count == 0


def test_explicit_now_overrides_clock(registry, start_time):
    registry.create('https://example.com', custom_code='promo', validity_minutes=1)

    assert resolve(registry, 'promo', now=start_time + timedelta(minutes=5)).state is ResolutionState.EXPIRED
    assert resolve(registry, 'promo', now=start_time).state is ResolutionState.ACTIVE


def test_naive_now_is_read_as_utc(registry):
    registry.create('https://example.com', custom_code='promo', validity_minutes=1)

    assert resolve(registry, 'promo', now=datetime(2030, 1, 1)).state is ResolutionState.EXPIRED
    assert resolve(registry, 'promo', now=datetime(2025, 10, 15, 12, 0, 30)).state is ResolutionState.ACTIVE


def test_expiry_boundary_is_active(registry, start_time):
    """At exactly expires_at the entry is not yet past expiry."""
    registry.create('https://example.com', custom_code='promo', validity_minutes=1)

    resolution = resolve(registry, 'promo', now=start_time + timedelta(minutes=1))

    assert resolution.state is ResolutionState.ACTIVE


# -------------------------------
# 3. ACTIVE
# -------------------------------


def test_active_code_records_one_click(registry):
    registry.create('https://example.com/landing', custom_code='promo')

    resolution = resolve(registry, 'promo', referrer='https://news.ycombinator.com')

    assert resolution.state is ResolutionState.ACTIVE
    assert resolution.target == 'https://example.com/landing'
    assert resolution.redirect_after == REDIRECT_COUNTDOWN_SECONDS

    entry = registry.lookup('promo')
    assert entry.click_count == 1
    assert entry.clicks[0].referrer == 'https://news.ycombinator.com'


def test_record_click_called_exactly_once(start_time):
    registry = MagicMock(spec=Registry)
    registry.lookup.return_value = MagicMock(original_url='https://example.com', is_expired=MagicMock(return_value=False))

    resolve(registry, 'promo', now=start_time)

    registry.record_click.assert_called_once_with('promo', referrer=None)


@pytest.mark.parametrize('state', [ResolutionState.NOT_FOUND, ResolutionState.EXPIRED])
def test_terminal_states_never_record_clicks(start_time, state):
    registry = MagicMock(spec=Registry)
    if state is ResolutionState.NOT_FOUND:
        registry.lookup.return_value = None
    else:
        registry.lookup.return_value = MagicMock(is_expired=MagicMock(return_value=True))

    assert resolve(registry, 'promo', now=start_time).state is state
    registry.record_click.assert_not_called()


def test_rejected_click_write_still_redirects(registry, memory_dao, caplog):
    registry.create('https://example.com', custom_code='promo')
    memory_dao.fail_writes = True

    resolution = resolve(registry, 'promo')

    assert resolution.state is ResolutionState.ACTIVE
    assert resolution.target == 'https://example.com'
    assert 'Failed to record click.' in caplog.text
