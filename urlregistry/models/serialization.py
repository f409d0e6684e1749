"""JSON (de)serialization of the registry's entry collection

The whole collection is persisted as one JSON array. Field names follow the
camelCase layout of the stored document:

    [
        {
            "id": "5f0c6a2e4b7d4d0f9a3c2b1e0d9f8a7b",
            "originalUrl": "https://example.com",
            "shortCode": "abc123",
            "customCode": null,
            "createdAt": "2025-10-15T12:00:00+00:00",
            "expiresAt": "2025-10-15T12:30:00+00:00",
            "validityMinutes": 30,
            "clicks": [
                {"timestamp": "2025-10-15T12:05:00+00:00", "referrer": "Direct", "location": "Unknown"}
            ]
        }
    ]

Encoding is deterministic (fixed key order, compact separators), so decoding a
stored document and encoding it again yields the same string.

Functions:
    entry_to_dict(entry) -> dict
    entry_from_dict(data) -> EntryModel
    entries_to_json(entries) -> str
    entries_from_json(payload) -> list[EntryModel]
"""

import json
from collections.abc import Iterable
from datetime import datetime, UTC
from typing import Any

from urlregistry.models.entry_model import ClickModel, EntryModel


def _dump_datetime(value: datetime) -> str:
    return value.isoformat()


def _load_datetime(value: str) -> datetime:
    parsed = datetime.fromisoformat(value)
    # Naive timestamps are treated as UTC
    return parsed if parsed.tzinfo is not None else parsed.replace(tzinfo=UTC)


def _load_minutes(value: Any) -> int:
    # bool is an int subclass; floats are rejected rather than truncated
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f'validityMinutes must be an integer (given type: {type(value).__name__}).')
    return value


def click_to_dict(click: ClickModel) -> dict[str, Any]:
    return {
        'timestamp': _dump_datetime(click.timestamp),
        'referrer': click.referrer,
        'location': click.location,
    }


def click_from_dict(data: dict[str, Any]) -> ClickModel:
    return ClickModel(
        timestamp=_load_datetime(data['timestamp']),
        referrer=data['referrer'],
        location=data['location'],
    )


def entry_to_dict(entry: EntryModel) -> dict[str, Any]:
    return {
        'id': entry.id,
        'originalUrl': entry.original_url,
        'shortCode': entry.shortcode,
        'customCode': entry.custom_code,
        'createdAt': _dump_datetime(entry.created_at),
        'expiresAt': _dump_datetime(entry.expires_at),
        'validityMinutes': entry.validity_minutes,
        'clicks': [click_to_dict(click) for click in entry.clicks],
    }


def entry_from_dict(data: dict[str, Any]) -> EntryModel:
    """Build an EntryModel from its stored representation

    Raises:
        KeyError: If a required field is missing.
        TypeError: If a field has an unexpected type (e.g. a non-integer validityMinutes).
        ValueError: If a timestamp can't be parsed.
    """
    return EntryModel(
        id=data['id'],
        original_url=data['originalUrl'],
        shortcode=data['shortCode'],
        custom_code=data.get('customCode'),
        created_at=_load_datetime(data['createdAt']),
        expires_at=_load_datetime(data['expiresAt']),
        validity_minutes=_load_minutes(data['validityMinutes']),
        clicks=tuple(click_from_dict(click) for click in data['clicks']),
    )


def entries_to_json(entries: Iterable[EntryModel]) -> str:
    return json.dumps([entry_to_dict(entry) for entry in entries], separators=(',', ':'))


def entries_from_json(payload: str | bytes) -> list[EntryModel]:
    """Decode a stored entry collection

    Raises:
        json.JSONDecodeError: If the payload isn't valid JSON.
        TypeError: If the document isn't a JSON array of entry objects.
        KeyError, ValueError: If an entry is missing fields or holds bad values.
    """
    document = json.loads(payload)
    if not isinstance(document, list):
        raise TypeError(f'Entry collection must be a JSON array (given type: {type(document).__name__}).')
    return [entry_from_dict(item) for item in document]
