from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class ClickModel:
    """Represent a single served redirect of a short URL.

    Attributes:
        timestamp (datetime):
            When the redirect was served (UTC).
        referrer (str):
            Source of the click, "Direct" if unavailable.
        location (str):
            Placeholder for the client's location, always "Unknown".
    """
    timestamp: datetime
    referrer: str
    location: str


@dataclass(frozen=True)
class EntryModel:
    """Represent a shortened URL mapping with its metadata and click history.

    Entries are write-once. Recording a click produces a new EntryModel whose
    `clicks` tuple is the previous one plus the new click; every other field is
    carried over unchanged.

    Attributes:
        id (str):
            Opaque unique identifier, assigned at creation and never reused.
        original_url (str):
            The absolute URL that the short code redirects to.
        shortcode (str):
            Unique short identifier matching [A-Za-z0-9]{3,20}.
        created_at (datetime):
            Creation time (UTC).
        expires_at (datetime):
            created_at + validity_minutes. The entry is active until then.
        validity_minutes (int):
            Validity window requested at creation, echoed back for display.
        custom_code (Optional[str]):
            The user-supplied short code, None when the code was generated.
        clicks (tuple[ClickModel, ...]):
            Append-only click log in chronological order.

    Example:
        >>> from datetime import datetime, timedelta, UTC
        >>> now = datetime.now(UTC)
        >>> entry = EntryModel(
        ...     id='5f0c6a2e4b7d4d0f9a3c2b1e0d9f8a7b',
        ...     original_url='https://example.com/article/123',
        ...     shortcode='abc123',
        ...     created_at=now,
        ...     expires_at=now + timedelta(minutes=30),
        ...     validity_minutes=30,
        ... )
        >>> entry.click_count
        0
        >>> entry.is_expired(now + timedelta(minutes=31))
        True
    """
    id: str
    original_url: str
    shortcode: str
    created_at: datetime
    expires_at: datetime
    validity_minutes: int
    custom_code: str | None = None
    clicks: tuple[ClickModel, ...] = field(default_factory=tuple)

    @property
    def click_count(self) -> int:
        return len(self.clicks)

    def is_expired(self, now: datetime) -> bool:
        """Return True once `now` is past the entry's expiry time."""
        return now > self.expires_at
