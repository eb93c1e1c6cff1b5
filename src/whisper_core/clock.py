# ABOUTME: Wall clock helpers expressed in epoch milliseconds.
# ABOUTME: All persisted timestamps in the core use this unit.

from datetime import UTC, datetime

MINUTE_MS = 60 * 1000
HOUR_MS = 60 * MINUTE_MS
DAY_MS = 24 * HOUR_MS


def now_ms() -> int:
    """Return the current UTC time in milliseconds since the epoch."""
    return int(datetime.now(UTC).timestamp() * 1000)


def to_datetime(timestamp_ms: int) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime."""
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=UTC)
