"""UTC clock and the timestamp format stored on documents."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


def isoformat_utc(dt: datetime | None = None) -> str:
    """
    ISO-8601 string (millisecond precision, Z suffix) for stored timestamps.

    Stored createdAt/updatedAt values are strings so that they sort the
    same way in the document store and the search index.

    Args:
        dt: Datetime to format; defaults to now.
    """
    value = (dt or utc_now()).astimezone(UTC)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
