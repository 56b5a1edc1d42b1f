from __future__ import annotations

from datetime import date, datetime, timezone


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def day_of_week(value: date) -> int:
    """Day of week with 0 = Sunday ... 6 = Saturday."""
    return (value.weekday() + 1) % 7


def to_epoch_millis(value: datetime) -> int:
    return int(value.timestamp() * 1000)


def to_utc_millis(value: datetime) -> datetime:
    """Convert to aware UTC and drop sub-millisecond precision."""
    utc = value.astimezone(timezone.utc)
    return utc.replace(microsecond=(utc.microsecond // 1000) * 1000)


def format_iso_timestamp(value: datetime) -> str:
    """ISO-8601 string; UTC is written with a trailing "Z"."""
    timespec = "milliseconds" if value.microsecond % 1000 == 0 else "microseconds"
    text = value.isoformat(timespec=timespec)
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def parse_iso_timestamp(value: str) -> datetime:
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)
