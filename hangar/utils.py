"""Timestamp helpers shared by the models, the store and the ship service."""

from datetime import datetime, timezone


def ensure_utc(value: datetime) -> datetime:
    """Return an aware datetime, treating naive values (as read back from SQLite) as UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def from_epoch_millis(millis: int) -> datetime:
    """Convert milliseconds since the Unix epoch to an aware UTC datetime"""
    return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)


def to_epoch_millis(value: datetime) -> int:
    """Convert a datetime to milliseconds since the Unix epoch"""
    return int(round(ensure_utc(value).timestamp() * 1000))


def year_of(value: datetime) -> int:
    """Calendar year of a timestamp, evaluated in UTC"""
    return ensure_utc(value).astimezone(timezone.utc).year
