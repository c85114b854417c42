# medtrack/utils/dates.py
import re
from datetime import date, datetime, time, timezone

DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
TIME_OF_DAY_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def utcnow() -> datetime:
    """Naive UTC now; every timestamp is stored naive in UTC."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def isoformat(value):
    """Stored values are naive UTC; mark them as such on the way out."""
    return value.isoformat() + "Z" if value else None


def is_valid_date(value) -> bool:
    if not isinstance(value, str) or not DATE_RE.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def is_valid_time_of_day(value) -> bool:
    return isinstance(value, str) and bool(TIME_OF_DAY_RE.match(value))


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 string; aware values are converted to naive UTC."""
    parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def at_time_of_day(day: str, hhmm: str) -> datetime:
    hours, minutes = hhmm.split(":")
    return datetime.combine(date.fromisoformat(day), time(int(hours), int(minutes)))


def time_of_day(value: datetime) -> str:
    return value.strftime("%H:%M")
