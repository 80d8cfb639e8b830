import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from decimal import Decimal, ROUND_HALF_UP

from fitlog.core.constants import HHMM_PATTERN

_HHMM_RE = re.compile(HHMM_PATTERN)


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    value: str | None = None
    error: str | None = None


def validate_hhmm(value: str | None) -> ValidationResult:
    """Check a wall-clock 'HH:MM' string.

    Empty strings and None are valid and mean "unset" (value=None).
    Example: '7:30' -> not ok, '07:30' -> ok
    """
    if value is None:
        return ValidationResult(ok=True)
    s = value.strip()
    if s == "":
        return ValidationResult(ok=True)
    if not _HHMM_RE.match(s):
        return ValidationResult(ok=False, error=f"'{value}' is not a valid HH:MM time")
    return ValidationResult(ok=True, value=s)


def hhmm_to_time(hhmm: str | None) -> time | None:
    """Parse 'HH:MM' into datetime.time. Returns None for empty strings."""
    result = validate_hhmm(hhmm)
    if not result.ok:
        raise ValueError(result.error)
    if result.value is None:
        return None
    return datetime.strptime(result.value, "%H:%M").time()


def time_to_hhmm(t) -> str | None:
    """Format datetime.time -> 'HH:MM'. Returns None if t is None."""
    if t is None:
        return None
    if isinstance(t, str):
        return t[:5]
    return f"{t.hour:02d}:{t.minute:02d}"


def to_local_datetime(dt: datetime, tz_name: str | None = None) -> datetime:
    """Convert an aware datetime to local or given tz.

    - If `tz_name` is 'local' or None: use system local timezone.
    - If `tz_name` is IANA tz name (e.g., 'America/New_York'): use that.
    - Naive datetimes are returned unchanged; they are already local wall time.
    """
    if dt.tzinfo is None:
        return dt
    if tz_name and tz_name != "local":
        from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
        try:
            return dt.astimezone(ZoneInfo(tz_name))
        except ZoneInfoNotFoundError:
            return dt.astimezone()
    return dt.astimezone()


def _local_tz_name() -> str:
    from fitlog.core.config import settings
    return settings.timezone


def to_date_key(value: date | datetime | str, tz_name: str | None = None) -> str:
    """Normalize a date, datetime or ISO string into 'YYYY-MM-DD'.

    The calendar day is the local one: '2025-03-02T23:30:00-05:00' is
    the 3rd in UTC but stays the 2nd when tz_name is America/New_York.
    Example: date(2025, 1, 6) -> '2025-01-06'
    """
    if isinstance(value, str):
        s = value.strip()
        if len(s) == 10:
            return date.fromisoformat(s).isoformat()
        value = datetime.fromisoformat(s.replace("Z", "+00:00"))
    if isinstance(value, datetime):
        local = to_local_datetime(value, tz_name or _local_tz_name())
        return local.date().isoformat()
    return value.isoformat()


def monday_of(d: date) -> date:
    # Monday = 0, Sunday = 6
    return d - timedelta(days=d.weekday())


def week_start_key(value: date | datetime | str, tz_name: str | None = None) -> str:
    """Date key of the Monday on or before `value` (ISO weeks, Sunday is day 7).

    Example: '2025-01-12' (a Sunday) -> '2025-01-06'
    """
    day = date.fromisoformat(to_date_key(value, tz_name))
    return monday_of(day).isoformat()


def today_key(tz_name: str | None = None) -> str:
    from datetime import timezone
    return to_date_key(datetime.now(timezone.utc), tz_name)


def sleep_minutes(wake: str, sleep: str) -> int:
    """Whole minutes between `sleep` and `wake`, wrapping past midnight."""
    wake_t = datetime.strptime(wake[:5], "%H:%M")
    sleep_t = datetime.strptime(sleep[:5], "%H:%M")
    minutes = int((wake_t - sleep_t).total_seconds() // 60)
    if minutes < 0:
        minutes += 24 * 60
    return minutes


def sleep_hours(wake: str, sleep: str) -> float:
    """Hours slept between `sleep` and `wake` wall-clock times.

    Crossing midnight is handled by adding a day. Equal times give 0.0.
    Example: sleep_hours('06:00', '23:00') -> 7.0
    """
    minutes = sleep_minutes(wake, sleep)
    hours = Decimal(minutes) / Decimal(60)
    return float(hours.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def months_before(d: date, months: int = 1) -> date:
    """Same day `months` earlier, clamped to the end of shorter months.

    Example: date(2025, 3, 31) -> date(2025, 2, 28)
    """
    import calendar
    total = d.year * 12 + (d.month - 1) - months
    year, month = divmod(total, 12)
    month += 1
    last = calendar.monthrange(year, month)[1]
    return date(year, month, min(d.day, last))
