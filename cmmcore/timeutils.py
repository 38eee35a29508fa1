"""Time zone, formatting and date helpers centred on GMT+07.

Layouts are reference-time layouts built from 2006-01-02 15:04:05.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any, Callable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

CUSTOM_RFC3339 = "2006-01-02T15:04:05"
FORMAT_YMD = "yyyy-MM-dd"
YYYY_MM_DD_HH_MM_SS_SSS = "2006-01-02 15:04:05.000"
YYYY_MM_DD_HH_MM_SS = "2006-01-02 15:04:05"
YYYY_MM_DD = "2006-01-02"
DD_MM_YYYY = "02-01-2006"
DD_MM_YYYY_HH_MM_SS = "02-01-2006 15:04:05"
DD_MM_YYYY_HH_MM_SS_SSS = "02-01-2006 15:04:05.000"
DM_FORMAT = "d/m"

_DATE_FORMAT = "2006-01-02"
_DATE_TIME_FORMAT = "2006-01-02 15:04:05"

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_log = logging.getLogger(__name__)

_location: tzinfo | None = None

_MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]
_WEEKDAYS = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]

_DAY_NAMES = ["chủ nhật", "thứ 2", "thứ 3", "thứ 4", "thứ 5", "thứ 6", "thứ 7"]
_DAY_NAMES_SHORT = ["CN", "T2", "T3", "T4", "T5", "T6", "T7"]
_DAY_NAMES_CAPITALIZED = ["Chủ nhật", "Thứ 2", "Thứ 3", "Thứ 4", "Thứ 5", "Thứ 6", "Thứ 7"]

_TOKEN_RE = re.compile(
    r"January|Jan|Monday|Mon|2006|Z07:00|Z0700|-07:00|-0700|MST|PM|pm"
    r"|\.0+|\.9+|01|02|_2|03|04|05|06|15|1|2|3|4|5"
)

_RFC_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?")
_DATE_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})")
_DATE_TIME_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2}) (\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?")


def _go_weekday(t: datetime) -> int:
    """Weekday number with Sunday as 0."""
    return t.isoweekday() % 7


def _format_offset(t: datetime, colon: bool, z: bool) -> str:
    offset = t.utcoffset() or timedelta(0)
    secs = int(offset.total_seconds())
    if z and secs == 0:
        return "Z"
    sign = "-" if secs < 0 else "+"
    hours, minutes = divmod(abs(secs) // 60, 60)
    return f"{sign}{hours:02d}:{minutes:02d}" if colon else f"{sign}{hours:02d}{minutes:02d}"


def _fraction(t: datetime, token: str) -> str:
    digits = len(token) - 1
    frac = f"{t.microsecond * 1000:09d}".ljust(digits, "0")[:digits]
    if token[1] == "9":
        frac = frac.rstrip("0")
        return "." + frac if frac else ""
    return "." + frac


_RENDERERS: dict[str, Callable[[datetime], str]] = {
    "January": lambda t: _MONTHS[t.month - 1],
    "Jan": lambda t: _MONTHS[t.month - 1][:3],
    "Monday": lambda t: _WEEKDAYS[_go_weekday(t)],
    "Mon": lambda t: _WEEKDAYS[_go_weekday(t)][:3],
    "2006": lambda t: f"{t.year:04d}",
    "06": lambda t: f"{t.year % 100:02d}",
    "01": lambda t: f"{t.month:02d}",
    "1": lambda t: str(t.month),
    "02": lambda t: f"{t.day:02d}",
    "_2": lambda t: f"{t.day:>2}",
    "2": lambda t: str(t.day),
    "15": lambda t: f"{t.hour:02d}",
    "03": lambda t: f"{t.hour % 12 or 12:02d}",
    "3": lambda t: str(t.hour % 12 or 12),
    "04": lambda t: f"{t.minute:02d}",
    "4": lambda t: str(t.minute),
    "05": lambda t: f"{t.second:02d}",
    "5": lambda t: str(t.second),
    "PM": lambda t: "PM" if t.hour >= 12 else "AM",
    "pm": lambda t: "pm" if t.hour >= 12 else "am",
    "Z07:00": lambda t: _format_offset(t, True, True),
    "Z0700": lambda t: _format_offset(t, False, True),
    "-07:00": lambda t: _format_offset(t, True, False),
    "-0700": lambda t: _format_offset(t, False, False),
    "MST": lambda t: t.tzname() or _format_offset(t, False, False),
}


def _go_format(t: datetime, layout: str) -> str:
    def render(match: re.Match[str]) -> str:
        token = match.group(0)
        if token.startswith("."):
            return _fraction(t, token)
        return _RENDERERS[token](t)

    return _TOKEN_RE.sub(render, layout)


def _parse(text: str, pattern: re.Pattern[str], tz: tzinfo) -> datetime:
    match = pattern.fullmatch(text)
    if match is None:
        raise ValueError(f"cannot parse {text!r}")
    groups = match.groups()
    parts = [int(g) for g in groups[:6] if g is not None]
    while len(parts) < 6:
        parts.append(0)
    frac = groups[6] if len(groups) > 6 else None
    micro = int(frac[:6].ljust(6, "0")) if frac else 0
    return datetime(*parts, micro, tzinfo=tz)


def init_timezones() -> None:
    """Load the GMT+07 zone once."""
    global _location
    if _location is not None:
        return
    try:
        _location = ZoneInfo("Asia/Ho_Chi_Minh")
    except ZoneInfoNotFoundError:
        _location = timezone(timedelta(hours=7), "+07")


def gmt07_location() -> tzinfo:
    """The GMT+07 zone, or UTC when init_timezones() has not been called."""
    if _location is None:
        _log.warning("Cannot use GMT+07 timezone, have you forgotten to call init_timezones()?")
        return timezone.utc
    return _location


def time_in_gmt07_string(t: datetime, fmt: str) -> str:
    """Format t in GMT+07 with a reference-time layout."""
    return _go_format(t.astimezone(gmt07_location()), fmt)


def now_in_gmt07_string(fmt: str) -> str:
    return time_in_gmt07_string(datetime.now(timezone.utc), fmt)


def convert_time_to_gmt07(t: datetime) -> datetime:
    return t.astimezone(gmt07_location())


def timestamp_to_gmt07_time(timestamp: int) -> datetime:
    return convert_time_to_gmt07(timestamp_to_time_utc(timestamp))


def timestamp_to_time_utc(timestamp: int) -> datetime:
    return datetime.fromtimestamp(timestamp, timezone.utc)


def convert_to_unix_time(t: datetime) -> int:
    """Whole seconds since the epoch, rounded down."""
    if t.tzinfo is None:
        t = t.astimezone()
    return (t - _EPOCH) // timedelta(seconds=1)


def convert_unix_time_rfc3339_string(timestamp: int) -> str:
    """Format a timestamp in GMT+07 as 2006-01-02T15:04:05."""
    return _go_format(timestamp_to_gmt07_time(timestamp), CUSTOM_RFC3339)


def parse_string_to_unix_timestamp_location(text: str) -> int:
    """Parse 2006-01-02T15:04:05 in GMT+07 to a timestamp; 0 on failure."""
    try:
        return convert_to_unix_time(_parse(text, _RFC_RE, gmt07_location()))
    except ValueError:
        return 0


def parse_string_to_time(text: str) -> datetime:
    """Parse 2006-01-02T15:04:05 in GMT+07; the zero time on failure."""
    try:
        return _parse(text, _RFC_RE, gmt07_location())
    except ValueError:
        return _ZERO_TIME


def time_begin_day(t: datetime) -> datetime:
    return t.replace(hour=0, minute=0, second=0, microsecond=0)


def time_end_day(t: datetime) -> datetime:
    return t.replace(hour=23, minute=59, second=59, microsecond=0)


def _day_name(names: list[str], weekday: int) -> str:
    return names[weekday] if 0 <= weekday < len(names) else ""


def day_of_week_name(weekday: int) -> str:
    """Lower-case Vietnamese day name; Sunday is 0."""
    return _day_name(_DAY_NAMES, weekday)


def day_of_week_name_short(weekday: int) -> str:
    """Short Vietnamese day name; Sunday is 0."""
    return _day_name(_DAY_NAMES_SHORT, weekday)


def day_of_week_name_capitalized(weekday: int) -> str:
    """Capitalised Vietnamese day name; Sunday is 0."""
    return _day_name(_DAY_NAMES_CAPITALIZED, weekday)


def _date_format(t: datetime, fmt: str) -> str:
    d, m, y, hh, mm = t.day, t.month, t.year, t.hour, t.minute
    formats = {
        "d/m": lambda: f"{d}/{m}",
        "d/m/yyyy": lambda: f"{d}/{m}/{y}",
        "dd/mm/yyyy": lambda: f"{d:02d}/{m:02d}/{y:04d}",
        "h:m d/m/yyyy": lambda: f"{hh}:{mm} - {d}/{m}/{y}",
        "hh:mm d/m/yyyy": lambda: f"{hh:02d}:{mm:02d} - {d}/{m}/{y}",
        "hh:mm dd/mm/yyyy": lambda: f"{hh:02d}:{mm:02d} {d:02d}/{m:02d}/{y}",
        "mm/yyyy": lambda: f"{m:02d}/{y}",
        "w (d/m)": lambda: f"{day_of_week_name(_go_weekday(t))} ({d}/{m})",
        "hh:mm - d/m/yyyy": lambda: f"{hh:02d}:{mm:02d} - {d}/{m}/{y}",
        "hh:mm": lambda: f"{hh:02d}:{mm:02d}",
    }
    render = formats.get(fmt)
    return render() if render else f"{d:02d}/{m:02d}/{y}"


def parse_string_date_to_format_date(text: str, fmt: str) -> str:
    """Parse 2006-01-02T15:04:05 in GMT+07 and render it in a named format."""
    return _date_format(parse_string_to_time(text), fmt)


def parse_timestamp_to_format_date(timestamp: int, fmt: str) -> str:
    """Render a timestamp in GMT+07 in a named format."""
    return _date_format(timestamp_to_gmt07_time(timestamp), fmt)


def get_days_between_dates(first: datetime, second: datetime) -> int:
    """Whole days from second to first, truncated toward zero."""
    return int((first - second) / timedelta(days=1))


def parse_open_time_text(opens_at: int, closes_at: int) -> str:
    """Render opening hours as "H:MM - H:MM" in local time; "" if either is 0."""
    if opens_at == 0 or closes_at == 0:
        return ""
    opens = datetime.fromtimestamp(opens_at)
    closes = datetime.fromtimestamp(closes_at)
    return f"{opens.hour}:{opens.minute:02d} - {closes.hour}:{closes.minute:02d}"


def is_on_the_same_date(t1: datetime, t2: datetime) -> bool:
    return (t1.year, t1.month, t1.day) == (t2.year, t2.month, t2.day)


def now_in_gmt07_string_rfc3339() -> str:
    return time_in_gmt07_string(datetime.now(timezone.utc), CUSTOM_RFC3339)


def time_in_gmt07_string_rfc3339(t: datetime) -> str:
    return time_in_gmt07_string(t, CUSTOM_RFC3339)


def is_equal_date(t1: datetime, t2: datetime) -> bool:
    return t1.year == t2.year and t1.month == t2.month and t1.day == t2.day


def get_begin_time_of_day(timestamp: int) -> int:
    """Timestamp of local midnight on the day of the given timestamp."""
    local = datetime.fromtimestamp(timestamp)
    midnight = datetime(local.year, local.month, local.day)
    return convert_to_unix_time(midnight)


def _scan(value: Any) -> datetime:
    if value is None:
        return _ZERO_TIME
    if not isinstance(value, datetime):
        raise TypeError(f"cannot scan {type(value).__name__} into a time")
    return value


def _json_string(data: str | bytes) -> str:
    text = json.loads(data)
    if not isinstance(text, str):
        raise ValueError("expected a JSON string")
    return text


@dataclass(frozen=True)
class Date:
    """A calendar date serialised as 2006-01-02."""

    value: datetime = _ZERO_TIME

    @classmethod
    def scan(cls, value: Any) -> Date:
        """Build from a database value; None gives the zero time."""
        return cls(_scan(value))

    def to_string(self) -> str:
        return _go_format(self.value, _DATE_FORMAT)

    def to_json(self) -> str:
        return json.dumps(self.to_string())


@dataclass(frozen=True)
class DateTime:
    """A timestamp serialised as 2006-01-02 15:04:05."""

    value: datetime = _ZERO_TIME

    @classmethod
    def scan(cls, value: Any) -> DateTime:
        """Build from a database value; None gives the zero time."""
        return cls(_scan(value))

    def to_string(self) -> str:
        return _go_format(self.value, _DATE_TIME_FORMAT)

    def to_json(self) -> str:
        return json.dumps(self.to_string())


def parse_date_json(data: str | bytes) -> Date:
    """Decode a JSON string holding 2006-01-02, read as UTC."""
    return Date(_parse(_json_string(data), _DATE_RE, timezone.utc))


def parse_datetime_json(data: str | bytes) -> DateTime:
    """Decode a JSON string holding 2006-01-02 15:04:05, read as UTC."""
    return DateTime(_parse(_json_string(data), _DATE_TIME_RE, timezone.utc))