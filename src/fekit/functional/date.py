"""Date helpers modelled on the JavaScript ``Date`` object.

A :class:`JSDate` stores a single instant as an integer count of epoch
milliseconds (milliseconds since 1970-01-01T00:00:00Z). Everything else, the
calendar fields in particular, is derived from that value on demand, either in
UTC or in the instance's local time zone.

Conventions carried over from JavaScript:
    - Months are 0-based (0 = January); days of the week start at 0 = Sunday.
    - Setters accept out-of-range components and carry the overflow into the
      next unit: month 12 is January of the following year, day 0 is the last
      day of the previous month, ``set_hours(25)`` moves to 01:00 the next day.
    - Setters mutate the instance and return the new epoch-millisecond value.

The local time zone of an instance is, in order of preference, the ``tz``
passed to it, ``settings.TIMEZONE``, or the system time zone.

Examples:
    >>> from fekit.functional.date import JSDate, parse, utc
    >>> d = JSDate(utc(2023, 4, 15, 14, 30, 45, 500))
    >>> d.to_iso_string()
    '2023-05-15T14:30:45.500Z'
    >>> parse("May 15, 2023") == utc(2023, 4, 15)
    True
"""

import datetime as dt
import functools
import math
import re
import time
import typing as tp
from email.utils import format_datetime

from fekit.core.config import settings
from fekit.logger.logger import logger

__all__ = [
    "JSDate",
    "now",
    "parse",
    "utc",
]

EPOCH = dt.datetime(1970, 1, 1, tzinfo=dt.timezone.utc)
_ONE_MS = dt.timedelta(milliseconds=1)

_DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_FULL_MONTH_NAMES = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)

# English month names, full or abbreviated, whatever LC_TIME is set to
_MONTH_NUMBERS = {
    **{name: i + 1 for i, name in enumerate(_FULL_MONTH_NAMES)},
    **{name.lower(): i + 1 for i, name in enumerate(_MONTH_NAMES)},
}
_WORD = re.compile(r"[A-Za-z]+")

# Tried in order by parse(); input without an offset is read as UTC.
# Layouts flagged True are matched after month names become numbers.
_PARSE_FORMATS = (
    ("%Y-%m-%dT%H:%M:%S.%f%z", False),
    ("%Y-%m-%d", False),
    ("%Y/%m/%d", False),
    ("%m/%d/%Y", False),
    ("%m %d, %Y", True),
    ("%d %m %Y", True),
    ("%Y-%m-%dT%H:%M:%S%z", False),
)


# =============================================================================
# Epoch-millisecond arithmetic
# =============================================================================


def _to_datetime(ms: int) -> dt.datetime:
    """Aware UTC datetime for an epoch-millisecond value."""
    try:
        return EPOCH + dt.timedelta(milliseconds=ms)
    except OverflowError as e:
        raise ValueError(f"Time value {ms} is out of range") from e


def _to_ms(value: dt.datetime) -> int:
    """Epoch milliseconds of an aware datetime, truncating sub-millisecond digits."""
    return (value - EPOCH) // _ONE_MS


def _time_clip(ms: float) -> int:
    if not math.isfinite(ms):
        raise ValueError(f"Time value {ms} is out of range")
    clipped = int(ms)
    _to_datetime(clipped)  # range check
    return clipped


def _compose(
    year: int,
    month: int,
    day: int,
    hours: int,
    minutes: int,
    seconds: int,
    milliseconds: int,
    tz: tp.Optional[dt.tzinfo],
) -> int:
    """Epoch milliseconds for calendar components in ``tz``.

    Components may overflow in either direction and are carried into the next
    unit. ``tz=None`` means the system time zone.
    """
    year, month = int(year) + int(month) // 12, int(month) % 12
    try:
        ordinal = dt.date(year, month + 1, 1).toordinal() + int(day) - 1
        wall = dt.datetime.fromordinal(ordinal) + dt.timedelta(
            hours=int(hours),
            minutes=int(minutes),
            seconds=int(seconds),
            milliseconds=int(milliseconds),
        )
    except (ValueError, OverflowError) as e:
        raise ValueError(
            f"Date components out of range: {year}-{month + 1}-{day}"
        ) from e

    try:
        if tz is None:
            # Naive datetimes are interpreted in the system zone
            moment = wall.astimezone()
        else:
            moment = wall.replace(tzinfo=tz)
    except OverflowError as e:
        raise ValueError(f"Date components out of range: {wall}") from e
    return _time_clip(_to_ms(moment))


# =============================================================================
# Static helpers
# =============================================================================


def _numbered_months(text: str) -> tp.Optional[str]:
    """Replace English month names in ``text`` with month numbers, or None if there are none."""
    found = False

    def number(match: "re.Match[str]") -> str:
        nonlocal found
        month = _MONTH_NUMBERS.get(match.group(0).lower())
        if month is None:
            return match.group(0)
        found = True
        return str(month)

    replaced = _WORD.sub(number, text)
    return replaced if found else None


def now() -> int:
    """Current time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


def parse(text: str) -> tp.Optional[int]:
    """Parse a date string into epoch milliseconds.

    Accepted layouts, tried in order:

        1. ``2023-05-15T14:30:45.500Z`` (fractional seconds, offset or ``Z``)
        2. ``2023-05-15``
        3. ``2023/05/15``
        4. ``05/15/2023``
        5. ``May 15, 2023`` or ``Sep 1, 2023``
        6. ``15 May 2023``
        7. ``2023-05-15T14:30:45+08:00``
        8. anything else ``datetime.fromisoformat`` accepts

    Month names are matched in English whatever the current locale.

    Input without an explicit offset is read as UTC.

    Args:
        text: The string to parse.

    Returns:
        Epoch milliseconds, or None if no layout matches.
    """
    text = text.strip()
    numbered = _numbered_months(text)
    for fmt, named in _PARSE_FORMATS:
        source = numbered if named else text
        if source is None:
            continue
        try:
            parsed = dt.datetime.strptime(source, fmt)
        except ValueError:
            continue
        break
    else:
        try:
            parsed = dt.datetime.fromisoformat(text)
        except ValueError:
            logger.debug(f"Unparseable date string: {text!r}")
            return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=dt.timezone.utc)
    return _to_ms(parsed)


def utc(
    year: int,
    month: int,
    day: int = 1,
    hours: int = 0,
    minutes: int = 0,
    seconds: int = 0,
    milliseconds: int = 0,
) -> int:
    """Epoch milliseconds for UTC calendar components (``month`` is 0-based)."""
    return _compose(
        year, month, day, hours, minutes, seconds, milliseconds, dt.timezone.utc
    )


# =============================================================================
# JSDate
# =============================================================================


@functools.total_ordering
class JSDate:
    """A mutable instant with JavaScript ``Date`` accessors.

    Attributes:
        tz: Time zone used by the local-calendar accessors, or None for the
            system time zone.
    """

    def __init__(
        self, milliseconds: tp.Optional[float] = None, tz: tp.Optional[dt.tzinfo] = None
    ):
        """Create a date at ``milliseconds`` since the epoch, or now.

        Args:
            milliseconds: Epoch milliseconds; fractions are truncated. Defaults
                to the current time.
            tz: Local time zone; defaults to ``settings.TIMEZONE``.

        Raises:
            ValueError: If the value lies outside the representable range.
        """
        self.tz = tz if tz is not None else settings.tzinfo
        self._ms = now() if milliseconds is None else _time_clip(milliseconds)

    @classmethod
    def from_string(
        cls, text: str, tz: tp.Optional[dt.tzinfo] = None
    ) -> tp.Optional["JSDate"]:
        """Parse ``text`` (see :func:`parse`); None when unparseable."""
        ms = parse(text)
        return None if ms is None else cls(ms, tz=tz)

    @classmethod
    def from_components(
        cls,
        year: int,
        month: int,
        day: int = 1,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        tz: tp.Optional[dt.tzinfo] = None,
    ) -> "JSDate":
        """Create a date from local-calendar components (``month`` is 0-based)."""
        date = cls(0, tz=tz)
        date._ms = _compose(
            year, month, day, hours, minutes, seconds, milliseconds, date.tz
        )
        return date

    @classmethod
    def from_datetime(
        cls, value: dt.datetime, tz: tp.Optional[dt.tzinfo] = None
    ) -> "JSDate":
        """Create a date from a ``datetime``; naive values are read as local time."""
        date = cls(0, tz=tz)
        if value.tzinfo is None:
            value = value.replace(tzinfo=date.tz) if date.tz else value.astimezone()
        date._ms = _to_ms(value)
        return date

    # -------------------------------------------------------------------------
    # Calendar views
    # -------------------------------------------------------------------------

    def _calendar(self, in_utc: bool) -> dt.datetime:
        moment = _to_datetime(self._ms)
        if in_utc:
            return moment
        return moment.astimezone(self.tz) if self.tz else moment.astimezone()

    def _set(self, in_utc: bool, **changes: tp.Optional[int]) -> int:
        d = self._calendar(in_utc)
        fields = {
            "year": d.year,
            "month": d.month - 1,
            "day": d.day,
            "hours": d.hour,
            "minutes": d.minute,
            "seconds": d.second,
            "milliseconds": d.microsecond // 1000,
        }
        fields.update({k: v for k, v in changes.items() if v is not None})
        tz = dt.timezone.utc if in_utc else self.tz
        self._ms = _compose(**fields, tz=tz)
        return self._ms

    # -------------------------------------------------------------------------
    # Getters
    # -------------------------------------------------------------------------

    def get_time(self) -> int:
        return self._ms

    def value_of(self) -> int:
        return self._ms

    def get_timezone_offset(self) -> int:
        """Minutes to add to local time to get UTC (negative east of Greenwich)."""
        offset = self._calendar(False).utcoffset() or dt.timedelta(0)
        return -int(offset.total_seconds() // 60)

    def get_full_year(self) -> int:
        return self._calendar(False).year

    def get_month(self) -> int:
        return self._calendar(False).month - 1

    def get_date(self) -> int:
        return self._calendar(False).day

    def get_day(self) -> int:
        return (self._calendar(False).weekday() + 1) % 7

    def get_hours(self) -> int:
        return self._calendar(False).hour

    def get_minutes(self) -> int:
        return self._calendar(False).minute

    def get_seconds(self) -> int:
        return self._calendar(False).second

    def get_milliseconds(self) -> int:
        return self._calendar(False).microsecond // 1000

    def get_utc_full_year(self) -> int:
        return self._calendar(True).year

    def get_utc_month(self) -> int:
        return self._calendar(True).month - 1

    def get_utc_date(self) -> int:
        return self._calendar(True).day

    def get_utc_day(self) -> int:
        return (self._calendar(True).weekday() + 1) % 7

    def get_utc_hours(self) -> int:
        return self._calendar(True).hour

    def get_utc_minutes(self) -> int:
        return self._calendar(True).minute

    def get_utc_seconds(self) -> int:
        return self._calendar(True).second

    def get_utc_milliseconds(self) -> int:
        return self._calendar(True).microsecond // 1000

    # -------------------------------------------------------------------------
    # Setters
    # -------------------------------------------------------------------------

    def set_time(self, milliseconds: float) -> int:
        self._ms = _time_clip(milliseconds)
        return self._ms

    def set_full_year(
        self, year: int, month: tp.Optional[int] = None, day: tp.Optional[int] = None
    ) -> int:
        return self._set(False, year=year, month=month, day=day)

    def set_month(self, month: int, day: tp.Optional[int] = None) -> int:
        return self._set(False, month=month, day=day)

    def set_date(self, day: int) -> int:
        return self._set(False, day=day)

    def set_hours(
        self,
        hours: int,
        minutes: tp.Optional[int] = None,
        seconds: tp.Optional[int] = None,
        milliseconds: tp.Optional[int] = None,
    ) -> int:
        return self._set(
            False,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            milliseconds=milliseconds,
        )

    def set_minutes(
        self,
        minutes: int,
        seconds: tp.Optional[int] = None,
        milliseconds: tp.Optional[int] = None,
    ) -> int:
        return self._set(
            False, minutes=minutes, seconds=seconds, milliseconds=milliseconds
        )

    def set_seconds(self, seconds: int, milliseconds: tp.Optional[int] = None) -> int:
        return self._set(False, seconds=seconds, milliseconds=milliseconds)

    def set_milliseconds(self, milliseconds: int) -> int:
        return self._set(False, milliseconds=milliseconds)

    def set_utc_full_year(
        self, year: int, month: tp.Optional[int] = None, day: tp.Optional[int] = None
    ) -> int:
        return self._set(True, year=year, month=month, day=day)

    def set_utc_month(self, month: int, day: tp.Optional[int] = None) -> int:
        return self._set(True, month=month, day=day)

    def set_utc_date(self, day: int) -> int:
        return self._set(True, day=day)

    def set_utc_hours(
        self,
        hours: int,
        minutes: tp.Optional[int] = None,
        seconds: tp.Optional[int] = None,
        milliseconds: tp.Optional[int] = None,
    ) -> int:
        return self._set(
            True,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            milliseconds=milliseconds,
        )

    def set_utc_minutes(
        self,
        minutes: int,
        seconds: tp.Optional[int] = None,
        milliseconds: tp.Optional[int] = None,
    ) -> int:
        return self._set(
            True, minutes=minutes, seconds=seconds, milliseconds=milliseconds
        )

    def set_utc_seconds(
        self, seconds: int, milliseconds: tp.Optional[int] = None
    ) -> int:
        return self._set(True, seconds=seconds, milliseconds=milliseconds)

    def set_utc_milliseconds(self, milliseconds: int) -> int:
        return self._set(True, milliseconds=milliseconds)

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def to_iso_string(self) -> str:
        """ISO-8601 in UTC with millisecond precision, e.g. ``2023-05-15T06:30:45.500Z``."""
        d = self._calendar(True)
        return (
            f"{d.year:04d}-{d.month:02d}-{d.day:02d}"
            f"T{d.hour:02d}:{d.minute:02d}:{d.second:02d}"
            f".{d.microsecond // 1000:03d}Z"
        )

    def to_json(self) -> str:
        return self.to_iso_string()

    def to_utc_string(self) -> str:
        """RFC-1123 layout, e.g. ``Mon, 15 May 2023 06:30:45 GMT``."""
        return format_datetime(self._calendar(True), usegmt=True)

    def to_date_string(self) -> str:
        """Local date, e.g. ``Mon May 15 2023``."""
        d = self._calendar(False)
        return (
            f"{_DAY_NAMES[(d.weekday() + 1) % 7]} {_MONTH_NAMES[d.month - 1]}"
            f" {d.day:02d} {d.year:04d}"
        )

    def to_time_string(self) -> str:
        """Local time with offset, e.g. ``14:30:45 GMT+0800 (CST)``."""
        d = self._calendar(False)
        offset = -self.get_timezone_offset()
        sign = "+" if offset >= 0 else "-"
        hh, mm = divmod(abs(offset), 60)
        return (
            f"{d.hour:02d}:{d.minute:02d}:{d.second:02d}"
            f" GMT{sign}{hh:02d}{mm:02d} ({d.tzname()})"
        )

    def to_string(self) -> str:
        return f"{self.to_date_string()} {self.to_time_string()}"

    def to_datetime(self, in_utc: bool = False) -> dt.datetime:
        """Aware ``datetime`` for this instant, in local time or UTC."""
        return self._calendar(in_utc)

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JSDate):
            return NotImplemented
        return self._ms == other._ms

    def __lt__(self, other: "JSDate") -> bool:
        if not isinstance(other, JSDate):
            return NotImplemented
        return self._ms < other._ms

    def __repr__(self) -> str:
        return f"JSDate({self.to_iso_string()!r})"

    def __str__(self) -> str:
        return self.to_string()
