"""ISO 8601 text to plain numeric fields.

The functions here only check the *shape* of the text. Whether the numbers
form a valid date, time or offset is up to the constructors that receive
them, so that the same validation (and errors) apply to both paths.
"""

from __future__ import annotations

import re
from typing import NoReturn, Optional

from ._common import DateTimeParseError, Nanos

_DATE_RE = r"([+-]\d{4,10}|\d{4})-(\d{2})-(\d{2})"
_TIME_RE = r"(\d{2}):(\d{2})(?::(\d{2})(?:\.(\d{1,9}))?)?"
_OFFSET_RE = r"(Z|[+-]\d{2}:\d{2}(?::\d{2})?)"
# Anything that can reasonably be a zone ID; the zone lookup validates it
_ZONE_RE = r"\[([^\[\]]{1,100})\]"

_match_date = re.compile(_DATE_RE, re.ASCII).fullmatch
_match_time = re.compile(_TIME_RE, re.ASCII).fullmatch
_match_local = re.compile(_DATE_RE + "T" + _TIME_RE, re.ASCII).fullmatch
_match_offset_time = re.compile(_TIME_RE + _OFFSET_RE, re.ASCII).fullmatch
_match_offset_dt = re.compile(
    _DATE_RE + "T" + _TIME_RE + _OFFSET_RE, re.ASCII
).fullmatch
_match_zoned = re.compile(
    _DATE_RE + "T" + _TIME_RE + _OFFSET_RE + "(?:" + _ZONE_RE + ")?", re.ASCII
).fullmatch
_match_instant = re.compile(
    _DATE_RE + "T" + _TIME_RE + "Z", re.ASCII | re.IGNORECASE
).fullmatch
_match_yearmonth = re.compile(r"([+-]\d{4,10}|\d{4})-(\d{2})", re.ASCII).fullmatch
_match_monthday = re.compile(r"--(\d{2})-(\d{2})", re.ASCII).fullmatch
_match_offset_id = re.compile(
    r"([+-])(\d{1,2})(?:(:?)(\d{2})(?:\3(\d{2}))?)?", re.ASCII
).fullmatch
_match_duration = re.compile(
    r"([-+]?)P(?:([-+]?\d+)D)?"
    r"(T(?:([-+]?\d+)H)?(?:([-+]?\d+)M)?(?:([-+]?\d+)(?:[.,](\d{0,9}))?S)?)?",
    re.ASCII | re.IGNORECASE,
).fullmatch
_match_period = re.compile(
    r"([-+]?)P(?:([-+]?\d+)Y)?(?:([-+]?\d+)M)?(?:([-+]?\d+)W)?(?:([-+]?\d+)D)?",
    re.ASCII | re.IGNORECASE,
).fullmatch

DateFields = tuple[int, int, int]
TimeFields = tuple[int, int, int, Nanos]


def _parse_err(s: str) -> NoReturn:
    raise DateTimeParseError._for(s) from None


def _parse_nanos(s: Optional[str]) -> Nanos:
    return int(s.ljust(9, "0")) if s else 0


def _year(raw: str, s: str) -> int:
    # More than 4 digits need an explicit sign, 4 digits must not have a '+'
    if raw[0] == "+" and len(raw) == 5:
        _parse_err(s)
    return int(raw)


def _date_groups(groups: tuple, s: str) -> DateFields:
    y, m, d = groups
    return _year(y, s), int(m), int(d)


def _time_groups(groups: tuple) -> TimeFields:
    h, m, sec, frac = groups
    return int(h), int(m), int(sec or 0), _parse_nanos(frac)


def date_from_iso(s: str) -> DateFields:
    if (match := _match_date(s)) is None:
        _parse_err(s)
    return _date_groups(match.groups(), s)


def time_from_iso(s: str) -> TimeFields:
    if (match := _match_time(s)) is None:
        _parse_err(s)
    return _time_groups(match.groups())


def local_from_iso(s: str) -> tuple[DateFields, TimeFields]:
    if (match := _match_local(s)) is None:
        _parse_err(s)
    groups = match.groups()
    return _date_groups(groups[:3], s), _time_groups(groups[3:])


def instant_from_iso(s: str) -> tuple[DateFields, TimeFields]:
    if (match := _match_instant(s)) is None:
        _parse_err(s)
    groups = match.groups()
    return _date_groups(groups[:3], s), _time_groups(groups[3:])


def offset_time_from_iso(s: str) -> tuple[TimeFields, str]:
    if (match := _match_offset_time(s)) is None:
        _parse_err(s)
    groups = match.groups()
    return _time_groups(groups[:4]), groups[4]


def offset_dt_from_iso(s: str) -> tuple[DateFields, TimeFields, str]:
    if (match := _match_offset_dt(s)) is None:
        _parse_err(s)
    groups = match.groups()
    return _date_groups(groups[:3], s), _time_groups(groups[3:7]), groups[7]


def zoned_from_iso(
    s: str,
) -> tuple[DateFields, TimeFields, str, Optional[str]]:
    if (match := _match_zoned(s)) is None:
        _parse_err(s)
    groups = match.groups()
    return (
        _date_groups(groups[:3], s),
        _time_groups(groups[3:7]),
        groups[7],
        groups[8],
    )


def yearmonth_from_iso(s: str) -> tuple[int, int]:
    if (match := _match_yearmonth(s)) is None:
        _parse_err(s)
    y, m = match.groups()
    return _year(y, s), int(m)


def monthday_from_iso(s: str) -> tuple[int, int]:
    if (match := _match_monthday(s)) is None:
        _parse_err(s)
    m, d = match.groups()
    return int(m), int(d)


def offset_from_id(s: str) -> tuple[int, int, int]:
    """Parse an offset ID into signed (hours, minutes, seconds).

    Accepted: ``Z``, ``±h``, ``±hh``, ``±hh:mm``, ``±hhmm``, ``±hh:mm:ss``,
    ``±hhmmss``. A single hour digit is only valid on its own.
    """
    if s == "Z":
        return 0, 0, 0
    if (match := _match_offset_id(s)) is None:
        raise DateTimeParseError(
            f"Invalid ID for ZoneOffset, invalid format: {s}"
        )
    sign, h, _, m, sec = match.groups()
    if len(h) == 1 and m is not None:
        raise DateTimeParseError(
            f"Invalid ID for ZoneOffset, invalid format: {s}"
        )
    factor = -1 if sign == "-" else 1
    return (
        factor * int(h),
        factor * int(m or 0),
        factor * int(sec or 0),
    )


def duration_from_iso(s: str) -> tuple[bool, int, int, int, int, Nanos]:
    """Parse ``PnDTnHnMn.nS`` into (negate, days, hours, minutes, seconds, nanos).

    Each component may carry its own sign. The fraction takes the sign of
    the seconds it belongs to, so ``PT-0.5S`` is minus half a second.
    """
    if (match := _match_duration(s)) is None:
        _parse_err(s)
    sign, days, t_part, hours, minutes, secs, frac = match.groups()
    if t_part is not None and t_part.upper() == "T":
        _parse_err(s)  # a 'T' without any time components
    if days is None and hours is None and minutes is None and secs is None:
        _parse_err(s)
    nanos = _parse_nanos(frac)
    if secs is not None and secs.startswith("-"):
        nanos = -nanos
    return (
        sign == "-",
        int(days or 0),
        int(hours or 0),
        int(minutes or 0),
        int(secs or 0),
        nanos,
    )


def period_from_iso(s: str) -> tuple[bool, int, int, int, int]:
    """Parse ``PnYnMnWnD`` into (negate, years, months, weeks, days)"""
    if (match := _match_period(s)) is None:
        _parse_err(s)
    sign, years, months, weeks, days = match.groups()
    if years is None and months is None and weeks is None and days is None:
        _parse_err(s)
    return (
        sign == "-",
        int(years or 0),
        int(months or 0),
        int(weeks or 0),
        int(days or 0),
    )
