"""Fields and units: the vocabulary shared by all date-time types.

The built-in fields and units are plain enums with no reference back to
the date-time classes. Any other object implementing the
:class:`TemporalField` or :class:`TemporalUnit` interface is an extension:
date-time types ask it to resolve itself.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Any

from ._common import FieldOutOfRange, UnsupportedTemporalType
from ._math import INT_MAX, INT_MIN, LONG_MAX, LONG_MIN

__all__ = [
    "ValueRange",
    "TemporalField",
    "TemporalUnit",
    "ChronoField",
    "ChronoUnit",
]

MIN_YEAR = -999_999_999
MAX_YEAR = 999_999_999


class ValueRange:
    """The range of valid values of a field.

    The minimum and maximum may themselves vary, e.g. the day-of-month
    ranges from 1 to a maximum between 28 and 31.

    Example
    -------
    >>> ValueRange.of(1, 28, 31)
    ValueRange(1 - 28/31)
    """

    __slots__ = ("_min_smallest", "_min_largest", "_max_smallest", "_max_largest")

    def __init__(
        self,
        min_smallest: int,
        min_largest: int,
        max_smallest: int,
        max_largest: int,
    ) -> None:
        if min_smallest > min_largest:
            raise ValueError(
                "Smallest minimum value must be less than largest minimum value"
            )
        if max_smallest > max_largest:
            raise ValueError(
                "Smallest maximum value must be less than largest maximum value"
            )
        if min_largest > max_largest:
            raise ValueError("Minimum value must be less than maximum value")
        self._min_smallest = min_smallest
        self._min_largest = min_largest
        self._max_smallest = max_smallest
        self._max_largest = max_largest

    @classmethod
    def of(
        cls, minimum: int, maximum: int, max_largest: int | None = None
    ) -> ValueRange:
        """A fixed range, or one where only the maximum varies"""
        if max_largest is None:
            return cls(minimum, minimum, maximum, maximum)
        return cls(minimum, minimum, maximum, max_largest)

    @property
    def minimum(self) -> int:
        return self._min_smallest

    @property
    def largest_minimum(self) -> int:
        return self._min_largest

    @property
    def smallest_maximum(self) -> int:
        return self._max_smallest

    @property
    def maximum(self) -> int:
        return self._max_largest

    def is_fixed(self) -> bool:
        return (
            self._min_smallest == self._min_largest
            and self._max_smallest == self._max_largest
        )

    def is_int_value(self) -> bool:
        """Whether all values in the range fit in 32 bits"""
        return self._min_smallest >= INT_MIN and self._max_largest <= INT_MAX

    def is_valid_value(self, value: int) -> bool:
        return self._min_smallest <= value <= self._max_largest

    def is_valid_int_value(self, value: int) -> bool:
        return self.is_int_value() and self.is_valid_value(value)

    def check_valid_value(self, value: int, field: object) -> int:
        if not self.is_valid_value(value):
            raise FieldOutOfRange._for(field, self, value)
        return value

    def check_valid_int_value(self, value: int, field: object) -> int:
        if not self.is_valid_int_value(value):
            raise FieldOutOfRange._for(field, self, value)
        return value

    def __str__(self) -> str:
        s = str(self._min_smallest)
        if self._min_smallest != self._min_largest:
            s += f"/{self._min_largest}"
        s += f" - {self._max_smallest}"
        if self._max_smallest != self._max_largest:
            s += f"/{self._max_largest}"
        return s

    def __repr__(self) -> str:
        return f"ValueRange({self})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueRange):
            return NotImplemented
        return (
            self._min_smallest,
            self._min_largest,
            self._max_smallest,
            self._max_largest,
        ) == (
            other._min_smallest,
            other._min_largest,
            other._max_smallest,
            other._max_largest,
        )

    def __hash__(self) -> int:
        return hash(
            (
                self._min_smallest,
                self._min_largest,
                self._max_smallest,
                self._max_largest,
            )
        )


class TemporalUnit(ABC):
    """A unit of time, such as days or minutes.

    Implement this to define units the date-time types don't know about.
    They delegate ``plus`` and ``until`` to :meth:`add_to` and :meth:`between`.
    """

    duration_seconds: int
    duration_nanos: int

    @abstractmethod
    def is_duration_estimated(self) -> bool: ...

    @abstractmethod
    def is_date_based(self) -> bool: ...

    @abstractmethod
    def is_time_based(self) -> bool: ...

    def is_supported_by(self, temporal: Any) -> bool:
        try:
            temporal.plus(1, self)
        except UnsupportedTemporalType:
            return False
        except (ValueError, OverflowError):
            # may fail at the edge of the range; try the other direction
            try:
                temporal.plus(-1, self)
            except (ValueError, OverflowError):
                return False
        return True

    @abstractmethod
    def add_to(self, temporal: Any, amount: int) -> Any: ...

    @abstractmethod
    def between(self, start: Any, end: Any) -> int: ...


class TemporalField(ABC):
    """A field of date-time, such as month-of-year or minute-of-hour.

    Implement this to define fields the date-time types don't know about.
    They delegate field access to the methods below.
    """

    @abstractmethod
    def range(self) -> ValueRange: ...

    @abstractmethod
    def is_date_based(self) -> bool: ...

    @abstractmethod
    def is_time_based(self) -> bool: ...

    @abstractmethod
    def is_supported_by(self, temporal: Any) -> bool: ...

    @abstractmethod
    def range_refined_by(self, temporal: Any) -> ValueRange: ...

    @abstractmethod
    def get_from(self, temporal: Any) -> int: ...

    @abstractmethod
    def adjust_into(self, temporal: Any, value: int) -> Any: ...


_SECONDS_PER_YEAR = 31_556_952  # 365.2425 days


class ChronoUnit(enum.Enum):
    """The standard set of units.

    Units up to and including ``HALF_DAYS`` are time-based and have an
    exact duration. ``DAYS`` and larger are date-based; their durations are
    estimates (a day may be 23 or 25 hours long in a zone with DST).
    """

    NANOS = ("Nanos", 0, 1)
    MICROS = ("Micros", 0, 1_000)
    MILLIS = ("Millis", 0, 1_000_000)
    SECONDS = ("Seconds", 1, 0)
    MINUTES = ("Minutes", 60, 0)
    HOURS = ("Hours", 3_600, 0)
    HALF_DAYS = ("HalfDays", 43_200, 0)
    DAYS = ("Days", 86_400, 0)
    WEEKS = ("Weeks", 7 * 86_400, 0)
    MONTHS = ("Months", _SECONDS_PER_YEAR // 12, 0)
    YEARS = ("Years", _SECONDS_PER_YEAR, 0)
    DECADES = ("Decades", _SECONDS_PER_YEAR * 10, 0)
    CENTURIES = ("Centuries", _SECONDS_PER_YEAR * 100, 0)
    MILLENNIA = ("Millennia", _SECONDS_PER_YEAR * 1_000, 0)
    ERAS = ("Eras", _SECONDS_PER_YEAR * 1_000_000_000, 0)
    FOREVER = ("Forever", LONG_MAX, 999_999_999)

    def __init__(self, display: str, seconds: int, nanos: int) -> None:
        self.display = display
        self.duration_seconds = seconds
        self.duration_nanos = nanos

    @property
    def total_nanos(self) -> int:
        return self.duration_seconds * 1_000_000_000 + self.duration_nanos

    def is_duration_estimated(self) -> bool:
        return self not in _TIME_UNITS

    def is_date_based(self) -> bool:
        return self not in _TIME_UNITS and self is not ChronoUnit.FOREVER

    def is_time_based(self) -> bool:
        return self in _TIME_UNITS

    def is_supported_by(self, temporal: Any) -> bool:
        return temporal.is_supported(self)

    def add_to(self, temporal: Any, amount: int) -> Any:
        return temporal.plus(amount, self)

    def between(self, start: Any, end: Any) -> int:
        return start.until(end, self)

    def __str__(self) -> str:
        return self.display


_TIME_UNITS = frozenset(
    [
        ChronoUnit.NANOS,
        ChronoUnit.MICROS,
        ChronoUnit.MILLIS,
        ChronoUnit.SECONDS,
        ChronoUnit.MINUTES,
        ChronoUnit.HOURS,
        ChronoUnit.HALF_DAYS,
    ]
)

_U = ChronoUnit


class ChronoField(enum.Enum):
    """The standard set of fields, with their units and fixed ranges"""

    NANO_OF_SECOND = (
        "NanoOfSecond", _U.NANOS, _U.SECONDS, ValueRange.of(0, 999_999_999)
    )
    NANO_OF_DAY = (
        "NanoOfDay", _U.NANOS, _U.DAYS, ValueRange.of(0, 86_400 * 1_000_000_000 - 1)
    )
    MICRO_OF_SECOND = (
        "MicroOfSecond", _U.MICROS, _U.SECONDS, ValueRange.of(0, 999_999)
    )
    MICRO_OF_DAY = (
        "MicroOfDay", _U.MICROS, _U.DAYS, ValueRange.of(0, 86_400 * 1_000_000 - 1)
    )
    MILLI_OF_SECOND = (
        "MilliOfSecond", _U.MILLIS, _U.SECONDS, ValueRange.of(0, 999)
    )
    MILLI_OF_DAY = (
        "MilliOfDay", _U.MILLIS, _U.DAYS, ValueRange.of(0, 86_400 * 1_000 - 1)
    )
    SECOND_OF_MINUTE = (
        "SecondOfMinute", _U.SECONDS, _U.MINUTES, ValueRange.of(0, 59)
    )
    SECOND_OF_DAY = ("SecondOfDay", _U.SECONDS, _U.DAYS, ValueRange.of(0, 86_399))
    MINUTE_OF_HOUR = ("MinuteOfHour", _U.MINUTES, _U.HOURS, ValueRange.of(0, 59))
    MINUTE_OF_DAY = ("MinuteOfDay", _U.MINUTES, _U.DAYS, ValueRange.of(0, 1_439))
    HOUR_OF_AMPM = ("HourOfAmPm", _U.HOURS, _U.HALF_DAYS, ValueRange.of(0, 11))
    CLOCK_HOUR_OF_AMPM = (
        "ClockHourOfAmPm", _U.HOURS, _U.HALF_DAYS, ValueRange.of(1, 12)
    )
    HOUR_OF_DAY = ("HourOfDay", _U.HOURS, _U.DAYS, ValueRange.of(0, 23))
    CLOCK_HOUR_OF_DAY = (
        "ClockHourOfDay", _U.HOURS, _U.DAYS, ValueRange.of(1, 24)
    )
    AMPM_OF_DAY = ("AmPmOfDay", _U.HALF_DAYS, _U.DAYS, ValueRange.of(0, 1))
    DAY_OF_WEEK = ("DayOfWeek", _U.DAYS, _U.WEEKS, ValueRange.of(1, 7))
    ALIGNED_DAY_OF_WEEK_IN_MONTH = (
        "AlignedDayOfWeekInMonth", _U.DAYS, _U.WEEKS, ValueRange.of(1, 7)
    )
    ALIGNED_DAY_OF_WEEK_IN_YEAR = (
        "AlignedDayOfWeekInYear", _U.DAYS, _U.WEEKS, ValueRange.of(1, 7)
    )
    DAY_OF_MONTH = ("DayOfMonth", _U.DAYS, _U.MONTHS, ValueRange.of(1, 28, 31))
    DAY_OF_YEAR = ("DayOfYear", _U.DAYS, _U.YEARS, ValueRange.of(1, 365, 366))
    EPOCH_DAY = (
        "EpochDay",
        _U.DAYS,
        _U.FOREVER,
        ValueRange.of(-365_243_219_162, 365_241_780_471),
    )
    ALIGNED_WEEK_OF_MONTH = (
        "AlignedWeekOfMonth", _U.WEEKS, _U.MONTHS, ValueRange.of(1, 4, 5)
    )
    ALIGNED_WEEK_OF_YEAR = (
        "AlignedWeekOfYear", _U.WEEKS, _U.YEARS, ValueRange.of(1, 53)
    )
    MONTH_OF_YEAR = ("MonthOfYear", _U.MONTHS, _U.YEARS, ValueRange.of(1, 12))
    PROLEPTIC_MONTH = (
        "ProlepticMonth",
        _U.MONTHS,
        _U.FOREVER,
        ValueRange.of(MIN_YEAR * 12, MAX_YEAR * 12 + 11),
    )
    YEAR_OF_ERA = (
        "YearOfEra", _U.YEARS, _U.ERAS, ValueRange.of(1, MAX_YEAR, MAX_YEAR + 1)
    )
    YEAR = ("Year", _U.YEARS, _U.FOREVER, ValueRange.of(MIN_YEAR, MAX_YEAR))
    ERA = ("Era", _U.ERAS, _U.FOREVER, ValueRange.of(0, 1))
    INSTANT_SECONDS = (
        "InstantSeconds", _U.SECONDS, _U.FOREVER, ValueRange.of(LONG_MIN, LONG_MAX)
    )
    OFFSET_SECONDS = (
        "OffsetSeconds", _U.SECONDS, _U.FOREVER, ValueRange.of(-64_800, 64_800)
    )

    def __init__(
        self,
        display: str,
        base_unit: ChronoUnit,
        range_unit: ChronoUnit,
        value_range: ValueRange,
    ) -> None:
        self.display = display
        self.base_unit = base_unit
        self.range_unit = range_unit
        self._range = value_range

    def range(self) -> ValueRange:
        return self._range

    def is_date_based(self) -> bool:
        return self in _DATE_FIELDS

    def is_time_based(self) -> bool:
        return self in _TIME_FIELDS

    def check_valid_value(self, value: int) -> int:
        return self._range.check_valid_value(value, self)

    def check_valid_int_value(self, value: int) -> int:
        return self._range.check_valid_int_value(value, self)

    def is_supported_by(self, temporal: Any) -> bool:
        return temporal.is_supported(self)

    def range_refined_by(self, temporal: Any) -> ValueRange:
        return temporal.range(self)

    def get_from(self, temporal: Any) -> int:
        return temporal.get_long(self)

    def adjust_into(self, temporal: Any, value: int) -> Any:
        return temporal.with_field(self, value)

    def __str__(self) -> str:
        return self.display


_F = ChronoField
_TIME_FIELDS = frozenset(list(_F)[: list(_F).index(_F.DAY_OF_WEEK)])
_DATE_FIELDS = frozenset(
    list(_F)[list(_F).index(_F.DAY_OF_WEEK) : list(_F).index(_F.ERA) + 1]
)

TemporalUnit.register(ChronoUnit)
TemporalField.register(ChronoField)
