# The MIT License (MIT)
#
# Copyright (c) Arie Bovenberg
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

# Maintainer's notes:
#
# - Why are all the value types in one file?
#   - The classes 'know' about each other (a date knows how to become a
#     date-time, a date-time how to become an instant, etc.). Keeping them
#     together prevents circular imports.
#   - The modules they build on (_math, _fields, _tz) never import from here.
# - Integers are arbitrary-size in Python. Where a value has to fit a fixed
#   width (64-bit seconds, 32-bit years and periods), the check is explicit.
# - There is some code duplication in this file. This is intentional:
#   - It makes it easier to understand the code
#   - It saves some overhead
from __future__ import annotations

__version__ = "0.3.0"

import enum
import re
from abc import ABC, abstractmethod
from struct import Struct
from time import time_ns
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    ClassVar,
    Optional,
    TypeVar,
    Union,
    no_type_check,
)

from . import _parse
from ._common import (
    DAYS_0000_TO_1970,
    DAYS_PER_CYCLE,
    HOURS_PER_DAY,
    MICROS_PER_DAY,
    MILLIS_PER_DAY,
    MINUTES_PER_DAY,
    MINUTES_PER_HOUR,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MILLI,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    ArithmeticOverflow,
    DateTimeError,
    DateTimeParseError,
    FieldOutOfRange,
    InstantOutOfRange,
    InvalidDate,
    InvalidOffset,
    SkippedTime,
    UnsupportedTemporalField,
    UnsupportedTemporalType,
    UnsupportedTemporalUnit,
)
from ._fields import (
    MAX_YEAR,
    MIN_YEAR,
    ChronoField,
    ChronoUnit,
    TemporalField,
    TemporalUnit,
    ValueRange,
)
from ._math import (
    add_exact,
    check_long,
    days_in_month,
    is_leap,
    multiply_exact,
    normalize,
    resolve_day_of_month,
    subtract_exact,
    to_int_exact,
    trunc_div,
    trunc_rem,
)
from ._tz import Fold, Gap, TimeZone, get_system_tz, get_tz
from ._tz.timezone import FixedTimeZone

__all__ = [
    # Amounts
    "Duration",
    "Period",
    # Date and time
    "Instant",
    "LocalDate",
    "LocalTime",
    "LocalDateTime",
    "OffsetTime",
    "OffsetDateTime",
    "ZonedDateTime",
    "YearMonth",
    "MonthDay",
    # Zones
    "ZoneId",
    "ZoneOffset",
    "ZoneRegion",
    "ZoneRules",
    "ZoneOffsetTransition",
    "Clock",
    # Enums and constants
    "Month",
    "DayOfWeek",
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "SUNDAY",
    # Binary format
    "serialize",
    "deserialize",
]

_object_new = object.__new__
_T = TypeVar("_T")

_F = ChronoField
_U = ChronoUnit


class _ImmutableBase:
    __slots__ = ()

    # Immutable classes don't need to be copied
    @no_type_check
    def __copy__(self):
        return self

    @no_type_check
    def __deepcopy__(self, _):
        return self


if TYPE_CHECKING:
    from typing import final
else:

    def final(cls):

        def init_subclass_not_allowed(cls, **kwargs):  # pragma: no cover
            raise TypeError("Subclassing not allowed")

        cls.__init_subclass__ = init_subclass_not_allowed
        return cls


class Month(enum.Enum):
    """The months of the year; ``.value`` is the ISO number (1-12)"""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def of(cls, month: int) -> Month:
        """Like ``Month(month)``, but raises :class:`FieldOutOfRange`"""
        return _MONTHS[_F.MONTH_OF_YEAR.check_valid_value(month) - 1]

    def plus(self, months: int) -> Month:
        """Cycle forward, wrapping around from December to January

        Example
        -------
        >>> Month.NOVEMBER.plus(3)
        <Month.FEBRUARY: 2>
        """
        return _MONTHS[(self.value - 1 + months) % 12]

    def minus(self, months: int) -> Month:
        return self.plus(-months)

    def length(self, leap_year: bool) -> int:
        return days_in_month(4 if leap_year else 1, self.value)

    def min_length(self) -> int:
        return days_in_month(1, self.value)

    def max_length(self) -> int:
        return days_in_month(4, self.value)

    def first_day_of_year(self, leap_year: bool) -> int:
        """The day-of-year on which this month starts

        Example
        -------
        >>> Month.MARCH.first_day_of_year(leap_year=True)
        61
        """
        return _DAYS_BEFORE_MONTH[self.value] + (leap_year and self.value > 2) + 1


class DayOfWeek(enum.Enum):
    """The days of the week; ``.value`` corresponds with ISO numbering."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def of(cls, day_of_week: int) -> DayOfWeek:
        return _DAYS_OF_WEEK[_F.DAY_OF_WEEK.check_valid_value(day_of_week) - 1]

    def plus(self, days: int) -> DayOfWeek:
        return _DAYS_OF_WEEK[(self.value - 1 + days) % 7]

    def minus(self, days: int) -> DayOfWeek:
        return self.plus(-days)


MONDAY = DayOfWeek.MONDAY
TUESDAY = DayOfWeek.TUESDAY
WEDNESDAY = DayOfWeek.WEDNESDAY
THURSDAY = DayOfWeek.THURSDAY
FRIDAY = DayOfWeek.FRIDAY
SATURDAY = DayOfWeek.SATURDAY
SUNDAY = DayOfWeek.SUNDAY

_MONTHS = list(Month)
_DAYS_OF_WEEK = list(DayOfWeek)
_DAYS_BEFORE_MONTH = [0, 0]
for _m in range(1, 12):
    _DAYS_BEFORE_MONTH.append(_DAYS_BEFORE_MONTH[-1] + days_in_month(1, _m))
del _m

_TIME_UNITS = frozenset(u for u in _U if u.is_time_based())
_DATE_UNITS = frozenset(u for u in _U if u.is_date_based())
_TIME_FIELDS = frozenset(f for f in _F if f.is_time_based())
_DATE_FIELDS = frozenset(f for f in _F if f.is_date_based())
_INSTANT_FIELDS = frozenset([_F.INSTANT_SECONDS, _F.OFFSET_SECONDS])


def _unit_nanos(unit: TemporalUnit) -> int:
    return unit.duration_seconds * NANOS_PER_SECOND + unit.duration_nanos


def _truncation_nanos(unit: TemporalUnit) -> int:
    """The length of a unit which may be used to truncate a time of day"""
    if unit.duration_seconds > SECONDS_PER_DAY:
        raise UnsupportedTemporalUnit(
            "Unit is too large to be used for truncation"
        )
    dur = _unit_nanos(unit)
    if NANOS_PER_DAY % dur:
        raise UnsupportedTemporalUnit(
            "Unit must divide into a standard day without remainder"
        )
    return dur


def _convert(temporal: Any, cls: type[_T], method: str) -> _T:
    if isinstance(temporal, cls):
        return temporal
    if (conv := getattr(temporal, method, None)) is None:
        raise DateTimeError(
            f"Unable to obtain {cls.__name__} from "
            f"{type(temporal).__name__}: {temporal}"
        )
    return conv()


def _parsed(s: str, build: Callable[..., _T], *args: Any) -> _T:
    """Construct from parsed fields, reporting invalid values as parse errors"""
    try:
        return build(*args)
    except (DateTimeError, ArithmeticOverflow) as e:
        raise DateTimeParseError(
            f"Text {s!r} could not be parsed: {e}"
        ) from e


def _format_year(year: int) -> str:
    if year > 9999:
        return f"+{year}"
    elif year < 0:
        return f"-{-year:04d}"
    return f"{year:04d}"


def _format_fraction(nano: int) -> str:
    if nano == 0:
        return ""
    elif nano % 1_000_000 == 0:
        return f".{nano // 1_000_000:03d}"
    elif nano % 1_000 == 0:
        return f".{nano // 1_000:06d}"
    return f".{nano:09d}"


class _Accessor(_ImmutableBase, ABC):
    """Read access to the fields of a date-time.

    Subclasses list the :class:`ChronoField` members they support and
    implement ``_get_field``. Fields that aren't a ``ChronoField`` are asked
    to resolve themselves.
    """

    __slots__ = ()

    _FIELDS: ClassVar[frozenset[ChronoField]] = frozenset()
    _UNITS: ClassVar[frozenset[ChronoUnit]] = frozenset()

    def is_supported(self, field_or_unit: object) -> bool:
        """Whether the field or unit can be used with this type

        Example
        -------
        >>> LocalDate(2021, 1, 2).is_supported(ChronoField.DAY_OF_WEEK)
        True
        >>> LocalDate(2021, 1, 2).is_supported(ChronoUnit.HOURS)
        False
        """
        if isinstance(field_or_unit, ChronoField):
            return field_or_unit in self._FIELDS
        elif isinstance(field_or_unit, ChronoUnit):
            return field_or_unit in self._UNITS
        elif isinstance(field_or_unit, (TemporalField, TemporalUnit)):
            return field_or_unit.is_supported_by(self)
        return False

    def range(self, field: TemporalField) -> ValueRange:
        """The valid values for the field, refined by this value

        Example
        -------
        >>> LocalDate(2023, 2, 1).range(ChronoField.DAY_OF_MONTH)
        ValueRange(1 - 28)
        """
        if isinstance(field, ChronoField):
            if field in self._FIELDS:
                return self._field_range(field)
            raise UnsupportedTemporalField._for(field)
        return field.range_refined_by(self)

    def _field_range(self, field: ChronoField) -> ValueRange:
        return field.range()

    def get(self, field: TemporalField) -> int:
        """Get the value of a field which fits in 32 bits.

        Use :meth:`get_long` for fields such as ``EPOCH_DAY``.
        """
        value_range = self.range(field)
        if not value_range.is_int_value():
            raise UnsupportedTemporalField(
                f"Invalid field {field} for get() method, "
                "use get_long() instead"
            )
        return value_range.check_valid_value(self.get_long(field), field)

    def get_long(self, field: TemporalField) -> int:
        if isinstance(field, ChronoField):
            if field in self._FIELDS:
                return self._get_field(field)
            raise UnsupportedTemporalField._for(field)
        return field.get_from(self)

    @abstractmethod
    def _get_field(self, field: ChronoField) -> int: ...

    # Ordering, equality and hashing all derive from this key. Two values
    # with equal keys are equal.
    @abstractmethod
    def _cmp_key(self) -> tuple: ...

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._cmp_key() == other._cmp_key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash(self._cmp_key())

    def __lt__(self: _T, other: _T) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._cmp_key() < other._cmp_key()  # type: ignore[attr-defined]

    def __le__(self: _T, other: _T) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._cmp_key() <= other._cmp_key()  # type: ignore[attr-defined]

    def __gt__(self: _T, other: _T) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._cmp_key() > other._cmp_key()  # type: ignore[attr-defined]

    def __ge__(self: _T, other: _T) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._cmp_key() >= other._cmp_key()  # type: ignore[attr-defined]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"


class _Temporal(_Accessor):
    """Field adjustment and unit arithmetic on top of :class:`_Accessor`"""

    __slots__ = ()

    def with_field(self: _T, field: TemporalField, value: int) -> _T:
        """Return a copy with the field set to the given value

        Example
        -------
        >>> LocalDate(2021, 1, 2).with_field(ChronoField.MONTH_OF_YEAR, 5)
        LocalDate(2021-05-02)
        """
        if isinstance(field, ChronoField):
            if field in self._FIELDS:  # type: ignore[attr-defined]
                return self._with_field(field, value)  # type: ignore[attr-defined]
            raise UnsupportedTemporalField._for(field)
        return field.adjust_into(self, value)

    @abstractmethod
    def _with_field(self: _T, field: ChronoField, value: int) -> _T: ...

    def plus(
        self: _T, amount: Any, unit: Optional[TemporalUnit] = None
    ) -> _T:
        """Add an amount of a unit, or a :class:`Duration`/:class:`Period`

        Example
        -------
        >>> t = LocalTime(10, 30)
        >>> t.plus(90, ChronoUnit.MINUTES)
        LocalTime(12:00)
        >>> t.plus(Duration.of_hours(15))
        LocalTime(01:30)
        """
        if unit is None:
            return amount.add_to(self)
        elif isinstance(unit, ChronoUnit):
            if unit in self._UNITS:  # type: ignore[attr-defined]
                return self._plus_unit(amount, unit)  # type: ignore[attr-defined]
            raise UnsupportedTemporalUnit._for(unit)
        return unit.add_to(self, amount)

    @abstractmethod
    def _plus_unit(self: _T, amount: int, unit: ChronoUnit) -> _T: ...

    def minus(
        self: _T, amount: Any, unit: Optional[TemporalUnit] = None
    ) -> _T:
        """Subtract an amount of a unit, or a :class:`Duration`/:class:`Period`"""
        if unit is None:
            return amount.subtract_from(self)
        return self.plus(-amount, unit)  # type: ignore[attr-defined]

    def __add__(self: _T, other: Any) -> _T:
        if isinstance(other, (Duration, Period)):
            return self.plus(other)  # type: ignore[attr-defined]
        return NotImplemented

    def __sub__(self: _T, other: Any) -> _T:
        if isinstance(other, (Duration, Period)):
            return self.minus(other)  # type: ignore[attr-defined]
        return NotImplemented


@final
class Duration(_ImmutableBase):
    """An exact amount of time: seconds plus a fraction in nanoseconds.

    The nanosecond fraction is always positive, also for negative durations.
    Minus one nanosecond is stored as -1 second and 999,999,999 nanoseconds.

    Example
    -------
    >>> d = Duration.of_seconds(3, -999_999_999)
    Duration(PT2.000000001S)
    >>> d.seconds, d.nano
    (2, 1)
    >>> Duration.of_hours(1).plus_minutes(30).to_minutes()
    90
    """

    __slots__ = ("_secs", "_nanos")

    ZERO: ClassVar[Duration]
    """A duration of zero"""

    def __init__(self) -> None:
        raise TypeError(
            "Duration instances cannot be created through the constructor. "
            "Use `Duration.of_seconds` or a similar factory instead."
        )

    @classmethod
    def _create(cls, seconds: int, nanos: int) -> Duration:
        if (seconds | nanos) == 0:
            return _DURATION_ZERO
        self = _object_new(cls)
        self._secs = check_long(seconds)
        self._nanos = nanos
        return self

    @classmethod
    def of_days(cls, days: int) -> Duration:
        """Days of exactly 24 hours"""
        return cls._create(multiply_exact(days, SECONDS_PER_DAY), 0)

    @classmethod
    def of_hours(cls, hours: int) -> Duration:
        return cls._create(multiply_exact(hours, SECONDS_PER_HOUR), 0)

    @classmethod
    def of_minutes(cls, minutes: int) -> Duration:
        return cls._create(multiply_exact(minutes, SECONDS_PER_MINUTE), 0)

    @classmethod
    def of_seconds(cls, seconds: int, nano_adjustment: int = 0) -> Duration:
        """Create from seconds and an adjustment in nanoseconds.

        The adjustment may have any size or sign.

        Example
        -------
        >>> Duration.of_seconds(3, 1) == Duration.of_seconds(4, -999_999_999)
        True
        """
        return cls._create(
            *normalize(seconds, nano_adjustment, NANOS_PER_SECOND)
        )

    @classmethod
    def of_millis(cls, millis: int) -> Duration:
        secs, ms = divmod(millis, 1_000)
        return cls._create(secs, ms * NANOS_PER_MILLI)

    @classmethod
    def of_nanos(cls, nanos: int) -> Duration:
        secs, nos = divmod(nanos, NANOS_PER_SECOND)
        return cls._create(secs, nos)

    @classmethod
    def of(cls, amount: int, unit: TemporalUnit) -> Duration:
        """An amount of a unit with an exact duration, or of days

        Example
        -------
        >>> Duration.of(3, ChronoUnit.HALF_DAYS)
        Duration(PT36H)
        """
        return _DURATION_ZERO.plus(amount, unit)

    @classmethod
    def between(cls, start: Any, end: Any) -> Duration:
        """The duration from ``start`` (inclusive) to ``end`` (exclusive).

        Both should be of the same time-based type, e.g. :class:`Instant`
        or :class:`LocalTime`. The result is negative if ``end`` is before
        ``start``.

        Example
        -------
        >>> a = Instant.of_epoch_second(10, 900_000_000)
        >>> b = Instant.of_epoch_second(12, 100_000_000)
        >>> Duration.between(a, b)
        Duration(PT1.2S)
        """
        try:
            return cls.of_nanos(start.until(end, _U.NANOS))
        except (DateTimeError, ArithmeticOverflow):
            # Too many nanoseconds: retry at second precision and add the
            # nanosecond field difference.
            secs = start.until(end, _U.SECONDS)
            try:
                nanos = end.get_long(_F.NANO_OF_SECOND) - start.get_long(
                    _F.NANO_OF_SECOND
                )
                if secs > 0 and nanos < 0:
                    secs += 1
                elif secs < 0 and nanos > 0:
                    secs -= 1
            except DateTimeError:
                nanos = 0
            return cls.of_seconds(secs, nanos)

    @classmethod
    def parse(cls, s: str, /) -> Duration:
        """Parse the ``PnDTnHnMn.nS`` format.

        Inverse of :meth:`__str__`. Each component may have its own sign,
        and the whole may be negated with a leading minus sign.

        Example
        -------
        >>> Duration.parse("PT8H6M12.345S")
        Duration(PT8H6M12.345S)
        >>> Duration.parse("-PT1M-5S")
        Duration(PT-55S)
        """
        negate, days, hours, minutes, secs, nanos = _parse.duration_from_iso(s)
        try:
            total = add_exact(
                multiply_exact(days, SECONDS_PER_DAY),
                add_exact(
                    multiply_exact(hours, SECONDS_PER_HOUR),
                    add_exact(
                        multiply_exact(minutes, SECONDS_PER_MINUTE),
                        check_long(secs),
                    ),
                ),
            )
            result = cls.of_seconds(total, nanos)
            return result.negated() if negate else result
        except ArithmeticOverflow as e:
            raise DateTimeParseError(
                f"Text cannot be parsed to a Duration: overflow: {s!r}"
            ) from e

    @property
    def seconds(self) -> int:
        """The whole seconds, which may be negative"""
        return self._secs

    @property
    def nano(self) -> int:
        """The nanosecond fraction, always within 0-999,999,999"""
        return self._nanos

    @property
    def units(self) -> list[ChronoUnit]:
        return [_U.SECONDS, _U.NANOS]

    def get(self, unit: TemporalUnit) -> int:
        if unit is _U.SECONDS:
            return self._secs
        elif unit is _U.NANOS:
            return self._nanos
        raise UnsupportedTemporalUnit._for(unit)

    def is_zero(self) -> bool:
        return (self._secs | self._nanos) == 0

    def is_negative(self) -> bool:
        return self._secs < 0

    def with_seconds(self, seconds: int) -> Duration:
        return Duration._create(seconds, self._nanos)

    def with_nanos(self, nano_of_second: int) -> Duration:
        _F.NANO_OF_SECOND.check_valid_int_value(nano_of_second)
        return Duration._create(self._secs, nano_of_second)

    def plus(
        self, amount: Union[Duration, int], unit: Optional[TemporalUnit] = None
    ) -> Duration:
        """Add another duration, or an amount of an exact unit.

        Days count as exactly 24 hours. Other units with an estimated
        duration (months, years) are not supported.

        Example
        -------
        >>> Duration.of_hours(1).plus(Duration.of_minutes(30))
        Duration(PT1H30M)
        >>> Duration.of_hours(1).plus(2, ChronoUnit.DAYS)
        Duration(PT49H)
        """
        if unit is None:
            if not isinstance(amount, Duration):
                raise TypeError(f"Expected Duration, got {type(amount)!r}")
            return self._plus(amount._secs, amount._nanos)
        if unit is _U.DAYS:
            return self._plus(multiply_exact(amount, SECONDS_PER_DAY), 0)
        if unit.is_duration_estimated():
            raise UnsupportedTemporalUnit(
                "Unit must not have an estimated duration"
            )
        if amount == 0:
            return self
        if isinstance(unit, ChronoUnit):
            if unit is _U.NANOS:
                return self.plus_nanos(amount)
            elif unit is _U.MICROS:
                return self.plus_seconds(
                    (amount // (1_000_000 * 1_000)) * 1_000
                ).plus_nanos((amount % (1_000_000 * 1_000)) * 1_000)
            elif unit is _U.MILLIS:
                return self.plus_millis(amount)
            elif unit is _U.SECONDS:
                return self.plus_seconds(amount)
            return self.plus_seconds(
                multiply_exact(unit.duration_seconds, amount)
            )
        scaled = Duration._create(
            unit.duration_seconds, unit.duration_nanos
        ).multiplied_by(amount)
        return self.plus_seconds(scaled._secs).plus_nanos(scaled._nanos)

    def minus(
        self, amount: Union[Duration, int], unit: Optional[TemporalUnit] = None
    ) -> Duration:
        if unit is None:
            if not isinstance(amount, Duration):
                raise TypeError(f"Expected Duration, got {type(amount)!r}")
            return self._plus(-amount._secs, -amount._nanos)
        return self.plus(-amount, unit)

    def plus_days(self, days: int) -> Duration:
        return self._plus(multiply_exact(days, SECONDS_PER_DAY), 0)

    def plus_hours(self, hours: int) -> Duration:
        return self._plus(multiply_exact(hours, SECONDS_PER_HOUR), 0)

    def plus_minutes(self, minutes: int) -> Duration:
        return self._plus(multiply_exact(minutes, SECONDS_PER_MINUTE), 0)

    def plus_seconds(self, seconds: int) -> Duration:
        return self._plus(seconds, 0)

    def plus_millis(self, millis: int) -> Duration:
        return self._plus(millis // 1_000, (millis % 1_000) * NANOS_PER_MILLI)

    def plus_nanos(self, nanos: int) -> Duration:
        return self._plus(0, nanos)

    def minus_days(self, days: int) -> Duration:
        return self.plus_days(-days)

    def minus_hours(self, hours: int) -> Duration:
        return self.plus_hours(-hours)

    def minus_minutes(self, minutes: int) -> Duration:
        return self.plus_minutes(-minutes)

    def minus_seconds(self, seconds: int) -> Duration:
        return self.plus_seconds(-seconds)

    def minus_millis(self, millis: int) -> Duration:
        return self.plus_millis(-millis)

    def minus_nanos(self, nanos: int) -> Duration:
        return self.plus_nanos(-nanos)

    def _plus(self, seconds: int, nanos: int) -> Duration:
        if (seconds | nanos) == 0:
            return self
        carry, nanos = divmod(nanos, NANOS_PER_SECOND)
        secs = add_exact(add_exact(self._secs, seconds), carry)
        return Duration.of_seconds(secs, self._nanos + nanos)

    def _total_nanos(self) -> int:
        return self._secs * NANOS_PER_SECOND + self._nanos

    def multiplied_by(self, multiplicand: int) -> Duration:
        """Scale by an integer, failing if the result doesn't fit.

        Example
        -------
        >>> Duration.of_millis(-1_500).multiplied_by(3)
        Duration(PT-4.5S)
        """
        if multiplicand == 0:
            return _DURATION_ZERO
        elif multiplicand == 1:
            return self
        return Duration.of_nanos(self._total_nanos() * multiplicand)

    def divided_by(self, divisor: int) -> Duration:
        """Divide by an integer, truncating toward zero.

        Note that this rounds differently from the (floor-based)
        normalization of the nanosecond fraction.

        Example
        -------
        >>> Duration.of_nanos(-7).divided_by(2)
        Duration(PT-0.000000003S)
        """
        if divisor == 0:
            raise ZeroDivisionError("Cannot divide by zero")
        elif divisor == 1:
            return self
        return Duration.of_nanos(trunc_div(self._total_nanos(), divisor))

    def negated(self) -> Duration:
        return self.multiplied_by(-1)

    def abs(self) -> Duration:
        return self.negated() if self.is_negative() else self

    def add_to(self, temporal: _T) -> _T:
        """Add this duration to a date-time, as seconds and nanos"""
        if self._secs:
            temporal = temporal.plus(self._secs, _U.SECONDS)  # type: ignore[attr-defined]
        if self._nanos:
            temporal = temporal.plus(self._nanos, _U.NANOS)  # type: ignore[attr-defined]
        return temporal

    def subtract_from(self, temporal: _T) -> _T:
        if self._secs:
            temporal = temporal.minus(self._secs, _U.SECONDS)  # type: ignore[attr-defined]
        if self._nanos:
            temporal = temporal.minus(self._nanos, _U.NANOS)  # type: ignore[attr-defined]
        return temporal

    def to_days(self) -> int:
        """Whole days of 24 hours, truncated toward zero"""
        return trunc_div(self._secs, SECONDS_PER_DAY)

    def to_hours(self) -> int:
        return trunc_div(self._secs, SECONDS_PER_HOUR)

    def to_minutes(self) -> int:
        return trunc_div(self._secs, SECONDS_PER_MINUTE)

    def to_millis(self) -> int:
        return add_exact(
            multiply_exact(self._secs, 1_000), self._nanos // NANOS_PER_MILLI
        )

    def to_nanos(self) -> int:
        return add_exact(
            multiply_exact(self._secs, NANOS_PER_SECOND), self._nanos
        )

    def __str__(self) -> str:
        """Format as ``PTnHnMn.nS``.

        A negative fractional second is shown as such: minus half a second
        is ``PT-0.5S``, not ``PT-1.5S`` as the stored fields might suggest.
        """
        if self.is_zero():
            return "PT0S"
        nanos = self._nanos
        borrow = self._secs < 0 and nanos > 0
        # a borrowed second belongs to the fraction, not to the larger units
        total = self._secs + 1 if borrow else self._secs
        hours = trunc_div(total, SECONDS_PER_HOUR)
        minutes = trunc_div(trunc_rem(total, SECONDS_PER_HOUR), 60)
        secs = trunc_rem(total, SECONDS_PER_MINUTE)
        parts = ["PT"]
        if hours:
            parts.append(f"{hours}H")
        if minutes:
            parts.append(f"{minutes}M")
        if secs == 0 and nanos == 0 and len(parts) > 1:
            return "".join(parts)
        if borrow:
            parts.append("-0" if secs == 0 else str(secs))
            fraction = 2 * NANOS_PER_SECOND - nanos
        else:
            parts.append(str(secs))
            fraction = NANOS_PER_SECOND + nanos
        if nanos > 0:
            parts.append("." + str(fraction)[1:].rstrip("0"))
        parts.append("S")
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Duration({self})"

    def __eq__(self, other: object) -> bool:
        """Compare for equality

        Example
        -------
        >>> Duration.of_seconds(2, 1_000_000_001) == Duration.of_seconds(3, 1)
        True
        """
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._secs, self._nanos) == (other._secs, other._nanos)

    def __hash__(self) -> int:
        return hash((self._secs, self._nanos))

    def __lt__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._secs, self._nanos) < (other._secs, other._nanos)

    def __le__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._secs, self._nanos) <= (other._secs, other._nanos)

    def __gt__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._secs, self._nanos) > (other._secs, other._nanos)

    def __ge__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._secs, self._nanos) >= (other._secs, other._nanos)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __neg__(self) -> Duration:
        return self.negated()

    def __pos__(self) -> Duration:
        return self

    def __abs__(self) -> Duration:
        return self.abs()

    def __add__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, other: int) -> Duration:
        if not isinstance(other, int):
            return NotImplemented
        return self.multiplied_by(other)

    __rmul__ = __mul__

    def _write(self) -> bytes:
        return _SECS_NANOS.pack(self._secs, self._nanos)

    @classmethod
    def _read(cls, r: _Reader) -> Duration:
        return cls.of_seconds(*r.read(_SECS_NANOS))

    @no_type_check
    def __reduce__(self):
        return _unpkl_dur, (self._write(),)


# A separate unpickling function allows us to make backwards-compatible changes
# to the pickling format in the future
@no_type_check
def _unpkl_dur(data: bytes) -> Duration:
    return Duration._read(_Reader(data))


_DURATION_ZERO = _object_new(Duration)
_DURATION_ZERO._secs = 0
_DURATION_ZERO._nanos = 0
Duration.ZERO = _DURATION_ZERO


@final
class Instant(_Temporal):
    """A point on the UTC time-line, with nanosecond precision.

    Stored as seconds since 1970-01-01T00:00:00Z plus a nanosecond
    fraction. The range spans years -1,000,000,000 to 1,000,000,000.

    Example
    -------
    >>> Instant.of_epoch_second(1_700_000_000)
    Instant(2023-11-14T22:13:20Z)
    >>> _.plus(90, ChronoUnit.MINUTES).epoch_second
    1700005400
    """

    __slots__ = ("_secs", "_nanos")

    MIN_SECOND: ClassVar[int] = -31557014167219200
    MAX_SECOND: ClassVar[int] = 31556889864403199

    EPOCH: ClassVar[Instant]
    """1970-01-01T00:00:00Z"""
    MIN: ClassVar[Instant]
    """The minimum representable instant"""
    MAX: ClassVar[Instant]
    """The maximum representable instant"""

    _FIELDS = frozenset(
        [
            _F.NANO_OF_SECOND,
            _F.MICRO_OF_SECOND,
            _F.MILLI_OF_SECOND,
            _F.INSTANT_SECONDS,
        ]
    )
    _UNITS = _TIME_UNITS | {_U.DAYS}

    def __init__(self) -> None:
        raise TypeError(
            "Instant instances cannot be created through the constructor. "
            "Use `Instant.of_epoch_second` or `Instant.now` instead."
        )

    @classmethod
    def _create(cls, seconds: int, nanos: int) -> Instant:
        if not cls.MIN_SECOND <= seconds <= cls.MAX_SECOND:
            raise InstantOutOfRange(
                "Instant exceeds minimum or maximum instant"
            )
        self = _object_new(cls)
        self._secs = seconds
        self._nanos = nanos
        return self

    @classmethod
    def now(cls, clock: Optional[Clock] = None) -> Instant:
        """The current instant, from the system clock by default"""
        return (clock or _SYSTEM_UTC_CLOCK).instant()

    @classmethod
    def of_epoch_second(cls, epoch_second: int, nano_adjustment: int = 0) -> Instant:
        """Create from seconds since the epoch and an adjustment in nanoseconds.

        The adjustment may have any size or sign.

        Example
        -------
        >>> Instant.of_epoch_second(3, -1)
        Instant(1970-01-01T00:00:02.999999999Z)
        """
        return cls._create(
            *normalize(epoch_second, nano_adjustment, NANOS_PER_SECOND)
        )

    @classmethod
    def of_epoch_milli(cls, epoch_milli: int) -> Instant:
        secs, ms = divmod(epoch_milli, 1_000)
        return cls._create(secs, ms * NANOS_PER_MILLI)

    @classmethod
    def _from(cls, temporal: Any) -> Instant:
        if isinstance(temporal, Instant):
            return temporal
        try:
            return cls.of_epoch_second(
                temporal.get_long(_F.INSTANT_SECONDS),
                temporal.get(_F.NANO_OF_SECOND),
            )
        except (AttributeError, UnsupportedTemporalType):
            raise DateTimeError(
                f"Unable to obtain Instant from "
                f"{type(temporal).__name__}: {temporal}"
            ) from None

    @classmethod
    def parse(cls, s: str, /) -> Instant:
        """Parse the format produced by :meth:`__str__`

        Example
        -------
        >>> Instant.parse("2023-11-14T22:13:20.5Z")
        Instant(2023-11-14T22:13:20.500Z)
        """
        date_fields, time_fields = _parse.instant_from_iso(s)
        return _parsed(
            s,
            lambda: LocalDateTime(*date_fields, *time_fields)._to_instant(
                _OFFSET_UTC
            ),
        )

    @property
    def epoch_second(self) -> int:
        return self._secs

    @property
    def nano(self) -> int:
        return self._nanos

    def _get_field(self, field: ChronoField) -> int:
        if field is _F.NANO_OF_SECOND:
            return self._nanos
        elif field is _F.MICRO_OF_SECOND:
            return self._nanos // 1_000
        elif field is _F.MILLI_OF_SECOND:
            return self._nanos // NANOS_PER_MILLI
        return self._secs

    def _with_field(self, field: ChronoField, value: int) -> Instant:
        field.check_valid_value(value)
        if field is _F.INSTANT_SECONDS:
            return self if value == self._secs else Instant._create(value, self._nanos)
        elif field is _F.MILLI_OF_SECOND:
            nanos = value * NANOS_PER_MILLI
        elif field is _F.MICRO_OF_SECOND:
            nanos = value * 1_000
        else:
            nanos = value
        return self if nanos == self._nanos else Instant._create(self._secs, nanos)

    def _plus_unit(self, amount: int, unit: ChronoUnit) -> Instant:
        if unit is _U.NANOS:
            return self.plus_nanos(amount)
        elif unit is _U.MICROS:
            return self._plus(amount // 1_000_000, (amount % 1_000_000) * 1_000)
        elif unit is _U.MILLIS:
            return self.plus_millis(amount)
        return self.plus_seconds(multiply_exact(amount, unit.duration_seconds))

    def plus_seconds(self, seconds: int) -> Instant:
        return self._plus(seconds, 0)

    def plus_millis(self, millis: int) -> Instant:
        return self._plus(millis // 1_000, (millis % 1_000) * NANOS_PER_MILLI)

    def plus_nanos(self, nanos: int) -> Instant:
        return self._plus(0, nanos)

    def minus_seconds(self, seconds: int) -> Instant:
        return self.plus_seconds(-seconds)

    def minus_millis(self, millis: int) -> Instant:
        return self.plus_millis(-millis)

    def minus_nanos(self, nanos: int) -> Instant:
        return self.plus_nanos(-nanos)

    def _plus(self, seconds: int, nanos: int) -> Instant:
        if (seconds | nanos) == 0:
            return self
        carry, nanos = divmod(nanos, NANOS_PER_SECOND)
        secs = add_exact(add_exact(self._secs, seconds), carry)
        return Instant.of_epoch_second(secs, self._nanos + nanos)

    def truncated_to(self, unit: TemporalUnit) -> Instant:
        """Truncate to a unit which divides a day evenly

        Example
        -------
        >>> Instant.parse("2023-11-14T22:13:20.5Z").truncated_to(ChronoUnit.HOURS)
        Instant(2023-11-14T22:00:00Z)
        """
        if unit is _U.NANOS:
            return self
        dur = _truncation_nanos(unit)
        nod = trunc_rem(self._secs, SECONDS_PER_DAY) * NANOS_PER_SECOND + self._nanos
        result = (nod // dur) * dur
        return self.plus_nanos(result - nod)

    def until(self, end: Any, unit: TemporalUnit) -> int:
        """The whole amount of the unit until ``end``, truncated toward zero"""
        end = Instant._from(end)
        if isinstance(unit, ChronoUnit):
            if unit is _U.NANOS:
                return self._nanos_until(end)
            elif unit is _U.MICROS:
                return trunc_div(self._nanos_until(end), 1_000)
            elif unit is _U.MILLIS:
                return subtract_exact(end.to_epoch_milli(), self.to_epoch_milli())
            elif unit in self._UNITS:
                return trunc_div(self._seconds_until(end), unit.duration_seconds)
            raise UnsupportedTemporalUnit._for(unit)
        return unit.between(self, end)

    def _nanos_until(self, end: Instant) -> int:
        secs_diff = subtract_exact(end._secs, self._secs)
        return add_exact(
            multiply_exact(secs_diff, NANOS_PER_SECOND), end._nanos - self._nanos
        )

    def _seconds_until(self, end: Instant) -> int:
        secs_diff = subtract_exact(end._secs, self._secs)
        nanos_diff = end._nanos - self._nanos
        if secs_diff > 0 and nanos_diff < 0:
            secs_diff -= 1
        elif secs_diff < 0 and nanos_diff > 0:
            secs_diff += 1
        return secs_diff

    def to_epoch_milli(self) -> int:
        return add_exact(
            multiply_exact(self._secs, 1_000), self._nanos // NANOS_PER_MILLI
        )

    def to_instant(self) -> Instant:
        return self

    def at_offset(self, offset: ZoneOffset) -> OffsetDateTime:
        return OffsetDateTime.of_instant(self, offset)

    def at_zone(self, zone: ZoneId) -> ZonedDateTime:
        return ZonedDateTime.of_instant(self, zone)

    def is_after(self, other: Instant) -> bool:
        return self > other

    def is_before(self, other: Instant) -> bool:
        return self < other

    def _cmp_key(self) -> tuple:
        return (self._secs, self._nanos)

    def __str__(self) -> str:
        """Format in ISO 8601 at UTC. Seconds are always shown.

        Example
        -------
        >>> str(Instant.of_epoch_milli(1))
        '1970-01-01T00:00:00.001Z'
        """
        days, secs = divmod(self._secs, SECONDS_PER_DAY)
        # The outermost instants lie beyond the years of LocalDate.
        # Whole 400-year cycles are moved into the year before formatting.
        cycles = trunc_div(days, DAYS_PER_CYCLE)
        d = LocalDate.of_epoch_day(days - cycles * DAYS_PER_CYCLE)
        t = LocalTime._of_nano_of_day(secs * NANOS_PER_SECOND + self._nanos)
        return (
            f"{_format_year(d._year + cycles * 400)}-{d._month:02d}-"
            f"{d._day:02d}T{t._hour:02d}:{t._minute:02d}:{t._second:02d}"
            f"{_format_fraction(t._nano)}Z"
        )

    def _write(self) -> bytes:
        return _SECS_NANOS.pack(self._secs, self._nanos)

    @classmethod
    def _read(cls, r: _Reader) -> Instant:
        return cls.of_epoch_second(*r.read(_SECS_NANOS))

    @no_type_check
    def __reduce__(self):
        return _unpkl_inst, (self._write(),)


@no_type_check
def _unpkl_inst(data: bytes) -> Instant:
    return Instant._read(_Reader(data))


Instant.EPOCH = Instant._create(0, 0)
Instant.MIN = Instant._create(Instant.MIN_SECOND, 0)
Instant.MAX = Instant._create(Instant.MAX_SECOND, 999_999_999)


@final
class LocalDate(_Temporal):
    """A date in the ISO calendar, without a time or zone.

    The proleptic Gregorian calendar is used for all years, including
    year zero and negative years.

    Example
    -------
    >>> d = LocalDate(2021, 1, 31)
    LocalDate(2021-01-31)
    >>> d.plus_months(1)  # clamps to the end of the month
    LocalDate(2021-02-28)
    >>> d.day_of_week()
    <DayOfWeek.SUNDAY: 7>
    """

    __slots__ = ("_year", "_month", "_day")

    MIN: ClassVar[LocalDate]
    """The minimum possible date, -999999999-01-01"""
    MAX: ClassVar[LocalDate]
    """The maximum possible date, +999999999-12-31"""
    EPOCH: ClassVar[LocalDate]
    """1970-01-01"""

    _FIELDS = _DATE_FIELDS
    _UNITS = _DATE_UNITS

    def __init__(self, year: int, month: Union[int, Month], day: int) -> None:
        if isinstance(month, Month):
            month = month.value
        _F.YEAR.check_valid_value(year)
        _F.MONTH_OF_YEAR.check_valid_value(month)
        _F.DAY_OF_MONTH.check_valid_value(day)
        if day > 28 and day > days_in_month(year, month):
            if day == 29:
                raise InvalidDate(
                    f"Invalid date 'February 29' as '{year}' is not a leap year"
                )
            raise InvalidDate(f"Invalid date '{_MONTHS[month - 1].name} {day}'")
        self._year = year
        self._month = month
        self._day = day

    @classmethod
    def _unchecked(cls, year: int, month: int, day: int) -> LocalDate:
        self = _object_new(cls)
        self._year = year
        self._month = month
        self._day = day
        return self

    @classmethod
    def of(cls, year: int, month: Union[int, Month], day: int) -> LocalDate:
        """Create a date, rejecting day-of-month values invalid for the month.

        Example
        -------
        >>> LocalDate.of(2023, 2, 29)
        Traceback (most recent call last):
          ...
        InvalidDate: Invalid date 'February 29' as '2023' is not a leap year
        """
        return cls(year, month, day)

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> LocalDate:
        """Create from a year and day-of-year (1-366)

        Example
        -------
        >>> LocalDate.of_year_day(2024, 60)
        LocalDate(2024-02-29)
        """
        _F.YEAR.check_valid_value(year)
        _F.DAY_OF_YEAR.check_valid_value(day_of_year)
        leap = is_leap(year)
        if day_of_year == 366 and not leap:
            raise InvalidDate(
                f"Invalid date 'DayOfYear 366' as '{year}' is not a leap year"
            )
        month = _MONTHS[(day_of_year - 1) // 31]
        month_end = month.first_day_of_year(leap) + month.length(leap) - 1
        if day_of_year > month_end:
            month = month.plus(1)
        day = day_of_year - month.first_day_of_year(leap) + 1
        return cls._unchecked(year, month.value, day)

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> LocalDate:
        """Create from the number of days since 1970-01-01.

        Example
        -------
        >>> LocalDate.of_epoch_day(-1)
        LocalDate(1969-12-31)
        """
        _F.EPOCH_DAY.check_valid_value(epoch_day)
        zero_day = epoch_day + DAYS_0000_TO_1970
        # Count from 0000-03-01, so the leap day is at the end of each cycle
        zero_day -= 60
        adjust = 0
        if zero_day < 0:
            # Shift into positive territory by whole 400-year cycles
            adjust_cycles = trunc_div(zero_day + 1, DAYS_PER_CYCLE) - 1
            adjust = adjust_cycles * 400
            zero_day += -adjust_cycles * DAYS_PER_CYCLE
        year_est = (400 * zero_day + 591) // DAYS_PER_CYCLE
        doy_est = zero_day - (
            365 * year_est + year_est // 4 - year_est // 100 + year_est // 400
        )
        if doy_est < 0:
            year_est -= 1
            doy_est = zero_day - (
                365 * year_est + year_est // 4 - year_est // 100 + year_est // 400
            )
        year_est += adjust
        march_doy0 = doy_est
        # Months counted from March: 0=March ... 11=February
        march_month0 = (march_doy0 * 5 + 2) // 153
        month = (march_month0 + 2) % 12 + 1
        day = march_doy0 - (march_month0 * 306 + 5) // 10 + 1
        year_est += march_month0 // 10
        return cls._unchecked(_F.YEAR.check_valid_int_value(year_est), month, day)

    @classmethod
    def now(cls, clock_or_zone: Union[Clock, ZoneId, None] = None) -> LocalDate:
        """The current date in the given zone, or the system's zone"""
        clock = _as_clock(clock_or_zone)
        now = clock.instant()
        offset = clock.zone.rules().offset(now)
        return cls.of_epoch_day((now._secs + offset._secs) // SECONDS_PER_DAY)

    @classmethod
    def parse(cls, s: str, /) -> LocalDate:
        """Parse the ``YYYY-MM-DD`` format.

        Years outside 0000-9999 have a sign, e.g. ``+10000-01-01``.

        Example
        -------
        >>> LocalDate.parse("2021-01-02")
        LocalDate(2021-01-02)
        """
        return _parsed(s, cls, *_parse.date_from_iso(s))

    @property
    def year(self) -> int:
        return self._year

    @property
    def month_value(self) -> int:
        return self._month

    @property
    def month(self) -> Month:
        return _MONTHS[self._month - 1]

    @property
    def day_of_month(self) -> int:
        return self._day

    # Alias matching the constructor argument
    day = day_of_month

    def day_of_year(self) -> int:
        return (
            _DAYS_BEFORE_MONTH[self._month]
            + (self._month > 2 and is_leap(self._year))
            + self._day
        )

    def day_of_week(self) -> DayOfWeek:
        return _DAYS_OF_WEEK[(self.to_epoch_day() + 3) % 7]

    def is_leap_year(self) -> bool:
        return is_leap(self._year)

    def length_of_month(self) -> int:
        return days_in_month(self._year, self._month)

    def length_of_year(self) -> int:
        return 366 if is_leap(self._year) else 365

    def to_epoch_day(self) -> int:
        """The number of days since 1970-01-01

        Example
        -------
        >>> LocalDate(2000, 3, 1).to_epoch_day()
        11017
        """
        y = self._year
        m = self._month
        total = 365 * y
        if y >= 0:
            total += (y + 3) // 4 - (y + 99) // 100 + (y + 399) // 400
        else:
            total -= (-y) // 4 - (-y) // 100 + (-y) // 400
        total += (367 * m - 362) // 12
        total += self._day - 1
        if m > 2:
            total -= 1
            if not is_leap(y):
                total -= 1
        return total - DAYS_0000_TO_1970

    def _proleptic_month(self) -> int:
        return self._year * 12 + self._month - 1

    def to_local_date(self) -> LocalDate:
        return self

    def _field_range(self, field: ChronoField) -> ValueRange:
        if field is _F.DAY_OF_MONTH:
            return ValueRange.of(1, self.length_of_month())
        elif field is _F.DAY_OF_YEAR:
            return ValueRange.of(1, self.length_of_year())
        elif field is _F.ALIGNED_WEEK_OF_MONTH:
            short = self._month == 2 and not self.is_leap_year()
            return ValueRange.of(1, 4 if short else 5)
        elif field is _F.YEAR_OF_ERA:
            if self._year <= 0:
                return ValueRange.of(1, MAX_YEAR + 1)
            return ValueRange.of(1, MAX_YEAR)
        return field.range()

    def _get_field(self, field: ChronoField) -> int:
        if field is _F.DAY_OF_WEEK:
            return self.day_of_week().value
        elif field is _F.ALIGNED_DAY_OF_WEEK_IN_MONTH:
            return (self._day - 1) % 7 + 1
        elif field is _F.ALIGNED_DAY_OF_WEEK_IN_YEAR:
            return (self.day_of_year() - 1) % 7 + 1
        elif field is _F.DAY_OF_MONTH:
            return self._day
        elif field is _F.DAY_OF_YEAR:
            return self.day_of_year()
        elif field is _F.EPOCH_DAY:
            return self.to_epoch_day()
        elif field is _F.ALIGNED_WEEK_OF_MONTH:
            return (self._day - 1) // 7 + 1
        elif field is _F.ALIGNED_WEEK_OF_YEAR:
            return (self.day_of_year() - 1) // 7 + 1
        elif field is _F.MONTH_OF_YEAR:
            return self._month
        elif field is _F.PROLEPTIC_MONTH:
            return self._proleptic_month()
        elif field is _F.YEAR_OF_ERA:
            return self._year if self._year >= 1 else 1 - self._year
        elif field is _F.YEAR:
            return self._year
        else:  # ERA
            return 1 if self._year >= 1 else 0

    def _with_field(self, field: ChronoField, value: int) -> LocalDate:
        field.check_valid_value(value)
        if field is _F.DAY_OF_WEEK:
            return self.plus_days(value - self.day_of_week().value)
        elif field in (
            _F.ALIGNED_DAY_OF_WEEK_IN_MONTH,
            _F.ALIGNED_DAY_OF_WEEK_IN_YEAR,
        ):
            return self.plus_days(value - self._get_field(field))
        elif field is _F.DAY_OF_MONTH:
            return self.with_day_of_month(value)
        elif field is _F.DAY_OF_YEAR:
            return self.with_day_of_year(value)
        elif field is _F.EPOCH_DAY:
            return LocalDate.of_epoch_day(value)
        elif field in (_F.ALIGNED_WEEK_OF_MONTH, _F.ALIGNED_WEEK_OF_YEAR):
            return self.plus_weeks(value - self._get_field(field))
        elif field is _F.MONTH_OF_YEAR:
            return self.with_month(value)
        elif field is _F.PROLEPTIC_MONTH:
            return self.plus_months(value - self._proleptic_month())
        elif field is _F.YEAR_OF_ERA:
            return self.with_year(value if self._year >= 1 else 1 - value)
        elif field is _F.YEAR:
            return self.with_year(value)
        else:  # ERA
            return self if self._get_field(_F.ERA) == value else self.with_year(1 - self._year)

    @staticmethod
    def _resolve_previous_valid(year: int, month: int, day: int) -> LocalDate:
        return LocalDate._unchecked(
            year, month, resolve_day_of_month(year, month, day)
        )

    def with_year(self, year: int) -> LocalDate:
        """Change the year, clamping Feb 29 to Feb 28 if needed"""
        if year == self._year:
            return self
        _F.YEAR.check_valid_value(year)
        return self._resolve_previous_valid(year, self._month, self._day)

    def with_month(self, month: int) -> LocalDate:
        """Change the month, clamping the day to the end of the month"""
        if month == self._month:
            return self
        _F.MONTH_OF_YEAR.check_valid_value(month)
        return self._resolve_previous_valid(self._year, month, self._day)

    def with_day_of_month(self, day: int) -> LocalDate:
        """Change the day of the month. Invalid days are rejected."""
        if day == self._day:
            return self
        return LocalDate(self._year, self._month, day)

    def with_day_of_year(self, day_of_year: int) -> LocalDate:
        if day_of_year == self.day_of_year():
            return self
        return LocalDate.of_year_day(self._year, day_of_year)

    def _plus_unit(self, amount: int, unit: ChronoUnit) -> LocalDate:
        if unit is _U.DAYS:
            return self.plus_days(amount)
        elif unit is _U.WEEKS:
            return self.plus_weeks(amount)
        elif unit is _U.MONTHS:
            return self.plus_months(amount)
        elif unit is _U.YEARS:
            return self.plus_years(amount)
        elif unit is _U.DECADES:
            return self.plus_years(multiply_exact(amount, 10))
        elif unit is _U.CENTURIES:
            return self.plus_years(multiply_exact(amount, 100))
        elif unit is _U.MILLENNIA:
            return self.plus_years(multiply_exact(amount, 1_000))
        else:  # ERAS
            return self.with_field(
                _F.ERA, add_exact(self._get_field(_F.ERA), amount)
            )

    def _plus_period(self, period: Period, sign: int = 1) -> LocalDate:
        return self.plus_months(sign * period.to_total_months()).plus_days(
            sign * period.days
        )

    def plus(self, amount: Any, unit: Optional[TemporalUnit] = None) -> LocalDate:
        if unit is None and isinstance(amount, Period):
            return self._plus_period(amount)
        return super().plus(amount, unit)

    def minus(self, amount: Any, unit: Optional[TemporalUnit] = None) -> LocalDate:
        if unit is None and isinstance(amount, Period):
            return self._plus_period(amount, -1)
        return super().minus(amount, unit)

    def plus_years(self, years: int) -> LocalDate:
        """Add years, clamping Feb 29 to Feb 28 in non-leap years

        Example
        -------
        >>> LocalDate(2008, 2, 29).plus_years(1)
        LocalDate(2009-02-28)
        """
        if years == 0:
            return self
        year = _F.YEAR.check_valid_int_value(self._year + years)
        return self._resolve_previous_valid(year, self._month, self._day)

    def plus_months(self, months: int) -> LocalDate:
        """Add months, clamping the day to the end of the resulting month.

        The clamping means the operation can't always be undone:

        >>> LocalDate(2023, 1, 31).plus_months(1)
        LocalDate(2023-02-28)
        >>> _.minus_months(1)
        LocalDate(2023-01-28)
        """
        if months == 0:
            return self
        calc_months = self._proleptic_month() + months
        year = _F.YEAR.check_valid_int_value(calc_months // 12)
        month = calc_months % 12 + 1
        return self._resolve_previous_valid(year, month, self._day)

    def plus_weeks(self, weeks: int) -> LocalDate:
        return self.plus_days(multiply_exact(weeks, 7))

    def plus_days(self, days: int) -> LocalDate:
        if days == 0:
            return self
        return LocalDate.of_epoch_day(add_exact(self.to_epoch_day(), days))

    def minus_years(self, years: int) -> LocalDate:
        return self.plus_years(-years)

    def minus_months(self, months: int) -> LocalDate:
        return self.plus_months(-months)

    def minus_weeks(self, weeks: int) -> LocalDate:
        return self.plus_weeks(-weeks)

    def minus_days(self, days: int) -> LocalDate:
        return self.plus_days(-days)

    def until(self, end: Any, unit: Optional[TemporalUnit] = None) -> Any:
        """The amount of time until another date.

        Without a unit, the result is a :class:`Period` whose years, months
        and days all have the same sign. With a unit, it's the number of
        whole units.

        Example
        -------
        >>> d = LocalDate(2020, 1, 31)
        >>> d.until(LocalDate(2021, 3, 1))
        Period(P1Y1M1D)
        >>> d.until(LocalDate(2021, 3, 1), ChronoUnit.MONTHS)
        13
        """
        end = _convert(end, LocalDate, "to_local_date")
        if unit is None:
            return self._period_until(end)
        if isinstance(unit, ChronoUnit):
            if unit is _U.DAYS:
                return end.to_epoch_day() - self.to_epoch_day()
            elif unit is _U.WEEKS:
                return trunc_div(end.to_epoch_day() - self.to_epoch_day(), 7)
            elif unit is _U.MONTHS:
                return self._months_until(end)
            elif unit is _U.YEARS:
                return trunc_div(self._months_until(end), 12)
            elif unit is _U.DECADES:
                return trunc_div(self._months_until(end), 120)
            elif unit is _U.CENTURIES:
                return trunc_div(self._months_until(end), 1_200)
            elif unit is _U.MILLENNIA:
                return trunc_div(self._months_until(end), 12_000)
            elif unit is _U.ERAS:
                return end._get_field(_F.ERA) - self._get_field(_F.ERA)
            raise UnsupportedTemporalUnit._for(unit)
        return unit.between(self, end)

    def _months_until(self, end: LocalDate) -> int:
        # Pack the month and day so a partial month doesn't count
        packed1 = self._proleptic_month() * 32 + self._day
        packed2 = end._proleptic_month() * 32 + end._day
        return trunc_div(packed2 - packed1, 32)

    def _period_until(self, end: LocalDate) -> Period:
        total_months = end._proleptic_month() - self._proleptic_month()
        days = end._day - self._day
        if total_months > 0 and days < 0:
            total_months -= 1
            calc_date = self.plus_months(total_months)
            days = end.to_epoch_day() - calc_date.to_epoch_day()
        elif total_months < 0 and days > 0:
            total_months += 1
            days -= end.length_of_month()
        return Period.of(
            to_int_exact(trunc_div(total_months, 12)),
            trunc_rem(total_months, 12),
            days,
        )

    def at_time(
        self,
        time_or_hour: Union[LocalTime, int],
        minute: int = 0,
        second: int = 0,
        nano: int = 0,
    ) -> LocalDateTime:
        """Combine with a time of day

        Example
        -------
        >>> LocalDate(2021, 1, 2).at_time(LocalTime(12, 30))
        LocalDateTime(2021-01-02T12:30)
        >>> LocalDate(2021, 1, 2).at_time(8, 15)
        LocalDateTime(2021-01-02T08:15)
        """
        if isinstance(time_or_hour, LocalTime):
            return LocalDateTime._unchecked(self, time_or_hour)
        return LocalDateTime._unchecked(
            self, LocalTime(time_or_hour, minute, second, nano)
        )

    def at_start_of_day(self, zone: Optional[ZoneId] = None) -> Any:
        """Midnight at the start of this date.

        With a zone, the result is the earliest valid time on this date.
        Where a gap occurs at midnight, that's the time just after the gap.
        """
        dt = LocalDateTime._unchecked(self, LocalTime.MIDNIGHT)
        if zone is None:
            return dt
        if not isinstance(zone, ZoneOffset):
            trans = zone.rules().transition(dt)
            if trans is not None and trans.is_gap():
                dt = trans.date_time_after
        return ZonedDateTime.of(dt, zone)

    def is_after(self, other: LocalDate) -> bool:
        return self > other

    def is_before(self, other: LocalDate) -> bool:
        return self < other

    def is_equal(self, other: LocalDate) -> bool:
        return self == other

    def _cmp_key(self) -> tuple:
        return (self._year, self._month, self._day)

    def __str__(self) -> str:
        return f"{_format_year(self._year)}-{self._month:02d}-{self._day:02d}"

    def _write(self) -> bytes:
        return _DATE.pack(self._year, self._month, self._day)

    @classmethod
    def _read(cls, r: _Reader) -> LocalDate:
        return cls(*r.read(_DATE))

    @no_type_check
    def __reduce__(self):
        return _unpkl_date, (self._write(),)


@no_type_check
def _unpkl_date(data: bytes) -> LocalDate:
    return LocalDate._read(_Reader(data))


LocalDate.MIN = LocalDate._unchecked(MIN_YEAR, 1, 1)
LocalDate.MAX = LocalDate._unchecked(MAX_YEAR, 12, 31)
LocalDate.EPOCH = LocalDate._unchecked(1970, 1, 1)


@final
class LocalTime(_Temporal):
    """A time of day, without a date or zone.

    Arithmetic wraps around midnight, in either direction.

    Example
    -------
    >>> t = LocalTime(23, 59, 59, 999_999_999)
    LocalTime(23:59:59.999999999)
    >>> t.plus_nanos(1)
    LocalTime(00:00)
    """

    __slots__ = ("_hour", "_minute", "_second", "_nano")

    MIN: ClassVar[LocalTime]
    """Midnight at the start of the day, 00:00"""
    MAX: ClassVar[LocalTime]
    """Just before midnight at the end of the day, 23:59:59.999999999"""
    MIDNIGHT: ClassVar[LocalTime]
    NOON: ClassVar[LocalTime]

    _FIELDS = _TIME_FIELDS
    _UNITS = _TIME_UNITS

    def __init__(
        self, hour: int, minute: int = 0, second: int = 0, nano: int = 0
    ) -> None:
        _F.HOUR_OF_DAY.check_valid_value(hour)
        _F.MINUTE_OF_HOUR.check_valid_value(minute)
        _F.SECOND_OF_MINUTE.check_valid_value(second)
        _F.NANO_OF_SECOND.check_valid_value(nano)
        self._hour = hour
        self._minute = minute
        self._second = second
        self._nano = nano

    @classmethod
    def _unchecked(
        cls, hour: int, minute: int = 0, second: int = 0, nano: int = 0
    ) -> LocalTime:
        if (minute | second | nano) == 0:
            return _HOURS[hour]
        self = _object_new(cls)
        self._hour = hour
        self._minute = minute
        self._second = second
        self._nano = nano
        return self

    @classmethod
    def of(
        cls, hour: int, minute: int = 0, second: int = 0, nano: int = 0
    ) -> LocalTime:
        return cls(hour, minute, second, nano)

    @classmethod
    def of_second_of_day(cls, second_of_day: int) -> LocalTime:
        """Create from the seconds since midnight (0-86,399)

        Example
        -------
        >>> LocalTime.of_second_of_day(3_725)
        LocalTime(01:02:05)
        """
        _F.SECOND_OF_DAY.check_valid_value(second_of_day)
        hours, rest = divmod(second_of_day, SECONDS_PER_HOUR)
        minutes, secs = divmod(rest, SECONDS_PER_MINUTE)
        return cls._unchecked(hours, minutes, secs)

    @classmethod
    def of_nano_of_day(cls, nano_of_day: int) -> LocalTime:
        _F.NANO_OF_DAY.check_valid_value(nano_of_day)
        return cls._of_nano_of_day(nano_of_day)

    @classmethod
    def _of_nano_of_day(cls, nano_of_day: int) -> LocalTime:
        hours, rest = divmod(nano_of_day, NANOS_PER_HOUR)
        minutes, rest = divmod(rest, NANOS_PER_MINUTE)
        secs, nanos = divmod(rest, NANOS_PER_SECOND)
        return cls._unchecked(hours, minutes, secs, nanos)

    @classmethod
    def now(cls, clock_or_zone: Union[Clock, ZoneId, None] = None) -> LocalTime:
        """The current time in the given zone, or the system's zone"""
        return LocalDateTime.now(clock_or_zone)._time

    @classmethod
    def parse(cls, s: str, /) -> LocalTime:
        """Parse the ``HH:MM[:SS[.fffffffff]]`` format

        Example
        -------
        >>> LocalTime.parse("10:15:30.5")
        LocalTime(10:15:30.500)
        """
        return _parsed(s, cls, *_parse.time_from_iso(s))

    @property
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    @property
    def nano(self) -> int:
        return self._nano

    def to_second_of_day(self) -> int:
        return (
            self._hour * SECONDS_PER_HOUR
            + self._minute * SECONDS_PER_MINUTE
            + self._second
        )

    def to_nano_of_day(self) -> int:
        return (
            self._hour * NANOS_PER_HOUR
            + self._minute * NANOS_PER_MINUTE
            + self._second * NANOS_PER_SECOND
            + self._nano
        )

    def to_local_time(self) -> LocalTime:
        return self

    def _get_field(self, field: ChronoField) -> int:
        if field is _F.NANO_OF_SECOND:
            return self._nano
        elif field is _F.NANO_OF_DAY:
            return self.to_nano_of_day()
        elif field is _F.MICRO_OF_SECOND:
            return self._nano // 1_000
        elif field is _F.MICRO_OF_DAY:
            return self.to_nano_of_day() // 1_000
        elif field is _F.MILLI_OF_SECOND:
            return self._nano // NANOS_PER_MILLI
        elif field is _F.MILLI_OF_DAY:
            return self.to_nano_of_day() // NANOS_PER_MILLI
        elif field is _F.SECOND_OF_MINUTE:
            return self._second
        elif field is _F.SECOND_OF_DAY:
            return self.to_second_of_day()
        elif field is _F.MINUTE_OF_HOUR:
            return self._minute
        elif field is _F.MINUTE_OF_DAY:
            return self._hour * MINUTES_PER_HOUR + self._minute
        elif field is _F.HOUR_OF_AMPM:
            return self._hour % 12
        elif field is _F.CLOCK_HOUR_OF_AMPM:
            return self._hour % 12 or 12
        elif field is _F.HOUR_OF_DAY:
            return self._hour
        elif field is _F.CLOCK_HOUR_OF_DAY:
            return self._hour or 24
        else:  # AMPM_OF_DAY
            return self._hour // 12

    def _with_field(self, field: ChronoField, value: int) -> LocalTime:
        field.check_valid_value(value)
        if field is _F.NANO_OF_SECOND:
            return self.with_nano(value)
        elif field is _F.NANO_OF_DAY:
            return LocalTime.of_nano_of_day(value)
        elif field is _F.MICRO_OF_SECOND:
            return self.with_nano(value * 1_000)
        elif field is _F.MICRO_OF_DAY:
            return LocalTime.of_nano_of_day(value * 1_000)
        elif field is _F.MILLI_OF_SECOND:
            return self.with_nano(value * NANOS_PER_MILLI)
        elif field is _F.MILLI_OF_DAY:
            return LocalTime.of_nano_of_day(value * NANOS_PER_MILLI)
        elif field is _F.SECOND_OF_MINUTE:
            return self.with_second(value)
        elif field is _F.SECOND_OF_DAY:
            return self.plus_seconds(value - self.to_second_of_day())
        elif field is _F.MINUTE_OF_HOUR:
            return self.with_minute(value)
        elif field is _F.MINUTE_OF_DAY:
            return self.plus_minutes(
                value - (self._hour * MINUTES_PER_HOUR + self._minute)
            )
        elif field is _F.HOUR_OF_AMPM:
            return self.plus_hours(value - self._hour % 12)
        elif field is _F.CLOCK_HOUR_OF_AMPM:
            return self.plus_hours((0 if value == 12 else value) - self._hour % 12)
        elif field is _F.HOUR_OF_DAY:
            return self.with_hour(value)
        elif field is _F.CLOCK_HOUR_OF_DAY:
            return self.with_hour(0 if value == 24 else value)
        else:  # AMPM_OF_DAY
            return self.plus_hours((value - self._hour // 12) * 12)

    def with_hour(self, hour: int) -> LocalTime:
        if hour == self._hour:
            return self
        _F.HOUR_OF_DAY.check_valid_value(hour)
        return LocalTime._unchecked(hour, self._minute, self._second, self._nano)

    def with_minute(self, minute: int) -> LocalTime:
        if minute == self._minute:
            return self
        _F.MINUTE_OF_HOUR.check_valid_value(minute)
        return LocalTime._unchecked(self._hour, minute, self._second, self._nano)

    def with_second(self, second: int) -> LocalTime:
        if second == self._second:
            return self
        _F.SECOND_OF_MINUTE.check_valid_value(second)
        return LocalTime._unchecked(self._hour, self._minute, second, self._nano)

    def with_nano(self, nano: int) -> LocalTime:
        if nano == self._nano:
            return self
        _F.NANO_OF_SECOND.check_valid_value(nano)
        return LocalTime._unchecked(self._hour, self._minute, self._second, nano)

    def _plus_unit(self, amount: int, unit: ChronoUnit) -> LocalTime:
        if unit is _U.NANOS:
            return self.plus_nanos(amount)
        elif unit is _U.MICROS:
            return self.plus_nanos((amount % MICROS_PER_DAY) * 1_000)
        elif unit is _U.MILLIS:
            return self.plus_nanos((amount % MILLIS_PER_DAY) * NANOS_PER_MILLI)
        elif unit is _U.SECONDS:
            return self.plus_seconds(amount)
        elif unit is _U.MINUTES:
            return self.plus_minutes(amount)
        elif unit is _U.HOURS:
            return self.plus_hours(amount)
        else:  # HALF_DAYS
            return self.plus_hours((amount % 2) * 12)

    def plus_hours(self, hours: int) -> LocalTime:
        """Add hours, wrapping around midnight

        Example
        -------
        >>> LocalTime(22, 30).plus_hours(5)
        LocalTime(03:30)
        """
        if hours == 0:
            return self
        return LocalTime._unchecked(
            (self._hour + hours) % HOURS_PER_DAY,
            self._minute,
            self._second,
            self._nano,
        )

    def plus_minutes(self, minutes: int) -> LocalTime:
        if minutes == 0:
            return self
        mofd = self._hour * MINUTES_PER_HOUR + self._minute
        new_mofd = (mofd + minutes) % MINUTES_PER_DAY
        if mofd == new_mofd:
            return self
        return LocalTime._unchecked(
            new_mofd // MINUTES_PER_HOUR,
            new_mofd % MINUTES_PER_HOUR,
            self._second,
            self._nano,
        )

    def plus_seconds(self, seconds: int) -> LocalTime:
        if seconds == 0:
            return self
        sofd = self.to_second_of_day()
        new_sofd = (sofd + seconds) % SECONDS_PER_DAY
        if sofd == new_sofd:
            return self
        hours, rest = divmod(new_sofd, SECONDS_PER_HOUR)
        minutes, secs = divmod(rest, SECONDS_PER_MINUTE)
        return LocalTime._unchecked(hours, minutes, secs, self._nano)

    def plus_nanos(self, nanos: int) -> LocalTime:
        if nanos == 0:
            return self
        nofd = self.to_nano_of_day()
        new_nofd = (nofd + nanos) % NANOS_PER_DAY
        if nofd == new_nofd:
            return self
        return LocalTime._of_nano_of_day(new_nofd)

    def minus_hours(self, hours: int) -> LocalTime:
        return self.plus_hours(-hours)

    def minus_minutes(self, minutes: int) -> LocalTime:
        return self.plus_minutes(-minutes)

    def minus_seconds(self, seconds: int) -> LocalTime:
        return self.plus_seconds(-seconds)

    def minus_nanos(self, nanos: int) -> LocalTime:
        return self.plus_nanos(-nanos)

    def truncated_to(self, unit: TemporalUnit) -> LocalTime:
        """Truncate to a unit which divides a day evenly

        Example
        -------
        >>> LocalTime(10, 15, 30, 123).truncated_to(ChronoUnit.MINUTES)
        LocalTime(10:15)
        """
        if unit is _U.NANOS:
            return self
        dur = _truncation_nanos(unit)
        return LocalTime._of_nano_of_day(self.to_nano_of_day() // dur * dur)

    def until(self, end: Any, unit: TemporalUnit) -> int:
        end = _convert(end, LocalTime, "to_local_time")
        if isinstance(unit, ChronoUnit):
            if unit in _TIME_UNITS:
                return trunc_div(
                    end.to_nano_of_day() - self.to_nano_of_day(),
                    _unit_nanos(unit),
                )
            raise UnsupportedTemporalUnit._for(unit)
        return unit.between(self, end)

    def at_date(self, date: LocalDate) -> LocalDateTime:
        return LocalDateTime._unchecked(date, self)

    def at_offset(self, offset: ZoneOffset) -> OffsetTime:
        return OffsetTime.of(self, offset)

    def is_after(self, other: LocalTime) -> bool:
        return self > other

    def is_before(self, other: LocalTime) -> bool:
        return self < other

    def _cmp_key(self) -> tuple:
        return (self._hour, self._minute, self._second, self._nano)

    def __str__(self) -> str:
        """Format as ``HH:MM``, adding seconds and fractions only when non-zero.

        Example
        -------
        >>> str(LocalTime(10, 15, 30, 120_000_000))
        '10:15:30.120'
        """
        s = f"{self._hour:02d}:{self._minute:02d}"
        if self._second or self._nano:
            s += f":{self._second:02d}{_format_fraction(self._nano)}"
        return s

    def _write(self) -> bytes:
        return _TIME.pack(self._hour, self._minute, self._second, self._nano)

    @classmethod
    def _read(cls, r: _Reader) -> LocalTime:
        return cls(*r.read(_TIME))

    @no_type_check
    def __reduce__(self):
        return _unpkl_time, (self._write(),)


@no_type_check
def _unpkl_time(data: bytes) -> LocalTime:
    return LocalTime._read(_Reader(data))


_HOURS = []
for _h in range(24):
    _t = _object_new(LocalTime)
    _t._hour, _t._minute, _t._second, _t._nano = _h, 0, 0, 0
    _HOURS.append(_t)
del _h, _t

LocalTime.MIN = LocalTime.MIDNIGHT = _HOURS[0]
LocalTime.NOON = _HOURS[12]
LocalTime.MAX = LocalTime._unchecked(23, 59, 59, 999_999_999)


@final
class LocalDateTime(_Temporal):
    """A date and time of day, without a zone.

    Example
    -------
    >>> dt = LocalDateTime(2021, 1, 2, 23, 30)
    LocalDateTime(2021-01-02T23:30)
    >>> dt.plus_hours(1)
    LocalDateTime(2021-01-03T00:30)
    """

    __slots__ = ("_date", "_time")

    MIN: ClassVar[LocalDateTime]
    MAX: ClassVar[LocalDateTime]

    _FIELDS = _DATE_FIELDS | _TIME_FIELDS
    _UNITS = frozenset(_U) - {_U.FOREVER}

    def __init__(
        self,
        year: int,
        month: Union[int, Month],
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nano: int = 0,
    ) -> None:
        self._date = LocalDate(year, month, day)
        self._time = LocalTime(hour, minute, second, nano)

    @classmethod
    def _unchecked(cls, date: LocalDate, time: LocalTime) -> LocalDateTime:
        self = _object_new(cls)
        self._date = date
        self._time = time
        return self

    @classmethod
    def of(cls, date: LocalDate, time: LocalTime) -> LocalDateTime:
        """Combine a date and a time"""
        if not isinstance(date, LocalDate) or not isinstance(time, LocalTime):
            raise TypeError("Expected a LocalDate and a LocalTime")
        return cls._unchecked(date, time)

    @classmethod
    def of_epoch_second(
        cls, epoch_second: int, nano: int, offset: ZoneOffset
    ) -> LocalDateTime:
        """The local date-time at the given offset, at the given instant.

        Example
        -------
        >>> LocalDateTime.of_epoch_second(0, 0, ZoneOffset.of_hours(-1))
        LocalDateTime(1969-12-31T23:00)
        """
        _F.NANO_OF_SECOND.check_valid_value(nano)
        local_second = epoch_second + offset._secs
        local_epoch_day, secs_of_day = divmod(local_second, SECONDS_PER_DAY)
        return cls._unchecked(
            LocalDate.of_epoch_day(local_epoch_day),
            LocalTime._of_nano_of_day(secs_of_day * NANOS_PER_SECOND + nano),
        )

    @classmethod
    def of_instant(cls, instant: Instant, zone: ZoneId) -> LocalDateTime:
        offset = zone.rules().offset(instant)
        return cls.of_epoch_second(instant._secs, instant._nanos, offset)

    @classmethod
    def now(
        cls, clock_or_zone: Union[Clock, ZoneId, None] = None
    ) -> LocalDateTime:
        """The current date and time in the given zone, or the system's zone"""
        clock = _as_clock(clock_or_zone)
        now = clock.instant()
        offset = clock.zone.rules().offset(now)
        return cls.of_epoch_second(now._secs, now._nanos, offset)

    @classmethod
    def parse(cls, s: str, /) -> LocalDateTime:
        """Parse the ``YYYY-MM-DDTHH:MM[:SS[.fffffffff]]`` format

        Example
        -------
        >>> LocalDateTime.parse("2021-01-02T03:04:05")
        LocalDateTime(2021-01-02T03:04:05)
        """
        date_fields, time_fields = _parse.local_from_iso(s)
        return _parsed(s, cls, *date_fields, *time_fields)

    @property
    def year(self) -> int:
        return self._date._year

    @property
    def month_value(self) -> int:
        return self._date._month

    @property
    def month(self) -> Month:
        return self._date.month

    @property
    def day_of_month(self) -> int:
        return self._date._day

    day = day_of_month

    def day_of_year(self) -> int:
        return self._date.day_of_year()

    def day_of_week(self) -> DayOfWeek:
        return self._date.day_of_week()

    @property
    def hour(self) -> int:
        return self._time._hour

    @property
    def minute(self) -> int:
        return self._time._minute

    @property
    def second(self) -> int:
        return self._time._second

    @property
    def nano(self) -> int:
        return self._time._nano

    def to_local_date(self) -> LocalDate:
        return self._date

    def to_local_time(self) -> LocalTime:
        return self._time

    def to_local_date_time(self) -> LocalDateTime:
        return self

    def to_epoch_second(self, offset: ZoneOffset) -> int:
        """Seconds since the epoch, if this date-time were at the given offset"""
        return (
            self._date.to_epoch_day() * SECONDS_PER_DAY
            + self._time.to_second_of_day()
            - offset._secs
        )

    def _to_instant(self, offset: ZoneOffset) -> Instant:
        return Instant._create(self.to_epoch_second(offset), self._time._nano)

    def to_instant(self, offset: ZoneOffset) -> Instant:
        return self._to_instant(offset)

    def _with(self, date: LocalDate, time: LocalTime) -> LocalDateTime:
        if date is self._date and time is self._time:
            return self
        return LocalDateTime._unchecked(date, time)

    def _field_range(self, field: ChronoField) -> ValueRange:
        if field in _TIME_FIELDS:
            return self._time._field_range(field)
        return self._date._field_range(field)

    def _get_field(self, field: ChronoField) -> int:
        if field in _TIME_FIELDS:
            return self._time._get_field(field)
        return self._date._get_field(field)

    def _with_field(self, field: ChronoField, value: int) -> LocalDateTime:
        if field in _TIME_FIELDS:
            return self._with(self._date, self._time._with_field(field, value))
        return self._with(self._date._with_field(field, value), self._time)

    def with_year(self, year: int) -> LocalDateTime:
        return self._with(self._date.with_year(year), self._time)

    def with_month(self, month: int) -> LocalDateTime:
        return self._with(self._date.with_month(month), self._time)

    def with_day_of_month(self, day: int) -> LocalDateTime:
        return self._with(self._date.with_day_of_month(day), self._time)

    def with_day_of_year(self, day_of_year: int) -> LocalDateTime:
        return self._with(self._date.with_day_of_year(day_of_year), self._time)

    def with_hour(self, hour: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_hour(hour))

    def with_minute(self, minute: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_minute(minute))

    def with_second(self, second: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_second(second))

    def with_nano(self, nano: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_nano(nano))

    def truncated_to(self, unit: TemporalUnit) -> LocalDateTime:
        return self._with(self._date, self._time.truncated_to(unit))

    def _plus_unit(self, amount: int, unit: ChronoUnit) -> LocalDateTime:
        if unit is _U.NANOS:
            return self.plus_nanos(amount)
        elif unit is _U.MICROS:
            days, rest = divmod(amount, MICROS_PER_DAY)
            return self.plus_days(days).plus_nanos(rest * 1_000)
        elif unit is _U.MILLIS:
            days, rest = divmod(amount, MILLIS_PER_DAY)
            return self.plus_days(days).plus_nanos(rest * NANOS_PER_MILLI)
        elif unit is _U.SECONDS:
            return self.plus_seconds(amount)
        elif unit is _U.MINUTES:
            return self.plus_minutes(amount)
        elif unit is _U.HOURS:
            return self.plus_hours(amount)
        elif unit is _U.HALF_DAYS:
            days, rest = divmod(amount, 256)
            return self.plus_days(days * 128).plus_hours(rest * 12)
        return self._with(self._date._plus_unit(amount, unit), self._time)

    def plus(
        self, amount: Any, unit: Optional[TemporalUnit] = None
    ) -> LocalDateTime:
        if unit is None and isinstance(amount, Period):
            return self._with(self._date._plus_period(amount), self._time)
        return super().plus(amount, unit)

    def minus(
        self, amount: Any, unit: Optional[TemporalUnit] = None
    ) -> LocalDateTime:
        if unit is None and isinstance(amount, Period):
            return self._with(
                self._date._plus_period(amount, -1), self._time
            )
        return super().minus(amount, unit)

    def plus_years(self, years: int) -> LocalDateTime:
        return self._with(self._date.plus_years(years), self._time)

    def plus_months(self, months: int) -> LocalDateTime:
        return self._with(self._date.plus_months(months), self._time)

    def plus_weeks(self, weeks: int) -> LocalDateTime:
        return self._with(self._date.plus_weeks(weeks), self._time)

    def plus_days(self, days: int) -> LocalDateTime:
        return self._with(self._date.plus_days(days), self._time)

    def plus_hours(self, hours: int) -> LocalDateTime:
        return self._plus_with_overflow(self._date, hours, 0, 0, 0, 1)

    def plus_minutes(self, minutes: int) -> LocalDateTime:
        return self._plus_with_overflow(self._date, 0, minutes, 0, 0, 1)

    def plus_seconds(self, seconds: int) -> LocalDateTime:
        return self._plus_with_overflow(self._date, 0, 0, seconds, 0, 1)

    def plus_nanos(self, nanos: int) -> LocalDateTime:
        return self._plus_with_overflow(self._date, 0, 0, 0, nanos, 1)

    def minus_years(self, years: int) -> LocalDateTime:
        return self.plus_years(-years)

    def minus_months(self, months: int) -> LocalDateTime:
        return self.plus_months(-months)

    def minus_weeks(self, weeks: int) -> LocalDateTime:
        return self.plus_weeks(-weeks)

    def minus_days(self, days: int) -> LocalDateTime:
        return self.plus_days(-days)

    def minus_hours(self, hours: int) -> LocalDateTime:
        return self._plus_with_overflow(self._date, hours, 0, 0, 0, -1)

    def minus_minutes(self, minutes: int) -> LocalDateTime:
        return self._plus_with_overflow(self._date, 0, minutes, 0, 0, -1)

    def minus_seconds(self, seconds: int) -> LocalDateTime:
        return self._plus_with_overflow(self._date, 0, 0, seconds, 0, -1)

    def minus_nanos(self, nanos: int) -> LocalDateTime:
        return self._plus_with_overflow(self._date, 0, 0, 0, nanos, -1)

    def _plus_with_overflow(
        self,
        new_date: LocalDate,
        hours: int,
        minutes: int,
        seconds: int,
        nanos: int,
        sign: int,
    ) -> LocalDateTime:
        """Add time amounts of any size, carrying whole days into the date.

        Each amount is split into whole days and a remainder within a day,
        so the day carry is exact whatever the size of the inputs.
        """
        if (hours | minutes | seconds | nanos) == 0:
            return self._with(new_date, self._time)
        h_days, h_rest = divmod(hours, HOURS_PER_DAY)
        m_days, m_rest = divmod(minutes, MINUTES_PER_DAY)
        s_days, s_rest = divmod(seconds, SECONDS_PER_DAY)
        n_days, n_rest = divmod(nanos, NANOS_PER_DAY)
        tot_days = (h_days + m_days + s_days + n_days) * sign
        tot_nanos = (
            n_rest
            + s_rest * NANOS_PER_SECOND
            + m_rest * NANOS_PER_MINUTE
            + h_rest * NANOS_PER_HOUR
        )
        cur_nod = self._time.to_nano_of_day()
        carry, new_nod = divmod(tot_nanos * sign + cur_nod, NANOS_PER_DAY)
        new_time = (
            self._time if new_nod == cur_nod else LocalTime._of_nano_of_day(new_nod)
        )
        return self._with(new_date.plus_days(tot_days + carry), new_time)

    def until(self, end: Any, unit: TemporalUnit) -> int:
        """The whole amount of the unit until ``end``, truncated toward zero

        Example
        -------
        >>> a = LocalDateTime(2021, 1, 1, 23)
        >>> a.until(LocalDateTime(2021, 1, 3, 1), ChronoUnit.HOURS)
        26
        >>> a.until(LocalDateTime(2021, 1, 3, 1), ChronoUnit.DAYS)
        1
        """
        end = _convert(end, LocalDateTime, "to_local_date_time")
        if isinstance(unit, ChronoUnit):
            if unit in _TIME_UNITS:
                days = end._date.to_epoch_day() - self._date.to_epoch_day()
                if days == 0:
                    return self._time.until(end._time, unit)
                time_part = end._time.to_nano_of_day() - self._time.to_nano_of_day()
                # Borrow a day so the day and time parts have the same sign
                if days > 0:
                    days -= 1
                    time_part += NANOS_PER_DAY
                else:
                    days += 1
                    time_part -= NANOS_PER_DAY
                per_unit = _unit_nanos(unit)
                return add_exact(
                    multiply_exact(days, NANOS_PER_DAY // per_unit),
                    trunc_div(time_part, per_unit),
                )
            elif unit in self._UNITS:
                end_date = end._date
                if end_date > self._date and end._time < self._time:
                    end_date = end_date.minus_days(1)
                elif end_date < self._date and end._time > self._time:
                    end_date = end_date.plus_days(1)
                return self._date.until(end_date, unit)
            raise UnsupportedTemporalUnit._for(unit)
        return unit.between(self, end)

    def at_offset(self, offset: ZoneOffset) -> OffsetDateTime:
        return OffsetDateTime.of(self, offset)

    def at_zone(self, zone: ZoneId) -> ZonedDateTime:
        """Resolve in the zone, shifting times in a gap forward"""
        return ZonedDateTime.of_local(self, zone)

    def is_after(self, other: LocalDateTime) -> bool:
        return self > other

    def is_before(self, other: LocalDateTime) -> bool:
        return self < other

    def is_equal(self, other: LocalDateTime) -> bool:
        return self == other

    def _cmp_key(self) -> tuple:
        return self._date._cmp_key() + self._time._cmp_key()

    def __str__(self) -> str:
        return f"{self._date}T{self._time}"

    def _write(self) -> bytes:
        return self._date._write() + self._time._write()

    @classmethod
    def _read(cls, r: _Reader) -> LocalDateTime:
        return cls._unchecked(LocalDate._read(r), LocalTime._read(r))

    @no_type_check
    def __reduce__(self):
        return _unpkl_local, (self._write(),)


@no_type_check
def _unpkl_local(data: bytes) -> LocalDateTime:
    return LocalDateTime._read(_Reader(data))


LocalDateTime.MIN = LocalDateTime._unchecked(LocalDate.MIN, LocalTime.MIN)
LocalDateTime.MAX = LocalDateTime._unchecked(LocalDate.MAX, LocalTime.MAX)


_REGION_ID = re.compile(r"[A-Za-z][A-Za-z0-9~/._+-]+", re.ASCII).fullmatch
_ZONE_PREFIXES = ("GMT", "UTC", "UT")


class ZoneId(_ImmutableBase, ABC):
    """A timezone identifier: either a fixed :class:`ZoneOffset` or a
    :class:`ZoneRegion` whose offset follows a set of rules.

    Example
    -------
    >>> ZoneId.of("Europe/Paris")
    ZoneRegion(Europe/Paris)
    >>> ZoneId.of("+02:00")
    ZoneOffset(+02:00)
    >>> ZoneId.of("UTC+01:00")
    ZoneRegion(UTC+01:00)
    """

    __slots__ = ()

    @property
    @abstractmethod
    def id(self) -> str: ...

    @abstractmethod
    def rules(self) -> ZoneRules:
        """The rules which determine the offset at each point in time"""

    def normalized(self) -> ZoneId:
        """The equivalent :class:`ZoneOffset` if the offset never changes"""
        rules = self.rules()
        if rules.is_fixed_offset():
            return rules.offset(Instant.EPOCH)
        return self

    @classmethod
    def of(cls, zone_id: str) -> ZoneId:
        """Obtain a zone from an offset, prefixed offset, or region ID.

        Raises
        ------
        DateTimeError
            If the ID has an invalid format
        TimeZoneNotFoundError
            If no rules exist for the region ID
        """
        if len(zone_id) <= 1 or zone_id[0] in "+-":
            return ZoneOffset.of(zone_id)
        for prefix in _ZONE_PREFIXES:
            if zone_id.startswith(prefix):
                return cls._of_with_prefix(zone_id, prefix)
        return ZoneRegion._of_id(zone_id)

    @classmethod
    def _of_with_prefix(cls, zone_id: str, prefix: str) -> ZoneId:
        rest = zone_id[len(prefix) :]
        if not rest:
            return cls.of_offset(prefix, _OFFSET_UTC)
        if rest[0] not in "+-":
            return ZoneRegion._of_id(zone_id)
        try:
            offset = ZoneOffset.of(rest)
        except DateTimeError as e:
            raise DateTimeError(f"Invalid ID for offset-based ZoneId: {zone_id}") from e
        return cls.of_offset(prefix, offset)

    @classmethod
    def of_offset(cls, prefix: str, offset: ZoneOffset) -> ZoneId:
        """A zone with a fixed offset, shown with a ``GMT``, ``UTC`` or ``UT``
        prefix. Without a prefix, the offset itself is returned.

        Example
        -------
        >>> ZoneId.of_offset("UTC", ZoneOffset.of_hours(2))
        ZoneRegion(UTC+02:00)
        """
        if not prefix:
            return offset
        if prefix not in _ZONE_PREFIXES:
            raise ValueError(
                f"prefix should be GMT, UTC or UT, is: {prefix}"
            )
        if offset._secs:
            prefix += offset.id
        return ZoneRegion._unchecked(prefix, offset.rules())

    @classmethod
    def system_default(cls) -> ZoneId:
        """The zone of the system, read from ``TZ`` or the OS configuration.

        The result is cached. Use :func:`reset_system_tz` after changing
        the system zone.
        """
        tz = get_system_tz()
        if tz.key is None:
            return ZoneRegion("localtime", _TimeZoneRules(tz))
        return cls.of(tz.key)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ZoneId):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return self.id

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.id})"


@final
class ZoneOffset(ZoneId, _Accessor):
    """A fixed offset from UTC, between -18:00 and +18:00.

    Offsets are ordered in *descending* order of their total seconds,
    i.e. the order in which they reach a given wall-clock time.

    Example
    -------
    >>> ZoneOffset.of("+05:30")
    ZoneOffset(+05:30)
    >>> ZoneOffset.of_hours_minutes(-3, -30).total_seconds
    -12600
    """

    __slots__ = ("_secs",)

    UTC: ClassVar[ZoneOffset]
    MIN: ClassVar[ZoneOffset]
    MAX: ClassVar[ZoneOffset]

    _FIELDS = frozenset([_F.OFFSET_SECONDS])

    def __init__(self) -> None:
        raise TypeError(
            "ZoneOffset instances cannot be created through the constructor. "
            "Use `ZoneOffset.of` or `ZoneOffset.of_total_seconds` instead."
        )

    @classmethod
    def of(cls, offset_id: str) -> ZoneOffset:
        """Parse ``Z``, ``±h``, ``±hh``, ``±hh:mm``, ``±hhmm``,
        ``±hh:mm:ss`` or ``±hhmmss``"""
        return cls.of_hours_minutes_seconds(*_parse.offset_from_id(offset_id))

    @classmethod
    def of_hours(cls, hours: int) -> ZoneOffset:
        return cls.of_hours_minutes_seconds(hours, 0, 0)

    @classmethod
    def of_hours_minutes(cls, hours: int, minutes: int) -> ZoneOffset:
        return cls.of_hours_minutes_seconds(hours, minutes, 0)

    @classmethod
    def of_hours_minutes_seconds(
        cls, hours: int, minutes: int, seconds: int
    ) -> ZoneOffset:
        """Create from components, which must all have the same sign"""
        _validate_offset(hours, minutes, seconds)
        return cls.of_total_seconds(
            hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds
        )

    @classmethod
    def of_total_seconds(cls, total_seconds: int) -> ZoneOffset:
        if abs(total_seconds) > _MAX_OFFSET_SECS:
            raise FieldOutOfRange(
                "Zone offset not in valid range: -18:00 to +18:00"
            )
        if total_seconds % 900 == 0:
            try:
                return _OFFSET_CACHE[total_seconds]
            except KeyError:
                return _OFFSET_CACHE.setdefault(
                    total_seconds, cls._unchecked(total_seconds)
                )
        return cls._unchecked(total_seconds)

    @classmethod
    def _unchecked(cls, total_seconds: int) -> ZoneOffset:
        self = _object_new(cls)
        self._secs = total_seconds
        return self

    @property
    def total_seconds(self) -> int:
        return self._secs

    @property
    def id(self) -> str:
        if self._secs == 0:
            return "Z"
        abs_secs = abs(self._secs)
        hours, rest = divmod(abs_secs, SECONDS_PER_HOUR)
        minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)
        sign = "-" if self._secs < 0 else "+"
        s = f"{sign}{hours:02d}:{minutes:02d}"
        if seconds:
            s += f":{seconds:02d}"
        return s

    def rules(self) -> ZoneRules:
        return _TimeZoneRules(FixedTimeZone(self._secs))

    def normalized(self) -> ZoneOffset:
        return self

    def _get_field(self, field: ChronoField) -> int:
        return self._secs

    def _cmp_key(self) -> tuple:
        return (-self._secs,)

    def _write(self) -> bytes:
        return _OFFSET.pack(self._secs)

    @classmethod
    def _read(cls, r: _Reader) -> ZoneOffset:
        return cls.of_total_seconds(*r.read(_OFFSET))

    @no_type_check
    def __reduce__(self):
        return _unpkl_offset, (self._write(),)


@no_type_check
def _unpkl_offset(data: bytes) -> ZoneOffset:
    return ZoneOffset._read(_Reader(data))


_MAX_OFFSET_SECS = 18 * SECONDS_PER_HOUR
_OFFSET_CACHE: dict[int, ZoneOffset] = {}


def _validate_offset(hours: int, minutes: int, seconds: int) -> None:
    if not -18 <= hours <= 18:
        raise FieldOutOfRange(
            f"Zone offset hours not in valid range: value {hours} "
            "is not in the range -18 to 18"
        )
    if hours > 0:
        if minutes < 0 or seconds < 0:
            raise DateTimeError(
                "Zone offset minutes and seconds must be positive "
                "because hours is positive"
            )
    elif hours < 0:
        if minutes > 0 or seconds > 0:
            raise DateTimeError(
                "Zone offset minutes and seconds must be negative "
                "because hours is negative"
            )
    elif (minutes > 0 and seconds < 0) or (minutes < 0 and seconds > 0):
        raise DateTimeError(
            "Zone offset minutes and seconds must have the same sign"
        )
    if abs(minutes) > 59:
        raise FieldOutOfRange(
            f"Zone offset minutes not in valid range: abs(value) "
            f"{abs(minutes)} is not in the range 0 to 59"
        )
    if abs(seconds) > 59:
        raise FieldOutOfRange(
            f"Zone offset seconds not in valid range: abs(value) "
            f"{abs(seconds)} is not in the range 0 to 59"
        )
    if abs(hours) == 18 and (minutes or seconds):
        raise FieldOutOfRange(
            "Zone offset not in valid range: -18:00 to +18:00"
        )


_OFFSET_UTC = ZoneOffset.UTC = ZoneOffset.of_total_seconds(0)
ZoneOffset.MIN = ZoneOffset.of_total_seconds(-_MAX_OFFSET_SECS)
ZoneOffset.MAX = ZoneOffset.of_total_seconds(_MAX_OFFSET_SECS)


@final
class ZoneRegion(ZoneId):
    """A named zone with rules that determine the offset.

    Regions are usually obtained from :meth:`ZoneId.of`, which loads the
    rules from the IANA database. Any other :class:`ZoneRules` can be
    attached by creating a region directly.

    Example
    -------
    >>> ZoneRegion("Test/Fixed", ZoneOffset.of_hours(3).rules())
    ZoneRegion(Test/Fixed)
    """

    __slots__ = ("_id", "_rules")

    def __init__(self, zone_id: str, rules: ZoneRules) -> None:
        if not isinstance(rules, ZoneRules):
            raise TypeError(f"Expected ZoneRules, got {type(rules).__name__}")
        self._id = _check_region_id(zone_id)
        self._rules = rules

    @classmethod
    def _unchecked(cls, zone_id: str, rules: ZoneRules) -> ZoneRegion:
        self = _object_new(cls)
        self._id = zone_id
        self._rules = rules
        return self

    @classmethod
    def _of_id(cls, zone_id: str) -> ZoneRegion:
        _check_region_id(zone_id)
        return cls._unchecked(zone_id, _TimeZoneRules(get_tz(zone_id)))

    @property
    def id(self) -> str:
        return self._id

    def rules(self) -> ZoneRules:
        return self._rules

    def _write(self) -> bytes:
        encoded = self._id.encode("utf-8")
        return _STR_LEN.pack(len(encoded)) + encoded

    @classmethod
    def _read(cls, r: _Reader) -> ZoneId:
        return ZoneId.of(r.read_str())

    @no_type_check
    def __reduce__(self):
        return _unpkl_region, (self._write(),)


@no_type_check
def _unpkl_region(data: bytes) -> ZoneId:
    return ZoneRegion._read(_Reader(data))


def _check_region_id(zone_id: str) -> str:
    if _REGION_ID(zone_id) is None:
        raise DateTimeError(
            f"Invalid ID for region-based ZoneId, invalid format: {zone_id}"
        )
    return zone_id


class ZoneRules(ABC):
    """The rules defining how the offset of a zone varies.

    Implement the abstract methods to supply custom rules, and attach them
    to a :class:`ZoneRegion`. The local date-times passed in are always
    :class:`LocalDateTime` instances.
    """

    __slots__ = ()

    @classmethod
    def of(cls, offset: ZoneOffset) -> ZoneRules:
        """Rules which always give the same offset"""
        return _TimeZoneRules(FixedTimeZone(offset._secs))

    @abstractmethod
    def offset(self, instant: Instant) -> ZoneOffset:
        """The offset in effect at the instant"""

    @abstractmethod
    def valid_offsets(self, local: LocalDateTime) -> list[ZoneOffset]:
        """The offsets valid at the local date-time.

        There is one offset normally, none in a gap, and two in an overlap.
        In an overlap, the offset from before the transition comes first.
        """

    @abstractmethod
    def transition(self, local: LocalDateTime) -> Optional[ZoneOffsetTransition]:
        """The transition at the local date-time, if it is in a gap or overlap"""

    @abstractmethod
    def is_fixed_offset(self) -> bool: ...

    def is_valid_offset(self, local: LocalDateTime, offset: ZoneOffset) -> bool:
        return offset in self.valid_offsets(local)


@final
class _TimeZoneRules(ZoneRules):
    """Rules backed by a fixed offset or the IANA database"""

    __slots__ = ("_tz",)

    def __init__(self, tz: TimeZone) -> None:
        self._tz = tz

    def offset(self, instant: Instant) -> ZoneOffset:
        return ZoneOffset.of_total_seconds(
            self._tz.offset_for_instant(instant._secs)
        )

    def valid_offsets(self, local: LocalDateTime) -> list[ZoneOffset]:
        amb = self._tz.ambiguity_for_local(local.to_epoch_second(_OFFSET_UTC))
        if isinstance(amb, Gap):
            return []
        elif isinstance(amb, Fold):
            return [
                ZoneOffset.of_total_seconds(amb.before),
                ZoneOffset.of_total_seconds(amb.after),
            ]
        return [ZoneOffset.of_total_seconds(amb.offset)]

    def transition(self, local: LocalDateTime) -> Optional[ZoneOffsetTransition]:
        amb = self._tz.ambiguity_for_local(local.to_epoch_second(_OFFSET_UTC))
        if isinstance(amb, (Gap, Fold)):
            return ZoneOffsetTransition._from_epoch(
                amb.transition, amb.before, amb.after
            )
        return None

    def is_fixed_offset(self) -> bool:
        return self._tz.is_fixed()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, _TimeZoneRules):
            return self._tz == other._tz
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._tz)

    def __repr__(self) -> str:
        return f"ZoneRules({self._tz!r})"


@final
class ZoneOffsetTransition(_ImmutableBase):
    """A jump in the offset of a zone: a gap or an overlap.

    Example
    -------
    >>> t = ZoneOffsetTransition.of(
    ...     LocalDateTime(2023, 3, 26, 2),
    ...     ZoneOffset.of_hours(1),
    ...     ZoneOffset.of_hours(2),
    ... )
    >>> t.is_gap()
    True
    >>> t.date_time_after
    LocalDateTime(2023-03-26T03:00)
    """

    __slots__ = ("_epoch_sec", "_before", "_offset_before", "_offset_after")

    def __init__(self) -> None:
        raise TypeError(
            "Use `ZoneOffsetTransition.of` to create a transition"
        )

    @classmethod
    def of(
        cls,
        date_time_before: LocalDateTime,
        offset_before: ZoneOffset,
        offset_after: ZoneOffset,
    ) -> ZoneOffsetTransition:
        """Create from the local date-time at which the transition occurs,
        expressed in the offset before it"""
        if offset_before == offset_after:
            raise DateTimeError("Offsets must not be equal")
        if date_time_before._time._nano != 0:
            raise DateTimeError("Nano-of-second must be zero")
        return cls._create(
            date_time_before.to_epoch_second(offset_before),
            date_time_before,
            offset_before,
            offset_after,
        )

    @classmethod
    def _from_epoch(
        cls, epoch_sec: int, before: int, after: int
    ) -> ZoneOffsetTransition:
        offset_before = ZoneOffset.of_total_seconds(before)
        return cls._create(
            epoch_sec,
            LocalDateTime.of_epoch_second(epoch_sec, 0, offset_before),
            offset_before,
            ZoneOffset.of_total_seconds(after),
        )

    @classmethod
    def _create(
        cls,
        epoch_sec: int,
        date_time_before: LocalDateTime,
        offset_before: ZoneOffset,
        offset_after: ZoneOffset,
    ) -> ZoneOffsetTransition:
        self = _object_new(cls)
        self._epoch_sec = epoch_sec
        self._before = date_time_before
        self._offset_before = offset_before
        self._offset_after = offset_after
        return self

    def instant(self) -> Instant:
        return Instant._create(self._epoch_sec, 0)

    def to_epoch_second(self) -> int:
        return self._epoch_sec

    @property
    def date_time_before(self) -> LocalDateTime:
        """The local date-time of the transition, in the offset before it"""
        return self._before

    @property
    def date_time_after(self) -> LocalDateTime:
        """The local date-time of the transition, in the offset after it"""
        return self._before.plus_seconds(self._duration_seconds())

    @property
    def offset_before(self) -> ZoneOffset:
        return self._offset_before

    @property
    def offset_after(self) -> ZoneOffset:
        return self._offset_after

    def _duration_seconds(self) -> int:
        return self._offset_after._secs - self._offset_before._secs

    def duration(self) -> Duration:
        """The size of the jump; negative for an overlap"""
        return Duration.of_seconds(self._duration_seconds())

    def is_gap(self) -> bool:
        return self._offset_after._secs > self._offset_before._secs

    def is_overlap(self) -> bool:
        return self._offset_after._secs < self._offset_before._secs

    def is_valid_offset(self, offset: ZoneOffset) -> bool:
        """Whether the offset is valid during the transition.

        No offset is valid during a gap; both are valid in an overlap.
        """
        if self.is_gap():
            return False
        return offset == self._offset_before or offset == self._offset_after

    def valid_offsets(self) -> list[ZoneOffset]:
        if self.is_gap():
            return []
        return [self._offset_before, self._offset_after]

    def _key(self) -> tuple:
        return (self._epoch_sec, self._offset_before._secs, self._offset_after._secs)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ZoneOffsetTransition):
            return self._key() == other._key()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: ZoneOffsetTransition) -> bool:
        if isinstance(other, ZoneOffsetTransition):
            return self._epoch_sec < other._epoch_sec
        return NotImplemented

    def __str__(self) -> str:
        kind = "Gap" if self.is_gap() else "Overlap"
        return (
            f"Transition[{kind} at {self._before}{self._offset_before} "
            f"to {self._offset_after}]"
        )

    def __repr__(self) -> str:
        return f"ZoneOffsetTransition({self})"


@final
class OffsetTime(_Temporal):
    """A time of day with a fixed offset from UTC.

    Ordering is by the instant on a shared date first, then the local time.
    Use :meth:`is_equal` to compare only the instant.

    Example
    -------
    >>> t = OffsetTime.of(LocalTime(10, 30), ZoneOffset.of_hours(2))
    OffsetTime(10:30+02:00)
    >>> t.with_offset_same_instant(ZoneOffset.UTC)
    OffsetTime(08:30Z)
    """

    __slots__ = ("_time", "_offset")

    MIN: ClassVar[OffsetTime]
    MAX: ClassVar[OffsetTime]

    _FIELDS = _TIME_FIELDS | {_F.OFFSET_SECONDS}
    _UNITS = _TIME_UNITS

    def __init__(self) -> None:
        raise TypeError(
            "OffsetTime instances cannot be created through the constructor. "
            "Use `OffsetTime.of` or `LocalTime.at_offset` instead."
        )

    @classmethod
    def of(cls, time: LocalTime, offset: ZoneOffset) -> OffsetTime:
        if not isinstance(time, LocalTime) or not isinstance(offset, ZoneOffset):
            raise TypeError("Expected a LocalTime and a ZoneOffset")
        return cls._unchecked(time, offset)

    @classmethod
    def _unchecked(cls, time: LocalTime, offset: ZoneOffset) -> OffsetTime:
        self = _object_new(cls)
        self._time = time
        self._offset = offset
        return self

    @classmethod
    def of_instant(cls, instant: Instant, zone: ZoneId) -> OffsetTime:
        offset = zone.rules().offset(instant)
        secs_of_day = (instant._secs + offset._secs) % SECONDS_PER_DAY
        return cls._unchecked(
            LocalTime._of_nano_of_day(
                secs_of_day * NANOS_PER_SECOND + instant._nanos
            ),
            offset,
        )

    @classmethod
    def now(cls, clock_or_zone: Union[Clock, ZoneId, None] = None) -> OffsetTime:
        clock = _as_clock(clock_or_zone)
        return cls.of_instant(clock.instant(), clock.zone)

    @classmethod
    def parse(cls, s: str, /) -> OffsetTime:
        """Parse the ``HH:MM[:SS[.fffffffff]]±HH:MM`` format

        Example
        -------
        >>> OffsetTime.parse("10:15:30+01:00")
        OffsetTime(10:15:30+01:00)
        """
        time_fields, offset = _parse.offset_time_from_iso(s)
        return _parsed(
            s, lambda: cls._unchecked(LocalTime(*time_fields), ZoneOffset.of(offset))
        )

    @property
    def offset(self) -> ZoneOffset:
        return self._offset

    @property
    def hour(self) -> int:
        return self._time._hour

    @property
    def minute(self) -> int:
        return self._time._minute

    @property
    def second(self) -> int:
        return self._time._second

    @property
    def nano(self) -> int:
        return self._time._nano

    def to_local_time(self) -> LocalTime:
        return self._time

    def to_offset_time(self) -> OffsetTime:
        return self

    def _with(self, time: LocalTime, offset: ZoneOffset) -> OffsetTime:
        if time is self._time and offset == self._offset:
            return self
        return OffsetTime._unchecked(time, offset)

    def with_offset_same_local(self, offset: ZoneOffset) -> OffsetTime:
        """Replace the offset, keeping the local time (so the instant changes)"""
        return self._with(self._time, offset)

    def with_offset_same_instant(self, offset: ZoneOffset) -> OffsetTime:
        """Replace the offset, adjusting the local time to keep the instant"""
        if offset == self._offset:
            return self
        return OffsetTime._unchecked(
            self._time.plus_seconds(offset._secs - self._offset._secs), offset
        )

    def _field_range(self, field: ChronoField) -> ValueRange:
        if field is _F.OFFSET_SECONDS:
            return field.range()
        return self._time._field_range(field)

    def _get_field(self, field: ChronoField) -> int:
        if field is _F.OFFSET_SECONDS:
            return self._offset._secs
        return self._time._get_field(field)

    def _with_field(self, field: ChronoField, value: int) -> OffsetTime:
        if field is _F.OFFSET_SECONDS:
            return self._with(
                self._time,
                ZoneOffset.of_total_seconds(field.check_valid_int_value(value)),
            )
        return self._with(self._time._with_field(field, value), self._offset)

    def with_hour(self, hour: int) -> OffsetTime:
        return self._with(self._time.with_hour(hour), self._offset)

    def with_minute(self, minute: int) -> OffsetTime:
        return self._with(self._time.with_minute(minute), self._offset)

    def with_second(self, second: int) -> OffsetTime:
        return self._with(self._time.with_second(second), self._offset)

    def with_nano(self, nano: int) -> OffsetTime:
        return self._with(self._time.with_nano(nano), self._offset)

    def truncated_to(self, unit: TemporalUnit) -> OffsetTime:
        return self._with(self._time.truncated_to(unit), self._offset)

    def _plus_unit(self, amount: int, unit: ChronoUnit) -> OffsetTime:
        return self._with(self._time._plus_unit(amount, unit), self._offset)

    def plus_hours(self, hours: int) -> OffsetTime:
        return self._with(self._time.plus_hours(hours), self._offset)

    def plus_minutes(self, minutes: int) -> OffsetTime:
        return self._with(self._time.plus_minutes(minutes), self._offset)

    def plus_seconds(self, seconds: int) -> OffsetTime:
        return self._with(self._time.plus_seconds(seconds), self._offset)

    def plus_nanos(self, nanos: int) -> OffsetTime:
        return self._with(self._time.plus_nanos(nanos), self._offset)

    def minus_hours(self, hours: int) -> OffsetTime:
        return self.plus_hours(-hours)

    def minus_minutes(self, minutes: int) -> OffsetTime:
        return self.plus_minutes(-minutes)

    def minus_seconds(self, seconds: int) -> OffsetTime:
        return self.plus_seconds(-seconds)

    def minus_nanos(self, nanos: int) -> OffsetTime:
        return self.plus_nanos(-nanos)

    def until(self, end: Any, unit: TemporalUnit) -> int:
        """The amount of the unit until ``end``, on the same day in UTC"""
        end = _convert(end, OffsetTime, "to_offset_time")
        if isinstance(unit, ChronoUnit):
            if unit in _TIME_UNITS:
                return trunc_div(
                    end._to_epoch_nano() - self._to_epoch_nano(),
                    _unit_nanos(unit),
                )
            raise UnsupportedTemporalUnit._for(unit)
        return unit.between(self, end)

    def _to_epoch_nano(self) -> int:
        return (
            self._time.to_nano_of_day() - self._offset._secs * NANOS_PER_SECOND
        )

    def to_epoch_second(self, date: LocalDate) -> int:
        """The instant at the given date, as seconds since the epoch"""
        return (
            date.to_epoch_day() * SECONDS_PER_DAY
            + self._time.to_second_of_day()
            - self._offset._secs
        )

    def at_date(self, date: LocalDate) -> OffsetDateTime:
        return OffsetDateTime._unchecked(
            LocalDateTime._unchecked(date, self._time), self._offset
        )

    def is_after(self, other: OffsetTime) -> bool:
        """Compare the instants, ignoring the local time"""
        return self._to_epoch_nano() > other._to_epoch_nano()

    def is_before(self, other: OffsetTime) -> bool:
        return self._to_epoch_nano() < other._to_epoch_nano()

    def is_equal(self, other: OffsetTime) -> bool:
        return self._to_epoch_nano() == other._to_epoch_nano()

    def _cmp_key(self) -> tuple:
        return (self._to_epoch_nano(), self._time.to_nano_of_day())

    def __str__(self) -> str:
        return f"{self._time}{self._offset.id}"

    def _write(self) -> bytes:
        return self._time._write() + self._offset._write()

    @classmethod
    def _read(cls, r: _Reader) -> OffsetTime:
        return cls._unchecked(LocalTime._read(r), ZoneOffset._read(r))

    @no_type_check
    def __reduce__(self):
        return _unpkl_otime, (self._write(),)


@no_type_check
def _unpkl_otime(data: bytes) -> OffsetTime:
    return OffsetTime._read(_Reader(data))


OffsetTime.MIN = OffsetTime._unchecked(LocalTime.MIN, ZoneOffset.MAX)
OffsetTime.MAX = OffsetTime._unchecked(LocalTime.MAX, ZoneOffset.MIN)


@final
class OffsetDateTime(_Temporal):
    """A date and time with a fixed offset from UTC.

    All arithmetic keeps the offset unchanged.
    Ordering is by instant first, then by local date-time.

    Example
    -------
    >>> dt = OffsetDateTime.of(
    ...     LocalDateTime(2021, 3, 4, 10), ZoneOffset.of_hours(1)
    ... )
    OffsetDateTime(2021-03-04T10:00+01:00)
    >>> dt.to_instant()
    Instant(2021-03-04T09:00:00Z)
    """

    __slots__ = ("_dt", "_offset")

    MIN: ClassVar[OffsetDateTime]
    MAX: ClassVar[OffsetDateTime]

    _FIELDS = _DATE_FIELDS | _TIME_FIELDS | _INSTANT_FIELDS
    _UNITS = LocalDateTime._UNITS

    def __init__(self) -> None:
        raise TypeError(
            "OffsetDateTime instances cannot be created through the "
            "constructor. Use `OffsetDateTime.of` instead."
        )

    @classmethod
    def of(cls, dt: LocalDateTime, offset: ZoneOffset) -> OffsetDateTime:
        if not isinstance(dt, LocalDateTime) or not isinstance(
            offset, ZoneOffset
        ):
            raise TypeError("Expected a LocalDateTime and a ZoneOffset")
        return cls._unchecked(dt, offset)

    @classmethod
    def _unchecked(cls, dt: LocalDateTime, offset: ZoneOffset) -> OffsetDateTime:
        self = _object_new(cls)
        self._dt = dt
        self._offset = offset
        return self

    @classmethod
    def of_instant(cls, instant: Instant, zone: ZoneId) -> OffsetDateTime:
        offset = zone.rules().offset(instant)
        return cls._unchecked(
            LocalDateTime.of_epoch_second(instant._secs, instant._nanos, offset),
            offset,
        )

    @classmethod
    def now(
        cls, clock_or_zone: Union[Clock, ZoneId, None] = None
    ) -> OffsetDateTime:
        clock = _as_clock(clock_or_zone)
        return cls.of_instant(clock.instant(), clock.zone)

    @classmethod
    def parse(cls, s: str, /) -> OffsetDateTime:
        """Parse the ``YYYY-MM-DDTHH:MM[:SS[.fffffffff]]±HH:MM`` format

        Example
        -------
        >>> OffsetDateTime.parse("2007-12-03T10:15:30+01:00")
        OffsetDateTime(2007-12-03T10:15:30+01:00)
        """
        date_fields, time_fields, offset = _parse.offset_dt_from_iso(s)
        return _parsed(
            s,
            lambda: cls._unchecked(
                LocalDateTime(*date_fields, *time_fields), ZoneOffset.of(offset)
            ),
        )

    @property
    def offset(self) -> ZoneOffset:
        return self._offset

    @property
    def year(self) -> int:
        return self._dt._date._year

    @property
    def month_value(self) -> int:
        return self._dt._date._month

    @property
    def month(self) -> Month:
        return self._dt._date.month

    @property
    def day_of_month(self) -> int:
        return self._dt._date._day

    day = day_of_month

    def day_of_year(self) -> int:
        return self._dt._date.day_of_year()

    def day_of_week(self) -> DayOfWeek:
        return self._dt._date.day_of_week()

    @property
    def hour(self) -> int:
        return self._dt._time._hour

    @property
    def minute(self) -> int:
        return self._dt._time._minute

    @property
    def second(self) -> int:
        return self._dt._time._second

    @property
    def nano(self) -> int:
        return self._dt._time._nano

    def to_local_date_time(self) -> LocalDateTime:
        return self._dt

    def to_local_date(self) -> LocalDate:
        return self._dt._date

    def to_local_time(self) -> LocalTime:
        return self._dt._time

    def to_offset_date_time(self) -> OffsetDateTime:
        return self

    def to_offset_time(self) -> OffsetTime:
        return OffsetTime._unchecked(self._dt._time, self._offset)

    def to_instant(self) -> Instant:
        return self._dt._to_instant(self._offset)

    def to_epoch_second(self) -> int:
        return self._dt.to_epoch_second(self._offset)

    def to_zoned_date_time(self) -> ZonedDateTime:
        """A zoned date-time with this offset as its (fixed) zone"""
        return ZonedDateTime._new(self._dt, self._offset, self._offset)

    def at_zone_same_instant(self, zone: ZoneId) -> ZonedDateTime:
        """The same instant in the given zone"""
        return ZonedDateTime._of_instant(self._dt, self._offset, zone)

    def at_zone_similar_local(self, zone: ZoneId) -> ZonedDateTime:
        """The same local date-time in the given zone, keeping this offset
        where the zone allows it"""
        return ZonedDateTime.of_local(self._dt, zone, self._offset)

    def _with(self, dt: LocalDateTime, offset: ZoneOffset) -> OffsetDateTime:
        if dt is self._dt and offset == self._offset:
            return self
        return OffsetDateTime._unchecked(dt, offset)

    def with_offset_same_local(self, offset: ZoneOffset) -> OffsetDateTime:
        """Replace the offset, keeping the local date-time (so the instant
        changes)"""
        return self._with(self._dt, offset)

    def with_offset_same_instant(self, offset: ZoneOffset) -> OffsetDateTime:
        """Replace the offset, adjusting the local date-time to keep the
        instant

        Example
        -------
        >>> OffsetDateTime.parse("2021-01-01T00:30+01:00").with_offset_same_instant(
        ...     ZoneOffset.UTC
        ... )
        OffsetDateTime(2020-12-31T23:30Z)
        """
        if offset == self._offset:
            return self
        return OffsetDateTime._unchecked(
            self._dt.plus_seconds(offset._secs - self._offset._secs), offset
        )

    def _field_range(self, field: ChronoField) -> ValueRange:
        if field in _INSTANT_FIELDS:
            return field.range()
        return self._dt._field_range(field)

    def _get_field(self, field: ChronoField) -> int:
        if field is _F.INSTANT_SECONDS:
            return self.to_epoch_second()
        elif field is _F.OFFSET_SECONDS:
            return self._offset._secs
        return self._dt._get_field(field)

    def _with_field(self, field: ChronoField, value: int) -> OffsetDateTime:
        if field is _F.INSTANT_SECONDS:
            return OffsetDateTime.of_instant(
                Instant.of_epoch_second(value, self._dt._time._nano), self._offset
            )
        elif field is _F.OFFSET_SECONDS:
            return self._with(
                self._dt,
                ZoneOffset.of_total_seconds(field.check_valid_int_value(value)),
            )
        return self._with(self._dt._with_field(field, value), self._offset)

    def with_year(self, year: int) -> OffsetDateTime:
        return self._with(self._dt.with_year(year), self._offset)

    def with_month(self, month: int) -> OffsetDateTime:
        return self._with(self._dt.with_month(month), self._offset)

    def with_day_of_month(self, day: int) -> OffsetDateTime:
        return self._with(self._dt.with_day_of_month(day), self._offset)

    def with_day_of_year(self, day_of_year: int) -> OffsetDateTime:
        return self._with(self._dt.with_day_of_year(day_of_year), self._offset)

    def with_hour(self, hour: int) -> OffsetDateTime:
        return self._with(self._dt.with_hour(hour), self._offset)

    def with_minute(self, minute: int) -> OffsetDateTime:
        return self._with(self._dt.with_minute(minute), self._offset)

    def with_second(self, second: int) -> OffsetDateTime:
        return self._with(self._dt.with_second(second), self._offset)

    def with_nano(self, nano: int) -> OffsetDateTime:
        return self._with(self._dt.with_nano(nano), self._offset)

    def truncated_to(self, unit: TemporalUnit) -> OffsetDateTime:
        return self._with(self._dt.truncated_to(unit), self._offset)

    def _plus_unit(self, amount: int, unit: ChronoUnit) -> OffsetDateTime:
        return self._with(self._dt._plus_unit(amount, unit), self._offset)

    def plus(
        self, amount: Any, unit: Optional[TemporalUnit] = None
    ) -> OffsetDateTime:
        if unit is None and isinstance(amount, Period):
            return self._with(self._dt.plus(amount), self._offset)
        return super().plus(amount, unit)

    def minus(
        self, amount: Any, unit: Optional[TemporalUnit] = None
    ) -> OffsetDateTime:
        if unit is None and isinstance(amount, Period):
            return self._with(self._dt.minus(amount), self._offset)
        return super().minus(amount, unit)

    def plus_years(self, years: int) -> OffsetDateTime:
        return self._with(self._dt.plus_years(years), self._offset)

    def plus_months(self, months: int) -> OffsetDateTime:
        return self._with(self._dt.plus_months(months), self._offset)

    def plus_weeks(self, weeks: int) -> OffsetDateTime:
        return self._with(self._dt.plus_weeks(weeks), self._offset)

    def plus_days(self, days: int) -> OffsetDateTime:
        return self._with(self._dt.plus_days(days), self._offset)

    def plus_hours(self, hours: int) -> OffsetDateTime:
        return self._with(self._dt.plus_hours(hours), self._offset)

    def plus_minutes(self, minutes: int) -> OffsetDateTime:
        return self._with(self._dt.plus_minutes(minutes), self._offset)

    def plus_seconds(self, seconds: int) -> OffsetDateTime:
        return self._with(self._dt.plus_seconds(seconds), self._offset)

    def plus_nanos(self, nanos: int) -> OffsetDateTime:
        return self._with(self._dt.plus_nanos(nanos), self._offset)

    def minus_years(self, years: int) -> OffsetDateTime:
        return self._with(self._dt.minus_years(years), self._offset)

    def minus_months(self, months: int) -> OffsetDateTime:
        return self._with(self._dt.minus_months(months), self._offset)

    def minus_weeks(self, weeks: int) -> OffsetDateTime:
        return self._with(self._dt.minus_weeks(weeks), self._offset)

    def minus_days(self, days: int) -> OffsetDateTime:
        return self._with(self._dt.minus_days(days), self._offset)

    def minus_hours(self, hours: int) -> OffsetDateTime:
        return self._with(self._dt.minus_hours(hours), self._offset)

    def minus_minutes(self, minutes: int) -> OffsetDateTime:
        return self._with(self._dt.minus_minutes(minutes), self._offset)

    def minus_seconds(self, seconds: int) -> OffsetDateTime:
        return self._with(self._dt.minus_seconds(seconds), self._offset)

    def minus_nanos(self, nanos: int) -> OffsetDateTime:
        return self._with(self._dt.minus_nanos(nanos), self._offset)

    def until(self, end: Any, unit: TemporalUnit) -> int:
        """The amount of the unit until ``end``, after converting ``end``
        to this offset"""
        end = _convert(end, OffsetDateTime, "to_offset_date_time")
        if isinstance(unit, ChronoUnit):
            end = end.with_offset_same_instant(self._offset)
            return self._dt.until(end._dt, unit)
        return unit.between(self, end)

    def is_after(self, other: OffsetDateTime) -> bool:
        """Compare the instants, ignoring the local date-time"""
        return self._instant_key() > other._instant_key()

    def is_before(self, other: OffsetDateTime) -> bool:
        return self._instant_key() < other._instant_key()

    def is_equal(self, other: OffsetDateTime) -> bool:
        return self._instant_key() == other._instant_key()

    def _instant_key(self) -> tuple[int, int]:
        return (self.to_epoch_second(), self._dt._time._nano)

    def _cmp_key(self) -> tuple:
        return self._instant_key() + self._dt._cmp_key()

    def __str__(self) -> str:
        return f"{self._dt}{self._offset.id}"

    def _write(self) -> bytes:
        return self._dt._write() + self._offset._write()

    @classmethod
    def _read(cls, r: _Reader) -> OffsetDateTime:
        return cls._unchecked(LocalDateTime._read(r), ZoneOffset._read(r))

    @no_type_check
    def __reduce__(self):
        return _unpkl_odt, (self._write(),)


@no_type_check
def _unpkl_odt(data: bytes) -> OffsetDateTime:
    return OffsetDateTime._read(_Reader(data))


OffsetDateTime.MIN = OffsetDateTime._unchecked(LocalDateTime.MIN, ZoneOffset.MAX)
OffsetDateTime.MAX = OffsetDateTime._unchecked(LocalDateTime.MAX, ZoneOffset.MIN)


@final
class ZonedDateTime(_Temporal):
    """A date and time in a zone, with the offset resolved by the zone's rules.

    Local date-times in a gap are moved forward by the size of the gap.
    In an overlap, the earlier offset is used unless another is preferred.
    Arithmetic with date units keeps the local time where possible,
    arithmetic with time units keeps the elapsed time exact.

    Example
    -------
    >>> paris = ZoneId.of("Europe/Paris")
    >>> d = ZonedDateTime.of(LocalDateTime(2023, 3, 26, 2, 30), paris)
    ZonedDateTime(2023-03-26T03:30+02:00[Europe/Paris])
    >>> d.minus_hours(1)
    ZonedDateTime(2023-03-26T01:30+01:00[Europe/Paris])
    >>> d.minus_days(1)
    ZonedDateTime(2023-03-25T03:30+01:00[Europe/Paris])
    """

    __slots__ = ("_dt", "_offset", "_zone")

    _FIELDS = OffsetDateTime._FIELDS
    _UNITS = LocalDateTime._UNITS

    def __init__(self) -> None:
        raise TypeError(
            "ZonedDateTime instances cannot be created through the "
            "constructor. Use `ZonedDateTime.of` or `LocalDateTime.at_zone` "
            "instead."
        )

    @classmethod
    def _new(
        cls, dt: LocalDateTime, offset: ZoneOffset, zone: ZoneId
    ) -> ZonedDateTime:
        self = _object_new(cls)
        self._dt = dt
        self._offset = offset
        self._zone = zone
        return self

    @classmethod
    def of(
        cls,
        local: Union[LocalDateTime, LocalDate],
        time_or_zone: Union[LocalTime, ZoneId],
        zone: Optional[ZoneId] = None,
    ) -> ZonedDateTime:
        """Resolve a local date-time (or a date and a time) in the zone.

        Gaps and overlaps are resolved as in :meth:`of_local`, without a
        preferred offset.

        Example
        -------
        >>> ZonedDateTime.of(LocalDate(2023, 6, 1), LocalTime(12), ZoneOffset.UTC)
        ZonedDateTime(2023-06-01T12:00Z)
        """
        if isinstance(local, LocalDate):
            if zone is None:
                raise TypeError("A zone is required with a date and a time")
            local = LocalDateTime.of(local, time_or_zone)  # type: ignore[arg-type]
        else:
            zone = time_or_zone  # type: ignore[assignment]
        return cls.of_local(local, zone)  # type: ignore[arg-type]

    @classmethod
    def of_local(
        cls,
        local: LocalDateTime,
        zone: ZoneId,
        preferred_offset: Optional[ZoneOffset] = None,
    ) -> ZonedDateTime:
        """Resolve a local date-time in the zone.

        - Normally, there is only one valid offset, which is used.
        - In a gap, the date-time is shifted forward by the length of the
          gap, using the offset after it.
        - In an overlap, ``preferred_offset`` is used if it is one of the
          two valid offsets. Otherwise, the earlier offset is used.
        """
        if not isinstance(local, LocalDateTime):
            raise TypeError(f"Expected LocalDateTime, got {type(local).__name__}")
        if isinstance(zone, ZoneOffset):
            return cls._new(local, zone, zone)
        rules = zone.rules()
        valid = rules.valid_offsets(local)
        if len(valid) == 1:
            offset = valid[0]
        elif not valid:
            trans = rules.transition(local)
            assert trans is not None
            local = local.plus_seconds(trans._duration_seconds())
            offset = trans.offset_after
        elif preferred_offset is not None and preferred_offset in valid:
            offset = preferred_offset
        else:
            offset = valid[0]
        return cls._new(local, offset, zone)

    @classmethod
    def of_instant(cls, instant: Instant, zone: ZoneId) -> ZonedDateTime:
        return cls._create(instant._secs, instant._nanos, zone)

    @classmethod
    def _of_instant(
        cls, local: LocalDateTime, offset: ZoneOffset, zone: ZoneId
    ) -> ZonedDateTime:
        return cls._create(
            local.to_epoch_second(offset), local._time._nano, zone
        )

    @classmethod
    def _create(cls, epoch_second: int, nano: int, zone: ZoneId) -> ZonedDateTime:
        offset = zone.rules().offset(Instant.of_epoch_second(epoch_second, nano))
        return cls._new(
            LocalDateTime.of_epoch_second(epoch_second, nano, offset),
            offset,
            zone,
        )

    @classmethod
    def of_strict(
        cls, local: LocalDateTime, offset: ZoneOffset, zone: ZoneId
    ) -> ZonedDateTime:
        """Create from exactly the given local date-time and offset,
        failing if they are not valid in the zone.

        Raises
        ------
        SkippedTime
            If the local date-time falls in a gap
        InvalidOffset
            If the offset is otherwise not valid for the local date-time
        """
        rules = zone.rules()
        if not rules.is_valid_offset(local, offset):
            trans = rules.transition(local)
            if trans is not None and trans.is_gap():
                raise SkippedTime._for_zone(local, zone)
            raise InvalidOffset._for_zone(offset, local, zone)
        return cls._new(local, offset, zone)

    @classmethod
    def _of_lenient(
        cls, local: LocalDateTime, offset: ZoneOffset, zone: ZoneId
    ) -> ZonedDateTime:
        # No check against the zone rules: they may have changed since
        # the value was written.
        if isinstance(zone, ZoneOffset) and offset != zone:
            raise DateTimeError("ZoneId must match ZoneOffset")
        return cls._new(local, offset, zone)

    @classmethod
    def now(
        cls, clock_or_zone: Union[Clock, ZoneId, None] = None
    ) -> ZonedDateTime:
        clock = _as_clock(clock_or_zone)
        return cls.of_instant(clock.instant(), clock.zone)

    @classmethod
    def parse(cls, s: str, /) -> ZonedDateTime:
        """Parse the format produced by :meth:`__str__`.

        The offset determines the instant, which is then placed in the zone.

        Example
        -------
        >>> ZonedDateTime.parse("2023-10-29T02:30+01:00[Europe/Paris]")
        ZonedDateTime(2023-10-29T02:30+01:00[Europe/Paris])
        """
        date_fields, time_fields, offset, zone_id = _parse.zoned_from_iso(s)

        def build() -> ZonedDateTime:
            off = ZoneOffset.of(offset)
            zone = off if zone_id is None else ZoneId.of(zone_id)
            return cls._of_instant(
                LocalDateTime(*date_fields, *time_fields), off, zone
            )

        return _parsed(s, build)

    @property
    def zone(self) -> ZoneId:
        return self._zone

    @property
    def offset(self) -> ZoneOffset:
        return self._offset

    @property
    def year(self) -> int:
        return self._dt._date._year

    @property
    def month_value(self) -> int:
        return self._dt._date._month

    @property
    def month(self) -> Month:
        return self._dt._date.month

    @property
    def day_of_month(self) -> int:
        return self._dt._date._day

    day = day_of_month

    def day_of_year(self) -> int:
        return self._dt._date.day_of_year()

    def day_of_week(self) -> DayOfWeek:
        return self._dt._date.day_of_week()

    @property
    def hour(self) -> int:
        return self._dt._time._hour

    @property
    def minute(self) -> int:
        return self._dt._time._minute

    @property
    def second(self) -> int:
        return self._dt._time._second

    @property
    def nano(self) -> int:
        return self._dt._time._nano

    def to_local_date_time(self) -> LocalDateTime:
        return self._dt

    def to_local_date(self) -> LocalDate:
        return self._dt._date

    def to_local_time(self) -> LocalTime:
        return self._dt._time

    def to_zoned_date_time(self) -> ZonedDateTime:
        return self

    def to_offset_date_time(self) -> OffsetDateTime:
        return OffsetDateTime._unchecked(self._dt, self._offset)

    def to_instant(self) -> Instant:
        return self._dt._to_instant(self._offset)

    def to_epoch_second(self) -> int:
        return self._dt.to_epoch_second(self._offset)

    def _resolve_local(self, local: LocalDateTime) -> ZonedDateTime:
        # Keep the current offset if it's still valid
        if local is self._dt:
            return self
        return ZonedDateTime.of_local(local, self._zone, self._offset)

    def _resolve_instant(self, local: LocalDateTime) -> ZonedDateTime:
        if local is self._dt:
            return self
        return ZonedDateTime._of_instant(local, self._offset, self._zone)

    def _resolve_offset(self, offset: ZoneOffset) -> ZonedDateTime:
        if offset != self._offset and self._zone.rules().is_valid_offset(
            self._dt, offset
        ):
            return ZonedDateTime._new(self._dt, offset, self._zone)
        return self

    def with_earlier_offset_at_overlap(self) -> ZonedDateTime:
        """In an overlap, switch to the offset from before the transition.
        Otherwise, return this value unchanged."""
        trans = self._zone.rules().transition(self._dt)
        if trans is not None and trans.is_overlap():
            earlier = trans.offset_before
            if earlier != self._offset:
                return ZonedDateTime._new(self._dt, earlier, self._zone)
        return self

    def with_later_offset_at_overlap(self) -> ZonedDateTime:
        """In an overlap, switch to the offset from after the transition.
        Otherwise, return this value unchanged.

        Example
        -------
        >>> d = ZonedDateTime.of(
        ...     LocalDateTime(2023, 10, 29, 2, 30), ZoneId.of("Europe/Paris")
        ... )
        ZonedDateTime(2023-10-29T02:30+02:00[Europe/Paris])
        >>> d.with_later_offset_at_overlap()
        ZonedDateTime(2023-10-29T02:30+01:00[Europe/Paris])
        """
        trans = self._zone.rules().transition(self._dt)
        if trans is not None and trans.is_overlap():
            later = trans.offset_after
            if later != self._offset:
                return ZonedDateTime._new(self._dt, later, self._zone)
        return self

    def with_zone_same_local(self, zone: ZoneId) -> ZonedDateTime:
        """The same local date-time in another zone, keeping the offset
        where possible"""
        if zone == self._zone:
            return self
        return ZonedDateTime.of_local(self._dt, zone, self._offset)

    def with_zone_same_instant(self, zone: ZoneId) -> ZonedDateTime:
        """The same instant in another zone"""
        if zone == self._zone:
            return self
        return ZonedDateTime._create(
            self.to_epoch_second(), self._dt._time._nano, zone
        )

    def with_fixed_offset_zone(self) -> ZonedDateTime:
        """Replace the zone with the current offset"""
        if self._zone == self._offset:
            return self
        return ZonedDateTime._new(self._dt, self._offset, self._offset)

    def _field_range(self, field: ChronoField) -> ValueRange:
        if field in _INSTANT_FIELDS:
            return field.range()
        return self._dt._field_range(field)

    def _get_field(self, field: ChronoField) -> int:
        if field is _F.INSTANT_SECONDS:
            return self.to_epoch_second()
        elif field is _F.OFFSET_SECONDS:
            return self._offset._secs
        return self._dt._get_field(field)

    def _with_field(self, field: ChronoField, value: int) -> ZonedDateTime:
        if field is _F.INSTANT_SECONDS:
            return ZonedDateTime._create(value, self._dt._time._nano, self._zone)
        elif field is _F.OFFSET_SECONDS:
            return self._resolve_offset(
                ZoneOffset.of_total_seconds(field.check_valid_int_value(value))
            )
        return self._resolve_local(self._dt._with_field(field, value))

    def with_year(self, year: int) -> ZonedDateTime:
        return self._resolve_local(self._dt.with_year(year))

    def with_month(self, month: int) -> ZonedDateTime:
        return self._resolve_local(self._dt.with_month(month))

    def with_day_of_month(self, day: int) -> ZonedDateTime:
        return self._resolve_local(self._dt.with_day_of_month(day))

    def with_day_of_year(self, day_of_year: int) -> ZonedDateTime:
        return self._resolve_local(self._dt.with_day_of_year(day_of_year))

    def with_hour(self, hour: int) -> ZonedDateTime:
        return self._resolve_local(self._dt.with_hour(hour))

    def with_minute(self, minute: int) -> ZonedDateTime:
        return self._resolve_local(self._dt.with_minute(minute))

    def with_second(self, second: int) -> ZonedDateTime:
        return self._resolve_local(self._dt.with_second(second))

    def with_nano(self, nano: int) -> ZonedDateTime:
        return self._resolve_local(self._dt.with_nano(nano))

    def truncated_to(self, unit: TemporalUnit) -> ZonedDateTime:
        return self._resolve_local(self._dt.truncated_to(unit))

    def _plus_unit(self, amount: int, unit: ChronoUnit) -> ZonedDateTime:
        if unit.is_date_based():
            return self._resolve_local(self._dt._plus_unit(amount, unit))
        return self._resolve_instant(self._dt._plus_unit(amount, unit))

    def plus(
        self, amount: Any, unit: Optional[TemporalUnit] = None
    ) -> ZonedDateTime:
        if unit is None and isinstance(amount, Period):
            return self._resolve_local(self._dt.plus(amount))
        return super().plus(amount, unit)

    def minus(
        self, amount: Any, unit: Optional[TemporalUnit] = None
    ) -> ZonedDateTime:
        if unit is None and isinstance(amount, Period):
            return self._resolve_local(self._dt.minus(amount))
        return super().minus(amount, unit)

    def plus_years(self, years: int) -> ZonedDateTime:
        return self._resolve_local(self._dt.plus_years(years))

    def plus_months(self, months: int) -> ZonedDateTime:
        return self._resolve_local(self._dt.plus_months(months))

    def plus_weeks(self, weeks: int) -> ZonedDateTime:
        return self._resolve_local(self._dt.plus_weeks(weeks))

    def plus_days(self, days: int) -> ZonedDateTime:
        """Add days, keeping the local time (and the offset if still valid)"""
        return self._resolve_local(self._dt.plus_days(days))

    def plus_hours(self, hours: int) -> ZonedDateTime:
        """Add exact hours on the instant time-line"""
        return self._resolve_instant(self._dt.plus_hours(hours))

    def plus_minutes(self, minutes: int) -> ZonedDateTime:
        return self._resolve_instant(self._dt.plus_minutes(minutes))

    def plus_seconds(self, seconds: int) -> ZonedDateTime:
        return self._resolve_instant(self._dt.plus_seconds(seconds))

    def plus_nanos(self, nanos: int) -> ZonedDateTime:
        return self._resolve_instant(self._dt.plus_nanos(nanos))

    def minus_years(self, years: int) -> ZonedDateTime:
        return self._resolve_local(self._dt.minus_years(years))

    def minus_months(self, months: int) -> ZonedDateTime:
        return self._resolve_local(self._dt.minus_months(months))

    def minus_weeks(self, weeks: int) -> ZonedDateTime:
        return self._resolve_local(self._dt.minus_weeks(weeks))

    def minus_days(self, days: int) -> ZonedDateTime:
        return self._resolve_local(self._dt.minus_days(days))

    def minus_hours(self, hours: int) -> ZonedDateTime:
        return self._resolve_instant(self._dt.minus_hours(hours))

    def minus_minutes(self, minutes: int) -> ZonedDateTime:
        return self._resolve_instant(self._dt.minus_minutes(minutes))

    def minus_seconds(self, seconds: int) -> ZonedDateTime:
        return self._resolve_instant(self._dt.minus_seconds(seconds))

    def minus_nanos(self, nanos: int) -> ZonedDateTime:
        return self._resolve_instant(self._dt.minus_nanos(nanos))

    def until(self, end: Any, unit: TemporalUnit) -> int:
        """The amount of the unit until ``end``, once in this zone.

        Date units count on the local time-line, time units on the
        instant time-line.
        """
        end = _convert(end, ZonedDateTime, "to_zoned_date_time")
        if isinstance(unit, ChronoUnit):
            end = end.with_zone_same_instant(self._zone)
            if unit.is_date_based():
                return self._dt.until(end._dt, unit)
            return self.to_offset_date_time().until(
                end.to_offset_date_time(), unit
            )
        return unit.between(self, end)

    def is_after(self, other: ZonedDateTime) -> bool:
        """Compare the instants, ignoring the local date-time and zone"""
        return self._instant_key() > other._instant_key()

    def is_before(self, other: ZonedDateTime) -> bool:
        return self._instant_key() < other._instant_key()

    def is_equal(self, other: ZonedDateTime) -> bool:
        return self._instant_key() == other._instant_key()

    def _instant_key(self) -> tuple[int, int]:
        return (self.to_epoch_second(), self._dt._time._nano)

    def _cmp_key(self) -> tuple:
        return self._instant_key() + self._dt._cmp_key() + (self._zone.id,)

    def __str__(self) -> str:
        s = f"{self._dt}{self._offset.id}"
        if self._zone != self._offset:
            s += f"[{self._zone.id}]"
        return s

    def _write(self) -> bytes:
        return self._dt._write() + self._offset._write() + _write_zone(self._zone)

    @classmethod
    def _read(cls, r: _Reader) -> ZonedDateTime:
        return cls._of_lenient(
            LocalDateTime._read(r), ZoneOffset._read(r), _read_zone(r)
        )

    @no_type_check
    def __reduce__(self):
        return _unpkl_zoned, (self._write(),)


@no_type_check
def _unpkl_zoned(data: bytes) -> ZonedDateTime:
    return ZonedDateTime._read(_Reader(data))


@final
class Period(_ImmutableBase):
    """A date-based amount of time: years, months and days.

    Each component is stored separately and may have its own sign.
    Periods are not ordered, as a month has no fixed length.

    Example
    -------
    >>> p = Period.of(1, 2, 3)
    Period(P1Y2M3D)
    >>> LocalDate(2021, 1, 31) + p
    LocalDate(2022-04-03)
    """

    __slots__ = ("_years", "_months", "_days")

    ZERO: ClassVar[Period]

    def __init__(self, years: int = 0, months: int = 0, days: int = 0) -> None:
        self._years = to_int_exact(years)
        self._months = to_int_exact(months)
        self._days = to_int_exact(days)

    @classmethod
    def of(cls, years: int, months: int, days: int) -> Period:
        return cls(years, months, days)

    @classmethod
    def of_years(cls, years: int) -> Period:
        return cls(years, 0, 0)

    @classmethod
    def of_months(cls, months: int) -> Period:
        return cls(0, months, 0)

    @classmethod
    def of_weeks(cls, weeks: int) -> Period:
        return cls(0, 0, multiply_exact(weeks, 7))

    @classmethod
    def of_days(cls, days: int) -> Period:
        return cls(0, 0, days)

    @classmethod
    def between(cls, start: LocalDate, end: LocalDate) -> Period:
        """The period from ``start`` up to (excluding) ``end``

        Example
        -------
        >>> Period.between(LocalDate(2020, 1, 15), LocalDate(2020, 3, 14))
        Period(P1M28D)
        """
        return start.until(end)

    @classmethod
    def parse(cls, s: str, /) -> Period:
        """Parse the ``PnYnMnWnD`` format. Weeks are converted to days.

        Example
        -------
        >>> Period.parse("P1Y2W")
        Period(P1Y14D)
        >>> Period.parse("-P1Y-2M")
        Period(P-1Y2M)
        """
        negate, years, months, weeks, days = _parse.period_from_iso(s)
        factor = -1 if negate else 1
        return _parsed(
            s,
            lambda: cls(
                years * factor,
                months * factor,
                add_exact(days, multiply_exact(weeks, 7)) * factor,
            ),
        )

    @property
    def years(self) -> int:
        return self._years

    @property
    def months(self) -> int:
        return self._months

    @property
    def days(self) -> int:
        return self._days

    @property
    def units(self) -> list[ChronoUnit]:
        return [_U.YEARS, _U.MONTHS, _U.DAYS]

    def get(self, unit: TemporalUnit) -> int:
        if unit is _U.YEARS:
            return self._years
        elif unit is _U.MONTHS:
            return self._months
        elif unit is _U.DAYS:
            return self._days
        raise UnsupportedTemporalUnit._for(unit)

    def is_zero(self) -> bool:
        return self is _PERIOD_ZERO or not (
            self._years or self._months or self._days
        )

    def is_negative(self) -> bool:
        """Whether any of the components is negative"""
        return self._years < 0 or self._months < 0 or self._days < 0

    def with_years(self, years: int) -> Period:
        return Period(years, self._months, self._days)

    def with_months(self, months: int) -> Period:
        return Period(self._years, months, self._days)

    def with_days(self, days: int) -> Period:
        return Period(self._years, self._months, days)

    def plus(self, other: Period) -> Period:
        if not isinstance(other, Period):
            raise TypeError(f"Expected Period, got {type(other).__name__}")
        return Period(
            self._years + other._years,
            self._months + other._months,
            self._days + other._days,
        )

    def minus(self, other: Period) -> Period:
        if not isinstance(other, Period):
            raise TypeError(f"Expected Period, got {type(other).__name__}")
        return Period(
            self._years - other._years,
            self._months - other._months,
            self._days - other._days,
        )

    def plus_years(self, years: int) -> Period:
        return self if years == 0 else self.with_years(self._years + years)

    def plus_months(self, months: int) -> Period:
        return self if months == 0 else self.with_months(self._months + months)

    def plus_days(self, days: int) -> Period:
        return self if days == 0 else self.with_days(self._days + days)

    def minus_years(self, years: int) -> Period:
        return self.plus_years(-years)

    def minus_months(self, months: int) -> Period:
        return self.plus_months(-months)

    def minus_days(self, days: int) -> Period:
        return self.plus_days(-days)

    def multiplied_by(self, scalar: int) -> Period:
        if self.is_zero() or scalar == 1:
            return self
        return Period(
            self._years * scalar, self._months * scalar, self._days * scalar
        )

    def negated(self) -> Period:
        return self.multiplied_by(-1)

    def normalized(self) -> Period:
        """Carry whole years out of the months, so that the months are
        within -11 to 11 and have the same sign as the years.

        Days are left unchanged.

        Example
        -------
        >>> Period.of(1, 15, 40).normalized()
        Period(P2Y3M40D)
        >>> Period.of(1, -25, 0).normalized()
        Period(P-1Y-1M)
        """
        total = self.to_total_months()
        years, months = trunc_div(total, 12), trunc_rem(total, 12)
        if years == self._years and months == self._months:
            return self
        return Period(years, months, self._days)

    def to_total_months(self) -> int:
        return self._years * 12 + self._months

    def add_to(self, temporal: _T) -> _T:
        """Add to a date-time, in years or months, then in days.

        Years and months are added in one step, so that
        ``P1Y1M`` on Jan 31 gives the end of February.
        """
        if self._years:
            if self._months:
                temporal = temporal.plus(  # type: ignore[attr-defined]
                    self.to_total_months(), _U.MONTHS
                )
            else:
                temporal = temporal.plus(  # type: ignore[attr-defined]
                    self._years, _U.YEARS
                )
        elif self._months:
            temporal = temporal.plus(  # type: ignore[attr-defined]
                self._months, _U.MONTHS
            )
        if self._days:
            temporal = temporal.plus(  # type: ignore[attr-defined]
                self._days, _U.DAYS
            )
        return temporal

    def subtract_from(self, temporal: _T) -> _T:
        if self._years:
            if self._months:
                temporal = temporal.minus(  # type: ignore[attr-defined]
                    self.to_total_months(), _U.MONTHS
                )
            else:
                temporal = temporal.minus(  # type: ignore[attr-defined]
                    self._years, _U.YEARS
                )
        elif self._months:
            temporal = temporal.minus(  # type: ignore[attr-defined]
                self._months, _U.MONTHS
            )
        if self._days:
            temporal = temporal.minus(  # type: ignore[attr-defined]
                self._days, _U.DAYS
            )
        return temporal

    def __str__(self) -> str:
        if self.is_zero():
            return "P0D"
        s = "P"
        if self._years:
            s += f"{self._years}Y"
        if self._months:
            s += f"{self._months}M"
        if self._days:
            s += f"{self._days}D"
        return s

    def __repr__(self) -> str:
        return f"Period({self})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return (self._years, self._months, self._days) == (
            other._years,
            other._months,
            other._days,
        )

    def __hash__(self) -> int:
        return hash((self._years, self._months, self._days))

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __neg__(self) -> Period:
        return self.negated()

    def __pos__(self) -> Period:
        return self

    def __abs__(self) -> Period:
        return Period(abs(self._years), abs(self._months), abs(self._days))

    def __add__(self, other: Period) -> Period:
        if isinstance(other, Period):
            return self.plus(other)
        return NotImplemented

    def __sub__(self, other: Period) -> Period:
        if isinstance(other, Period):
            return self.minus(other)
        return NotImplemented

    def __mul__(self, other: int) -> Period:
        if isinstance(other, int):
            return self.multiplied_by(other)
        return NotImplemented

    __rmul__ = __mul__

    def _write(self) -> bytes:
        return _PERIOD.pack(self._years, self._months, self._days)

    @classmethod
    def _read(cls, r: _Reader) -> Period:
        return cls(*r.read(_PERIOD))

    @no_type_check
    def __reduce__(self):
        return _unpkl_period, (self._write(),)


@no_type_check
def _unpkl_period(data: bytes) -> Period:
    return Period._read(_Reader(data))


_PERIOD_ZERO = Period.ZERO = Period()


@final
class YearMonth(_Temporal):
    """A year and month, such as a credit card expiry date.

    Example
    -------
    >>> ym = YearMonth(2024, 1)
    YearMonth(2024-01)
    >>> ym.plus_months(1).at_end_of_month()
    LocalDate(2024-02-29)
    """

    __slots__ = ("_year", "_month")

    _FIELDS = frozenset(
        [_F.MONTH_OF_YEAR, _F.PROLEPTIC_MONTH, _F.YEAR_OF_ERA, _F.YEAR, _F.ERA]
    )
    _UNITS = frozenset(
        [_U.MONTHS, _U.YEARS, _U.DECADES, _U.CENTURIES, _U.MILLENNIA, _U.ERAS]
    )

    def __init__(self, year: int, month: Union[int, Month]) -> None:
        if isinstance(month, Month):
            month = month.value
        self._year = _F.YEAR.check_valid_value(year)
        self._month = _F.MONTH_OF_YEAR.check_valid_value(month)

    @classmethod
    def of(cls, year: int, month: Union[int, Month]) -> YearMonth:
        return cls(year, month)

    @classmethod
    def now(cls, clock_or_zone: Union[Clock, ZoneId, None] = None) -> YearMonth:
        date = LocalDate.now(clock_or_zone)
        return cls(date._year, date._month)

    @classmethod
    def parse(cls, s: str, /) -> YearMonth:
        """Parse the ``YYYY-MM`` format

        Example
        -------
        >>> YearMonth.parse("2021-03")
        YearMonth(2021-03)
        """
        return _parsed(s, cls, *_parse.yearmonth_from_iso(s))

    @property
    def year(self) -> int:
        return self._year

    @property
    def month_value(self) -> int:
        return self._month

    @property
    def month(self) -> Month:
        return _MONTHS[self._month - 1]

    def is_leap_year(self) -> bool:
        return is_leap(self._year)

    def length_of_month(self) -> int:
        return days_in_month(self._year, self._month)

    def length_of_year(self) -> int:
        return 366 if is_leap(self._year) else 365

    def is_valid_day(self, day: int) -> bool:
        return 1 <= day <= self.length_of_month()

    def _proleptic_month(self) -> int:
        return self._year * 12 + self._month - 1

    def _field_range(self, field: ChronoField) -> ValueRange:
        if field is _F.YEAR_OF_ERA:
            if self._year <= 0:
                return ValueRange.of(1, MAX_YEAR + 1)
            return ValueRange.of(1, MAX_YEAR)
        return field.range()

    def _get_field(self, field: ChronoField) -> int:
        if field is _F.MONTH_OF_YEAR:
            return self._month
        elif field is _F.PROLEPTIC_MONTH:
            return self._proleptic_month()
        elif field is _F.YEAR_OF_ERA:
            return self._year if self._year >= 1 else 1 - self._year
        elif field is _F.YEAR:
            return self._year
        else:  # ERA
            return 1 if self._year >= 1 else 0

    def _with_field(self, field: ChronoField, value: int) -> YearMonth:
        field.check_valid_value(value)
        if field is _F.MONTH_OF_YEAR:
            return self.with_month(value)
        elif field is _F.PROLEPTIC_MONTH:
            return self.plus_months(value - self._proleptic_month())
        elif field is _F.YEAR_OF_ERA:
            return self.with_year(value if self._year >= 1 else 1 - value)
        elif field is _F.YEAR:
            return self.with_year(value)
        elif value == self._get_field(_F.ERA):
            return self
        return self.with_year(1 - self._year)

    def with_year(self, year: int) -> YearMonth:
        if year == self._year:
            return self
        return YearMonth(year, self._month)

    def with_month(self, month: int) -> YearMonth:
        if month == self._month:
            return self
        return YearMonth(self._year, month)

    def _plus_unit(self, amount: int, unit: ChronoUnit) -> YearMonth:
        if unit is _U.MONTHS:
            return self.plus_months(amount)
        elif unit is _U.YEARS:
            return self.plus_years(amount)
        elif unit is _U.DECADES:
            return self.plus_years(multiply_exact(amount, 10))
        elif unit is _U.CENTURIES:
            return self.plus_years(multiply_exact(amount, 100))
        elif unit is _U.MILLENNIA:
            return self.plus_years(multiply_exact(amount, 1_000))
        else:  # ERAS
            return self.with_field(
                _F.ERA, add_exact(self._get_field(_F.ERA), amount)
            )

    def plus_years(self, years: int) -> YearMonth:
        if years == 0:
            return self
        return YearMonth._unchecked(
            _F.YEAR.check_valid_int_value(self._year + years), self._month
        )

    def plus_months(self, months: int) -> YearMonth:
        """Add months, carrying into the year

        Example
        -------
        >>> YearMonth(2021, 11).plus_months(3)
        YearMonth(2022-02)
        """
        if months == 0:
            return self
        year, month0 = divmod(self._proleptic_month() + months, 12)
        return YearMonth._unchecked(
            _F.YEAR.check_valid_int_value(year), month0 + 1
        )

    def minus_years(self, years: int) -> YearMonth:
        return self.plus_years(-years)

    def minus_months(self, months: int) -> YearMonth:
        return self.plus_months(-months)

    @classmethod
    def _unchecked(cls, year: int, month: int) -> YearMonth:
        self = _object_new(cls)
        self._year = year
        self._month = month
        return self

    def until(self, end: Any, unit: TemporalUnit) -> int:
        end = _convert(end, YearMonth, "to_year_month")
        if isinstance(unit, ChronoUnit):
            months = end._proleptic_month() - self._proleptic_month()
            if unit is _U.MONTHS:
                return months
            elif unit is _U.YEARS:
                return trunc_div(months, 12)
            elif unit is _U.DECADES:
                return trunc_div(months, 120)
            elif unit is _U.CENTURIES:
                return trunc_div(months, 1_200)
            elif unit is _U.MILLENNIA:
                return trunc_div(months, 12_000)
            elif unit is _U.ERAS:
                return end._get_field(_F.ERA) - self._get_field(_F.ERA)
            raise UnsupportedTemporalUnit._for(unit)
        return unit.between(self, end)

    def to_year_month(self) -> YearMonth:
        return self

    def at_day(self, day: int) -> LocalDate:
        return LocalDate(self._year, self._month, day)

    def at_end_of_month(self) -> LocalDate:
        return LocalDate._unchecked(
            self._year, self._month, self.length_of_month()
        )

    def is_after(self, other: YearMonth) -> bool:
        return self > other

    def is_before(self, other: YearMonth) -> bool:
        return self < other

    def _cmp_key(self) -> tuple:
        return (self._year, self._month)

    def __str__(self) -> str:
        return f"{_format_year(self._year)}-{self._month:02d}"

    def _write(self) -> bytes:
        return _YEAR_MONTH.pack(self._year, self._month)

    @classmethod
    def _read(cls, r: _Reader) -> YearMonth:
        return cls(*r.read(_YEAR_MONTH))

    @no_type_check
    def __reduce__(self):
        return _unpkl_ym, (self._write(),)


@no_type_check
def _unpkl_ym(data: bytes) -> YearMonth:
    return YearMonth._read(_Reader(data))


@final
class MonthDay(_Accessor):
    """A month and day, such as a birthday. February 29 is allowed.

    Example
    -------
    >>> md = MonthDay(2, 29)
    MonthDay(--02-29)
    >>> md.at_year(2023)
    LocalDate(2023-02-28)
    """

    __slots__ = ("_month", "_day")

    _FIELDS = frozenset([_F.DAY_OF_MONTH, _F.MONTH_OF_YEAR])

    def __init__(self, month: Union[int, Month], day: int) -> None:
        if isinstance(month, Month):
            month = month.value
        _F.MONTH_OF_YEAR.check_valid_value(month)
        _F.DAY_OF_MONTH.check_valid_value(day)
        if day > days_in_month(4, month):
            raise InvalidDate(
                f"Illegal value for DayOfMonth field, value {day} "
                f"is not valid for month {_MONTHS[month - 1].name}"
            )
        self._month = month
        self._day = day

    @classmethod
    def of(cls, month: Union[int, Month], day: int) -> MonthDay:
        return cls(month, day)

    @classmethod
    def now(cls, clock_or_zone: Union[Clock, ZoneId, None] = None) -> MonthDay:
        date = LocalDate.now(clock_or_zone)
        return cls(date._month, date._day)

    @classmethod
    def parse(cls, s: str, /) -> MonthDay:
        """Parse the ``--MM-DD`` format"""
        return _parsed(s, cls, *_parse.monthday_from_iso(s))

    @property
    def month_value(self) -> int:
        return self._month

    @property
    def month(self) -> Month:
        return _MONTHS[self._month - 1]

    @property
    def day_of_month(self) -> int:
        return self._day

    def _field_range(self, field: ChronoField) -> ValueRange:
        if field is _F.DAY_OF_MONTH:
            month = _MONTHS[self._month - 1]
            return ValueRange.of(1, month.min_length(), month.max_length())
        return field.range()

    def _get_field(self, field: ChronoField) -> int:
        if field is _F.DAY_OF_MONTH:
            return self._day
        return self._month

    def with_month(self, month: int) -> MonthDay:
        """Change the month, clamping the day to the month's maximum length"""
        _F.MONTH_OF_YEAR.check_valid_value(month)
        day = min(self._day, days_in_month(4, month))
        if month == self._month and day == self._day:
            return self
        return MonthDay(month, day)

    def with_day_of_month(self, day: int) -> MonthDay:
        if day == self._day:
            return self
        return MonthDay(self._month, day)

    def is_valid_year(self, year: int) -> bool:
        return not (self._day == 29 and self._month == 2 and not is_leap(year))

    def at_year(self, year: int) -> LocalDate:
        """The date in the given year, using Feb 28 for Feb 29 in non-leap
        years"""
        return LocalDate(
            year, self._month, self._day if self.is_valid_year(year) else 28
        )

    def is_after(self, other: MonthDay) -> bool:
        return self > other

    def is_before(self, other: MonthDay) -> bool:
        return self < other

    def _cmp_key(self) -> tuple:
        return (self._month, self._day)

    def __str__(self) -> str:
        return f"--{self._month:02d}-{self._day:02d}"

    def _write(self) -> bytes:
        return _MONTH_DAY.pack(self._month, self._day)

    @classmethod
    def _read(cls, r: _Reader) -> MonthDay:
        return cls(*r.read(_MONTH_DAY))

    @no_type_check
    def __reduce__(self):
        return _unpkl_md, (self._write(),)


@no_type_check
def _unpkl_md(data: bytes) -> MonthDay:
    return MonthDay._read(_Reader(data))


class Clock(_ImmutableBase, ABC):
    """A source of the current instant, together with a zone.

    Pass a clock to the ``now()`` methods to control the current time,
    e.g. in tests.

    Example
    -------
    >>> clock = Clock.fixed(Instant.EPOCH, ZoneOffset.of_hours(1))
    >>> LocalTime.now(clock)
    LocalTime(01:00)
    """

    __slots__ = ()

    @property
    @abstractmethod
    def zone(self) -> ZoneId: ...

    @abstractmethod
    def with_zone(self, zone: ZoneId) -> Clock: ...

    @abstractmethod
    def instant(self) -> Instant: ...

    def millis(self) -> int:
        return self.instant().to_epoch_milli()

    @staticmethod
    def system_utc() -> Clock:
        return _SYSTEM_UTC_CLOCK

    @staticmethod
    def system_default_zone() -> Clock:
        return _SystemClock(ZoneId.system_default())

    @staticmethod
    def system(zone: ZoneId) -> Clock:
        if zone == _OFFSET_UTC:
            return _SYSTEM_UTC_CLOCK
        return _SystemClock(zone)

    @staticmethod
    def fixed(instant: Instant, zone: ZoneId) -> Clock:
        """A clock which always returns the same instant"""
        return _FixedClock(instant, zone)

    @staticmethod
    def offset(base: Clock, duration: Duration) -> Clock:
        """A clock which runs ahead of ``base`` by the duration"""
        if duration.is_zero():
            return base
        return _OffsetClock(base, duration)

    @staticmethod
    def tick(base: Clock, duration: Duration) -> Clock:
        """A clock which truncates the instant of ``base`` to multiples of
        the duration.

        The duration must be a whole number of milliseconds, or divide a
        second evenly.
        """
        if duration.is_negative():
            raise DateTimeError("Tick duration must not be negative")
        tick_nanos = duration.to_nanos()
        if tick_nanos % 1_000_000 and NANOS_PER_SECOND % tick_nanos:
            raise DateTimeError("Invalid tick duration")
        if tick_nanos <= 1:
            return base
        return _TickClock(base, tick_nanos)

    @staticmethod
    def tick_seconds(zone: ZoneId) -> Clock:
        return _TickClock(Clock.system(zone), NANOS_PER_SECOND)

    @staticmethod
    def tick_minutes(zone: ZoneId) -> Clock:
        return _TickClock(Clock.system(zone), NANOS_PER_MINUTE)


@final
class _SystemClock(Clock):
    __slots__ = ("_zone",)

    def __init__(self, zone: ZoneId) -> None:
        self._zone = zone

    @property
    def zone(self) -> ZoneId:
        return self._zone

    def with_zone(self, zone: ZoneId) -> Clock:
        return self if zone == self._zone else _SystemClock(zone)

    def instant(self) -> Instant:
        return Instant._create(*divmod(time_ns(), NANOS_PER_SECOND))

    def millis(self) -> int:
        return time_ns() // NANOS_PER_MILLI

    def __eq__(self, other: object) -> bool:
        if isinstance(other, _SystemClock):
            return self._zone == other._zone
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._zone) + 1

    def __repr__(self) -> str:
        return f"SystemClock[{self._zone}]"


@final
class _FixedClock(Clock):
    __slots__ = ("_instant", "_zone")

    def __init__(self, instant: Instant, zone: ZoneId) -> None:
        self._instant = instant
        self._zone = zone

    @property
    def zone(self) -> ZoneId:
        return self._zone

    def with_zone(self, zone: ZoneId) -> Clock:
        return self if zone == self._zone else _FixedClock(self._instant, zone)

    def instant(self) -> Instant:
        return self._instant

    def __eq__(self, other: object) -> bool:
        if isinstance(other, _FixedClock):
            return (self._instant, self._zone) == (other._instant, other._zone)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._instant, self._zone))

    def __repr__(self) -> str:
        return f"FixedClock[{self._instant},{self._zone}]"


@final
class _OffsetClock(Clock):
    __slots__ = ("_base", "_offset")

    def __init__(self, base: Clock, offset: Duration) -> None:
        self._base = base
        self._offset = offset

    @property
    def zone(self) -> ZoneId:
        return self._base.zone

    def with_zone(self, zone: ZoneId) -> Clock:
        if zone == self._base.zone:
            return self
        return _OffsetClock(self._base.with_zone(zone), self._offset)

    def instant(self) -> Instant:
        return self._base.instant().plus(self._offset)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, _OffsetClock):
            return (self._base, self._offset) == (other._base, other._offset)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._base, self._offset))

    def __repr__(self) -> str:
        return f"OffsetClock[{self._base!r},{self._offset}]"


@final
class _TickClock(Clock):
    __slots__ = ("_base", "_tick_nanos")

    def __init__(self, base: Clock, tick_nanos: int) -> None:
        self._base = base
        self._tick_nanos = tick_nanos

    @property
    def zone(self) -> ZoneId:
        return self._base.zone

    def with_zone(self, zone: ZoneId) -> Clock:
        if zone == self._base.zone:
            return self
        return _TickClock(self._base.with_zone(zone), self._tick_nanos)

    def instant(self) -> Instant:
        if self._tick_nanos % 1_000_000 == 0:
            millis = self._base.millis()
            return Instant.of_epoch_milli(
                millis - millis % (self._tick_nanos // 1_000_000)
            )
        instant = self._base.instant()
        return instant.minus_nanos(instant._nanos % self._tick_nanos)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, _TickClock):
            return (self._base, self._tick_nanos) == (
                other._base,
                other._tick_nanos,
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._base, self._tick_nanos))

    def __repr__(self) -> str:
        return f"TickClock[{self._base!r},{Duration.of_nanos(self._tick_nanos)}]"


_SYSTEM_UTC_CLOCK = _SystemClock(_OFFSET_UTC)


def _as_clock(clock_or_zone: Union[Clock, ZoneId, None]) -> Clock:
    if clock_or_zone is None:
        return Clock.system_default_zone()
    elif isinstance(clock_or_zone, Clock):
        return clock_or_zone
    elif isinstance(clock_or_zone, ZoneId):
        return Clock.system(clock_or_zone)
    raise TypeError(
        f"Expected a Clock or ZoneId, got {type(clock_or_zone).__name__}"
    )


# Binary layouts. All little-endian, without padding.
_SECS_NANOS = Struct("<qi")
_DATE = Struct("<iBB")
_TIME = Struct("<BBBi")
_OFFSET = Struct("<i")
_PERIOD = Struct("<iii")
_YEAR_MONTH = Struct("<iB")
_MONTH_DAY = Struct("<BB")
_STR_LEN = Struct("<H")
_TAG = Struct("<B")


class _Reader:
    """Reads consecutive fields from a serialized value"""

    __slots__ = ("_data", "_pos")

    def __init__(self, data: bytes, pos: int = 0) -> None:
        self._data = data
        self._pos = pos

    def read(self, s: Struct) -> tuple:
        end = self._pos + s.size
        if end > len(self._data):
            raise DateTimeError("Invalid serialized data: too short")
        values = s.unpack_from(self._data, self._pos)
        self._pos = end
        return values

    def read_str(self) -> str:
        (size,) = self.read(_STR_LEN)
        end = self._pos + size
        if end > len(self._data):
            raise DateTimeError("Invalid serialized data: too short")
        raw = self._data[self._pos : end]
        self._pos = end
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            raise DateTimeError("Invalid serialized data: bad string") from None

    def check_done(self) -> None:
        if self._pos != len(self._data):
            raise DateTimeError("Invalid serialized data: trailing bytes")


_TYPE_TAGS: dict[type, int] = {
    Duration: 1,
    Instant: 2,
    LocalDate: 3,
    LocalTime: 4,
    LocalDateTime: 5,
    ZonedDateTime: 6,
    ZoneRegion: 7,
    ZoneOffset: 8,
    OffsetTime: 9,
    OffsetDateTime: 10,
    YearMonth: 12,
    MonthDay: 13,
    Period: 14,
}
_TAG_TYPES: dict[int, Any] = {tag: cls for cls, tag in _TYPE_TAGS.items()}


def _write_zone(zone: ZoneId) -> bytes:
    return _TAG.pack(_TYPE_TAGS[type(zone)]) + zone._write()  # type: ignore[attr-defined]


def _read_zone(r: _Reader) -> ZoneId:
    (tag,) = r.read(_TAG)
    if tag == 8:
        return ZoneOffset._read(r)
    elif tag == 7:
        return ZoneRegion._read(r)
    raise DateTimeError(f"Invalid serialized data: unknown zone type {tag}")


def serialize(value: Any, /) -> bytes:
    """Encode a value as bytes: a type tag followed by its fields.

    Example
    -------
    >>> serialize(LocalDate(2021, 1, 2))
    b'\\x03\\xe5\\x07\\x00\\x00\\x01\\x02'
    """
    try:
        tag = _TYPE_TAGS[type(value)]
    except KeyError:
        raise TypeError(f"Cannot serialize {type(value).__name__}") from None
    return _TAG.pack(tag) + value._write()


def deserialize(data: bytes, /) -> Any:
    """Decode a value written by :func:`serialize`.

    Zoned date-times are restored with their stored offset, even if the
    zone's rules have changed since.
    """
    if not data:
        raise DateTimeError("Invalid serialized data: empty")
    try:
        cls = _TAG_TYPES[data[0]]
    except KeyError:
        raise DateTimeError(
            f"Invalid serialized data: unknown type {data[0]}"
        ) from None
    r = _Reader(data, 1)
    value = cls._read(r)
    r.check_done()
    return value
