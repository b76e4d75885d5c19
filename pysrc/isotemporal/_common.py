from __future__ import annotations

HOURS_PER_DAY = 24
MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = MINUTES_PER_HOUR * HOURS_PER_DAY
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * MINUTES_PER_HOUR
SECONDS_PER_DAY = SECONDS_PER_HOUR * HOURS_PER_DAY
MILLIS_PER_DAY = SECONDS_PER_DAY * 1_000
MICROS_PER_DAY = SECONDS_PER_DAY * 1_000_000
NANOS_PER_MILLI = 1_000_000
NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MINUTE = NANOS_PER_SECOND * SECONDS_PER_MINUTE
NANOS_PER_HOUR = NANOS_PER_MINUTE * MINUTES_PER_HOUR
NANOS_PER_DAY = NANOS_PER_HOUR * HOURS_PER_DAY

# Days in a 400-year Gregorian cycle
DAYS_PER_CYCLE = 146_097
# Days from 0000-01-01 to 1970-01-01
DAYS_0000_TO_1970 = DAYS_PER_CYCLE * 5 - (30 * 365 + 7)

Nanos = int  # 0-999_999_999
EpochSecs = int


class DateTimeError(ValueError):
    """Base class for errors raised while creating or computing date-times"""


class ArithmeticOverflow(OverflowError):
    """A result does not fit the fixed range of its type"""


class InstantOutOfRange(ArithmeticOverflow, DateTimeError):
    """An instant falls outside ``Instant.MIN`` and ``Instant.MAX``"""


class FieldOutOfRange(DateTimeError):
    """A field value is outside of its valid range"""

    @classmethod
    def _for(cls, field: object, valid: object, value: int) -> FieldOutOfRange:
        return cls(f"Invalid value for {field} (valid values {valid}): {value}")


class InvalidDate(DateTimeError):
    """The year, month and day are each valid, but not together"""


class UnsupportedTemporalType(DateTimeError):
    """A field or unit is not supported by a date-time type"""


class UnsupportedTemporalField(UnsupportedTemporalType):
    """A field is not supported by a date-time type"""

    @classmethod
    def _for(cls, field: object) -> UnsupportedTemporalField:
        return cls(f"Unsupported field: {field}")


class UnsupportedTemporalUnit(UnsupportedTemporalType):
    """A unit is not supported by a date-time type"""

    @classmethod
    def _for(cls, unit: object) -> UnsupportedTemporalUnit:
        return cls(f"Unsupported unit: {unit}")


class SkippedTime(DateTimeError):
    """A local date-time is skipped in a timezone, e.g. because of DST"""

    @classmethod
    def _for_zone(cls, local: object, zone: object) -> SkippedTime:
        return cls(
            f"{local} does not exist in zone '{zone}' due to a gap "
            "in the local time-line, typically caused by daylight savings"
        )


class InvalidOffset(DateTimeError):
    """An offset is not valid for a local date-time in a zone"""

    @classmethod
    def _for_zone(
        cls, offset: object, local: object, zone: object
    ) -> InvalidOffset:
        return cls(
            f"ZoneOffset '{offset}' is not valid for "
            f"LocalDateTime '{local}' in zone '{zone}'"
        )


class TimeZoneNotFoundError(DateTimeError):
    """A timezone with the given ID was not found"""

    @classmethod
    def for_key(cls, key: str) -> TimeZoneNotFoundError:
        return cls(f"No time zone found with key {key!r}")


class DateTimeParseError(DateTimeError):
    """A string could not be parsed as a date-time value"""

    @classmethod
    def _for(cls, s: str) -> DateTimeParseError:
        return cls(f"Invalid format: {s!r}")
