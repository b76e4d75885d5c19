import pickle
import re
from copy import copy, deepcopy

import pytest
from hypothesis import given
from hypothesis.strategies import integers, text

from isotemporal import (
    ChronoField,
    ChronoUnit,
    Clock,
    DateTimeError,
    DateTimeParseError,
    Duration,
    FieldOutOfRange,
    Instant,
    InvalidDate,
    LocalDate,
    LocalDateTime,
    LocalTime,
    Month,
    Period,
    UnsupportedTemporalField,
    UnsupportedTemporalUnit,
    ZoneId,
    ZoneOffset,
)

from .common import (
    CEST,
    CET,
    DST_ZONE,
    AlwaysEqual,
    AlwaysLarger,
    AlwaysSmaller,
    NeverEqual,
)


class TestInit:

    def test_valid(self):
        dt = LocalDateTime(2021, 1, 2, 3, 4, 5, 6)
        assert dt.year == 2021
        assert dt.month_value == 1
        assert dt.month is Month.JANUARY
        assert dt.day_of_month == 2
        assert dt.day == 2
        assert dt.hour == 3
        assert dt.minute == 4
        assert dt.second == 5
        assert dt.nano == 6

    def test_defaults(self):
        assert LocalDateTime(2021, 1, 2) == LocalDateTime(2021, 1, 2, 0, 0, 0, 0)

    def test_invalid(self):
        with pytest.raises(InvalidDate):
            LocalDateTime(2023, 2, 29)
        with pytest.raises(FieldOutOfRange, match="HourOfDay"):
            LocalDateTime(2023, 2, 28, 24)

    def test_of(self):
        dt = LocalDateTime.of(LocalDate(2021, 1, 2), LocalTime(3, 4))
        assert dt == LocalDateTime(2021, 1, 2, 3, 4)
        assert dt.to_local_date() == LocalDate(2021, 1, 2)
        assert dt.to_local_time() == LocalTime(3, 4)
        assert dt.to_local_date_time() is dt

    def test_of_wrong_types(self):
        with pytest.raises(TypeError, match="LocalDate and a LocalTime"):
            LocalDateTime.of(LocalTime(3, 4), LocalDate(2021, 1, 2))  # type: ignore[arg-type]

    def test_extremes(self):
        assert str(LocalDateTime.MIN) == "-999999999-01-01T00:00"
        assert str(LocalDateTime.MAX) == (
            "+999999999-12-31T23:59:59.999999999"
        )


class TestFactories:

    @pytest.mark.parametrize(
        "secs, nano, offset, expect",
        [
            (0, 0, ZoneOffset.UTC, LocalDateTime(1970, 1, 1)),
            (0, 0, ZoneOffset.of_hours(-1), LocalDateTime(1969, 12, 31, 23)),
            (
                1_700_000_000,
                5,
                ZoneOffset.of_hours_minutes(5, 30),
                LocalDateTime(2023, 11, 15, 3, 43, 20, 5),
            ),
            (-1, 999_999_999, ZoneOffset.UTC, LocalDateTime.of(
                LocalDate(1969, 12, 31), LocalTime.MAX
            )),
        ],
    )
    def test_of_epoch_second(self, secs, nano, offset, expect):
        dt = LocalDateTime.of_epoch_second(secs, nano, offset)
        assert dt == expect
        assert dt.to_epoch_second(offset) == secs

    def test_of_epoch_second_invalid_nano(self):
        with pytest.raises(FieldOutOfRange, match="NanoOfSecond"):
            LocalDateTime.of_epoch_second(0, 1_000_000_000, ZoneOffset.UTC)

    def test_of_instant(self):
        i = Instant.parse("2023-07-01T00:00:00Z")
        assert LocalDateTime.of_instant(i, ZoneId.of("Europe/Paris")) == (
            LocalDateTime(2023, 7, 1, 2)
        )
        assert LocalDateTime.of_instant(i, DST_ZONE) == (
            LocalDateTime(2023, 7, 1, 2)
        )
        assert LocalDateTime.of_instant(i, ZoneOffset.of_hours(-5)) == (
            LocalDateTime(2023, 6, 30, 19)
        )

    def test_now(self):
        clock = Clock.fixed(
            Instant.parse("2021-01-01T23:30:00.5Z"), ZoneOffset.of_hours(1)
        )
        assert LocalDateTime.now(clock) == LocalDateTime(
            2021, 1, 2, 0, 30, 0, 500_000_000
        )
        assert isinstance(LocalDateTime.now(ZoneOffset.UTC), LocalDateTime)
        assert isinstance(LocalDateTime.now(), LocalDateTime)


class TestParse:

    @pytest.mark.parametrize(
        "s, expect",
        [
            ("2021-01-02T03:04", LocalDateTime(2021, 1, 2, 3, 4)),
            ("2021-01-02T03:04:05", LocalDateTime(2021, 1, 2, 3, 4, 5)),
            (
                "2021-01-02T03:04:05.000000006",
                LocalDateTime(2021, 1, 2, 3, 4, 5, 6),
            ),
            ("+10000-01-02T03:04", LocalDateTime(10_000, 1, 2, 3, 4)),
        ],
    )
    def test_valid(self, s, expect):
        assert LocalDateTime.parse(s) == expect

    @pytest.mark.parametrize(
        "s",
        [
            "2021-01-02",
            "2021-01-02 03:04",
            "2021-01-02t03:04",
            "2021-01-02T03:04Z",
            "2021-01-02T03:04+01:00",
            "2021-01-02T3:04",
            "2021-01-02T03:04:05.",
            "",
        ],
    )
    def test_invalid_format(self, s):
        with pytest.raises(
            DateTimeParseError, match=r"Invalid format.*" + re.escape(repr(s))
        ):
            LocalDateTime.parse(s)

    def test_invalid_values(self):
        with pytest.raises(DateTimeParseError, match="February 29"):
            LocalDateTime.parse("2023-02-29T00:00")
        with pytest.raises(DateTimeParseError, match="HourOfDay"):
            LocalDateTime.parse("2023-02-28T24:00")

    @given(text())
    def test_fuzzing(self, s: str):
        with pytest.raises(DateTimeParseError):
            LocalDateTime.parse(s)


class TestAccessors:

    def test_calendar(self):
        dt = LocalDateTime(2024, 3, 1, 12)
        assert dt.day_of_year() == 61
        assert dt.day_of_week() is LocalDate(2024, 3, 1).day_of_week()

    def test_fields(self):
        dt = LocalDateTime(2021, 1, 31, 22, 15, 30, 5)
        assert dt.get(ChronoField.YEAR) == 2021
        assert dt.get(ChronoField.DAY_OF_WEEK) == 7
        assert dt.get(ChronoField.HOUR_OF_DAY) == 22
        assert dt.get(ChronoField.NANO_OF_SECOND) == 5
        assert dt.get_long(ChronoField.EPOCH_DAY) == 18_658
        assert dt.range(ChronoField.DAY_OF_MONTH).maximum == 31

    def test_unsupported(self):
        dt = LocalDateTime(2021, 1, 1)
        with pytest.raises(UnsupportedTemporalField, match="InstantSeconds"):
            dt.get_long(ChronoField.INSTANT_SECONDS)
        with pytest.raises(UnsupportedTemporalField, match="OffsetSeconds"):
            dt.get(ChronoField.OFFSET_SECONDS)
        assert dt.is_supported(ChronoUnit.NANOS)
        assert dt.is_supported(ChronoUnit.ERAS)
        assert not dt.is_supported(ChronoUnit.FOREVER)


class TestWith:

    def test_methods(self):
        dt = LocalDateTime(2024, 2, 29, 10, 15, 30, 5)
        assert dt.with_year(2023) == LocalDateTime(2023, 2, 28, 10, 15, 30, 5)
        assert dt.with_month(4) == LocalDateTime(2024, 4, 29, 10, 15, 30, 5)
        assert dt.with_day_of_month(1) == LocalDateTime(
            2024, 2, 1, 10, 15, 30, 5
        )
        assert dt.with_day_of_year(1) == LocalDateTime(
            2024, 1, 1, 10, 15, 30, 5
        )
        assert dt.with_hour(1) == LocalDateTime(2024, 2, 29, 1, 15, 30, 5)
        assert dt.with_minute(1) == LocalDateTime(2024, 2, 29, 10, 1, 30, 5)
        assert dt.with_second(1) == LocalDateTime(2024, 2, 29, 10, 15, 1, 5)
        assert dt.with_nano(1) == LocalDateTime(2024, 2, 29, 10, 15, 30, 1)

    def test_unchanged(self):
        dt = LocalDateTime(2021, 1, 2, 3)
        assert dt.with_year(2021) is dt
        assert dt.with_hour(3) is dt

    def test_with_field(self):
        dt = LocalDateTime(2021, 1, 31, 22, 15)
        assert dt.with_field(ChronoField.MONTH_OF_YEAR, 2) == (
            LocalDateTime(2021, 2, 28, 22, 15)
        )
        assert dt.with_field(ChronoField.AMPM_OF_DAY, 0) == (
            LocalDateTime(2021, 1, 31, 10, 15)
        )
        assert dt.with_field(ChronoField.EPOCH_DAY, 0) == (
            LocalDateTime(1970, 1, 1, 22, 15)
        )
        with pytest.raises(UnsupportedTemporalField):
            dt.with_field(ChronoField.INSTANT_SECONDS, 0)

    def test_truncated_to(self):
        dt = LocalDateTime(2021, 1, 31, 22, 15, 30, 5)
        assert dt.truncated_to(ChronoUnit.HOURS) == LocalDateTime(
            2021, 1, 31, 22
        )
        assert dt.truncated_to(ChronoUnit.DAYS) == LocalDateTime(2021, 1, 31)
        with pytest.raises(UnsupportedTemporalUnit):
            dt.truncated_to(ChronoUnit.MONTHS)


class TestArithmetic:

    @pytest.mark.parametrize(
        "method, amount, expect",
        [
            ("plus_years", 1, LocalDateTime(2022, 1, 31, 23, 30)),
            ("plus_months", 1, LocalDateTime(2021, 2, 28, 23, 30)),
            ("minus_months", 2, LocalDateTime(2020, 11, 30, 23, 30)),
            ("plus_weeks", 1, LocalDateTime(2021, 2, 7, 23, 30)),
            ("minus_weeks", 1, LocalDateTime(2021, 1, 24, 23, 30)),
            ("plus_days", 1, LocalDateTime(2021, 2, 1, 23, 30)),
            ("minus_days", 31, LocalDateTime(2020, 12, 31, 23, 30)),
            ("plus_hours", 1, LocalDateTime(2021, 2, 1, 0, 30)),
            ("minus_hours", 24, LocalDateTime(2021, 1, 30, 23, 30)),
            ("plus_minutes", 30, LocalDateTime(2021, 2, 1)),
            ("minus_minutes", 1_440 * 2, LocalDateTime(2021, 1, 29, 23, 30)),
            ("plus_seconds", 1_800, LocalDateTime(2021, 2, 1)),
            ("minus_seconds", 1, LocalDateTime(2021, 1, 31, 23, 29, 59)),
            ("plus_nanos", 1, LocalDateTime(2021, 1, 31, 23, 30, 0, 1)),
            (
                "minus_nanos",
                1,
                LocalDateTime(2021, 1, 31, 23, 29, 59, 999_999_999),
            ),
        ],
    )
    def test_methods(self, method, amount, expect):
        dt = LocalDateTime(2021, 1, 31, 23, 30)
        assert getattr(dt, method)(amount) == expect

    @pytest.mark.parametrize(
        "unit, amount, expect",
        [
            (ChronoUnit.NANOS, -1, LocalDateTime(2021, 1, 1, 11, 59, 59, 999_999_999)),
            (ChronoUnit.MICROS, 86_400_000_001, LocalDateTime(2021, 1, 2, 12, 0, 0, 1_000)),
            (ChronoUnit.MILLIS, -86_400_001, LocalDateTime(2020, 12, 31, 11, 59, 59, 999_000_000)),
            (ChronoUnit.SECONDS, 43_200, LocalDateTime(2021, 1, 2)),
            (ChronoUnit.MINUTES, -721, LocalDateTime(2020, 12, 31, 23, 59)),
            (ChronoUnit.HOURS, 36, LocalDateTime(2021, 1, 3)),
            (ChronoUnit.HALF_DAYS, 3, LocalDateTime(2021, 1, 3)),
            (ChronoUnit.HALF_DAYS, 257, LocalDateTime(2021, 5, 10)),
            (ChronoUnit.HALF_DAYS, -1, LocalDateTime(2021, 1, 1)),
            (ChronoUnit.DAYS, 1, LocalDateTime(2021, 1, 2, 12)),
            (ChronoUnit.MONTHS, 1, LocalDateTime(2021, 2, 1, 12)),
            (ChronoUnit.MILLENNIA, 1, LocalDateTime(3021, 1, 1, 12)),
        ],
    )
    def test_units(self, unit, amount, expect):
        dt = LocalDateTime(2021, 1, 1, 12)
        assert dt.plus(amount, unit) == expect
        assert dt.minus(-amount, unit) == expect

    def test_period_and_duration(self):
        dt = LocalDateTime(2021, 1, 31, 23, 30)
        assert dt.plus(Period.of(0, 1, 1)) == LocalDateTime(2021, 3, 1, 23, 30)
        assert dt - Period.of_days(31) == LocalDateTime(2020, 12, 31, 23, 30)
        assert dt + Duration.of_minutes(30) == LocalDateTime(2021, 2, 1)
        assert dt.minus(Duration.of_seconds(0, 1)) == LocalDateTime(
            2021, 1, 31, 23, 29, 59, 999_999_999
        )

    def test_out_of_range(self):
        with pytest.raises(DateTimeError):
            LocalDateTime.MAX.plus_nanos(1)
        with pytest.raises(DateTimeError):
            LocalDateTime.MIN.minus_hours(1)

    def test_large_amounts(self):
        dt = LocalDateTime(2021, 1, 1)
        assert dt.plus_nanos(10**18).minus_nanos(10**18) == dt
        assert dt.plus_hours(24 * 365).minus_hours(24 * 365) == dt

    @given(
        integers(-10_000_000, 10_000_000),
        integers(-(2**62), 2**62),
    )
    def test_nanos_match_instant_arithmetic(self, epoch_day, nanos):
        dt = LocalDate.of_epoch_day(epoch_day).at_time(LocalTime.NOON)
        via_instant = LocalDateTime.of_instant(
            dt.to_instant(ZoneOffset.UTC).plus_nanos(nanos), ZoneOffset.UTC
        )
        assert dt.plus_nanos(nanos) == via_instant


class TestUntil:

    @pytest.mark.parametrize(
        "unit, expect",
        [
            (ChronoUnit.NANOS, 93_600_000_000_000),
            (ChronoUnit.MILLIS, 93_600_000),
            (ChronoUnit.HOURS, 26),
            (ChronoUnit.HALF_DAYS, 2),
            (ChronoUnit.DAYS, 1),
            (ChronoUnit.WEEKS, 0),
        ],
    )
    def test_units(self, unit, expect):
        start = LocalDateTime(2021, 1, 1, 23)
        end = LocalDateTime(2021, 1, 3, 1)
        assert start.until(end, unit) == expect
        assert end.until(start, unit) == -expect

    def test_time_does_not_complete_a_day(self):
        start = LocalDateTime(2021, 1, 31, 12)
        end = LocalDateTime(2021, 2, 28, 11, 59)
        assert start.until(end, ChronoUnit.DAYS) == 27
        assert start.until(end, ChronoUnit.MONTHS) == 0
        assert start.until(end.plus_minutes(1), ChronoUnit.DAYS) == 28

    def test_from_other_types(self):
        start = LocalDateTime(2021, 1, 1)
        end = LocalDateTime(2021, 1, 2).at_offset(ZoneOffset.of_hours(5))
        assert start.until(end, ChronoUnit.HOURS) == 24
        with pytest.raises(DateTimeError, match="Unable to obtain"):
            start.until(LocalDate(2021, 1, 2), ChronoUnit.DAYS)

    @given(
        integers(-1_000_000, 1_000_000),
        integers(-(10**15), 10**15),
    )
    def test_nanos_roundtrip(self, epoch_day, nanos):
        start = LocalDate.of_epoch_day(epoch_day).at_time(LocalTime.NOON)
        end = start.plus_nanos(nanos)
        assert start.until(end, ChronoUnit.NANOS) == nanos
        whole_seconds = abs(nanos) // 1_000_000_000
        assert start.until(end, ChronoUnit.SECONDS) == (
            whole_seconds if nanos >= 0 else -whole_seconds
        )


class TestConversion:

    def test_to_instant(self):
        dt = LocalDateTime(2021, 1, 1, 1)
        offset = ZoneOffset.of_hours(1)
        assert dt.to_epoch_second(offset) == 1_609_459_200
        assert dt.to_instant(offset) == Instant.of_epoch_second(1_609_459_200)

    def test_to_instant_extremes(self):
        assert LocalDateTime.MAX.to_instant(ZoneOffset.MIN) < Instant.MAX
        assert LocalDateTime.MIN.to_instant(ZoneOffset.MAX) > Instant.MIN

    def test_at_offset(self):
        odt = LocalDateTime(2021, 1, 1, 1).at_offset(ZoneOffset.of_hours(1))
        assert str(odt) == "2021-01-01T01:00+01:00"

    def test_at_zone(self):
        assert LocalDateTime(2023, 7, 1, 12).at_zone(DST_ZONE).offset == CEST

    def test_at_zone_gap(self):
        zdt = LocalDateTime(2023, 3, 26, 2, 30).at_zone(DST_ZONE)
        assert zdt.to_local_date_time() == LocalDateTime(2023, 3, 26, 3, 30)
        assert zdt.offset == CEST

    def test_at_zone_overlap(self):
        zdt = LocalDateTime(2023, 10, 29, 1, 30).at_zone(DST_ZONE)
        assert zdt.to_local_date_time() == LocalDateTime(2023, 10, 29, 1, 30)
        assert zdt.offset == CEST
        assert zdt.with_later_offset_at_overlap().offset == CET


class TestStr:

    @pytest.mark.parametrize(
        "dt, expect",
        [
            (LocalDateTime(2021, 1, 2), "2021-01-02T00:00"),
            (LocalDateTime(2021, 1, 2, 3, 4, 5), "2021-01-02T03:04:05"),
            (LocalDateTime(2021, 1, 2, 3, 4, 0, 6_000), "2021-01-02T03:04:00.000006"),
            (LocalDateTime(-1, 1, 2, 3), "-0001-01-02T03:00"),
        ],
    )
    def test_format(self, dt, expect):
        assert str(dt) == expect
        assert repr(dt) == f"LocalDateTime({expect})"

    @given(
        integers(-365_243_219_162, 365_241_780_471),
        integers(0, 86_400_000_000_000 - 1),
    )
    def test_parses_back(self, epoch_day, nod):
        dt = LocalDateTime.of(
            LocalDate.of_epoch_day(epoch_day), LocalTime.of_nano_of_day(nod)
        )
        assert LocalDateTime.parse(str(dt)) == dt


class TestEqualityAndOrdering:

    def test_eq(self):
        dt = LocalDateTime(2021, 1, 2, 3, 4)
        same = LocalDateTime(2021, 1, 2, 3, 4)
        different = LocalDateTime(2021, 1, 2, 3, 5)

        assert dt == same
        assert not dt == different
        assert dt != different
        assert not dt != same
        assert hash(dt) == hash(same)
        assert dt.is_equal(same)

        assert dt == AlwaysEqual()
        assert dt != NeverEqual()
        assert not dt == NeverEqual()
        assert not dt != AlwaysEqual()

        assert dt != None  # noqa: E711
        assert dt != LocalDate(2021, 1, 2)

    def test_comparison(self):
        dt = LocalDateTime(2021, 1, 2, 3, 4)
        same = LocalDateTime(2021, 1, 2, 3, 4)
        bigger = LocalDateTime(2021, 1, 2, 3, 4, 0, 1)
        smaller = LocalDateTime(2020, 12, 31, 23)

        assert dt <= same
        assert dt <= bigger
        assert not dt <= smaller
        assert dt < bigger
        assert not dt < same
        assert dt >= smaller
        assert dt > smaller
        assert not dt > same

        assert dt.is_after(smaller)
        assert dt.is_before(bigger)
        assert not dt.is_before(same)

        assert dt < AlwaysLarger()
        assert dt > AlwaysSmaller()

        with pytest.raises(TypeError):
            dt < LocalDate(2021, 1, 2)  # type: ignore[operator]


def test_pickling():
    dt = LocalDateTime(2021, 1, 2, 3, 4, 5, 6)
    dumped = pickle.dumps(dt)
    assert len(dumped) < 100
    assert pickle.loads(dumped) == dt


def test_copy():
    dt = LocalDateTime(2021, 1, 2, 3, 4, 5, 6)
    assert copy(dt) is dt
    assert deepcopy(dt) is dt


def test_cannot_subclass():
    with pytest.raises(TypeError):

        class Subclass(LocalDateTime):  # type: ignore[misc]
            pass
