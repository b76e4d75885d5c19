import pickle
import re
from copy import copy, deepcopy

import pytest
from hypothesis import given
from hypothesis.strategies import integers, text

from isotemporal import (
    ArithmeticOverflow,
    ChronoField,
    ChronoUnit,
    Clock,
    DateTimeError,
    DateTimeParseError,
    Duration,
    Instant,
    InstantOutOfRange,
    LocalDateTime,
    OffsetDateTime,
    UnsupportedTemporalField,
    UnsupportedTemporalUnit,
    ZoneId,
    ZoneOffset,
)

from .common import AlwaysEqual, AlwaysLarger, AlwaysSmaller, NeverEqual


def test_no_init():
    with pytest.raises(TypeError, match="cannot"):
        Instant()  # type: ignore[call-arg]


class TestFactories:

    def test_of_epoch_second(self):
        i = Instant.of_epoch_second(1_700_000_000)
        assert i.epoch_second == 1_700_000_000
        assert i.nano == 0
        assert Instant.of_epoch_second(0) == Instant.EPOCH

    @pytest.mark.parametrize(
        "secs, adj, expect_secs, expect_nano",
        [
            (3, -1, 2, 999_999_999),
            (-1, 0, -1, 0),
            (0, -1_000_000_001, -2, 999_999_999),
            (5, 2_000_000_000, 7, 0),
        ],
    )
    def test_nano_adjustment(self, secs, adj, expect_secs, expect_nano):
        i = Instant.of_epoch_second(secs, adj)
        assert i.epoch_second == expect_secs
        assert i.nano == expect_nano

    def test_of_epoch_milli(self):
        assert Instant.of_epoch_milli(1_500) == Instant.of_epoch_second(
            1, 500_000_000
        )
        assert Instant.of_epoch_milli(-1) == Instant.of_epoch_second(
            -1, 999_000_000
        )

    def test_bounds(self):
        assert Instant.of_epoch_second(Instant.MAX_SECOND, 999_999_999) == (
            Instant.MAX
        )
        assert Instant.of_epoch_second(Instant.MIN_SECOND) == Instant.MIN
        with pytest.raises(InstantOutOfRange, match="minimum or maximum"):
            Instant.of_epoch_second(Instant.MAX_SECOND + 1)
        with pytest.raises(InstantOutOfRange, match="minimum or maximum"):
            Instant.of_epoch_second(Instant.MIN_SECOND, -1)

    def test_out_of_range_is_both_overflow_and_value_error(self):
        assert issubclass(InstantOutOfRange, OverflowError)
        assert issubclass(InstantOutOfRange, ValueError)
        assert issubclass(InstantOutOfRange, ArithmeticOverflow)

    @given(integers(), integers())
    def test_fuzzing(self, secs, adj):
        try:
            i = Instant.of_epoch_second(secs, adj)
        except (ValueError, OverflowError):
            pass
        else:
            assert Instant.MIN <= i <= Instant.MAX
            assert 0 <= i.nano < 1_000_000_000


class TestNow:

    def test_system(self):
        before = Instant.now()
        after = Instant.now()
        assert before <= after

    def test_clock(self):
        i = Instant.of_epoch_second(1_700_000_000, 5)
        assert Instant.now(Clock.fixed(i, ZoneOffset.UTC)) is i


class TestParse:

    @pytest.mark.parametrize(
        "s, expect",
        [
            ("2023-11-14T22:13:20Z", Instant.of_epoch_second(1_700_000_000)),
            (
                "2023-11-14T22:13:20.5Z",
                Instant.of_epoch_second(1_700_000_000, 500_000_000),
            ),
            ("1970-01-01T00:00Z", Instant.EPOCH),
            ("1970-01-01t00:00:00z", Instant.EPOCH),
            ("1969-12-31T23:59:59.999999999Z", Instant.of_epoch_second(0, -1)),
            ("+10000-01-01T00:00:00Z", Instant.of_epoch_second(253_402_300_800)),
        ],
    )
    def test_valid(self, s, expect):
        assert Instant.parse(s) == expect

    @pytest.mark.parametrize(
        "s",
        [
            "2023-11-14T22:13:20",
            "2023-11-14T22:13:20+00:00",
            "2023-11-14 22:13:20Z",
            "2023-11-14T22:13:20.Z",
            "2023-11-14T22:13:20.1234567890Z",
            "+2023-11-14T22:13:20Z",
            "2023-11-14T22:13:20ZZ",
            "2023-11-14T22:13:2０Z",
            "",
        ],
    )
    def test_invalid_format(self, s):
        with pytest.raises(
            DateTimeParseError, match=r"Invalid format.*" + re.escape(repr(s))
        ):
            Instant.parse(s)

    @pytest.mark.parametrize(
        "s",
        [
            "2023-02-29T00:00:00Z",
            "2023-01-01T24:00:00Z",
            "2023-01-01T23:60:00Z",
        ],
    )
    def test_invalid_values(self, s):
        with pytest.raises(
            DateTimeParseError, match=r"could not be parsed"
        ):
            Instant.parse(s)

    @given(text())
    def test_fuzzing(self, s: str):
        with pytest.raises(DateTimeParseError):
            Instant.parse(s)


class TestStr:

    @pytest.mark.parametrize(
        "i, expect",
        [
            (Instant.EPOCH, "1970-01-01T00:00:00Z"),
            (Instant.of_epoch_milli(1), "1970-01-01T00:00:00.001Z"),
            (Instant.of_epoch_second(3, -1), "1970-01-01T00:00:02.999999999Z"),
            (Instant.of_epoch_second(1_700_000_000), "2023-11-14T22:13:20Z"),
            (
                Instant.of_epoch_second(-62_167_219_200),
                "0000-01-01T00:00:00Z",
            ),
            (
                Instant.of_epoch_second(-62_167_219_201, 120_000),
                "-0001-12-31T23:59:59.000120Z",
            ),
            (Instant.MIN, "-1000000000-01-01T00:00:00Z"),
            (Instant.MAX, "+1000000000-12-31T23:59:59.999999999Z"),
        ],
    )
    def test_format(self, i, expect):
        assert str(i) == expect
        assert repr(i) == f"Instant({expect})"

    @given(integers(-(10**15), 10**15), integers(0, 999_999_999))
    def test_parses_back(self, secs, nanos):
        i = Instant.of_epoch_second(secs, nanos)
        assert Instant.parse(str(i)) == i


class TestFields:

    def test_get(self):
        i = Instant.of_epoch_second(5, 123_456_789)
        assert i.get(ChronoField.NANO_OF_SECOND) == 123_456_789
        assert i.get(ChronoField.MICRO_OF_SECOND) == 123_456
        assert i.get(ChronoField.MILLI_OF_SECOND) == 123
        assert i.get_long(ChronoField.INSTANT_SECONDS) == 5

    def test_get_long_only(self):
        i = Instant.EPOCH
        with pytest.raises(UnsupportedTemporalField, match="get_long"):
            i.get(ChronoField.INSTANT_SECONDS)

    def test_unsupported(self):
        with pytest.raises(UnsupportedTemporalField, match="HourOfDay"):
            Instant.EPOCH.get(ChronoField.HOUR_OF_DAY)
        assert not Instant.EPOCH.is_supported(ChronoField.HOUR_OF_DAY)
        assert Instant.EPOCH.is_supported(ChronoUnit.DAYS)
        assert not Instant.EPOCH.is_supported(ChronoUnit.WEEKS)

    def test_with_field(self):
        i = Instant.of_epoch_second(5, 123_456_789)
        assert i.with_field(ChronoField.MILLI_OF_SECOND, 5) == (
            Instant.of_epoch_second(5, 5_000_000)
        )
        assert i.with_field(ChronoField.MICRO_OF_SECOND, 5) == (
            Instant.of_epoch_second(5, 5_000)
        )
        assert i.with_field(ChronoField.NANO_OF_SECOND, 5) == (
            Instant.of_epoch_second(5, 5)
        )
        assert i.with_field(ChronoField.INSTANT_SECONDS, -3) == (
            Instant.of_epoch_second(-3, 123_456_789)
        )
        assert i.with_field(ChronoField.NANO_OF_SECOND, 123_456_789) is i


class TestArithmetic:

    def test_units(self):
        i = Instant.of_epoch_second(1_700_000_000)
        assert i.plus(90, ChronoUnit.MINUTES).epoch_second == 1_700_005_400
        assert i.plus(1, ChronoUnit.DAYS).epoch_second == 1_700_086_400
        assert i.plus(1, ChronoUnit.HALF_DAYS).epoch_second == 1_700_043_200
        assert i.minus(1, ChronoUnit.NANOS) == Instant.of_epoch_second(
            1_700_000_000, -1
        )
        assert i.plus(1_500, ChronoUnit.MICROS) == Instant.of_epoch_second(
            1_700_000_000, 1_500_000
        )
        assert i.plus(-1, ChronoUnit.MILLIS) == Instant.of_epoch_second(
            1_700_000_000, -1_000_000
        )

    def test_unsupported_unit(self):
        with pytest.raises(UnsupportedTemporalUnit, match="Months"):
            Instant.EPOCH.plus(1, ChronoUnit.MONTHS)

    def test_methods(self):
        i = Instant.EPOCH
        assert i.plus_seconds(10).minus_millis(1).plus_nanos(
            2
        ) == Instant.of_epoch_second(9, 999_000_002)
        assert i.minus_seconds(1) == Instant.of_epoch_second(-1)
        assert i.plus_millis(1) == Instant.of_epoch_milli(1)
        assert i.minus_nanos(1) == Instant.of_epoch_second(0, -1)

    def test_duration(self):
        i = Instant.EPOCH
        d = Duration.of_seconds(90, 5)
        assert i.plus(d) == Instant.of_epoch_second(90, 5)
        assert i + d == i.plus(d)
        assert i - d == Instant.of_epoch_second(-90, -5)

    def test_out_of_range(self):
        with pytest.raises(InstantOutOfRange):
            Instant.MAX.plus_nanos(1)
        with pytest.raises(InstantOutOfRange):
            Instant.MIN.minus_seconds(1)
        with pytest.raises((ValueError, OverflowError)):
            Instant.EPOCH.plus_seconds(1 << 64)

    @given(integers(-(2**50), 2**50), integers(-(2**60), 2**60))
    def test_plus_minus(self, secs, nanos):
        i = Instant.of_epoch_second(secs)
        assert i.plus_nanos(nanos).minus_nanos(nanos) == i


class TestTruncatedTo:

    @pytest.mark.parametrize(
        "unit, expect",
        [
            (ChronoUnit.NANOS, "2023-11-14T22:13:20.123456789Z"),
            (ChronoUnit.MICROS, "2023-11-14T22:13:20.123456Z"),
            (ChronoUnit.MILLIS, "2023-11-14T22:13:20.123Z"),
            (ChronoUnit.SECONDS, "2023-11-14T22:13:20Z"),
            (ChronoUnit.MINUTES, "2023-11-14T22:13:00Z"),
            (ChronoUnit.HOURS, "2023-11-14T22:00:00Z"),
            (ChronoUnit.HALF_DAYS, "2023-11-14T12:00:00Z"),
            (ChronoUnit.DAYS, "2023-11-14T00:00:00Z"),
        ],
    )
    def test_units(self, unit, expect):
        i = Instant.parse("2023-11-14T22:13:20.123456789Z")
        assert str(i.truncated_to(unit)) == expect

    def test_before_epoch(self):
        i = Instant.parse("1969-12-31T23:59:59.5Z")
        assert i.truncated_to(ChronoUnit.HOURS) == Instant.parse(
            "1969-12-31T23:00:00Z"
        )
        assert i.truncated_to(ChronoUnit.DAYS) == Instant.parse(
            "1969-12-31T00:00:00Z"
        )

    def test_too_large(self):
        with pytest.raises(UnsupportedTemporalUnit, match="too large"):
            Instant.EPOCH.truncated_to(ChronoUnit.WEEKS)


class TestUntil:

    @pytest.mark.parametrize(
        "unit, expect",
        [
            (ChronoUnit.NANOS, 90_500_000_000),
            (ChronoUnit.MICROS, 90_500_000),
            (ChronoUnit.MILLIS, 90_500),
            (ChronoUnit.SECONDS, 90),
            (ChronoUnit.MINUTES, 1),
            (ChronoUnit.HOURS, 0),
            (ChronoUnit.DAYS, 0),
        ],
    )
    def test_units(self, unit, expect):
        a = Instant.EPOCH
        b = Instant.of_epoch_second(90, 500_000_000)
        assert a.until(b, unit) == expect
        assert b.until(a, unit) == -expect

    def test_partial_second(self):
        a = Instant.of_epoch_second(0, 600_000_000)
        b = Instant.of_epoch_second(2, 100_000_000)
        assert a.until(b, ChronoUnit.SECONDS) == 1
        assert b.until(a, ChronoUnit.SECONDS) == -1

    def test_other_types(self):
        a = Instant.EPOCH
        odt = OffsetDateTime.of(
            LocalDateTime(1970, 1, 1, 3), ZoneOffset.of_hours(2)
        )
        assert a.until(odt, ChronoUnit.HOURS) == 1
        with pytest.raises(DateTimeError, match="Unable to obtain Instant"):
            a.until(LocalDateTime(1970, 1, 1), ChronoUnit.HOURS)

    def test_unsupported(self):
        with pytest.raises(UnsupportedTemporalUnit):
            Instant.EPOCH.until(Instant.MAX, ChronoUnit.YEARS)


class TestConversion:

    def test_to_epoch_milli(self):
        assert Instant.of_epoch_second(1, 999_999).to_epoch_milli() == 1_000
        assert Instant.of_epoch_second(-1, 1).to_epoch_milli() == -1_000
        assert Instant.EPOCH.to_instant() is Instant.EPOCH

    def test_at_offset(self):
        odt = Instant.EPOCH.at_offset(ZoneOffset.of_hours(2))
        assert str(odt) == "1970-01-01T02:00+02:00"
        assert odt.to_instant() == Instant.EPOCH

    def test_at_zone(self):
        i = Instant.parse("2023-07-01T00:00:00Z")
        zdt = i.at_zone(ZoneId.of("Europe/Paris"))
        assert str(zdt) == "2023-07-01T02:00+02:00[Europe/Paris]"
        assert zdt.to_instant() == i


class TestEqualityAndOrdering:

    def test_eq(self):
        i = Instant.of_epoch_second(5, 1)
        same = Instant.of_epoch_second(4, 1_000_000_001)
        different = Instant.of_epoch_second(5, 2)

        assert i == same
        assert not i == different
        assert not i != same
        assert i != different
        assert hash(i) == hash(same)

        assert i == AlwaysEqual()
        assert i != NeverEqual()
        assert not i == NeverEqual()
        assert not i != AlwaysEqual()

        assert i != None  # noqa: E711
        assert not i == None  # noqa: E711

    def test_not_equal_to_other_types(self):
        i = Instant.EPOCH
        assert i != Instant.EPOCH.at_offset(ZoneOffset.UTC)

    def test_comparison(self):
        i = Instant.of_epoch_second(5)
        same = Instant.of_epoch_second(5)
        bigger = Instant.of_epoch_second(5, 1)
        smaller = Instant.of_epoch_second(4, 999_999_999)

        assert i <= same
        assert i <= bigger
        assert not i <= smaller
        assert i < bigger
        assert not i < same
        assert not i < smaller
        assert i >= same
        assert not i >= bigger
        assert i >= smaller
        assert i > smaller
        assert not i > same

        assert i.is_before(bigger)
        assert i.is_after(smaller)
        assert not i.is_after(same)

        assert i < AlwaysLarger()
        assert i <= AlwaysLarger()
        assert not i > AlwaysLarger()
        assert not i >= AlwaysLarger()
        assert not i < AlwaysSmaller()
        assert i > AlwaysSmaller()

        with pytest.raises(TypeError):
            i < Instant.EPOCH.at_offset(ZoneOffset.UTC)  # type: ignore[operator]


def test_pickling():
    i = Instant.of_epoch_second(1_700_000_000, 5)
    dumped = pickle.dumps(i)
    assert len(dumped) < 100
    assert pickle.loads(dumped) == i


def test_copy():
    i = Instant.of_epoch_second(1_700_000_000)
    assert copy(i) is i
    assert deepcopy(i) is i


def test_cannot_subclass():
    with pytest.raises(TypeError):

        class Subclass(Instant):  # type: ignore[misc]
            pass
