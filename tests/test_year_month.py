import pickle
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
    FieldOutOfRange,
    Instant,
    InvalidDate,
    LocalDate,
    Month,
    Period,
    UnsupportedTemporalField,
    UnsupportedTemporalUnit,
    ValueRange,
    YearMonth,
    ZoneOffset,
)

from .common import AlwaysEqual, AlwaysLarger, AlwaysSmaller, NeverEqual

MAX_YEAR = 999_999_999


class TestInit:

    def test_valid(self):
        ym = YearMonth(2024, 1)
        assert ym.year == 2024
        assert ym.month_value == 1
        assert ym.month is Month.JANUARY
        assert YearMonth(2024, Month.MARCH) == YearMonth.of(2024, 3)

    @pytest.mark.parametrize(
        "args, match",
        [
            ((2024, 13), "MonthOfYear"),
            ((2024, 0), "MonthOfYear"),
            ((MAX_YEAR + 1, 1), "Year"),
            ((-MAX_YEAR - 1, 1), "Year"),
        ],
    )
    def test_invalid(self, args, match):
        with pytest.raises(FieldOutOfRange, match=match):
            YearMonth(*args)

    def test_now(self):
        clock = Clock.fixed(
            Instant.parse("2021-12-31T23:30:00Z"), ZoneOffset.of_hours(1)
        )
        assert YearMonth.now(clock) == YearMonth(2022, 1)


class TestParse:

    @pytest.mark.parametrize(
        "s, expect",
        [
            ("2021-03", YearMonth(2021, 3)),
            ("0000-01", YearMonth(0, 1)),
            ("-0001-12", YearMonth(-1, 12)),
            ("+10000-01", YearMonth(10_000, 1)),
        ],
    )
    def test_valid(self, s, expect):
        assert YearMonth.parse(s) == expect

    @pytest.mark.parametrize(
        "s", ["2021-3", "+2021-03", "2021-03-01", "21-03", "2021/03", ""]
    )
    def test_invalid_format(self, s):
        with pytest.raises(DateTimeParseError, match="Invalid format"):
            YearMonth.parse(s)

    @pytest.mark.parametrize("s", ["2021-13", "2021-00", "+1000000000-01"])
    def test_invalid_values(self, s):
        with pytest.raises(DateTimeParseError, match="could not be parsed"):
            YearMonth.parse(s)

    @given(text())
    def test_fuzzing(self, s):
        try:
            YearMonth.parse(s)
        except DateTimeParseError:
            pass


class TestAccessors:

    def test_calendar(self):
        assert YearMonth(2024, 2).is_leap_year()
        assert not YearMonth(2100, 2).is_leap_year()
        assert YearMonth(2024, 2).length_of_month() == 29
        assert YearMonth(2023, 2).length_of_month() == 28
        assert YearMonth(2023, 4).length_of_month() == 30
        assert YearMonth(2024, 7).length_of_year() == 366
        assert YearMonth(2023, 7).length_of_year() == 365
        assert YearMonth(2023, 2).is_valid_day(28)
        assert not YearMonth(2023, 2).is_valid_day(29)
        assert not YearMonth(2023, 2).is_valid_day(0)

    def test_fields(self):
        ym = YearMonth(2024, 3)
        assert ym.get(ChronoField.MONTH_OF_YEAR) == 3
        assert ym.get(ChronoField.YEAR) == 2024
        assert ym.get(ChronoField.YEAR_OF_ERA) == 2024
        assert ym.get(ChronoField.ERA) == 1
        assert ym.get_long(ChronoField.PROLEPTIC_MONTH) == 2024 * 12 + 2
        with pytest.raises(UnsupportedTemporalField, match="get_long"):
            ym.get(ChronoField.PROLEPTIC_MONTH)
        with pytest.raises(UnsupportedTemporalField):
            ym.get(ChronoField.DAY_OF_MONTH)
        assert ym.is_supported(ChronoUnit.DECADES)
        assert not ym.is_supported(ChronoUnit.DAYS)
        assert not ym.is_supported(ChronoField.DAY_OF_YEAR)

    def test_before_common_era(self):
        ym = YearMonth(0, 6)
        assert ym.get(ChronoField.YEAR_OF_ERA) == 1
        assert ym.get(ChronoField.ERA) == 0
        assert YearMonth(-5, 6).get(ChronoField.YEAR_OF_ERA) == 6
        assert ym.range(ChronoField.YEAR_OF_ERA) == ValueRange.of(
            1, MAX_YEAR + 1
        )
        assert YearMonth(1, 6).range(ChronoField.YEAR_OF_ERA) == ValueRange.of(
            1, MAX_YEAR
        )


class TestWith:

    def test_methods(self):
        ym = YearMonth(2021, 5)
        assert ym.with_year(1999) == YearMonth(1999, 5)
        assert ym.with_month(12) == YearMonth(2021, 12)
        assert ym.with_year(2021) is ym
        assert ym.with_month(5) is ym
        with pytest.raises(FieldOutOfRange):
            ym.with_month(13)

    @pytest.mark.parametrize(
        "field, value, expect",
        [
            (ChronoField.MONTH_OF_YEAR, 2, YearMonth(2021, 2)),
            (ChronoField.PROLEPTIC_MONTH, 0, YearMonth(0, 1)),
            (ChronoField.PROLEPTIC_MONTH, -1, YearMonth(-1, 12)),
            (ChronoField.YEAR, -3, YearMonth(-3, 5)),
            (ChronoField.YEAR_OF_ERA, 1900, YearMonth(1900, 5)),
            (ChronoField.ERA, 0, YearMonth(-2020, 5)),
            (ChronoField.ERA, 1, YearMonth(2021, 5)),
        ],
    )
    def test_with_field(self, field, value, expect):
        assert YearMonth(2021, 5).with_field(field, value) == expect

    def test_with_field_bce(self):
        assert YearMonth(-5, 1).with_field(
            ChronoField.YEAR_OF_ERA, 1
        ) == YearMonth(0, 1)
        assert YearMonth(-5, 1).with_field(ChronoField.ERA, 1) == YearMonth(
            6, 1
        )

    def test_with_field_invalid(self):
        ym = YearMonth(2021, 5)
        with pytest.raises(FieldOutOfRange, match="Era"):
            ym.with_field(ChronoField.ERA, 2)
        with pytest.raises(FieldOutOfRange, match="MonthOfYear"):
            ym.with_field(ChronoField.MONTH_OF_YEAR, 0)
        with pytest.raises(UnsupportedTemporalField):
            ym.with_field(ChronoField.DAY_OF_MONTH, 1)


class TestArithmetic:

    @pytest.mark.parametrize(
        "method, amount, expect",
        [
            ("plus_months", 3, YearMonth(2022, 2)),
            ("plus_months", -23, YearMonth(2019, 12)),
            ("plus_years", 1, YearMonth(2022, 11)),
            ("minus_months", 11, YearMonth(2020, 12)),
            ("minus_years", 2022, YearMonth(-1, 11)),
        ],
    )
    def test_methods(self, method, amount, expect):
        assert getattr(YearMonth(2021, 11), method)(amount) == expect

    @pytest.mark.parametrize(
        "amount, unit, expect",
        [
            (14, ChronoUnit.MONTHS, YearMonth(2023, 1)),
            (-1, ChronoUnit.YEARS, YearMonth(2020, 11)),
            (1, ChronoUnit.DECADES, YearMonth(2031, 11)),
            (-2, ChronoUnit.CENTURIES, YearMonth(1821, 11)),
            (3, ChronoUnit.MILLENNIA, YearMonth(5021, 11)),
            (-1, ChronoUnit.ERAS, YearMonth(-2020, 11)),
        ],
    )
    def test_units(self, amount, unit, expect):
        ym = YearMonth(2021, 11)
        assert ym.plus(amount, unit) == expect
        assert ym.minus(-amount, unit) == expect

    def test_unchanged(self):
        ym = YearMonth(2021, 11)
        assert ym.plus_months(0) is ym
        assert ym.plus_years(0) is ym

    def test_period(self):
        ym = YearMonth(2021, 11)
        assert ym + Period.of(1, 2, 0) == YearMonth(2023, 1)
        assert ym - Period.of_months(11) == YearMonth(2020, 12)
        with pytest.raises(UnsupportedTemporalUnit, match="Days"):
            ym + Period.of_days(1)

    def test_unsupported(self):
        ym = YearMonth(2021, 11)
        with pytest.raises(UnsupportedTemporalUnit, match="Days"):
            ym.plus(1, ChronoUnit.DAYS)
        with pytest.raises(UnsupportedTemporalUnit, match="Weeks"):
            ym.minus(1, ChronoUnit.WEEKS)
        with pytest.raises(FieldOutOfRange, match="Era"):
            ym.plus(1, ChronoUnit.ERAS)

    def test_out_of_range(self):
        with pytest.raises(FieldOutOfRange):
            YearMonth(MAX_YEAR, 12).plus_months(1)
        with pytest.raises(FieldOutOfRange):
            YearMonth(-MAX_YEAR, 1).minus_years(1)

    @given(integers(-10**9, 10**9))
    def test_months_round_trip(self, months):
        ym = YearMonth(2021, 11)
        try:
            result = ym.plus_months(months)
        except FieldOutOfRange:
            return
        assert ym.until(result, ChronoUnit.MONTHS) == months
        assert result.minus_months(months) == ym


class TestUntil:

    @pytest.mark.parametrize(
        "unit, expect",
        [
            (ChronoUnit.MONTHS, 23),
            (ChronoUnit.YEARS, 1),
            (ChronoUnit.DECADES, 0),
            (ChronoUnit.ERAS, 0),
        ],
    )
    def test_units(self, unit, expect):
        start = YearMonth(2021, 1)
        end = YearMonth(2022, 12)
        assert start.until(end, unit) == expect
        assert end.until(start, unit) == -expect

    def test_eras(self):
        assert YearMonth(-1, 1).until(YearMonth(1, 1), ChronoUnit.ERAS) == 1

    def test_unsupported(self):
        with pytest.raises(UnsupportedTemporalUnit):
            YearMonth(2021, 1).until(YearMonth(2022, 1), ChronoUnit.DAYS)
        with pytest.raises(DateTimeError, match="Unable to obtain YearMonth"):
            YearMonth(2021, 1).until(LocalDate(2022, 1, 1), ChronoUnit.MONTHS)


class TestConversion:

    def test_at_day(self):
        assert YearMonth(2024, 2).at_day(29) == LocalDate(2024, 2, 29)
        with pytest.raises(InvalidDate):
            YearMonth(2023, 2).at_day(29)

    def test_at_end_of_month(self):
        assert YearMonth(2024, 2).at_end_of_month() == LocalDate(2024, 2, 29)
        assert YearMonth(2023, 2).at_end_of_month() == LocalDate(2023, 2, 28)
        assert YearMonth(2023, 12).at_end_of_month() == LocalDate(2023, 12, 31)


class TestStr:

    @pytest.mark.parametrize(
        "ym, expect",
        [
            (YearMonth(2021, 3), "2021-03"),
            (YearMonth(0, 1), "0000-01"),
            (YearMonth(-1, 12), "-0001-12"),
            (YearMonth(10_000, 1), "+10000-01"),
            (YearMonth(-MAX_YEAR, 1), "-999999999-01"),
        ],
    )
    def test_format(self, ym, expect):
        assert str(ym) == expect
        assert repr(ym) == f"YearMonth({expect})"
        assert YearMonth.parse(expect) == ym


class TestEqualityAndOrdering:

    def test_eq(self):
        ym = YearMonth(2021, 3)
        assert ym == YearMonth(2021, 3)
        assert hash(ym) == hash(YearMonth(2021, 3))
        assert ym != YearMonth(2021, 4)
        assert ym != LocalDate(2021, 3, 1)
        assert ym == AlwaysEqual()
        assert ym != NeverEqual()

    def test_ordering(self):
        ym = YearMonth(2021, 3)
        later = YearMonth(2021, 4)
        assert ym < later
        assert ym <= later
        assert later > ym
        assert later >= ym
        assert ym.is_before(later)
        assert later.is_after(ym)
        assert not ym.is_after(ym)
        assert YearMonth(-1, 12) < YearMonth(0, 1)
        assert ym < AlwaysLarger()
        assert ym > AlwaysSmaller()
        with pytest.raises(TypeError):
            ym < LocalDate(2021, 3, 1)  # type: ignore[operator]


def test_pickling():
    ym = YearMonth(-2021, 3)
    dumped = pickle.dumps(ym)
    assert len(dumped) < 100
    assert pickle.loads(dumped) == ym


def test_copy():
    ym = YearMonth(2021, 3)
    assert copy(ym) is ym
    assert deepcopy(ym) is ym


def test_cannot_subclass():
    with pytest.raises(TypeError):

        class Subclass(YearMonth):  # type: ignore[misc]
            pass
