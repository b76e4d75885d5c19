from isotemporal import (
    ChronoUnit,
    LocalDateTime,
    ZonedDateTime,
    ZoneId,
)

AMS = ZoneId.of("Europe/Amsterdam")
NYC = ZoneId.of("America/New_York")


def test_new(benchmark):
    local = LocalDateTime(2020, 3, 20, 12, 30, 45, 450)
    benchmark(ZonedDateTime.of, local, AMS)


def test_new_in_gap(benchmark):
    local = LocalDateTime(2023, 3, 26, 2, 30)
    benchmark(ZonedDateTime.of, local, AMS)


def test_zone_lookup(benchmark):
    benchmark(ZoneId.of, "Europe/Amsterdam")


def test_parse(benchmark):
    benchmark(
        ZonedDateTime.parse,
        "2020-03-20T12:30:45.00000045+01:00[Europe/Amsterdam]",
    )


def test_format(benchmark):
    dt = ZonedDateTime.of(LocalDateTime(2020, 3, 20, 12, 30, 45, 450), AMS)
    benchmark(str, dt)


def test_change_zone(benchmark):
    dt = ZonedDateTime.of(LocalDateTime(2020, 3, 20, 12, 30, 45, 450), AMS)
    benchmark(dt.with_zone_same_instant, NYC)


def test_plus_days(benchmark):
    dt = ZonedDateTime.of(LocalDateTime(2023, 3, 25, 12), AMS)
    benchmark(dt.plus_days, 1)


def test_plus_hours(benchmark):
    dt = ZonedDateTime.of(LocalDateTime(2023, 3, 25, 12), AMS)
    benchmark(dt.plus_hours, 24)


def test_until(benchmark):
    a = ZonedDateTime.of(LocalDateTime(2023, 3, 25, 12), AMS)
    b = ZonedDateTime.of(LocalDateTime(2023, 11, 2, 8), NYC)
    benchmark(a.until, b, ChronoUnit.DAYS)
