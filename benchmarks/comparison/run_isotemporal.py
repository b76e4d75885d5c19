# Compare with run_stdlib.py. Run each with ``python <file> -o <out>.json``
# and view the results with ``python -m pyperf compare_to``.
import pyperf

runner = pyperf.Runner()

runner.timeit(
    "various operations",
    "d = OffsetDateTime.parse('2020-04-05T22:04:00-04:00')"
    ".to_instant();"
    "Duration.between(d, Instant.now());"
    "d.plus(Duration.of_minutes(270))"
    ".at_zone(ZoneId.of('Europe/Amsterdam'))",
    setup="from isotemporal import OffsetDateTime, Instant, Duration, ZoneId",
)

runner.timeit(
    "new date",
    "LocalDate(2020, 2, 29)",
    setup="from isotemporal import LocalDate",
)

runner.timeit(
    "date add",
    "d.plus(p)",
    setup="from isotemporal import LocalDate, Period; "
    "d = LocalDate(1987, 3, 31); p = Period(-4, 59, -46)",
)

runner.timeit(
    "date diff",
    "Period.between(d1, d2)",
    setup="from isotemporal import LocalDate, Period; "
    "d1 = LocalDate(2020, 2, 29); d2 = LocalDate(2025, 2, 28)",
)

runner.timeit(
    "parse date",
    "f('2020-02-29')",
    setup="from isotemporal import LocalDate; f = LocalDate.parse",
)

runner.timeit(
    "change tz",
    "dt.with_zone_same_instant(nyc)",
    setup="from isotemporal import ZonedDateTime, ZoneId; "
    "nyc = ZoneId.of('America/New_York'); "
    "dt = ZonedDateTime.parse('2020-03-20T12:30:45+01:00[Europe/Amsterdam]')",
)
