"""
Stress the shared caches of isotemporal from many threads at once:
the quarter-hour ZoneOffset cache, the zone store behind ZoneId.of,
and the cached system zone.

Not a unit test: it relies on starting from empty caches, and is only
meaningful on a free-threaded build.
"""

import sys
import time
from concurrent.futures import ThreadPoolExecutor
from os import environ
from threading import Barrier

from isotemporal import (
    Instant,
    LocalDateTime,
    ZoneId,
    ZoneOffset,
    clear_tzcache,
    reset_system_tz,
)

if not hasattr(sys, "_is_gil_enabled") or sys._is_gil_enabled():
    print("WARNING: Running with GIL enabled. Threading not stress tested.")

NUM_THREADS = 16
ROUNDS = 200
SUMMER = LocalDateTime(2024, 6, 15, 12, 0)
WINTER_INSTANT = Instant.parse("2024-01-15T12:00:00Z")
# zone id -> (offset in June, offset at WINTER_INSTANT), in seconds
ZONES = {
    "UTC": (0, 0),
    "Europe/Vienna": (7200, 3600),
    "America/Guyana": (-14400, -14400),
    "Asia/Tashkent": (18000, 18000),
    "Pacific/Chatham": (45900, 49500),
    "America/St_Johns": (-9000, -12600),
    "Asia/Kathmandu": (20700, 20700),
    "Africa/Nairobi": (10800, 10800),
    "Australia/Lord_Howe": (37800, 39600),
}
_barrier = Barrier(NUM_THREADS)


def offsets(worker: int) -> int:
    """Every quarter-hour offset must come out as a single shared object"""
    _barrier.wait()
    seen = {}
    for _ in range(ROUNDS):
        for secs in range(-18 * 3600, 18 * 3600 + 1, 900):
            offset = ZoneOffset.of_total_seconds(secs)
            assert seen.setdefault(secs, offset) is offset, secs
            assert offset.total_seconds == secs
    return len(seen)


def zone_lookups(worker: int) -> int:
    """Lookups stay correct while other threads empty the store"""
    _barrier.wait()
    count = 0
    keys = list(ZONES)
    for n in range(ROUNDS):
        key = keys[(n + worker) % len(keys)]
        summer, winter = ZONES[key]
        zone = ZoneId.of(key)
        assert zone == ZoneId.of(key)
        assert SUMMER.at_zone(zone).offset.total_seconds == summer, key
        assert zone.rules().offset(WINTER_INSTANT).total_seconds == winter
        if n % 17 == worker:
            clear_tzcache(only_keys=[key])
        elif n % 61 == worker:
            clear_tzcache()
        count += 1
    return count


def system_zone(worker: int) -> int:
    """Resetting and reading the system zone concurrently never fails"""
    _barrier.wait()
    for _ in range(ROUNDS):
        reset_system_tz()
        zone = ZoneId.system_default()
        assert SUMMER.at_zone(zone).offset.total_seconds == 0
    return ROUNDS


def main(func) -> None:
    print(f"Starting test: {func.__name__}")
    start = time.perf_counter()
    with ThreadPoolExecutor(max_workers=NUM_THREADS) as pool:
        results = list(pool.map(func, range(NUM_THREADS)))
    elapsed = time.perf_counter() - start
    print(f"  {sum(results)} checks in {elapsed:.2f} seconds")


if __name__ == "__main__":
    # the system zone test expects a zone with a constant UTC offset
    environ["TZ"] = "Etc/UTC"
    main(offsets)
    main(zone_lookups)
    main(system_zone)
