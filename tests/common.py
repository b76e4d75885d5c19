import os
from contextlib import contextmanager
from typing import Optional
from unittest.mock import patch

from isotemporal import (
    Instant,
    LocalDateTime,
    ZoneOffset,
    ZoneOffsetTransition,
    ZoneRegion,
    ZoneRules,
    reset_system_tz,
)


class AlwaysEqual:
    def __eq__(self, _):
        return True


class NeverEqual:
    def __eq__(self, _):
        return False


class AlwaysLarger:
    def __lt__(self, _):
        return False

    def __le__(self, _):
        return False

    def __gt__(self, _):
        return True

    def __ge__(self, _):
        return True


class AlwaysSmaller:
    def __lt__(self, _):
        return True

    def __le__(self, _):
        return True

    def __gt__(self, _):
        return False

    def __ge__(self, _):
        return False


@contextmanager
def system_tz_ams():
    try:
        with patch.dict(os.environ, {"TZ": "Europe/Amsterdam"}):
            reset_system_tz()
            yield
    finally:
        reset_system_tz()  # don't forget to reset the timezone after the patch!


@contextmanager
def system_tz(name):
    try:
        with patch.dict(os.environ, {"TZ": name}):
            reset_system_tz()
            yield
    finally:
        reset_system_tz()  # don't forget to reset the timezone after the patch!


@contextmanager
def system_tz_nyc():
    try:
        with patch.dict(os.environ, {"TZ": "America/New_York"}):
            reset_system_tz()
            yield
    finally:
        reset_system_tz()  # don't forget to reset the timezone after the patch!


CET = ZoneOffset.of_hours(1)
CEST = ZoneOffset.of_hours(2)


class DstRules(ZoneRules):
    """Hand-written rules for the year 2023: +01:00 in winter and +02:00
    in summer. Clocks skip from 01:59:59 to 03:00 on March 26, and repeat
    01:00-01:59:59 on October 29.

    Independent of the IANA database, so tests using it don't depend on
    the timezone data installed.
    """

    GAP = ZoneOffsetTransition.of(LocalDateTime(2023, 3, 26, 2), CET, CEST)
    OVERLAP = ZoneOffsetTransition.of(
        LocalDateTime(2023, 10, 29, 2), CEST, CET
    )

    def offset(self, instant: Instant) -> ZoneOffset:
        if self.GAP.instant() <= instant < self.OVERLAP.instant():
            return CEST
        return CET

    def transition(
        self, local: LocalDateTime
    ) -> Optional[ZoneOffsetTransition]:
        for trans in (self.GAP, self.OVERLAP):
            start, end = sorted(
                [trans.date_time_before, trans.date_time_after]
            )
            if start <= local < end:
                return trans
        return None

    def valid_offsets(self, local: LocalDateTime) -> list[ZoneOffset]:
        if (trans := self.transition(local)) is not None:
            return trans.valid_offsets()
        return [self.offset(local.to_instant(CET))]

    def is_fixed_offset(self) -> bool:
        return False


DST_ZONE = ZoneRegion("Test/Dst", DstRules())
