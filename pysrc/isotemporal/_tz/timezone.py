"""Timezone rules on the integer time-line.

``local`` times here are wall-clock times expressed as if they were UTC
epoch seconds, so that a local time and an instant can be compared by
adding or subtracting an offset.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime as _datetime, timedelta as _timedelta, timezone
from typing import Optional, final
from zoneinfo import ZoneInfo

from .common import Ambiguity, EpochSecs, Fold, Gap, Offset, Unambiguous

_UTC = timezone.utc
_EPOCH = _datetime(1970, 1, 1)
_EPOCH_UTC = _EPOCH.replace(tzinfo=_UTC)
_SECOND = _timedelta(seconds=1)

# The standard library can only represent years 1-9999. Outside of this
# (with a margin for the offset) the zone's edge offsets are used.
EPOCH_SECS_MIN = -62135596800 + 2 * 86_400
EPOCH_SECS_MAX = 253402300799 - 2 * 86_400


def _clamp(t: EpochSecs) -> EpochSecs:
    return min(max(t, EPOCH_SECS_MIN), EPOCH_SECS_MAX)


def _as_secs(td: Optional[_timedelta]) -> Offset:
    assert td is not None
    return td // _SECOND


class TimeZone(ABC):
    """Rules mapping between the UTC and local time-lines"""

    __slots__ = ("__weakref__", "key")

    # The ID this timezone was loaded under, if any
    key: Optional[str]

    def __init__(self, key: Optional[str]):
        self.key = key

    @abstractmethod
    def offset_for_instant(self, t: EpochSecs) -> Offset:
        """Get the UTC offset at the given exact time"""

    @abstractmethod
    def ambiguity_for_local(self, t: EpochSecs) -> Ambiguity:
        """Get the valid offset(s) at the given local time"""

    @abstractmethod
    def is_fixed(self) -> bool: ...


@final
class FixedTimeZone(TimeZone):
    """A zone which always has the same offset"""

    __slots__ = ("_offset",)

    def __init__(self, offset: Offset, key: Optional[str] = None):
        super().__init__(key)
        self._offset = offset

    def offset_for_instant(self, t: EpochSecs) -> Offset:
        return self._offset

    def ambiguity_for_local(self, t: EpochSecs) -> Ambiguity:
        return Unambiguous(self._offset)

    def is_fixed(self) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FixedTimeZone):
            return self._offset == other._offset
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._offset)

    def __repr__(self) -> str:
        return f"FixedTimeZone({self._offset})"


@final
class ZoneInfoTimeZone(TimeZone):
    """A zone backed by the IANA database through :mod:`zoneinfo`"""

    __slots__ = ("_zoneinfo",)

    def __init__(self, zi: ZoneInfo, key: Optional[str] = None):
        super().__init__(key if key is not None else zi.key)
        self._zoneinfo = zi

    def offset_for_instant(self, t: EpochSecs) -> Offset:
        return _as_secs(
            (_EPOCH_UTC + _timedelta(seconds=_clamp(t)))
            .astimezone(self._zoneinfo)
            .utcoffset()
        )

    def ambiguity_for_local(self, t: EpochSecs) -> Ambiguity:
        naive = _EPOCH + _timedelta(seconds=_clamp(t))
        # zoneinfo follows PEP 495: in a gap or fold, fold=0 selects the
        # offset from before the transition, fold=1 the one after it.
        before = _as_secs(
            naive.replace(tzinfo=self._zoneinfo, fold=0).utcoffset()
        )
        after = _as_secs(
            naive.replace(tzinfo=self._zoneinfo, fold=1).utcoffset()
        )
        if before == after:
            return Unambiguous(before)
        transition = self._find_transition(
            t - max(before, after), t - min(before, after), before
        )
        if after > before:
            return Gap(transition, before, after)
        else:
            return Fold(transition, before, after)

    def _find_transition(
        self, lo: EpochSecs, hi: EpochSecs, before: Offset
    ) -> EpochSecs:
        # The transition lies in (lo, hi]. This window is at most the size
        # of the offset change, so we can bisect on the offset.
        while hi - lo > 1:
            mid = (lo + hi) // 2
            if self.offset_for_instant(mid) == before:
                lo = mid
            else:
                hi = mid
        return hi

    def is_fixed(self) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if isinstance(other, ZoneInfoTimeZone):
            return self._zoneinfo is other._zoneinfo
        return NotImplemented

    def __hash__(self) -> int:
        return id(self._zoneinfo)

    def __repr__(self) -> str:
        return f"ZoneInfoTimeZone({self.key!r})"
