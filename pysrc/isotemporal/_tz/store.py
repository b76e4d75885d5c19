"""Loading zone rules from the IANA database, with caching."""

from __future__ import annotations

import sys
from collections import OrderedDict
from typing import TYPE_CHECKING, Iterable, NewType, Optional
from weakref import WeakValueDictionary
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .._common import TimeZoneNotFoundError
from . import system
from .timezone import TimeZone, ZoneInfoTimeZone

__all__ = [
    "get_tz",
    "get_system_tz",
    "clear_tz_cache",
    "clear_tz_cache_by_keys",
    "reset_system_tz",
]

_NOGIL = hasattr(sys, "_is_gil_enabled") and not sys._is_gil_enabled()

# OrderedDict is thread-unsafe in Python < 3.14 under free-threading,
# so the LRU part of the cache needs its own lock there.
if TYPE_CHECKING or (
    _NOGIL and sys.version_info < (3, 14)
):  # pragma: no cover
    from threading import Lock as _Lock
else:

    class _Lock:
        def __enter__(self) -> None:
            pass

        def __exit__(self, *args) -> None:
            pass


class _ZoneCache:
    """Zones by key, in the manner of :mod:`zoneinfo`: every zone still
    referenced somewhere is found through a weak mapping, and the most
    recently requested ones are also kept alive by a small LRU.
    """

    __slots__ = ("_alive", "_recent", "_recent_lock", "_size")

    def __init__(self, size: int) -> None:
        self._size = size
        self._alive: WeakValueDictionary[str, TimeZone] = WeakValueDictionary()
        self._recent: OrderedDict[str, TimeZone] = OrderedDict()
        self._recent_lock = _Lock()

    def get(self, key: str) -> TimeZone:
        zone = self._alive.get(key)
        if zone is None:
            # Two threads may load the same key at once. Zones are
            # immutable, so whichever is stored first is used by both.
            zone = self._alive.setdefault(key, _load_tz(validate_tzid(key)))
        self._touch(key, zone)
        return zone

    def _touch(self, key: str, zone: TimeZone) -> None:
        with self._recent_lock:
            self._recent[key] = self._recent.pop(key, zone)
            while len(self._recent) > self._size:
                self._recent.popitem(last=False)

    def clear(self, keys: Optional[Iterable[str]] = None) -> None:
        if keys is None:
            self._alive.clear()
            with self._recent_lock:
                self._recent.clear()
            return
        with self._recent_lock:
            for key in keys:
                self._alive.pop(key, None)
                self._recent.pop(key, None)


_CACHE = _ZoneCache(size=8)


def get_tz(key: str) -> TimeZone:
    return _CACHE.get(key)


def clear_tz_cache() -> None:
    _CACHE.clear()
    ZoneInfo.clear_cache()


def clear_tz_cache_by_keys(keys: tuple[str, ...]) -> None:
    _CACHE.clear(keys)
    ZoneInfo.clear_cache(only_keys=keys)


# A key which has been checked for path traversal and odd characters
SafeTzId = NewType("SafeTzId", str)

_TZID_CHARS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_+/."
)


def validate_tzid(key: str) -> SafeTzId:
    """Reject keys which could escape the zoneinfo directories, or which
    no IANA ID would ever look like.
    """
    if (
        # No standard bounds the length of an ID; 99 leaves ample room
        0 < len(key) < 100
        and _TZID_CHARS.issuperset(key)
        and key[0] not in ".-+/"
        and key[-1] != "/"
        and not any(s in key for s in ("..", "//", "/./"))
    ):
        return SafeTzId(key)
    raise TimeZoneNotFoundError.for_key(key)


def _load_tz(key: SafeTzId) -> TimeZone:
    try:
        zi = ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        raise TimeZoneNotFoundError.for_key(key) from None
    return ZoneInfoTimeZone(zi, key)


_SYSTEM_TZ: Optional[TimeZone] = None


def get_system_tz() -> TimeZone:
    global _SYSTEM_TZ
    if _SYSTEM_TZ is None:
        _SYSTEM_TZ = _read_system_tz()
    return _SYSTEM_TZ


def reset_system_tz() -> None:
    global _SYSTEM_TZ
    _SYSTEM_TZ = None


def _read_system_tz() -> TimeZone:
    kind, value = system.get_tz()
    if kind == 1:
        try:
            with open(value, "rb") as f:
                return ZoneInfoTimeZone(ZoneInfo.from_file(f), key=None)
        except (OSError, ValueError):
            raise TimeZoneNotFoundError(
                f"Could not read system timezone file {value!r}"
            ) from None
    return get_tz(value)
