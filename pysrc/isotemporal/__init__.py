from __future__ import annotations

from ._common import (
    ArithmeticOverflow,
    DateTimeError,
    DateTimeParseError,
    FieldOutOfRange,
    InstantOutOfRange,
    InvalidDate,
    InvalidOffset,
    SkippedTime,
    TimeZoneNotFoundError,
    UnsupportedTemporalField,
    UnsupportedTemporalType,
    UnsupportedTemporalUnit,
)
from ._fields import (
    ChronoField,
    ChronoUnit,
    TemporalField,
    TemporalUnit,
    ValueRange,
)
from ._temporal import *
from ._temporal import (  # for pickling and the docs
    __all__ as _temporal_all,
    __version__,
    _unpkl_date,
    _unpkl_dur,
    _unpkl_inst,
    _unpkl_local,
    _unpkl_md,
    _unpkl_odt,
    _unpkl_offset,
    _unpkl_otime,
    _unpkl_period,
    _unpkl_region,
    _unpkl_time,
    _unpkl_ym,
    _unpkl_zoned,
)
from ._tz import (
    clear_tz_cache as _clear_tz_cache,
    clear_tz_cache_by_keys as _clear_tz_cache_by_keys,
    reset_system_tz as _reset_system_tz,
)

import os as _os
import zoneinfo as _zoneinfo
from typing import Iterable as _Iterable

__all__ = [
    *_temporal_all,
    # fields and units
    "ChronoField",
    "ChronoUnit",
    "TemporalField",
    "TemporalUnit",
    "ValueRange",
    # errors
    "ArithmeticOverflow",
    "DateTimeError",
    "DateTimeParseError",
    "FieldOutOfRange",
    "InstantOutOfRange",
    "InvalidDate",
    "InvalidOffset",
    "SkippedTime",
    "TimeZoneNotFoundError",
    "UnsupportedTemporalField",
    "UnsupportedTemporalType",
    "UnsupportedTemporalUnit",
    # configuration
    "TZPATH",
    "reset_tzpath",
    "clear_tzcache",
    "available_timezones",
    "reset_system_tz",
]

TZPATH: tuple[str, ...] = ()
"""The paths in which ``isotemporal`` searches for timezone data.
This is the same as :data:`zoneinfo.TZPATH`, which is read from
the ``PYTHONTZPATH`` environment variable or the build configuration.
If no file is found in these paths, the ``tzdata`` package is used.
"""


def reset_tzpath(
    target: _Iterable[str | _os.PathLike[str]] | None = None, /
) -> None:
    """Reset or set the paths in which timezone data is searched.

    Note
    ----
    This sets the paths of the :mod:`zoneinfo` module as well, since
    the rules of region zones are loaded through it. Cached zones are
    cleared so that new lookups use the new paths.

    Behaves similarly to :func:`zoneinfo.reset_tzpath`
    """
    global TZPATH

    if target is not None:
        # This is such a common mistake, that we raise a descriptive error
        if isinstance(target, (str, bytes)):
            raise TypeError("tzpath must be an iterable of paths")
        if not all(map(_os.path.isabs, target)):
            raise ValueError("tzpaths must be absolute paths")
        _zoneinfo.reset_tzpath(to=[_os.fspath(p) for p in target])
    else:
        _zoneinfo.reset_tzpath()
    TZPATH = _zoneinfo.TZPATH
    _clear_tz_cache()


def clear_tzcache(*, only_keys: _Iterable[str] | None = None) -> None:
    """Clear the timezone cache. If ``only_keys`` is provided, only the cache
    for those keys will be cleared.

    Caution
    -------
    Existing ``ZonedDateTime`` instances keep the rules they were created
    with. After clearing, newly loaded rules may differ from them if the
    underlying data changed.

    **Use this function only if you know that you need to.**

    Behaves similarly to :meth:`zoneinfo.ZoneInfo.clear_cache`.
    """
    if only_keys is None:
        _clear_tz_cache()
    else:
        _clear_tz_cache_by_keys(tuple(only_keys))


def available_timezones() -> set[str]:
    """The IDs of all available region zones.

    Each call recalculates the set from the current ``TZPATH`` and the
    presence of the ``tzdata`` package.

    Warning
    -------
    This function may open a large number of files, since the first few bytes
    of timezone files must be read to determine if they are valid.
    """
    return _zoneinfo.available_timezones()


def reset_system_tz() -> None:
    """Forget the cached system timezone, so that the next call to
    :meth:`ZoneId.system_default` reads it again.

    Call this after changing the ``TZ`` environment variable or the
    system configuration.
    """
    _reset_system_tz()


TZPATH = _zoneinfo.TZPATH
