from .common import Ambiguity, Fold, Gap, Unambiguous
from .store import (
    clear_tz_cache,
    clear_tz_cache_by_keys,
    get_system_tz,
    get_tz,
    reset_system_tz,
    validate_tzid,
)
from .timezone import FixedTimeZone, TimeZone, ZoneInfoTimeZone

__all__ = [
    "Ambiguity",
    "Fold",
    "Gap",
    "Unambiguous",
    "TimeZone",
    "FixedTimeZone",
    "ZoneInfoTimeZone",
    "get_tz",
    "get_system_tz",
    "reset_system_tz",
    "clear_tz_cache",
    "clear_tz_cache_by_keys",
    "validate_tzid",
]
