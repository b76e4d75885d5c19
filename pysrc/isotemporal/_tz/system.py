"""Locating the timezone the operating system is configured with."""

import os
import os.path
import platform
from typing import Literal, Optional

SYSTEM = platform.system()
LOCALTIME = "/etc/localtime"

# On unix-like systems the zone can be read from /etc/localtime.
# Elsewhere we ask tzlocal, so linux needs no extra dependency.
if SYSTEM in ("Linux", "Darwin"):  # pragma: no cover

    def _key_or_file() -> tuple[Literal[0, 1], str]:
        tzif_path = os.path.realpath(LOCALTIME)
        if tzif_path == LOCALTIME:
            # not a symlink: the file is all we have
            return (1, LOCALTIME)  # pragma: no cover

        if (tzid := _tzid_from_path(tzif_path)) is None:
            return (1, tzif_path)
        else:
            return (0, tzid)

else:  # pragma: no cover
    import tzlocal

    def _key_or_file() -> tuple[Literal[0, 1], str]:
        return (0, tzlocal.get_localzone_name())


def _tzid_from_path(path: str) -> Optional[str]:
    """The zone ID of a file inside a ``zoneinfo`` directory, if it is in one.

    >>> _tzid_from_path("/usr/share/zoneinfo/Europe/Paris")
    'Europe/Paris'
    """
    if (index := path.find("/", path.rfind("zoneinfo"))) == -1:
        return None
    return path[index + 1 :]


def get_tz() -> tuple[Literal[0, 1], str]:
    """Determine the system timezone, in one of two forms:

    - ``(0, key)``: a zone ID to look up in the database
    - ``(1, path)``: a TZif file to read directly

    The ``TZ`` environment variable takes precedence over the
    platform's configuration.
    """
    try:
        tz_env = os.environ["TZ"]
    except KeyError:  # pragma: no cover
        return _key_or_file()
    else:
        tz_env = tz_env.removeprefix(":")
        if not tz_env:
            return _key_or_file()
        elif os.path.isabs(tz_env):
            return (1, tz_env)
        else:
            return (0, tz_env)
