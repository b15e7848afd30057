from __future__ import annotations

from ._core import *
from ._core import (  # for the docs and for unpickling
    __all__ as _core_all,
    __version__,
    _unpkl_caldelta,
    _unpkl_date,
    _unpkl_days,
    _unpkl_dt,
    _unpkl_fixed,
    _unpkl_months,
    _unpkl_naive,
    _unpkl_tdelta,
    _unpkl_time,
)
from ._tz import _clear_tz_cache, _clear_tz_cache_by_keys, _set_tzpath

import os as _os
import sysconfig as _sysconfig
from pathlib import Path as _Path
from typing import Iterable as _Iterable

__all__ = [*_core_all, "TZPATH", "reset_tzpath", "clear_tzcache"]

TZPATH: tuple[str, ...] = ()
"""The paths in which ``chronokit`` will search for timezone data.
By default, this is determined the same way as :data:`zoneinfo.TZPATH`,
although you can override it using :func:`chronokit.reset_tzpath`.
If a timezone isn't found on these paths, the ``tzdata`` package is used.
"""


def reset_tzpath(target: _Iterable[str | _os.PathLike[str]] | None = None, /):
    """Reset or set the paths in which ``chronokit`` will search for timezone data.

    It does not affect the :mod:`zoneinfo` module or other libraries.

    Note
    ----
    Due to caching, you may find that looking up a timezone after setting the tzpath
    doesn't load the timezone data from the new path. You may need to call
    :func:`clear_tzcache` if you want to force loading *all* timezones from the new path.

    Behaves similarly to :func:`zoneinfo.reset_tzpath`
    """
    global TZPATH

    if target is not None:
        # This is such a common mistake, that we raise a descriptive error
        if isinstance(target, (str, bytes)):
            raise TypeError("tzpath must be an iterable of paths")

        target = list(target)
        if not all(map(_os.path.isabs, target)):
            raise ValueError("tzpaths must be absolute paths")
        TZPATH = tuple(str(_Path(p)) for p in target)
    else:
        TZPATH = _tzpath_from_env()
    _set_tzpath(TZPATH)


def _tzpath_from_env() -> tuple[str, ...]:
    try:
        env_var = _os.environ["PYTHONTZPATH"]
    except KeyError:
        env_var = _sysconfig.get_config_var("TZPATH")

    if not env_var:
        return ()

    raw_tzpath = env_var.split(_os.pathsep)
    # like zoneinfo, we silently ignore relative paths
    return tuple(filter(_os.path.isabs, raw_tzpath))


def clear_tzcache(*, only_keys: _Iterable[str] | None = None) -> None:
    """Clear the timezone cache. If ``only_keys`` is provided, only the cache for those
    keys will be cleared.

    Existing :class:`DateTime` instances aren't affected, since they only
    store a fixed offset.

    Behaves similarly to :meth:`zoneinfo.ZoneInfo.clear_cache`.
    """
    if only_keys is None:
        _clear_tz_cache()
    else:
        _clear_tz_cache_by_keys(tuple(only_keys))


reset_tzpath()  # populate the tzpath for the first time
