"""Matrices that cache their own inverse."""
from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version as _dist_version

    __version__ = _dist_version("cachematrix")
except PackageNotFoundError:
    __version__ = "unknown"

from contextlib import contextmanager
from typing import Iterator

from ._internal import config as _config
from ._internal import linalg_cache as _linalg_cache
from ._internal.holder import CacheMatrix
from ._internal.linalg_cache import solve
from ._internal.warnings import (
    CacheMatrixWarning,
    CachedResultNotice,
)

# Set to False (or export CACHEMATRIX_QUIET=1) to silence the cache-hit notice.
cache_notices: bool = not _config.env_flag("CACHEMATRIX_QUIET")


def _set_cache_notices(value: bool) -> None:
    global cache_notices
    cache_notices = bool(value)


cache_solve = _linalg_cache.make_cache_solve(notices_enabled=lambda: cache_notices)
_linalg_cache.show_every_cache_hit()


@contextmanager
def suppress_cache_notices() -> Iterator[None]:
    """Silence the cache-hit notice for the duration of the block."""
    with _config.temporary_flag(lambda: cache_notices, _set_cache_notices, False):
        yield


__all__ = [
    "CacheMatrix",
    "cache_solve",
    "solve",
    "cache_notices",
    "suppress_cache_notices",
    "CacheMatrixWarning",
    "CachedResultNotice",
    "__version__",
]
