from __future__ import annotations

import warnings
from typing import Any, Callable

import numpy as np

from .holder import CacheMatrix
from .warnings import CachedResultNotice

CACHE_HIT_MESSAGE = "getting cached data"

# Reciprocal condition numbers below this are treated as singular.
DEFAULT_TOL = float(np.finfo(float).eps)


def _as_matrix(a: Any) -> np.ndarray:
    arr = np.asarray(a)
    if not np.iscomplexobj(arr):
        arr = arr.astype(float, copy=False)
    if arr.ndim != 2:
        raise np.linalg.LinAlgError(
            f"{arr.ndim}-dimensional array given. Array must be two-dimensional"
        )
    if arr.shape[0] != arr.shape[1]:
        raise np.linalg.LinAlgError("Last 2 dimensions of the array must be square")
    if arr.size == 0:
        raise np.linalg.LinAlgError("0x0 matrix given. Matrix must be non-empty")
    return arr


def _check_condition(a: np.ndarray, tol: float) -> None:
    with np.errstate(divide="ignore", invalid="ignore"):
        rcond = 1.0 / np.linalg.cond(a)
    # NaN entries give a NaN estimate; treat them as failing the check.
    if not rcond >= tol:
        raise np.linalg.LinAlgError(
            f"system is computationally singular: reciprocal condition number = {rcond:g}"
        )


def solve(a: Any, b: Any = None, *, tol: float = DEFAULT_TOL) -> np.ndarray:
    """Invert ``a``, or solve ``a @ x = b`` when ``b`` is given.

    ``tol`` rejects matrices whose reciprocal condition number falls below it;
    ``tol=0`` skips the check.
    Singular, non-square and non-2D input raise ``numpy.linalg.LinAlgError``.
    """

    if tol < 0:
        raise ValueError("tol must be non-negative")

    arr = _as_matrix(a)
    if tol > 0:
        _check_condition(arr, float(tol))

    if b is None:
        return np.linalg.inv(arr)
    return np.linalg.solve(arr, np.asarray(b))


def show_every_cache_hit() -> None:
    """Show the cache-hit notice on every hit, not once per call site."""
    warnings.filterwarnings("always", category=CachedResultNotice)


def make_cache_solve(
    *,
    notices_enabled: Callable[[], bool],
    solver: Callable[..., Any] = solve,
) -> Callable[..., Any]:
    def cache_solve(x: CacheMatrix, *args: Any, **kwargs: Any) -> Any:
        """Return the inverse of ``x``, computing it only if not already cached.

        Extra arguments go to the solver on a cache miss and are ignored on a
        hit. Solver errors propagate and leave the cache empty.
        """
        m = x.get_inverse()
        if m is not None:
            if notices_enabled():
                warnings.warn(CACHE_HIT_MESSAGE, CachedResultNotice, stacklevel=2)
            return m

        data = x.get()
        m = solver(data, *args, **kwargs)
        x.set_inverse(m)
        return m

    return cache_solve
