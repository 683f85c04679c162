from __future__ import annotations

from typing import Any

import numpy as np


def _placeholder_matrix() -> np.ndarray:
    return np.full((1, 1), np.nan)


def _safe_shape(obj: Any) -> tuple[int, ...] | None:
    shape = getattr(obj, "shape", None)
    if isinstance(shape, tuple):
        return shape
    try:
        return np.shape(obj)
    except Exception:
        return None


class CacheMatrix:
    """A matrix that can cache its own inverse.

    The holder owns the matrix ``x`` and the cached inverse ``m``. Replacing
    the matrix through :meth:`set` always drops ``m``, so an inverse of a
    previous matrix is never returned. ``m`` is filled by
    :func:`cachematrix.cache_solve`; :meth:`set_inverse` stores whatever it is
    given without checking it against ``x``.

    No validation happens here. Non-square or singular matrices are accepted
    and only rejected when the inverse is first computed.
    """

    def __init__(self, x: Any = None):
        self._x = _placeholder_matrix() if x is None else x
        self._m: Any = None

    def set(self, y: Any) -> None:
        self._x = y
        self._m = None

    def get(self) -> Any:
        return self._x

    def set_inverse(self, inverse: Any) -> None:
        self._m = inverse

    def get_inverse(self) -> Any | None:
        return self._m

    @property
    def has_inverse(self) -> bool:
        return self._m is not None

    def __repr__(self) -> str:
        shape = _safe_shape(self._x)
        shape_str = "?" if shape is None else "x".join(str(d) for d in shape)
        return f"CacheMatrix(shape={shape_str}, cached={self.has_inverse})"
