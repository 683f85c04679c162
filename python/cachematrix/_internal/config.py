from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Callable, Iterator

_TRUTHY = {"1", "true", "yes", "on"}


def env_flag(env_var: str) -> bool:
    value = os.environ.get(env_var)
    if not value:
        return False
    return value.strip().lower() in _TRUTHY


@contextmanager
def temporary_flag(
    getter: Callable[[], bool],
    setter: Callable[[bool], None],
    value: bool,
) -> Iterator[None]:
    """Temporarily override a process-wide boolean setting.

    The previous value is restored on exit, including when the body raises.
    Not intended to provide thread isolation.
    """

    prev = getter()
    setter(value)
    try:
        yield
    finally:
        setter(prev)
