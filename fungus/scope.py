"""Run a callable when a block is left, whether normally or by an exception."""

from __future__ import annotations

from types import TracebackType
from typing import Callable


class Defer:
    """Context manager that calls ``func`` when the block exits.

    The call happens even when the block raises; the exception is not
    suppressed.
    """

    def __init__(self, func: Callable[[], object]) -> None:
        self._func = func

    def __enter__(self) -> Defer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self._func()
        return False


def defer(func: Callable[[], object]) -> Defer:
    """Return a context manager that calls ``func`` on leaving its block."""
    return Defer(func)