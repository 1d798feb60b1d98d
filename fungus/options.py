"""Helpers for optional values."""

from __future__ import annotations

from typing import Any


def has(option: Any, value: Any) -> bool:
    """Return True if ``option`` is not None and equals ``value``."""
    if option is None:
        return False
    return value == option