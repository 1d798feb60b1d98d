"""String helpers."""

from __future__ import annotations

import os
from pathlib import PurePath
from typing import Union

from fungus.errors import StringError
from fungus.patherrors import PathError


def size(text: str) -> int:
    """Return the length of ``text`` in characters rather than bytes."""
    return len(text)


def trim_suffix(text: str, suffix: str) -> str:
    """Return ``text`` with ``suffix`` removed from its end if present."""
    if suffix and text.endswith(suffix):
        return text[: len(text) - len(suffix)]
    return text


def to_string(value: Union[str, bytes, "os.PathLike[str]"]) -> str:
    """Return ``value`` as a valid UTF-8 string.

    Paths that cannot be represented raise PathError; other values that
    cannot be represented raise StringError.
    """
    if isinstance(value, (PurePath, os.PathLike)):
        text = os.fspath(value)
        if isinstance(text, bytes):
            try:
                return text.decode("utf-8")
            except UnicodeDecodeError:
                raise PathError.failed_to_string(os.fsdecode(text)) from None
        try:
            text.encode("utf-8")
        except UnicodeEncodeError:
            raise PathError.failed_to_string(value) from None
        return text

    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError:
            raise StringError.failed_to_string() from None
    if isinstance(value, str):
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            raise StringError.failed_to_string() from None
        return value
    raise StringError.failed_to_string()