"""Detect gzip-compressed files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from fungus.patherrors import PathError

_SIGNATURES = (b"\x1f\x8b", b"\x8b\x1f")


def _absolute(path: Union[str, "os.PathLike[str]"]) -> Path:
    if not os.fspath(path):
        raise PathError.empty()
    return Path(path).expanduser().absolute()


def is_gzipped(path: Union[str, "os.PathLike[str]"]) -> bool:
    """Return True if the file at ``path`` starts with the gzip signature.

    Raises EOFError if the file holds fewer than two bytes.
    """
    with _absolute(path).open("rb") as f:
        header = f.read(2)
    if len(header) < 2:
        raise EOFError("failed to fill whole buffer")
    return header in _SIGNATURES