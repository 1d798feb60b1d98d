"""Read, write, create and remove files and directories."""

from __future__ import annotations

import hashlib
import os
import re
import shutil
from pathlib import Path
from typing import IO, Iterable, Iterator, Union

from fungus.chmod import abs_path, chmod_p
from fungus.errors import FileError

PathLike = Union[str, "os.PathLike[str]"]
Data = Union[str, bytes, bytearray, memoryview]


def digest(path: PathLike) -> bytes:
    """Return the BLAKE2b (512-bit) digest of the file's contents."""
    return hashlib.blake2b(readbytes(path)).digest()


def extract_string(path: PathLike, rx: re.Pattern[str]) -> str:
    """Return the first capture group of the first match of ``rx`` in the file.

    Raises FileError if there is no match or the group captured nothing.
    """
    match = rx.search(readstring(path))
    if match is None or rx.groups < 1 or match.group(1) is None:
        raise FileError.failed_to_extract_string()
    return match.group(1)


def extract_string_p(path: PathLike, rx: str) -> str:
    """Compile ``rx`` and return its first capture group from the file."""
    return extract_string(path, re.compile(rx))


def extract_strings(path: PathLike, rx: re.Pattern[str]) -> list[str]:
    """Return every group captured by the first match of ``rx`` in the file.

    Groups that did not take part in the match are left out. Raises
    FileError if there is no match or nothing was captured.
    """
    match = rx.search(readstring(path))
    if match is None:
        raise FileError.failed_to_extract_string()
    values = [group for group in match.groups() if group is not None]
    if not values:
        raise FileError.failed_to_extract_string()
    return values


def extract_strings_p(path: PathLike, rx: str) -> list[str]:
    """Compile ``rx`` and return the groups its first match captures."""
    return extract_strings(path, re.compile(rx))


def mkdir(path: PathLike) -> Path:
    """Create the directory and any missing parents; return its absolute path."""
    target = abs_path(path)
    if not target.exists():
        target.mkdir(parents=True)
    return target


def mkdir_p(path: PathLike, mode: int) -> Path:
    """Create the directory like ``mkdir`` and set its mode."""
    target = mkdir(path)
    chmod_p(target).recurse(False).mode(mode).chmod()
    return target


def remove(path: PathLike) -> None:
    """Remove a file or an empty directory; do nothing if the path is absent."""
    target = abs_path(path)
    try:
        meta = os.stat(target)
    except OSError:
        return
    if Path(target).is_file():
        os.remove(target)
    elif os.path.isdir(target) and meta is not None:
        os.rmdir(target)


def remove_all(path: PathLike) -> None:
    """Remove a directory and everything in it; do nothing if it is absent.

    A symbolic link is removed itself rather than what it points to.
    """
    target = abs_path(path)
    if not target.exists():
        return
    if target.is_symlink():
        target.unlink()
    else:
        shutil.rmtree(target)


def readbytes(path: PathLike) -> bytes:
    """Return the contents of the file as bytes."""
    return abs_path(path).read_bytes()


def _lines(handle: IO[bytes]) -> Iterator[str]:
    try:
        for raw in handle:
            if raw.endswith(b"\n"):
                raw = raw[:-1]
                if raw.endswith(b"\r"):
                    raw = raw[:-1]
            yield raw.decode("utf-8")
    finally:
        handle.close()


def readlines_p(path: PathLike) -> Iterator[str]:
    """Open the file now and return an iterator over its lines.

    Lines end at ``\\n``; the terminator and a ``\\r`` before it are removed.
    """
    handle = open(abs_path(path), "rb")
    return _lines(handle)


def readlines(path: PathLike) -> list[str]:
    """Return all lines of the file."""
    return list(readlines_p(path))


def readstring(path: PathLike) -> str:
    """Return the contents of the file as a UTF-8 string."""
    with open(abs_path(path), encoding="utf-8", newline="") as handle:
        return handle.read()


def touch(path: PathLike) -> Path:
    """Create an empty file if it does not exist; return its absolute path."""
    target = abs_path(path)
    if not target.exists():
        target.open("wb").close()
    return target


def touch_p(path: PathLike, mode: int) -> Path:
    """Create the file like ``touch`` and set its mode."""
    target = touch(path)
    chmod_p(target).recurse(False).mode(mode).chmod()
    return target


def write(path: PathLike, data: Data) -> None:
    """Write ``data`` to the file, replacing its contents, and sync it to disk."""
    payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    with open(abs_path(path), "wb") as handle:
        handle.write(payload)
        handle.flush()
        os.fsync(handle.fileno())


def write_p(path: PathLike, data: Data, mode: int) -> None:
    """Write ``data`` like ``write`` and set the file's mode."""
    write(path, data)
    chmod_p(path).recurse(False).mode(mode).chmod()


def writelines(path: PathLike, lines: Iterable[str]) -> None:
    """Write ``lines`` joined by newlines to the file."""
    write(path, "\n".join(lines))


def writelines_p(path: PathLike, lines: Iterable[str], mode: int) -> None:
    """Write ``lines`` like ``writelines`` and set the file's mode."""
    write(path, "\n".join(lines))
    chmod_p(path).recurse(False).mode(mode).chmod()