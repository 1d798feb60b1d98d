"""Create and extract tarballs."""

from __future__ import annotations

import glob
import os
import tarfile as _tarfile
from pathlib import Path
from typing import Union

from fungus.gzipcheck import is_gzipped
from fungus.patherrors import PathError

PathLike = Union[str, "os.PathLike[str]"]


def _absolute(path: PathLike) -> Path:
    if not os.fspath(path):
        raise PathError.empty()
    return Path(path).expanduser().absolute()


def _glob(pattern: PathLike) -> list[Path]:
    expanded = os.path.expanduser(os.fspath(pattern))
    return [Path(match) for match in sorted(glob.glob(expanded))]


def create(tarfile: PathLike, pattern: PathLike) -> None:
    """Write a gzip-compressed tarball of everything ``pattern`` matches.

    Each match is stored under its base name; directories are added
    recursively. Raises PathError if nothing matches.
    """
    target = _absolute(tarfile)
    sources = _glob(pattern)
    if not sources:
        raise PathError.does_not_exist(pattern)

    with _tarfile.open(target, "w:gz", dereference=True) as archive:
        for source in sources:
            archive.add(source, arcname=source.name, recursive=True)


def extract_all(tarfile: PathLike, dst: PathLike) -> None:
    """Extract every member of ``tarfile`` into the directory ``dst``.

    Both gzip-compressed and plain tarballs are accepted.
    """
    destination = _absolute(dst)
    source = _absolute(tarfile)
    mode = "r:gz" if is_gzipped(source) else "r:"

    destination.mkdir(parents=True, exist_ok=True)
    with _tarfile.open(source, mode) as archive:
        if hasattr(_tarfile, "tar_filter"):
            archive.extractall(destination, filter="tar")
        else:
            archive.extractall(destination)