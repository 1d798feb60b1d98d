"""Change file permissions and ownership with globbing and recursion."""

from __future__ import annotations

import glob
import os
from pathlib import Path
from typing import Iterator, Union

from fungus.patherrors import PathError

PathLike = Union[str, "os.PathLike[str]"]

_DEFAULT_MODE = 0o644
_PERMISSION_BITS = 0o7777


def abs_path(path: PathLike) -> Path:
    """Return ``path`` expanded for ``~`` and made absolute and normalised.

    Raises PathError if the path is empty.
    """
    text = os.fspath(path)
    if not text:
        raise PathError.empty()
    return Path(os.path.abspath(os.path.expanduser(text)))


def expand_glob(pattern: PathLike) -> list[Path]:
    """Return the sorted absolute paths matching ``pattern``."""
    expanded = str(abs_path(pattern))
    return [Path(match) for match in sorted(glob.glob(expanded))]


def file_mode(path: PathLike) -> int:
    """Return the full mode of ``path``, file type bits included; follows links."""
    return os.stat(abs_path(path)).st_mode


def revoking_mode(old: int, new: int) -> bool:
    """True if ``new`` takes away read or execute permission that ``old`` grants.

    Useful when changing directory permissions recursively: revoking changes
    must be applied on the way out so the tree stays reachable.
    """
    return (
        old & 0o0500 > new & 0o0500
        or old & 0o0050 > new & 0o0050
        or old & 0o0005 > new & 0o0005
    )


class Chmod:
    """Options for a permission change; nothing happens until ``chmod`` is called.

    The option methods return the instance so calls can be chained.
    """

    def __init__(
        self,
        path: PathLike,
        mode: int,
        *,
        dirs: bool = False,
        files: bool = False,
        recursive: bool = True,
    ) -> None:
        self._path = Path(path)
        self._mode = mode
        self._dirs = dirs
        self._files = files
        self._recursive = recursive

    def __repr__(self) -> str:
        return (
            f"Chmod(path={str(self._path)!r}, mode={oct(self._mode)}, "
            f"dirs={self._dirs}, files={self._files}, recursive={self._recursive})"
        )

    def all(self) -> Chmod:
        """Target files and directories alike (the default)."""
        self._dirs = False
        self._files = False
        return self

    def dirs(self) -> Chmod:
        """Target only directories."""
        self._dirs = True
        self._files = False
        return self

    def files(self) -> Chmod:
        """Target only files."""
        self._dirs = False
        self._files = True
        return self

    def mode(self, mode: int) -> Chmod:
        """Set the mode to apply."""
        self._mode = mode
        return self

    def add_r(self) -> Chmod:
        """Add read permission for everyone."""
        self._mode |= 0o0444
        return self

    def add_w(self) -> Chmod:
        """Add write permission for everyone."""
        self._mode |= 0o0222
        return self

    def add_x(self) -> Chmod:
        """Add execute permission for everyone."""
        self._mode |= 0o0111
        return self

    def readonly(self) -> Chmod:
        """Remove write and execute permission for everyone."""
        return self.sub_w().sub_x()

    def secure(self) -> Chmod:
        """Drop all group and other permissions."""
        self._mode &= 0o7700
        return self

    def sub_r(self) -> Chmod:
        """Remove read permission for everyone."""
        self._mode &= 0o7333
        return self

    def sub_w(self) -> Chmod:
        """Remove write permission for everyone."""
        self._mode &= 0o7555
        return self

    def sub_x(self) -> Chmod:
        """Remove execute permission for everyone."""
        self._mode &= 0o7666
        return self

    def path(self, path: PathLike) -> Chmod:
        """Set the path or glob pattern to change."""
        self._path = Path(path)
        return self

    def recurse(self, yes: bool) -> Chmod:
        """Walk directories recursively when ``yes`` is true (the default)."""
        self._recursive = yes
        return self

    def chmod(self) -> None:
        """Apply the mode to everything the path matches.

        Raises PathError if nothing matches.
        """
        sources = expand_glob(self._path)
        if not sources:
            raise PathError.does_not_exist(self._path)
        for source in sources:
            self._apply(source)

    def _targets(self, is_dir: bool) -> bool:
        return (
            (not self._dirs and not self._files)
            or (self._dirs and is_dir)
            or (self._files and not is_dir)
        )

    def _set(self, path: Path) -> None:
        os.chmod(path, self._mode & _PERMISSION_BITS)

    def _apply(self, source: Path) -> None:
        if self._dirs or self._files or self._recursive:
            is_dir = source.is_dir()
            old_mode = file_mode(source)
        else:
            is_dir = False
            old_mode = 0

        targeted = self._targets(is_dir)
        revoking = revoking_mode(old_mode, self._mode)

        # Grant permissions on the way in
        if targeted and (not self._recursive or not is_dir or not revoking):
            self._set(source)

        if self._recursive and is_dir:
            for child in sorted(source.iterdir()):
                self._apply(child)

        # Revoke permissions on the way out
        if targeted and self._recursive and is_dir and revoking:
            self._set(source)


def chmod_p(path: PathLike) -> Chmod:
    """Return Chmod options for ``path``, starting from its current mode.

    The starting mode is 0o644 if the path does not exist. Raises PathError
    if the path is empty.
    """
    target = abs_path(path)
    try:
        mode = file_mode(target)
    except OSError:
        mode = _DEFAULT_MODE
    return Chmod(target, mode)


def chmod(path: PathLike, mode: int) -> None:
    """Apply ``mode`` recursively to everything ``path`` matches."""
    chmod_p(path).mode(mode).chmod()


def _walk(path: Path) -> Iterator[Path]:
    yield path
    if path.is_dir() and not path.is_symlink():
        for child in sorted(path.iterdir(), key=lambda p: p.name):
            yield from _walk(child)


def _chown(path: PathLike, uid: int, gid: int, follow: bool) -> None:
    target = abs_path(path)
    sources = expand_glob(target)
    if not sources:
        raise PathError.does_not_exist(target)
    for source in sources:
        for entry in _walk(source):
            os.chown(entry, uid, gid, follow_symlinks=follow)


def chown(path: PathLike, uid: int, gid: int) -> None:
    """Change ownership recursively of everything ``path`` matches; follows links."""
    _chown(path, uid, gid, True)


def lchown(path: PathLike, uid: int, gid: int) -> None:
    """Change ownership recursively of everything ``path`` matches; links themselves."""
    _chown(path, uid, gid, False)