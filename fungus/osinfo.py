"""Facts about the running system: architecture, platform and kernel."""

from __future__ import annotations

import platform as _platform
import struct
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Generic, TypeVar

from fungus.errors import OsError

_PROC_VERSION = Path("/proc/version")


class Arch(Enum):
    """System architecture."""

    X86 = "x86"
    X86_64 = "x86_64"


class Platform(Enum):
    """Operating system family."""

    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"


_MACHINES = {
    "x86_64": Arch.X86_64,
    "amd64": Arch.X86_64,
    "x64": Arch.X86_64,
    "i386": Arch.X86,
    "i486": Arch.X86,
    "i586": Arch.X86,
    "i686": Arch.X86,
    "x86": Arch.X86,
}


def arch() -> Arch:
    """Return the architecture the interpreter runs on."""
    found = _MACHINES.get(_platform.machine().lower())
    if found is not None:
        return found
    return Arch.X86_64 if struct.calcsize("P") == 8 else Arch.X86


def x86() -> bool:
    """True if running on a 32-bit x86 system."""
    return arch() is Arch.X86


def x86_64() -> bool:
    """True if running on a 64-bit x86 system."""
    return arch() is Arch.X86_64


def platform() -> Platform:
    """Return the operating system family the interpreter runs on."""
    name = sys.platform
    if name.startswith("linux"):
        return Platform.LINUX
    if name == "darwin":
        return Platform.MACOS
    if name in ("win32", "cygwin"):
        return Platform.WINDOWS
    raise RuntimeError(f"unsupported platform: {name}")


def linux() -> bool:
    """True if running on Linux."""
    return platform() is Platform.LINUX


def macos() -> bool:
    """True if running on macOS."""
    return platform() is Platform.MACOS


def windows() -> bool:
    """True if running on Windows."""
    return platform() is Platform.WINDOWS


@dataclass(frozen=True)
class Info:
    """System information."""

    arch: Arch
    kernel: str
    release: str


def parse_info(data: str) -> Info:
    """Build Info from the text of ``/proc/version``."""
    fields = data.split(" ")
    if len(fields) < 3:
        raise OsError.kernel_release_not_found()
    release = fields[2]
    dash = release.find("-")
    if dash < 0:
        raise OsError.kernel_version_not_found()
    return Info(arch=arch(), kernel=release[:dash], release=release)


def info() -> Info:
    """Return information about the running system."""
    return parse_info(_PROC_VERSION.read_text())


Out = TypeVar("Out")
Err = TypeVar("Err")


@dataclass
class Stdio(Generic[Out, Err]):
    """A pair of writable streams standing in for stdout and stderr."""

    out: Out
    err: Err