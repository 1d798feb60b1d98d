import io
import sys
from unittest import mock

import pytest

from fungus import osinfo
from fungus.errors import OsError
from fungus.osinfo import (
    Arch,
    Info,
    Platform,
    Stdio,
    arch,
    info,
    linux,
    macos,
    parse_info,
    platform,
    windows,
    x86,
    x86_64,
)

SAMPLE = "Linux version 5.3.13-arch1-1 (linux@archlinux) (gcc version 9.2.0 (GCC)) #1 SMP PREEMPT"


def test_parse_info():
    result = parse_info(SAMPLE)
    assert result.kernel == "5.3.13"
    assert result.release == "5.3.13-arch1-1"
    assert result.arch is arch()


def test_parse_info_missing_release():
    with pytest.raises(OsError) as err:
        parse_info("Linux version")
    assert err.value == OsError.kernel_release_not_found()


def test_parse_info_missing_version():
    with pytest.raises(OsError) as err:
        parse_info("Linux version 5.3.13 more")
    assert err.value == OsError.kernel_version_not_found()


def test_info_reads_proc_version():
    with mock.patch("pathlib.Path.read_text", return_value=SAMPLE):
        result = info()
    assert result == Info(arch=arch(), kernel="5.3.13", release="5.3.13-arch1-1")


def test_arch_flags_match_arch():
    assert x86() == (arch() is Arch.X86)
    assert x86_64() == (arch() is Arch.X86_64)


@pytest.mark.parametrize(
    "machine, expected",
    [("x86_64", Arch.X86_64), ("AMD64", Arch.X86_64), ("i686", Arch.X86), ("i386", Arch.X86)],
)
def test_arch_from_machine(monkeypatch, machine, expected):
    monkeypatch.setattr(osinfo._platform, "machine", lambda: machine)
    assert arch() is expected
    assert x86() == (expected is Arch.X86)


@pytest.mark.parametrize(
    "name, expected",
    [("linux", Platform.LINUX), ("darwin", Platform.MACOS), ("win32", Platform.WINDOWS)],
)
def test_platform_detection(monkeypatch, name, expected):
    monkeypatch.setattr(sys, "platform", name)
    assert platform() is expected
    assert linux() == (expected is Platform.LINUX)
    assert macos() == (expected is Platform.MACOS)
    assert windows() == (expected is Platform.WINDOWS)


def test_exactly_one_platform():
    assert [linux(), macos(), windows()].count(True) == 1


def test_unsupported_platform(monkeypatch):
    monkeypatch.setattr(sys, "platform", "plan9")
    with pytest.raises(RuntimeError):
        platform()


def test_stdio_buffers():
    stdio = Stdio(io.BytesIO(), io.BytesIO())
    stdio.out.write(b"Hello out\n")
    stdio.err.write(b"Hello err\n")
    assert stdio.out.getvalue() == b"Hello out\n"
    assert stdio.err.getvalue() == b"Hello err\n"


def test_stdio_text_streams():
    stdio = Stdio(io.StringIO(), io.StringIO())
    print("Hello out", file=stdio.out)
    print("Hello err", file=stdio.err)
    assert stdio.out.getvalue() == "Hello out\n"
    assert stdio.err.getvalue() == "Hello err\n"