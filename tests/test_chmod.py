import os
from pathlib import Path

import pytest

from fungus.chmod import (
    Chmod,
    abs_path,
    chmod,
    chmod_p,
    chown,
    expand_glob,
    file_mode,
    lchown,
    revoking_mode,
)
from fungus.patherrors import PathError


def _touch(path: Path, mode: int = 0o644) -> Path:
    path.touch()
    os.chmod(path, mode)
    return path


def test_abs_path_empty_raises():
    with pytest.raises(PathError) as info:
        abs_path("")
    assert info.value == PathError.empty()


def test_abs_path_relative_and_normalised():
    assert abs_path("foo/../bar") == Path.cwd() / "bar"
    assert abs_path("/foo/bar/") == Path("/foo/bar")


def test_abs_path_home():
    assert abs_path("~") == Path(os.path.expanduser("~"))


def test_expand_glob(tmp_path):
    _touch(tmp_path / "file1")
    _touch(tmp_path / "file2")
    (tmp_path / "dir1").mkdir()
    assert expand_glob(tmp_path / "file*") == [tmp_path / "file1", tmp_path / "file2"]
    assert expand_glob(tmp_path / "nothing*") == []


def test_chmod(tmp_path):
    file1 = _touch(tmp_path / "file1")
    chmod(file1, 0o644)
    assert file_mode(file1) == 0o100644
    chmod(file1, 0o555)
    assert file_mode(file1) == 0o100555


def test_chmod_p(tmp_path):
    dir1 = tmp_path / "dir1"
    file1 = dir1 / "file1"
    dir2 = dir1 / "dir2"
    file2 = dir2 / "file2"
    file3 = tmp_path / "file3"
    dir2.mkdir(parents=True)
    os.chmod(dir1, 0o755)
    os.chmod(dir2, 0o755)
    _touch(file1)
    _touch(file2)

    # all files
    chmod_p(dir1).mode(0o600).chmod()
    assert file_mode(dir1) == 0o40600

    # fix dirs only to allow listing
    chmod_p(dir1).mode(0o755).dirs().chmod()
    assert file_mode(dir1) == 0o40755
    assert file_mode(file1) == 0o100600
    assert file_mode(dir2) == 0o40755
    assert file_mode(file2) == 0o100600

    # change just the files back
    chmod_p(dir1).mode(0o644).files().chmod()
    assert file_mode(dir1) == 0o40755
    assert file_mode(file1) == 0o100644
    assert file_mode(dir2) == 0o40755
    assert file_mode(file2) == 0o100644

    # globbing
    _touch(file3)
    chmod_p(tmp_path / "*3").mode(0o555).files().chmod()
    assert file_mode(dir1) == 0o40755
    assert file_mode(file1) == 0o100644
    assert file_mode(dir2) == 0o40755
    assert file_mode(file2) == 0o100644
    assert file_mode(file3) == 0o100555


def test_chmod_p_missing_path_raises(tmp_path):
    bogus = tmp_path / "bogus"
    with pytest.raises(PathError) as info:
        chmod_p(bogus).mode(0o644).chmod()
    assert info.value == PathError.does_not_exist(bogus)


def test_chmod_p_empty_path_raises():
    with pytest.raises(PathError) as info:
        chmod_p("")
    assert info.value == PathError.empty()


def test_chmod_p_symbolic(tmp_path):
    file1 = _touch(tmp_path / "file1")
    assert file_mode(file1) == 0o100644

    chmod_p(file1).add_x().chmod()
    assert file_mode(file1) == 0o100755

    chmod_p(file1).sub_x().chmod()
    assert file_mode(file1) == 0o100644

    chmod_p(file1).sub_w().chmod()
    assert file_mode(file1) == 0o100444

    chmod_p(file1).add_w().chmod()
    assert file_mode(file1) == 0o100666

    chmod_p(file1).sub_r().chmod()
    assert file_mode(file1) == 0o100222

    chmod_p(file1).add_r().chmod()
    assert file_mode(file1) == 0o100666

    chmod_p(file1).readonly().chmod()
    assert file_mode(file1) == 0o100444

    chmod_p(file1).secure().chmod()
    assert file_mode(file1) == 0o100400


def test_chmod_no_recurse_leaves_children(tmp_path):
    dir1 = tmp_path / "dir1"
    dir1.mkdir()
    os.chmod(dir1, 0o755)
    file1 = _touch(dir1 / "file1")
    chmod_p(dir1).recurse(False).mode(0o700).chmod()
    assert file_mode(dir1) == 0o40700
    assert file_mode(file1) == 0o100644


def test_chmod_all_after_dirs_targets_everything(tmp_path):
    dir1 = tmp_path / "dir1"
    dir1.mkdir()
    os.chmod(dir1, 0o755)
    file1 = _touch(dir1 / "file1")
    chmod_p(dir1).dirs().all().mode(0o755).chmod()
    assert file_mode(dir1) == 0o40755
    assert file_mode(file1) == 0o100755


def test_chmod_p_defaults_for_missing_path(tmp_path):
    options = chmod_p(tmp_path / "missing")
    assert isinstance(options, Chmod)
    assert "0o644" in repr(options)


def test_chown_keeps_own_ownership(tmp_path):
    dir1 = tmp_path / "dir1"
    dir1.mkdir()
    file1 = _touch(dir1 / "file1")
    uid, gid = os.getuid(), os.getgid()
    chown(dir1, uid, gid)
    assert os.stat(file1).st_uid == uid
    assert os.stat(file1).st_gid == gid


def test_lchown_on_symlink(tmp_path):
    file1 = _touch(tmp_path / "file1")
    link1 = tmp_path / "link1"
    link1.symlink_to(file1)
    uid, gid = os.getuid(), os.getgid()
    lchown(link1, uid, gid)
    assert os.lstat(link1).st_uid == uid


def test_chown_missing_raises(tmp_path):
    with pytest.raises(PathError) as info:
        chown(tmp_path / "missing", os.getuid(), os.getgid())
    assert info.value == PathError.does_not_exist(tmp_path / "missing")


@pytest.mark.parametrize(
    "old, new, expected",
    [
        # other octet
        (0o0777, 0o0777, False),
        (0o0776, 0o0775, False),
        (0o0770, 0o0771, False),
        (0o0776, 0o0772, True),
        (0o0775, 0o0776, True),
        (0o0775, 0o0774, True),
        # group octet
        (0o0767, 0o0757, False),
        (0o0707, 0o0717, False),
        (0o0767, 0o0727, True),
        (0o0757, 0o0767, True),
        (0o0757, 0o0747, True),
        # owner octet
        (0o0677, 0o0577, False),
        (0o0077, 0o0177, False),
        (0o0677, 0o0277, True),
        (0o0577, 0o0677, True),
        (0o0577, 0o0477, True),
        (0o0577, 0o0177, True),
    ],
)
def test_revoking(old, new, expected):
    assert revoking_mode(old, new) is expected