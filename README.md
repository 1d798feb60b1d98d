# fungus

A small collection of everyday helpers: reading, writing and removing
files, changing permissions and ownership, creating and extracting
tarballs, string helpers, a scope-exit `defer`, operating-system
information and a family of descriptive error types.

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `fungus.errors`: `FuError`, the base of every error the package raises,
  and its subclasses `FileError`, `IterError`, `OsError`, `StringError` and
  `UserError`. Each is built through a class method such as
  `IterError.item_not_found()` or `UserError.does_not_exist_by_id(uid)`.
  Errors of the same type with the same details compare equal.
- `fungus.patherrors`: `PathError`, with constructors such as
  `PathError.empty()`, `PathError.does_not_exist(path)` and
  `PathError.parent_not_found(path)`. Its message names the path, e.g.
  `parent not found for path: foo`.
- `fungus.scope`: `defer(func)` and the `Defer` context manager, which call
  `func` when the block exits, even when an exception is raised (the
  exception is not suppressed).
- `fungus.options`: `has(option, value)`, true when `option` is not `None`
  and equals `value`.
- `fungus.strings`: `size(text)` (length in characters), `trim_suffix(text,
  suffix)`, and `to_string(value)`, which turns a `str`, `bytes` or path
  into a valid UTF-8 string or raises `StringError` / `PathError`.
- `fungus.gzipcheck`: `is_gzipped(path)`, true when the file starts with the
  gzip signature.
- `fungus.tarball`: `create(tarfile, pattern)` writes a gzip-compressed
  tarball of everything the glob `pattern` matches, each match stored under
  its base name and directories added recursively; `extract_all(tarfile,
  dst)` unpacks a gzip-compressed or plain tarball into `dst`.
- `fungus.osinfo`: `arch()`, `platform()`, `linux()`, `macos()`,
  `windows()`, `x86()`, `x86_64()`, the `Arch` and `Platform` enums,
  `info()` (reads `/proc/version`, so Linux only), `parse_info(data)`
  returning an `Info` with `arch`, `kernel` and `release`, and `Stdio`, a
  pair of `out` and `err` streams.
- `fungus.chmod`: the chainable `Chmod` builder (`all`, `dirs`, `files`,
  `mode`, `add_r`, `add_w`, `add_x`, `sub_r`, `sub_w`, `sub_x`, `readonly`,
  `secure`, `path`, `recurse`, and `chmod` to apply it), plus `chmod(path,
  mode)`, `chmod_p(path)`, `chown`, `lchown`, `revoking_mode(old, new)`,
  `abs_path`, `expand_glob` and `file_mode`.
- `fungus.fileio`: `readbytes`, `readstring`, `readlines`, `readlines_p`,
  `write`, `write_p`, `writelines`, `writelines_p`, `touch`, `touch_p`,
  `mkdir`, `mkdir_p`, `remove`, `remove_all`, `digest` (BLAKE2b, 512-bit),
  and `extract_string`, `extract_string_p`, `extract_strings`,
  `extract_strings_p` for pulling regular-expression captures out of a
  file.

## Examples

```python
import re

from fungus import fileio, tarball
from fungus.chmod import chmod_p, file_mode
from fungus.scope import defer

fileio.mkdir("/tmp/demo")
with defer(lambda: fileio.remove_all("/tmp/demo")):
    fileio.write("/tmp/demo/file1", "Not my favorite movie: 'Citizen Kane' (1941).")
    chmod_p("/tmp/demo/file1").mode(0o644).add_x().chmod()
    assert file_mode("/tmp/demo/file1") & 0o777 == 0o755

    rx = re.compile(r"'([^']+)'\s+\((\d{4})\)")
    assert fileio.extract_strings("/tmp/demo/file1", rx) == ["Citizen Kane", "1941"]

    tarball.create("/tmp/demo/out.tgz", "/tmp/demo/file*")
    tarball.extract_all("/tmp/demo/out.tgz", "/tmp/demo/dst")
    print(fileio.readstring("/tmp/demo/dst/file1"))
```

Paths given to the file helpers are expanded (`~`) and made absolute; an
empty path raises `PathError`. `Chmod`, `chown`, `lchown` and
`tarball.create` expand glob patterns and raise `PathError` when nothing
matches. Other failures surface as the usual `OSError` family.

## What it does not do

The package has no helpers for copying, moving or symlinking files or
directory trees, and no iterator shortcuts; use `shutil`, `os` and
`itertools` for those. It provides no command-line program.