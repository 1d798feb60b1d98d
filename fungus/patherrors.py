"""Errors raised by path operations."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Union

from fungus.errors import FuError

PathLike = Union[str, "os.PathLike[str]"]


class PathError(FuError):
    """Something went wrong with a path operation.

    Every kind except ``EMPTY`` carries the path it concerns.
    """

    class Kind(Enum):
        DOES_NOT_EXIST = "path does not exist: {}"
        EMPTY = "path empty"
        EXISTS_ALREADY = "path exists already: {}"
        EXTENSION_NOT_FOUND = "path extension not found: {}"
        FAILED_TO_STRING = "failed to convert to string for path: {}"
        FILENAME_NOT_FOUND = "filename not found for path: {}"
        INVALID_EXPANSION = "invalid expansion for path: {}"
        IS_NOT_DIR = "is not a directory: {}"
        IS_NOT_EXEC = "is not an executable: {}"
        IS_NOT_FILE = "is not a file: {}"
        IS_NOT_FILE_OR_SYMLINK_TO_FILE = "is not a file or a symlink to a file: {}"
        MULTIPLE_HOME_SYMBOLS = "multiple home symbols for path: {}"
        PARENT_NOT_FOUND = "parent not found for path: {}"

    def __init__(self, kind: PathError.Kind, path: PathLike | None = None) -> None:
        path = None if path is None else Path(path)
        super().__init__(kind, path)
        self.kind = kind
        self.path = path

    def __str__(self) -> str:
        if self.path is None:
            return self.kind.value
        return self.kind.value.format(self.path)

    @classmethod
    def empty(cls) -> PathError:
        """The path is empty."""
        return cls(cls.Kind.EMPTY)

    @classmethod
    def does_not_exist(cls, path: PathLike) -> PathError:
        """The path does not exist."""
        return cls(cls.Kind.DOES_NOT_EXIST, path)

    @classmethod
    def exists_already(cls, path: PathLike) -> PathError:
        """The path exists already."""
        return cls(cls.Kind.EXISTS_ALREADY, path)

    @classmethod
    def extension_not_found(cls, path: PathLike) -> PathError:
        """The path has no extension."""
        return cls(cls.Kind.EXTENSION_NOT_FOUND, path)

    @classmethod
    def failed_to_string(cls, path: PathLike) -> PathError:
        """The path could not be converted to a string."""
        return cls(cls.Kind.FAILED_TO_STRING, path)

    @classmethod
    def filename_not_found(cls, path: PathLike) -> PathError:
        """The path has no file name."""
        return cls(cls.Kind.FILENAME_NOT_FOUND, path)

    @classmethod
    def invalid_expansion(cls, path: PathLike) -> PathError:
        """The path failed to expand properly."""
        return cls(cls.Kind.INVALID_EXPANSION, path)

    @classmethod
    def is_not_dir(cls, path: PathLike) -> PathError:
        """The path is not a directory."""
        return cls(cls.Kind.IS_NOT_DIR, path)

    @classmethod
    def is_not_exec(cls, path: PathLike) -> PathError:
        """The path is not an executable."""
        return cls(cls.Kind.IS_NOT_EXEC, path)

    @classmethod
    def is_not_file(cls, path: PathLike) -> PathError:
        """The path is not a file."""
        return cls(cls.Kind.IS_NOT_FILE, path)

    @classmethod
    def is_not_file_or_symlink_to_file(cls, path: PathLike) -> PathError:
        """The path is neither a file nor a symlink to a file."""
        return cls(cls.Kind.IS_NOT_FILE_OR_SYMLINK_TO_FILE, path)

    @classmethod
    def multiple_home_symbols(cls, path: PathLike) -> PathError:
        """The path holds more than one home symbol (tilde)."""
        return cls(cls.Kind.MULTIPLE_HOME_SYMBOLS, path)

    @classmethod
    def parent_not_found(cls, path: PathLike) -> PathError:
        """The path has no valid parent."""
        return cls(cls.Kind.PARENT_NOT_FOUND, path)