"""Error types raised by the package, all sharing the FuError base."""

from __future__ import annotations

from enum import Enum


class FuError(Exception):
    """Base class for every error the package raises.

    Errors of the same type and with the same details compare equal, so a
    caught error can be checked against a freshly built one.
    """

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class FileError(FuError):
    """Something went wrong with a file operation."""

    class Kind(Enum):
        FAILED_TO_EXTRACT_STRING = "failed to extract string from file"

    def __init__(self, kind: FileError.Kind) -> None:
        super().__init__(kind)
        self.kind = kind

    def __str__(self) -> str:
        return self.kind.value

    @classmethod
    def failed_to_extract_string(cls) -> FileError:
        """A regex string extraction found nothing."""
        return cls(cls.Kind.FAILED_TO_EXTRACT_STRING)


class IterError(FuError):
    """Something went wrong with an iterator operation."""

    class Kind(Enum):
        ITEM_NOT_FOUND = "iterator item not found"
        MULTIPLE_ITEMS_FOUND = "multiple iterator items found"
        MUTUALLY_EXCLUSIVE_INDICES = "mutually exclusive indices"

    def __init__(self, kind: IterError.Kind) -> None:
        super().__init__(kind)
        self.kind = kind

    def __str__(self) -> str:
        return self.kind.value

    @classmethod
    def item_not_found(cls) -> IterError:
        """The iterator yielded no item."""
        return cls(cls.Kind.ITEM_NOT_FOUND)

    @classmethod
    def multiple_items_found(cls) -> IterError:
        """The iterator yielded more than the one item expected."""
        return cls(cls.Kind.MULTIPLE_ITEMS_FOUND)

    @classmethod
    def mutually_exclusive_indices(cls) -> IterError:
        """The given indices select nothing."""
        return cls(cls.Kind.MUTUALLY_EXCLUSIVE_INDICES)


class OsError(FuError):
    """Something went wrong while inspecting the operating system."""

    class Kind(Enum):
        KERNEL_RELEASE_NOT_FOUND = "kernel release was not found"
        KERNEL_VERSION_NOT_FOUND = "kernel version was not found"

    def __init__(self, kind: OsError.Kind) -> None:
        super().__init__(kind)
        self.kind = kind

    def __str__(self) -> str:
        return self.kind.value

    @classmethod
    def kernel_release_not_found(cls) -> OsError:
        """The kernel release could not be determined."""
        return cls(cls.Kind.KERNEL_RELEASE_NOT_FOUND)

    @classmethod
    def kernel_version_not_found(cls) -> OsError:
        """The kernel version could not be determined."""
        return cls(cls.Kind.KERNEL_VERSION_NOT_FOUND)


class StringError(FuError):
    """A value could not be turned into a string."""

    class Kind(Enum):
        FAILED_TO_STRING = "failed to convert value to string"

    def __init__(self, kind: StringError.Kind) -> None:
        super().__init__(kind)
        self.kind = kind

    def __str__(self) -> str:
        return self.kind.value

    @classmethod
    def failed_to_string(cls) -> StringError:
        """The conversion to a string failed."""
        return cls(cls.Kind.FAILED_TO_STRING)


class UserError(FuError):
    """Something went wrong with a user lookup."""

    def __init__(self, uid: int) -> None:
        super().__init__(uid)
        self.uid = uid

    def __str__(self) -> str:
        return f"user does not exist: {self.uid}"

    @classmethod
    def does_not_exist_by_id(cls, uid: int) -> UserError:
        """No user exists with the given id."""
        return cls(uid)