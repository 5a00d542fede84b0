"""Uniform operation results returned by every command."""

import errno
import shutil
from dataclasses import dataclass
from enum import Enum
from typing import Optional

OPERATION_FAILED = "Operation failed."
INVALID_DIRECTORY = "Invalid directory path."
INVALID_NAVIGATION = "Invalid navigation command."
INVALID_OS_COMMAND = "Invalid os command."
INVALID_INPUT = "Invalid input."


class FailureReason(str, Enum):
    """Internal cause of a failed operation. Never shown to the user as-is."""

    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    IS_A_DIRECTORY = "is_a_directory"
    NOT_A_DIRECTORY = "not_a_directory"
    NOT_A_REGULAR_FILE = "not_a_regular_file"
    ALREADY_EXISTS = "already_exists"
    SAME_FILE = "same_file"
    CROSS_DEVICE = "cross_device"
    CORRUPT_DATA = "corrupt_data"
    MISSING_ARGUMENT = "missing_argument"
    TOO_MANY_ARGUMENTS = "too_many_arguments"
    UNKNOWN_COMMAND = "unknown_command"
    UNKNOWN_OS_COMMAND = "unknown_os_command"
    IO_ERROR = "io_error"
    INTERNAL_ERROR = "internal_error"


_ERRNO_REASONS = {
    errno.ENOENT: FailureReason.NOT_FOUND,
    errno.EACCES: FailureReason.PERMISSION_DENIED,
    errno.EPERM: FailureReason.PERMISSION_DENIED,
    errno.EISDIR: FailureReason.IS_A_DIRECTORY,
    errno.ENOTDIR: FailureReason.NOT_A_DIRECTORY,
    errno.EEXIST: FailureReason.ALREADY_EXISTS,
    errno.ENOTEMPTY: FailureReason.ALREADY_EXISTS,
    errno.EXDEV: FailureReason.CROSS_DEVICE,
}


@dataclass
class OperationResult:
    """Outcome of a single command.

    Every failure carries a ``reason`` so callers (and tests) can tell causes
    apart, while ``output`` stays one of the flat user-facing messages.
    """

    ok: bool
    output: Optional[str] = None
    reason: Optional[FailureReason] = None
    detail: Optional[str] = None
    terminate: bool = False

    @classmethod
    def success(cls, output: Optional[str] = None) -> "OperationResult":
        """Create a successful result with optional text to display."""
        return cls(ok=True, output=output)

    @classmethod
    def failure(
        cls,
        reason: FailureReason,
        message: str = OPERATION_FAILED,
        detail: Optional[str] = None,
    ) -> "OperationResult":
        """Create a failed result."""
        return cls(ok=False, output=message, reason=reason, detail=detail)

    @classmethod
    def from_os_error(
        cls, error: OSError, message: str = OPERATION_FAILED
    ) -> "OperationResult":
        """Translate an OS-level exception into a failed result."""
        if isinstance(error, shutil.SameFileError):
            reason = FailureReason.SAME_FILE
        else:
            reason = _ERRNO_REASONS.get(error.errno, FailureReason.IO_ERROR)
        return cls.failure(reason, message, detail=str(error))

    @classmethod
    def exit(cls) -> "OperationResult":
        """Create the result that ends the session."""
        return cls(ok=True, terminate=True)
