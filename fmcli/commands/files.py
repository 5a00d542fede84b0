"""Basic file operations: read, create, rename, copy, move and delete."""

import logging
import os
import shutil
import stat
from pathlib import Path
from typing import Sequence

from ..command_proxy import Command
from ..config import FileManagerConfig
from ..results import FailureReason, OperationResult
from ..session import Session

logger = logging.getLogger(__name__)


def copy_into_directory(source: Path, destination_dir: Path) -> Path:
    """Copy ``source`` into ``destination_dir`` under its own name.

    An existing file of the same name is overwritten. Returns the new path.
    """
    target = destination_dir / source.name
    shutil.copyfile(source, target)
    return target


class CatCommand(Command):
    """Print the contents of a file."""

    usage = "cat <path>"
    min_args = 1
    max_args = 1

    def execute(
        self, args: Sequence[str], session: Session, config: FileManagerConfig
    ) -> OperationResult:
        path = session.resolve(args[0])
        try:
            # newline="" keeps \r\n and lone \r as they are on disk.
            with open(
                path, "r", encoding="utf-8", errors="replace", newline=""
            ) as f:
                content = f.read()
        except OSError as e:
            logger.debug("Cannot read %s: %s", path, e)
            return OperationResult.from_os_error(e)

        return OperationResult.success(content)

    def get_help(self) -> str:
        return "Print a file's contents: cat <path>"


class AddCommand(Command):
    """Create an empty file."""

    usage = "add <name>"
    min_args = 1
    max_args = 1

    def execute(
        self, args: Sequence[str], session: Session, config: FileManagerConfig
    ) -> OperationResult:
        path = session.resolve(args[0])
        try:
            mode = os.lstat(path).st_mode
        except FileNotFoundError:
            mode = None
        except OSError as e:
            logger.debug("Cannot inspect %s: %s", path, e)
            return OperationResult.from_os_error(e)

        # Only regular files are opened; a FIFO blocks until a reader appears.
        if mode is not None and not stat.S_ISREG(mode):
            reason = (
                FailureReason.IS_A_DIRECTORY
                if stat.S_ISDIR(mode)
                else FailureReason.NOT_A_REGULAR_FILE
            )
            return OperationResult.failure(
                reason, detail=f"{path} exists and is not a regular file"
            )

        try:
            # Truncates an existing regular file, like writing an empty string.
            with open(path, "w", encoding="utf-8"):
                pass
        except OSError as e:
            logger.debug("Cannot create %s: %s", path, e)
            return OperationResult.from_os_error(e)

        return OperationResult.success("File created successfully.")

    def get_help(self) -> str:
        return "Create an empty file: add <name>"


class RenameCommand(Command):
    """Rename a file."""

    usage = "rn <old> <new>"
    min_args = 2
    max_args = 2

    def execute(
        self, args: Sequence[str], session: Session, config: FileManagerConfig
    ) -> OperationResult:
        old_path = session.resolve(args[0])
        new_path = session.resolve(args[1])
        try:
            os.rename(old_path, new_path)
        except OSError as e:
            logger.debug("Cannot rename %s to %s: %s", old_path, new_path, e)
            return OperationResult.from_os_error(e)

        return OperationResult.success("File renamed successfully.")

    def get_help(self) -> str:
        return "Rename a file: rn <old> <new>"


class CopyCommand(Command):
    """Copy a file into a directory."""

    usage = "cp <source> <destination_dir>"
    min_args = 2
    max_args = 2

    def execute(
        self, args: Sequence[str], session: Session, config: FileManagerConfig
    ) -> OperationResult:
        source = session.resolve(args[0])
        destination_dir = session.resolve(args[1])
        try:
            copy_into_directory(source, destination_dir)
        except OSError as e:
            logger.debug("Cannot copy %s into %s: %s", source, destination_dir, e)
            return OperationResult.from_os_error(e)

        return OperationResult.success("File copied successfully.")

    def get_help(self) -> str:
        return """Copy a file into a directory:
  cp <source> <destination_dir>   - Overwrites a file of the same name"""


class MoveCommand(Command):
    """Move a file into a directory by copying it and deleting the source."""

    usage = "mv <source> <destination_dir>"
    min_args = 2
    max_args = 2

    def execute(
        self, args: Sequence[str], session: Session, config: FileManagerConfig
    ) -> OperationResult:
        source = session.resolve(args[0])
        destination_dir = session.resolve(args[1])

        try:
            copy_into_directory(source, destination_dir)
        except OSError as e:
            logger.debug("Move aborted, copy of %s failed: %s", source, e)
            return OperationResult.from_os_error(e)

        # The source is only removed once the copy exists.
        try:
            os.unlink(source)
        except OSError as e:
            logger.warning("Copied %s but could not remove it: %s", source, e)
            return OperationResult.from_os_error(e)

        return OperationResult.success("File moved successfully.")

    def get_help(self) -> str:
        return """Move a file into a directory:
  mv <source> <destination_dir>   - Copy, then delete the source"""


class DeleteCommand(Command):
    """Delete a file."""

    usage = "rm <path>"
    min_args = 1
    max_args = 1

    def execute(
        self, args: Sequence[str], session: Session, config: FileManagerConfig
    ) -> OperationResult:
        path = session.resolve(args[0])
        try:
            os.unlink(path)
        except OSError as e:
            logger.debug("Cannot delete %s: %s", path, e)
            return OperationResult.from_os_error(e)

        return OperationResult.success("File deleted successfully.")

    def get_help(self) -> str:
        return "Delete a file: rm <path>"
