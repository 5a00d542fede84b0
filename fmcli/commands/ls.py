"""LS command implementation for listing the current directory."""

import logging
import os
from typing import List, Sequence

from ..command_proxy import Command
from ..config import FileManagerConfig
from ..results import OperationResult
from ..session import Session

logger = logging.getLogger(__name__)


class ListCommand(Command):
    """List the immediate children of the current directory."""

    usage = "ls"

    def execute(
        self, args: Sequence[str], session: Session, config: FileManagerConfig
    ) -> OperationResult:
        """List directories first, then regular files, each group sorted."""
        directories: List[str] = []
        files: List[str] = []

        try:
            with os.scandir(session.current_directory) as entries:
                for entry in entries:
                    # Symlinks and special files fall through both checks.
                    if entry.is_dir(follow_symlinks=False):
                        directories.append(entry.name + "/")
                    elif entry.is_file(follow_symlinks=False):
                        files.append(entry.name)
        except OSError as e:
            logger.debug("Cannot list %s: %s", session.current_directory, e)
            return OperationResult.from_os_error(e)

        listing = sorted(directories) + sorted(files)
        if not listing:
            return OperationResult.success()
        return OperationResult.success("\n".join(listing))

    def get_help(self) -> str:
        return """List directory contents:
  ls                   - Directories (marked with /) first, then files"""
