"""Navigation commands: moving the session between directories."""

import logging
from typing import Sequence

from ..command_proxy import Command
from ..config import FileManagerConfig
from ..results import INVALID_DIRECTORY, INVALID_NAVIGATION, OperationResult
from ..session import Session

logger = logging.getLogger(__name__)


def current_directory_message(session: Session) -> str:
    return f"You are currently in {session.current_directory}"


class UpCommand(Command):
    """Go to the parent of the current directory."""

    usage = "up"
    invalid_message = INVALID_NAVIGATION

    def execute(
        self, args: Sequence[str], session: Session, config: FileManagerConfig
    ) -> OperationResult:
        current = session.current_directory
        parent = current.parent
        if parent == current:
            return OperationResult.success("You are already in the root directory.")

        try:
            session.change_directory(parent)
        except OSError as e:
            logger.debug("Cannot enter parent directory %s: %s", parent, e)
            return OperationResult.from_os_error(e, INVALID_DIRECTORY)

        return OperationResult.success(current_directory_message(session))

    def get_help(self) -> str:
        return "Go to the parent directory. Does nothing at the filesystem root."


class CdCommand(Command):
    """Change to a relative or absolute directory."""

    usage = "cd <path>"
    min_args = 1
    max_args = 1
    invalid_message = INVALID_NAVIGATION

    def execute(
        self, args: Sequence[str], session: Session, config: FileManagerConfig
    ) -> OperationResult:
        target = session.resolve(args[0])
        try:
            session.change_directory(target)
        except OSError as e:
            logger.debug("cd to %s rejected: %s", target, e)
            return OperationResult.from_os_error(e, INVALID_DIRECTORY)

        return OperationResult.success(current_directory_message(session))

    def get_help(self) -> str:
        return """Change the current directory:
  cd <path>            - Relative to the current directory, or absolute

Examples:
  cd projects
  cd ../docs
  cd /tmp"""
