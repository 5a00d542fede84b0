"""Command proxy system that routes parsed input lines to their executors."""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from .config import FileManagerConfig
from .parser import parse_command
from .results import INVALID_INPUT, FailureReason, OperationResult
from .session import Session

logger = logging.getLogger(__name__)


class Command(ABC):
    """Abstract base class for all commands.

    Subclasses declare how many positional arguments they take; the proxy
    rejects a call with the wrong count before ``execute`` runs.
    """

    usage: str = ""
    min_args: int = 0
    max_args: int = 0
    invalid_message: str = INVALID_INPUT

    @abstractmethod
    def execute(
        self, args: Sequence[str], session: Session, config: FileManagerConfig
    ) -> OperationResult:
        """Execute the command with given arguments."""
        pass

    @abstractmethod
    def get_help(self) -> str:
        """Get help text for this command."""
        pass

    def validate_args(self, args: Sequence[str]) -> Optional[FailureReason]:
        """Check the argument count. Returns the failure reason, if any."""
        if len(args) < self.min_args:
            return FailureReason.MISSING_ARGUMENT
        if len(args) > self.max_args:
            return FailureReason.TOO_MANY_ARGUMENTS
        return None


class CommandProxy:
    """Main command proxy that routes commands to their handlers."""

    def __init__(self, session: Session, config: FileManagerConfig):
        self.session = session
        self.config = config
        self.commands = self._register_commands()

    def execute(self, command_line: str) -> OperationResult:
        """Parse and execute a single input line."""
        cmd, args = parse_command(command_line)

        # Check if command exists
        if cmd not in self.commands:
            logger.debug("Unknown command: %r", cmd)
            return OperationResult.failure(
                FailureReason.UNKNOWN_COMMAND, INVALID_INPUT
            )

        handler = self.commands[cmd]

        reason = handler.validate_args(args)
        if reason is not None:
            return OperationResult.failure(
                reason,
                f"{handler.invalid_message} Usage: {handler.usage}",
                detail=f"{cmd} got {len(args)} argument(s)",
            )

        try:
            return handler.execute(args, self.session, self.config)
        except Exception as e:
            logger.error(
                "Command %s failed unexpectedly: %s",
                cmd,
                e,
                exc_info=self.config.show_debug,
            )
            return OperationResult.failure(
                FailureReason.INTERNAL_ERROR, detail=repr(e)
            )

    def _register_commands(self) -> Dict[str, Command]:
        """Register all available commands."""
        from .commands import (
            AddCommand,
            CatCommand,
            CdCommand,
            CompressCommand,
            CopyCommand,
            DecompressCommand,
            DeleteCommand,
            HashCommand,
            ListCommand,
            MoveCommand,
            OsCommand,
            RenameCommand,
            UpCommand,
        )

        return {
            "up": UpCommand(),
            "cd": CdCommand(),
            "ls": ListCommand(),
            "cat": CatCommand(),
            "add": AddCommand(),
            "rn": RenameCommand(),
            "cp": CopyCommand(),
            "mv": MoveCommand(),
            "rm": DeleteCommand(),
            "os": OsCommand(),
            "hash": HashCommand(),
            "compress": CompressCommand(),
            "decompress": DecompressCommand(),
            ".exit": ExitCommand(),
        }

    def get_available_commands(self) -> List[str]:
        """Get list of available command names."""
        return sorted(self.commands.keys())

    def get_command_help(self, command: str) -> Optional[str]:
        """Get help for a specific command."""
        if command in self.commands:
            return self.commands[command].get_help()
        return None


# Exit command
class ExitCommand(Command):
    """Command to end the session."""

    usage = ".exit"

    def execute(
        self, args: Sequence[str], session: Session, config: FileManagerConfig
    ) -> OperationResult:
        return OperationResult.exit()

    def get_help(self) -> str:
        return "Exit the file manager."
