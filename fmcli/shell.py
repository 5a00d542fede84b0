"""Interactive session loop."""

import logging
from typing import Callable, Optional

from rich.console import Console

from .command_proxy import CommandProxy
from .commands.navigation import current_directory_message
from .config import FileManagerConfig
from .parser import parse_command
from .session import Session
from .ui import console as default_console
from .ui import display_result, emit

logger = logging.getLogger(__name__)

NAVIGATION_VERBS = ("up", "cd")


class FileManagerShell:
    """Reads commands one line at a time until the session ends.

    Each command runs to completion before the next line is read, so output
    always appears in command order and nothing follows the farewell.
    The session ends on ``.exit``, Ctrl-C or end of input.
    """

    def __init__(
        self,
        session: Session,
        config: FileManagerConfig,
        console: Optional[Console] = None,
        read_line: Optional[Callable[[str], str]] = None,
    ):
        self.session = session
        self.config = config
        self.console = console or default_console
        self.read_line = read_line or self.console.input
        self.proxy = CommandProxy(session, config)
        self.active = False

    def welcome(self) -> None:
        emit(f"Welcome to the File Manager, {self.session.username}!", self.console)
        emit(current_directory_message(self.session), self.console)

    def farewell(self) -> None:
        emit(
            f"Thank you for using File Manager, {self.session.username}, goodbye!",
            self.console,
        )

    def handle_line(self, line: str) -> bool:
        """Execute one input line. Returns False once the session should end."""
        result = self.proxy.execute(line)
        if result.terminate:
            return False

        display_result(result, self.config, self.console)

        verb = parse_command(line).verb
        if self.config.show_cwd_after_command and verb not in NAVIGATION_VERBS:
            emit(current_directory_message(self.session), self.console)
        return True

    def run(self) -> None:
        """Drive the session from the welcome banner to the farewell."""
        self.active = True
        self.welcome()
        reading = False
        try:
            while self.active:
                reading = True
                line = self.read_line(self.config.prompt)
                reading = False
                self.active = self.handle_line(line)
        except (EOFError, KeyboardInterrupt) as e:
            logger.debug("Session ended by %s", type(e).__name__)
            if reading and self.config.prompt:
                # Finish the dangling prompt line.
                self.console.print()
        finally:
            self.active = False

        self.farewell()
