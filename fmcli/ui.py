"""Shared UI helpers for console output and logging."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import FileManagerConfig, LogLevel
from .results import OperationResult

# Shared console instance so prompts and command output coordinate correctly.
console = Console()

_LOG_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


def setup_logging(config: FileManagerConfig) -> logging.Logger:
    """Route the ``fmcli`` logger hierarchy to stderr through Rich."""
    logger = logging.getLogger("fmcli")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=config.show_debug,
    )
    logger.addHandler(handler)
    logger.setLevel(_LOG_LEVELS[config.log_level])
    logger.propagate = False
    return logger


def emit(text: str, out: Console = console, style: Optional[str] = None) -> None:
    """Print one block of text followed by a newline if it lacks one.

    Unstyled text is written straight to the console's file so tabs, carriage
    returns and other control bytes reach the terminal untouched. Styled text
    goes through Rich with markup, emoji and highlighting disabled.
    """
    end = "" if text.endswith("\n") else "\n"
    if style is None:
        out.file.write(text + end)
        out.file.flush()
        return

    out.print(
        text,
        style=style,
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
        end=end,
    )


def display_result(
    result: OperationResult, config: FileManagerConfig, out: Console = console
):
    """Display an operation result with appropriate formatting."""
    if result.output:
        if result.ok or not config.rich_output:
            emit(result.output, out)
        else:
            emit(result.output, out, style="bold red")

    if not result.ok and config.show_debug and result.reason is not None:
        reason = result.reason.value
        if result.detail:
            reason = f"{reason}: {result.detail}"
        emit(f"  ({reason})", out, style="dim" if config.rich_output else None)
