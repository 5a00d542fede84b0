"""OS command implementation for read-only host information queries."""

import getpass
import logging
import os
import platform
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

import psutil

from ..command_proxy import Command
from ..config import FileManagerConfig
from ..results import INVALID_OS_COMMAND, FailureReason, OperationResult
from ..session import Session

logger = logging.getLogger(__name__)

_EOL_NAMES = {"\r\n": "CRLF (Windows)", "\n": "LF (Unix)"}


def end_of_line_info() -> str:
    eol = os.linesep
    escaped = eol.encode("unicode_escape").decode("ascii")
    return f'End of line character: "{escaped}" ({_EOL_NAMES.get(eol, "Unknown")})'


def _cpu_models(count: int) -> List[str]:
    """Best-effort model name per logical CPU."""
    models: List[str] = []
    cpuinfo = Path("/proc/cpuinfo")
    if cpuinfo.exists():
        try:
            for line in cpuinfo.read_text(encoding="utf-8", errors="replace").splitlines():
                key, _, value = line.partition(":")
                if key.strip() in ("model name", "Model", "cpu model"):
                    models.append(value.strip())
        except OSError as e:
            logger.debug("Cannot read %s: %s", cpuinfo, e)

    fallback = platform.processor() or platform.machine() or "Unknown CPU"
    while len(models) < count:
        models.append(models[-1] if models else fallback)
    return models[:count]


def _cpu_speeds(count: int) -> List[Optional[float]]:
    """Current frequency of each logical CPU in MHz, if the OS reports it."""
    try:
        frequencies = psutil.cpu_freq(percpu=True) or []
    except (OSError, NotImplementedError, AttributeError) as e:
        logger.debug("CPU frequency unavailable: %s", e)
        frequencies = []

    speeds: List[Optional[float]] = [f.current or None for f in frequencies]
    if len(speeds) == 1 and count > 1:
        speeds = speeds * count
    speeds += [None] * (count - len(speeds))
    return speeds[:count]


def cpu_info() -> str:
    count = psutil.cpu_count(logical=True) or os.cpu_count() or 1
    lines = [f"Number of CPUs: {count}"]
    for index, (model, speed) in enumerate(
        zip(_cpu_models(count), _cpu_speeds(count)), start=1
    ):
        speed_text = f"{speed / 1000:.2f} GHz" if speed else "unknown speed"
        lines.append(f"CPU {index}: {model}, {speed_text}")
    return "\n".join(lines)


def home_directory_info() -> str:
    return f"Home directory: {Path.home()}"


def system_username_info() -> str:
    try:
        username = getpass.getuser()
    except (KeyError, OSError) as e:
        logger.debug("Cannot determine OS user: %s", e)
        username = "unknown"
    return f"Current username: {username}"


def architecture_info() -> str:
    return f"CPU architecture: {platform.machine()}"


class OsCommand(Command):
    """Sub-dispatcher for the ``os --<flag>`` queries."""

    usage = "os --EOL|--cpus|--homedir|--username|--architecture"
    min_args = 1
    max_args = 1
    invalid_message = INVALID_OS_COMMAND

    queries: Dict[str, Callable[[], str]] = {
        "--EOL": end_of_line_info,
        "--cpus": cpu_info,
        "--homedir": home_directory_info,
        "--username": system_username_info,
        "--architecture": architecture_info,
    }

    def execute(
        self, args: Sequence[str], session: Session, config: FileManagerConfig
    ) -> OperationResult:
        query = self.queries.get(args[0])
        if query is None:
            return OperationResult.failure(
                FailureReason.UNKNOWN_OS_COMMAND,
                INVALID_OS_COMMAND,
                detail=f"Unknown flag {args[0]}",
            )
        return OperationResult.success(query())

    def get_help(self) -> str:
        return """Show host information:
  os --EOL             - Default end-of-line sequence
  os --cpus            - Logical CPUs with model and clock speed
  os --homedir         - Home directory
  os --username        - Operating system user
  os --architecture    - CPU architecture"""
