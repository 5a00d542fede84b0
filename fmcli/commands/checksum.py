"""Hash command implementation for SHA-256 file digests."""

import hashlib
import logging
from pathlib import Path
from typing import Sequence

from ..command_proxy import Command
from ..config import FileManagerConfig
from ..results import OperationResult
from ..session import Session

logger = logging.getLogger(__name__)


def sha256_file(path: Path, chunk_size: int = 64 * 1024) -> str:
    """Stream a file through SHA-256 and return the lowercase hex digest."""
    digest = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            digest.update(chunk)
    return digest.hexdigest()


class HashCommand(Command):
    """Print the SHA-256 digest of a file."""

    usage = "hash <path>"
    min_args = 1
    max_args = 1

    def execute(
        self, args: Sequence[str], session: Session, config: FileManagerConfig
    ) -> OperationResult:
        path = session.resolve(args[0])
        try:
            hex_digest = sha256_file(path, config.chunk_size)
        except OSError as e:
            # Covers errors raised mid-stream as well as on open.
            logger.debug("Cannot hash %s: %s", path, e)
            return OperationResult.from_os_error(e)

        return OperationResult.success(f"Hash for file {args[0]}: {hex_digest}")

    def get_help(self) -> str:
        return "Print the SHA-256 hex digest of a file: hash <path>"
