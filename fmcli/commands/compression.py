"""Brotli compress/decompress commands."""

import logging
from pathlib import Path
from typing import BinaryIO, Sequence

import brotli

from ..command_proxy import Command
from ..config import FileManagerConfig
from ..results import FailureReason, OperationResult
from ..session import Session

logger = logging.getLogger(__name__)

COMPRESSED_SUFFIX = ".br"


def compressed_name(source: Path) -> str:
    return source.name + COMPRESSED_SUFFIX


def decompressed_name(source: Path) -> str:
    """Strip the compression suffix, or the last extension if it is absent."""
    if source.name.endswith(COMPRESSED_SUFFIX):
        return source.name[: -len(COMPRESSED_SUFFIX)]
    return source.stem


def compress_stream(
    source: BinaryIO, target: BinaryIO, chunk_size: int, quality: int = 11
) -> None:
    compressor = brotli.Compressor(quality=quality)
    for chunk in iter(lambda: source.read(chunk_size), b""):
        target.write(compressor.process(chunk))
    target.write(compressor.finish())


def decompress_stream(source: BinaryIO, target: BinaryIO, chunk_size: int) -> None:
    """Inflate a Brotli stream.

    Raises:
        brotli.error: the data is not valid Brotli
        ValueError: the stream ends before the Brotli data is complete
    """
    decompressor = brotli.Decompressor()
    for chunk in iter(lambda: source.read(chunk_size), b""):
        target.write(decompressor.process(chunk))
    if not decompressor.is_finished():
        raise ValueError("Truncated Brotli stream")


def _discard_partial(path: Path) -> None:
    try:
        path.unlink()
    except OSError as e:
        logger.debug("Could not remove partial output %s: %s", path, e)


class CompressCommand(Command):
    """Compress a file into a directory as ``<name>.br``."""

    usage = "compress <source> <destination_dir>"
    min_args = 2
    max_args = 2

    def execute(
        self, args: Sequence[str], session: Session, config: FileManagerConfig
    ) -> OperationResult:
        source = session.resolve(args[0])
        target = session.resolve(args[1]) / compressed_name(source)

        try:
            with open(source, "rb") as src:
                dst = open(target, "wb")
                # A failed open leaves an existing target untouched.
                try:
                    with dst:
                        compress_stream(
                            src, dst, config.chunk_size, config.compression_quality
                        )
                except OSError:
                    _discard_partial(target)
                    raise
        except OSError as e:
            logger.debug("Cannot compress %s to %s: %s", source, target, e)
            return OperationResult.from_os_error(e)

        return OperationResult.success("File compressed successfully.")

    def get_help(self) -> str:
        return """Compress a file with Brotli:
  compress <source> <destination_dir>   - Writes <destination_dir>/<name>.br"""


class DecompressCommand(Command):
    """Decompress a ``.br`` file into a directory, creating it if needed."""

    usage = "decompress <source> <destination_dir>"
    min_args = 2
    max_args = 2

    def execute(
        self, args: Sequence[str], session: Session, config: FileManagerConfig
    ) -> OperationResult:
        source = session.resolve(args[0])
        destination_dir = session.resolve(args[1])
        name = decompressed_name(source)
        target = destination_dir / name

        if not name or target == source:
            return OperationResult.failure(
                FailureReason.SAME_FILE,
                detail=f"Decompressing {source} would overwrite it",
            )

        try:
            with open(source, "rb") as src:
                destination_dir.mkdir(parents=True, exist_ok=True)
                dst = open(target, "wb")
                try:
                    with dst:
                        decompress_stream(src, dst, config.chunk_size)
                except (OSError, ValueError, brotli.error):
                    _discard_partial(target)
                    raise
        except OSError as e:
            logger.debug("Cannot decompress %s to %s: %s", source, target, e)
            return OperationResult.from_os_error(e)
        except (ValueError, brotli.error) as e:
            logger.debug("Corrupt Brotli data in %s: %s", source, e)
            return OperationResult.failure(FailureReason.CORRUPT_DATA, detail=str(e))

        return OperationResult.success("File decompressed successfully.")

    def get_help(self) -> str:
        return """Decompress a Brotli file:
  decompress <source> <destination_dir>   - Strips .br, creates the directory"""
