"""Built-in command implementations routed by the command proxy."""

from .checksum import HashCommand
from .compression import CompressCommand, DecompressCommand
from .files import (
    AddCommand,
    CatCommand,
    CopyCommand,
    DeleteCommand,
    MoveCommand,
    RenameCommand,
)
from .ls import ListCommand
from .navigation import CdCommand, UpCommand
from .os_info import OsCommand

__all__ = [
    "UpCommand",
    "CdCommand",
    "ListCommand",
    "CatCommand",
    "AddCommand",
    "RenameCommand",
    "CopyCommand",
    "MoveCommand",
    "DeleteCommand",
    "OsCommand",
    "HashCommand",
    "CompressCommand",
    "DecompressCommand",
]
