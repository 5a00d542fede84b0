"""fmcli - interactive command-line file manager.

A read-eval-print loop for navigating directories, inspecting and changing
files (create, rename, copy, move, delete, read, hash, Brotli
compress/decompress) and querying host information. Every command reports a
uniform success/failure result.
"""

from .command_proxy import CommandProxy
from .config import FileManagerConfig
from .main import app
from .results import OperationResult
from .session import Session
from .shell import FileManagerShell

__version__ = "0.1.0"

__all__ = [
    "app",
    "FileManagerConfig",
    "CommandProxy",
    "FileManagerShell",
    "OperationResult",
    "Session",
]
