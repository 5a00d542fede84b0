"""Per-run session state: who is using the file manager and where they are."""

import errno
import os
from pathlib import Path
from typing import Optional, Union


class Session:
    """Holds the session username and the current working directory.

    The process working directory is never changed; every relative path a
    command receives is resolved against ``current_directory`` instead.
    """

    def __init__(
        self,
        username: str,
        current_directory: Optional[Union[str, Path]] = None,
    ):
        if not username or not username.strip():
            raise ValueError("Username must not be empty")

        self._username = username
        self._current_directory = Path.cwd()
        if current_directory is not None:
            self.change_directory(Path(os.path.abspath(current_directory)))

    @property
    def username(self) -> str:
        return self._username

    @property
    def current_directory(self) -> Path:
        return self._current_directory

    def resolve(self, raw_path: Union[str, Path]) -> Path:
        """Resolve a user-supplied path against the current directory."""
        # Lexical only, symlinks are left as typed.
        return Path(os.path.normpath(os.path.join(self._current_directory, raw_path)))

    def change_directory(self, target: Path) -> None:
        """Move to ``target``, which must be an enterable, readable directory.

        Raises:
            FileNotFoundError: target does not exist
            NotADirectoryError: target is not a directory
            PermissionError: target cannot be listed or entered
        """
        target = Path(target)
        if not target.exists():
            raise FileNotFoundError(errno.ENOENT, "No such directory", str(target))
        if not target.is_dir():
            raise NotADirectoryError(errno.ENOTDIR, "Not a directory", str(target))
        if not os.access(target, os.R_OK | os.X_OK):
            raise PermissionError(errno.EACCES, "Permission denied", str(target))

        self._current_directory = target
