"""Test configuration for pytest."""

import io
import os
import shutil
import tempfile
from pathlib import Path

import pytest
from rich.console import Console

from fmcli.command_proxy import CommandProxy
from fmcli.config import FileManagerConfig
from fmcli.session import Session
from fmcli.shell import FileManagerShell


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp()).resolve()
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def sample_config():
    """Create a sample configuration for testing."""
    return FileManagerConfig(
        prompt="",
        rich_output=False,
        show_debug=False,
        chunk_size=4,  # Small blocks so streamed paths loop more than once
    )


@pytest.fixture
def session(temp_dir):
    """A session for user 'tester' rooted in the temporary directory."""
    return Session("tester", temp_dir)


@pytest.fixture
def proxy(session, sample_config):
    return CommandProxy(session, sample_config)


def scripted_input(lines):
    """Build a read_line callable that replays ``lines`` then signals EOF."""
    remaining = iter(lines)

    def read_line(prompt: str) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError

    return read_line


@pytest.fixture
def make_shell(session, sample_config):
    """Factory for a shell fed from a list of lines, writing to a buffer."""

    def factory(lines, config=None):
        buffer = io.StringIO()
        console = Console(file=buffer, color_system=None, width=200)
        shell = FileManagerShell(
            session,
            config or sample_config,
            console=console,
            read_line=lines if callable(lines) else scripted_input(lines),
        )
        return shell, buffer

    return factory


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Keep the developer's FMCLI_* settings out of the tests."""
    for key in list(os.environ):
        if key.startswith("FMCLI_"):
            monkeypatch.delenv(key, raising=False)
    yield
