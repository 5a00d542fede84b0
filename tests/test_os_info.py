"""Tests for the os host information command."""

from pathlib import Path
from unittest.mock import MagicMock

from fmcli.commands import os_info


class TestOsCommand:
    """Test the os sub-commands."""

    def test_eol_unix(self, proxy, mocker):
        mocker.patch.object(os_info.os, "linesep", "\n")

        result = proxy.execute("os --EOL")

        assert result.ok
        assert result.output == 'End of line character: "\\n" (LF (Unix))'

    def test_eol_windows(self, proxy, mocker):
        mocker.patch.object(os_info.os, "linesep", "\r\n")

        result = proxy.execute("os --EOL")

        assert result.output == 'End of line character: "\\r\\n" (CRLF (Windows))'

    def test_cpus(self, proxy, mocker):
        mocker.patch.object(os_info.psutil, "cpu_count", return_value=2)
        mocker.patch.object(
            os_info.psutil,
            "cpu_freq",
            return_value=[MagicMock(current=2400.0), MagicMock(current=3100.0)],
        )
        mocker.patch.object(os_info, "_cpu_models", return_value=["Test CPU"] * 2)

        result = proxy.execute("os --cpus")

        assert result.ok
        assert result.output.splitlines() == [
            "Number of CPUs: 2",
            "CPU 1: Test CPU, 2.40 GHz",
            "CPU 2: Test CPU, 3.10 GHz",
        ]

    def test_cpus_without_frequency(self, proxy, mocker):
        mocker.patch.object(os_info.psutil, "cpu_count", return_value=1)
        mocker.patch.object(
            os_info.psutil, "cpu_freq", side_effect=NotImplementedError
        )
        mocker.patch.object(os_info, "_cpu_models", return_value=["Test CPU"])

        result = proxy.execute("os --cpus")

        assert result.ok
        assert result.output.splitlines()[1] == "CPU 1: Test CPU, unknown speed"

    def test_cpus_real_host(self, proxy):
        result = proxy.execute("os --cpus")

        lines = result.output.splitlines()
        assert result.ok
        assert lines[0].startswith("Number of CPUs: ")
        assert len(lines) == int(lines[0].split(": ")[1]) + 1

    def test_homedir(self, proxy):
        result = proxy.execute("os --homedir")
        assert result.output == f"Home directory: {Path.home()}"

    def test_username(self, proxy, mocker):
        mocker.patch.object(os_info.getpass, "getuser", return_value="root")

        result = proxy.execute("os --username")

        assert result.output == "Current username: root"

    def test_username_unknown(self, proxy, mocker):
        mocker.patch.object(os_info.getpass, "getuser", side_effect=OSError("no user"))

        result = proxy.execute("os --username")

        assert result.ok
        assert result.output == "Current username: unknown"

    def test_username_is_not_session_username(self, proxy, mocker):
        mocker.patch.object(os_info.getpass, "getuser", return_value="osuser")
        assert "tester" not in proxy.execute("os --username").output

    def test_architecture(self, proxy, mocker):
        mocker.patch.object(os_info.platform, "machine", return_value="x86_64")

        result = proxy.execute("os --architecture")

        assert result.output == "CPU architecture: x86_64"

    def test_sub_verbs_are_case_sensitive(self, proxy):
        assert not proxy.execute("os --eol").ok
