"""Tests for the interactive session loop."""

import pytest

from fmcli.config import FileManagerConfig

FAREWELL = "Thank you for using File Manager, tester, goodbye!"


class TestFileManagerShell:
    """Test the FileManagerShell class."""

    def test_welcome_banner(self, make_shell, temp_dir):
        shell, buffer = make_shell([".exit"])

        shell.run()

        lines = buffer.getvalue().splitlines()
        assert lines[0] == "Welcome to the File Manager, tester!"
        assert lines[1] == f"You are currently in {temp_dir}"

    def test_exit_command(self, make_shell, temp_dir):
        shell, buffer = make_shell([".exit", "add after.txt"])

        shell.run()

        assert buffer.getvalue().splitlines()[-1] == FAREWELL
        assert not (temp_dir / "after.txt").exists()
        assert not shell.active

    def test_end_of_input(self, make_shell, temp_dir):
        (temp_dir / "a.txt").write_text("hello")
        shell, buffer = make_shell(["cat a.txt"])

        shell.run()

        lines = buffer.getvalue().splitlines()
        assert lines[-2:] == ["hello", FAREWELL]

    def test_interrupt_while_reading(self, make_shell):
        def read_line(prompt):
            raise KeyboardInterrupt

        shell, buffer = make_shell(read_line)

        shell.run()

        assert buffer.getvalue().splitlines()[-1] == FAREWELL

    def test_interrupt_during_command(self, make_shell, mocker):
        shell, buffer = make_shell(["hash big.iso", "ls"])
        execute = mocker.patch.object(
            shell.proxy, "execute", side_effect=KeyboardInterrupt
        )

        shell.run()

        execute.assert_called_once_with("hash big.iso")
        assert buffer.getvalue().splitlines()[-1] == FAREWELL

    @pytest.mark.parametrize(
        "trigger", [[".exit"], [], "interrupt"], ids=["exit", "eof", "sigint"]
    )
    def test_farewell_printed_once(self, make_shell, trigger):
        if trigger == "interrupt":

            def trigger(prompt):
                raise KeyboardInterrupt

        shell, buffer = make_shell(trigger)

        shell.run()

        assert buffer.getvalue().count(FAREWELL) == 1

    def test_dangling_prompt_is_closed(self, make_shell):
        config = FileManagerConfig(prompt="> ", rich_output=False)
        shell, buffer = make_shell([], config=config)

        shell.run()

        assert buffer.getvalue().endswith(f"\n{FAREWELL}\n")

    def test_unknown_command_keeps_state(self, make_shell, temp_dir):
        shell, buffer = make_shell(["foo", ".exit"])

        shell.run()

        assert "Invalid input." in buffer.getvalue().splitlines()
        assert shell.session.current_directory == temp_dir
        assert shell.session.username == "tester"

    def test_commands_run_in_order(self, make_shell, temp_dir):
        shell, buffer = make_shell(
            ["add a.txt", "ls", "rm a.txt", "ls", "cat a.txt", ".exit"]
        )

        shell.run()

        lines = buffer.getvalue().splitlines()[2:]
        assert lines == [
            "File created successfully.",
            "a.txt",
            "File deleted successfully.",
            "Operation failed.",
            FAREWELL,
        ]

    def test_navigation_is_printed(self, make_shell, temp_dir):
        (temp_dir / "sub").mkdir()
        shell, buffer = make_shell(["cd sub", "cd missing", ".exit"])

        shell.run()

        lines = buffer.getvalue().splitlines()
        assert f"You are currently in {temp_dir / 'sub'}" in lines
        assert "Invalid directory path." in lines
        assert shell.session.current_directory == temp_dir / "sub"

    def test_show_cwd_after_command(self, make_shell, temp_dir):
        config = FileManagerConfig(prompt="", show_cwd_after_command=True)
        shell, buffer = make_shell(["add a.txt", "up", ".exit"], config=config)

        shell.run()

        lines = buffer.getvalue().splitlines()
        assert lines[2:4] == [
            "File created successfully.",
            f"You are currently in {temp_dir}",
        ]
        assert lines[4] == f"You are currently in {temp_dir.parent}"
        assert lines[5] == FAREWELL

    def test_debug_shows_failure_reason(self, make_shell):
        config = FileManagerConfig(prompt="", show_debug=True, rich_output=False)
        shell, buffer = make_shell(["cat ghost.txt", ".exit"], config=config)

        shell.run()

        output = buffer.getvalue()
        assert "Operation failed." in output
        assert "(not_found:" in output

    def test_markup_in_output_is_not_interpreted(self, make_shell, temp_dir):
        (temp_dir / "markup.txt").write_text("[bold]not bold[/bold]\n")
        shell, buffer = make_shell(["cat markup.txt", ".exit"])

        shell.run()

        assert "[bold]not bold[/bold]" in buffer.getvalue().splitlines()

    def test_cat_output_is_byte_faithful(self, make_shell, temp_dir):
        (temp_dir / "t.txt").write_bytes(b"a\tb\r\nc\x0cd\n")
        shell, buffer = make_shell(["cat t.txt", ".exit"])

        shell.run()

        assert "a\tb\r\nc\x0cd\n" in buffer.getvalue()

    def test_failure_is_still_styled(self, make_shell, mocker):
        config = FileManagerConfig(prompt="", rich_output=True)
        shell, buffer = make_shell(["cat ghost.txt", ".exit"], config=config)
        print_spy = mocker.spy(shell.console, "print")

        shell.run()

        assert "Operation failed." in buffer.getvalue().splitlines()
        assert print_spy.call_args_list[0].kwargs["style"] == "bold red"
