"""Input line tokenizer."""

from typing import NamedTuple, Tuple


class ParsedCommand(NamedTuple):
    """A verb and its positional arguments."""

    verb: str
    args: Tuple[str, ...]


def parse_command(line: str) -> ParsedCommand:
    """Split a raw input line on whitespace.

    There is no quoting or escaping, so an argument can never contain a space.
    Blank input gives an empty verb.
    """
    parts = line.split()
    if not parts:
        return ParsedCommand("", ())
    return ParsedCommand(parts[0], tuple(parts[1:]))
