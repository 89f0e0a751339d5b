from __future__ import annotations

"""
Transcript Lexer.

Splits a raw terminal transcript into Command records. A line starting
with the command delimiter opens a new command and every following line
up to the next command line is collected as that command's output.
"""

import logging
from typing import List, Optional

from fsreplay.domain.commands import Cd, Command, CommandKind, Ls
from fsreplay.domain.constants import CD, CMD_DELIMITER, LS, NEWLINE
from fsreplay.domain.errors import InvalidCommandError, MissingArgumentError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def lex(text: str) -> List[Command]:
    """
    Convert transcript text into an ordered list of commands.

    Lines before the first command line belong to no command and are
    skipped, so empty or blank input yields an empty list.

    Args:
        text: Transcript with lines separated by a single newline.

    Returns:
        List[Command]: Commands in transcript order.

    Raises:
        MissingArgumentError: A command line lacks a required token.
        InvalidCommandError: A command other than `cd` or `ls` was found.
    """
    lines = [line.rstrip("\r") for line in text.split(NEWLINE)]
    commands: List[Command] = []

    idx = 0
    while idx < len(lines) and not lines[idx].startswith(CMD_DELIMITER):
        idx += 1

    while idx < len(lines):
        line_no = idx + 1
        kind = parse_command_line(lines[idx], line_no)
        idx += 1

        output: List[str] = []
        output_lines: List[int] = []
        while idx < len(lines) and not lines[idx].startswith(CMD_DELIMITER):
            if lines[idx].strip():
                output.append(lines[idx])
                output_lines.append(idx + 1)
            idx += 1

        commands.append(Command(
            kind=kind,
            output=tuple(output),
            line=line_no,
            output_lines=tuple(output_lines),
        ))

    logger.debug(f"Lexed {len(commands)} command(s) from {len(lines)} line(s).")
    return commands


def parse_command_line(line: str, line_no: Optional[int] = None) -> CommandKind:
    """
    Parse a single delimiter-prefixed line into a command variant.

    Args:
        line: The raw command line, e.g. "$ cd a".
        line_no: 1-based line number used in error reports.

    Returns:
        CommandKind: Cd with its verbatim target, or Ls.
    """
    tokens = line[len(CMD_DELIMITER):].split()
    if not tokens:
        raise MissingArgumentError("Command line has no command.", line_no)

    name = tokens[0]
    if name == CD:
        if len(tokens) < 2:
            raise MissingArgumentError("`cd` requires a target directory.", line_no)
        return Cd(target=tokens[1])
    if name == LS:
        return Ls()

    raise InvalidCommandError(f"Unknown command '{name}'.", line_no)
