from __future__ import annotations

"""
Command Domain Data Models.

Tagged variants describing the instructions found in a terminal transcript.
Consumers dispatch on the concrete variant with isinstance checks.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

# -----------------------------------------------------------------------------
# COMMAND VARIANTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Cd:
    """
    Change-directory instruction.

    Attributes:
        target: Directory name, parent marker or root marker, kept verbatim.
    """
    target: str


@dataclass(frozen=True)
class Ls:
    """List-contents instruction. Takes no arguments."""


CommandKind = Union[Cd, Ls]

# -----------------------------------------------------------------------------
# COMMAND RECORD
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Command:
    """
    A command that was run, together with everything it printed.

    Attributes:
        kind: The parsed instruction.
        output: Raw output lines in transcript order.
        line: 1-based transcript line of the command itself.
        output_lines: 1-based transcript line of each output line, parallel
            to `output`. Empty when the origin of the output is unknown.
    """
    kind: CommandKind
    output: Tuple[str, ...] = field(default_factory=tuple)
    line: Optional[int] = None
    output_lines: Tuple[int, ...] = field(default_factory=tuple)
