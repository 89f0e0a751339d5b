from __future__ import annotations

"""
Filesystem Tree Builder.

Replays a lexed command sequence depth-first to rebuild the filesystem it
describes. The replay keeps a stack of arena ids, one per depth level, so
`cd ..` can return to the previous directory without parent references on
the entries themselves.

Input contract: every directory is listed at most once per transcript and
every `cd` into a name targets a direct child of the current directory.
The builder does not merge repeated listings or look up existing children;
each `cd` creates a fresh directory entry. Pass `strict=True` to reject a
second `ls` of the same directory instead of duplicating its children.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Sequence, Set

from fsreplay.domain.commands import Cd, Command, Ls
from fsreplay.domain.constants import PARENT_DIR
from fsreplay.domain.errors import (
    InvalidOperationError,
    InvalidRootError,
    MalformedOutputError,
)
from fsreplay.domain.tree_models import ROOT_ID, Entry, FileSystemTree

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(commands: Iterable[Command], *, strict: bool = False) -> FileSystemTree:
    """
    Rebuild the filesystem tree described by a command sequence.

    Args:
        commands: Commands as produced by the lexer. Consumed once.
        strict: Reject repeated listings of the same directory.

    Returns:
        FileSystemTree: The rebuilt tree, root at ROOT_ID.

    Raises:
        InvalidRootError: The sequence is empty or does not start with `cd`.
        InvalidOperationError: `cd ..` above the root, a child added to a
            file, or a repeated listing in strict mode.
        MalformedOutputError: An `ls` output line cannot be parsed.
    """
    it = iter(commands)
    first = next(it, None)
    if first is None:
        raise InvalidRootError("Transcript contains no commands.")
    if not isinstance(first.kind, Cd):
        raise InvalidRootError("First command must be `cd`.", first.line)

    builder = TreeBuilder(first.kind.target, strict=strict)
    for command in it:
        builder.apply(command)

    tree = builder.finish()
    logger.info(f"Rebuilt tree '{tree.root.name}' with {len(tree)} entries.")
    return tree


# -----------------------------------------------------------------------------
# REPLAY STATE
# -----------------------------------------------------------------------------

class TreeBuilder:
    """
    Mutable replay state for a single tree construction.

    Attributes:
        tree: Arena under construction.
        stack: Arena ids of the current directory chain, root first.
    """

    def __init__(self, root_name: str, *, strict: bool = False) -> None:
        self.tree = FileSystemTree()
        self.tree.add(Entry.directory(root_name))
        self.stack: List[int] = [ROOT_ID]
        self.strict = strict
        self._listed: Set[int] = set()
        self._finished = False

    @property
    def depth(self) -> int:
        return len(self.stack) - 1

    @property
    def current(self) -> int:
        return self.stack[-1]

    def apply(self, command: Command) -> None:
        """Replay one command against the current position."""
        if self._finished:
            raise RuntimeError("Tree construction already finished.")

        kind = command.kind
        if isinstance(kind, Cd):
            self._change_directory(kind.target, command.line)
        elif isinstance(kind, Ls):
            self._list(command)
        else:
            raise TypeError(f"Unsupported command kind: {type(kind).__name__}")

    def finish(self) -> FileSystemTree:
        """Close the replay and hand out the finished tree."""
        self._finished = True
        return self.tree

    # -------------------------------------------------------------------------
    # Command handlers
    # -------------------------------------------------------------------------

    def _change_directory(self, target: str, line: Optional[int]) -> None:
        if target == PARENT_DIR:
            if self.depth == 0:
                raise InvalidOperationError(
                    "Attempted to move up from the root directory.", line
                )
            self.stack.pop()
            logger.debug(f"cd .. -> depth {self.depth}")
            return

        new_id = self._append_child(Entry.directory(target), line)
        self.stack.append(new_id)
        logger.debug(f"cd {target} -> depth {self.depth}")

    def _list(self, command: Command) -> None:
        line = command.line
        if self.strict and self.current in self._listed:
            name = self.tree.get(self.current).name
            raise InvalidOperationError(f"Directory '{name}' listed twice.", line)
        self._listed.add(self.current)

        for entry in _parse_listing(command.output, command.output_lines, line):
            self._append_child(entry, line)

    def _append_child(self, entry: Entry, line: Optional[int]) -> int:
        parent = self.tree.get(self.current)
        if parent.children is None:
            raise InvalidOperationError(
                f"Cannot add '{entry.name}' to file '{parent.name}'.", line
            )
        child_id = self.tree.add(entry)
        parent.children.append(child_id)
        return child_id


# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _parse_listing(
        output: Sequence[str],
        output_lines: Sequence[int],
        line: Optional[int],
) -> Iterator[Entry]:
    """
    Turn `ls` output lines into file entries and directory placeholders.

    Errors report the transcript line of the offending output line. When
    the per-line numbers are missing they are inferred from the command
    line, which is only exact if no blank lines were skipped.
    """
    for offset, raw in enumerate(output, start=1):
        tokens = raw.split()
        if len(tokens) < 2:
            raise MalformedOutputError(
                f"Expected '<size|dir> <name>', got '{raw.strip()}'.",
                _output_line(output_lines, offset, line),
            )

        size_token, name = tokens[0], tokens[1]
        if size_token.isascii() and size_token.isdigit():
            yield Entry.file(name, int(size_token))
        else:
            yield Entry.directory(name)


def _output_line(output_lines: Sequence[int], offset: int, line: Optional[int]) -> Optional[int]:
    if offset <= len(output_lines):
        return output_lines[offset - 1]
    return line + offset if line is not None else None
