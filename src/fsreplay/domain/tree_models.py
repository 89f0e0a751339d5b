from __future__ import annotations

"""
Filesystem Tree Data Models.

The rebuilt tree is stored as an arena: a flat list of entries where each
directory refers to its children by index. Entries never point back at
their parent, so the replay keeps its own stack of ancestors instead.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

ROOT_ID = 0

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Entry:
    """
    A single file or directory of the rebuilt tree.

    Attributes:
        name: Label of the entry, unique among its siblings at most.
        children: Arena ids of the children. None marks a file.
        declared_size: Size reported by `ls`. Only set for files.
    """
    name: str
    children: Optional[List[int]] = None
    declared_size: Optional[int] = None

    def __post_init__(self) -> None:
        if (self.children is None) == (self.declared_size is None):
            raise ValueError(
                f"Entry '{self.name}' must be either a file or a directory."
            )
        if self.declared_size is not None and self.declared_size < 0:
            raise ValueError(f"Entry '{self.name}' has a negative size.")

    @classmethod
    def directory(cls, name: str) -> "Entry":
        return cls(name=name, children=[])

    @classmethod
    def file(cls, name: str, size: int) -> "Entry":
        return cls(name=name, declared_size=size)

    @property
    def is_dir(self) -> bool:
        return self.children is not None


@dataclass
class FileSystemTree:
    """
    Arena holding every entry of one rebuilt filesystem.

    The entry at ROOT_ID is always the root directory. Only the builder
    appends to the arena; once it returns the tree is read-only.
    """
    entries: List[Entry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def root(self) -> Entry:
        return self.entries[ROOT_ID]

    def get(self, entry_id: int) -> Entry:
        return self.entries[entry_id]

    def children_of(self, entry_id: int) -> List[int]:
        """Return the child ids of a directory, or an empty list for a file."""
        return list(self.entries[entry_id].children or [])

    def add(self, entry: Entry) -> int:
        """Append an entry to the arena and return its id."""
        self.entries.append(entry)
        return len(self.entries) - 1

    def walk(self, entry_id: int = ROOT_ID, depth: int = 0) -> Iterator[Tuple[int, int]]:
        """
        Iterate the subtree below an entry in pre-order.

        Uses an explicit stack, so the nesting depth is not bounded by the
        interpreter's recursion limit.

        Yields:
            Tuple[int, int]: (depth, entry_id) pairs, starting with the entry.
        """
        stack = [(depth, entry_id)]
        while stack:
            node_depth, node_id = stack.pop()
            yield node_depth, node_id
            for child_id in reversed(self.children_of(node_id)):
                stack.append((node_depth + 1, child_id))
