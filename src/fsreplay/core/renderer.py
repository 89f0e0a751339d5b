from __future__ import annotations

"""
Tree Renderer.

Converts a rebuilt FileSystemTree into a visual ASCII representation,
annotating each entry with its size.
"""

from typing import Dict, List, Optional, Tuple

from fsreplay.core.sizes import subtree_sizes
from fsreplay.domain.tree_models import ROOT_ID, FileSystemTree

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(
        tree: FileSystemTree,
        entry_id: int = ROOT_ID,
        show_sizes: bool = True,
) -> List[str]:
    """
    Render the subtree below an entry as lines of text.

    The entry itself is the first line; its descendants follow with the
    standard connectors (├──, └──) in insertion order.

    Args:
        tree: Rebuilt filesystem.
        entry_id: Entry to render from.
        show_sizes: Append declared or computed sizes to each line.

    Returns:
        List[str]: Visual lines of the tree.
    """
    sizes = subtree_sizes(tree, entry_id) if show_sizes else None
    lines = [_label(tree, entry_id, sizes)]

    # (entry_id, prefix, is_last), popped in display order
    stack: List[Tuple[int, str, bool]] = _child_frames(tree, entry_id, "")
    while stack:
        node_id, prefix, is_last = stack.pop()
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{_label(tree, node_id, sizes)}")

        if tree.get(node_id).is_dir:
            new_prefix = prefix + ("    " if is_last else "│   ")
            stack.extend(_child_frames(tree, node_id, new_prefix))
    return lines


# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _child_frames(tree: FileSystemTree, entry_id: int, prefix: str) -> List[Tuple[int, str, bool]]:
    """Stack frames for the children of an entry, last child at the bottom."""
    children = tree.children_of(entry_id)
    last = len(children) - 1
    return [(child_id, prefix, i == last) for i, child_id in reversed(list(enumerate(children)))]


def _label(tree: FileSystemTree, entry_id: int, sizes: Optional[Dict[int, int]]) -> str:
    entry = tree.get(entry_id)
    size = sizes[entry_id] if sizes is not None else None

    if entry.is_dir:
        # The root marker already reads as a directory
        name = entry.name if entry.name.endswith("/") else f"{entry.name}/"
        return name if size is None else f"{name} (dir, size={size})"
    return entry.name if size is None else f"{entry.name} (file, size={size})"
