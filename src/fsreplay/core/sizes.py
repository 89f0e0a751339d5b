from __future__ import annotations

"""
Size Queries.

Pure read-only aggregates over a rebuilt tree. Directory sizes are never
stored; every query recomputes them from the declared file sizes. All
traversals use explicit stacks so arbitrarily deep transcripts are safe.
"""

from typing import Dict, List, Tuple

from fsreplay.domain.constants import DEFAULT_PRUNE_THRESHOLD
from fsreplay.domain.tree_models import ROOT_ID, FileSystemTree


def subtree_sizes(tree: FileSystemTree, entry_id: int = ROOT_ID) -> Dict[int, int]:
    """
    Compute the total size of every entry below (and including) an entry.

    Walks the subtree in pre-order and accumulates sizes in reverse, so
    each child is settled before its parent.

    Returns:
        Dict[int, int]: entry_id -> total size.
    """
    order = [node_id for _, node_id in tree.walk(entry_id)]
    sizes: Dict[int, int] = {}
    for node_id in reversed(order):
        entry = tree.get(node_id)
        if entry.children is None:
            sizes[node_id] = entry.declared_size or 0
        else:
            sizes[node_id] = sum(sizes[c] for c in entry.children)
    return sizes


def total_size(tree: FileSystemTree, entry_id: int = ROOT_ID) -> int:
    """
    Size on disk of an entry.

    Files report their declared size, directories the sum of their children.
    """
    return subtree_sizes(tree, entry_id)[entry_id]


def prunable_size(
        tree: FileSystemTree,
        entry_id: int = ROOT_ID,
        threshold: int = DEFAULT_PRUNE_THRESHOLD,
) -> int:
    """
    Sum the sizes of small directories below an entry.

    Every child directory whose total size is at most `threshold` adds its
    own size plus its own prunable size, so content nested in small
    directories is counted once per enclosing small directory.
    Files are never candidates, and a small directory below a large one is
    never reached.

    Args:
        tree: Rebuilt filesystem.
        entry_id: Directory to start from. Files yield 0.
        threshold: Inclusive upper bound on a candidate's total size.

    Returns:
        int: The aggregated size.
    """
    if not tree.get(entry_id).is_dir:
        return 0

    sizes = subtree_sizes(tree, entry_id)
    result = 0
    # Every small directory reached through a chain of small directories
    # adds its own size once; its ancestors already include it in theirs
    pending = tree.children_of(entry_id)
    while pending:
        child_id = pending.pop()
        if not tree.get(child_id).is_dir or sizes[child_id] > threshold:
            continue
        result += sizes[child_id]
        pending.extend(tree.children_of(child_id))
    return result


def directory_sizes(tree: FileSystemTree, entry_id: int = ROOT_ID) -> List[Tuple[int, int]]:
    """Return (entry_id, total_size) for every directory in pre-order."""
    sizes = subtree_sizes(tree, entry_id)
    return [
        (node_id, sizes[node_id])
        for _, node_id in tree.walk(entry_id)
        if tree.get(node_id).is_dir
    ]
