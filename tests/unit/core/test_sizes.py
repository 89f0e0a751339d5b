from __future__ import annotations

"""
Unit tests for the Size Queries.

Verifies:
1. The canonical scenario totals.
2. Structural size invariants for every entry.
3. The inclusive prunable threshold and nested small directories.
"""

import pytest

from fsreplay.core.builder import build_tree
from fsreplay.core.lexer import lex
from fsreplay.core.sizes import directory_sizes, prunable_size, total_size


@pytest.fixture
def sample_tree(sample_transcript):
    return build_tree(lex(sample_transcript))


def _single_dir_tree(size: int):
    return build_tree(lex(f"$ cd /\n$ cd small\n$ ls\n{size} blob"))


def test_canonical_totals(sample_tree):
    assert total_size(sample_tree) == 48381165
    assert prunable_size(sample_tree) == 95437


def test_queries_are_idempotent(sample_tree):
    first = (total_size(sample_tree), prunable_size(sample_tree))
    second = (total_size(sample_tree), prunable_size(sample_tree))
    assert first == second


def test_directory_size_is_sum_of_children(sample_tree):
    for _, entry_id in sample_tree.walk():
        entry = sample_tree.get(entry_id)
        if entry.is_dir:
            expected = sum(total_size(sample_tree, c) for c in entry.children)
            assert total_size(sample_tree, entry_id) == expected
        else:
            assert total_size(sample_tree, entry_id) == entry.declared_size


def test_subdirectory_sizes(sample_tree):
    sizes = {sample_tree.get(i).name: s for i, s in directory_sizes(sample_tree) if s}
    assert sizes == {"/": 48381165, "a": 94853, "e": 584, "d": 24933642}


def test_threshold_is_inclusive():
    assert prunable_size(_single_dir_tree(100000)) == 100000
    assert prunable_size(_single_dir_tree(100001)) == 0


def test_nested_small_directories_count_twice(nested_small_transcript):
    tree = build_tree(lex(nested_small_transcript))

    assert total_size(tree) == 200150
    # outer (150) plus inner (50) again through outer's own prunable size
    assert prunable_size(tree) == 200


def test_small_directory_inside_large_one_is_not_reached():
    tree = build_tree(lex("$ cd /\n$ cd big\n$ ls\n200000 f\n$ cd small\n$ ls\n10 g"))
    assert prunable_size(tree) == 0


def test_custom_threshold(sample_tree):
    # `a` (94853) is the only small top-level directory with content
    assert prunable_size(sample_tree, threshold=94853) == 95437
    assert prunable_size(sample_tree, threshold=94852) == 0


def test_prunable_size_of_file_is_zero(sample_tree):
    file_id = next(
        i for _, i in sample_tree.walk() if not sample_tree.get(i).is_dir
    )
    assert prunable_size(sample_tree, file_id) == 0


def _deep_chain_transcript(depth: int) -> str:
    cds = "".join(f"$ cd d{i}\n" for i in range(depth))
    return f"$ cd /\n{cds}$ ls\n5 leaf"


def test_deep_chain_does_not_exhaust_the_stack():
    tree = build_tree(lex(_deep_chain_transcript(2500)))

    assert len(list(tree.walk())) == 2502
    assert total_size(tree) == 5
    # every directory of the chain holds the single leaf and is small
    assert prunable_size(tree) == 2500 * 5
    assert len(directory_sizes(tree)) == 2501
    assert all(size == 5 for _, size in directory_sizes(tree))
