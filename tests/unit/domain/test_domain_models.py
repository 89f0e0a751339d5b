from __future__ import annotations

"""
Unit tests for Domain Models.

Verifies:
1. The file XOR directory invariant of Entry.
2. Arena helpers of FileSystemTree.
3. Error formatting and kinds.
4. ReplayResult factories.
"""

import dataclasses

import pytest

from fsreplay.domain.commands import Cd, Command, Ls
from fsreplay.domain.errors import (
    ErrorKind,
    InvalidRootError,
    MalformedOutputError,
    TranscriptError,
)
from fsreplay.domain.replay_models import create_error_result, create_success_result
from fsreplay.domain.tree_models import ROOT_ID, Entry, FileSystemTree


def test_entry_factories():
    d = Entry.directory("src")
    f = Entry.file("main.py", 12)

    assert d.is_dir and d.children == [] and d.declared_size is None
    assert not f.is_dir and f.children is None and f.declared_size == 12


@pytest.mark.parametrize("kwargs", [
    {"children": None, "declared_size": None},
    {"children": [], "declared_size": 3},
    {"children": None, "declared_size": -1},
])
def test_entry_rejects_invalid_shapes(kwargs):
    with pytest.raises(ValueError):
        Entry(name="bad", **kwargs)


def test_entry_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Entry.file("f", 1).name = "g"


def test_tree_arena_helpers():
    tree = FileSystemTree()
    root_id = tree.add(Entry.directory("/"))
    child_id = tree.add(Entry.file("f", 1))
    tree.get(root_id).children.append(child_id)

    assert root_id == ROOT_ID
    assert len(tree) == 2
    assert tree.root.name == "/"
    assert tree.children_of(ROOT_ID) == [child_id]
    assert tree.children_of(child_id) == []
    assert list(tree.walk()) == [(0, ROOT_ID), (1, child_id)]


def test_command_defaults():
    cmd = Command(kind=Ls())
    assert cmd.output == ()
    assert cmd.line is None
    assert Command(Cd("a")) != Command(Cd("b"))


def test_error_kind_and_message():
    err = MalformedOutputError("bad line", 7)

    assert isinstance(err, TranscriptError)
    assert err.kind is ErrorKind.MALFORMED_OUTPUT
    assert err.line == 7
    assert str(err) == "MalformedOutput (line 7): bad line"
    assert str(InvalidRootError("empty")) == "InvalidRoot: empty"


def test_success_result_factory():
    result = create_success_result(
        command_count=3, entry_count=4, root_name="/",
        total_size=10, prunable_size=5, threshold=100,
    )
    assert result.ok is True
    assert result.tree_lines == []
    assert result.error_kind == ""


def test_error_result_factory():
    result = create_error_result("boom", error_kind="InvalidRoot", threshold=100)
    assert result.ok is False
    assert result.error == "boom"
    assert result.total_size == 0
    assert result.threshold == 100
