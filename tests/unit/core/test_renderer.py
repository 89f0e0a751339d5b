from __future__ import annotations

"""
Unit tests for the Tree Renderer.
"""

from fsreplay.core.builder import build_tree
from fsreplay.core.lexer import lex
from fsreplay.core.renderer import render_tree

TRANSCRIPT = "$ cd /\n$ ls\ndir a\n10 b\n$ cd a\n$ ls\n5 c"


def test_render_with_sizes():
    lines = render_tree(build_tree(lex(TRANSCRIPT)))

    assert lines == [
        "/ (dir, size=15)",
        "├── a/ (dir, size=0)",
        "├── b (file, size=10)",
        "└── a/ (dir, size=5)",
        "    └── c (file, size=5)",
    ]


def test_render_without_sizes():
    lines = render_tree(build_tree(lex(TRANSCRIPT)), show_sizes=False)
    assert lines == ["/", "├── a/", "├── b", "└── a/", "    └── c"]


def test_render_nested_prefix_keeps_vertical_bar():
    tree = build_tree(lex("$ cd root\n$ cd x\n$ ls\n1 f\n$ cd ..\n$ ls\n2 g"))
    lines = render_tree(tree, show_sizes=False)

    assert lines == ["root/", "├── x/", "│   └── f", "└── g"]


def test_render_deep_chain():
    cds = "".join(f"$ cd d{i}\n" for i in range(2500))
    lines = render_tree(build_tree(lex(f"$ cd /\n{cds}$ ls\n5 leaf")))

    assert len(lines) == 2502
    assert lines[1] == "└── d0/ (dir, size=5)"
    assert lines[-1] == " " * (4 * 2500) + "└── leaf (file, size=5)"
