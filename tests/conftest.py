from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared transcript fixtures used across unit and integration tests.
"""

import os
import sys

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from fsreplay.domain.constants import SAMPLE_TRANSCRIPT  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_transcript() -> str:
    """The canonical session: total size 48381165, prunable size 95437."""
    return SAMPLE_TRANSCRIPT


@pytest.fixture
def nested_small_transcript() -> str:
    """
    Return a transcript with a small directory nested inside another.

    Structure:
    /
      top.bin (200000)
      outer/
        a.txt (100)
        inner/
          b.txt (50)
    """
    return "\n".join([
        "$ cd /",
        "$ ls",
        "200000 top.bin",
        "dir outer",
        "$ cd outer",
        "$ ls",
        "100 a.txt",
        "dir inner",
        "$ cd inner",
        "$ ls",
        "50 b.txt",
    ])
