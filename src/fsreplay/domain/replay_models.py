from __future__ import annotations

"""
Replay Domain Data Models.

Defines the result object handed from the replay engine to the interface
layer, together with the factories that build its success and error forms.
"""

from dataclasses import dataclass, field
from typing import List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ReplayResult:
    """
    Outcome of a complete lex / build / query run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        error_kind: ErrorKind value of the failure, empty on success.
        command_count: Number of commands produced by the lexer.
        entry_count: Number of entries in the rebuilt tree.
        root_name: Name given to the root by the first `cd`.
        total_size: Size of the whole tree.
        prunable_size: Sum of small directory sizes under the threshold.
        threshold: Inclusive threshold used for the prunable query.
        tree_lines: Rendered tree, when rendering was requested.
    """
    ok: bool
    error: str = ""
    error_kind: str = ""

    command_count: int = 0
    entry_count: int = 0
    root_name: str = ""

    total_size: int = 0
    prunable_size: int = 0
    threshold: int = 0

    tree_lines: List[str] = field(default_factory=list)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_success_result(
        command_count: int,
        entry_count: int,
        root_name: str,
        total_size: int,
        prunable_size: int,
        threshold: int,
        tree_lines: Optional[List[str]] = None,
) -> ReplayResult:
    """Create a successful replay result."""
    return ReplayResult(
        ok=True,
        command_count=command_count,
        entry_count=entry_count,
        root_name=root_name,
        total_size=total_size,
        prunable_size=prunable_size,
        threshold=threshold,
        tree_lines=tree_lines or [],
    )


def create_error_result(
        error: str,
        error_kind: str = "",
        command_count: int = 0,
        threshold: int = 0,
) -> ReplayResult:
    """
    Create a failed replay result.

    Args:
        error: Detailed error description.
        error_kind: ErrorKind value identifying the failure category.
        command_count: Commands lexed before the failure, if lexing succeeded.
        threshold: Threshold the run was configured with.

    Returns:
        ReplayResult: An immutable error result object.
    """
    return ReplayResult(
        ok=False,
        error=error,
        error_kind=error_kind,
        command_count=command_count,
        threshold=threshold,
    )
