from __future__ import annotations

"""
Core replay orchestration.

Coordinates the whole workflow for one transcript:
1. Validates configuration.
2. Lexes the transcript into commands.
3. Replays the commands into a filesystem tree.
4. Computes the size queries and optionally renders the tree.
"""

import logging
from typing import Any, Dict, List, Optional

from fsreplay.core.builder import build_tree
from fsreplay.core.lexer import lex
from fsreplay.core.renderer import render_tree
from fsreplay.core.sizes import prunable_size, total_size
from fsreplay.core.validator import validate_config
from fsreplay.domain.commands import Command
from fsreplay.domain.errors import TranscriptError
from fsreplay.domain.replay_models import (
    ReplayResult,
    create_error_result,
    create_success_result,
)

logger = logging.getLogger(__name__)


def run_replay(text: str, config: Optional[Dict[str, Any]] = None) -> ReplayResult:
    """
    Execute the full lex / build / query pipeline on a transcript.

    Transcript errors never escape this function; they are logged and
    returned as an error result carrying their ErrorKind.

    Args:
        text: Raw transcript text.
        config: The configuration dictionary (raw or partial).

    Returns:
        ReplayResult: Object containing status and query results.
    """
    logger.info("Replay started.")

    # -------------------------------------------------------------------------
    # 1) Config Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    threshold = cfg["prune_threshold"]
    commands: List[Command] = []

    # -------------------------------------------------------------------------
    # 2) Lex & Build
    # -------------------------------------------------------------------------
    try:
        commands = lex(text)
        tree = build_tree(commands, strict=cfg["strict"])
    except TranscriptError as e:
        logger.error(f"Replay failed: {e}")
        return create_error_result(
            str(e),
            error_kind=e.kind.value,
            command_count=len(commands),
            threshold=threshold,
        )

    # -------------------------------------------------------------------------
    # 3) Queries & Rendering
    # -------------------------------------------------------------------------
    total = total_size(tree)
    prunable = prunable_size(tree, threshold=threshold)
    logger.debug(f"Sizes computed: total={total}, prunable={prunable}")

    tree_lines: List[str] = []
    if cfg["render_tree"]:
        tree_lines = render_tree(tree, show_sizes=cfg["show_sizes"])

    logger.info("Replay finished successfully.")
    return create_success_result(
        command_count=len(commands),
        entry_count=len(tree),
        root_name=tree.root.name,
        total_size=total,
        prunable_size=prunable,
        threshold=threshold,
        tree_lines=tree_lines,
    )
