from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the replay engine.
"""

import argparse
from typing import Any, Dict

from fsreplay.domain.config import SESSION_ENV_VAR

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the fsreplay CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="fsreplay",
        description=(
            "Rebuild a filesystem tree from a cd/ls terminal transcript "
            "and report directory size aggregates."
        ),
    )

    # --- Transcript Source ---
    source = p.add_mutually_exclusive_group()
    source.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Transcript file to read ('-' for stdin).",
    )
    source.add_argument(
        "--url",
        default=None,
        help="Download the transcript from this URL.",
    )
    source.add_argument(
        "--sample",
        action="store_true",
        help="Use the built-in sample transcript.",
    )
    p.add_argument(
        "--session",
        default=None,
        help=f"Session cookie sent with --url (default: ${SESSION_ENV_VAR}).",
    )

    # --- Replay & Queries ---
    p.add_argument(
        "--threshold",
        type=int,
        default=None,
        help="Inclusive size limit of a prunable directory (default: 100000).",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help="Fail when a directory is listed more than once.",
    )

    # --- Output ---
    p.add_argument(
        "--tree",
        action="store_true",
        help="Print the rebuilt tree.",
    )
    p.add_argument(
        "--no-sizes",
        action="store_true",
        help="Omit sizes from the printed tree.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the result as JSON.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="JSON configuration file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        default=None,
        help="Also write logs to this rotating file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only options the user actually set are returned, so values from a
    config file survive unless overridden on the command line.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.threshold is not None:
        overrides["prune_threshold"] = args.threshold
    if args.strict:
        overrides["strict"] = True
    if args.tree:
        overrides["render_tree"] = True
    if args.no_sizes:
        overrides["show_sizes"] = False

    return overrides
