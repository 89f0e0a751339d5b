from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults, JSON file, CLI overrides), transcript sourcing, replay execution
and result rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from fsreplay.core.engine import run_replay
from fsreplay.core.validator import validate_config
from fsreplay.domain.config import SESSION_ENV_VAR, get_default_config, load_config
from fsreplay.domain.constants import SAMPLE_TRANSCRIPT
from fsreplay.domain.errors import TranscriptSourceError
from fsreplay.domain.replay_models import ReplayResult
from fsreplay.infra.fs import read_transcript
from fsreplay.infra.logging import LoggingConfig, configure_logging, get_logger
from fsreplay.infra.network import fetch_transcript
from fsreplay.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_REPLAY_ERROR = 1
EXIT_USAGE_ERROR = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 3. Configuration hierarchy
    base_conf = load_config(args.config_path) if args.config_path else get_default_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 4. Transcript sourcing
    try:
        text = _load_transcript(args, clean_conf)
    except TranscriptSourceError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    if text is None:
        parser.print_usage(sys.stderr)
        print("ERROR: one of -i/--input, --url or --sample is required.", file=sys.stderr)
        return EXIT_USAGE_ERROR

    # 5. Replay execution
    try:
        result = run_replay(text, clean_conf)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED

    # 6. Output rendering
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return EXIT_OK if result.ok else EXIT_REPLAY_ERROR

# -----------------------------------------------------------------------------
# INPUT & CONFIGURATION
# -----------------------------------------------------------------------------

def _load_transcript(args: Any, cfg: Dict[str, Any]) -> Optional[str]:
    """Resolve the transcript text from the selected source, if any."""
    if args.sample:
        return SAMPLE_TRANSCRIPT
    if args.url:
        token = args.session or os.environ.get(SESSION_ENV_VAR)
        return fetch_transcript(args.url, session_token=token, timeout=cfg["request_timeout"])
    if args.input_path:
        return read_transcript(args.input_path)
    return None


def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of non-None override values into the base configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: ReplayResult) -> None:
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    for line in result.tree_lines:
        print(line)
    if result.tree_lines:
        print()

    print(f"Total size: {result.total_size}")
    print(f"Prunable size (<= {result.threshold}): {result.prunable_size}")


if __name__ == "__main__":
    sys.exit(main())
