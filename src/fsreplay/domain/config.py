from __future__ import annotations

"""
Configuration Domain Management.

Dict-based runtime configuration of the replay engine. Values come from the
built-in defaults, an optional JSON file and finally CLI overrides.
"""

import json
import logging
import os
from typing import Any, Dict

from fsreplay.domain.constants import DEFAULT_PRUNE_THRESHOLD

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_REQUEST_TIMEOUT = 10
SESSION_ENV_VAR = "FSREPLAY_SESSION"


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Queries
        "prune_threshold": DEFAULT_PRUNE_THRESHOLD,

        # Replay
        "strict": False,

        # Rendering
        "render_tree": False,
        "show_sizes": True,

        # Sourcing
        "request_timeout": DEFAULT_REQUEST_TIMEOUT,
    }


def load_config(path: str) -> Dict[str, Any]:
    """
    Load a JSON configuration file and merge it over the defaults.

    Falls back to the defaults when the file is missing, unreadable or does
    not contain a JSON object.

    Args:
        path: Location of the JSON file.

    Returns:
        Dict[str, Any]: Merged configuration (not yet validated).
    """
    config = get_default_config()
    if not path or not os.path.exists(path):
        logger.warning(f"Config file not found: {path}. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Failed to read config file '{path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Config file '{path}' is not a JSON object. Using defaults.")
        return config

    config.update(data)
    logger.debug(f"Configuration loaded from {path}")
    return config
