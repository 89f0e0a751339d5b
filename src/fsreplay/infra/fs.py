from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Reads transcript text from local files or standard input.
"""

import logging
import os
import sys

from fsreplay.domain.errors import TranscriptSourceError

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


def read_transcript(path: str) -> str:
    """
    Read a transcript from disk, or from stdin when `path` is "-".

    Args:
        path: File location or the stdin marker.

    Returns:
        str: The transcript text.

    Raises:
        TranscriptSourceError: The file does not exist or cannot be read.
    """
    if path == STDIN_MARKER:
        logger.debug("Reading transcript from stdin.")
        return sys.stdin.read()

    if not os.path.isfile(path):
        raise TranscriptSourceError(f"Transcript file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise TranscriptSourceError(f"Failed to read transcript '{path}': {e}") from e

    logger.debug(f"Read {len(text)} characters from {path}")
    return text
