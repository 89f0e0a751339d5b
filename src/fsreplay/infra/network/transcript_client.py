from __future__ import annotations

import logging
from typing import Dict, Optional

import requests

from fsreplay.domain.errors import TranscriptSourceError
from fsreplay.infra.network.common import DEFAULT_TIMEOUT, SESSION_COOKIE, USER_AGENT

logger = logging.getLogger(__name__)


def fetch_transcript(
        url: str,
        session_token: Optional[str] = None,
        timeout: int = DEFAULT_TIMEOUT,
) -> str:
    """
    Download a transcript over HTTP(S).

    Puzzle input endpoints such as Advent of Code authenticate with a
    `session` cookie; pass its value as `session_token`.

    Raises:
        TranscriptSourceError: On timeout, connection or HTTP status errors.
    """
    headers = {"User-Agent": USER_AGENT}
    cookies: Dict[str, str] = {}
    if session_token:
        cookies[SESSION_COOKIE] = session_token

    logger.debug(f"Fetching transcript from: {url}")
    try:
        response = requests.get(url, headers=headers, cookies=cookies, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        logger.warning(f"Network: Transcript download timed out after {timeout}s.")
        raise TranscriptSourceError(f"Timed out fetching {url}") from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Network: Communication error fetching transcript: {e}")
        raise TranscriptSourceError(f"Failed to fetch {url}: {e}") from e

    size_kb = len(response.content) / 1024
    logger.info(f"Network: Transcript downloaded ({size_kb:.1f} KB).")
    return response.text
