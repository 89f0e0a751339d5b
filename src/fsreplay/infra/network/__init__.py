from __future__ import annotations

"""
Network Communication Infrastructure.

HTTP access to remote transcripts.
"""

from fsreplay.infra.network.transcript_client import fetch_transcript

__all__ = [
    "fetch_transcript",
]
