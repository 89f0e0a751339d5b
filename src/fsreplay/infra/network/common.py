from __future__ import annotations

USER_AGENT = "fsreplay-client/0.1.0"
DEFAULT_TIMEOUT = 10
SESSION_COOKIE = "session"
