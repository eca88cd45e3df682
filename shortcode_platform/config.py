"""
Runtime configuration for the Short-code Platform
=================================================

Simple settings module that reads from environment variables (only here),
and exposes a stable `settings` object for the rest of the codebase.
Avoid reading env vars anywhere else; import from this module instead.
The storage factory is the one exception: it re-reads the backend lazily
so tests can flip it with monkeypatch.

Storage
-------
- SHORTCODE_STORAGE_BACKEND : "memory" (default, and the only backend)

Short codes
-----------
- SHORTCODE_CODE_LENGTH     : int length; default 8; clamped to [4, 32]

HTTP surface
------------
- SHORTCODE_SCHEME          : scheme used when building returned short URLs (default "http")
- SHORTCODE_LOG_LEVEL       : root log level when the app sets up logging (default "INFO")
"""

import os

CODE_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
DEFAULT_CODE_LENGTH = 8


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


class _Settings:
    # -------- Storage --------
    STORAGE_BACKEND: str = os.getenv("SHORTCODE_STORAGE_BACKEND", "memory").strip().lower()

    # -------- Short-code generation --------
    _len_raw = _get_int("SHORTCODE_CODE_LENGTH", DEFAULT_CODE_LENGTH)
    CODE_LENGTH: int = max(4, min(32, _len_raw))

    # -------- HTTP surface --------
    SCHEME: str = os.getenv("SHORTCODE_SCHEME", "http").strip().lower() or "http"
    LOG_LEVEL: str = os.getenv("SHORTCODE_LOG_LEVEL", "INFO").strip().upper() or "INFO"


settings = _Settings()
