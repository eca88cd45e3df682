"""Validation helpers for original URLs and short codes."""

import re
from urllib.parse import urlsplit

from .exceptions import EmptyCodeError, EmptyURLError, InvalidURLError

# RFC 3986 scheme: ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*$")
# Whitespace and ASCII control characters are never legal inside a URI.
_FORBIDDEN_RE = re.compile(r"[\s\x00-\x1f\x7f]")


def validate_original_url(url: str) -> None:
    """
    Check that `url` is a non-empty absolute URL (scheme + host).

    The string is validated as-is; it is not stripped or normalized, because
    the exact input is what the store keys on.

    Raises:
        EmptyURLError: If `url` is empty.
        InvalidURLError: If `url` is not a parseable absolute URL.
    """
    if not url:
        raise EmptyURLError()
    if not isinstance(url, str) or _FORBIDDEN_RE.search(url):
        raise InvalidURLError()

    try:
        parts = urlsplit(url)
        # Accessing .port validates the port component ("host:abc" raises).
        parts.port
    except ValueError as exc:
        raise InvalidURLError() from exc

    if not _SCHEME_RE.match(parts.scheme) or not parts.netloc or not parts.hostname:
        raise InvalidURLError()


def validate_short_code(code: str) -> None:
    """
    Reject an empty code. Unknown-but-nonempty codes are a lookup miss,
    reported by the store itself.
    """
    if not code:
        raise EmptyCodeError()
