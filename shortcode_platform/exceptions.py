"""
Error taxonomy for the short-code platform.

Two families:
    - InputError: defects in what the caller sent (empty/invalid URL, empty or
      unknown code). Never worth retrying with the same input.
    - RandomnessError: the secure random source failed while minting a code.
      The only fault a caller may reasonably retry.

InputError also derives from ValueError so callers that already catch
ValueError around URL handling keep working.

Example:
    >>> from shortcode_platform.exceptions import NotFoundError
    >>> raise NotFoundError()
    Traceback (most recent call last):
        ...
    shortcode_platform.exceptions.NotFoundError: short URL does not exist
"""


class ShortCodeError(Exception):
    """Base class for every fault raised by the platform."""

    default_message = "short code error"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class InputError(ShortCodeError, ValueError):
    """User input defect; surfaced to the caller as a bad request."""


class EmptyURLError(InputError):
    default_message = "original URL is empty"


class InvalidURLError(InputError):
    default_message = "invalid URL"


class EmptyCodeError(InputError):
    default_message = "short URL is empty"


class NotFoundError(InputError):
    default_message = "short URL does not exist"


class RandomnessError(ShortCodeError, RuntimeError):
    """The cryptographically secure random source is unavailable or failed."""

    default_message = "failed to generate random index for short URL"
