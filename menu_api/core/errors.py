# menu_api/core/errors.py
"""
Error kinds raised while proxying the restaurant website.

Every error carries the HTTP status the API layer answers with, so route
handlers can translate them without knowing which layer raised them.
"""


class MenuApiError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FetchError(MenuApiError):
    """Upstream request failed (transport error or non-2xx status)."""

    status_code = 502

    def __init__(self, url: str, reason: str = ""):
        message = f"Failed to fetch {url}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.url = url
        self.reason = reason


class ParseError(MenuApiError):
    """The HTML parser itself gave up on a document."""


class ServiceError(MenuApiError):
    """A menu operation failed; the message names what was being fetched."""


class ValidationError(MenuApiError):
    status_code = 400
