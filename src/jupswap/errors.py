"""Exceptions raised by the Jupiter client.

Every failed call raises exactly one of the subclasses below; nothing is
retried or suppressed inside the client.
"""

from typing import Optional


class JupiterClientError(Exception):
    """Base class for all Jupiter client errors."""
    pass


class JupiterRequestError(JupiterClientError):
    """The HTTP request could not be completed (DNS, connect, timeout, read)."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class JupiterApiError(JupiterClientError):
    """The server answered with a non-success status code."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Jupiter API returned HTTP {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class JupiterDeserializationError(JupiterClientError):
    """A success response body did not match the expected schema.

    ``body`` always holds the raw response text so schema drift can be
    inspected after the fact.
    """

    def __init__(self, message: str, body: str):
        super().__init__(message)
        self.body = body
