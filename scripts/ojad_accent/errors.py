"""Exceptions raised while collecting OJAD accent data."""

from typing import Optional


class OJADError(Exception):
    """Base class for collector errors."""


class FetchError(OJADError):
    """A page request failed (non-success status or network error).

    Aborts the batch for the category being scraped.
    """

    def __init__(self, url: str, status: Optional[int] = None, reason: str = ""):
        self.url = url
        self.status = status
        self.reason = reason
        status_part = f"HTTP {status}" if status is not None else "network error"
        message = f"Failed to fetch {url} ({status_part})"
        if reason:
            message += f": {reason}"
        super().__init__(message)
