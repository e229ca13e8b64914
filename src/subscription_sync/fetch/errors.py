from __future__ import annotations

"""Errors raised by row sources."""

__all__ = [
    "UpstreamUnavailable",
]

DEFAULT_FETCH_ERROR = "Failed to fetch subscriptions"


class UpstreamUnavailable(Exception):
    """The row source could not deliver a usable row collection.

    Raised for transport failures, a falsy success flag, or a payload that is
    not a list of rows. Per-row problems never raise this.
    """

    def __init__(self, message: str = DEFAULT_FETCH_ERROR, *, source: str = "") -> None:
        super().__init__(message)
        self.source = source
