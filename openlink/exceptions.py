"""
Domain exceptions for OpenLink.

The store and the link manager raise these; the HTTP layer in `main.py`
translates them into status codes:
    - LinkNotFoundError -> 404
    - InvalidURLError   -> 400
"""


class OpenLinkError(Exception):
    """Base class for all OpenLink errors."""


class LinkNotFoundError(OpenLinkError, KeyError):
    """Raised by a store lookup when the identifier is not a key."""

    def __init__(self, link_id: int):
        super().__init__(link_id)
        self.link_id = link_id

    def __str__(self) -> str:
        return f"No link stored under id {self.link_id}"


class InvalidURLError(OpenLinkError, ValueError):
    """Raised when a submitted URL is not an absolute http(s) URL."""
