"""
Base store interface for OpenLink.

Purpose:
    Define the small contract every link store implements: allocate an
    identifier for a URL, and resolve an identifier back to its URL.
    Business logic (LinkManager) and routes only depend on this contract.

Testing & Coverage:
    These are abstract methods and are not executed directly in tests.
    We annotate them with `# pragma: no cover`.
"""

from abc import ABC, abstractmethod


class BaseStore(ABC):
    """Abstract base class for link stores."""

    @abstractmethod  # pragma: no cover
    def insert(self, url: str) -> int:
        """
        Store `url` under a freshly allocated identifier.

        Args:
            url (str): Already validated and normalized target URL.

        Returns:
            int: The new identifier, unique among all stored links.
        """
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def lookup(self, link_id: int) -> str:
        """
        Return the URL stored under `link_id`.

        Raises:
            LinkNotFoundError: If no link uses this identifier.
        """
        raise NotImplementedError
