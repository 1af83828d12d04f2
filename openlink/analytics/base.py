"""
Abstract Base Class for request counters.

Responsibilities:
    - Define required methods for any counter implementation
    - Support easy substitution (e.g., in-memory, external metrics backend)
"""

from abc import ABC, abstractmethod
from typing import Dict

__all__ = ["BaseCounter"]


class BaseCounter(ABC):
    """Abstract base for pluggable per-operation counters."""

    @abstractmethod
    def increment(self, name: str) -> None:  # pragma: no cover
        """
        Count one handled invocation of operation `name`.

        Args:
            name (str): Operation name, e.g. "shorten" or "open".
        """
        raise NotImplementedError

    @abstractmethod
    def snapshot(self) -> Dict[str, int]:  # pragma: no cover
        """
        Return a copy of all counts.

        Returns:
            dict: Mapping of operation name -> invocation count. Names that
                  were never incremented are absent.
        """
        raise NotImplementedError
