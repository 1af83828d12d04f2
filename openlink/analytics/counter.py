"""
Request counter for OpenLink.

Responsibilities:
    - Count handled requests per operation name
    - Serve a consistent copy of the counts for the metrics endpoint

Attributes:
    _counts (Dict[str, int]): Maps operation name -> invocation count
"""

import threading
from typing import Dict

from .base import BaseCounter


class RequestCounter(BaseCounter):
    def __init__(self):
        """Start with no names; each name appears on its first increment."""
        self._counts: Dict[str, int] = {}
        self._lock = threading.Lock()

    def increment(self, name: str) -> None:
        with self._lock:
            self._counts[name] = self._counts.get(name, 0) + 1

    def snapshot(self) -> Dict[str, int]:
        """
        Copy the counts under the lock.

        Increments that finished before the call are all reflected; ones
        racing with it may or may not be.
        """
        with self._lock:
            return dict(self._counts)
