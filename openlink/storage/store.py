"""
Store module for OpenLink (in-memory implementation).

Responsibilities:
    - Allocate uniformly random 64-bit identifiers, retrying on collision
    - Keep the identifier -> URL mapping for the lifetime of the process
    - Resolve identifiers back to URLs

Design:
    - One `threading.Lock` guards the dict. The draw, membership check and
      insertion in `insert` all happen under it, so two concurrent inserts
      can never claim the same identifier.
    - Entries are never updated or removed.
    - The identifier source is injectable so tests can force collisions.
"""

import logging
import random
import threading
from typing import Callable, Dict, Optional

from ..exceptions import LinkNotFoundError
from .base import BaseStore

log = logging.getLogger("openlink.storage")

MAX_LINK_ID = 2**64 - 1

IdGenerator = Callable[[], int]  # () -> uniformly random id in [0, MAX_LINK_ID]

_rng = random.SystemRandom()


def random_link_id() -> int:
    """Draw a uniformly random unsigned 64-bit identifier."""
    return _rng.getrandbits(64)


class UrlStore(BaseStore):
    def __init__(self, id_generator: Optional[IdGenerator] = None):
        """
        Initialize an empty store.

        Internal schema:
            self._links = {link_id: url}
        """
        self._links: Dict[int, str] = {}
        self._lock = threading.Lock()
        self._draw_id = id_generator or random_link_id

    def insert(self, url: str) -> int:
        """
        Store `url` under a new random identifier and return it.

        The collision loop runs while the lock is held. With 2**64 possible
        keys a retry is practically never needed.
        """
        with self._lock:
            link_id = self._draw_id()
            while link_id in self._links:
                log.warning("Identifier collision on %d, drawing again", link_id)
                link_id = self._draw_id()
            self._links[link_id] = url
        log.debug("Stored link %d -> %s", link_id, url)
        return link_id

    def lookup(self, link_id: int) -> str:
        """
        Return the stored URL for `link_id`.

        Raises:
            LinkNotFoundError: If the identifier was never allocated here.
        """
        with self._lock:
            url = self._links.get(link_id)
        if url is None:
            raise LinkNotFoundError(link_id)
        return url

    def __len__(self) -> int:
        with self._lock:
            return len(self._links)

    def __contains__(self, link_id: object) -> bool:
        with self._lock:
            return link_id in self._links
