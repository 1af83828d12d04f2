"""
Store factory: pick the link store backend from config
======================================================

Centralizes backend selection so the app factory stays ignorant of where
links live.

- Reads the environment at call time to avoid stale values in tests.
- "memory" is the only backend; state is lost on restart.

Environment variables
---------------------
- OPENLINK_STORE_BACKEND: "memory" (default)
"""

import logging
from typing import Optional

from openlink.config import current_store_backend
from openlink.storage.base import BaseStore
from openlink.storage.store import UrlStore

log = logging.getLogger("openlink.storage")


def get_store(backend: Optional[str] = None, **kwargs) -> BaseStore:
    """
    Return a store instance based on configuration.

    Parameters
    ----------
    backend : str, optional
        "memory" (default). If omitted, reads OPENLINK_STORE_BACKEND.
    kwargs : dict
        Extra args passed to the backend constructor
        (e.g. id_generator=... for UrlStore).

    Raises
    ------
    ValueError
        For an unknown backend name.
    """
    be = (backend or current_store_backend()).strip().lower()
    log.info("Selected store backend: %r", be)

    if be == "memory":
        return UrlStore(**kwargs)

    raise ValueError(f"Unknown store backend: {be!r}")
