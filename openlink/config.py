"""
Runtime configuration for OpenLink
==================================

Simple settings module that reads from environment variables (only here),
and exposes a stable `settings` object for the rest of the codebase.
Avoid reading env vars anywhere else; import from this module instead.

Service
-------
- OPENLINK_BASE_URL      : public origin used to render short URLs
                           (default "http://localhost:8000")
- OPENLINK_LOG_LEVEL     : logging level name (default "INFO")

Storage
-------
- OPENLINK_STORE_BACKEND : "memory" (default, and currently the only backend)
"""

import logging
import os
from typing import Optional


def _get_str(name: str, default: str) -> str:
    raw = os.getenv(name, default).strip()
    return raw or default


class _Settings:
    # -------- Service --------
    BASE_URL: str = _get_str("OPENLINK_BASE_URL", "http://localhost:8000").rstrip("/")
    LOG_LEVEL: str = _get_str("OPENLINK_LOG_LEVEL", "INFO").upper()

    # -------- Storage --------
    STORE_BACKEND: str = _get_str("OPENLINK_STORE_BACKEND", "memory").lower()


settings = _Settings()


def current_store_backend() -> str:
    """Read OPENLINK_STORE_BACKEND at call time so tests can switch it."""
    return _get_str("OPENLINK_STORE_BACKEND", "memory").lower()


def configure_logging(level: Optional[str] = None) -> None:
    """
    Install a basic console handler unless the host process already did.

    uvicorn and pytest both configure the root logger themselves, in which
    case only the `openlink` logger level is adjusted. Unknown level names
    fall back to INFO.
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level_name), int):
        level_name = "INFO"
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=level_name,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    logging.getLogger("openlink").setLevel(level_name)
