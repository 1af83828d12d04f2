"""
Main API module for OpenLink.

Responsibilities:
    - Expose REST endpoints for shortening URLs and opening short links
    - Count every handled request per route for the metrics endpoint
    - Translate domain errors into HTTP status codes (400 / 404)

Architecture:
    - App Factory pattern (create_app) for test isolation and DI.
    - The store and the counter are built once per app and shared by every
      request; tests may inject their own instances.
    - LinkManager owns validation, normalization and short-link rendering.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import RedirectResponse
from pydantic import BaseModel

from openlink.analytics.base import BaseCounter
from openlink.analytics.counter import RequestCounter
from openlink.config import configure_logging, settings
from openlink.exceptions import InvalidURLError, LinkNotFoundError
from openlink.manager.link_manager import LinkManager, parse_link_id
from openlink.storage.base import BaseStore
from openlink.storage.store_factory import get_store


class ShortenRequest(BaseModel):
    """Request payload for creating a new short link."""
    url: str


def create_app(
    store: Optional[BaseStore] = None,
    counter: Optional[BaseCounter] = None,
) -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Args:
        store (Optional[BaseStore]): Shared link store; built from config if omitted.
        counter (Optional[BaseCounter]): Shared request counter; a fresh
            RequestCounter if omitted.

    Returns:
        FastAPI: A fully configured application with its own store and counter.
    """
    configure_logging()
    log = logging.getLogger("openlink")

    app = FastAPI(
        title="OpenLink",
        description="Random-id URL shortener with per-route request counts",
        docs_url="/docs",
    )

    # ----------------------------------------------------------------
    # Per-app instances (isolated for tests, shared by all requests)
    # ----------------------------------------------------------------
    if store is None:
        store = get_store(settings.STORE_BACKEND)
    if counter is None:
        counter = RequestCounter()
    manager = LinkManager(store=store)

    app.state.store = store
    app.state.counter = counter
    app.state.manager = manager

    log.info("OpenLink serving short links under %s", manager.base_url)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    # ----------------------------------------------------------------
    # Routes
    # ----------------------------------------------------------------
    @app.post("/shorten", name="shorten")
    def shorten(req: ShortenRequest) -> Dict[str, Any]:
        """
        Create a short link for a given URL.

        Returns:
            dict: id, id_str, short_url, short_path and the normalized url.
                  id_str carries the id as text for clients whose numbers
                  lose precision above 2**53.

        Raises:
            HTTPException: 400 if the URL is not an absolute http(s) URL.
        """
        try:
            link = manager.shorten(req.url)
        except InvalidURLError:
            log.info("Rejected invalid URL %r", req.url)
            raise HTTPException(status_code=400, detail="Invalid URL")
        finally:
            counter.increment("shorten")

        return {
            "id": link.id,
            "id_str": str(link.id),
            "short_url": manager.short_url(link.id),
            "short_path": manager.short_path(link.id),
            "url": link.url,
        }

    @app.get("/open/{link_id}", name="open")
    def open_link(link_id: str) -> RedirectResponse:
        """
        Redirect (303 See Other) to the URL stored under `link_id`.

        Raises:
            HTTPException: 404 if `link_id` is not a decimal unsigned 64-bit
                integer, or no link uses it.
        """
        try:
            parsed_id = parse_link_id(link_id)
            if parsed_id is None:
                raise LinkNotFoundError(link_id)
            url = manager.resolve(parsed_id)
        except LinkNotFoundError:
            log.info("Unknown link id %r", link_id)
            raise HTTPException(status_code=404, detail="Given link doesn't exist")
        finally:
            counter.increment("open")

        return RedirectResponse(url=url, status_code=303)

    @app.get("/metrics", name="metrics")
    def metrics() -> Dict[str, int]:
        """
        Request counts per route.

        The current request is counted after the snapshot is taken, like a
        response hook would.
        """
        snapshot = counter.snapshot()
        counter.increment("metrics")
        return snapshot

    return app


# `uvicorn main:app --reload` and `from main import app` continue to work.
app = create_app()
