"""
LinkManager module for OpenLink.

Responsibilities:
    - Validate submitted URLs (absolute http/https with a host)
    - Normalize them once, before they reach the store
    - Allocate identifiers through the injected store
    - Render identifiers as short paths and short URLs

Normalization rule (applied once, at insertion):
    - scheme and host are lowercased
    - the default port is dropped (80 for http, 443 for https)
    - an empty path becomes "/" and repeated slashes collapse; a trailing
      slash is kept
    - empty query segments ("a=1&&b=2") are dropped, an empty query removed
    - fragments, characters outside RFC 3986 and malformed %-escapes are
      rejected; userinfo and non-default ports are kept

    "https://Example.COM:443"       -> "https://example.com/"
    "http://example.com//a//b/?x=1" -> "http://example.com/a/b/?x=1"
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

from ..config import settings
from ..exceptions import InvalidURLError
from ..storage.base import BaseStore
from ..storage.store import MAX_LINK_ID

log = logging.getLogger("openlink.manager")

DEFAULT_PORTS = {"http": 80, "https": 443}

OPEN_PATH_PREFIX = "/open/"

# RFC 3986 unreserved + reserved characters, plus "%" for escapes.
_URI_CHARS = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]*")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_LINK_ID = re.compile(r"[0-9]{1,20}")


@dataclass(frozen=True)
class ShortLink:
    """An allocated identifier together with the normalized URL it maps to."""
    id: int
    url: str


def normalize_url(raw: str) -> str:
    """
    Validate `raw` and return its normalized form.

    Raises:
        InvalidURLError: If the URL is not an absolute http(s) URL with a host,
            carries a fragment, contains characters not allowed in a URI,
            or has an unparsable port.
    """
    candidate = raw.strip()
    if not candidate or "#" in candidate:
        raise InvalidURLError("Invalid URL")
    if not _URI_CHARS.fullmatch(candidate) or _BAD_ESCAPE.search(candidate):
        raise InvalidURLError("Invalid URL")

    try:
        parts = urlsplit(candidate)
        port = parts.port
    except ValueError as exc:
        raise InvalidURLError("Invalid URL") from exc

    scheme = parts.scheme.lower()
    host = parts.hostname
    if scheme not in DEFAULT_PORTS or not host:
        raise InvalidURLError("Invalid URL")

    if ":" in host:
        host = f"[{host}]"  # IPv6 literal
    userinfo, _, _ = parts.netloc.rpartition("@")
    netloc = f"{userinfo}@{host}" if userinfo else host
    if port is not None and port != DEFAULT_PORTS[scheme]:
        netloc = f"{netloc}:{port}"

    segments = [seg for seg in parts.path.split("/") if seg]
    path = "/" + "/".join(segments)
    if segments and parts.path.endswith("/"):
        path += "/"
    query = "&".join(seg for seg in parts.query.split("&") if seg)

    return urlunsplit((scheme, netloc, path, query, ""))


def parse_link_id(raw: str) -> Optional[int]:
    """Parse a decimal unsigned 64-bit id from a path segment; None if it is not one."""
    if not _LINK_ID.fullmatch(raw):
        return None
    value = int(raw)
    return value if value <= MAX_LINK_ID else None


class LinkManager:
    """
    Coordinates URL normalization, storage and short-link rendering.

    The store is an injected dependency; the manager holds no state of its own.
    """

    def __init__(self, store: BaseStore, base_url: Optional[str] = None):
        """
        Args:
            store (BaseStore): Shared link store.
            base_url (Optional[str]): Public origin for short URLs;
                defaults to settings.BASE_URL.
        """
        self.store = store
        self.base_url = (base_url or settings.BASE_URL).rstrip("/")

    def shorten(self, raw_url: str) -> ShortLink:
        """
        Normalize `raw_url` and store it under a new identifier.

        Raises:
            InvalidURLError: If the URL fails validation. Nothing is stored.
        """
        url = normalize_url(raw_url)
        link_id = self.store.insert(url)
        log.info("Shortened %s as %d", url, link_id)
        return ShortLink(id=link_id, url=url)

    def resolve(self, link_id: int) -> str:
        """
        Return the stored URL for `link_id`.

        Raises:
            LinkNotFoundError: Propagated from the store for unknown ids.
        """
        return self.store.lookup(link_id)

    def short_path(self, link_id: int) -> str:
        return f"{OPEN_PATH_PREFIX}{link_id}"

    def short_url(self, link_id: int) -> str:
        return f"{self.base_url}{self.short_path(link_id)}"
