from .base import BaseStore
from .store import MAX_LINK_ID, UrlStore
from .store_factory import get_store

__all__ = ["BaseStore", "MAX_LINK_ID", "UrlStore", "get_store"]
