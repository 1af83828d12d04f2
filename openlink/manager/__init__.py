from .link_manager import LinkManager, ShortLink, normalize_url, parse_link_id

__all__ = ["LinkManager", "ShortLink", "normalize_url", "parse_link_id"]
