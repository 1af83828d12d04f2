from .base import BaseCounter
from .counter import RequestCounter

__all__ = ["BaseCounter", "RequestCounter"]
