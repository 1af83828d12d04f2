"""
Coverage for the abstract BaseStore and BaseCounter contracts.

Concrete subclasses call into the abstract bodies via super(), which
must raise NotImplementedError.
"""

import pytest

from openlink.analytics.base import BaseCounter
from openlink.storage.base import BaseStore


class _DelegatingStore(BaseStore):
    def insert(self, url: str) -> int:
        return super().insert(url)

    def lookup(self, link_id: int) -> str:
        return super().lookup(link_id)


class _DelegatingCounter(BaseCounter):
    def increment(self, name: str) -> None:
        return super().increment(name)

    def snapshot(self) -> dict:
        return super().snapshot()


def test_base_store_methods_raise_not_implemented():
    instance = _DelegatingStore()
    with pytest.raises(NotImplementedError):
        instance.insert("https://example.com/")
    with pytest.raises(NotImplementedError):
        instance.lookup(1)


def test_base_counter_methods_raise_not_implemented():
    instance = _DelegatingCounter()
    with pytest.raises(NotImplementedError):
        instance.increment("open")
    with pytest.raises(NotImplementedError):
        instance.snapshot()


def test_base_classes_cannot_be_instantiated():
    with pytest.raises(TypeError):
        BaseStore()
    with pytest.raises(TypeError):
        BaseCounter()
