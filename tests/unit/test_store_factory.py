import pytest

from openlink.storage.store import UrlStore
from openlink.storage.store_factory import get_store


def test_get_store_memory_by_default(monkeypatch):
    monkeypatch.delenv("OPENLINK_STORE_BACKEND", raising=False)
    assert isinstance(get_store(), UrlStore)


def test_get_store_reads_env_lazily(monkeypatch):
    monkeypatch.setenv("OPENLINK_STORE_BACKEND", " Memory ")
    assert isinstance(get_store(), UrlStore)


def test_get_store_explicit_backend_wins(monkeypatch):
    monkeypatch.setenv("OPENLINK_STORE_BACKEND", "nosuch")
    assert isinstance(get_store("memory"), UrlStore)


def test_get_store_passes_kwargs():
    store = get_store("memory", id_generator=lambda: 99)
    assert store.insert("https://example.com/") == 99


def test_get_store_unknown_backend(monkeypatch):
    monkeypatch.setenv("OPENLINK_STORE_BACKEND", "postgres")
    with pytest.raises(ValueError, match="Unknown store backend"):
        get_store()


def test_each_call_returns_a_fresh_store():
    assert get_store("memory") is not get_store("memory")
