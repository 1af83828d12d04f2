"""
NFR: shorten/open throughput through the store and manager

How to run (opt-in):
    RUN_NFR=1 pytest tests/nfr/test_perf_open.py -vv
Optional thresholds:
    NFR_TARGET_OPEN_QPS=50000     # assert resolve QPS >= target
    NFR_TARGET_OPEN_P95_MS=1      # assert p95 latency per resolve <= target

Notes:
    - Uses in-memory components directly; no HTTP stack.
    - Prints metrics; asserts only when thresholds are set.
"""

import os
import statistics
import time

import pytest

from openlink.manager.link_manager import LinkManager
from openlink.storage.store import UrlStore

pytestmark = pytest.mark.nfr


def _should_run():
    return os.getenv("RUN_NFR") == "1"


@pytest.mark.skipif(not _should_run(), reason="NFR tests are opt-in; set RUN_NFR=1 to enable")
def test_open_throughput_and_latency(capsys):
    manager = LinkManager(store=UrlStore(), base_url="http://short.test")

    n = 5000
    links = [manager.shorten(f"https://example.com/resource/{i}") for i in range(n)]

    latencies_ms = []
    t0 = time.perf_counter()
    for link in links:
        s = time.perf_counter()
        assert manager.resolve(link.id) == link.url
        latencies_ms.append((time.perf_counter() - s) * 1000.0)
    total_s = time.perf_counter() - t0

    qps = n / total_s
    p95 = statistics.quantiles(latencies_ms, n=100)[94]

    qps_target = os.getenv("NFR_TARGET_OPEN_QPS")
    p95_target_ms = os.getenv("NFR_TARGET_OPEN_P95_MS")
    if qps_target:
        assert qps >= float(qps_target), f"Open QPS {qps:.1f} < target {qps_target}"
    if p95_target_ms:
        assert p95 <= float(p95_target_ms), f"Open p95 {p95:.3f}ms > target {p95_target_ms}ms"

    with capsys.disabled():
        print(f"\nOpen N={n} -> total {total_s:.3f}s, QPS={qps:.1f}, p95={p95:.3f}ms", flush=True)


@pytest.mark.skipif(not _should_run(), reason="NFR tests are opt-in; set RUN_NFR=1 to enable")
def test_shorten_throughput(capsys):
    store = UrlStore()
    manager = LinkManager(store=store, base_url="http://short.test")

    n = 20000
    t0 = time.perf_counter()
    for i in range(n):
        manager.shorten(f"https://example.com/resource/{i}")
    total_s = time.perf_counter() - t0

    assert len(store) == n
    with capsys.disabled():
        print(f"\nShorten N={n} -> total {total_s:.3f}s, QPS={n / total_s:.1f}", flush=True)
