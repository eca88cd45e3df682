"""
NFR: creation throughput and latency

How to run (opt-in):
    RUN_NFR=1 pytest tests/nfr/test_perf_create.py -vv
Optional thresholds:
    NFR_TARGET_CREATE_QPS=1000     # assert create QPS >= 1000 (example)
    NFR_TARGET_CREATE_P95_MS=5     # assert p95 latency per create <= 5 ms

Notes:
    - Uses a fresh in-memory store for deterministic measurements.
    - Does not assert unless env vars are set.
"""

import os
import statistics
import time

import pytest

from shortcode_platform.storage.storage import MappingStore

pytestmark = pytest.mark.nfr


def _should_run():
    return os.getenv("RUN_NFR") == "1"


@pytest.mark.skipif(not _should_run(), reason="NFR tests are opt-in; set RUN_NFR=1 to enable")
def test_create_throughput_and_latency(capsys):
    store = MappingStore()

    n = 5000
    latencies_ms = []

    t0 = time.perf_counter()
    for i in range(n):
        url = f"https://example.com/resource/{i}"
        s = time.perf_counter()
        code = store.save(url)
        e = time.perf_counter()
        assert code
        latencies_ms.append((e - s) * 1000.0)
    t1 = time.perf_counter()

    total_s = t1 - t0
    qps = n / total_s
    p95 = statistics.quantiles(latencies_ms, n=100)[94]

    qps_target = os.getenv("NFR_TARGET_CREATE_QPS")
    p95_target_ms = os.getenv("NFR_TARGET_CREATE_P95_MS")

    if qps_target:
        assert qps >= float(qps_target), f"Create QPS {qps:.1f} < target {qps_target}"
    if p95_target_ms:
        assert p95 <= float(p95_target_ms), f"Create p95 {p95:.3f} ms > target {p95_target_ms} ms"

    with capsys.disabled():
        print(f"\n[NFR] create: n={n} total={total_s:.3f}s qps={qps:.1f} p95={p95:.3f}ms")


@pytest.mark.skipif(not _should_run(), reason="NFR tests are opt-in; set RUN_NFR=1 to enable")
def test_redirect_throughput_over_http(capsys):
    from fastapi.testclient import TestClient
    from main import create_app

    store = MappingStore()
    codes = [store.save(f"https://example.com/r/{i}") for i in range(200)]
    client = TestClient(create_app(store=store))

    n = 2000
    t0 = time.perf_counter()
    for i in range(n):
        r = client.get(f"/{codes[i % len(codes)]}", follow_redirects=False)
        assert r.status_code == 307
    total_s = time.perf_counter() - t0

    with capsys.disabled():
        print(f"\n[NFR] redirect: n={n} total={total_s:.3f}s rps={n / total_s:.1f}")
