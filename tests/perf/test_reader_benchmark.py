"""Performance sentinels (gated)."""

import pytest

from maasapi.api import read_machines

MAX_HUNDRED_MACHINES_MS = 250.0


def _assert_budget(benchmark, max_ms: float) -> None:
    mean_ms = benchmark.stats.stats.mean * 1000.0
    assert mean_ms < max_ms, f"Mean {mean_ms:.2f} ms exceeded budget {max_ms:.2f} ms"


@pytest.mark.perf
def test_hundred_machines_sentinel(benchmark, fixture):
    source = [fixture("machine") for _ in range(100)]
    machines = benchmark.pedantic(lambda: read_machines("2.0", source), rounds=3, iterations=1)

    assert len(machines) == 100
    assert machines[99].interface(49).links[0].subnet.id == 3

    _assert_budget(benchmark, MAX_HUNDRED_MACHINES_MS)
