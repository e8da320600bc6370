"""Pytest configuration for tests.

No sys.path hacks - tests should import from the installed maasapi package.
"""

import copy
import json
from pathlib import Path

import pytest

FIXTURES = Path(__file__).resolve().parent / "fixtures"

_cache = {}


def pytest_addoption(parser):
    """Add gated perf test option."""
    parser.addoption(
        "--run-perf",
        action="store_true",
        default=False,
        help="Run performance sentinel benchmarks (gated)."
    )


def pytest_collection_modifyitems(config, items):
    """Skip perf-marked tests unless --run-perf is set."""
    if config.getoption("--run-perf"):
        return
    skip_perf = pytest.mark.skip(reason="perf tests gated; pass --run-perf")
    for item in items:
        if "perf" in item.keywords:
            item.add_marker(skip_perf)


def load_fixture(name):
    """Decoded JSON for ``tests/fixtures/<name>.json``; a fresh copy per call."""
    if name not in _cache:
        with open(FIXTURES / f"{name}.json", "r", encoding="utf-8") as f:
            _cache[name] = json.load(f)
    return copy.deepcopy(_cache[name])


@pytest.fixture
def fixture():
    """Loader for JSON response fixtures, so tests can mutate what they get."""
    return load_fixture


@pytest.fixture
def machine_source():
    return load_fixture("machine")


@pytest.fixture
def device_source():
    return load_fixture("device")
