"""Common test fixtures and utilities."""
import pytest

from vmafgraph import VmafOptions

THREADS = 8


@pytest.fixture
def threads(mocker):
    """Pin the detected CPU count so default n_threads is predictable."""
    mocker.patch("vmafgraph.core.lavfi.available_parallelism", return_value=THREADS)
    return THREADS


@pytest.fixture
def options():
    """Options with explicit n_threads, as most graph tests use."""
    return VmafOptions(vmaf_args=["n_threads=5", "n_subsample=4"])
