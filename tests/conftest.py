"""Pytest configuration and shared fixtures for densegraph tests.

This module provides:
- A deterministic numpy RNG fixture
- A random graph factory for brute-force property tests
- A fixture that restores debug mode and log levels after each test
"""

import logging
import os
from typing import Callable, Iterator

import numpy as np
import pytest

from densegraph import DirectedGraph, UndirectedGraph
from densegraph.diagnostics import set_debug_enabled
from densegraph.logging import configure_logging


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def reset_global_state() -> Iterator[None]:
    """Run every test with debug mode on and restore defaults afterwards."""
    set_debug_enabled(True)
    yield
    set_debug_enabled(False)
    configure_logging(level=logging.WARNING)


@pytest.fixture
def random_graph(rng: np.random.Generator) -> Callable[..., object]:
    """Factory for random graphs.

    Call as ``random_graph(n, density, directed=False, connected=False,
    low=1.0, high=10.0)``. Weights are drawn uniformly from [low, high).
    With ``connected=True`` (undirected only) a random spanning path is
    added first so the result is always connected.
    """

    def make(
        n: int,
        density: float = 0.5,
        directed: bool = False,
        connected: bool = False,
        low: float = 1.0,
        high: float = 10.0,
        loops: bool = False,
    ):
        graph = DirectedGraph(n) if directed else UndirectedGraph(n)
        for i in range(n):
            graph.add_vertex(chr(ord("A") + i))

        if connected and n > 1:
            perm = rng.permutation(n)
            for u, v in zip(perm, perm[1:]):
                graph.add_edge(int(u), int(v), float(rng.uniform(low, high)))

        for u in range(n):
            for v in range(n):
                if u == v and not loops:
                    continue
                if not directed and v < u:
                    continue
                if rng.random() < density:
                    graph.add_edge(u, v, float(rng.uniform(low, high)))
        return graph

    return make
