"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from graphwalk.graph import Graph, build_sample_graph, build_weighted_sample_graph


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def sample_graph() -> Graph:
    """A-E graph: A-B, A-C, B-D, C-E, D-E, B-C, all weight 1."""
    return build_sample_graph()


@pytest.fixture
def weighted_graph() -> Graph:
    """A-E graph with A-B=5, B-D=1, A-C=1, C-E=1, E-D=1."""
    return build_weighted_sample_graph()


@pytest.fixture
def two_component_graph() -> Graph:
    """Triangle X-Y-Z plus a separate edge P-Q and an isolated vertex R."""
    return Graph.from_edges(
        [("X", "Y"), ("Y", "Z"), ("Z", "X"), ("P", "Q")],
        vertices=["X", "Y", "Z", "P", "Q", "R"],
        seed=7,
    )


@pytest.fixture
def random_graphs() -> list[Graph]:
    """Small deterministic pseudo-random weighted graphs for property checks."""
    import random

    graphs = []
    for seed in range(12):
        rng = random.Random(seed)
        count = rng.randint(2, 7)
        vertices = [f"v{i}" for i in range(count)]
        edges = []
        for _ in range(rng.randint(0, count * 2)):
            u, v = rng.choice(vertices), rng.choice(vertices)
            edges.append((u, v, rng.randint(0, 9)))
        graphs.append(Graph.from_edges(edges, vertices=vertices, seed=seed))
    return graphs
