"""
Sample graphs used by the CLI, the web app and the tests.

Both samples share the five-vertex A-E layout of the classroom demo.
"""

from __future__ import annotations

from typing import Callable

from graphwalk.graph.model import Graph, Position

SAMPLE_POSITIONS = {
    "A": Position(150, 100),
    "B": Position(300, 50),
    "C": Position(300, 150),
    "D": Position(450, 50),
    "E": Position(450, 150),
}


def build_sample_graph() -> Graph:
    """
    Unweighted A-E graph.

    Edges in insertion order: A-B, A-C, B-D, C-E, D-E, B-C.
    """
    graph = Graph()
    for vertex, position in SAMPLE_POSITIONS.items():
        graph.add_vertex(vertex, position)

    graph.add_edge("A", "B")
    graph.add_edge("A", "C")
    graph.add_edge("B", "D")
    graph.add_edge("C", "E")
    graph.add_edge("D", "E")
    graph.add_edge("B", "C")  # extra edge for a more interesting traversal
    return graph


def build_weighted_sample_graph() -> Graph:
    """A-E graph where the cheapest A->D route (A, C, E, D = 3) beats the shortest one (A, B, D = 6)."""
    return Graph.from_edges(
        [
            ("A", "B", 5),
            ("B", "D", 1),
            ("A", "C", 1),
            ("C", "E", 1),
            ("E", "D", 1),
        ],
        vertices=SAMPLE_POSITIONS,
        positions=SAMPLE_POSITIONS,
    )


SAMPLES: dict[str, Callable[[], Graph]] = {
    "sample": build_sample_graph,
    "weighted": build_weighted_sample_graph,
}


def get_sample(name: str) -> Graph:
    """
    Build a sample graph by name.

    Raises:
        ValueError: If the sample name is unknown
    """
    if name not in SAMPLES:
        available = ", ".join(SAMPLES.keys())
        raise ValueError(f"Unknown sample '{name}'. Available: {available}")
    return SAMPLES[name]()
