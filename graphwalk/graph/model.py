"""
Weighted undirected graph with vertex positions and per-vertex traversal state.

The graph keeps no rendering fields (colours, highlights). Traversals write
only `visited`, `distance` and `predecessor`; renderers derive everything
else from the recorded steps.
"""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass

from graphwalk.config import CANVAS_HEIGHT, CANVAS_MARGIN, CANVAS_WIDTH, DEFAULT_WEIGHT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Position:
    """Canvas coordinates of a vertex."""

    x: float
    y: float


@dataclass(frozen=True)
class Edge:
    """
    One undirected edge, recorded once per add_edge() call.

    Attributes:
        source: First endpoint as given to add_edge()
        target: Second endpoint as given to add_edge()
        weight: Edge weight (non-negative for Dijkstra)
    """

    source: Hashable
    target: Hashable
    weight: float


@dataclass
class VertexState:
    """
    Mutable per-vertex state written by traversals.

    Attributes:
        id: Vertex identifier
        position: Canvas position
        visited: Whether the last traversal processed this vertex
        distance: Best known distance (BFS level or Dijkstra cost)
        predecessor: Vertex this one was reached from, if any
    """

    id: Hashable
    position: Position
    visited: bool = False
    distance: float = math.inf
    predecessor: Hashable | None = None

    def reset(self) -> None:
        """Restore the defaults; position is kept."""
        self.visited = False
        self.distance = math.inf
        self.predecessor = None


class Graph:
    """
    Mutable weighted undirected graph.

    Adjacency lists keep neighbor insertion order, which decides traversal
    tie-breaks. Self-loops and parallel edges are stored as given.
    """

    def __init__(
        self,
        seed: int | None = None,
        width: float = CANVAS_WIDTH,
        height: float = CANVAS_HEIGHT,
    ) -> None:
        """
        Initialize an empty graph.

        Args:
            seed: Random seed for default vertex positions
            width: Canvas width used for default positions
            height: Canvas height used for default positions
        """
        self._rng = random.Random(seed)
        self._width = width
        self._height = height
        self.adjacency: dict[Hashable, list[tuple[Hashable, float]]] = {}
        self.vertices: dict[Hashable, VertexState] = {}
        self.edges: list[Edge] = []

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple],
        vertices: Iterable[Hashable] | None = None,
        positions: dict[Hashable, Position | tuple[float, float]] | None = None,
        seed: int | None = None,
    ) -> Graph:
        """
        Build a graph from (u, v) or (u, v, weight) tuples.

        When `vertices` is given only those are created and edges touching
        anything else are dropped, exactly like add_edge(). Otherwise the
        vertices are taken from the edge endpoints in order of appearance.
        """
        edges = list(edges)
        positions = positions or {}
        graph = cls(seed=seed)

        if vertices is None:
            vertices = []
            for edge in edges:
                vertices.extend(edge[:2])

        for vertex in vertices:
            position = positions.get(vertex)
            if position is not None and not isinstance(position, Position):
                position = Position(*position)
            graph.add_vertex(vertex, position)

        for edge in edges:
            graph.add_edge(*edge)

        return graph

    def _random_position(self) -> Position:
        return Position(
            x=self._rng.random() * (self._width - 2 * CANVAS_MARGIN) + CANVAS_MARGIN,
            y=self._rng.random() * (self._height - 2 * CANVAS_MARGIN) + CANVAS_MARGIN,
        )

    def add_vertex(self, vertex: Hashable, position: Position | None = None) -> None:
        """
        Add a vertex. Existing vertices are left untouched.

        Raises:
            ValueError: If vertex is None, which marks "no predecessor" and "no end"
        """
        if vertex is None:
            raise ValueError("None cannot be used as a vertex id")

        if vertex in self.adjacency:
            return

        self.adjacency[vertex] = []
        self.vertices[vertex] = VertexState(
            id=vertex,
            position=position or self._random_position(),
        )

    def add_edge(self, u: Hashable, v: Hashable, weight: float = DEFAULT_WEIGHT) -> None:
        """
        Add an undirected edge between two existing vertices.

        Silently ignored if either endpoint was never added.
        """
        if u not in self.adjacency or v not in self.adjacency:
            logger.debug(f"Ignoring edge {u!r}-{v!r}: unknown endpoint")
            return

        self.adjacency[u].append((v, weight))
        self.adjacency[v].append((u, weight))
        self.edges.append(Edge(source=u, target=v, weight=weight))

    def reset(self) -> None:
        """Clear traversal state on every vertex."""
        for state in self.vertices.values():
            state.reset()

    def has_vertex(self, vertex: Hashable) -> bool:
        return vertex in self.adjacency

    def vertex(self, vertex: Hashable) -> VertexState:
        """Return the state of a vertex. Raises KeyError if unknown."""
        return self.vertices[vertex]

    def neighbors(self, vertex: Hashable) -> list[tuple[Hashable, float]]:
        """(neighbor, weight) pairs in insertion order; empty for unknown vertices."""
        return list(self.adjacency.get(vertex, ()))

    def weight(self, u: Hashable, v: Hashable) -> float | None:
        """Weight of the lightest edge between u and v, or None."""
        weights = [w for neighbor, w in self.adjacency.get(u, ()) if neighbor == v]
        return min(weights) if weights else None

    def to_dict(self) -> dict:
        """JSON-compatible layout: vertex positions and the edge list."""
        return {
            "vertices": [
                {"id": vertex, "x": state.position.x, "y": state.position.y}
                for vertex, state in self.vertices.items()
            ],
            "edges": [
                {"source": edge.source, "target": edge.target, "weight": edge.weight}
                for edge in self.edges
            ],
        }

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.adjacency

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.adjacency)

    def __len__(self) -> int:
        return len(self.adjacency)

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self.vertices)}, edges={len(self.edges)})"
