"""
Path helpers built on the graph: predecessor walks, fewest-edge paths and
cycle detection.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Hashable, Mapping, Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graphwalk.graph.model import Graph

logger = logging.getLogger(__name__)


def reconstruct_path(
    predecessors: Mapping[Hashable, Hashable | None],
    start: Hashable,
    target: Hashable,
) -> list[Hashable] | None:
    """
    Walk predecessors back from target to start.

    Returns:
        List of vertices from start to target, or None if the chain does
        not lead back to start
    """
    path = [target]
    current = target
    # A valid chain never repeats a vertex
    while current != start and len(path) <= len(predecessors) + 1:
        current = predecessors.get(current)
        if current is None:
            return None
        path.append(current)

    if current != start:
        return None
    return list(reversed(path))


def shortest_hop_path(graph: Graph, start: Hashable, end: Hashable) -> list[Hashable] | None:
    """
    Find the path with the fewest edges using BFS, ignoring weights.

    Returns:
        List of vertices from start to end, or None if no path exists
    """
    if start not in graph:
        logger.warning(f"Start '{start}' not in graph")
        return None
    if end not in graph:
        logger.warning(f"End '{end}' not in graph")
        return None

    if start == end:
        return [start]

    # BFS with parent tracking
    queue = deque([start])
    parents: dict[Hashable, Hashable | None] = {start: None}

    while queue:
        current = queue.popleft()

        for neighbor, _ in graph.neighbors(current):
            if neighbor in parents:
                continue

            parents[neighbor] = current

            if neighbor == end:
                return reconstruct_path(parents, start, end)

            queue.append(neighbor)

    return None


def path_weight(graph: Graph, path: Sequence[Hashable]) -> float | None:
    """Sum of the lightest edge weights along a path, or None if a hop has no edge."""
    total = 0
    for u, v in zip(path, path[1:]):
        weight = graph.weight(u, v)
        if weight is None:
            return None
        total += weight
    return total


def has_cycle(graph: Graph) -> bool:
    """
    Whether the undirected graph contains a cycle.

    Uses union-find over the edge list: an edge joining two vertices that are
    already connected closes a cycle. Self-loops and parallel edges count.
    """
    parent: dict[Hashable, Hashable] = {vertex: vertex for vertex in graph}

    def find(vertex: Hashable) -> Hashable:
        while parent[vertex] != vertex:
            parent[vertex] = parent[parent[vertex]]
            vertex = parent[vertex]
        return vertex

    for edge in graph.edges:
        root_u = find(edge.source)
        root_v = find(edge.target)
        if root_u == root_v:
            return True
        parent[root_u] = root_v

    return False
