"""
Graph module.

Provides the weighted undirected graph consumed by the traversal engine:
- Graph: Adjacency lists plus per-vertex traversal state
- VertexState, Position, Edge: Records held by the graph
- Sample graphs: The A-E demo graphs (unweighted and weighted)
"""

from graphwalk.graph.model import Edge, Graph, Position, VertexState
from graphwalk.graph.samples import (
    SAMPLES,
    build_sample_graph,
    build_weighted_sample_graph,
    get_sample,
)

__all__ = [
    "Graph",
    "VertexState",
    "Position",
    "Edge",
    "SAMPLES",
    "build_sample_graph",
    "build_weighted_sample_graph",
    "get_sample",
]
