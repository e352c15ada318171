"""
Traversal engine module.

Provides step-recorded graph traversals and their records:
- Step: One discover/visit event with a frontier snapshot
- TraversalResult, BFSResult, DijkstraResult: Complete run records
- Traversal: Pull-based step stream over one run
- run_dfs, run_bfs, run_dijkstra: Eager runners with callback hooks
- Path helpers: reconstruct_path, shortest_hop_path, path_weight, has_cycle
"""

from graphwalk.traversal.engine import (
    Traversal,
    get_algorithm,
    run_bfs,
    run_dfs,
    run_dijkstra,
)
from graphwalk.traversal.paths import (
    has_cycle,
    path_weight,
    reconstruct_path,
    shortest_hop_path,
)
from graphwalk.traversal.state import (
    BFSResult,
    DijkstraResult,
    FrontierEntry,
    Step,
    StepKind,
    TraversalResult,
    TraversalState,
)

__all__ = [
    "Traversal",
    "get_algorithm",
    "run_dfs",
    "run_bfs",
    "run_dijkstra",
    "Step",
    "StepKind",
    "FrontierEntry",
    "TraversalResult",
    "BFSResult",
    "DijkstraResult",
    "TraversalState",
    "reconstruct_path",
    "shortest_hop_path",
    "path_weight",
    "has_cycle",
]
