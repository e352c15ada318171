"""
Step and result dataclasses for recording graph traversals.
"""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from enum import Enum

from graphwalk.traversal.paths import reconstruct_path


class StepKind(str, Enum):
    """What happened to the vertex a step concerns."""

    DISCOVER = "discover"  # pushed onto the frontier
    VISIT = "visit"  # taken off the frontier and processed


def _json_number(value: float | None) -> float | None:
    """Infinity has no JSON form; render it as null."""
    if value is None or math.isinf(value):
        return None
    return value


def _format_distance(value: float) -> str:
    if math.isinf(value):
        return "inf"
    return f"{value:g}"


@dataclass(frozen=True)
class FrontierEntry:
    """
    One item of a stack, queue or worklist snapshot.

    Attributes:
        vertex: Vertex id
        level: BFS level of the entry (BFS only)
        distance: Tentative distance of the entry (Dijkstra only)
    """

    vertex: Hashable
    level: int | None = None
    distance: float | None = None

    @property
    def label(self) -> str:
        """Display label, e.g. 'B' (DFS), 'B(L1)' (BFS), 'B(5)' (Dijkstra)."""
        if self.level is not None:
            return f"{self.vertex}(L{self.level})"
        if self.distance is not None:
            return f"{self.vertex}({_format_distance(self.distance)})"
        return str(self.vertex)

    def to_dict(self) -> dict:
        data: dict = {"vertex": self.vertex}
        if self.level is not None:
            data["level"] = self.level
        if self.distance is not None:
            data["distance"] = _json_number(self.distance)
        return data


@dataclass(frozen=True)
class Step:
    """
    Immutable record of one traversal event.

    Attributes:
        index: 0-indexed position in the step log
        kind: discover or visit
        vertex: The vertex this step concerns
        message: Human-readable description (display only)
        frontier: Stack/queue/worklist contents when the step was recorded
        path: Vertices from the start to this vertex along discovering edges
        level: BFS discovery depth (BFS only)
        distance: Tentative or final distance (Dijkstra only)
    """

    index: int
    kind: StepKind
    vertex: Hashable
    message: str
    frontier: tuple[FrontierEntry, ...]
    path: tuple[Hashable, ...] = ()
    level: int | None = None
    distance: float | None = None

    @property
    def frontier_vertices(self) -> list[Hashable]:
        return [entry.vertex for entry in self.frontier]

    @property
    def frontier_labels(self) -> list[str]:
        return [entry.label for entry in self.frontier]

    def to_dict(self) -> dict:
        """JSON-compatible form for renderers."""
        return {
            "index": self.index,
            "kind": self.kind.value,
            "vertex": self.vertex,
            "message": self.message,
            "frontier": [entry.to_dict() for entry in self.frontier],
            "frontier_labels": self.frontier_labels,
            "path": list(self.path),
            "level": self.level,
            "distance": _json_number(self.distance),
        }


def _in_order(vertices: Iterable[Hashable], order: list[Hashable]) -> list[Hashable]:
    """List a vertex set following the visitation order."""
    vertices = set(vertices)
    ordered = [v for v in order if v in vertices]
    seen = set(ordered)
    return ordered + [v for v in vertices if v not in seen]


@dataclass
class TraversalResult:
    """
    Complete record of a finished traversal.

    Attributes:
        algorithm: 'dfs', 'bfs' or 'dijkstra'
        start: Start vertex as requested
        order: Final visitation order
        steps: Full ordered step log
        visited: Vertices marked visited by the run
    """

    algorithm: str
    start: Hashable
    order: list[Hashable]
    steps: list[Step]
    visited: set[Hashable]

    @property
    def visits(self) -> list[Step]:
        """Only the visit steps, in order."""
        return [step for step in self.steps if step.kind is StepKind.VISIT]

    def to_dict(self) -> dict:
        return {
            "algorithm": self.algorithm,
            "start": self.start,
            "order": list(self.order),
            "visited": _in_order(self.visited, self.order),
            "steps": [step.to_dict() for step in self.steps],
        }


@dataclass
class BFSResult(TraversalResult):
    """Traversal result with the BFS level of every reached vertex."""

    levels: dict[Hashable, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["levels"] = dict(self.levels)
        return data


@dataclass
class DijkstraResult(TraversalResult):
    """
    Traversal result of a single-source shortest path run.

    Attributes:
        end: Optional early-exit target
        distances: Shortest known distance per vertex (inf if unreached)
        predecessors: Previous vertex on the shortest path, or None
    """

    end: Hashable | None = None
    distances: dict[Hashable, float] = field(default_factory=dict)
    predecessors: dict[Hashable, Hashable | None] = field(default_factory=dict)

    def path_to(self, target: Hashable) -> list[Hashable] | None:
        """Shortest path from start to target, or None if unreachable."""
        if self.distances.get(target, math.inf) == math.inf:
            return None
        return reconstruct_path(self.predecessors, self.start, target)

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["end"] = self.end
        data["distances"] = {v: _json_number(d) for v, d in self.distances.items()}
        data["predecessors"] = dict(self.predecessors)
        if self.end is not None:
            data["path"] = self.path_to(self.end)
        return data


@dataclass
class TraversalState:
    """
    Mutable state during an active traversal.

    Attributes:
        algorithm: Algorithm name
        start: Start vertex
        order: Vertices processed so far
        steps: Steps recorded so far
        visited: Vertices marked visited so far
    """

    algorithm: str
    start: Hashable
    order: list[Hashable] = field(default_factory=list)
    steps: list[Step] = field(default_factory=list)
    visited: set[Hashable] = field(default_factory=set)

    def record_step(
        self,
        kind: StepKind,
        vertex: Hashable,
        message: str,
        frontier: Iterable[FrontierEntry],
        path: Iterable[Hashable] = (),
        level: int | None = None,
        distance: float | None = None,
    ) -> Step:
        """Append a step; visit steps also extend the visitation order."""
        step = Step(
            index=len(self.steps),
            kind=kind,
            vertex=vertex,
            message=message,
            frontier=tuple(frontier),
            path=tuple(path),
            level=level,
            distance=distance,
        )
        self.steps.append(step)
        if kind is StepKind.VISIT:
            self.order.append(vertex)
        return step

    def to_result(self, result_cls: type[TraversalResult] = TraversalResult, **extra) -> TraversalResult:
        """Convert to a result record (copies, so later mutation is not shared)."""
        return result_cls(
            algorithm=self.algorithm,
            start=self.start,
            order=list(self.order),
            steps=list(self.steps),
            visited=set(self.visited),
            **extra,
        )
