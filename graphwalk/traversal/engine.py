"""
Traversal engine for running DFS, BFS and Dijkstra with step recording.

Each algorithm is a generator of Step records. Consumers either pull steps
one at a time through a Traversal (pausing between steps as they like) or
call the eager run_* functions, which drain the stream and invoke optional
callbacks in step order.
"""

from __future__ import annotations

import logging
import math
from collections import deque
from collections.abc import Hashable, Iterator
from typing import TYPE_CHECKING, Callable, Generator

from graphwalk.config import ALGORITHMS
from graphwalk.traversal.paths import reconstruct_path
from graphwalk.traversal.state import (
    BFSResult,
    DijkstraResult,
    FrontierEntry,
    Step,
    StepKind,
    TraversalResult,
    TraversalState,
)

if TYPE_CHECKING:
    from graphwalk.graph.model import Graph

logger = logging.getLogger(__name__)

VisitCallback = Callable[[Hashable, Step], None]
StepCallback = Callable[[Step], None]

StepStream = Generator[Step, None, TraversalResult]


def _dfs(graph: Graph, start: Hashable, end: Hashable | None, state: TraversalState) -> StepStream:
    """
    Depth-first search with an explicit stack.

    Neighbors are pushed in reverse adjacency order so that pops follow the
    left-to-right insertion order. A vertex may sit on the stack several
    times; only its first pop is processed.
    """
    if start not in graph:
        logger.warning(f"Start '{start}' not in graph")
        return state.to_result()

    stack: list[tuple[Hashable, tuple[Hashable, ...]]] = [(start, (start,))]

    while stack:
        vertex, path = stack.pop()

        if vertex in state.visited:
            continue

        state.visited.add(vertex)
        vertex_state = graph.vertex(vertex)
        vertex_state.visited = True
        vertex_state.predecessor = path[-2] if len(path) > 1 else None

        yield state.record_step(
            StepKind.VISIT,
            vertex,
            f"Visit vertex {vertex}",
            frontier=[FrontierEntry(v) for v, _ in stack],
            path=path,
        )

        unvisited = [n for n, _ in graph.neighbors(vertex) if n not in state.visited]
        for neighbor in reversed(unvisited):
            neighbor_path = path + (neighbor,)
            stack.append((neighbor, neighbor_path))
            yield state.record_step(
                StepKind.DISCOVER,
                neighbor,
                f"Discover vertex {neighbor} from {vertex}",
                frontier=[FrontierEntry(v) for v, _ in stack],
                path=neighbor_path,
            )

    return state.to_result()


def _bfs(graph: Graph, start: Hashable, end: Hashable | None, state: TraversalState) -> StepStream:
    """
    Breadth-first search with level tracking.

    Vertices are marked visited when enqueued, so each one enters the queue
    at most once and keeps the level it was discovered at.
    """
    levels: dict[Hashable, int] = {}

    if start not in graph:
        logger.warning(f"Start '{start}' not in graph")
        return state.to_result(BFSResult, levels=levels)

    queue: deque[tuple[Hashable, int, tuple[Hashable, ...]]] = deque([(start, 0, (start,))])
    state.visited.add(start)
    levels[start] = 0
    start_state = graph.vertex(start)
    start_state.visited = True
    start_state.distance = 0

    def snapshot() -> list[FrontierEntry]:
        return [FrontierEntry(v, level=lvl) for v, lvl, _ in queue]

    while queue:
        vertex, level, path = queue.popleft()

        yield state.record_step(
            StepKind.VISIT,
            vertex,
            f"Visit vertex {vertex} at level {level}",
            frontier=snapshot(),
            path=path,
            level=level,
        )

        for neighbor, _ in graph.neighbors(vertex):
            if neighbor in state.visited:
                continue

            state.visited.add(neighbor)
            levels[neighbor] = level + 1
            neighbor_state = graph.vertex(neighbor)
            neighbor_state.visited = True
            neighbor_state.distance = level + 1
            neighbor_state.predecessor = vertex

            neighbor_path = path + (neighbor,)
            queue.append((neighbor, level + 1, neighbor_path))
            yield state.record_step(
                StepKind.DISCOVER,
                neighbor,
                f"Enqueue vertex {neighbor} (level {level + 1})",
                frontier=snapshot(),
                path=neighbor_path,
                level=level + 1,
            )

    return state.to_result(BFSResult, levels=levels)


def _dijkstra(graph: Graph, start: Hashable, end: Hashable | None, state: TraversalState) -> StepStream:
    """
    Single-source shortest path with a linear-scan worklist.

    Improved distances are appended as new worklist entries; older entries
    for the same vertex stay behind and are skipped once it is finalized.
    Stops early when `end` is finalized. Requires non-negative weights.
    """
    distances: dict[Hashable, float] = {v: 0 if v == start else math.inf for v in graph}
    predecessors: dict[Hashable, Hashable | None] = {v: None for v in graph}

    if start not in graph:
        logger.warning(f"Start '{start}' not in graph")
        return state.to_result(DijkstraResult, end=end, distances=distances, predecessors=predecessors)

    if end is not None and end not in graph:
        logger.debug(f"End '{end}' not in graph; running to exhaustion")

    worklist: list[tuple[Hashable, float]] = [(start, 0)]
    graph.vertex(start).distance = 0

    def snapshot() -> list[FrontierEntry]:
        return [FrontierEntry(v, distance=d) for v, d in worklist]

    while worklist:
        # First minimum wins, so ties resolve in insertion order
        best = min(range(len(worklist)), key=lambda i: worklist[i][1])
        vertex, _ = worklist.pop(best)

        if vertex in state.visited:
            continue

        state.visited.add(vertex)
        graph.vertex(vertex).visited = True
        distance = distances[vertex]

        yield state.record_step(
            StepKind.VISIT,
            vertex,
            f"Finalize vertex {vertex} at distance {distance:g}",
            frontier=snapshot(),
            path=reconstruct_path(predecessors, start, vertex) or (vertex,),
            distance=distance,
        )

        if vertex == end:
            break

        for neighbor, weight in graph.neighbors(vertex):
            candidate = distance + weight
            if candidate >= distances[neighbor]:
                continue

            distances[neighbor] = candidate
            predecessors[neighbor] = vertex
            neighbor_state = graph.vertex(neighbor)
            neighbor_state.distance = candidate
            neighbor_state.predecessor = vertex

            worklist.append((neighbor, candidate))
            yield state.record_step(
                StepKind.DISCOVER,
                neighbor,
                f"Update vertex {neighbor} to distance {candidate:g} via {vertex}",
                frontier=snapshot(),
                path=reconstruct_path(predecessors, start, neighbor) or (neighbor,),
                distance=candidate,
            )

    return state.to_result(DijkstraResult, end=end, distances=distances, predecessors=predecessors)


_ALGORITHMS: dict[str, Callable[..., StepStream]] = {
    "dfs": _dfs,
    "bfs": _bfs,
    "dijkstra": _dijkstra,
}


class Traversal:
    """
    Pull-based traversal run.

    Iterating yields Step records one at a time; the consumer may pause
    between steps or stop early (abandoning the run needs no cleanup).
    Once the stream is exhausted, `result` holds the complete record.

    The graph is not reset here: call graph.reset() between runs.
    """

    def __init__(
        self,
        graph: Graph,
        algorithm: str,
        start: Hashable,
        end: Hashable | None = None,
    ) -> None:
        """
        Initialize a traversal.

        Args:
            graph: Graph to traverse (exclusive access for the whole run)
            algorithm: 'dfs', 'bfs' or 'dijkstra'
            start: Start vertex
            end: Early-exit target (Dijkstra only, ignored otherwise)

        Raises:
            ValueError: If the algorithm name is unknown
        """
        if algorithm not in _ALGORITHMS:
            available = ", ".join(ALGORITHMS)
            raise ValueError(f"Unknown algorithm '{algorithm}'. Available: {available}")

        self.graph = graph
        self.algorithm = algorithm
        self.start = start
        self.end = end
        self.result: TraversalResult | None = None
        self._state = TraversalState(algorithm=algorithm, start=start)
        self._started = False

    @property
    def steps(self) -> list[Step]:
        """Steps recorded so far."""
        return list(self._state.steps)

    @property
    def finished(self) -> bool:
        return self.result is not None

    def __iter__(self) -> Iterator[Step]:
        if self._started:
            raise RuntimeError("A traversal can only be iterated once")
        self._started = True

        logger.info(f"Starting {self.algorithm.upper()} from '{self.start}'")
        stream = _ALGORITHMS[self.algorithm](self.graph, self.start, self.end, self._state)
        self.result = yield from stream

        logger.info(
            f"{self.algorithm.upper()} finished: {len(self.result.order)} vertices, "
            f"{len(self.result.steps)} steps"
        )

    def run(
        self,
        on_visit: VisitCallback | None = None,
        on_step: StepCallback | None = None,
    ) -> TraversalResult:
        """
        Drain the stream and return the result.

        Args:
            on_visit: Called with (vertex, step) for each visit step
            on_step: Called with every step, after on_visit
        """
        for step in self:
            logger.debug(f"Step {step.index}: {step.message} {step.frontier_labels}")
            if on_visit and step.kind is StepKind.VISIT:
                on_visit(step.vertex, step)
            if on_step:
                on_step(step)
        return self.result

    def __repr__(self) -> str:
        return f"Traversal(algorithm={self.algorithm!r}, start={self.start!r}, steps={len(self._state.steps)})"


def run_dfs(
    graph: Graph,
    start: Hashable,
    on_visit: VisitCallback | None = None,
    on_step: StepCallback | None = None,
) -> TraversalResult:
    """Run depth-first search and return {order, steps, visited}."""
    return Traversal(graph, "dfs", start).run(on_visit=on_visit, on_step=on_step)


def run_bfs(
    graph: Graph,
    start: Hashable,
    on_visit: VisitCallback | None = None,
    on_step: StepCallback | None = None,
) -> BFSResult:
    """Run breadth-first search and return {order, steps, visited, levels}."""
    return Traversal(graph, "bfs", start).run(on_visit=on_visit, on_step=on_step)


def run_dijkstra(
    graph: Graph,
    start: Hashable,
    end: Hashable | None = None,
    on_visit: VisitCallback | None = None,
    on_step: StepCallback | None = None,
) -> DijkstraResult:
    """Run Dijkstra and return {distances, predecessors, visited} plus the step log."""
    return Traversal(graph, "dijkstra", start, end).run(on_visit=on_visit, on_step=on_step)


def get_algorithm(name: str) -> Callable[..., TraversalResult]:
    """
    Get a traversal runner by name.

    Args:
        name: Algorithm identifier (dfs, bfs, dijkstra)

    Returns:
        The matching run_* function

    Raises:
        ValueError: If algorithm name is unknown
    """
    runners = {
        "dfs": run_dfs,
        "bfs": run_bfs,
        "dijkstra": run_dijkstra,
    }

    if name not in runners:
        available = ", ".join(runners.keys())
        raise ValueError(f"Unknown algorithm '{name}'. Available: {available}")

    return runners[name]
