"""
Unit tests for DFS and BFS step recording and the Traversal stream.
"""

import pytest

from graphwalk.graph import Graph
from graphwalk.traversal import (
    BFSResult,
    StepKind,
    Traversal,
    get_algorithm,
    run_bfs,
    run_dfs,
    run_dijkstra,
    shortest_hop_path,
)


def _summary(steps):
    return [(s.kind.value, s.vertex, s.frontier_labels) for s in steps]


class TestDFS:
    """Test depth-first search."""

    def test_sample_order(self, sample_graph):
        """Pops follow adjacency insertion order."""
        result = run_dfs(sample_graph, "A")
        assert result.order == ["A", "B", "D", "E", "C"]
        assert result.visited == {"A", "B", "C", "D", "E"}

    def test_sample_step_log(self, sample_graph):
        """Visit snapshots precede pushes; discover snapshots follow them."""
        result = run_dfs(sample_graph, "A")
        assert _summary(result.steps) == [
            ("visit", "A", []),
            ("discover", "C", ["C"]),
            ("discover", "B", ["C", "B"]),
            ("visit", "B", ["C"]),
            ("discover", "C", ["C", "C"]),
            ("discover", "D", ["C", "C", "D"]),
            ("visit", "D", ["C", "C"]),
            ("discover", "E", ["C", "C", "E"]),
            ("visit", "E", ["C", "C"]),
            ("discover", "C", ["C", "C", "C"]),
            ("visit", "C", ["C", "C"]),
        ]

    def test_step_indices_and_levels(self, sample_graph):
        """Steps are numbered in order and carry no BFS level."""
        result = run_dfs(sample_graph, "A")
        assert [s.index for s in result.steps] == list(range(len(result.steps)))
        assert all(s.level is None for s in result.steps)

    def test_paths_follow_discovering_edges(self, sample_graph):
        """Each visit step carries the path it was reached by."""
        result = run_dfs(sample_graph, "A")
        paths = {s.vertex: s.path for s in result.visits}
        assert paths["A"] == ("A",)
        assert paths["E"] == ("A", "B", "D", "E")
        assert paths["C"] == ("A", "B", "D", "E", "C")

    def test_order_depends_on_insertion(self):
        """Swapping neighbor insertion order swaps the visiting priority."""
        graph = Graph.from_edges([("A", "C"), ("A", "B")])
        assert run_dfs(graph, "A").order == ["A", "C", "B"]

    def test_writes_vertex_state(self, sample_graph):
        """Visited flags and predecessors land on the graph."""
        run_dfs(sample_graph, "A")
        assert sample_graph.vertex("A").predecessor is None
        assert sample_graph.vertex("D").predecessor == "B"
        assert sample_graph.vertex("C").predecessor == "E"
        assert all(s.visited for s in sample_graph.vertices.values())

    def test_self_loop(self):
        """A self-loop never re-pushes the current vertex."""
        graph = Graph.from_edges([("A", "A"), ("A", "B")])
        result = run_dfs(graph, "A")
        assert result.order == ["A", "B"]


class TestBFS:
    """Test breadth-first search."""

    def test_sample_order_and_levels(self, sample_graph):
        """Concrete A-E scenario."""
        result = run_bfs(sample_graph, "A")
        assert isinstance(result, BFSResult)
        assert result.order == ["A", "B", "C", "D", "E"]
        assert result.levels == {"A": 0, "B": 1, "C": 1, "D": 2, "E": 2}

    def test_sample_step_log(self, sample_graph):
        """Queue snapshots are annotated with levels."""
        result = run_bfs(sample_graph, "A")
        assert _summary(result.steps) == [
            ("visit", "A", []),
            ("discover", "B", ["B(L1)"]),
            ("discover", "C", ["B(L1)", "C(L1)"]),
            ("visit", "B", ["C(L1)"]),
            ("discover", "D", ["C(L1)", "D(L2)"]),
            ("visit", "C", ["D(L2)"]),
            ("discover", "E", ["D(L2)", "E(L2)"]),
            ("visit", "D", ["E(L2)"]),
            ("visit", "E", []),
        ]

    def test_visit_levels_non_decreasing(self, random_graphs):
        """Levels across consecutive visit steps never decrease."""
        for graph in random_graphs:
            levels = [s.level for s in run_bfs(graph, "v0").visits]
            assert levels == sorted(levels)

    def test_levels_equal_hop_distance(self, random_graphs):
        """BFS level equals the number of edges on the fewest-edge path."""
        for graph in random_graphs:
            result = run_bfs(graph, "v0")
            assert result.levels["v0"] == 0
            for vertex, level in result.levels.items():
                path = shortest_hop_path(graph, "v0", vertex)
                assert level == len(path) - 1

    def test_step_level_matches_parent_plus_one(self, sample_graph):
        """Discover steps sit one level below the vertex being visited."""
        result = run_bfs(sample_graph, "A")
        current = None
        for step in result.steps:
            if step.kind is StepKind.VISIT:
                current = step.level
            else:
                assert step.level == current + 1

    def test_writes_vertex_state(self, sample_graph):
        """BFS records level as distance and the discovering predecessor."""
        run_bfs(sample_graph, "A")
        assert sample_graph.vertex("A").distance == 0
        assert sample_graph.vertex("E").distance == 2
        assert sample_graph.vertex("E").predecessor == "C"

    def test_parallel_edges_enqueue_once(self):
        """Parallel edges do not enqueue a vertex twice."""
        graph = Graph.from_edges([("A", "B"), ("A", "B"), ("B", "C")])
        result = run_bfs(graph, "A")
        assert result.order == ["A", "B", "C"]
        assert len([s for s in result.steps if s.kind is StepKind.DISCOVER]) == 2


class TestReachability:
    """Properties shared by DFS and BFS."""

    def test_same_reachable_set(self, random_graphs):
        """DFS and BFS visit exactly the same component."""
        for graph in random_graphs:
            dfs = run_dfs(graph, "v0")
            bfs = run_bfs(graph, "v0")
            assert set(dfs.order) == set(bfs.order)
            assert set(dfs.order) == dfs.visited

    def test_no_duplicate_visits(self, random_graphs):
        """Visitation order never repeats a vertex."""
        for graph in random_graphs:
            for runner in (run_dfs, run_bfs):
                order = runner(graph, "v0").order
                assert len(order) == len(set(order))

    def test_component_only(self, two_component_graph):
        """Other components stay untouched."""
        for runner in (run_dfs, run_bfs):
            result = runner(two_component_graph, "X")
            assert set(result.order) == {"X", "Y", "Z"}
        assert two_component_graph.vertex("P").visited is False

    def test_isolated_start(self, two_component_graph):
        """An isolated vertex visits only itself."""
        assert run_dfs(two_component_graph, "R").order == ["R"]
        assert run_bfs(two_component_graph, "R").levels == {"R": 0}


class TestUnknownStart:
    """Starting from a vertex that was never added."""

    @pytest.mark.parametrize("runner", [run_dfs, run_bfs, run_dijkstra])
    def test_empty_result(self, sample_graph, runner):
        """Unknown start yields empty order, steps and visited set."""
        result = runner(sample_graph, "Z")
        assert result.order == []
        assert result.steps == []
        assert result.visited == set()

    def test_graph_untouched(self, sample_graph):
        """No vertex state is written."""
        run_bfs(sample_graph, "Z")
        assert not any(s.visited for s in sample_graph.vertices.values())

    def test_empty_bfs_levels(self, sample_graph):
        """BFS levels are empty too."""
        assert run_bfs(sample_graph, "Z").levels == {}


class TestCallbacks:
    """Test the visit/step callback hooks."""

    def test_step_callback_order(self, sample_graph):
        """on_step sees every step in order."""
        seen = []
        result = run_dfs(sample_graph, "A", on_step=seen.append)
        assert seen == result.steps

    def test_visit_callback(self, sample_graph):
        """on_visit fires once per visited vertex, in order."""
        visited = []
        result = run_bfs(sample_graph, "A", on_visit=lambda vertex, step: visited.append(vertex))
        assert visited == result.order

    def test_visit_before_step(self, sample_graph):
        """For a visit step, on_visit runs before on_step."""
        calls = []
        run_dfs(
            sample_graph,
            "A",
            on_visit=lambda vertex, step: calls.append(("visit", step.index)),
            on_step=lambda step: calls.append(("step", step.index)),
        )
        assert calls[:3] == [("visit", 0), ("step", 0), ("step", 1)]

    def test_dijkstra_callbacks(self, weighted_graph):
        """Dijkstra calls the same hooks."""
        visited = []
        result = run_dijkstra(weighted_graph, "A", "D", on_visit=lambda v, s: visited.append(v))
        assert visited == result.order == ["A", "C", "E", "D"]


class TestTraversalStream:
    """Test pulling steps one at a time."""

    def test_pull_steps_lazily(self, sample_graph):
        """Steps are produced on demand and the result appears at the end."""
        traversal = Traversal(sample_graph, "bfs", "A")
        stream = iter(traversal)

        first = next(stream)
        assert first.kind is StepKind.VISIT
        assert first.vertex == "A"
        assert traversal.finished is False
        assert len(traversal.steps) == 1
        # Only the start has been touched so far
        assert sample_graph.vertex("D").visited is False

        rest = list(stream)
        assert traversal.finished is True
        assert [first] + rest == traversal.result.steps

    def test_abandon_midway(self, sample_graph):
        """Stopping early leaves no result and needs no cleanup."""
        traversal = Traversal(sample_graph, "dfs", "A")
        for step in traversal:
            if step.index == 2:
                break
        assert traversal.result is None
        assert len(traversal.steps) == 3

    def test_iterate_once(self, sample_graph):
        """A traversal cannot be replayed by iterating again."""
        traversal = Traversal(sample_graph, "dfs", "A")
        traversal.run()
        with pytest.raises(RuntimeError):
            list(traversal)

    def test_unknown_algorithm(self, sample_graph):
        """Unknown algorithm names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown algorithm"):
            Traversal(sample_graph, "astar", "A")

    def test_eager_and_lazy_agree(self, sample_graph):
        """Pulling every step matches the eager runner."""
        lazy = list(Traversal(sample_graph, "dfs", "A"))
        sample_graph.reset()
        eager = run_dfs(sample_graph, "A").steps
        assert lazy == eager

    def test_deterministic_replay(self, sample_graph):
        """Two runs with a reset in between give identical logs."""
        first = run_bfs(sample_graph, "A")
        sample_graph.reset()
        second = run_bfs(sample_graph, "A")
        assert first.steps == second.steps


class TestRegistry:
    """Test the algorithm registry."""

    def test_get_algorithm(self):
        """Names map to the eager runners."""
        assert get_algorithm("dfs") is run_dfs
        assert get_algorithm("bfs") is run_bfs
        assert get_algorithm("dijkstra") is run_dijkstra

    def test_get_algorithm_unknown(self):
        """Unknown names list the available ones."""
        with pytest.raises(ValueError, match="dfs, bfs, dijkstra"):
            get_algorithm("prim")


class TestSerialization:
    """Test JSON-compatible result dicts."""

    def test_bfs_to_dict(self, sample_graph):
        """BFS dict carries order, levels and step dicts."""
        data = run_bfs(sample_graph, "A").to_dict()
        assert data["algorithm"] == "bfs"
        assert data["order"] == ["A", "B", "C", "D", "E"]
        assert data["visited"] == data["order"]
        assert data["levels"]["E"] == 2
        assert data["steps"][1] == {
            "index": 1,
            "kind": "discover",
            "vertex": "B",
            "message": "Enqueue vertex B (level 1)",
            "frontier": [{"vertex": "B", "level": 1}],
            "frontier_labels": ["B(L1)"],
            "path": ["A", "B"],
            "level": 1,
            "distance": None,
        }

    def test_steps_are_immutable(self, sample_graph):
        """Steps are frozen records."""
        step = run_dfs(sample_graph, "A").steps[0]
        with pytest.raises(AttributeError):
            step.vertex = "Z"
