#!/usr/bin/env python3
"""
Graph Traversal CLI - Replay DFS, BFS or Dijkstra step by step.

Usage:
    python scripts/traverse.py --algorithm bfs --start A
    python scripts/traverse.py --algorithm dfs --start A --delay 500
    python scripts/traverse.py --algorithm dijkstra --graph weighted --start A --end D
    python scripts/traverse.py --algorithm dijkstra --start S --edge S T 4 --edge T U 1 --json

Graphs:
    sample   - A-E demo graph, unit weights (default)
    weighted - A-E demo graph where A->C->E->D beats A->B->D

Passing one or more --edge U V [W] builds a custom graph instead.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from graphwalk.config import ALGORITHMS, DEFAULT_WEIGHT, LOG_DATEFMT, LOG_FORMAT, STEP_DELAY_MS  # noqa: E402
from graphwalk.graph import SAMPLES, Graph, get_sample  # noqa: E402
from graphwalk.traversal import StepKind, Traversal, has_cycle  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Replay a graph traversal step by step",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--algorithm",
        "-a",
        type=str,
        default="bfs",
        choices=list(ALGORITHMS),
        help="Traversal algorithm (default: bfs)",
    )
    parser.add_argument(
        "--start",
        type=str,
        required=True,
        help="Start vertex",
    )
    parser.add_argument(
        "--end",
        type=str,
        default=None,
        help="Stop Dijkstra once this vertex is finalized",
    )
    parser.add_argument(
        "--graph",
        type=str,
        default=None,
        choices=list(SAMPLES),
        help="Sample graph to traverse (default: sample)",
    )
    parser.add_argument(
        "--edge",
        nargs="+",
        action="append",
        metavar="U V [W]",
        help="Add an edge to a custom graph (repeatable, excludes --graph)",
    )
    parser.add_argument(
        "--delay",
        type=int,
        default=STEP_DELAY_MS,
        help=f"Pause between steps in milliseconds (default: {STEP_DELAY_MS})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result as JSON instead of a step log",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    if args.edge and args.graph:
        parser.error("--graph cannot be combined with --edge")
    if args.graph is None:
        args.graph = "sample"

    return args


def build_graph(args: argparse.Namespace) -> Graph:
    """
    Build the graph named on the command line.

    Raises:
        ValueError: If an --edge has the wrong arity or a non-numeric weight
    """
    if not args.edge:
        return get_sample(args.graph)

    edges = []
    for edge in args.edge:
        if len(edge) not in (2, 3):
            raise ValueError(f"--edge takes U V [W], got {' '.join(edge)!r}")
        weight = float(edge[2]) if len(edge) == 3 else DEFAULT_WEIGHT
        edges.append((edge[0], edge[1], weight))
    return Graph.from_edges(edges)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    try:
        graph = build_graph(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.start not in graph:
        print(f"Error: start vertex '{args.start}' is not in the graph", file=sys.stderr)
        return 1

    traversal = Traversal(graph, args.algorithm, args.start, args.end)

    if args.json:
        result = traversal.run()
        print(json.dumps(result.to_dict(), indent=2))
        return 0

    print("\n" + "=" * 60)
    print(f"{args.algorithm.upper()} traversal")
    print("=" * 60)
    print(f"  Vertices: {len(graph)}  Edges: {len(graph.edges)}  Cyclic: {has_cycle(graph)}")
    print(f"  Start:    {args.start}")
    if args.algorithm == "dijkstra" and args.end:
        print(f"  End:      {args.end}")
    print("=" * 60 + "\n")

    try:
        for step in traversal:
            marker = "*" if step.kind is StepKind.VISIT else "+"
            print(f"  {step.index + 1:>3}. {marker} {step.message:<45} [{', '.join(step.frontier_labels)}]")
            if args.delay:
                time.sleep(args.delay / 1000)
    except KeyboardInterrupt:
        print("\n\nTraversal interrupted by user")
        return 130  # Standard exit code for Ctrl+C

    result = traversal.result

    print("\nOrder: " + " -> ".join(str(v) for v in result.order))

    if args.algorithm == "bfs":
        levels = ", ".join(f"{v}:{lvl}" for v, lvl in result.levels.items())
        print(f"Levels: {levels}")

    if args.algorithm == "dijkstra":
        print("\nDistances:")
        for vertex, distance in result.distances.items():
            path = result.path_to(vertex)
            route = " -> ".join(str(v) for v in path) if path else "unreachable"
            print(f"  {vertex}: {distance:g}  ({route})")

    return 0


if __name__ == "__main__":
    sys.exit(main())
