"""
Graph Traversal Visualizer.

A step-recording engine that runs DFS, BFS and Dijkstra over a weighted
undirected graph and produces a replayable log of traversal steps for
renderers to animate.
"""

__version__ = "0.1.0"
