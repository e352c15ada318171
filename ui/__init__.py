"""
Web UI module.

Provides the rendering side of the Graph Traversal Visualizer:
- Graph figure: vertex colours replayed from a traversal's step log
- Frontier chart: stack/queue/worklist size at every step
"""
