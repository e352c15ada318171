"""
Plotly chart components for replaying traversals.

All vertex colouring is derived from the step stream; the graph itself
carries no rendering state.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence

import plotly.graph_objects as go

from graphwalk.config import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    COLOR_CURRENT,
    COLOR_EDGE,
    COLOR_FRONTIER,
    COLOR_IDLE,
    COLOR_VISITED,
    EDGE_WIDTH,
    NODE_RADIUS,
)
from graphwalk.graph.model import Graph
from graphwalk.traversal.state import Step, StepKind


def derive_vertex_colors(
    graph: Graph,
    steps: Sequence[Step],
    upto: int | None = None,
) -> dict[Hashable, str]:
    """
    Colour every vertex as it looks after the first `upto` steps.

    Visited vertices are green, vertices on the frontier orange, the vertex
    of the last applied step red, everything else idle.
    """
    applied = steps[:upto] if upto is not None else steps
    colors = {vertex: COLOR_IDLE for vertex in graph}

    for step in applied:
        if step.kind is StepKind.VISIT:
            colors[step.vertex] = COLOR_VISITED

    if applied:
        last = applied[-1]
        for vertex in last.frontier_vertices:
            if colors.get(vertex) != COLOR_VISITED:
                colors[vertex] = COLOR_FRONTIER
        colors[last.vertex] = COLOR_CURRENT

    return colors


def create_graph_figure(
    graph: Graph,
    steps: Sequence[Step] = (),
    upto: int | None = None,
    title: str = "Graph",
) -> go.Figure:
    """Graph drawn at its vertex positions, coloured from the step stream."""
    colors = derive_vertex_colors(graph, steps, upto)
    fig = go.Figure()

    for edge in graph.edges:
        source = graph.vertex(edge.source).position
        target = graph.vertex(edge.target).position
        fig.add_trace(go.Scatter(
            x=[source.x, target.x],
            y=[source.y, target.y],
            mode="lines",
            line=dict(color=COLOR_EDGE, width=EDGE_WIDTH),
            hoverinfo="skip",
            showlegend=False,
        ))

    # Weight labels at edge midpoints
    fig.add_trace(go.Scatter(
        x=[(graph.vertex(e.source).position.x + graph.vertex(e.target).position.x) / 2 for e in graph.edges],
        y=[(graph.vertex(e.source).position.y + graph.vertex(e.target).position.y) / 2 for e in graph.edges],
        mode="text",
        text=[f"{e.weight:g}" for e in graph.edges],
        textfont=dict(size=10, color="#7f8c8d"),
        hoverinfo="skip",
        showlegend=False,
    ))

    vertices = list(graph)
    fig.add_trace(go.Scatter(
        x=[graph.vertex(v).position.x for v in vertices],
        y=[graph.vertex(v).position.y for v in vertices],
        mode="markers+text",
        marker=dict(size=NODE_RADIUS * 1.6, color=[colors[v] for v in vertices], line=dict(width=2, color="#1a1a2e")),
        text=[str(v) for v in vertices],
        textfont=dict(size=14, color="#1a1a2e"),
        hovertext=[f"Vertex {v}" for v in vertices],
        hoverinfo="text",
        showlegend=False,
    ))

    fig.update_layout(
        title=title,
        height=CANVAS_HEIGHT + 80,
        width=CANVAS_WIDTH + 40,
        margin=dict(t=35, b=15, l=15, r=15),
        plot_bgcolor="white",
    )
    fig.update_xaxes(visible=False, range=[0, CANVAS_WIDTH])
    # Canvas y grows downwards
    fig.update_yaxes(visible=False, range=[CANVAS_HEIGHT, 0])
    return fig


def create_frontier_chart(steps: Sequence[Step]) -> go.Figure:
    """Bar chart of frontier size per step, coloured by step kind."""
    colors = [COLOR_VISITED if s.kind is StepKind.VISIT else COLOR_FRONTIER for s in steps]

    fig = go.Figure(data=[
        go.Bar(
            x=[s.index + 1 for s in steps],
            y=[len(s.frontier) for s in steps],
            marker_color=colors,
            hovertext=[f"{s.message}<br>[{', '.join(s.frontier_labels)}]" for s in steps],
            hoverinfo="text",
        )
    ])

    fig.update_layout(
        title="Frontier Size",
        xaxis_title="Step",
        yaxis_title="Entries",
        showlegend=False,
        height=280,
        margin=dict(t=35, b=45, l=45, r=15),
    )
    return fig
