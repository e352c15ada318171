"""
Graph Traversal Visualizer - Flask app.

Features:
- Home: Replay a DFS/BFS/Dijkstra run on a sample graph, one step at a time
- API: Sample graph layouts and full step logs as JSON for any renderer
"""

import logging

from flask import Flask, jsonify, render_template_string, request, url_for

from graphwalk.config import (
    ALGORITHMS,
    DEFAULT_WEIGHT,
    FLASK_HOST,
    FLASK_PORT,
    FLASK_SECRET_KEY,
    LOG_DATEFMT,
    LOG_FORMAT,
    LOG_LEVEL,
)
from graphwalk.graph import SAMPLES, Graph, get_sample
from graphwalk.traversal import Traversal, get_algorithm
from ui.components.charts import create_frontier_chart, create_graph_figure

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = FLASK_SECRET_KEY
# Vertex ids may mix ints and strings, which cannot be sorted
app.json.sort_keys = False

# ====================
# Templates
# ====================

PAGE_TEMPLATE = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>Graph Traversal Visualizer</title>
    <style>
        * { box-sizing: border-box; margin: 0; padding: 0; }
        body { font-family: system-ui, -apple-system, sans-serif; background: #f5f5f5; }
        .header { background: #1a1a2e; color: white; padding: 15px 30px; }
        .container { max-width: 1100px; margin: 0 auto; padding: 20px; }
        .card { background: white; border-radius: 12px; box-shadow: 0 2px 8px rgba(0,0,0,0.1); padding: 20px; margin-bottom: 20px; }
        form { display: flex; gap: 15px; align-items: end; flex-wrap: wrap; }
        label { display: block; font-weight: 600; margin-bottom: 5px; }
        input, select { padding: 8px 10px; border: 2px solid #ddd; border-radius: 8px; }
        button, .btn { background: #4ecdc4; color: white; border: none; padding: 9px 20px; border-radius: 8px; cursor: pointer; text-decoration: none; }
        .btn.disabled { background: #bbb; pointer-events: none; }
        .steps { max-height: 320px; overflow-y: auto; font-size: 14px; }
        .step { padding: 6px 10px; border-left: 4px solid #f39c12; margin-bottom: 4px; background: #fafafa; }
        .step.visit { border-left-color: #2ecc71; }
        .step.current { background: #fdecea; }
        .frontier { color: #666; font-family: monospace; }
        .error { color: #e74c3c; }
    </style>
</head>
<body>
<div class="header"><h1>Graph Traversal Visualizer</h1></div>
<div class="container">
    <div class="card">
        <form method="GET" action="/">
            <div><label>Algorithm</label>
                <select name="algorithm">
                    {% for name in algorithms %}<option value="{{ name }}" {% if name == algorithm %}selected{% endif %}>{{ name|upper }}</option>{% endfor %}
                </select></div>
            <div><label>Graph</label>
                <select name="sample">
                    {% for name in samples %}<option value="{{ name }}" {% if name == sample %}selected{% endif %}>{{ name }}</option>{% endfor %}
                </select></div>
            <div><label>Start</label><input type="text" name="start" value="{{ start }}"></div>
            <div><label>End (Dijkstra)</label><input type="text" name="end" value="{{ end or '' }}"></div>
            <button type="submit">Run</button>
        </form>
    </div>
    {% if error %}<div class="card error">{{ error }}</div>{% else %}
    <div class="card">
        <a class="btn {% if step == 0 %}disabled{% endif %}" href="{{ nav_url(step - 1) }}">Prev</a>
        <span>Step {{ step }} / {{ total }}</span>
        <a class="btn {% if step >= total %}disabled{% endif %}" href="{{ nav_url(step + 1) }}">Next</a>
        <p style="margin-top:10px;">Order: {{ order|join(' → ') }}</p>
        {{ graph_html|safe }}
    </div>
    <div class="card">{{ frontier_html|safe }}</div>
    <div class="card steps">
        {% for s in steps %}
        <div class="step {{ s.kind.value }} {% if loop.index == step %}current{% endif %}">
            {{ loop.index }}. {{ s.message }}
            <span class="frontier">[{{ s.frontier_labels|join(', ') }}]</span>
        </div>
        {% endfor %}
    </div>
    {% endif %}
</div>
</body>
</html>
"""

# ====================
# Graph Payloads
# ====================


def _parse_weight(value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Edge weight must be a number, got {value!r}")
    return value


def build_graph(payload: dict) -> Graph:
    """
    Build a graph from an API payload.

    Uses `vertices` / `edges` when present, otherwise the named `sample`.
    Vertices are ids or {"id", "x", "y"} objects; edges are [u, v],
    [u, v, weight] or {"source", "target", "weight"} objects.

    Raises:
        ValueError: If the payload is malformed or the sample is unknown
    """
    if "vertices" not in payload and "edges" not in payload:
        return get_sample(payload.get("sample", "sample"))

    vertices = []
    positions = {}
    for item in payload.get("vertices") or []:
        if isinstance(item, dict):
            if "id" not in item:
                raise ValueError("Vertex objects need an 'id'")
            vertices.append(item["id"])
            if "x" in item and "y" in item:
                positions[item["id"]] = (float(item["x"]), float(item["y"]))
        else:
            vertices.append(item)

    edges = []
    for item in payload.get("edges") or []:
        if isinstance(item, dict):
            if "source" not in item or "target" not in item:
                raise ValueError("Edge objects need 'source' and 'target'")
            edges.append((item["source"], item["target"], _parse_weight(item.get("weight", DEFAULT_WEIGHT))))
        elif isinstance(item, list) and len(item) in (2, 3):
            weight = _parse_weight(item[2]) if len(item) == 3 else DEFAULT_WEIGHT
            edges.append((item[0], item[1], weight))
        else:
            raise ValueError(f"Malformed edge: {item!r}")

    return Graph.from_edges(edges, vertices=vertices or None, positions=positions)


# ====================
# Routes
# ====================


@app.route("/")
def index():
    algorithm = request.args.get("algorithm", "bfs")
    sample = request.args.get("sample", "sample")
    start = request.args.get("start", "A")
    end = request.args.get("end") or None
    step = request.args.get("step", type=int)

    context = dict(
        algorithms=ALGORITHMS,
        samples=list(SAMPLES),
        algorithm=algorithm,
        sample=sample,
        start=start,
        end=end,
        error=None,
    )

    try:
        graph = get_sample(sample)
        traversal = Traversal(graph, algorithm, start, end)
    except ValueError as e:
        context["error"] = str(e)
        return render_template_string(PAGE_TEMPLATE, **context), 400

    result = traversal.run()
    total = len(result.steps)
    step = total if step is None else max(0, min(step, total))

    def nav_url(target: int) -> str:
        params = {"algorithm": algorithm, "sample": sample, "start": start, "step": target}
        if end:
            params["end"] = end
        return url_for("index", **params)

    graph_fig = create_graph_figure(graph, result.steps, upto=step, title=f"{algorithm.upper()} from {start}")
    frontier_fig = create_frontier_chart(result.steps)

    context.update(
        step=step,
        total=total,
        steps=result.steps,
        order=result.order,
        nav_url=nav_url,
        graph_html=graph_fig.to_html(full_html=False, include_plotlyjs="cdn"),
        frontier_html=frontier_fig.to_html(full_html=False, include_plotlyjs=False),
    )
    return render_template_string(PAGE_TEMPLATE, **context)


@app.route("/api/sample/<name>")
def api_sample(name: str):
    try:
        graph = get_sample(name)
    except ValueError as e:
        return jsonify({"error": str(e)}), 404
    return jsonify(graph.to_dict())


@app.route("/api/traverse", methods=["POST"])
def api_traverse():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify({"error": "Expected a JSON object"}), 400

    if "start" not in payload:
        return jsonify({"error": "Missing 'start'"}), 400

    algorithm = payload.get("algorithm", "bfs")
    try:
        runner = get_algorithm(algorithm)
        graph = build_graph(payload)
    except (ValueError, TypeError) as e:
        return jsonify({"error": str(e)}), 400

    try:
        if algorithm == "dijkstra":
            result = runner(graph, payload["start"], payload.get("end"))
        else:
            result = runner(graph, payload["start"])
    except TypeError as e:
        # Unhashable vertex ids
        return jsonify({"error": str(e)}), 400

    logger.info(f"API {algorithm} from {payload['start']!r}: {len(result.steps)} steps")

    data = result.to_dict()
    data["graph"] = graph.to_dict()
    return jsonify(data)


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    app.run(host=FLASK_HOST, port=FLASK_PORT, debug=False)
