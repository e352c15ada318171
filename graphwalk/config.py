"""
Configuration constants for the graph traversal visualizer.

All canvas dimensions, traversal defaults, and tunable parameters are defined here.
Secrets are loaded from environment variables - never hardcode them.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of graphwalk/
PROJECT_ROOT = Path(__file__).parent.parent

# Local overrides (SECRET_KEY, LOG_LEVEL, ...) are read before any setting below
load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Canvas Configuration
# =============================================================================

# Drawing surface size used for default vertex placement
CANVAS_WIDTH = 600
CANVAS_HEIGHT = 400

# Randomly placed vertices keep this distance from every canvas border
CANVAS_MARGIN = 50

# Vertex marker radius (renderers only)
NODE_RADIUS = 25

# Edge stroke width (renderers only)
EDGE_WIDTH = 3

# =============================================================================
# Traversal Configuration
# =============================================================================

# Weight given to edges added without an explicit weight
DEFAULT_WEIGHT = 1

# Algorithms exposed by the engine registry
ALGORITHMS = ("dfs", "bfs", "dijkstra")

# Pause between steps when a consumer replays a traversal (milliseconds).
# The engine never sleeps; only adapters honour this.
STEP_DELAY_MS = int(os.environ.get("GRAPHWALK_STEP_DELAY_MS", "0"))

# =============================================================================
# Visualization Configuration
# =============================================================================

# Vertex colours derived from the step stream
COLOR_IDLE = "#00f5ff"
COLOR_FRONTIER = "#f39c12"
COLOR_VISITED = "#2ecc71"
COLOR_CURRENT = "#e74c3c"
COLOR_EDGE = "#95a5a6"

# =============================================================================
# Web App Configuration
# =============================================================================

FLASK_SECRET_KEY = os.environ.get("SECRET_KEY", "graphwalk-dev-key")
FLASK_HOST = os.environ.get("GRAPHWALK_HOST", "127.0.0.1")
FLASK_PORT = int(os.environ.get("GRAPHWALK_PORT", "7860"))

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
