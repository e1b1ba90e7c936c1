"""graphbench.server.app - Flask app factory and REST API routes.

This is a THIN REST wrapper for the graph editor: it holds the editor's
current graph, hands snapshots of it to the analyzers, and moves the
persisted format in and out. No analysis logic lives here.

State:
    _state = {"graph": graph, "graph_path": path, "config": config,
              "build_time": time.time()}
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any

from flask import Flask, jsonify, request
from flask_cors import CORS

from graphbench.analysis import AnalysisKind, run_analysis
from graphbench.commands.stats import graph_stats
from graphbench.exceptions import ConfigurationError, GraphLoadError
from graphbench.graph import Graph, graph_from_dict, graph_to_dict, save_graph

logger = logging.getLogger(__name__)


def _int_arg(name: str) -> int | None:
    """Read an optional positive integer query parameter.

    Raises:
        ValueError: If present but not a positive integer.
    """
    raw = request.args.get(name)
    if raw is None or raw == "":
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from None
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}")
    return value


def create_app(
    graph: Graph,
    config: dict[str, Any],
    graph_path: Path | None = None,
) -> Flask:
    """Create the Flask application with REST API routes.

    Args:
        graph: Initial graph held by the server.
        config: graphbench configuration dict.
        graph_path: File that POST /api/save writes to.

    Returns:
        Configured Flask application.
    """
    app = Flask(__name__)

    CORS(app)

    # The editor polls; never serve stale analysis results
    @app.after_request
    def _no_cache(response):
        response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, max-age=0"
        response.headers["Pragma"] = "no-cache"
        response.headers["Expires"] = "0"
        return response

    _state: dict[str, Any] = {
        "graph": graph,
        "graph_path": Path(graph_path) if graph_path is not None else None,
        "config": config,
        "build_time": time.time(),
    }

    # ─────────────────────────────────────────────────────────────────
    # Graph endpoints
    # ─────────────────────────────────────────────────────────────────

    @app.route("/api/status")
    def api_status():
        """GET /api/status - Graph counts and load time."""
        status = graph_stats(_state["graph"])
        status["graph_path"] = str(_state["graph_path"]) if _state["graph_path"] else None
        status["build_time"] = _state["build_time"]
        return jsonify(status)

    @app.route("/api/graph", methods=["GET"])
    def api_get_graph():
        """GET /api/graph - Current graph in the persisted format."""
        payload = graph_to_dict(_state["graph"])
        payload["stats"] = graph_stats(_state["graph"])
        return jsonify(payload)

    @app.route("/api/graph", methods=["PUT"])
    def api_put_graph():
        """PUT /api/graph - Replace the held graph."""
        data = request.get_json(force=True, silent=True)
        if data is None:
            return jsonify({"success": False, "error": "Request body must be JSON"}), 400
        try:
            new_graph = graph_from_dict(data)
        except GraphLoadError as e:
            return jsonify({"success": False, "error": str(e)}), 400
        _state["graph"] = new_graph
        _state["build_time"] = time.time()
        return jsonify({"success": True, "stats": graph_stats(new_graph)})

    @app.route("/api/save", methods=["POST"])
    def api_save():
        """POST /api/save - Write the held graph to its file."""
        if _state["graph_path"] is None:
            return jsonify({"success": False, "error": "No graph file configured"}), 400
        try:
            written = save_graph(_state["graph"], _state["graph_path"])
        except OSError as e:
            logger.error("Saving graph failed: %s", e)
            return jsonify({"success": False, "error": str(e)}), 500
        _state["graph_path"] = written
        return jsonify({"success": True, "path": str(written)})

    # ─────────────────────────────────────────────────────────────────
    # Analysis endpoints
    # ─────────────────────────────────────────────────────────────────

    @app.route("/api/analyze/<kind>", methods=["GET", "POST"])
    def api_analyze(kind: str):
        """Run one analyzer.

        GET analyzes the held graph. POST analyzes the graph in the body
        (persisted format) without replacing the held one.

        Query parameters (communities only):
            start_k: Smallest core order
            threshold: Expansion threshold
        """
        try:
            analysis = AnalysisKind.from_name(kind)
        except ValueError as e:
            return jsonify({"error": str(e)}), 404

        target = _state["graph"]
        if request.method == "POST":
            data = request.get_json(force=True, silent=True)
            if data is None:
                return jsonify({"error": "Request body must be JSON"}), 400
            try:
                target = graph_from_dict(data)
            except GraphLoadError as e:
                return jsonify({"error": str(e)}), 400

        try:
            result = run_analysis(
                target,
                analysis,
                start_k=_int_arg("start_k"),
                expansion_threshold=_int_arg("threshold"),
                config=_state["config"],
            )
        except (ConfigurationError, ValueError) as e:
            return jsonify({"error": str(e)}), 400
        return jsonify(result.to_dict())

    return app
