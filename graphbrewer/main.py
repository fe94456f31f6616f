"""
main.py — graphbrewer JSON API
==============================
Small Flask server that drives the public Graph API.  It is a demo harness:
everything it does goes through Graph's own methods.

Routes:
  GET    /                          – service info
  GET    /api/graph                 – current graph
  POST   /api/graph/reset           – start from an empty graph
  POST   /api/graph/sample          – load a sample graph ("small" / "vienna")
  POST   /api/nodes                 – add / update a node
  GET    /api/nodes/<id>            – node attributes
  DELETE /api/nodes/<id>            – delete a node and its edges
  GET    /api/nodes/<id>/neighbors  – neighbour ids
  POST   /api/edges                 – add / overwrite an edge
  GET    /api/edges?from=&to=       – edge cost
  DELETE /api/edges                 – delete an edge
  POST   /api/path                  – shortest path + run metrics
  POST   /api/path/cost             – cost of a given path

State management:
  Each browser session gets its own Graph, kept in process memory and
  looked up through a random workspace id stored in the Flask session.
  A workspace is only allocated by a route that changes the graph, and at
  most MAX_WORKSPACES are kept (least recently used goes first).
  Nothing is persisted; restarting the server starts every session over.
"""

import logging
import math
import os
import secrets
from collections import OrderedDict
from dataclasses import asdict
from numbers import Real
from typing import Any, Dict, Mapping, Optional

from flask import Flask, current_app, jsonify, request, session

from graphbrewer.engine import Recorder
from graphbrewer.graph import Graph
from graphbrewer.log import configure_logging
from graphbrewer.samples import SAMPLES, get_sample

logger = logging.getLogger(__name__)

WORKSPACES_KEY = "graphbrewer.workspaces"


class BadRequest(Exception):
    def __init__(self, message: str, status: int = 400):
        super().__init__(message)
        self.message = message
        self.status = status


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_graph(create: bool = False) -> Graph:
    """
    Graph for the current session.

    Read-only routes pass create=False: a session without a workspace gets a
    throwaway empty Graph and nothing is stored.  Mutating routes pass
    create=True, which allocates a workspace on first use.  The least
    recently used workspace is evicted once MAX_WORKSPACES is reached.
    """
    workspaces: "OrderedDict[str, Graph]" = current_app.extensions[WORKSPACES_KEY]
    token = session.get("workspace")
    if token is not None and token in workspaces:
        workspaces.move_to_end(token)
        return workspaces[token]
    if not create:
        return Graph()

    token = secrets.token_hex(16)
    session["workspace"] = token
    workspaces[token] = Graph()
    while len(workspaces) > current_app.config["MAX_WORKSPACES"]:
        evicted, _ = workspaces.popitem(last=False)
        logger.info("Evicted workspace %s", evicted)
    logger.debug("New workspace %s", token)
    return workspaces[token]


def save_graph(graph: Graph) -> None:
    get_graph(create=True)
    current_app.extensions[WORKSPACES_KEY][session["workspace"]] = graph


def json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise BadRequest("Request body must be a JSON object")
    return data


def require(data: Mapping[str, Any], key: str) -> Any:
    if data.get(key) is None:
        raise BadRequest(f"Missing field: {key}")
    return data[key]


def node_id_of(value: Any, key: str) -> str:
    """Node ids travel as strings; numbers are accepted and stringified."""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise BadRequest(f"Field {key} must be a string node id")
    return str(value)


def require_id(data: Mapping[str, Any], key: str) -> str:
    return node_id_of(require(data, key), key)


def optional_number(data: Mapping[str, Any], key: str) -> Optional[Real]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, Real):
        raise BadRequest(f"Field {key} must be a number")
    if not value >= 0 or math.isinf(value):
        raise BadRequest(f"Field {key} must be a finite non-negative number")
    return value


def graph_payload(graph: Graph) -> Dict[str, Any]:
    payload = graph.to_dict()
    payload["node_count"] = graph.node_count()
    payload["edge_count"] = graph.edge_count()
    return payload


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    configure_logging((config or {}).get("LOG_LEVEL"))

    app = Flask(__name__)
    app.secret_key = os.environ.get("SECRET_KEY") or secrets.token_hex(32)
    if config:
        app.config.update(config)
    app.config.setdefault("MAX_WORKSPACES", 1024)
    app.extensions[WORKSPACES_KEY] = OrderedDict()

    @app.errorhandler(BadRequest)
    def handle_bad_request(exc: BadRequest):
        return jsonify({"error": exc.message}), exc.status

    @app.route("/")
    def index():
        return jsonify({
            "service": "graphbrewer",
            "samples": sorted(SAMPLES),
        })

    # ----------------------------------------------------------------------
    # API: Graph
    # ----------------------------------------------------------------------
    @app.route("/api/graph", methods=["GET"])
    def api_graph():
        return jsonify(graph_payload(get_graph()))

    @app.route("/api/graph/reset", methods=["POST"])
    def api_graph_reset():
        g = Graph()
        save_graph(g)
        return jsonify(graph_payload(g))

    @app.route("/api/graph/sample", methods=["POST"])
    def api_graph_sample():
        name = json_body().get("name", "small")
        if not isinstance(name, str):
            raise BadRequest("Field name must be a string")
        g = get_sample(name)
        if g is None:
            return jsonify({"error": f"Unknown sample: {name}", "samples": sorted(SAMPLES)}), 400
        save_graph(g)
        logger.info("Loaded sample %r (%d nodes)", name, g.node_count())
        return jsonify(graph_payload(g))

    # ----------------------------------------------------------------------
    # API: Nodes
    # ----------------------------------------------------------------------
    @app.route("/api/nodes", methods=["POST"])
    def api_add_node():
        data = json_body()
        node_id = require_id(data, "id")
        attrs: Dict[str, Any] = {}
        if "heuristic_cost" in data:
            attrs["heuristic_cost"] = optional_number(data, "heuristic_cost") or 0
        if "label" in data:
            attrs["label"] = data["label"]
        node = get_graph(create=True).add_node(node_id, **attrs)
        return jsonify(node.to_dict())

    @app.route("/api/nodes/<node_id>", methods=["GET"])
    def api_get_node(node_id):
        node = get_graph().get_node(node_id)
        if node is None:
            return jsonify({"error": "Node not found", "id": node_id}), 404
        return jsonify(node.to_dict())

    @app.route("/api/nodes/<node_id>", methods=["DELETE"])
    def api_delete_node(node_id):
        get_graph().delete_node(node_id)
        return jsonify({"deleted": node_id})

    @app.route("/api/nodes/<node_id>/neighbors", methods=["GET"])
    def api_neighbors(node_id):
        g = get_graph()
        if node_id not in g:
            return jsonify({"error": "Node not found", "id": node_id}), 404
        return jsonify({"id": node_id, "neighbors": sorted(g.get_neighbors(node_id))})

    # ----------------------------------------------------------------------
    # API: Edges
    # ----------------------------------------------------------------------
    @app.route("/api/edges", methods=["POST"])
    def api_add_edge():
        data = json_body()
        source = require_id(data, "from")
        target = require_id(data, "to")
        cost = optional_number(data, "cost")
        edge = get_graph(create=True).add_edge(source, target, cost)
        return jsonify(edge.to_dict())

    @app.route("/api/edges", methods=["GET"])
    def api_get_edge():
        source = request.args.get("from")
        target = request.args.get("to")
        if not source or not target:
            raise BadRequest("Query parameters 'from' and 'to' are required")
        cost = get_graph().get_edge(source, target)
        if cost is None:
            return jsonify({"error": "Edge not found", "from": source, "to": target}), 404
        return jsonify({"from": source, "to": target, "cost": cost})

    @app.route("/api/edges", methods=["DELETE"])
    def api_delete_edge():
        data = json_body()
        source = require_id(data, "from")
        target = require_id(data, "to")
        get_graph().delete_edge(source, target)
        return jsonify({"deleted": {"from": source, "to": target}})

    # ----------------------------------------------------------------------
    # API: Paths
    # ----------------------------------------------------------------------
    @app.route("/api/path", methods=["POST"])
    def api_path():
        data = json_body()
        source = require_id(data, "from")
        target = require_id(data, "to")

        rec = Recorder()
        rec.start(get_graph(), source, target, track_frontier=bool(data.get("trace")))
        metrics = rec.run_to_completion()

        body = rec.outcome.to_dict()
        body["metrics"] = asdict(metrics)
        if data.get("trace"):
            body["steps"] = rec.export()["steps"]
        if not rec.outcome:
            body["error"] = "No path found"
            return jsonify(body), 404
        return jsonify(body)

    @app.route("/api/path/cost", methods=["POST"])
    def api_path_cost():
        data = json_body()
        path = require(data, "path")
        if not isinstance(path, list):
            raise BadRequest("Field path must be a list of node ids")
        node_ids = [node_id_of(n, "path") for n in path]
        result = get_graph().path_costs(node_ids, bool(data.get("include_node_costs")))
        body = result.to_dict()
        if not result:
            body["error"] = "Broken path"
            return jsonify(body), 422
        return jsonify(body)

    return app


def main() -> None:
    app = create_app()
    port = int(os.environ.get("PORT", "5000"))
    logger.info("graphbrewer API listening on http://localhost:%d", port)
    app.run(debug=False, port=port)


if __name__ == "__main__":
    main()
