"""
graph.py — Undirected Weighted Graph
====================================
Single source of truth for nodes and edges.  The shortest-path engine only
reads it through get_node / neighbours.

Responsibilities:
  1. CRUD on nodes & edges                  (add / delete / get)
  2. Adjacency queries                      (neighbours, get_neighbors, edges, …)
  3. Path costing                           (path_costs)
  4. Shortest path                          (delegates to graphbrewer.algorithms)

Design decisions:
  - Nodes stored in a dict keyed by id:  `_nodes[node_id] → Node`.
  - Every undirected edge is stored as two half-edges:
        `_adj[a][b] = cost`  and  `_adj[b][a] = cost`
    Both halves are written and removed together inside add_edge /
    delete_edge / delete_node, and nothing outside this class can reach
    `_adj`, so the halves can never disagree.
  - A self-loop is a single half-edge `_adj[a][a]`.
  - Mutations happen in place.  `copy()` gives an independent snapshot for
    callers that need to keep an earlier version around.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Set, Tuple

from graphbrewer.algorithms.outcomes import BrokenPath, PathCost
from graphbrewer.graph.config import GraphConfig
from graphbrewer.graph.edge import Edge
from graphbrewer.graph.node import Node, NodeId

logger = logging.getLogger(__name__)

_UNSET = object()


class Graph:
    """
    Attributes:
        config : GraphConfig with the default edge cost and heuristic cost.
        nodes  : read-only view {node_id: Node}
        _adj   : {node_id: {neighbour_id: cost}}
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        self.config: GraphConfig                     = config or GraphConfig()
        self._nodes: Dict[NodeId, Node]              = {}
        self._adj:   Dict[NodeId, Dict[NodeId, float]] = {}

    @property
    def nodes(self) -> Mapping[NodeId, Node]:
        return MappingProxyType(self._nodes)

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def add_node(self, node_id: NodeId, *, heuristic_cost=_UNSET, label=_UNSET) -> Node:
        """
        Insert or update a node.

        With no attributes an existing node is left untouched and a new one
        gets the configured defaults.  When either attribute is given the
        stored attributes are replaced wholesale: whatever is left out goes
        back to its default, it is not merged with the old value.
        """
        existing = self._nodes.get(node_id)
        if heuristic_cost is _UNSET and label is _UNSET:
            if existing is not None:
                return existing
            node = Node(node_id, heuristic_cost=self.config.default_heuristic_cost)
        else:
            node = Node(
                node_id,
                heuristic_cost=self.config.default_heuristic_cost if heuristic_cost is _UNSET else heuristic_cost,
                label=None if label is _UNSET else label,
            )

        self._nodes[node_id] = node
        self._adj.setdefault(node_id, {})
        logger.debug("%s node %r (h=%s, label=%r)", "Update" if existing else "Add", node_id, node.heuristic_cost, node.label)
        return node

    def delete_node(self, node_id: NodeId) -> None:
        """Remove a node and every edge touching it.  No-op for an unknown id."""
        if node_id not in self._nodes:
            return
        for nbr in list(self._adj.get(node_id, {})):
            self._adj[nbr].pop(node_id, None)
        self._adj.pop(node_id, None)
        del self._nodes[node_id]
        logger.debug("Delete node %r", node_id)

    def get_node(self, node_id: NodeId) -> Optional[Node]:
        return self._nodes.get(node_id)

    def has_node(self, node_id: NodeId) -> bool:
        return node_id in self._nodes

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def add_edge(self, source: NodeId, target: NodeId, cost: Optional[float] = None) -> Edge:
        """
        Connect source ↔ target, creating missing endpoints with default
        attributes.  Adding an edge that already exists overwrites its cost
        on both sides.
        """
        if cost is None:
            cost = self.config.default_edge_cost
        if not cost >= 0:
            raise ValueError(f"Edge {source!r} ↔ {target!r}: cost must be non-negative, got {cost}")

        self.add_node(source)
        self.add_node(target)
        self._adj[source][target] = cost
        self._adj[target][source] = cost
        logger.debug("Set edge %r ↔ %r cost=%s", source, target, cost)
        return Edge(source, target, cost)

    def delete_edge(self, source: NodeId, target: NodeId) -> None:
        """Remove both half-edges.  Endpoints stay, even if they end up isolated."""
        removed = self._adj.get(source, {}).pop(target, None)
        self._adj.get(target, {}).pop(source, None)
        if removed is not None:
            logger.debug("Delete edge %r ↔ %r", source, target)

    def get_edge(self, source: NodeId, target: NodeId) -> Optional[float]:
        """Cost of the source → target half-edge, or None."""
        return self._adj.get(source, {}).get(target)

    def has_edge(self, source: NodeId, target: NodeId) -> bool:
        return target in self._adj.get(source, {})

    def edges(self) -> Iterator[Edge]:
        """Every undirected edge exactly once."""
        done: Set[NodeId] = set()
        for a, nbrs in self._adj.items():
            for b, cost in nbrs.items():
                if b not in done:
                    yield Edge(a, b, cost)
            done.add(a)

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: NodeId) -> List[Tuple[NodeId, float]]:
        """Return [(neighbour_id, cost)] for every adjacent node."""
        return list(self._adj.get(node_id, {}).items())

    def get_neighbors(self, node_id: NodeId) -> Set[NodeId]:
        return set(self._adj.get(node_id, {}))

    def degree(self, node_id: NodeId) -> int:
        return len(self._adj.get(node_id, {}))

    # ==================================================================
    # PATHS
    # ==================================================================
    def path_costs(self, path: Sequence[NodeId], include_node_costs: bool = False):
        """
        Cost of walking `path` as given.

        Returns PathCost with the summed edge costs (plus each visited node's
        heuristic_cost when `include_node_costs` is set), or BrokenPath for
        the first consecutive pair that is not connected.  A pair that names
        an unknown node counts as not connected.
        """
        if len(path) == 1 and path[0] not in self._nodes:
            return BrokenPath(path[0], path[0], 0)

        hops: List[float] = []
        for i in range(len(path) - 1):
            cost = self.get_edge(path[i], path[i + 1])
            if cost is None:
                return BrokenPath(path[i], path[i + 1], i)
            hops.append(cost)

        node_cost = sum(self._nodes[n].heuristic_cost for n in path) if include_node_costs else 0
        return PathCost(edge_cost=sum(hops), node_cost=node_cost, hops=hops)

    def shortest_path(self, source: NodeId, target: NodeId):
        """Cheapest path source → target: PathFound, or Unreachable."""
        from graphbrewer.algorithms.shortest_path import shortest_path

        return shortest_path(self, source, target)

    # ==================================================================
    # UTILITY
    # ==================================================================
    def copy(self) -> "Graph":
        g = Graph(config=self.config)
        g._nodes = dict(self._nodes)
        g._adj = {n: dict(nbrs) for n, nbrs in self._adj.items()}
        return g

    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self._nodes.values()],
            "edges": [e.to_dict() for e in self.edges()],
        }

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return sum(1 for _ in self.edges())

    def node_ids(self) -> List[NodeId]:
        return list(self._nodes.keys())

    def __contains__(self, node_id) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._nodes == other._nodes and self._adj == other._adj

    __hash__ = None

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"
