"""
edge.py — Undirected Edge View
==============================
The graph stores every undirected edge as two half-edges, one under each
endpoint.  Edge is the read-only value callers get back when they ask the
graph about an edge; it is never used to mutate adjacency.

Design decisions:
  - `source` and `target` are node ids, NOT Node references.
  - Two edges are equal when they connect the same pair with the same cost,
    regardless of which endpoint is called `source`.
"""

from graphbrewer.graph.node import NodeId


class Edge:
    """
    Attributes:
        source : One endpoint (the one passed first to add_edge).
        target : The other endpoint.
        cost   : Non-negative traversal cost, identical in both directions.
    """

    __slots__ = ("source", "target", "cost")

    def __init__(self, source: NodeId, target: NodeId, cost: float):
        object.__setattr__(self, "source", source)
        object.__setattr__(self, "target", target)
        object.__setattr__(self, "cost", cost)

    def __setattr__(self, name, value):
        raise AttributeError(f"Edge is immutable (tried to set {name!r})")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def connects(self, node_a: NodeId, node_b: NodeId) -> bool:
        """True if this edge links node_a ↔ node_b in either order."""
        return (self.source, self.target) in ((node_a, node_b), (node_b, node_a))

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "target": self.target,
            "cost":   self.cost,
        }

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.source!r} ↔ {self.target!r}, cost={self.cost})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.cost == other.cost and self.connects(other.source, other.target)

    def __hash__(self) -> int:
        return hash((frozenset((self.source, self.target)), self.cost))
