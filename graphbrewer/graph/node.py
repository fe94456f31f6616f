"""
node.py — Graph Node
====================
A node is identified by an opaque, hashable id and carries two attributes:

    • heuristic_cost – remaining-cost estimate used to order the search frontier
    • label          – free annotation, never read by the algorithms

Design decisions:
  - Nodes are immutable.  Re-adding a node with new attributes swaps in a
    fresh Node object, so a caller holding an old one never sees it change.
  - Equality is by value (id + attributes), which lets tests compare the
    result of two add_node calls directly.
"""

from typing import Any, Hashable, Optional


NodeId = Hashable


class Node:
    """
    Attributes:
        id             : Unique identifier inside one Graph.
        heuristic_cost : Non-negative estimate of the remaining cost to a target.
        label          : Optional human-readable annotation.
    """

    __slots__ = ("id", "heuristic_cost", "label")

    def __init__(self, node_id: NodeId, heuristic_cost: float = 0, label: Optional[Any] = None):
        if not heuristic_cost >= 0:
            raise ValueError(f"Node {node_id!r}: heuristic_cost must be non-negative, got {heuristic_cost}")
        object.__setattr__(self, "id", node_id)
        object.__setattr__(self, "heuristic_cost", heuristic_cost)
        object.__setattr__(self, "label", label)

    def __setattr__(self, name, value):
        raise AttributeError(f"Node is immutable (tried to set {name!r})")

    # ------------------------------------------------------------------
    # Rendering (JSON responses)
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":             self.id,
            "heuristic_cost": self.heuristic_cost,
            "label":          self.label,
        }

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id!r}, heuristic_cost={self.heuristic_cost}, label={self.label!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return (self.id, self.heuristic_cost, self.label) == (other.id, other.heuristic_cost, other.label)

    def __hash__(self) -> int:
        return hash((self.id, self.heuristic_cost))
