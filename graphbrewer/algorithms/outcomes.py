"""
outcomes.py — Typed Results
===========================
Path lookups return one of two values instead of raising:

    shortest_path  →  PathFound   | Unreachable
    path_costs     →  PathCost    | BrokenPath

Every outcome has `ok` and is truthy only on success, so callers can branch
with a plain `if result:` or use `isinstance`.  `unwrap()` returns the
payload on success and raises the matching `graphbrewer.errors` exception on
failure.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from graphbrewer.errors import BrokenPathError, NoPathError
from graphbrewer.graph.node import NodeId


@dataclass(frozen=True)
class PathFound:
    """
    Attributes:
        path     : Node ids from source to target, both included.
        cost     : Sum of edge costs along `path`.
        expanded : Number of nodes popped from the frontier.
    """

    path:     List[NodeId]
    cost:     float
    expanded: int = 0

    ok = True

    def __bool__(self) -> bool:
        return True

    def unwrap(self) -> List[NodeId]:
        return list(self.path)

    def to_dict(self) -> Dict[str, Any]:
        return {"found": True, "path": list(self.path), "cost": self.cost, "expanded": self.expanded}


@dataclass(frozen=True)
class Unreachable:
    """No path connects `source` and `target` (or one of them is not in the graph)."""

    source:   NodeId
    target:   NodeId
    expanded: int = 0

    ok = False

    def __bool__(self) -> bool:
        return False

    def unwrap(self):
        raise NoPathError(self.source, self.target)

    def to_dict(self) -> Dict[str, Any]:
        return {"found": False, "source": self.source, "target": self.target, "expanded": self.expanded}


@dataclass(frozen=True)
class PathCost:
    """
    Attributes:
        edge_cost : Sum of edge costs over consecutive pairs.
        node_cost : Sum of the visited nodes' heuristic costs (0 unless requested).
        hops      : Per-pair edge costs, in path order.
    """

    edge_cost: float
    node_cost: float = 0
    hops:      List[float] = field(default_factory=list)

    ok = True

    @property
    def total(self) -> float:
        return self.edge_cost + self.node_cost

    def __bool__(self) -> bool:
        return True

    def unwrap(self) -> float:
        return self.total

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok":        True,
            "total":     self.total,
            "edge_cost": self.edge_cost,
            "node_cost": self.node_cost,
            "hops":      list(self.hops),
        }


@dataclass(frozen=True)
class BrokenPath:
    """Consecutive pair `path[index]`, `path[index + 1]` has no connecting edge."""

    source: NodeId
    target: NodeId
    index:  int

    ok = False

    def __bool__(self) -> bool:
        return False

    def unwrap(self):
        raise BrokenPathError(self.source, self.target, self.index)

    def to_dict(self) -> Dict[str, Any]:
        return {"ok": False, "source": self.source, "target": self.target, "index": self.index}
