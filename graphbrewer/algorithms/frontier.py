"""
frontier.py — Decrease-Key Priority Frontier
=============================================
Holds every node the search has discovered but not yet finalised, each with
the cheapest SearchState known so far, and hands them back in ascending
order of  cost_to + heuristic_cost.

    frontier = PriorityFrontier()
    frontier.push("a", SearchState(cost_to=3, hop_cost=3, heuristic_cost=0, predecessor="s"))
    node, state = frontier.pop()

Design decisions:
  - Binary heap (heapq) with lazy invalidation.  A decrease-key pushes a new
    heap record and bumps the entry's sequence number; the old record stays
    in the heap and is discarded when it surfaces.
  - Ties on total cost go to the entry whose current state was stored first.
    A decrease-key counts as a new store, so it goes to the back of its tie
    group.  For a fixed push sequence the pop order is fully deterministic.
  - pop() on an empty frontier returns None rather than raising.
"""

import heapq
import itertools
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from graphbrewer.graph.node import NodeId


@dataclass(frozen=True)
class SearchState:
    """
    Attributes:
        cost_to        : accumulated path cost from the source.
        hop_cost       : cost of the edge just taken (0 for the source).
        heuristic_cost : the node's remaining-cost estimate.
        predecessor    : node id this state was reached from, None for the source.
    """

    cost_to:        float
    hop_cost:       float = 0
    heuristic_cost: float = 0
    predecessor:    Optional[NodeId] = None

    @property
    def total(self) -> float:
        return self.cost_to + self.heuristic_cost


class PriorityFrontier:

    def __init__(self):
        self._entries: Dict[NodeId, Tuple[SearchState, int]] = {}   # node → (state, seq)
        self._heap:    List[Tuple[float, int, NodeId]]        = []   # (total, seq, node)
        self._counter = itertools.count()

    # ------------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------------
    def push(self, node: NodeId, state: SearchState) -> bool:
        """
        Insert `node`, or lower its stored cost_to.

        Returns True when the stored state changed, False when the call was a
        no-op because the existing state is at least as cheap.
        """
        current = self._entries.get(node)
        if current is not None and not state.cost_to < current[0].cost_to:
            return False

        seq = next(self._counter)
        self._entries[node] = (state, seq)
        heapq.heappush(self._heap, (state.total, seq, node))
        return True

    def pop(self) -> Optional[Tuple[NodeId, SearchState]]:
        """Remove and return (node, state) with the lowest total, or None if empty."""
        while self._heap:
            _, seq, node = heapq.heappop(self._heap)
            entry = self._entries.get(node)
            if entry is None or entry[1] != seq:
                continue        # superseded by a decrease-key
            del self._entries[node]
            return node, entry[0]
        return None

    def peek(self) -> Optional[Tuple[NodeId, SearchState]]:
        """Like pop() but leaves the entry in place."""
        while self._heap:
            _, seq, node = self._heap[0]
            entry = self._entries.get(node)
            if entry is not None and entry[1] == seq:
                return node, entry[0]
            heapq.heappop(self._heap)
        return None

    # ------------------------------------------------------------------
    # Read helpers
    # ------------------------------------------------------------------
    def get(self, node: NodeId) -> Optional[SearchState]:
        entry = self._entries.get(node)
        return entry[0] if entry is not None else None

    def snapshot(self) -> List[Tuple[NodeId, float]]:
        """[(node, total)] for every live entry, in the order pop() would yield them."""
        ordered = sorted((state.total, seq, node) for node, (state, seq) in self._entries.items())
        return [(node, total) for total, _, node in ordered]

    def __contains__(self, node: NodeId) -> bool:
        return node in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        return f"PriorityFrontier(size={len(self)})"
