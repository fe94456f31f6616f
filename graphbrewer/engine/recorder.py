"""
recorder.py — Search Run Recorder & Metrics
===========================================
Records a complete shortest-path run (all Steps), then computes the
metrics shown next to a result.

Usage:
    rec = Recorder()
    rec.start(graph, source="s", target="e")
    metrics = rec.run_to_completion()     # exhausts the generator
    rec.outcome                           # PathFound / Unreachable
    rec.export()                          # JSON-friendly snapshot
"""

import logging
import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, Generator, List, Optional

from graphbrewer.algorithms.shortest_path import search_steps
from graphbrewer.algorithms.step import EXPAND, FOUND, RELAX, Step
from graphbrewer.graph import Graph
from graphbrewer.graph.node import NodeId

logger = logging.getLogger(__name__)


@dataclass
class RunMetrics:
    source:         Any   = None
    target:         Any   = None
    nodes_expanded: int   = 0
    edges_relaxed:  int   = 0
    path_length:    int   = 0          # number of edges on the final path
    path_cost:      float = 0.0
    total_steps:    int   = 0
    wall_time_ms:   float = 0.0
    path_found:     bool  = False


class Recorder:
    """
    Attributes:
        steps   : Full list of Steps from the run.
        metrics : RunMetrics, available after run_to_completion().
        outcome : PathFound / Unreachable, available after run_to_completion().
    """

    def __init__(self):
        self.steps:   List[Step]           = []
        self.metrics: Optional[RunMetrics] = None
        self.outcome: Any                  = None

        self._generator: Optional[Generator[Step, None, None]] = None
        self._source:    Optional[NodeId] = None
        self._target:    Optional[NodeId] = None

    def start(self, graph: Graph, source: NodeId, target: NodeId, track_frontier: bool = True) -> None:
        """Attach a fresh search generator for this run."""
        self._generator = search_steps(graph, source, target, track_frontier=track_frontier)
        self._source    = source
        self._target    = target
        self.steps      = []
        self.metrics    = None
        self.outcome    = None

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the generator, record every step, compute metrics."""
        if self._generator is None:
            raise RuntimeError("Call start() first.")

        started = time.monotonic()
        self.steps.extend(self._generator)
        wall_ms = (time.monotonic() - started) * 1000
        self._generator = None

        self.outcome = self.steps[-1].outcome
        self.metrics = self._compute_metrics(wall_ms)
        logger.debug("Recorded run %r → %r: %s", self._source, self._target, self.metrics)
        return self.metrics

    def export(self) -> Dict[str, Any]:
        return {
            "source":  self._source,
            "target":  self._target,
            "outcome": self.outcome.to_dict() if self.outcome is not None else None,
            "metrics": asdict(self.metrics) if self.metrics else {},
            "steps": [
                {
                    "step_number": s.step_number,
                    "kind":        s.kind,
                    "node":        s.node,
                    "neighbour":   s.neighbour,
                    "frontier":    [list(item) for item in s.frontier],
                    "processed":   s.processed,
                    "explanation": s.explanation,
                }
                for s in self.steps
            ],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        found = bool(self.outcome)
        path = self.outcome.path if found else []
        return RunMetrics(
            source=self._source,
            target=self._target,
            nodes_expanded=sum(1 for s in self.steps if s.kind in (EXPAND, FOUND)),
            edges_relaxed=sum(1 for s in self.steps if s.kind == RELAX),
            path_length=len(path) - 1 if len(path) > 1 else 0,
            path_cost=self.outcome.cost if found else 0.0,
            total_steps=len(self.steps),
            wall_time_ms=round(wall_ms, 2),
            path_found=found,
        )
