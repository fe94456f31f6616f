"""
step.py — Search Step Snapshot
==============================
The shortest-path engine is a generator that yields Step objects.  A Step is
a frozen picture of one decision the search made:

    • init       – source pushed onto the frontier
    • expand     – a node was popped and finalised
    • relax      – a neighbour got a new (cheaper) candidate state
    • skip       – a neighbour was not improved (already processed or not cheaper)
    • found      – the target was popped; `outcome` holds the PathFound
    • exhausted  – the frontier ran dry; `outcome` holds the Unreachable

Design decisions:
  - Step is a plain frozen dataclass.  The engine is the only writer; the
    recorder and any tracing caller are pure readers.
  - Steps carry the frontier as [(node, total)] in pop order so a trace can
    be printed without re-running the search.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from graphbrewer.algorithms.frontier import SearchState
from graphbrewer.graph.node import NodeId


INIT      = "init"
EXPAND    = "expand"
RELAX     = "relax"
SKIP      = "skip"
FOUND     = "found"
EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number : 0-based index of this step in the run.
        kind        : one of the event names above.
        node        : node being expanded (or the source for init).
        neighbour   : neighbour involved in a relax / skip step.
        state       : SearchState pushed or popped by this step.
        frontier    : [(node, total)] frontier contents after this step.
        processed   : number of nodes finalised so far.
        explanation : one-line human-readable description.
        outcome     : PathFound / Unreachable on the final step, else None.
    """

    step_number: int
    kind:        str
    node:        Optional[NodeId]               = None
    neighbour:   Optional[NodeId]               = None
    state:       Optional[SearchState]          = None
    frontier:    List[Tuple[NodeId, float]]     = field(default_factory=list)
    processed:   int                            = 0
    explanation: str                            = ""
    outcome:     Any                            = None

    @property
    def is_final(self) -> bool:
        return self.kind in (FOUND, EXHAUSTED)
