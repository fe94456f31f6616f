"""
algorithms/
-----------
Shortest-path engine and the frontier it drains.

    from graphbrewer.algorithms import shortest_path, search_steps
    from graphbrewer.algorithms import PriorityFrontier, SearchState
"""

from graphbrewer.algorithms.frontier      import PriorityFrontier, SearchState
from graphbrewer.algorithms.outcomes      import PathFound, Unreachable, PathCost, BrokenPath
from graphbrewer.algorithms.step          import Step
from graphbrewer.algorithms.shortest_path import shortest_path, search_steps

__all__ = [
    "PriorityFrontier", "SearchState",
    "PathFound",        "Unreachable",
    "PathCost",         "BrokenPath",
    "Step",
    "shortest_path",    "search_steps",
]
