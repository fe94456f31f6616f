"""
shortest_path.py — Best-First Shortest Path
===========================================
Generator-based best-first search ordered by  cost_to + heuristic_cost.
With every heuristic at 0 this is exactly Dijkstra's algorithm.  With
non-zero heuristics it behaves like A*, but no admissibility check is done:
a heuristic that overestimates can make the search settle for a more
expensive path.  That is the caller's responsibility.

Yields a Step at:
  1. Initialise frontier with the source                →  init
  2. Pop the cheapest node and finalise it              →  expand
  3. Each neighbour candidate                           →  relax / skip
  4. Target popped, path rebuilt from predecessors      →  found
  5. Frontier empty                                     →  exhausted

`shortest_path()` drains the generator and returns only the outcome.
"""

import logging
from typing import Dict, Generator, List, TYPE_CHECKING

from graphbrewer.algorithms.frontier import PriorityFrontier, SearchState
from graphbrewer.algorithms.outcomes import PathFound, Unreachable
from graphbrewer.algorithms.step import EXHAUSTED, EXPAND, FOUND, INIT, RELAX, SKIP, Step
from graphbrewer.graph.node import NodeId

if TYPE_CHECKING:
    from graphbrewer.graph.graph import Graph

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def search_steps(
    graph: "Graph",
    source: NodeId,
    target: NodeId,
    track_frontier: bool = True,
) -> Generator[Step, None, None]:
    """
    Args:
        graph          : The graph to search.
        source         : Start node id.
        target         : Goal node id.
        track_frontier : Copy the frontier into every Step.  Turn off when only
                         the final outcome matters.
    """
    step_no = 0
    expanded = 0

    def frontier_view():
        return frontier.snapshot() if track_frontier else []

    src_node = graph.get_node(source)
    if src_node is None or graph.get_node(target) is None:
        missing = source if src_node is None else target
        logger.info("Shortest path %r → %r: node %r is not in the graph", source, target, missing)
        outcome = Unreachable(source, target, expanded=0)
        yield Step(
            step_number=step_no,
            kind=EXHAUSTED,
            explanation=f"'{missing}' is not in the graph.",
            outcome=outcome,
        )
        return

    processed: Dict[NodeId, SearchState] = {}
    frontier = PriorityFrontier()
    start = SearchState(cost_to=0, hop_cost=0, heuristic_cost=src_node.heuristic_cost, predecessor=None)
    frontier.push(source, start)

    logger.debug("Shortest path %r → %r: start", source, target)
    yield Step(
        step_number=step_no,
        kind=INIT,
        node=source,
        state=start,
        frontier=frontier_view(),
        explanation=f"Push source '{source}' with cost 0, h={start.heuristic_cost}.",
    )
    step_no += 1

    # --- main loop ---
    while frontier:
        node, state = frontier.pop()
        processed[node] = state
        expanded += 1

        if node == target:
            path = _reconstruct(processed, target)
            outcome = PathFound(path=path, cost=state.cost_to, expanded=expanded)
            logger.debug(
                "Shortest path %r → %r: cost=%s hops=%d expanded=%d",
                source, target, state.cost_to, len(path) - 1, expanded,
            )
            yield Step(
                step_number=step_no,
                kind=FOUND,
                node=node,
                state=state,
                frontier=frontier_view(),
                processed=len(processed),
                explanation=f"Target '{target}' reached with cost {state.cost_to}. Path: {' → '.join(map(str, path))}",
                outcome=outcome,
            )
            return

        yield Step(
            step_number=step_no,
            kind=EXPAND,
            node=node,
            state=state,
            frontier=frontier_view(),
            processed=len(processed),
            explanation=f"Pop '{node}': cost_to={state.cost_to}, h={state.heuristic_cost}, total={state.total}.",
        )
        step_no += 1

        # -- relax neighbours --
        for nbr, cost in graph.neighbours(node):
            if nbr in processed:
                yield Step(
                    step_number=step_no,
                    kind=SKIP,
                    node=node,
                    neighbour=nbr,
                    frontier=frontier_view(),
                    processed=len(processed),
                    explanation=f"Edge {node}→{nbr}: '{nbr}' already processed.",
                )
                step_no += 1
                continue

            candidate = SearchState(
                cost_to=state.cost_to + cost,
                hop_cost=cost,
                heuristic_cost=graph.get_node(nbr).heuristic_cost,
                predecessor=node,
            )
            if frontier.push(nbr, candidate):
                kind = RELAX
                explanation = f"Relax {node}→{nbr}: cost_to={candidate.cost_to}, total={candidate.total}."
            else:
                kind = SKIP
                explanation = (
                    f"Edge {node}→{nbr}: cost_to={candidate.cost_to} is no better than "
                    f"{frontier.get(nbr).cost_to}."
                )
            yield Step(
                step_number=step_no,
                kind=kind,
                node=node,
                neighbour=nbr,
                state=candidate,
                frontier=frontier_view(),
                processed=len(processed),
                explanation=explanation,
            )
            step_no += 1

    # --- not found ---
    logger.info("Shortest path %r → %r: unreachable after expanding %d nodes", source, target, expanded)
    yield Step(
        step_number=step_no,
        kind=EXHAUSTED,
        processed=len(processed),
        explanation=f"Frontier empty. '{target}' is not reachable from '{source}'.",
        outcome=Unreachable(source, target, expanded=expanded),
    )


def shortest_path(graph: "Graph", source: NodeId, target: NodeId):
    """Run the search to completion and return PathFound or Unreachable."""
    last = None
    for last in search_steps(graph, source, target, track_frontier=False):
        pass
    return last.outcome


# ---------------------------------------------------------------------------
def _reconstruct(processed: Dict[NodeId, SearchState], target: NodeId) -> List[NodeId]:
    path, cur = [], target
    while cur is not None:
        path.append(cur)
        cur = processed[cur].predecessor
    path.reverse()
    return path
