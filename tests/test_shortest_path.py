"""
Unit tests for the shortest-path engine.
"""

import pytest

from graphbrewer import Graph, NoPathError, PathFound, Unreachable
from graphbrewer.algorithms import search_steps, shortest_path
from graphbrewer.algorithms.step import EXHAUSTED, EXPAND, FOUND, INIT, RELAX
from graphbrewer.samples import small_graph, vienna_graph


class TestDijkstra:
    """All heuristics zero: plain Dijkstra."""

    def test_finds_cheapest_route(self, route_graph):
        """s → e goes through b, not the c / d detour."""
        result = route_graph.shortest_path("s", "e")
        assert isinstance(result, PathFound)
        assert result.path == ["s", "a", "b", "e"]
        assert result.cost == 13

    def test_cost_matches_path_costs(self, route_graph):
        result = route_graph.shortest_path("s", "e")
        assert route_graph.path_costs(result.path).total == result.cost

    def test_reverse_direction(self, route_graph):
        """Undirected edges: e → s is the same route reversed."""
        result = route_graph.shortest_path("e", "s")
        assert result.path == ["e", "b", "a", "s"]
        assert result.cost == 13

    def test_self_path(self, route_graph):
        """from == to returns a one-element path with zero cost."""
        result = route_graph.shortest_path("c", "c")
        assert result.path == ["c"]
        assert result.cost == 0

    def test_self_path_isolated_node(self, graph):
        graph.add_node("x")
        assert graph.shortest_path("x", "x").path == ["x"]

    def test_cheaper_path_found_late(self):
        """A direct but expensive edge loses to a longer cheap route."""
        g = Graph()
        g.add_edge("a", "z", 100)
        g.add_edge("a", "b", 1)
        g.add_edge("b", "c", 1)
        g.add_edge("c", "z", 1)
        result = g.shortest_path("a", "z")
        assert result.path == ["a", "b", "c", "z"]
        assert result.cost == 3

    def test_self_loop_is_ignored(self, route_graph):
        route_graph.add_edge("a", "a", 0)
        assert route_graph.shortest_path("s", "e").path == ["s", "a", "b", "e"]

    def test_small_sample(self):
        result = small_graph().shortest_path("dp1", "cust")
        assert result.path == ["dp1", "dp5", "dp6", "dp7", "cust"]
        assert result.cost == 20

    def test_vienna_sample(self):
        result = vienna_graph().shortest_path("dp0", "dp22")
        assert result.path == ["dp0", "dp19", "dp20", "dp21", "dp5", "dp22"]
        assert result.cost == 530

    def test_module_function_matches_method(self, route_graph):
        assert shortest_path(route_graph, "s", "e") == route_graph.shortest_path("s", "e")


class TestUnreachable:
    """Failures are values, not exceptions."""

    def test_disconnected_components(self, split_graph):
        result = split_graph.shortest_path("a", "y")
        assert isinstance(result, Unreachable)
        assert not result
        assert (result.source, result.target) == ("a", "y")
        assert result.expanded == 3

    def test_unknown_endpoint(self, route_graph):
        result = route_graph.shortest_path("s", "nowhere")
        assert isinstance(result, Unreachable)
        assert result.target == "nowhere"

    def test_unknown_source(self, route_graph):
        assert isinstance(route_graph.shortest_path("nowhere", "s"), Unreachable)

    def test_after_edge_removed(self, route_graph):
        route_graph.delete_edge("a", "b")
        assert isinstance(route_graph.shortest_path("s", "e"), Unreachable)

    def test_unwrap_raises(self, split_graph):
        with pytest.raises(NoPathError) as excinfo:
            split_graph.shortest_path("a", "x").unwrap()
        assert excinfo.value.source == "a"
        assert excinfo.value.target == "x"

    def test_unwrap_success(self, route_graph):
        assert route_graph.shortest_path("s", "b").unwrap() == ["s", "a", "b"]


class TestHeuristics:
    """Non-zero node heuristics steer the search."""

    def test_heuristic_reduces_expansions(self):
        """A helpful heuristic expands fewer nodes and keeps the same answer."""
        def build(with_h):
            g = Graph()
            g.add_edge("s", "a", 1)
            g.add_edge("a", "t", 1)
            g.add_edge("s", "x", 1)
            g.add_edge("x", "y", 1)
            if with_h:
                g.add_node("x", heuristic_cost=10)
                g.add_node("y", heuristic_cost=10)
            return g

        plain = build(False).shortest_path("s", "t")
        guided = build(True).shortest_path("s", "t")
        assert plain.path == guided.path == ["s", "a", "t"]
        assert guided.expanded < plain.expanded

    def test_overestimating_heuristic_can_be_suboptimal(self):
        """No admissibility check: a bad heuristic may settle for a costlier path."""
        g = Graph()
        g.add_edge("s", "a", 1)
        g.add_edge("a", "t", 1)
        g.add_edge("s", "t", 5)
        g.add_node("a", heuristic_cost=100)
        result = g.shortest_path("s", "t")
        assert result.path == ["s", "t"]
        assert result.cost == 5


class TestSteps:
    """The step trace behind shortest_path."""

    def test_first_and_last_steps(self, route_graph):
        steps = list(search_steps(route_graph, "s", "e"))
        assert steps[0].kind == INIT
        assert steps[0].frontier == [("s", 0)]
        assert steps[-1].kind == FOUND
        assert steps[-1].is_final
        assert steps[-1].outcome.path == ["s", "a", "b", "e"]
        assert [s.step_number for s in steps] == list(range(len(steps)))

    def test_expansion_order(self, route_graph):
        expanded = [s.node for s in search_steps(route_graph, "s", "e") if s.kind in (EXPAND, FOUND)]
        assert expanded == ["s", "a", "b", "e"]

    def test_relax_steps_carry_candidate_state(self, route_graph):
        relax = [s for s in search_steps(route_graph, "s", "e") if s.kind == RELAX]
        first = relax[0]
        assert (first.node, first.neighbour) == ("s", "a")
        assert first.state.cost_to == 3
        assert first.state.hop_cost == 3
        assert first.state.predecessor == "s"

    def test_exhausted_step(self, split_graph):
        steps = list(search_steps(split_graph, "x", "a"))
        assert steps[-1].kind == EXHAUSTED
        assert isinstance(steps[-1].outcome, Unreachable)

    def test_frontier_tracking_off(self, route_graph):
        assert all(s.frontier == [] for s in search_steps(route_graph, "s", "e", track_frontier=False))
