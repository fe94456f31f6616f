"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from graphbrewer import Graph
from graphbrewer.main import create_app


@pytest.fixture
def graph() -> Graph:
    """Return an empty graph."""
    return Graph()


@pytest.fixture
def route_graph() -> Graph:
    """
    Six-node graph whose cheapest s → e route is s, a, b, e (3 + 5 + 5 = 13).
    The detour b, c, d, e costs 17 from b.
    """
    g = Graph()
    g.add_edge("s", "a", 3)
    g.add_edge("a", "b", 5)
    g.add_edge("b", "c", 10)
    g.add_edge("c", "d", 3)
    g.add_edge("d", "e", 4)
    g.add_edge("b", "e", 5)
    return g


@pytest.fixture
def split_graph() -> Graph:
    """Return a graph with two disconnected components {a, b, c} and {x, y}."""
    g = Graph()
    g.add_edge("a", "b", 1)
    g.add_edge("b", "c", 2)
    g.add_edge("x", "y", 4)
    return g


@pytest.fixture
def app():
    return create_app({"TESTING": True, "SECRET_KEY": "test-secret"})


@pytest.fixture
def client(app):
    return app.test_client()
