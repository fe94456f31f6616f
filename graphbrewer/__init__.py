"""
graphbrewer
-----------
In-memory undirected weighted graph with a best-first shortest-path search.

    from graphbrewer import Graph

    g = Graph()
    g.add_edge("s", "a", 3)
    g.add_edge("a", "e", 5)
    result = g.shortest_path("s", "e")
    if result:
        print(result.path, result.cost)
"""

from graphbrewer.graph      import Graph, GraphConfig, Node, Edge
from graphbrewer.algorithms import PathFound, Unreachable, PathCost, BrokenPath
from graphbrewer.errors     import GraphError, NoPathError, BrokenPathError

__version__ = "0.2.0"

__all__ = [
    "Graph",     "GraphConfig", "Node",        "Edge",
    "PathFound", "Unreachable", "PathCost",    "BrokenPath",
    "GraphError", "NoPathError", "BrokenPathError",
]
