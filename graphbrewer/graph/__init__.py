"""
graph/
------
Core data layer.  Public API:

    from graphbrewer.graph import Graph, GraphConfig, Node, Edge
"""

from graphbrewer.graph.node   import Node, NodeId
from graphbrewer.graph.edge   import Edge
from graphbrewer.graph.config import GraphConfig
from graphbrewer.graph.graph  import Graph

__all__ = [
    "Node",   "NodeId",
    "Edge",
    "GraphConfig",
    "Graph",
]
