"""
samples.py — Ready-made Graphs
==============================
Two fixed graphs used by the demo API and the tests:

    small_graph()   – 12 delivery points, unit-free costs
    vienna_graph()  – 23 Vienna landmarks, costs in tens of metres (250 m → 25)
"""

from typing import Callable, Dict, List, Optional, Tuple

from graphbrewer.graph import Graph, GraphConfig


SMALL_EDGES: List[Tuple[str, str, int]] = [
    ("dp1", "dp2", 3),   ("dp1", "dp5", 7),
    ("dp2", "dp3", 6),   ("dp2", "shop", 5),
    ("dp3", "dp5", 3),   ("dp3", "dp4", 5),   ("dp3", "dp6", 7),
    ("dp4", "dp5", 4),   ("dp4", "dp6", 5),
    ("dp5", "dp6", 6),
    ("dp6", "dp7", 5),
    ("dp7", "cust", 2),  ("dp7", "dp8", 4),
    ("dp8", "dp9", 2),
    ("dp9", "dp10", 6),
    ("dp10", "shop", 7),
]

VIENNA_LABELS: Dict[str, str] = {
    "dp0":  "Spengergasse",
    "dp1":  "Hofburg",
    "dp2":  "Stephansplatz",
    "dp3":  "Flex Cafe",
    "dp4":  "Hard Rock Cafe",
    "dp5":  "MAK",
    "dp6":  "Karlsplatz",
    "dp7":  "Cineplex Apollo Kino",
    "dp8":  "Krankenhaus",
    "dp9":  "Westbahnhof",
    "dp10": "Stadthalle",
    "dp11": "Rathaus",
    "dp12": "Votivkirche",
    "dp13": "AKH",
    "dp14": "Uni Campus",
    "dp15": "Bruno Bettelheim Haus",
    "dp16": "Museum",
    "dp17": "Schäffergasse",
    "dp18": "Matzleinsdorferplatz",
    "dp19": "Hauptbahnhof",
    "dp20": "Belvedere",
    "dp21": "Universität Musik/Kunst",
    "dp22": "Hundertwasserhaus",
}

VIENNA_EDGES: List[Tuple[str, str, int]] = [
    ("dp0", "dp18", 75),   ("dp0", "dp19", 170),  ("dp0", "dp17", 260),
    ("dp0", "dp8", 120),   ("dp0", "dp7", 150),
    ("dp1", "dp6", 110),   ("dp1", "dp11", 85),   ("dp1", "dp12", 130),
    ("dp1", "dp2", 75),    ("dp1", "dp16", 200),  ("dp1", "dp3", 160),
    ("dp1", "dp4", 100),
    ("dp2", "dp11", 160),  ("dp2", "dp12", 150),  ("dp2", "dp3", 130),
    ("dp2", "dp5", 80),    ("dp2", "dp6", 120),   ("dp2", "dp4", 100),
    ("dp3", "dp12", 110),  ("dp3", "dp11", 150),  ("dp3", "dp4", 100),
    ("dp4", "dp5", 80),    ("dp4", "dp22", 170),
    ("dp5", "dp22", 110),  ("dp5", "dp6", 130),   ("dp5", "dp21", 85),
    ("dp6", "dp20", 150),  ("dp6", "dp17", 120),  ("dp6", "dp21", 140),
    ("dp7", "dp16", 70),   ("dp7", "dp9", 130),   ("dp7", "dp8", 85),
    ("dp7", "dp17", 110),  ("dp7", "dp15", 100),
    ("dp8", "dp9", 75),    ("dp8", "dp17", 170),  ("dp8", "dp16", 95),
    ("dp9", "dp16", 90),   ("dp9", "dp10", 90),
    ("dp10", "dp16", 150), ("dp10", "dp15", 140),
    ("dp11", "dp12", 60),  ("dp11", "dp15", 140), ("dp11", "dp13", 190),
    ("dp12", "dp15", 190), ("dp12", "dp13", 170), ("dp12", "dp14", 70),
    ("dp13", "dp14", 100),
    ("dp15", "dp16", 70),
    ("dp17", "dp20", 130),
    ("dp18", "dp19", 120),
    ("dp19", "dp20", 120),
    ("dp20", "dp21", 45),
    ("dp21", "dp22", 200),
]


def small_graph(config: Optional[GraphConfig] = None) -> Graph:
    g = Graph(config=config)
    for source, target, cost in SMALL_EDGES:
        g.add_edge(source, target, cost)
    return g


def vienna_graph(config: Optional[GraphConfig] = None) -> Graph:
    """Labelled landmarks, all heuristic costs 0 so searches run as Dijkstra."""
    g = Graph(config=config)
    for node_id, label in VIENNA_LABELS.items():
        g.add_node(node_id, heuristic_cost=0, label=label)
    for source, target, cost in VIENNA_EDGES:
        g.add_edge(source, target, cost)
    return g


SAMPLES: Dict[str, Callable[..., Graph]] = {
    "small":  small_graph,
    "vienna": vienna_graph,
}


def get_sample(name: str, config: Optional[GraphConfig] = None) -> Optional[Graph]:
    """Build a sample graph by name, or None for an unknown name."""
    factory = SAMPLES.get(name)
    return factory(config) if factory else None
