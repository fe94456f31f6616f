"""
Exceptions raised when a caller unwraps a failed outcome.

The graph and the search engine never raise these on their own; they return
`Unreachable` / `BrokenPath` values instead.  `outcome.unwrap()` turns those
into the exceptions below for callers that prefer try/except.
"""


class GraphError(Exception):
    """Base class for graphbrewer errors."""


class NoPathError(GraphError):
    def __init__(self, source, target):
        self.source = source
        self.target = target
        super().__init__(f"No path found from {source!r} to {target!r}")


class BrokenPathError(GraphError):
    def __init__(self, source, target, index: int):
        self.source = source
        self.target = target
        self.index = index
        super().__init__(f"Broken path: no edge between {source!r} and {target!r} (position {index})")
