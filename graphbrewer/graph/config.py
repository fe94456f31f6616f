"""Default values a Graph falls back to when the caller leaves them out."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GraphConfig:
    """
    Attributes:
        default_edge_cost      : cost used by add_edge when none is given.
        default_heuristic_cost : heuristic_cost given to nodes created without one
                                 (explicitly or implicitly through add_edge).
    """

    default_edge_cost:      float = 1
    default_heuristic_cost: float = 0

    def __post_init__(self):
        if not self.default_edge_cost >= 0:
            raise ValueError(f"default_edge_cost must be non-negative, got {self.default_edge_cost}")
        if not self.default_heuristic_cost >= 0:
            raise ValueError(f"default_heuristic_cost must be non-negative, got {self.default_heuristic_cost}")
