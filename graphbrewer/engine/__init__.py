"""
engine/
-------
Recording layer.

    from graphbrewer.engine import Recorder, RunMetrics
"""

from graphbrewer.engine.recorder import Recorder, RunMetrics

__all__ = [
    "Recorder",
    "RunMetrics",
]
