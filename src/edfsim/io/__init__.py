"""EDFSim input/output.

Interactive task collection and rendering of run results.
"""

from edfsim.io.formatter import TraceFormatter
from edfsim.io.prompt import collect_tasks, prompt_int

__all__ = [
    "TraceFormatter",
    "collect_tasks",
    "prompt_int",
]
