"""EDFSim data models.

Core data structures used throughout EDFSim for representing tasks,
energy trace samples, and run results.
"""

from edfsim.data_models.task import Task
from edfsim.data_models.result import TraceSample, TaskExecution, RunResult

__all__ = [
    "Task",
    "TraceSample",
    "TaskExecution",
    "RunResult",
]
