"""EDFSim - Earliest-Deadline-First scheduling with DVFS energy estimation."""

# Data models
from edfsim.data_models.task import Task
from edfsim.data_models.result import RunResult, TaskExecution, TraceSample

# Power
from edfsim.power.model import PowerModel, calculate_power

# Scheduling core
from edfsim.scheduler.clock import LogicalClock, WallClock
from edfsim.scheduler.policy import calculate_optimal_frequency, calculate_system_utilization
from edfsim.scheduler.scheduler import EnergyEfficientScheduler, SchedulerState

# Metrics
from edfsim.metrics.accumulator import EnergyAccumulator

# IO
from edfsim.io.formatter import TraceFormatter
from edfsim.io.prompt import collect_tasks
from edfsim.loader import TaskSetConfig, TaskSetLoader

# API
from edfsim.api import run_simulation

__version__ = "0.1.0"

__all__ = [
    # Data models
    "Task",
    "TraceSample",
    "TaskExecution",
    "RunResult",
    # Power
    "PowerModel",
    "calculate_power",
    # Scheduling core
    "EnergyEfficientScheduler",
    "SchedulerState",
    "LogicalClock",
    "WallClock",
    "calculate_optimal_frequency",
    "calculate_system_utilization",
    # Metrics
    "EnergyAccumulator",
    # IO
    "TraceFormatter",
    "collect_tasks",
    "TaskSetConfig",
    "TaskSetLoader",
    # API
    "run_simulation",
]
