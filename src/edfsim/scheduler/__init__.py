"""EDFSim scheduling core.

EDF ordering, DVFS frequency policy, and the energy accounting loop.
"""

from edfsim.scheduler.clock import LogicalClock, WallClock
from edfsim.scheduler.policy import calculate_optimal_frequency, calculate_system_utilization
from edfsim.scheduler.scheduler import EnergyEfficientScheduler, SchedulerState

__all__ = [
    "EnergyEfficientScheduler",
    "SchedulerState",
    "LogicalClock",
    "WallClock",
    "calculate_optimal_frequency",
    "calculate_system_utilization",
]
