"""EDFSim energy tracking.

Accumulates energy and the (time, energy) trace during a run.
"""

from edfsim.metrics.accumulator import EnergyAccumulator

__all__ = [
    "EnergyAccumulator",
]
