"""EDFSim power modelling.

Converts processor frequency and task load into power draw.
"""

from edfsim.power.model import DEFAULT_POWER_MODEL, PowerModel, calculate_power

__all__ = [
    "PowerModel",
    "DEFAULT_POWER_MODEL",
    "calculate_power",
]
