"""EDFSim configuration constants.

This module contains all configuration defaults and constants used throughout EDFSim.
Users can override these values by passing parameters to the API functions.
"""

from pathlib import Path


def get_project_root() -> Path:
    """Get the absolute path to the EDFSim project root directory.

    The project root is identified by the presence of pyproject.toml.
    This keeps saved results in one place regardless of where
    EDFSim commands are run from.

    Returns:
        Path: Absolute path to project root directory

    Raises:
        RuntimeError: If pyproject.toml cannot be found
    """
    current = Path(__file__).resolve().parent

    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            return parent

    # Installed without the source tree: fall back to src/..
    if current.name == "edfsim" and current.parent.name == "src":
        return current.parent.parent

    raise RuntimeError("Could not find EDFSim project root (pyproject.toml not found)")


def get_results_dir() -> Path:
    """Directory where run results are saved when no output path is given."""
    try:
        return get_project_root() / "results"
    except RuntimeError:
        return Path.cwd() / "results"


# Processor frequency range (MHz)
MIN_FREQUENCY = 500
"""Lowest frequency the simulated processor accepts."""

MAX_FREQUENCY = 2000
"""Highest frequency the simulated processor accepts."""

DEFAULT_FREQUENCY = 1000
"""Frequency the processor runs at before the first adjustment."""

# Frequency selection policy
LOW_RATIO_THRESHOLD = 0.3
"""Tasks with burst/deadline below this run at LOW_FREQUENCY."""

HIGH_RATIO_THRESHOLD = 0.7
"""Tasks with burst/deadline at or above this run at HIGH_FREQUENCY."""

LOW_FREQUENCY = 800
MEDIUM_FREQUENCY = 1200
HIGH_FREQUENCY = 1800

# Power model
STATIC_POWER = 0.2
"""Static leakage power in Watts."""

SWITCHED_CAPACITANCE = 1e-8
"""Effective switched capacitance of the dynamic power term."""

BASE_VOLTAGE = 0.5
"""Voltage at zero frequency; rises linearly to BASE_VOLTAGE + VOLTAGE_SPAN at MAX_FREQUENCY."""

VOLTAGE_SPAN = 0.5

# Simulation
DEFAULT_PACING_DELAY = 0.0
"""Seconds to sleep after each task. Presentational only, 0 disables it."""

INTERACTIVE_PACING_DELAY = 0.1
"""Pacing used by the interactive CLI mode."""

# Presentation
DEFAULT_CHART_WIDTH = 50
"""Width in characters of the longest bar in the ASCII energy chart."""

# Directories and output
DEFAULT_TASKSETS_DIR = "tasksets"
"""Default directory containing task-set JSON files."""

DEFAULT_RESULTS_FILENAME_PATTERN = "edfsim_results_{timestamp}.json"
"""Pattern for auto-generated result filenames. {timestamp} will be replaced."""

# Input validation limits
MIN_PRIORITY = 1
MAX_PRIORITY = 10
