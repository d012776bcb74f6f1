"""Simple API for running EDFSim simulations."""

import json
import logging
from datetime import datetime
from pathlib import Path

from edfsim.config import (
    DEFAULT_FREQUENCY,
    DEFAULT_PACING_DELAY,
    DEFAULT_RESULTS_FILENAME_PATTERN,
    get_results_dir,
)
from edfsim.data_models.result import RunResult
from edfsim.data_models.task import Task
from edfsim.power.model import PowerModel
from edfsim.scheduler.clock import LogicalClock, WallClock
from edfsim.scheduler.scheduler import EnergyEfficientScheduler

logger = logging.getLogger("edfsim.api")


def run_simulation(
    tasks: list[Task],
    pacing_delay: float = DEFAULT_PACING_DELAY,
    wall_clock: bool = False,
    initial_frequency: int = DEFAULT_FREQUENCY,
    power_model: PowerModel | None = None,
    output_path: str | Path | None = None,
    save_results: bool = False,
) -> RunResult:
    """
    Run an EDF+DVFS simulation over a task set.

    This is the main entry point for using EDFSim from Python.

    Args:
        tasks: Tasks to schedule (not modified)
        pacing_delay: Seconds to sleep after each task (default: 0)
        wall_clock: Sample real elapsed time for the trace instead of
            the logical clock (default: False)
        initial_frequency: Starting frequency in MHz (default: 1000)
        power_model: Power model to use, or None for the default constants
        output_path: Path to save the result JSON, or None for auto-generated
        save_results: Whether to save the result to a file (default: False)

    Returns:
        RunResult with total energy, trace and per-task records

    Example:
        ```python
        from edfsim import Task, run_simulation

        tasks = [
            Task(id=1, priority=5, burst_time=500, deadline=1000),
            Task(id=2, priority=3, burst_time=100, deadline=400),
        ]
        result = run_simulation(tasks)
        print(f"Total energy: {result.total_energy:.6f} J")
        ```

    Raises:
        ValueError: If pacing_delay is negative or initial_frequency is out of range
        OSError: If the result cannot be saved
    """
    if pacing_delay < 0:
        raise ValueError(f"pacing_delay must be non-negative, got {pacing_delay}")

    clock = WallClock() if wall_clock else LogicalClock()
    scheduler = EnergyEfficientScheduler(
        power_model=power_model,
        clock=clock,
        initial_frequency=initial_frequency,
        pacing_delay=pacing_delay,
    )
    scheduler.add_tasks(tasks)

    logger.info(f"Running simulation with {len(tasks)} tasks")
    result = scheduler.run_edf_with_dvfs()

    if save_results or output_path is not None:
        output_file = save_result(result, output_path)
        logger.info(f"Results saved to: {output_file}")

    return result


def save_result(result: RunResult, output_path: str | Path | None = None) -> Path:
    """
    Write a run result to a JSON file.

    Args:
        result: Finished run
        output_path: Target file, or None for results/edfsim_results_<timestamp>.json

    Returns:
        Path of the written file

    Raises:
        OSError: If the file cannot be written
    """
    if output_path is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_file = get_results_dir() / DEFAULT_RESULTS_FILENAME_PATTERN.format(
            timestamp=timestamp
        )
    else:
        output_file = Path(output_path)

    result_data = {
        "timestamp": datetime.now().isoformat(),
        **result.model_dump(),
    }

    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, 'w') as f:
            json.dump(result_data, f, indent=2)
    except OSError as e:
        logger.error(f"Failed to save results to '{output_file}': {e}")
        raise

    return output_file
