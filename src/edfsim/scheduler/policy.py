"""DVFS frequency selection policy."""

from collections.abc import Iterable

from edfsim.config import (
    HIGH_FREQUENCY,
    HIGH_RATIO_THRESHOLD,
    LOW_FREQUENCY,
    LOW_RATIO_THRESHOLD,
    MEDIUM_FREQUENCY,
)
from edfsim.data_models.task import Task


def _ratio(task: Task) -> float:
    if task.deadline <= 0:
        raise ValueError(f"Task {task.id} has non-positive deadline: {task.deadline}")
    return task.burst_time / task.deadline


def calculate_system_utilization(tasks: Iterable[Task]) -> float:
    """
    Sum burst/deadline over tasks that have not completed yet.

    Args:
        tasks: Tasks to consider

    Returns:
        Utilization clamped to at most 1.0

    Raises:
        ValueError: If a task has a non-positive deadline
    """
    total_utilization = 0.0
    for task in tasks:
        if not task.is_completed:
            total_utilization += _ratio(task)
    return min(1.0, total_utilization)


def calculate_optimal_frequency(task: Task, utilization: float) -> int:
    """
    Pick the frequency (MHz) for the task about to run.

    Only the task's own burst/deadline ratio drives the choice:

    - ratio < 0.3         -> 800 MHz
    - 0.3 <= ratio < 0.7  -> 1200 MHz
    - ratio >= 0.7        -> 1800 MHz

    Args:
        task: Task about to execute
        utilization: Current system utilization. Accepted for callers
            but not used by the decision.

    Returns:
        Target frequency in MHz
    """
    time_ratio = _ratio(task)
    if time_ratio < LOW_RATIO_THRESHOLD:
        return LOW_FREQUENCY
    elif time_ratio < HIGH_RATIO_THRESHOLD:
        return MEDIUM_FREQUENCY
    else:
        return HIGH_FREQUENCY
