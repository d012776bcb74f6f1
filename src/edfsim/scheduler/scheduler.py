"""EnergyEfficientScheduler - EDF scheduling with DVFS energy accounting."""

import heapq
import logging
import time
from enum import Enum, auto

from edfsim.config import (
    DEFAULT_FREQUENCY,
    DEFAULT_PACING_DELAY,
    MAX_FREQUENCY,
    MIN_FREQUENCY,
)
from edfsim.data_models.result import RunResult
from edfsim.data_models.task import Task
from edfsim.metrics.accumulator import EnergyAccumulator
from edfsim.power.model import DEFAULT_POWER_MODEL, PowerModel
from edfsim.scheduler.clock import LogicalClock, WallClock
from edfsim.scheduler.policy import (
    calculate_optimal_frequency,
    calculate_system_utilization,
)

logger = logging.getLogger("edfsim.scheduler")


class SchedulerState(Enum):
    IDLE = auto()
    SELECTING_NEXT = auto()
    ADJUSTING = auto()
    EXECUTING = auto()
    COMPLETED = auto()
    DRAINED = auto()


class EnergyEfficientScheduler:
    """
    Earliest-Deadline-First scheduler with per-task frequency scaling.

    Owns the task set, the current processor frequency, and the energy
    accounting for a run. Tasks are executed one at a time in deadline
    order; each task gets a frequency from the DVFS policy and its
    energy is integrated into the running total and the trace.

    Construct a fresh instance per simulation; instances share no state.
    """

    def __init__(
        self,
        power_model: PowerModel | None = None,
        clock: LogicalClock | WallClock | None = None,
        initial_frequency: int = DEFAULT_FREQUENCY,
        pacing_delay: float = DEFAULT_PACING_DELAY,
    ) -> None:
        """
        Initialize the scheduler.

        Args:
            power_model: Power model (default constants if None)
            clock: Time source for the trace (LogicalClock if None)
            initial_frequency: Starting frequency in MHz
            pacing_delay: Seconds to sleep after each task (0 disables)

        Raises:
            ValueError: If initial_frequency is outside [MIN_FREQUENCY, MAX_FREQUENCY]
        """
        if not MIN_FREQUENCY <= initial_frequency <= MAX_FREQUENCY:
            raise ValueError(
                f"initial_frequency must be between {MIN_FREQUENCY} and "
                f"{MAX_FREQUENCY} MHz, got {initial_frequency}"
            )

        self.power_model = power_model or DEFAULT_POWER_MODEL
        self.clock = clock or LogicalClock()
        self.pacing_delay = pacing_delay

        self.tasks: list[Task] = []
        self.current_frequency = initial_frequency
        self.state = SchedulerState.IDLE

        self.accumulator = EnergyAccumulator()
        self.execution_order: list[int] = []

    @property
    def total_energy(self) -> float:
        return self.accumulator.total_energy

    @property
    def time_points(self) -> list[float]:
        return self.accumulator.time_points

    @property
    def energy_data(self) -> list[float]:
        return self.accumulator.energy_data

    def add_task(self, task: Task) -> None:
        """
        Add a task to the task set.

        The scheduler keeps its own copy; the caller's object is never modified.
        """
        self.tasks.append(task.model_copy())

    def add_tasks(self, tasks: list[Task]) -> None:
        for task in tasks:
            self.add_task(task)

    def adjust_frequency(self, new_freq: int) -> bool:
        """
        Change the processor frequency.

        Requests outside [MIN_FREQUENCY, MAX_FREQUENCY] are ignored and the
        current frequency is kept.

        Args:
            new_freq: Requested frequency in MHz

        Returns:
            True if the frequency was applied
        """
        if MIN_FREQUENCY <= new_freq <= MAX_FREQUENCY:
            self.current_frequency = new_freq
            logger.info("Adjusted CPU frequency to %d MHz", self.current_frequency)
            return True

        logger.debug(
            "Ignoring frequency request %d MHz outside [%d, %d]",
            new_freq, MIN_FREQUENCY, MAX_FREQUENCY
        )
        return False

    def calculate_system_utilization(self) -> float:
        """Utilization of the scheduler's not-yet-completed tasks, clamped to 1.0."""
        return calculate_system_utilization(self.tasks)

    def calculate_optimal_frequency(self, task: Task, utilization: float) -> int:
        """Frequency (MHz) the DVFS policy picks for the task."""
        return calculate_optimal_frequency(task, utilization)

    def _reset_run(self) -> None:
        for task in self.tasks:
            task.is_completed = False
        self.accumulator = EnergyAccumulator()
        self.execution_order = []
        self.clock.start()

    def run_edf_with_dvfs(self) -> RunResult:
        """
        Run every task to completion in earliest-deadline-first order.

        Process flow per task:
        1. Pop the task with the smallest deadline
        2. Compute system utilization and pick a frequency
        3. Apply the frequency
        4. Compute power and energy, append to the trace
        5. Mark the task completed

        Returns:
            RunResult with total energy, trace and per-task records
        """
        self._reset_run()

        # (deadline, sequence, task): sequence keeps heap comparisons off Task
        ready_queue: list[tuple[int, int, Task]] = []
        for sequence, task in enumerate(self.tasks):
            heapq.heappush(ready_queue, (task.deadline, sequence, task))

        self.state = SchedulerState.SELECTING_NEXT

        while ready_queue:
            _, _, current_task = heapq.heappop(ready_queue)

            self.state = SchedulerState.ADJUSTING
            utilization = self.calculate_system_utilization()
            optimal_freq = self.calculate_optimal_frequency(current_task, utilization)
            logger.debug(
                "Task %d: utilization=%.3f time_ratio=%.3f target=%d MHz",
                current_task.id, utilization, current_task.time_ratio, optimal_freq
            )
            self.adjust_frequency(optimal_freq)

            self.state = SchedulerState.EXECUTING
            logger.info(
                "Executing Task %d (Priority: %d, Burst: %dms, Deadline: %dms) at %d MHz",
                current_task.id, current_task.priority, current_task.burst_time,
                current_task.deadline, self.current_frequency
            )

            time_ratio = min(1.0, current_task.time_ratio)
            task_power = self.power_model.calculate_power(self.current_frequency, time_ratio)

            execution_time = current_task.burst_time / 1000.0
            self.clock.advance(execution_time)

            execution = self.accumulator.record_task(
                task=current_task,
                frequency=self.current_frequency,
                utilization=utilization,
                power=task_power,
                execution_time=execution_time,
                elapsed=self.clock.elapsed(),
            )

            if self.pacing_delay > 0:
                time.sleep(self.pacing_delay)

            current_task.is_completed = True
            self.execution_order.append(current_task.id)
            self.state = SchedulerState.COMPLETED
            logger.info(
                "Completed Task %d. Energy used: %.6f J", current_task.id, execution.energy
            )

            if ready_queue:
                self.state = SchedulerState.SELECTING_NEXT

        self.state = SchedulerState.DRAINED
        logger.info("Total energy consumed: %.6f J", self.total_energy)

        return self.accumulator.finalize(final_frequency=self.current_frequency)

    def get_state_summary(self) -> dict:
        """
        Get a summary of the scheduler state.

        Returns:
            Dictionary with task counts, frequency and energy
        """
        completed = sum(1 for task in self.tasks if task.is_completed)
        return {
            "state": self.state.name,
            "total_tasks": len(self.tasks),
            "completed": completed,
            "pending": len(self.tasks) - completed,
            "current_frequency": self.current_frequency,
            "total_energy": self.total_energy,
            "samples": self.accumulator.samples_recorded,
        }
