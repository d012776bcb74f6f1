"""Energy accumulator for tracking the energy trace of a run."""

from edfsim.data_models.result import RunResult, TaskExecution, TraceSample
from edfsim.data_models.task import Task


class EnergyAccumulator:
    """
    Tracks energy throughout a scheduler run.

    Keeps:
    1. Total energy - running sum of per-task energy (Joules)
    2. Trace - parallel (time, cumulative energy) sequences, one entry per task
    3. Execution records - frequency/power/energy figures per task

    One accumulator belongs to one run.
    """

    def __init__(self):
        """Initialize energy trackers."""
        self.total_energy = 0.0

        # Trace, in completion order
        self.time_points: list[float] = []
        self.energy_data: list[float] = []

        self.executions: list[TaskExecution] = []

    def record_task(
        self,
        task: Task,
        frequency: int,
        utilization: float,
        power: float,
        execution_time: float,
        elapsed: float,
    ) -> TaskExecution:
        """
        Record energy for a task that has just executed.

        Args:
            task: Task that executed
            frequency: Frequency it ran at (MHz)
            utilization: System utilization when it was selected
            power: Power draw in Watts
            execution_time: Execution time in seconds
            elapsed: Time since run start when the task completed

        Returns:
            The TaskExecution record appended to the trace
        """
        energy = power * execution_time
        self.total_energy += energy

        self.time_points.append(elapsed)
        self.energy_data.append(self.total_energy)

        execution = TaskExecution(
            task_id=task.id,
            priority=task.priority,
            burst_time=task.burst_time,
            deadline=task.deadline,
            frequency=frequency,
            time_ratio=task.time_ratio,
            utilization=utilization,
            power=power,
            energy=energy,
            cumulative_energy=self.total_energy,
            time=elapsed,
        )
        self.executions.append(execution)
        return execution

    @property
    def samples_recorded(self) -> int:
        return len(self.energy_data)

    def finalize(self, final_frequency: int) -> RunResult:
        """
        Build the final result at the end of a run.

        Args:
            final_frequency: Processor frequency after the last task

        Returns:
            RunResult with total energy, trace and execution records
        """
        samples = [
            TraceSample(time=t, energy=e)
            for t, e in zip(self.time_points, self.energy_data)
        ]

        return RunResult(
            total_energy=self.total_energy,
            samples=samples,
            executions=list(self.executions),
            final_frequency=final_frequency,
        )
