"""Result data models for simulation runs."""

from pydantic import BaseModel, Field


class TraceSample(BaseModel):
    """One (time, cumulative energy) point of the energy trace."""

    time: float = Field(ge=0, description="Elapsed time since run start in seconds")
    energy: float = Field(ge=0, description="Cumulative energy in Joules")

    def __str__(self) -> str:
        return f"TraceSample(t={self.time:.2f}s, energy={self.energy:.6f}J)"


class TaskExecution(BaseModel):
    """
    Record of a single task execution.

    Captures the frequency decision and the energy figures computed
    for the task, in the order tasks were executed.
    """

    task_id: int = Field(gt=0, description="ID of the executed task")
    priority: int = Field(description="Priority of the executed task")
    burst_time: int = Field(gt=0, description="Burst time in milliseconds")
    deadline: int = Field(gt=0, description="Deadline in milliseconds")
    frequency: int = Field(gt=0, description="Frequency the task ran at (MHz)")
    time_ratio: float = Field(ge=0, description="Burst-to-deadline ratio")
    utilization: float = Field(ge=0, le=1, description="System utilization when selected")
    power: float = Field(ge=0, description="Power draw in Watts")
    energy: float = Field(ge=0, description="Energy used by this task in Joules")
    cumulative_energy: float = Field(ge=0, description="Total energy after this task")
    time: float = Field(ge=0, description="Elapsed time when the task completed")

    def __str__(self) -> str:
        """Human-readable string representation."""
        return (
            f"Task {self.task_id} (Priority: {self.priority}, Burst: {self.burst_time}ms, "
            f"Deadline: {self.deadline}ms) at {self.frequency} MHz "
            f"-> {self.energy:.6f} J"
        )


class RunResult(BaseModel):
    """
    Final output of a scheduler run.

    Holds the total energy, the (time, energy) trace and the per-task
    execution records handed to the presentation layer.
    """

    total_energy: float = Field(ge=0, description="Total energy consumed in Joules")
    samples: list[TraceSample] = Field(
        default_factory=list, description="Trace samples in completion order"
    )
    executions: list[TaskExecution] = Field(
        default_factory=list, description="Per-task execution records in completion order"
    )
    final_frequency: int = Field(gt=0, description="Processor frequency after the run (MHz)")

    @property
    def execution_order(self) -> list[int]:
        """Task IDs in the order they were executed."""
        return [execution.task_id for execution in self.executions]

    @property
    def max_energy(self) -> float:
        """Largest energy sample in the trace, 0.0 when empty."""
        if not self.samples:
            return 0.0
        return max(sample.energy for sample in self.samples)

    def __str__(self) -> str:
        """Human-readable string representation."""
        return (
            f"RunResult({len(self.executions)} tasks, "
            f"total_energy={self.total_energy:.6f}J, "
            f"final_frequency={self.final_frequency}MHz)"
        )
