"""Task data model for EDFSim."""

from datetime import datetime

from pydantic import BaseModel, Field

from edfsim.config import MAX_PRIORITY, MIN_PRIORITY


class Task(BaseModel):
    """
    Represents a single unit of work submitted to the scheduler.

    Tasks are ordered by deadline (earliest first). Priority is recorded
    for display only and takes no part in the ordering.
    """

    id: int = Field(gt=0, description="Unique identifier, 1-based arrival order")
    priority: int = Field(
        ge=MIN_PRIORITY, le=MAX_PRIORITY, description="Priority level (informational)"
    )
    burst_time: int = Field(gt=0, description="Simulated execution time in milliseconds")
    deadline: int = Field(gt=0, description="Relative deadline in milliseconds")
    is_completed: bool = Field(default=False, description="Whether the task has executed")
    arrival_time: datetime = Field(
        default_factory=datetime.now, description="When the task was created"
    )

    @property
    def time_ratio(self) -> float:
        """Burst-to-deadline tightness of this task."""
        return self.burst_time / self.deadline

    def __lt__(self, other: "Task") -> bool:
        return self.deadline < other.deadline

    def __str__(self) -> str:
        """Human-readable string representation."""
        return (
            f"Task({self.id}, priority={self.priority}, "
            f"burst={self.burst_time}ms, deadline={self.deadline}ms)"
        )

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return (
            f"Task(id={self.id}, priority={self.priority}, "
            f"burst_time={self.burst_time}, deadline={self.deadline}, "
            f"is_completed={self.is_completed})"
        )
