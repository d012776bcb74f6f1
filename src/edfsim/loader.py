"""Task-set loader for EDFSim JSON files."""

import json
from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from edfsim.config import MAX_PRIORITY, MIN_PRIORITY
from edfsim.data_models.task import Task


class TaskSpec(BaseModel):
    """Task entry as written in a task-set file."""

    id: int | None = Field(default=None, gt=0, description="Task ID (defaults to file order)")
    priority: int = Field(ge=MIN_PRIORITY, le=MAX_PRIORITY, description="Priority level")
    burst_time: int = Field(gt=0, description="Burst time in milliseconds")
    deadline: int = Field(gt=0, description="Relative deadline in milliseconds")


class TaskSetConfig(BaseModel):
    """Validated task-set configuration."""

    name: str | None = Field(default=None, description="Optional task-set name")
    description: str | None = Field(default=None, description="Optional free-form notes")
    tasks: list[TaskSpec] = Field(min_length=1, description="Tasks in arrival order")

    @model_validator(mode="after")
    def assign_ids(self) -> "TaskSetConfig":
        """
        Reject duplicate explicit IDs, then fill missing ones.

        Each missing ID gets the smallest positive integer not already
        taken, in file order.
        """
        seen = set()
        for spec in self.tasks:
            if spec.id is None:
                continue
            if spec.id in seen:
                raise ValueError(f"Duplicate task ID: {spec.id}")
            seen.add(spec.id)

        next_id = 1
        for spec in self.tasks:
            if spec.id is not None:
                continue
            while next_id in seen:
                next_id += 1
            spec.id = next_id
            seen.add(next_id)
        return self

    def to_tasks(self) -> list[Task]:
        """Build Task objects in file order."""
        return [
            Task(
                id=spec.id,
                priority=spec.priority,
                burst_time=spec.burst_time,
                deadline=spec.deadline,
            )
            for spec in self.tasks
        ]


class TaskSetLoader:
    """Loads and validates EDFSim task-set files."""

    def __init__(self, tasksets_dir: str | Path = "tasksets") -> None:
        """
        Initialize the task-set loader.

        Args:
            tasksets_dir: Directory that relative paths are resolved against
        """
        self.tasksets_dir = Path(tasksets_dir)

    def load(self, path: str | Path) -> TaskSetConfig:
        """
        Load and validate a task-set JSON file.

        Args:
            path: Path to the file (absolute, relative to the working
                directory, or relative to tasksets_dir)

        Returns:
            Validated TaskSetConfig object

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file is invalid
            json.JSONDecodeError: If JSON is malformed
        """
        taskset_path = Path(path)

        if not taskset_path.is_absolute() and not taskset_path.exists():
            taskset_path = self.tasksets_dir / taskset_path

        if not taskset_path.exists():
            raise FileNotFoundError(f"Task-set file not found: {taskset_path}")

        with open(taskset_path) as f:
            raw_config = json.load(f)

        if isinstance(raw_config, list):
            # Bare list of tasks
            raw_config = {"tasks": raw_config}

        return TaskSetConfig.model_validate(raw_config)

    def load_tasks(self, path: str | Path) -> list[Task]:
        """Load a task-set file straight into Task objects."""
        return self.load(path).to_tasks()

    def list_tasksets(self) -> list[Path]:
        """
        List all task-set files in the task-sets directory.

        Returns:
            Sorted list of paths to .json files

        Raises:
            ValueError: If the task-sets directory doesn't exist
        """
        if not self.tasksets_dir.exists():
            raise ValueError(f"Task-sets directory not found: {self.tasksets_dir}")

        return sorted(self.tasksets_dir.rglob("*.json"))
