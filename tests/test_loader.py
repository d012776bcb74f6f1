"""Tests for TaskSetLoader."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from edfsim.loader import TaskSetConfig, TaskSetLoader


def write_json(path: Path, data) -> Path:
    path.write_text(json.dumps(data))
    return path


def test_taskset_config_assigns_ids():
    """Test that missing IDs follow file order."""
    config = TaskSetConfig(
        tasks=[
            {"priority": 5, "burst_time": 100, "deadline": 1000},
            {"priority": 3, "burst_time": 200, "deadline": 500},
        ]
    )
    assert [spec.id for spec in config.tasks] == [1, 2]
    tasks = config.to_tasks()
    assert [task.id for task in tasks] == [1, 2]
    assert tasks[1].deadline == 500


def test_taskset_config_keeps_explicit_ids():
    """Test explicit IDs are preserved and missing ones take the lowest free ID."""
    config = TaskSetConfig(
        tasks=[
            {"id": 7, "priority": 5, "burst_time": 100, "deadline": 1000},
            {"priority": 3, "burst_time": 200, "deadline": 500},
        ]
    )
    assert [spec.id for spec in config.tasks] == [7, 1]


def test_taskset_config_mixed_ids_skip_taken():
    """Test that a missing ID never collides with a later explicit one."""
    config = TaskSetConfig(
        tasks=[
            {"id": 2, "priority": 5, "burst_time": 100, "deadline": 1000},
            {"priority": 3, "burst_time": 200, "deadline": 500},
            {"priority": 4, "burst_time": 300, "deadline": 900},
            {"id": 1, "priority": 6, "burst_time": 50, "deadline": 700},
        ]
    )
    assert [spec.id for spec in config.tasks] == [2, 3, 4, 1]
    assert sorted(task.id for task in config.to_tasks()) == [1, 2, 3, 4]


def test_taskset_config_duplicate_ids():
    """Test that duplicate explicit IDs are rejected."""
    with pytest.raises(ValidationError, match="Duplicate task ID: 2"):
        TaskSetConfig(
            tasks=[
                {"id": 2, "priority": 5, "burst_time": 100, "deadline": 1000},
                {"priority": 3, "burst_time": 200, "deadline": 500},
                {"id": 2, "priority": 4, "burst_time": 300, "deadline": 900},
            ]
        )


def test_taskset_config_empty_rejected():
    """Test that a task set needs at least one task."""
    with pytest.raises(ValidationError):
        TaskSetConfig(tasks=[])


@pytest.mark.parametrize(
    "task",
    [
        {"priority": 0, "burst_time": 100, "deadline": 1000},
        {"priority": 5, "burst_time": 0, "deadline": 1000},
        {"priority": 5, "burst_time": 100, "deadline": -5},
        {"priority": 5, "burst_time": "abc", "deadline": 1000},
    ],
)
def test_taskset_config_invalid_task(task):
    """Test task field validation."""
    with pytest.raises(ValidationError):
        TaskSetConfig(tasks=[task])


def test_load_valid_file(tmp_path):
    """Test loading a valid task-set file."""
    write_json(tmp_path / "set.json", {
        "name": "demo",
        "tasks": [{"priority": 5, "burst_time": 500, "deadline": 1000}],
    })

    loader = TaskSetLoader(tmp_path)
    config = loader.load("set.json")

    assert config.name == "demo"
    assert len(config.tasks) == 1
    assert loader.load_tasks("set.json")[0].burst_time == 500


def test_load_bare_list(tmp_path):
    """Test that a bare JSON list of tasks is accepted."""
    path = write_json(tmp_path / "bare.json", [
        {"priority": 1, "burst_time": 10, "deadline": 100},
        {"priority": 2, "burst_time": 20, "deadline": 50},
    ])

    config = TaskSetLoader(tmp_path).load(path)

    assert config.name is None
    assert [spec.id for spec in config.tasks] == [1, 2]


def test_load_missing_file(tmp_path):
    """Test loading a file that doesn't exist."""
    with pytest.raises(FileNotFoundError, match="not found"):
        TaskSetLoader(tmp_path).load("missing.json")


def test_load_malformed_json(tmp_path):
    """Test loading malformed JSON."""
    (tmp_path / "broken.json").write_text("{not json")
    with pytest.raises(json.JSONDecodeError):
        TaskSetLoader(tmp_path).load("broken.json")


def test_list_tasksets(tmp_path):
    """Test listing task-set files recursively."""
    (tmp_path / "sub").mkdir()
    write_json(tmp_path / "b.json", [{"priority": 1, "burst_time": 1, "deadline": 1}])
    write_json(tmp_path / "sub" / "a.json", [{"priority": 1, "burst_time": 1, "deadline": 1}])
    (tmp_path / "notes.txt").write_text("ignored")

    paths = TaskSetLoader(tmp_path).list_tasksets()

    assert [p.name for p in paths] == ["b.json", "a.json"]


def test_list_tasksets_missing_dir(tmp_path):
    """Test listing a non-existent directory."""
    with pytest.raises(ValueError, match="not found"):
        TaskSetLoader(tmp_path / "nope").list_tasksets()
