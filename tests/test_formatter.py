"""Tests for TraceFormatter."""

import json

import pytest

from edfsim.data_models.task import Task
from edfsim.io.formatter import TraceFormatter
from edfsim.metrics.accumulator import EnergyAccumulator
from edfsim.scheduler.scheduler import EnergyEfficientScheduler


@pytest.fixture
def formatter():
    return TraceFormatter()


@pytest.fixture
def result():
    """Result with two samples, the second twice the first."""
    acc = EnergyAccumulator()
    acc.record_task(Task(id=1, priority=5, burst_time=500, deadline=1000),
                    frequency=1200, utilization=0.5, power=0.2, execution_time=0.5, elapsed=0.5)
    acc.record_task(Task(id=2, priority=7, burst_time=500, deadline=2000),
                    frequency=800, utilization=0.25, power=0.2, execution_time=0.5, elapsed=1.0)
    return acc.finalize(final_frequency=800)


@pytest.fixture
def empty_result():
    return EnergyEfficientScheduler().run_edf_with_dvfs()


def test_table_rows(formatter, result):
    """Test table header and row precision."""
    lines = formatter.format_table(result).splitlines()
    assert lines[1] == "Time (s)\tEnergy (J)"
    assert lines[3] == "0.50\t\t0.100000"
    assert lines[4] == "1.00\t\t0.200000"


def test_chart_scaled_to_max(formatter, result):
    """Test that bars scale against the largest energy sample."""
    lines = formatter.format_chart(result, width=50).splitlines()
    assert lines[0] == "Simple ASCII Chart:"
    assert lines[1] == "0.50s |" + "#" * 25 + " 0.100000 J"
    assert lines[2] == "1.00s |" + "#" * 50 + " 0.200000 J"


def test_chart_custom_width(formatter, result):
    """Test chart width parameter."""
    lines = formatter.format_chart(result, width=10).splitlines()
    assert lines[2].count("#") == 10
    assert lines[1].count("#") == 5


def test_summary_lists_tasks(formatter, result):
    """Test execution summary."""
    summary = formatter.format_summary(result)
    assert "EXECUTED TASKS (2):" in summary
    assert "Task 1 (Priority: 5, Burst: 500ms, Deadline: 1000ms) at 1200 MHz" in summary
    assert "Total energy consumed: 0.200000 J" in summary
    assert "Final frequency: 800 MHz" in summary


def test_empty_result_renders(formatter, empty_result):
    """Test that an empty run renders placeholders instead of failing."""
    assert "(no samples)" in formatter.format_table(empty_result)
    assert "(no samples)" in formatter.format_chart(empty_result)
    assert "EXECUTED TASKS: none" in formatter.format_summary(empty_result)


def test_full_format_contains_sections(formatter, result):
    """Test combined output."""
    text = formatter.format(result)
    assert "EXECUTED TASKS" in text
    assert "Energy Consumption Over Time:" in text
    assert "Simple ASCII Chart:" in text


def test_compact_json(formatter, result):
    """Test JSON output."""
    data = json.loads(formatter.format_compact(result))
    assert data["execution_order"] == [1, 2]
    assert data["final_frequency"] == 800
    assert data["total_energy"] == pytest.approx(0.2)
    assert [point["time"] for point in data["trace"]] == pytest.approx([0.5, 1.0])
    assert data["executions"][0]["frequency"] == 1200
