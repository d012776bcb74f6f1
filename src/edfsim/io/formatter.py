"""Trace formatter for rendering run results as text."""

import json

from edfsim.config import DEFAULT_CHART_WIDTH
from edfsim.data_models.result import RunResult


class TraceFormatter:
    """
    Converts RunResult objects to human-readable text.

    Formats:
    - Execution summary (one line per task plus the total)
    - Time/energy table
    - ASCII bar chart scaled against the largest energy sample
    - Compact JSON
    """

    def format_summary(self, result: RunResult) -> str:
        """
        Per-task execution lines followed by the total energy.

        Args:
            result: Finished run

        Returns:
            Formatted summary
        """
        lines = []

        if result.executions:
            lines.append(f"EXECUTED TASKS ({len(result.executions)}):")
            for execution in result.executions:
                lines.append(f"  {execution}")
        else:
            lines.append("EXECUTED TASKS: none")
        lines.append("")

        lines.append(f"Total energy consumed: {result.total_energy:.6f} J")
        lines.append(f"Final frequency: {result.final_frequency} MHz")

        return "\n".join(lines)

    def format_table(self, result: RunResult) -> str:
        """
        Tabulate the (time, cumulative energy) trace.

        Args:
            result: Finished run

        Returns:
            Table with time to 2 decimals and energy to 6 decimals
        """
        lines = []
        lines.append("Energy Consumption Over Time:")
        lines.append("Time (s)\tEnergy (J)")
        lines.append("-" * 28)

        if not result.samples:
            lines.append("(no samples)")

        for sample in result.samples:
            lines.append(f"{sample.time:.2f}\t\t{sample.energy:.6f}")

        return "\n".join(lines)

    def format_chart(self, result: RunResult, width: int = DEFAULT_CHART_WIDTH) -> str:
        """
        Render the trace as an ASCII bar chart.

        Bar length is energy / max_energy * width, truncated.

        Args:
            result: Finished run
            width: Length of the bar for the largest sample

        Returns:
            One chart row per trace sample
        """
        lines = ["Simple ASCII Chart:"]

        max_energy = result.max_energy
        if not result.samples:
            lines.append("(no samples)")
            return "\n".join(lines)

        for sample in result.samples:
            if max_energy > 0:
                bar_length = int((sample.energy / max_energy) * width)
            else:
                bar_length = 0
            lines.append(f"{sample.time:.2f}s |{'#' * bar_length} {sample.energy:.6f} J")

        return "\n".join(lines)

    def format(self, result: RunResult, width: int = DEFAULT_CHART_WIDTH) -> str:
        """Summary, table and chart separated by blank lines."""
        return "\n\n".join([
            self.format_summary(result),
            self.format_table(result),
            self.format_chart(result, width=width),
        ])

    def format_compact(self, result: RunResult) -> str:
        """
        Format result as JSON.

        Useful for piping into other tools.

        Args:
            result: Finished run

        Returns:
            JSON string representation
        """
        return json.dumps({
            "total_energy": result.total_energy,
            "final_frequency": result.final_frequency,
            "execution_order": result.execution_order,
            "trace": [
                {"time": s.time, "energy": s.energy} for s in result.samples
            ],
            "executions": [
                {
                    "task_id": e.task_id,
                    "frequency": e.frequency,
                    "power": e.power,
                    "energy": e.energy,
                } for e in result.executions
            ],
        }, indent=2)
