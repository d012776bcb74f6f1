"""Command-line interface for EDFSim."""

import argparse
import logging
import sys

from edfsim.config import (
    DEFAULT_CHART_WIDTH,
    DEFAULT_PACING_DELAY,
    DEFAULT_TASKSETS_DIR,
    INTERACTIVE_PACING_DELAY,
)

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger("edfsim.cli")


def configure_logging(args) -> None:
    """Set the edfsim log level from --verbose / --quiet."""
    package_logger = logging.getLogger("edfsim")
    if getattr(args, "verbose", False):
        package_logger.setLevel(logging.DEBUG)
    elif getattr(args, "quiet", False):
        package_logger.setLevel(logging.WARNING)
    else:
        package_logger.setLevel(logging.INFO)


def render_result(result, args) -> str:
    """Render a run result in the format selected on the command line."""
    from edfsim.io.formatter import TraceFormatter

    formatter = TraceFormatter()
    if args.format == "json":
        return formatter.format_compact(result)
    if args.format == "table":
        return formatter.format_table(result)
    if args.format == "chart":
        return formatter.format_chart(result, width=args.width)
    return formatter.format(result, width=args.width)


def _simulate(tasks, args, pacing_delay: float) -> None:
    from edfsim.api import run_simulation

    result = run_simulation(
        tasks,
        pacing_delay=pacing_delay,
        wall_clock=args.wall_clock,
        output_path=args.output,
    )
    print(render_result(result, args))


def cmd_run(args):
    """Run a task-set file non-interactively."""
    from edfsim.loader import TaskSetLoader

    loader = TaskSetLoader(args.tasksets_dir)
    config = loader.load(args.tasks)
    tasks = config.to_tasks()

    logger.info(f"Loaded {len(tasks)} tasks from {config.name or args.tasks}")

    pacing = args.pacing if args.pacing is not None else DEFAULT_PACING_DELAY
    _simulate(tasks, args, pacing)


def cmd_interactive(args):
    """Collect tasks from the terminal, then run them."""
    from edfsim.io.prompt import collect_tasks

    print("Energy-Efficient CPU Scheduler Simulation")
    tasks = collect_tasks()

    print("\nStarting simulation...")
    pacing = args.pacing if args.pacing is not None else INTERACTIVE_PACING_DELAY
    _simulate(tasks, args, pacing)


def cmd_list_tasksets(args):
    """List all available task-set files."""
    from edfsim.loader import TaskSetLoader

    loader = TaskSetLoader(args.tasksets_dir)
    paths = loader.list_tasksets()

    print(f"\nAvailable task sets ({len(paths)}):\n")
    for path in paths:
        config = loader.load(path)
        name = config.name or path.stem
        print(f"  {path.relative_to(loader.tasksets_dir)}  {name} ({len(config.tasks)} tasks)")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="edfsim",
        description="EDFSim - EDF scheduling with DVFS energy estimation",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Options shared by the simulation commands
    sim_options = argparse.ArgumentParser(add_help=False)
    sim_options.add_argument(
        "--pacing",
        type=float,
        default=None,
        metavar="SEC",
        help="Seconds to pause after each task (default: 0 for run, "
             f"{INTERACTIVE_PACING_DELAY} for interactive)"
    )
    sim_options.add_argument(
        "--wall-clock",
        action="store_true",
        help="Use real elapsed time for the trace instead of simulated time"
    )
    sim_options.add_argument(
        "--format",
        choices=["all", "table", "chart", "json"],
        default="all",
        help="Output format (default: all)"
    )
    sim_options.add_argument(
        "--width",
        type=int,
        default=DEFAULT_CHART_WIDTH,
        metavar="COLS",
        help=f"Width of the ASCII chart (default: {DEFAULT_CHART_WIDTH})"
    )
    sim_options.add_argument(
        "--output",
        type=str,
        metavar="FILE",
        help="Save results to JSON file"
    )
    sim_options.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    sim_options.add_argument(
        "--quiet",
        action="store_true",
        help="Only log warnings and errors"
    )

    # ========== run command ==========
    run_parser = subparsers.add_parser(
        "run",
        parents=[sim_options],
        help="Simulate a task-set file",
        description="Run the EDF+DVFS simulation over tasks loaded from a JSON file"
    )
    run_parser.add_argument(
        "--tasks",
        required=True,
        metavar="FILE",
        help="Task-set JSON file (absolute, or relative to --tasksets-dir)"
    )
    run_parser.add_argument(
        "--tasksets-dir",
        default=DEFAULT_TASKSETS_DIR,
        metavar="DIR",
        help=f"Directory containing task sets (default: {DEFAULT_TASKSETS_DIR})"
    )
    run_parser.set_defaults(func=cmd_run)

    # ========== interactive command ==========
    interactive_parser = subparsers.add_parser(
        "interactive",
        parents=[sim_options],
        help="Enter tasks at the terminal",
        description="Prompt for task parameters, then run the simulation"
    )
    interactive_parser.set_defaults(func=cmd_interactive)

    # ========== list-tasksets command ==========
    list_parser = subparsers.add_parser(
        "list-tasksets",
        help="List all available task sets"
    )
    list_parser.add_argument(
        "--tasksets-dir",
        default=DEFAULT_TASKSETS_DIR,
        metavar="DIR",
        help=f"Directory containing task sets (default: {DEFAULT_TASKSETS_DIR})"
    )
    list_parser.set_defaults(func=cmd_list_tasksets)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(args)

    try:
        args.func(args)
    except (KeyboardInterrupt, EOFError):
        print()
        logger.warning("Interrupted")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}")
        if getattr(args, "verbose", False):
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
