"""Interactive task input with validated re-prompting."""

from collections.abc import Callable

from edfsim.config import MAX_PRIORITY, MIN_PRIORITY
from edfsim.data_models.task import Task

POSITIVE_INTEGER_ERROR = "Invalid input. Please enter a positive integer: "
PRIORITY_ERROR = (
    f"Invalid input. Please enter an integer between {MIN_PRIORITY} and {MAX_PRIORITY}: "
)


def _parse_int(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def prompt_int(
    message: str,
    error_message: str,
    minimum: int,
    maximum: int | None = None,
    input_fn: Callable[[str], str] | None = None,
) -> int:
    """
    Ask for an integer until one in range is entered.

    Non-numeric and out-of-range entries are answered with error_message,
    which doubles as the next prompt.

    Args:
        message: First prompt
        error_message: Prompt shown after an invalid entry
        minimum: Smallest accepted value
        maximum: Largest accepted value (unbounded if None)
        input_fn: Line reader, builtin input() by default

    Returns:
        The accepted integer

    Raises:
        EOFError: If input ends before a valid value is entered
    """
    input_fn = input_fn or input
    prompt = message
    while True:
        value = _parse_int(input_fn(prompt))
        if value is not None and value >= minimum and (maximum is None or value <= maximum):
            return value
        prompt = error_message


def collect_tasks(
    input_fn: Callable[[str], str] | None = None,
    output_fn: Callable[[str], None] | None = None,
) -> list[Task]:
    """
    Interactively collect a task set.

    Asks for the number of tasks, then priority, burst time and deadline
    for each one. IDs are assigned in entry order starting at 1.

    Args:
        input_fn: Line reader, builtin input() by default
        output_fn: Writer for section headers, print() by default

    Returns:
        Validated tasks in entry order
    """
    input_fn = input_fn or input
    output_fn = output_fn or print

    num_tasks = prompt_int(
        "Enter number of tasks: ", POSITIVE_INTEGER_ERROR, minimum=1, input_fn=input_fn
    )

    tasks = []
    for task_id in range(1, num_tasks + 1):
        output_fn(f"\nTask {task_id} parameters:")
        priority = prompt_int(
            f"  Enter priority ({MIN_PRIORITY}-{MAX_PRIORITY}): ",
            PRIORITY_ERROR,
            minimum=MIN_PRIORITY,
            maximum=MAX_PRIORITY,
            input_fn=input_fn,
        )
        burst = prompt_int(
            "  Enter burst time (ms): ", POSITIVE_INTEGER_ERROR, minimum=1, input_fn=input_fn
        )
        deadline = prompt_int(
            "  Enter deadline (ms): ", POSITIVE_INTEGER_ERROR, minimum=1, input_fn=input_fn
        )
        tasks.append(Task(id=task_id, priority=priority, burst_time=burst, deadline=deadline))

    return tasks
