"""Command Line Interface (CLI) for user interaction."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from score_grader.core.grader import GradeLabel
from score_grader.utils.error_handler import UserCancelledError
from score_grader.utils.logger import get_logger

# stdout carries only the prompt and the grade; everything else goes to stderr
console = Console(highlight=False, soft_wrap=True, emoji=False)
err_console = Console(stderr=True, highlight=False, emoji=False)

def read_score_input(prompt: str) -> str:
    """Shows the prompt and reads one line of input.

    Args:
        prompt: Text written before reading, with no trailing newline.

    Returns:
        The raw line as typed, without its newline.

    Raises:
        UserCancelledError: If input ends before a line is read.
    """
    try:
        return console.input(prompt, markup=False, emoji=False)
    except EOFError as e:
        get_logger().debug("Input ended before a score was read.")
        raise UserCancelledError("No score was entered.") from e

def display_grade(label: GradeLabel):
    """Writes the grade letter with no trailing newline."""
    console.print(str(label), end="", markup=False)

def display_error(message: str):
    """Displays an error message in a standard format."""
    err_console.print(Panel(f"[bold red]Error:[/bold red] {escape(message)}", title="Error", border_style="red"))

def display_warning(message: str):
    """Displays a warning message."""
    err_console.print(f"[yellow]Warning:[/yellow] {escape(message)}")
