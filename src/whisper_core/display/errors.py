# ABOUTME: Error display helpers for formatting error messages with Rich.
# ABOUTME: Provides panels for rate limit rejections, missing users, generic errors and no-match.

import traceback

from rich.panel import Panel
from rich.text import Text


def display_error(error: Exception, verbose: bool = False) -> Panel:
    """Format an error as a Rich Panel.

    Args:
        error: The exception to display.
        verbose: If True, include full traceback information.

    Returns:
        A Rich Panel containing formatted error information.
    """
    error_type = type(error).__name__
    error_message = str(error)

    content = Text()
    content.append(f"{error_type}: ", style="bold red")
    content.append(error_message, style="red")

    if verbose:
        content.append("\n\n")
        content.append("Traceback:", style="dim")
        content.append("\n")
        tb_text = "".join(traceback.format_exception(type(error), error, error.__traceback__))
        content.append(tb_text, style="dim")

    return Panel(
        content,
        title="Error",
        border_style="red",
        padding=(1, 2),
    )


def display_rate_limit_exceeded(reason: str) -> Panel:
    """Display a rate limit rejection.

    Args:
        reason: The limiter's wait estimate, shown verbatim.

    Returns:
        A Rich Panel showing when the user can try again.
    """
    message = Text()
    message.append("Slow down!\n\n", style="bold red")
    message.append(f"{reason}\n", style="yellow")

    return Panel(
        message,
        title="Rate Limit Exceeded",
        border_style="yellow",
        padding=(1, 2),
    )


def display_no_match() -> Panel:
    """Display the neutral notice shown when nobody is eligible to match.

    Returns:
        A Rich Panel suggesting to try again later.
    """
    message = Text()
    message.append("No one new to match with right now.\n\n", style="cyan")
    message.append("Try again later.", style="dim")

    return Panel(
        message,
        title="No Match",
        border_style="cyan",
        padding=(1, 2),
    )
