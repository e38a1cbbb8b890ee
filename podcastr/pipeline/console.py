"""
Operator-facing terminal interface.

All prompts and status lines of the interactive pipeline go through
OperatorConsole, built on Rich.
"""

from typing import List, Optional
from urllib.parse import urlparse

from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, Prompt


MIN_INPUT_LENGTH = 3
MAX_TEXT_LENGTH = 200
MAX_URL_LENGTH = 250


def validate_text(value: str, max_length: Optional[int] = MAX_TEXT_LENGTH) -> Optional[str]:
    """
    Check a free-text answer.

    Args:
        value: Operator input
        max_length: Upper bound, or None for no limit

    Returns:
        Error message, or None if the value is acceptable
    """
    if len(value) < MIN_INPUT_LENGTH:
        return "Value too short"
    if max_length is not None and len(value) > max_length:
        return "Value too long"
    return None


def validate_url(value: str, require_https: bool = False) -> Optional[str]:
    """
    Check that the input is an absolute web URL.

    Args:
        value: Operator input
        require_https: Reject plain http URLs

    Returns:
        Error message, or None if the value is acceptable
    """
    if len(value) < MIN_INPUT_LENGTH:
        return "URL too short"
    if len(value) > MAX_URL_LENGTH:
        return "URL too long"

    parsed = urlparse(value)
    allowed = ("https",) if require_https else ("http", "https")
    if parsed.scheme not in allowed or not parsed.netloc:
        return "No valid URL"
    return None


class OperatorConsole:
    """Prompts and messages for the operator running the pipeline."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def show_header(self) -> None:
        self.console.clear()
        self.console.print(
            Align.center(
                Panel(
                    "[bold red]Podcastr[/bold red]\n"
                    "[red]Turn any web page into a podcast episode[/red]",
                    expand=False,
                )
            )
        )
        self.console.print()

    def ask_text(self, prompt: str, max_length: Optional[int] = MAX_TEXT_LENGTH) -> str:
        while True:
            value = Prompt.ask(prompt, console=self.console).strip()
            error = validate_text(value, max_length)
            if error is None:
                return value
            self.write_error(error)

    def ask_url(self, prompt: str, require_https: bool = False) -> str:
        while True:
            value = Prompt.ask(prompt, console=self.console).strip()
            error = validate_url(value, require_https)
            if error is None:
                return value
            self.write_error(error)

    def select(self, options: List[str], prompt: str) -> str:
        return Prompt.ask(
            prompt, choices=options, default=options[0], console=self.console
        )

    def confirm(self, prompt: str, default: bool) -> bool:
        self.console.print()
        return Confirm.ask(prompt, default=default, console=self.console)

    def write_message(self, message: str) -> None:
        self.console.print(f"[white]{escape(message)}[/white]")

    def write_error(self, message: str) -> None:
        self.console.print(f"[red]{escape(message)}[/red]")
