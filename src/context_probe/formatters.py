"""CLI output formatting helpers.

The transcript goes to stdout through click; the final error line goes to
stderr through a rich console.
"""

from typing import Callable

import click
from rich.console import Console
from rich.markup import escape

error_console = Console(stderr=True, emoji=False)

SEPARATOR = "---"


class TranscriptPrinter:
    """Prints the scenario transcript line by line."""

    def __init__(self, echo: Callable[[str], None] | None = None):
        self.echo = echo or click.echo

    def scenario_header(self, title: str) -> None:
        self.echo(f"=== {title} ===\n")

    def prompt(self, call_number: int, prompt: str) -> None:
        self.echo(f"Call {call_number}:")
        self.echo(f"Prompt: {prompt}")

    def response(self, response: str) -> None:
        """Print a response followed by the call separator."""
        self.echo(f"Response: {response}")
        self.echo(f"{SEPARATOR}\n")

    def scenario_gap(self) -> None:
        self.echo("\n")


def print_error(message: str) -> None:
    """Print the single diagnostic line for a failed run."""
    error_console.print(
        f"[red]Error calling Claude:[/red] {escape(message)}",
        soft_wrap=True,
        highlight=False,
    )


def print_config_error(message: str) -> None:
    error_console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True, highlight=False)
