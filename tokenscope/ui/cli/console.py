"""
Console reporter — the click-backed ``Reporter`` used by the CLI.

Success lines are green, errors red on stderr.  ``echo`` writes raw
text to stdout without adding a newline (the mirrored report carries
its own).
"""

from __future__ import annotations

import click


class ConsoleReporter:
    """Reporter that prints to the terminal via click."""

    def info(self, message: str) -> None:
        click.echo(message)

    def success(self, message: str) -> None:
        click.secho(message, fg="green")

    def error(self, message: str) -> None:
        click.secho(f"Error: {message}", fg="red", err=True)

    def echo(self, text: str) -> None:
        click.echo(text, nl=False)
