"""User-facing output helpers.

All diagnostics and progress text go to stderr so that stdout stays clean.
"""

import click


def user_output(message: str = "") -> None:
    """Write a line of human-readable output to stderr."""
    click.echo(message, err=True)


def success_mark() -> str:
    return click.style("✓", fg="green")


def failure_mark() -> str:
    return click.style("✗", fg="red")
