"""Output helpers for CLI commands with clear intent.

user_output is for messages aimed at a person (status, warnings, errors) and
goes to stderr. machine_output is for data a caller may pipe or parse and
goes to stdout.
"""

import click


def user_output(message: str = "") -> None:
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    click.echo(message)


def error_output(message: str) -> None:
    """Print a red "Error:" prefixed message to stderr."""
    user_output(click.style("Error: ", fg="red") + message)


def warning_output(message: str) -> None:
    user_output(click.style("Warning: ", fg="yellow") + message)
