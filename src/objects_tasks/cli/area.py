"""CLI command: objects-tasks area -- print a rectangle's area."""

from __future__ import annotations

import click

from objects_tasks.rectangle import Rectangle


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    value = Rectangle(width, height).area()
    if value.is_integer():
        click.echo(str(int(value)))
    else:
        click.echo(str(value))
