"""CLI command: objects-tasks json -- parse and re-serialize a JSON document."""

from __future__ import annotations

import json
import sys
from dataclasses import replace

import click
from click.core import ParameterSource

from objects_tasks.config import ObjectsTasksConfig
from objects_tasks.serialization import serialize


@click.command(name="json")
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option("--indent", type=int, default=None, help="Indent width (defaults to the group setting)")
@click.option("--sort-keys/--no-sort-keys", default=False, help="Sort object keys (defaults to the group setting)")
@click.pass_context
def reformat(
    ctx: click.Context, source, indent: int | None, sort_keys: bool
) -> None:
    """Read JSON from SOURCE ('-' for stdin) and print it re-serialized."""
    config: ObjectsTasksConfig = ctx.obj or ObjectsTasksConfig()
    # Options given on this command override the group-level config.
    if indent is not None:
        config = replace(config, json_indent=indent)
    if ctx.get_parameter_source("sort_keys") is not ParameterSource.DEFAULT:
        config = replace(config, json_sort_keys=sort_keys)

    try:
        data = json.load(source)
    except json.JSONDecodeError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(
        serialize(data, indent=config.json_indent, sort_keys=config.json_sort_keys)
    )
