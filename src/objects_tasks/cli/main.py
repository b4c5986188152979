"""objects-tasks CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from objects_tasks import __version__
from objects_tasks.config import ObjectsTasksConfig


@click.group()
@click.version_option(version=__version__, prog_name="objects-tasks")
@click.option("--verbose/--quiet", default=False, help="Enable debug logging")
@click.option("--json-indent", type=int, default=None, help="Default indent for JSON output")
@click.option("--json-sort-keys", is_flag=True, default=False, help="Sort JSON keys by default")
@click.pass_context
def cli(
    ctx: click.Context, verbose: bool, json_indent: int | None, json_sort_keys: bool
) -> None:
    """objects-tasks - build CSS selectors, compute areas, reformat JSON."""
    config = ObjectsTasksConfig(
        json_indent=json_indent,
        json_sort_keys=json_sort_keys,
        log_level="DEBUG" if verbose else "WARNING",
    )
    logging.basicConfig(level=config.log_level)
    logging.getLogger("objects_tasks").setLevel(config.log_level)
    ctx.obj = config


# Import and register subcommands
from objects_tasks.cli.selector import combine, selector  # noqa: E402
from objects_tasks.cli.area import area  # noqa: E402
from objects_tasks.cli.reformat import reformat  # noqa: E402

cli.add_command(selector)
cli.add_command(combine)
cli.add_command(area)
cli.add_command(reformat)
