"""CLI commands: objects-tasks selector / combine -- render CSS selectors."""

from __future__ import annotations

import sys

import click

from objects_tasks.errors import SelectorError
from objects_tasks.selector import SimpleSelector


class _Rendered:
    """Selector text that was already rendered, e.g. passed on the command line."""

    def __init__(self, text: str) -> None:
        self.text = text

    def stringify(self) -> str:
        return self.text


@click.command()
@click.option("--element", "element_name", default=None, help="Element (type) name")
@click.option("--id", "id_name", default=None, help="Id, without the '#'")
@click.option("--class", "class_names", multiple=True, help="Class name (repeatable)")
@click.option("--attr", "attribute_expr", default=None, help="Attribute expression, without brackets")
@click.option("--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class (repeatable)")
@click.option("--pseudo-element", "pseudo_element", default=None, help="Pseudo-element name")
def selector(
    element_name: str | None,
    id_name: str | None,
    class_names: tuple[str, ...],
    attribute_expr: str | None,
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Build a simple selector from its parts and print it."""
    sel = SimpleSelector()
    try:
        if element_name is not None:
            sel.element(element_name)
        if id_name is not None:
            sel.id(id_name)
        if class_names:
            sel.class_(*class_names)
        if attribute_expr is not None:
            sel.attr(attribute_expr)
        if pseudo_classes:
            sel.pseudo_class(*pseudo_classes)
        if pseudo_element is not None:
            sel.pseudo_element(pseudo_element)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    if sel.category is None:
        click.echo("Selector error: no selector parts given", err=True)
        sys.exit(1)

    click.echo(sel.stringify())


@click.command()
@click.argument("left")
@click.argument("combinator")
@click.argument("right")
def combine(left: str, combinator: str, right: str) -> None:
    """Join two rendered selectors with COMBINATOR and print the result."""
    from objects_tasks.selector import selector_builder

    combined = selector_builder.combine(_Rendered(left), combinator, _Rendered(right))
    click.echo(combined.stringify())
