"""CLI commands: cssbuild rectangle / cssbuild decode."""

from __future__ import annotations

import sys

import click

from cssbuild.errors import RecordError
from cssbuild.records import Rectangle, from_json, make_rectangle, to_json


def _number(value: float) -> float | int:
    return int(value) if value.is_integer() else value


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def rectangle(width: float, height: float) -> None:
    """Print a WIDTH x HEIGHT rectangle as JSON, followed by its area."""
    rect = make_rectangle(_number(width), _number(height))
    click.echo(to_json(rect))
    click.echo(f"area: {rect.area()}")


@click.command()
@click.argument("text")
def decode(text: str) -> None:
    """Decode a JSON rectangle such as '{"width":10,"height":20}'."""
    try:
        rect = from_json(Rectangle, text)
    except RecordError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    for name in ("width", "height"):
        if not hasattr(rect, name):
            click.echo(f"Error: missing rectangle field {name!r}", err=True)
            sys.exit(1)
        value = getattr(rect, name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            click.echo(
                f"Error: rectangle field {name!r} must be a number, got {value!r}",
                err=True,
            )
            sys.exit(1)

    area = rect.area()
    click.echo(f"width: {rect.width}")
    click.echo(f"height: {rect.height}")
    click.echo(f"area: {area}")
