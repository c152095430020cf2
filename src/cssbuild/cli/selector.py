"""CLI commands: cssbuild selector / cssbuild combine."""

from __future__ import annotations

import sys
from dataclasses import replace

import click

from cssbuild.config import BuilderConfig
from cssbuild.errors import SelectorError
from cssbuild.selector import Fragment, SelectorBuilder, SelectorFacade

_KINDS = {
    "element": Fragment.ELEMENT,
    "id": Fragment.ID,
    "class": Fragment.CLASS,
    "attr": Fragment.ATTRIBUTE,
    "pseudo-class": Fragment.PSEUDO_CLASS,
    "pseudo-element": Fragment.PSEUDO_ELEMENT,
}


def _parse_part(raw: str) -> tuple[Fragment, str]:
    kind, sep, value = raw.partition("=")
    if not sep or kind not in _KINDS:
        raise click.BadParameter(
            f"{raw!r} is not KIND=VALUE with KIND one of: {', '.join(_KINDS)}",
            param_hint="PARTS",
        )
    return _KINDS[kind], value


@click.command()
@click.argument("parts", nargs=-1, required=True)
def selector(parts: tuple[str, ...]) -> None:
    """Build a simple selector from KIND=VALUE parts, applied in order.

    Example: cssbuild selector element=a 'attr=href$=".png"' pseudo-class=focus
    """
    fragments = [_parse_part(raw) for raw in parts]
    builder = SelectorBuilder()
    try:
        for fragment, value in fragments:
            builder.add(fragment, value)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(builder.stringify())


@click.command()
@click.argument("left")
@click.argument("combinator")
@click.argument("right")
@click.option(
    "--permissive",
    is_flag=True,
    help="Pass unknown combinators through instead of rejecting them",
)
def combine(left: str, combinator: str, right: str, permissive: bool) -> None:
    """Join two selectors: LEFT COMBINATOR RIGHT."""
    config = BuilderConfig.from_env()
    if permissive:
        config = replace(config, strict_combinators=False)
    try:
        joined = SelectorFacade(config).combine(left, combinator, right)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(joined.stringify())
