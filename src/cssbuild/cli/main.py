"""cssbuild CLI entry point: Click group with subcommands."""

import logging

import click

from cssbuild import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssbuild")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """cssbuild - build CSS selector strings and JSON records."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from cssbuild.cli.selector import combine, selector  # noqa: E402
from cssbuild.cli.records import decode, rectangle  # noqa: E402

cli.add_command(selector)
cli.add_command(combine)
cli.add_command(rectangle)
cli.add_command(decode)
