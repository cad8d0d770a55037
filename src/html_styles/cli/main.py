"""html-styles CLI entry point: Click group with subcommands."""

import logging

import click

from html_styles import __version__


@click.group()
@click.version_option(version=__version__, prog_name="html-styles")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """html-styles - convert inline CSS to style objects."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Import and register subcommands
from html_styles.cli.convert import convert  # noqa: E402
from html_styles.cli.defaults import blocks, defaults  # noqa: E402

cli.add_command(convert)
cli.add_command(defaults)
cli.add_command(blocks)
