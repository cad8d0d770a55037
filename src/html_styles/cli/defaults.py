"""CLI commands: html-styles defaults / blocks -- show the default sheet."""

from __future__ import annotations

import json
import sys

import click

from html_styles.config import StylesConfig
from html_styles.defaults import create_html_styles
from html_styles.errors import UnknownTagError


@click.command()
@click.argument("tags", nargs=-1)
@click.option(
    "--base-font-size",
    default=None,
    type=float,
    help="Base font size the defaults scale from [default: 14]",
)
def defaults(tags: tuple[str, ...], base_font_size: float | None) -> None:
    """Print default tag styles as JSON.

    With no TAGS, prints the whole default stylesheet.
    """
    try:
        if base_font_size is None:
            config = StylesConfig()
        else:
            config = StylesConfig(base_font_size=base_font_size)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--base-font-size") from None

    styles = create_html_styles(config)
    names = tags or tuple(styles.default_styles)

    try:
        sheet = {name: dict(styles.style_for(name)) for name in names}
    except UnknownTagError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(json.dumps(sheet, indent=2))


@click.command()
def blocks() -> None:
    """List the tags laid out as block elements."""
    styles = create_html_styles()
    for tag in sorted(styles.block_elements):
        click.echo(tag)
