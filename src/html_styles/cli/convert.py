"""CLI command: html-styles convert -- convert a declaration string."""

from __future__ import annotations

import json

import click

from html_styles.config import StylesConfig
from html_styles.defaults import create_html_styles


@click.command()
@click.argument("style")
@click.option(
    "--numeric",
    "numeric",
    multiple=True,
    help="Reduce px values of this (camelCase) property to numbers; repeatable",
)
@click.option("--raw", is_flag=True, help="Print parsed declarations without converting")
def convert(style: str, numeric: tuple[str, ...], raw: bool) -> None:
    """Convert an inline CSS declaration string to a style object.

    Prints the result as JSON.  Malformed declarations are dropped.
    """
    styles = create_html_styles(StylesConfig(numeric_properties=frozenset(numeric)))
    if raw:
        result = styles.string_to_object(style)
    else:
        result = styles.string_to_style(style)
    click.echo(json.dumps(result, indent=2))
