"""CLI interface for sitemeta.

Command-line tool for generating and inspecting sitemaps and structured data.
"""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from sitemeta.config import Config
from sitemeta.core.breadcrumbs import breadcrumbs_from_url
from sitemeta.core.sitemap import SitemapCodec, SitemapError


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (debug logging)",
)
def cli(verbose: bool) -> None:
    """sitemeta - sitemaps and structured metadata for web pages."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.group()
def sitemap() -> None:
    """Sitemap XML commands."""


cli.add_command(sitemap)


@sitemap.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover sitemeta.toml)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Sitemap file to write (overrides config)",
)
def generate(config_path: Path | None, output: Path | None) -> None:
    """Generate a sitemap file from the configured navigation links."""
    try:
        config = Config.load(config_path).with_overrides(output=output)
        navigation = config.navigation_list()
        SitemapCodec().to_sitemap_file(navigation, config.sitemap.output)
    except (FileNotFoundError, ValueError, SitemapError) as e:
        _fail(e)

    count = len(navigation.items or [])
    if count == 0:
        click.echo(
            click.style("Warning: no navigation links configured", fg="yellow"),
            err=True,
        )
    click.echo(f"Wrote {count} URLs to {config.sitemap.output}")


@sitemap.command()
@click.argument("sitemap_file", type=click.Path(path_type=Path, dir_okay=False))
@click.option(
    "--json-ld",
    "json_ld",
    is_flag=True,
    help="Print the navigation as a JSON-LD ItemList script instead of a URL list",
)
@click.option(
    "--identifier",
    default="",
    help="ItemList identifier used with --json-ld",
)
def show(sitemap_file: Path, json_ld: bool, identifier: str) -> None:
    """Read a sitemap file and list its URLs in document order."""
    try:
        navigation = SitemapCodec().from_sitemap_file(sitemap_file)
    except SitemapError as e:
        _fail(e)

    if json_ld:
        navigation.identifier = identifier
        click.echo(navigation.to_json_ld())
        return

    items = navigation.items or []
    for item in items:
        click.echo(f"{item.position:>4}  {item.url}")
    click.echo(f"\n{len(items)} URLs")


@cli.command()
@click.argument("url")
def breadcrumbs(url: str) -> None:
    """Print the BreadcrumbList JSON-LD derived from a page URL."""
    try:
        breadcrumb_list = breadcrumbs_from_url(url)
    except ValueError as e:
        _fail(e)

    click.echo(breadcrumb_list.to_json_ld())


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover sitemeta.toml)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
def serve(config_path: Path | None, host: str | None, port: int | None) -> None:
    """Serve /sitemap.xml and metadata endpoints over HTTP."""
    from sitemeta.server import run_server

    try:
        config = Config.load(config_path).with_overrides(host=host, port=port)
    except (FileNotFoundError, ValueError) as e:
        _fail(e)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Navigation links: {len(config.navigation.links)}")
    if config.site.base_url:
        click.echo(f"Site URL: {config.site.base_url}")

    run_server(config)


def _fail(error: Exception) -> NoReturn:
    click.echo(click.style(f"Error: {error}", fg="red"), err=True)
    sys.exit(1)
