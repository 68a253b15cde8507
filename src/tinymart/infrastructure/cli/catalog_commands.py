"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from tinymart.application.list_catalog import ListCatalogHandler
from tinymart.config import AppConfig
from tinymart.infrastructure.bootstrap import notifier, product_repository


@click.command("list")
@click.option(
    "--new-since",
    "new_since",
    type=int,
    default=None,
    help="Flag movies released in this year or later (default from config).",
)
@click.pass_obj
def catalog_list(config: AppConfig, new_since: int | None) -> None:
    """List all products in the catalog."""
    year = new_since if new_since is not None else config.new_release_year
    handler = ListCatalogHandler(product_repo=product_repository(notifier(config)))
    lines = handler.handle(new_release_year=year)

    if not lines:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<4} {'Kind':<11} {'Name':<26} {'Price':>9} {'Review':>7}")
    click.echo("-" * 61)
    for line in lines:
        marker = "  NEW" if line.new_release else ""
        click.echo(
            f"{line.id:<4} {line.kind:<11} {line.name:<26} {line.price:>9} "
            f"{line.review_rate:>7}{marker}"
        )
