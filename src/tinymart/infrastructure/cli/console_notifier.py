"""Notifier that writes straight to the terminal via click."""

from __future__ import annotations

import click

from tinymart.domain.model.cart import CartReport
from tinymart.domain.model.product import ProductDescription
from tinymart.domain.notifier import Notifier


class ConsoleNotifier(Notifier):

    def info(self, message: str) -> None:
        click.echo(message)

    def warn(self, message: str) -> None:
        click.echo(f"Warning: {message}", err=True)

    def report(self, report: CartReport) -> None:
        click.echo()
        click.echo("My Cart")
        click.echo("=======")
        click.echo(f"Cart Owner: {report.owner_name}")

        for item in report.items:
            _display_product(item)

        click.echo()
        click.echo("===== Summary of Purchase =====")
        click.echo(f"Total number of purchases: {report.total_count}")
        click.echo(f"Total purchasing amount: {report.total_amount}")
        click.echo(f"Average cost: {report.average_cost}")


def _display_product(item: ProductDescription) -> None:
    """Header line, price line, then one line per variant field."""
    click.echo()
    click.echo(f"[{item.kind}] Product ID: {item.product_id} Product Name: {item.name}")
    click.echo(f"Price: {item.price} Product Review Rate: {item.review_rate}")
    for label, value in item.details:
        click.echo(f"{label}: {value}")
