"""CLI commands for the Cart aggregate."""

from __future__ import annotations

import click

from tinymart.application.add_to_cart import AddToCartHandler
from tinymart.config import AppConfig
from tinymart.domain.exceptions import DomainException
from tinymart.domain.model.cart import Cart
from tinymart.domain.model.value_objects import PersonName
from tinymart.infrastructure.bootstrap import notifier, product_repository
from tinymart.infrastructure.sample_catalog import (
    DEMO_CART_IDS,
    DEMO_OVERFLOW_ID,
    DEMO_REMOVED_IDS,
)


@click.command("demo")
@click.pass_obj
def cart_demo(config: AppConfig) -> None:
    """Fill a cart past capacity, remove two items, print the report."""
    out = notifier(config)
    handler = AddToCartHandler(product_repo=product_repository(out))
    cart = Cart(owner=config.default_owner, notifier=out)

    for product_id in DEMO_CART_IDS:
        handler.handle(cart, product_id)

    success = handler.handle(cart, DEMO_OVERFLOW_ID)
    click.echo(f"Adding 8th item successful? {str(success).lower()}")

    for product_id in DEMO_REMOVED_IDS:
        cart.remove_item(product_id)

    cart.generate_report()


@click.command("report")
@click.option("--owner", default=None, help="Cart owner as 'First Last'.")
@click.option("--add", "add_ids", multiple=True, type=int, help="Catalog ID to add (repeatable).")
@click.option("--remove", "remove_ids", multiple=True, type=int, help="Product ID to remove (repeatable).")
@click.pass_obj
def cart_report(
    config: AppConfig,
    owner: str | None,
    add_ids: tuple[int, ...],
    remove_ids: tuple[int, ...],
) -> None:
    """Build a cart from catalog IDs and print its report.

    Adds run first, in the order given, then removals.
    """
    out = notifier(config)
    handler = AddToCartHandler(product_repo=product_repository(out))
    cart_owner = PersonName.parse(owner) if owner else config.default_owner
    cart = Cart(owner=cart_owner, notifier=out)

    try:
        for product_id in add_ids:
            handler.handle(cart, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for product_id in remove_ids:
        cart.remove_item(product_id)

    cart.generate_report()
