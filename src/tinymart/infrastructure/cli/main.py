import logging

import click

from tinymart.config import DEFAULT_CONFIG, AppConfig
from tinymart.infrastructure.cli.cart_commands import cart_demo, cart_report
from tinymart.infrastructure.cli.catalog_commands import catalog_list


@click.group()
@click.option(
    "--log-level",
    default=DEFAULT_CONFIG.log_level,
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity.",
)
@click.option(
    "--output",
    default=DEFAULT_CONFIG.output,
    show_default=True,
    type=click.Choice(["console", "log"]),
    help="Send cart messages and reports to the terminal or to the log.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str, output: str) -> None:
    """TinyMart — catalog and shopping cart"""
    config = AppConfig(
        log_level=log_level.upper(),
        output=output,
        new_release_year=DEFAULT_CONFIG.new_release_year,
        default_owner=DEFAULT_CONFIG.default_owner,
    )
    logging.basicConfig(level=config.log_level)
    ctx.obj = config


@cli.group()
def catalog() -> None:
    """Browse the product catalog."""


@cli.group()
def cart() -> None:
    """Fill a cart and print its report."""


# Register subcommands
catalog.add_command(catalog_list)
cart.add_command(cart_demo)
cart.add_command(cart_report)
