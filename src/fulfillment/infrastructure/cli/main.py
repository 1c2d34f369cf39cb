import click

from fulfillment.infrastructure.bootstrap import log_level
from fulfillment.infrastructure.cli.order_commands import (
    order_create,
    order_process,
    order_show,
)
from fulfillment.infrastructure.cli.product_commands import product_add, product_list
from fulfillment.infrastructure.logging import configure_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log at DEBUG level.")
@click.option("--json-logs", is_flag=True, default=False, help="Emit logs as JSON lines.")
def cli(verbose: bool, json_logs: bool) -> None:
    """Order fulfillment engine"""
    configure_logging("DEBUG" if verbose else log_level(), json_logs=json_logs)


@cli.group()
def order() -> None:
    """Manage and process orders."""


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_process)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_list)
