"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from fulfillment.application.create_order import CreateOrderHandler
from fulfillment.application.process_order import ProcessOrderHandler
from fulfillment.application.show_order import ShowOrderHandler
from fulfillment.domain.exceptions import DomainException
from fulfillment.infrastructure.bootstrap import (
    notification_service,
    order_repository,
    product_repository,
)
from fulfillment.infrastructure.cli.product_commands import display_products


def _parse_products(raw: str) -> list[str]:
    """Parse 'Milk,USB Cable,Milk' into a list of product names."""
    names = [name.strip() for name in raw.split(",")]
    if any(not name for name in names):
        raise click.BadParameter(
            f"Invalid product list '{raw}'. Expected 'Name,Name,...'."
        )
    return names


@click.command("create")
@click.option("--products", required=True, help="Product names as 'Name,Name'.")
def order_create(products: str) -> None:
    """Create a new fulfillment order."""
    names = _parse_products(products)

    handler = CreateOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(names)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} created with {len(dto.product_names)} product(s)")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    for position, name in enumerate(dto.product_names, start=1):
        click.echo(f"  {position:>3}. {name}")


@click.command("process")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to process.")
def order_process(order_id: int) -> None:
    """Fulfill an order: update stock and notify customers."""
    handler = ProcessOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
        notification_service=notification_service(),
    )

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.order_id} processed.")
    click.echo()
    display_products(dto.products)
