"""CLI commands for the Product aggregate."""

from __future__ import annotations

from datetime import datetime, timezone

import click

from fulfillment.application.add_product import AddProductHandler
from fulfillment.application.dto import ProductDTO
from fulfillment.application.list_products import ListProductsHandler
from fulfillment.domain.exceptions import DomainException
from fulfillment.domain.model.product import ProductType
from fulfillment.infrastructure.bootstrap import product_repository

_DATE = click.DateTime(formats=["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S"])


def _utc(value: datetime | None) -> datetime | None:
    """Command-line dates carry no zone; they are read as UTC."""
    if value is None:
        return None
    return value.replace(tzinfo=timezone.utc)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option(
    "--type", "product_type", required=True,
    type=click.Choice([t.value for t in ProductType], case_sensitive=False),
    help="Product type.",
)
@click.option("--available", default=0, type=int, help="Units in stock.")
@click.option("--lead-time", default=0, type=int, help="Days until restock.")
@click.option("--season-start", type=_DATE, default=None, help="SEASONAL: first day of season.")
@click.option("--season-end", type=_DATE, default=None, help="SEASONAL: end of season (exclusive).")
@click.option("--expiry", type=_DATE, default=None, help="EXPIRABLE: expiry date.")
def product_add(
    name: str,
    product_type: str,
    available: int,
    lead_time: int,
    season_start: datetime | None,
    season_end: datetime | None,
    expiry: datetime | None,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(
            name=name,
            product_type=product_type,
            available=available,
            lead_time=lead_time,
            season_start_date=_utc(season_start),
            season_end_date=_utc(season_end),
            expiry_date=_utc(expiry),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' added ({dto.type}, {dto.available} in stock)")


def display_products(products: list[ProductDTO]) -> None:
    """Shared table layout for product listings."""
    click.echo(f"{'ID':<6} {'Name':<20} {'Type':<10} {'Avail':>6} {'Lead':>5}  Dates")
    click.echo("-" * 70)
    for p in products:
        if p.type == ProductType.SEASONAL.value:
            dates = f"{p.season_start_date} -> {p.season_end_date}"
        elif p.type == ProductType.EXPIRABLE.value:
            dates = f"expires {p.expiry_date}"
        else:
            dates = ""
        click.echo(
            f"{p.id:<6} {p.name:<20} {p.type:<10} {p.available:>6} {p.lead_time:>5}  {dates}"
        )


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = ListProductsHandler(product_repo=product_repository()).handle()

    if not products:
        click.echo("No products found.")
        return

    display_products(products)
