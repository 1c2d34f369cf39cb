"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from fulfillment.domain.model.product import Product

DATE_FORMAT = "%Y-%m-%d %H:%M UTC"


def format_date(value: datetime | None) -> str | None:
    return value.strftime(DATE_FORMAT) if value is not None else None


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: int
    name: str
    type: str
    available: int
    lead_time: int
    season_start_date: str | None = None
    season_end_date: str | None = None
    expiry_date: str | None = None

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            type=product.type.value,
            available=product.available,
            lead_time=product.lead_time,
            season_start_date=format_date(product.season_start_date),
            season_end_date=format_date(product.season_end_date),
            expiry_date=format_date(product.expiry_date),
        )


@dataclass(frozen=True)
class OrderDTO:
    """Output: an order and the products it references, in sequence."""

    id: int
    product_names: list[str]
    created_at: str


@dataclass(frozen=True)
class ProcessedOrderDTO:
    """Output: confirmation of a processed order with post-fulfillment stock."""

    order_id: int
    products: list[ProductDTO]
