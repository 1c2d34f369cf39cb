"""Application service: Add Product use case."""

from __future__ import annotations

from datetime import datetime

from fulfillment.application.dto import ProductDTO
from fulfillment.domain.exceptions import ValidationError
from fulfillment.domain.model.product import Product, ProductType
from fulfillment.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        product_type: str,
        available: int = 0,
        lead_time: int = 0,
        season_start_date: datetime | None = None,
        season_end_date: datetime | None = None,
        expiry_date: datetime | None = None,
    ) -> ProductDTO:
        """Add a new product to the catalog."""
        try:
            type_ = ProductType(product_type.upper())
        except ValueError:
            raise ValidationError(f"Unknown product type '{product_type}'")

        existing = self._product_repo.get_by_name(name)
        if existing is not None:
            raise ValidationError(f"Product '{name}' already exists")

        # Auto-assign ID based on existing products
        all_products = self._product_repo.list_all()
        next_id = max((p.id for p in all_products), default=0) + 1

        product = Product.create(
            id=next_id,
            name=name,
            type=type_,
            available=available,
            lead_time=lead_time,
            season_start_date=season_start_date,
            season_end_date=season_end_date,
            expiry_date=expiry_date,
        )
        self._product_repo.save(product)
        return ProductDTO.from_product(product)
