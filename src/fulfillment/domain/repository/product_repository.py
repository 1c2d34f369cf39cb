"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from fulfillment.domain.model.product import Product

# Fields the fulfillment engine is allowed to rewrite.
UPDATABLE_FIELDS = frozenset({"available", "lead_time"})


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by its exact name, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def update_fields(self, product_id: int, fields: dict[str, Any]) -> None:
        """Write only ``fields`` to the stored product with ``product_id``.

        Raises EntityNotFoundError for an unknown id and ValidationError
        for a field outside ``UPDATABLE_FIELDS``.
        """
