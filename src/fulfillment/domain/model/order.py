"""Order aggregate.

An order is a transient grouping of product references. It sequences
processing and owns no stock of its own. Products outlive orders.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from fulfillment.domain.exceptions import ValidationError


@dataclass
class Order:
    """Aggregate root for fulfillment orders.

    ``product_ids`` is the processing sequence. The same id may appear
    more than once; each occurrence is fulfilled separately.
    """

    id: int | None
    product_ids: list[int]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(product_ids: list[int]) -> Order:
        """Create a new order, enforcing all invariants."""
        if not product_ids:
            raise ValidationError("Order must contain at least one product")
        return Order(id=None, product_ids=list(product_ids))
