"""Application service: Create Order use case.

Resolves product names to catalog ids and records the order. Nothing is
fulfilled here; processing is a separate step.
"""

from __future__ import annotations

from fulfillment.application.dto import DATE_FORMAT, OrderDTO
from fulfillment.domain.exceptions import EntityNotFoundError
from fulfillment.domain.model.order import Order
from fulfillment.domain.repository.order_repository import OrderRepository
from fulfillment.domain.repository.product_repository import ProductRepository


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, product_names: list[str]) -> OrderDTO:
        product_ids: list[int] = []
        names: list[str] = []

        for name in product_names:
            product = self._product_repo.get_by_name(name.strip())
            if product is None:
                raise EntityNotFoundError(f"Product not found: '{name.strip()}'")
            product_ids.append(product.id)
            names.append(product.name)

        order = Order.create(product_ids)
        self._order_repo.save(order)

        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            product_names=names,
            created_at=order.created_at.strftime(DATE_FORMAT),
        )
