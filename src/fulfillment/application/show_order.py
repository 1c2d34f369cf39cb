"""Application service: Show Order use case (query)."""

from __future__ import annotations

from fulfillment.application.dto import DATE_FORMAT, OrderDTO
from fulfillment.domain.exceptions import EntityNotFoundError
from fulfillment.domain.repository.order_repository import OrderRepository
from fulfillment.domain.repository.product_repository import ProductRepository


class ShowOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        names: list[str] = []
        for product_id in order.product_ids:
            product = self._product_repo.get_by_id(product_id)
            # Products are never deleted by fulfillment, but the catalog may be edited by hand.
            names.append(product.name if product is not None else f"<missing #{product_id}>")

        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            product_names=names,
            created_at=order.created_at.strftime(DATE_FORMAT),
        )
