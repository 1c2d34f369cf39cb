"""Abstract repository for Order aggregate.

Orders are only created and read back; fulfillment never rewrites them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from fulfillment.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Return the id the next new order will receive."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return the order with its product sequence, or None if not found."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist an order, assigning ``order.id`` when it is None."""
