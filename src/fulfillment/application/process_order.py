"""Application service: Process Order use case.

The inbound trigger for fulfillment. Resolves an order id to its product
list and hands the list to the order processing service. Every product
id is resolved before anything is processed, so a dangling reference
fails the request without touching stock.
"""

from __future__ import annotations

import structlog

from fulfillment.application.dto import ProcessedOrderDTO, ProductDTO
from fulfillment.domain.exceptions import EntityNotFoundError
from fulfillment.domain.model.product import Product
from fulfillment.domain.repository.order_repository import OrderRepository
from fulfillment.domain.repository.product_repository import ProductRepository
from fulfillment.domain.service.notification_service import NotificationService
from fulfillment.domain.service.order_processing_service import (
    OrderProcessingService,
)
from fulfillment.domain.service.product_strategies import Clock, utc_now

logger = structlog.get_logger(__name__)


class ProcessOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        notification_service: NotificationService,
        clock: Clock = utc_now,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._service = OrderProcessingService(
            product_repo, notification_service, clock
        )

    def handle(self, order_id: int) -> ProcessedOrderDTO:
        """Process an order and return the resulting stock of its products.

        Any error aborts the request; there is no partial-success report.
        """
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        logger.info(
            "Processing order", order_id=order_id, product_count=len(order.product_ids)
        )

        unique_ids = list(dict.fromkeys(order.product_ids))
        for product_id in unique_ids:
            self._load(product_id)

        # Loaded lazily so a product ordered twice sees its own earlier decrement.
        self._service.process_order(self._load(pid) for pid in order.product_ids)

        products = [self._load(pid) for pid in unique_ids]
        logger.info("Order processed", order_id=order_id)
        return ProcessedOrderDTO(
            order_id=order_id,
            products=[ProductDTO.from_product(p) for p in products],
        )

    def _load(self, product_id: int) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        return product
