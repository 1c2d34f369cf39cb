"""Domain service: Order Processing.

Runs every product of an order through its type strategy and applies
the outcome. Two phases per product:

  Phase 1, decide: the strategy returns a ProcessingResult.  No I/O.
  Phase 2, apply:  the stock change is written through the repository,
            and only once that write has returned is the notification
            sent.

Products are processed one at a time, in order, so each decision sees
the stock left by the previous one.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import structlog

from fulfillment.domain.exceptions import DomainException
from fulfillment.domain.model.processing_result import ProcessingResult
from fulfillment.domain.model.product import Product
from fulfillment.domain.repository.product_repository import ProductRepository
from fulfillment.domain.service.notification_service import NotificationService
from fulfillment.domain.service.product_strategies import Clock, utc_now
from fulfillment.domain.service.strategy_selector import StrategySelector

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ProductOutcome:
    """Per-item report produced by ``process_order_tolerant``."""

    product_id: int
    result: ProcessingResult | None = None
    error: DomainException | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


class OrderProcessingService:

    def __init__(
        self,
        product_repo: ProductRepository,
        notification_service: NotificationService,
        clock: Clock = utc_now,
    ) -> None:
        self._product_repo = product_repo
        self._selector = StrategySelector(notification_service, clock)

    def process_product_order(self, product: Product) -> ProcessingResult:
        """Fulfill one unit of ``product``.

        Errors from the selector, the strategy, the repository or the
        notification sender propagate unchanged.
        """
        strategy = self._selector.select(product.type)
        result = strategy.evaluate(product)

        logger.debug(
            "Product evaluated",
            product_id=product.id,
            product_type=getattr(product.type, "value", product.type),
            strategy=type(strategy).__name__,
            update_stock=result.should_update_stock,
            updated_fields=result.updated_fields,
            notify=result.notify is not None,
        )

        if result.should_update_stock and result.updated_fields:
            self._product_repo.update_fields(product.id, result.updated_fields)

        if result.notify is not None:
            result.notify()

        return result

    def process_order(self, products: Iterable[Product]) -> None:
        """Fulfill every product in sequence.

        The first failure halts the remaining products. Writes already
        applied for earlier products are kept.
        """
        count = 0
        for product in products:
            self.process_product_order(product)
            count += 1
        logger.info("Order products processed", product_count=count)

    def process_order_tolerant(self, products: Iterable[Product]) -> list[ProductOutcome]:
        """Fulfill every product, recording domain failures per item.

        Only DomainException is captured (unsupported type, missing
        dates, unknown product). Other errors raised by the repository
        or the notification sender still propagate.
        """
        outcomes: list[ProductOutcome] = []
        for product in products:
            try:
                result = self.process_product_order(product)
            except DomainException as exc:
                logger.warning(
                    "Product skipped",
                    product_id=product.id,
                    error=str(exc),
                    error_type=type(exc).__name__,
                )
                outcomes.append(ProductOutcome(product_id=product.id, error=exc))
                continue
            outcomes.append(ProductOutcome(product_id=product.id, result=result))

        logger.info(
            "Order products processed",
            product_count=len(outcomes),
            failed_count=sum(1 for o in outcomes if not o.succeeded),
        )
        return outcomes
