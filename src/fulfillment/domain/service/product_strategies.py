"""Domain service: per-type processing strategies.

Each strategy decides, for a single product, whether stock changes and
which notification the customer should get. Strategies never touch a
repository and never send anything themselves; the notification is
returned as a deferred callable for the order processor to run after
the stock write.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from fulfillment.domain.model.processing_result import ProcessingResult
from fulfillment.domain.model.product import Product
from fulfillment.domain.service.notification_service import NotificationService

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ProductStrategy(ABC):

    def __init__(
        self,
        notification_service: NotificationService,
        clock: Clock = utc_now,
    ) -> None:
        self._notifications = notification_service
        self._clock = clock

    @abstractmethod
    def evaluate(self, product: Product) -> ProcessingResult:
        """Decide the stock change and notification for one ordered unit."""

    # --- Deferred notifications -----------------------------------------------

    def _delay(self, product: Product) -> Callable[[], None]:
        lead_time, name = product.lead_time, product.name
        return lambda: self._notifications.send_delay_notification(lead_time, name)

    def _out_of_stock(self, product: Product) -> Callable[[], None]:
        name = product.name
        return lambda: self._notifications.send_out_of_stock_notification(name)

    def _expired(self, product: Product, expiry_date: datetime) -> Callable[[], None]:
        name = product.name
        return lambda: self._notifications.send_expiration_notification(
            name, expiry_date
        )


class NormalProductStrategy(ProductStrategy):
    """Always-stocked catalog items.

    Out of stock with a lead time means a restock is on its way: the
    customer is told how long to wait. Out of stock with no lead time
    means the item is gone for good and nothing happens.
    """

    def evaluate(self, product: Product) -> ProcessingResult:
        if product.available > 0:
            return ProcessingResult.update({"available": product.available - 1})

        if product.lead_time > 0:
            return ProcessingResult.update(
                {"lead_time": product.lead_time}, notify=self._delay(product)
            )

        return ProcessingResult.no_action()


class SeasonalProductStrategy(ProductStrategy):
    """Products sold from stock only strictly inside ``(start, end)``.

    The boundary instants themselves count as out of season.
    """

    def evaluate(self, product: Product) -> ProcessingResult:
        season_start, season_end = product.season_window()
        now = self._clock()

        if season_start < now < season_end and product.available > 0:
            return ProcessingResult.update({"available": product.available - 1})

        if product.available == 0:
            restock_date = now + timedelta(days=product.lead_time)
            if restock_date > season_end:
                # Restock lands after the season closes.
                return ProcessingResult.update(
                    {"available": 0}, notify=self._out_of_stock(product)
                )
            return ProcessingResult.update(
                {"lead_time": product.lead_time}, notify=self._delay(product)
            )

        # Pre-season demand is reported as unavailable, not queued.
        if now < season_start:
            return ProcessingResult.notify_only(self._out_of_stock(product))

        return ProcessingResult.no_action()


class ExpirableProductStrategy(ProductStrategy):
    """Perishable products.

    Expired stock is discarded: ``available`` is forced to zero even when
    units remain. An exhausted but unexpired product gets the same
    expiration notification.
    """

    def evaluate(self, product: Product) -> ProcessingResult:
        expiry_date = product.required_expiry_date()

        if product.available > 0 and expiry_date > self._clock():
            return ProcessingResult.update({"available": product.available - 1})

        return ProcessingResult.update(
            {"available": 0}, notify=self._expired(product, expiry_date)
        )
