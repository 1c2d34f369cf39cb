"""Domain service: maps a product type tag to its processing strategy."""

from __future__ import annotations

from fulfillment.domain.exceptions import UnsupportedProductTypeError
from fulfillment.domain.model.product import ProductType
from fulfillment.domain.service.notification_service import NotificationService
from fulfillment.domain.service.product_strategies import (
    Clock,
    ExpirableProductStrategy,
    NormalProductStrategy,
    ProductStrategy,
    SeasonalProductStrategy,
    utc_now,
)

_STRATEGIES: dict[ProductType, type[ProductStrategy]] = {
    ProductType.NORMAL: NormalProductStrategy,
    ProductType.SEASONAL: SeasonalProductStrategy,
    ProductType.EXPIRABLE: ExpirableProductStrategy,
}


class StrategySelector:
    """Stateless factory; every ``select()`` call builds a fresh strategy."""

    def __init__(
        self,
        notification_service: NotificationService,
        clock: Clock = utc_now,
    ) -> None:
        self._notification_service = notification_service
        self._clock = clock

    def select(self, product_type: ProductType | str) -> ProductStrategy:
        """Return the strategy for ``product_type``.

        Accepts the enum or its raw tag (as stored by a repository).
        Anything else raises UnsupportedProductTypeError.
        """
        strategy_cls = _STRATEGIES.get(self._coerce(product_type))
        if strategy_cls is None:
            raise UnsupportedProductTypeError(
                f"Unknown product type: {product_type!r}"
            )
        return strategy_cls(self._notification_service, self._clock)

    @staticmethod
    def _coerce(product_type: ProductType | str) -> ProductType | None:
        if isinstance(product_type, ProductType):
            return product_type
        try:
            return ProductType(product_type)
        except ValueError:
            return None
