"""ProcessingResult: the outcome of evaluating one product.

Strategies return a result instead of acting on it. The order processor
applies the stock change first and only then runs the notification, so
the decision stays free of I/O.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

Notification = Callable[[], None]


@dataclass(frozen=True)
class ProcessingResult:

    should_update_stock: bool
    updated_fields: dict[str, Any] | None = None
    notify: Notification | None = None

    @staticmethod
    def no_action() -> ProcessingResult:
        return ProcessingResult(should_update_stock=False)

    @staticmethod
    def update(
        fields: dict[str, Any], notify: Notification | None = None
    ) -> ProcessingResult:
        """Request a partial update of the product, optionally followed by a notification."""
        return ProcessingResult(
            should_update_stock=True, updated_fields=dict(fields), notify=notify
        )

    @staticmethod
    def notify_only(notify: Notification) -> ProcessingResult:
        return ProcessingResult(should_update_stock=False, notify=notify)
