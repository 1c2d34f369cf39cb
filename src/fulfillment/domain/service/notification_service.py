"""Notification port.

The customer notification sender is an external service. The domain
only knows this narrow interface; adapters live in the infrastructure
layer. Calls are fire-and-forget: return values are ignored and
failures are the sender's business.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime


class NotificationService(ABC):

    @abstractmethod
    def send_delay_notification(self, lead_time_days: int, product_name: str) -> None:
        """Tell the customer the product ships in ``lead_time_days`` days."""

    @abstractmethod
    def send_out_of_stock_notification(self, product_name: str) -> None:
        """Tell the customer the product cannot be supplied."""

    @abstractmethod
    def send_expiration_notification(
        self, product_name: str, expiry_date: datetime
    ) -> None:
        """Tell the customer the product expired (or ran out) on ``expiry_date``."""
