"""NotificationService adapter that logs instead of messaging customers.

Stands in for the external notification sender when running from the
CLI. Each notification becomes one structured log event plus a
human-readable line on the supplied writer.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

import click
import structlog

from fulfillment.domain.service.notification_service import NotificationService

logger = structlog.get_logger(__name__)


class LoggingNotificationService(NotificationService):

    def __init__(self, writer: Callable[[str], None] = click.echo) -> None:
        self._write = writer

    def send_delay_notification(self, lead_time_days: int, product_name: str) -> None:
        logger.info(
            "Delay notification sent",
            product_name=product_name,
            lead_time_days=lead_time_days,
        )
        self._write(f"[notify] {product_name}: delayed by {lead_time_days} day(s)")

    def send_out_of_stock_notification(self, product_name: str) -> None:
        logger.info("Out-of-stock notification sent", product_name=product_name)
        self._write(f"[notify] {product_name}: out of stock")

    def send_expiration_notification(
        self, product_name: str, expiry_date: datetime
    ) -> None:
        logger.info(
            "Expiration notification sent",
            product_name=product_name,
            expiry_date=expiry_date.isoformat(),
        )
        self._write(
            f"[notify] {product_name}: expired on {expiry_date:%Y-%m-%d}"
        )
