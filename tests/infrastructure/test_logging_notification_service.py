"""Tests for the logging notification adapter."""

from structlog.testing import capture_logs

from fulfillment.infrastructure.notifications.logging_notification_service import (
    LoggingNotificationService,
)
from tests.fakes import NOW


class TestLoggingNotificationService:

    def test_delay(self):
        lines = []
        service = LoggingNotificationService(writer=lines.append)

        with capture_logs() as logs:
            service.send_delay_notification(10, "USB Cable")

        assert lines == ["[notify] USB Cable: delayed by 10 day(s)"]
        assert logs[0]["event"] == "Delay notification sent"
        assert logs[0]["lead_time_days"] == 10

    def test_out_of_stock(self):
        lines = []
        service = LoggingNotificationService(writer=lines.append)

        with capture_logs() as logs:
            service.send_out_of_stock_notification("Grapes")

        assert lines == ["[notify] Grapes: out of stock"]
        assert logs[0]["product_name"] == "Grapes"

    def test_expiration(self):
        lines = []
        service = LoggingNotificationService(writer=lines.append)

        with capture_logs() as logs:
            service.send_expiration_notification("Milk", NOW)

        assert lines == ["[notify] Milk: expired on 2024-06-15"]
        assert logs[0]["expiry_date"] == NOW.isoformat()
