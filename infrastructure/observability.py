"""Logging setup and booking notification sinks"""
import logging
from typing import List

from domain.interfaces import EventSink, Notification
from domain.value_objects import DiscountApplied

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process"""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


class LoggingEventSink(EventSink):
    """Writes notifications to the application log"""

    def publish(self, notification: Notification) -> None:
        if isinstance(notification, DiscountApplied):
            logger.info(
                f"Promo code {notification.promo_code} applied to booking #{notification.booking_id}. "
                f"Discount: {notification.percentage:.0f}% ({notification.base_price:.2f} -> {notification.total:.2f})"
            )
        else:
            logger.info(
                f"Booking #{notification.booking_id}: "
                f"{notification.from_state.value} -> {notification.to_state.value} "
                f"on {notification.event.value}"
            )


class InMemoryEventSink(EventSink):
    """Keeps published notifications in order"""

    def __init__(self):
        self.notifications: List[Notification] = []

    def publish(self, notification: Notification) -> None:
        self.notifications.append(notification)

    def of_type(self, kind: type) -> List[Notification]:
        return [n for n in self.notifications if isinstance(n, kind)]

    def clear(self) -> None:
        self.notifications.clear()


class CompositeEventSink(EventSink):
    """Fans a notification out to several sinks"""

    def __init__(self, *sinks: EventSink):
        self.sinks = list(sinks)

    def publish(self, notification: Notification) -> None:
        for sink in self.sinks:
            sink.publish(notification)
