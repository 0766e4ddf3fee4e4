"""Domain Collaborator Interfaces - discount lookup, clock, event sink"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, Union

from domain.value_objects import DiscountApplied, TransitionRecorded

Notification = Union[TransitionRecorded, DiscountApplied]


class DiscountLookup(ABC):
    """Resolves promo codes to discount percentages"""

    @abstractmethod
    def lookup(self, code: str) -> Optional[float]:
        """Return the percentage for a known code, None otherwise"""
        pass


class Clock(ABC):
    """Supplies the current timestamp"""

    @abstractmethod
    def now(self) -> datetime:
        pass


class EventSink(ABC):
    """Receives booking notifications"""

    @abstractmethod
    def publish(self, notification: Notification) -> None:
        pass
