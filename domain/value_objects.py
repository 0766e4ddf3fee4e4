"""Domain Value Objects"""
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

from domain.enums import BookingEvent, BookingState


class Room(BaseModel):
    """Value Object for a bookable room"""
    room_id: int
    room_type: str
    price: float = Field(ge=0)

    class Config:
        frozen = True


class TransitionRecorded(BaseModel):
    """Notification published after a booking changed state"""
    booking_id: int
    event: BookingEvent
    from_state: BookingState
    to_state: BookingState
    occurred_at: datetime

    class Config:
        frozen = True


class DiscountApplied(BaseModel):
    """Notification published when a promo code reduced a payment"""
    booking_id: int
    promo_code: str
    percentage: float
    base_price: float
    total: float
    occurred_at: datetime

    class Config:
        frozen = True


class StagedChange(BaseModel):
    """Field assignments and notifications produced by a transition effect"""
    assignments: dict = Field(default_factory=dict)
    discount: Optional[DiscountApplied] = None
