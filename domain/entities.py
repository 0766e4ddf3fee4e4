"""Domain Entities - Aggregates"""
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

from domain.enums import BookingState, TERMINAL_STATES
from domain.value_objects import Room


class Booking(BaseModel):
    """Booking Aggregate Root Entity"""

    # Identity
    booking_id: int = Field(ge=1)

    # References to other contexts
    user_id: int

    # Lifecycle
    state: BookingState = BookingState.IDLE
    room: Optional[Room] = None
    total: float = 0.0

    # Metadata
    created_at: datetime
    paid_at: Optional[datetime] = None

    class Config:
        from_attributes = True

    # ==================== QUERY METHODS ====================
    @property
    def is_terminal(self) -> bool:
        """Check if no further transitions are possible"""
        return self.state in TERMINAL_STATES

    @property
    def status_label(self) -> Optional[str]:
        """Ledger status for a terminal booking"""
        if self.state == BookingState.PAID:
            return "PAID"
        if self.state == BookingState.BOOKING_CANCELLED:
            return "CANCELLED"
        return None

    def snapshot(self) -> dict:
        """Mutable fields owned by the transition engine"""
        return {
            "state": self.state,
            "room": self.room,
            "total": self.total,
            "paid_at": self.paid_at,
        }
