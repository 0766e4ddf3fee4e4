"""API Schemas - Request and Response DTOs"""
from pydantic import BaseModel, Field
from datetime import datetime
from typing import List, Optional


# ============================================================================
# BOOKING SCHEMAS
# ============================================================================

class CreateBookingRequest(BaseModel):
    """Create booking request DTO"""
    user_id: int = Field(ge=1)


class ApplyEventRequest(BaseModel):
    """Generic transition request DTO"""
    event: str
    room_id: Optional[int] = None
    promo_code: Optional[str] = None


class SelectRoomRequest(BaseModel):
    """Select or change room request DTO"""
    room_id: int


class PayRequest(BaseModel):
    """Payment request DTO"""
    promo_code: Optional[str] = None


class RoomResponse(BaseModel):
    """Room response DTO"""
    room_id: int
    room_type: str
    price: float


class BookingResponse(BaseModel):
    """Booking response DTO"""
    booking_id: int
    user_id: int
    state: str
    room: Optional[RoomResponse] = None
    total: float
    created_at: datetime
    paid_at: Optional[datetime] = None


class AvailableEventsResponse(BaseModel):
    """Events applicable to a booking in its current state"""
    booking_id: int
    state: str
    events: List[str]


class LedgerEntryResponse(BaseModel):
    """Ledger entry response DTO"""
    booking_id: int
    user_id: int
    room_id: Optional[int] = None
    total: float
    status: str


# ============================================================================
# AUTH SCHEMAS
# ============================================================================

class Token(BaseModel):
    """Token response DTO"""
    access_token: str
    token_type: str


class OperatorResponse(BaseModel):
    """Operator response DTO"""
    username: str
    full_name: Optional[str] = None
    disabled: bool
