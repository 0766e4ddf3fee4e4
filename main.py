from fastapi import FastAPI, HTTPException, Depends
from typing import List
from fastapi.security import OAuth2PasswordRequestForm

from api.schemas import (
    # Bookings
    CreateBookingRequest, ApplyEventRequest, SelectRoomRequest, PayRequest,
    BookingResponse, RoomResponse, AvailableEventsResponse, LedgerEntryResponse,
    # Auth
    Token, OperatorResponse
)

from api.dependencies import get_current_active_operator, authenticate_operator
from infrastructure.config import settings
from infrastructure.security import create_access_token
from infrastructure.clock import SystemClock
from infrastructure.discounts import InMemoryDiscountLookup
from infrastructure.observability import configure_logging, LoggingEventSink
from domain.auth import Operator

from application.services import BookingService
from infrastructure.repositories.in_memory_repositories import (
    InMemoryBookingLedger, InMemoryBookingRepository, InMemoryRoomRepository
)
from domain.enums import BookingEvent, BookingState
from domain.exceptions import TransitionError
from domain.state_machine import TransitionEngine
from domain.value_objects import Room

configure_logging(settings.log_level)

app = FastAPI(
    title=settings.app_name,
    description="Hotel room booking lifecycle driven by a finite state machine",
    version=settings.app_version
)

DEFAULT_ROOMS = [
    Room(room_id=101, room_type="standard", price=5000),
    Room(room_id=201, room_type="deluxe", price=10000),
]

# Initialize collaborators and repositories
clock = SystemClock()
booking_ledger = InMemoryBookingLedger(clock)
booking_repo = InMemoryBookingRepository()
room_repo = InMemoryRoomRepository(DEFAULT_ROOMS)
transition_engine = TransitionEngine(
    ledger=booking_ledger,
    discounts=InMemoryDiscountLookup(settings.discount_codes),
    clock=clock,
    sink=LoggingEventSink()
)

# Dependency injection
def get_booking_service() -> BookingService:
    return BookingService(booking_ledger, booking_repo, room_repo, transition_engine)

# ============================================================================
# HEALTH & ENUM REFERENCE ENDPOINTS
# ============================================================================

@app.get("/api/health", tags=["Health"])
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "message": "API is running"}

@app.get("/api/enums/booking-state", tags=["Enum Reference"])
async def get_booking_states():
    """Get all BookingState values"""
    return {
        "values": [item.value for item in BookingState],
        "terminal": [BookingState.PAID.value, BookingState.BOOKING_CANCELLED.value]
    }

@app.get("/api/enums/booking-event", tags=["Enum Reference"])
async def get_booking_events():
    """Get all BookingEvent values"""
    return {"values": [item.value for item in BookingEvent]}

# ============================================================================
# AUTH ENDPOINTS
# ============================================================================

@app.post("/token", response_model=Token, tags=["Auth"])
async def login_for_access_token(form_data: OAuth2PasswordRequestForm = Depends()):
    operator = authenticate_operator(form_data.username, form_data.password)
    if not operator:
        raise HTTPException(
            status_code=401,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    access_token = create_access_token(operator.username)
    return {"access_token": access_token, "token_type": "bearer"}

@app.get("/users/me", response_model=OperatorResponse, tags=["Auth"])
async def read_users_me(current_operator: Operator = Depends(get_current_active_operator)):
    return current_operator

# ============================================================================
# ROOM ENDPOINTS
# ============================================================================

@app.get("/api/rooms", response_model=List[RoomResponse], tags=["Rooms"])
async def get_rooms(
    service: BookingService = Depends(get_booking_service),
    current_operator: Operator = Depends(get_current_active_operator)
):
    """Get the room catalog"""
    return [_room_to_response(r) for r in service.get_rooms()]

# ============================================================================
# BOOKING ENDPOINTS
# ============================================================================

@app.post("/api/bookings", response_model=BookingResponse, status_code=201, tags=["Bookings"])
async def create_booking(
    request: CreateBookingRequest,
    service: BookingService = Depends(get_booking_service),
    current_operator: Operator = Depends(get_current_active_operator)
):
    """Open a new booking"""
    booking = service.create_booking(request.user_id)
    return _booking_to_response(booking)

@app.get("/api/bookings", response_model=List[BookingResponse], tags=["Bookings"])
async def get_all_bookings(
    service: BookingService = Depends(get_booking_service),
    current_operator: Operator = Depends(get_current_active_operator)
):
    """Get all bookings"""
    return [_booking_to_response(b) for b in service.get_all_bookings()]

@app.get("/api/bookings/user/{user_id}", response_model=List[BookingResponse], tags=["Bookings"])
async def get_user_bookings(
    user_id: int,
    service: BookingService = Depends(get_booking_service),
    current_operator: Operator = Depends(get_current_active_operator)
):
    """Get all bookings for a user"""
    return [_booking_to_response(b) for b in service.get_bookings_by_user(user_id)]

@app.get("/api/bookings/{booking_id}", response_model=BookingResponse, tags=["Bookings"])
async def get_booking(
    booking_id: int,
    service: BookingService = Depends(get_booking_service),
    current_operator: Operator = Depends(get_current_active_operator)
):
    """Get booking by ID"""
    booking = service.get_booking(booking_id)
    if not booking:
        raise HTTPException(status_code=404, detail="Booking not found")
    return _booking_to_response(booking)

@app.get("/api/bookings/{booking_id}/events", response_model=AvailableEventsResponse, tags=["Bookings"])
async def get_available_events(
    booking_id: int,
    service: BookingService = Depends(get_booking_service),
    current_operator: Operator = Depends(get_current_active_operator)
):
    """Events that can be applied to the booking right now"""
    booking = service.get_booking(booking_id)
    if not booking:
        raise HTTPException(status_code=404, detail="Booking not found")
    events = service.available_events(booking_id)
    return AvailableEventsResponse(
        booking_id=booking.booking_id,
        state=booking.state.value,
        events=[e.value for e in events]
    )

@app.post("/api/bookings/{booking_id}/events", response_model=BookingResponse, tags=["Bookings"])
async def apply_event(
    booking_id: int,
    request: ApplyEventRequest,
    service: BookingService = Depends(get_booking_service),
    current_operator: Operator = Depends(get_current_active_operator)
):
    """Apply any lifecycle event to a booking"""
    return _run_transition(
        lambda: service.apply_event(
            booking_id,
            request.event,
            room_id=request.room_id,
            promo_code=request.promo_code
        )
    )

@app.post("/api/bookings/{booking_id}/select-room", response_model=BookingResponse, tags=["Bookings"])
async def select_room(
    booking_id: int,
    request: SelectRoomRequest,
    service: BookingService = Depends(get_booking_service),
    current_operator: Operator = Depends(get_current_active_operator)
):
    """Select a room for an Idle booking"""
    return _run_transition(lambda: service.select_room(booking_id, request.room_id))

@app.post("/api/bookings/{booking_id}/change-room", response_model=BookingResponse, tags=["Bookings"])
async def change_room(
    booking_id: int,
    request: SelectRoomRequest,
    service: BookingService = Depends(get_booking_service),
    current_operator: Operator = Depends(get_current_active_operator)
):
    """Replace the selected room"""
    return _run_transition(lambda: service.change_room(booking_id, request.room_id))

@app.post("/api/bookings/{booking_id}/confirm", response_model=BookingResponse, tags=["Bookings"])
async def confirm_booking(
    booking_id: int,
    service: BookingService = Depends(get_booking_service),
    current_operator: Operator = Depends(get_current_active_operator)
):
    """Confirm the booking"""
    return _run_transition(lambda: service.confirm_booking(booking_id))

@app.post("/api/bookings/{booking_id}/pay", response_model=BookingResponse, tags=["Bookings"])
async def pay_booking(
    booking_id: int,
    request: PayRequest,
    service: BookingService = Depends(get_booking_service),
    current_operator: Operator = Depends(get_current_active_operator)
):
    """Pay a confirmed booking, optionally with a promo code"""
    return _run_transition(lambda: service.pay(booking_id, promo_code=request.promo_code))

@app.post("/api/bookings/{booking_id}/cancel", response_model=BookingResponse, tags=["Bookings"])
async def cancel_booking(
    booking_id: int,
    service: BookingService = Depends(get_booking_service),
    current_operator: Operator = Depends(get_current_active_operator)
):
    """Cancel an unpaid booking"""
    return _run_transition(lambda: service.cancel_booking(booking_id))

# ============================================================================
# LEDGER ENDPOINTS
# ============================================================================

@app.get("/api/ledger", response_model=List[LedgerEntryResponse], tags=["Ledger"])
async def get_ledger(
    service: BookingService = Depends(get_booking_service),
    current_operator: Operator = Depends(get_current_active_operator)
):
    """Bookings that reached Paid or BookingCancelled, in recording order"""
    return [_booking_to_ledger_entry(b) for b in service.get_history()]

# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def _run_transition(action) -> BookingResponse:
    """Run a service transition, translating domain errors to HTTP errors"""
    try:
        booking = action()
    except TransitionError as e:
        raise HTTPException(status_code=400, detail={"code": e.code, "message": str(e)})
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not booking:
        raise HTTPException(status_code=404, detail="Booking not found")
    return _booking_to_response(booking)

def _room_to_response(room) -> RoomResponse:
    """Convert Room value object to RoomResponse"""
    return RoomResponse(room_id=room.room_id, room_type=room.room_type, price=room.price)

def _booking_to_response(booking) -> BookingResponse:
    """Convert Booking entity to BookingResponse"""
    return BookingResponse(
        booking_id=booking.booking_id,
        user_id=booking.user_id,
        state=booking.state.value,
        room=_room_to_response(booking.room) if booking.room else None,
        total=booking.total,
        created_at=booking.created_at,
        paid_at=booking.paid_at
    )

def _booking_to_ledger_entry(booking) -> LedgerEntryResponse:
    """Convert a terminal Booking to a ledger line"""
    return LedgerEntryResponse(
        booking_id=booking.booking_id,
        user_id=booking.user_id,
        room_id=booking.room.room_id if booking.room else None,
        total=booking.total,
        status=booking.status_label
    )

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
