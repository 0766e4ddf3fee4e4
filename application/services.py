"""Application Services - Business use cases"""
import logging
from typing import List, Optional, Union

from domain.entities import Booking
from domain.enums import BookingEvent
from domain.repositories import BookingLedger, BookingRepository, RoomRepository
from domain.state_machine import TransitionEngine
from domain.value_objects import Room

logger = logging.getLogger(__name__)

ROOM_EVENTS = (BookingEvent.SELECT_ROOM, BookingEvent.CHANGE_ROOM)


class BookingService:
    """Service for Booking lifecycle use cases"""

    def __init__(self,
                 ledger: BookingLedger,
                 repository: BookingRepository,
                 room_repo: RoomRepository,
                 engine: TransitionEngine):
        self.ledger = ledger
        self.repository = repository
        self.room_repo = room_repo
        self.engine = engine

    def _get_room(self, room_id: Optional[int]) -> Optional[Room]:
        if room_id is None:
            return None
        room = self.room_repo.find_by_id(room_id)
        if room is None:
            raise ValueError(f"Room {room_id} not found")
        return room

    def create_booking(self, user_id: int) -> Booking:
        """Open a new booking in Idle state"""
        booking = self.ledger.allocate(user_id)
        logger.info(f"Booking #{booking.booking_id} created for user {user_id}")
        return self.repository.save(booking)

    def get_booking(self, booking_id: int) -> Optional[Booking]:
        """Get booking by ID"""
        return self.repository.find_by_id(booking_id)

    def get_bookings_by_user(self, user_id: int) -> List[Booking]:
        """Get all bookings for a user"""
        return self.repository.find_by_user_id(user_id)

    def get_all_bookings(self) -> List[Booking]:
        """Get all bookings"""
        return self.repository.find_all()

    def get_history(self) -> List[Booking]:
        """Bookings that reached Paid or BookingCancelled, in order"""
        return self.ledger.all()

    def get_rooms(self) -> List[Room]:
        return self.room_repo.find_all()

    def available_events(self, booking_id: int) -> Optional[List[BookingEvent]]:
        """Events that can currently be applied to a booking"""
        booking = self.repository.find_by_id(booking_id)
        if not booking:
            return None
        return self.engine.available_events(booking.state)

    def apply_event(
        self,
        booking_id: int,
        event: Union[BookingEvent, str],
        room_id: Optional[int] = None,
        promo_code: Optional[str] = None
    ) -> Optional[Booking]:
        """Drive a booking through one transition"""
        booking = self.repository.find_by_id(booking_id)
        if not booking:
            return None

        # Only room events that would pass validation look the room up
        target_room = None
        if event in ROOM_EVENTS and self.engine.can_apply(booking, event):
            target_room = self._get_room(room_id)
        self.engine.apply(booking, event, target_room=target_room, promo_code=promo_code)
        return booking

    def select_room(self, booking_id: int, room_id: int) -> Optional[Booking]:
        return self.apply_event(booking_id, BookingEvent.SELECT_ROOM, room_id=room_id)

    def change_room(self, booking_id: int, room_id: int) -> Optional[Booking]:
        return self.apply_event(booking_id, BookingEvent.CHANGE_ROOM, room_id=room_id)

    def confirm_booking(self, booking_id: int) -> Optional[Booking]:
        return self.apply_event(booking_id, BookingEvent.CONFIRM_BOOKING)

    def pay(self, booking_id: int, promo_code: Optional[str] = None) -> Optional[Booking]:
        return self.apply_event(booking_id, BookingEvent.PAY, promo_code=promo_code)

    def cancel_booking(self, booking_id: int) -> Optional[Booking]:
        return self.apply_event(booking_id, BookingEvent.CANCEL)

