"""In-Memory Repository Implementations"""
from typing import Optional, List, Dict

from domain.repositories import BookingLedger, BookingRepository, RoomRepository
from domain.entities import Booking
from domain.interfaces import Clock
from domain.value_objects import Room


class InMemoryBookingLedger(BookingLedger):
    """In-memory implementation of BookingLedger"""

    def __init__(self, clock: Clock, start_id: int = 1):
        self._clock = clock
        self._next_booking_id = start_id
        self._history: List[Booking] = []

    def allocate(self, user_id: int) -> Booking:
        """Create a fresh Idle booking with the next identifier"""
        booking = Booking(
            booking_id=self._next_booking_id,
            user_id=user_id,
            created_at=self._clock.now()
        )
        self._next_booking_id += 1
        return booking

    def record(self, booking: Booking) -> None:
        """Append a terminal booking to the history"""
        self._history.append(booking)

    def all(self) -> List[Booking]:
        """Recorded bookings in recording order"""
        return list(self._history)


class InMemoryBookingRepository(BookingRepository):
    """In-memory implementation of BookingRepository"""

    def __init__(self):
        self._storage: Dict[int, Booking] = {}

    def save(self, booking: Booking) -> Booking:
        """Save booking to memory"""
        self._storage[booking.booking_id] = booking
        return booking

    def find_by_id(self, booking_id: int) -> Optional[Booking]:
        """Find booking by ID"""
        return self._storage.get(booking_id)

    def find_by_user_id(self, user_id: int) -> List[Booking]:
        """Find bookings owned by a user"""
        return [b for b in self._storage.values() if b.user_id == user_id]

    def find_all(self) -> List[Booking]:
        """Find all bookings"""
        return list(self._storage.values())


class InMemoryRoomRepository(RoomRepository):
    """In-memory implementation of RoomRepository"""

    def __init__(self, rooms: Optional[List[Room]] = None):
        self._storage: Dict[int, Room] = {}
        for room in rooms or []:
            self.save(room)

    def save(self, room: Room) -> Room:
        """Save room to memory"""
        self._storage[room.room_id] = room
        return room

    def find_by_id(self, room_id: int) -> Optional[Room]:
        """Find room by ID"""
        return self._storage.get(room_id)

    def find_all(self) -> List[Room]:
        """Find all rooms"""
        return sorted(self._storage.values(), key=lambda r: r.room_id)
