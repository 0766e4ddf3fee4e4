"""Domain Repository Interfaces"""
from abc import ABC, abstractmethod
from typing import Optional, List

from domain.entities import Booking
from domain.value_objects import Room


class BookingLedger(ABC):
    """
    Allocates booking identities and keeps the append-only history of
    bookings that reached a terminal state.
    """

    @abstractmethod
    def allocate(self, user_id: int) -> Booking:
        """Create a fresh Idle booking with the next identifier"""
        pass

    @abstractmethod
    def record(self, booking: Booking) -> None:
        """Append a terminal booking to the history"""
        pass

    @abstractmethod
    def all(self) -> List[Booking]:
        """Recorded bookings in recording order"""
        pass


class BookingRepository(ABC):
    """Repository interface for Booking Aggregate"""

    @abstractmethod
    def save(self, booking: Booking) -> Booking:
        """Save booking"""
        pass

    @abstractmethod
    def find_by_id(self, booking_id: int) -> Optional[Booking]:
        """Find booking by ID"""
        pass

    @abstractmethod
    def find_by_user_id(self, user_id: int) -> List[Booking]:
        """Find bookings owned by a user"""
        pass

    @abstractmethod
    def find_all(self) -> List[Booking]:
        """Find all bookings"""
        pass


class RoomRepository(ABC):
    """Repository interface for the room catalog"""

    @abstractmethod
    def save(self, room: Room) -> Room:
        """Save room"""
        pass

    @abstractmethod
    def find_by_id(self, room_id: int) -> Optional[Room]:
        """Find room by ID"""
        pass

    @abstractmethod
    def find_all(self) -> List[Room]:
        """Find all rooms"""
        pass
