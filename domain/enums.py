"""Domain Enums"""
from enum import Enum


class BookingState(str, Enum):
    IDLE = "Idle"
    ROOM_SELECTED = "RoomSelected"
    BOOKING_CONFIRMED = "BookingConfirmed"
    PAID = "Paid"
    BOOKING_CANCELLED = "BookingCancelled"


class BookingEvent(str, Enum):
    SELECT_ROOM = "selectRoom"
    CHANGE_ROOM = "changeRoom"
    CONFIRM_BOOKING = "confirmBooking"
    PAY = "pay"
    CANCEL = "cancel"


TERMINAL_STATES = frozenset({BookingState.PAID, BookingState.BOOKING_CANCELLED})
