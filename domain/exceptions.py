"""Domain Exceptions - Transition failures"""
from domain.enums import BookingEvent, BookingState


class TransitionError(ValueError):
    """
    Base class for every rejected booking transition.

    A raised TransitionError guarantees the booking was left untouched.
    """
    code = "transition_error"


class InvalidPrecondition(TransitionError):
    """Event is not valid from the booking's current state."""
    code = "invalid_precondition"

    def __init__(self, event: BookingEvent, actual_state: BookingState):
        self.event = event
        self.actual_state = actual_state
        super().__init__(
            f"Cannot apply {event.value} to a booking in state {actual_state.value}"
        )


class InvalidTransition(TransitionError):
    """Precondition passed but the transition table has no matching entry."""
    code = "invalid_transition"

    def __init__(self, from_state: BookingState, event: BookingEvent):
        self.from_state = from_state
        self.event = event
        super().__init__(f"Invalid transition: {from_state.value} -> {event.value}")


class UnknownEvent(TransitionError):
    """Event value outside the closed set of booking events."""
    code = "unknown_event"

    def __init__(self, event):
        self.event = event
        super().__init__(f"Unknown event: {event}")


class MissingRoom(TransitionError):
    """Room selection event was requested without a target room."""
    code = "missing_room"

    def __init__(self, event: BookingEvent):
        self.event = event
        super().__init__(f"Event {event.value} requires a target room")
