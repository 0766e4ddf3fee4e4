"""
Booking Transition Engine

Legal transitions live in a single table mapping (state, event) to the
destination state and the effect that runs with it. Per-event preconditions
only decide which error a rejected request gets.

A transition either commits every field it touches together with the new
state, or raises a TransitionError and leaves the booking untouched.
"""
import logging
from datetime import datetime
from typing import Callable, Dict, FrozenSet, List, NamedTuple, Optional, Tuple, Union

from domain.entities import Booking
from domain.enums import BookingEvent, BookingState
from domain.exceptions import (
    TransitionError, InvalidPrecondition, InvalidTransition, UnknownEvent, MissingRoom
)
from domain.interfaces import Clock, DiscountLookup, EventSink
from domain.repositories import BookingLedger
from domain.value_objects import Room, StagedChange, DiscountApplied, TransitionRecorded

logger = logging.getLogger(__name__)


class EffectInput(NamedTuple):
    booking: Booking
    event: BookingEvent
    target_room: Optional[Room]
    promo_code: Optional[str]
    discounts: DiscountLookup
    now: datetime


class Transition(NamedTuple):
    next_state: BookingState
    effect: Callable[[EffectInput], StagedChange]


# ==================== EFFECTS ====================
def _no_effect(ctx: EffectInput) -> StagedChange:
    return StagedChange()


def _assign_room(ctx: EffectInput) -> StagedChange:
    if ctx.target_room is None:
        raise MissingRoom(ctx.event)
    return StagedChange(assignments={"room": ctx.target_room})


def _settle_payment(ctx: EffectInput) -> StagedChange:
    """Compute the payable total, applying a known promo code"""
    if ctx.booking.room is None:
        raise MissingRoom(ctx.event)
    base_price = ctx.booking.room.price
    total = base_price
    discount = None

    percentage = ctx.discounts.lookup(ctx.promo_code) if ctx.promo_code else None
    if percentage is not None:
        total *= (1 - percentage / 100)
        discount = DiscountApplied(
            booking_id=ctx.booking.booking_id,
            promo_code=ctx.promo_code,
            percentage=percentage,
            base_price=base_price,
            total=total,
            occurred_at=ctx.now
        )

    return StagedChange(assignments={"total": total, "paid_at": ctx.now}, discount=discount)


# ==================== TABLES ====================
PRECONDITIONS: Dict[BookingEvent, FrozenSet[BookingState]] = {
    BookingEvent.SELECT_ROOM: frozenset({BookingState.IDLE}),
    BookingEvent.CHANGE_ROOM: frozenset({BookingState.ROOM_SELECTED}),
    BookingEvent.CONFIRM_BOOKING: frozenset({BookingState.ROOM_SELECTED}),
    BookingEvent.PAY: frozenset({BookingState.BOOKING_CONFIRMED}),
    BookingEvent.CANCEL: frozenset(s for s in BookingState if s != BookingState.PAID),
}

TRANSITIONS: Dict[Tuple[BookingState, BookingEvent], Transition] = {
    (BookingState.IDLE, BookingEvent.SELECT_ROOM):
        Transition(BookingState.ROOM_SELECTED, _assign_room),

    (BookingState.ROOM_SELECTED, BookingEvent.CONFIRM_BOOKING):
        Transition(BookingState.BOOKING_CONFIRMED, _no_effect),
    (BookingState.ROOM_SELECTED, BookingEvent.CHANGE_ROOM):
        Transition(BookingState.ROOM_SELECTED, _assign_room),
    (BookingState.ROOM_SELECTED, BookingEvent.CANCEL):
        Transition(BookingState.BOOKING_CANCELLED, _no_effect),

    (BookingState.BOOKING_CONFIRMED, BookingEvent.PAY):
        Transition(BookingState.PAID, _settle_payment),
    (BookingState.BOOKING_CONFIRMED, BookingEvent.CANCEL):
        Transition(BookingState.BOOKING_CANCELLED, _no_effect),
}


class TransitionEngine:
    """Validates and commits booking transitions"""

    def __init__(self,
                 ledger: BookingLedger,
                 discounts: DiscountLookup,
                 clock: Clock,
                 sink: EventSink):
        self.ledger = ledger
        self.discounts = discounts
        self.clock = clock
        self.sink = sink

    # ==================== KEY METHODS ====================
    def apply(
        self,
        booking: Booking,
        event: Union[BookingEvent, str],
        target_room: Optional[Room] = None,
        promo_code: Optional[str] = None
    ) -> None:
        """Apply event to booking, raising TransitionError on rejection"""
        from_state = booking.state
        try:
            event = self._coerce_event(event)
            transition = self._resolve(from_state, event)
            now = self.clock.now()
            staged = transition.effect(EffectInput(
                booking=booking,
                event=event,
                target_room=target_room,
                promo_code=promo_code,
                discounts=self.discounts,
                now=now
            ))
        except TransitionError as e:
            logger.warning(f"Booking #{booking.booking_id}: rejected ({e.code}) {e}")
            raise

        # Commit
        for name, value in staged.assignments.items():
            setattr(booking, name, value)
        booking.state = transition.next_state
        if booking.is_terminal:
            self.ledger.record(booking)

        if staged.discount is not None:
            logger.debug(
                f"Booking #{booking.booking_id}: promo code {staged.discount.promo_code} applied, "
                f"discount {staged.discount.percentage:.0f}%"
            )
            self.sink.publish(staged.discount)

        logger.debug(f"Booking #{booking.booking_id}: {from_state.value} -> {booking.state.value}")
        self.sink.publish(TransitionRecorded(
            booking_id=booking.booking_id,
            event=event,
            from_state=from_state,
            to_state=booking.state,
            occurred_at=now
        ))

    # ==================== QUERY METHODS ====================
    def can_apply(self, booking: Booking, event: Union[BookingEvent, str]) -> bool:
        """Check whether event would pass validation for booking"""
        try:
            event = self._coerce_event(event)
            self._resolve(booking.state, event)
        except TransitionError:
            return False
        return True

    @staticmethod
    def available_events(state: BookingState) -> List[BookingEvent]:
        """Events that are legal from state"""
        return [
            event for event in BookingEvent
            if state in PRECONDITIONS[event] and (state, event) in TRANSITIONS
        ]

    # ==================== PRIVATE METHODS ====================
    @staticmethod
    def _coerce_event(event: Union[BookingEvent, str]) -> BookingEvent:
        if isinstance(event, BookingEvent):
            return event
        try:
            return BookingEvent(event)
        except ValueError:
            raise UnknownEvent(event) from None

    @staticmethod
    def _resolve(state: BookingState, event: BookingEvent) -> Transition:
        if state not in PRECONDITIONS[event]:
            raise InvalidPrecondition(event, state)

        transition = TRANSITIONS.get((state, event))
        if transition is None:
            raise InvalidTransition(state, event)
        return transition
