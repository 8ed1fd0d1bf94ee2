"""Bookings wrapped with extra modifications or comments."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, TypeVar

from .models import Comment
from .reservations import Booking, Reservation, ReservationGroup

if TYPE_CHECKING:
    from .trip import Trip

D = TypeVar("D", bound="BookingDecorator")


class BookingDecorator(Booking):
    """A booking that wraps another booking and stands in for it."""

    def __init__(self, booking: Booking) -> None:
        super().__init__(booking.offer, replace(booking.moment), booking.planning)
        self.name = booking.name
        self.parent = booking.parent
        self.depth = booking.depth
        self.trip = booking.trip
        self.booking = booking

    @classmethod
    def wrap_in(cls: type[D], reservations: list[Reservation], target: Reservation) -> D | None:
        """Wrap target where it sits in reservations and return the wrapper.

        Returns None when target is not in the list or is not a booking.
        """
        for index, item in enumerate(reservations):
            if item is target:
                if not isinstance(item, Booking):
                    return None
                wrapper = cls(item)
                reservations[index] = wrapper
                return wrapper
        return None


class ModifiedBooking(BookingDecorator):
    """A booking with follow-up bookings attached to it."""

    def __init__(self, booking: Booking) -> None:
        super().__init__(booking)
        self.modifications: list[Booking] = []

    def add_modification(self, modification: Booking) -> None:
        self.modifications.append(modification)

    def remove_modification(self, modification: Booking) -> None:
        """Remove this very booking object from the modifications."""
        self.modifications = [m for m in self.modifications if m is not modification]

    @classmethod
    def wrap_in(
        cls, reservations: list[Reservation], target: Reservation
    ) -> ModifiedBooking | None:
        return super().wrap_in(reservations, target)

    def show(self) -> str:
        """Show the wrapped booking, then each modification.

        Only the modification lines are returned.
        """
        self.booking.show()
        lines = []
        for mod in self.modifications:
            print(
                f"    Reservation {mod.name} pour le {mod.moment.date} à {mod.moment.time}."
            )
            lines.append(
                f"    Reservation {mod.name} pour le {mod.moment.date}{mod.moment.time}\n"
            )
        return "".join(lines)

    def remove(self, name: str) -> None:
        self.modifications = [m for m in self.modifications if m.name != name]

    def cancel(self) -> None:
        self.booking.cancel()
        self.modifications.clear()


class CommentedBooking(BookingDecorator):
    """A booking with comments attached to it."""

    def __init__(self, booking: Booking) -> None:
        super().__init__(booking)
        self.comments: list[Comment] = []

    def add_comment(self, comment: Comment) -> None:
        self.comments.append(comment)

    def remove_comment(self, comment: Comment) -> None:
        """Remove this very comment object from the comments."""
        self.comments = [c for c in self.comments if c is not comment]

    @classmethod
    def wrap_in(
        cls, reservations: list[Reservation], target: Reservation
    ) -> CommentedBooking | None:
        return super().wrap_in(reservations, target)

    def show(self) -> str:
        """Show the wrapped booking, then each comment.

        Only the comment lines are returned.
        """
        self.booking.show()
        lines = []
        for comment in self.comments:
            print(f"    Commentaire: {comment.text}.")
            lines.append(f"    Commentaire: {comment.text}.\n")
        return "".join(lines)

    def cancel(self) -> None:
        self.booking.cancel()
        self.comments.clear()


def replace_in_trip(trip: Trip, booking: Booking) -> None:
    """Put booking in place of the first booking of the trip with the same name and date.

    Only bookings held by the days of the trip's segments are looked at.
    """
    for segment in trip.reservations.reservations:
        if not isinstance(segment, ReservationGroup):
            continue
        for day in segment.reservations:
            if not isinstance(day, ReservationGroup):
                continue
            for index, item in enumerate(day.reservations):
                if (
                    isinstance(item, Booking)
                    and item.name == booking.name
                    and item.moment.date == booking.moment.date
                ):
                    day.reservations[index] = booking
                    return