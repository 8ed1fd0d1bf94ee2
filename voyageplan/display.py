"""Printing trips to the console and keeping a log that can be exported."""

from __future__ import annotations

from pathlib import Path

from .offers import CommentedOffer
from .reservations import Booking, ReservationGroup
from .trip import Trip


class Display:
    """Prints messages and keeps them until they are exported to a file."""

    def __init__(self) -> None:
        self.messages: list[str] = []
        self.filename: str | Path = ""

    def show_message(self, message: str) -> None:
        print(message)
        self.messages.append(message)

    def export(self) -> None:
        """Append the kept messages to the file, one per line, then forget them."""
        if not self.filename:
            raise ValueError("filename not set")
        with open(self.filename, "a", encoding="utf-8") as handle:
            for message in self.messages:
                handle.write(f"{message}\n")
        self.messages.clear()

    def show_trip(self, trip: Trip) -> None:
        """Print every day of every segment of the trip with its reservations."""
        print(f"{trip.name}: ")
        self.messages.append(f"{trip.name}:\n")
        last_day = ""
        for segment in trip.reservations.reservations:
            if not isinstance(segment, ReservationGroup):
                continue
            for day in segment.reservations:
                if not isinstance(day, ReservationGroup):
                    continue
                if day.name != last_day:
                    print(f"  Journee : {day.name}: ")
                    self.messages.append(f"  Journee : {day.name}:\n")
                last_day = day.name
                for reservation in day.reservations:
                    self.messages.append(reservation.show())
                    if isinstance(reservation, Booking) and isinstance(
                        reservation.offer, CommentedOffer
                    ):
                        for comment in reservation.offer.comments:
                            print(f"    Commentaire: {comment.text}\n")
                            self.messages.append(f"    Commentaire: {comment.text}")


_DISPLAY = Display()


def get_display() -> Display:
    """The display shared by the whole program."""
    return _DISPLAY