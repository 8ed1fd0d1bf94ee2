"""The reservation tree of a trip: groups of days and segments, and bookings."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from dataclasses import replace
from typing import TYPE_CHECKING, Any, ClassVar, Iterator

from .database import PlanningDatabase
from .models import Moment, Seller
from .offers import Offer

if TYPE_CHECKING:
    from .trip import Trip


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


class Reservation(ABC):
    """A node of the reservation tree."""

    def __init__(self) -> None:
        self.parent: ReservationGroup | None = None
        self.depth = 0
        self.name = ""
        self.trip: Trip | Any | None = None

    def set_trip(self, trip: Trip | Any | None) -> None:
        """Attach this reservation to a trip."""
        self.trip = trip

    @abstractmethod
    def on_added(self, parent: ReservationGroup, element: Reservation) -> None:
        """React to being placed under a parent group."""

    @abstractmethod
    def remove(self, name: str) -> None:
        """Remove every reservation with this name below this one."""

    @abstractmethod
    def show(self) -> str:
        """Print this reservation and return the text that describes it."""

    @abstractmethod
    def cancel(self) -> None:
        """Cancel this reservation."""


class ReservationGroup(Reservation):
    """A named group of reservations, such as a segment or a day."""

    def __init__(self, name: str, kind: str, masculine: bool) -> None:
        super().__init__()
        self.name = name
        self.kind = kind
        self.masculine = masculine
        self.reservations: list[Reservation] = []

    def add(self, reservation: Reservation) -> None:
        """Append a child, attach it to this group's trip and announce it."""
        self.reservations.append(reservation)
        reservation.parent = self
        reservation.set_trip(self.trip)
        reservation.on_added(self, reservation)

    def remove(self, name: str) -> None:
        if self.name == name:
            print(f"  {_capitalize_first(self.kind)} {self.name} efface!")
        for child in list(self.reservations):
            child.remove(name)
        self.reservations = [c for c in self.reservations if c.name != name]

    def on_added(self, parent: ReservationGroup, element: Reservation) -> None:
        self.depth = parent.depth + 1
        created = "cree" if self.masculine else "creee"
        separator = " " if parent.kind else ""
        print(
            f"{'  ' * self.depth}{_capitalize_first(self.kind)} {self.name} {created} "
            f"dans le {parent.kind}{separator}{parent.name}!"
        )

    def set_trip(self, trip: Trip | Any | None) -> None:
        super().set_trip(trip)
        for child in self.reservations:
            child.set_trip(trip)

    def show(self) -> str:
        print(self.name)
        return self.name

    def cancel(self) -> None:
        self.reservations.clear()

    def copy(self) -> ReservationGroup:
        """A deep copy of the group; bookings are copied as plain bookings."""
        duplicate = ReservationGroup(self.name, self.kind, self.masculine)
        for child in self.reservations:
            if isinstance(child, (ReservationGroup, Booking)):
                copied = child.copy()
                copied.parent = duplicate
                duplicate.reservations.append(copied)
        return duplicate


class Booking(Reservation):
    """A booking of one offer at a given moment."""

    euro_rate: ClassVar[float] = 1.5

    def __init__(
        self,
        offer: Offer,
        moment: Moment,
        planning: PlanningDatabase | None = None,
    ) -> None:
        super().__init__()
        self.offer = offer
        self.moment = moment
        self.planning = planning if planning is not None else PlanningDatabase()
        self.seller = Seller()
        self.name = offer.name

    def on_added(self, parent: ReservationGroup, element: Reservation) -> None:
        if element is not self:
            return
        if self.trip is None:
            raise RuntimeError(f"booking {self.name!r} is not part of a trip")
        self.depth = parent.depth
        print(
            f"{'  ' * (self.depth + 1)}Reservation creee : "
            f"{self.trip.name}/{self.moment.date}/{self.offer.name}!"
        )
        self.planning.add(element)

    def remove(self, name: str) -> None:
        """Bookings hold no children, so there is nothing to remove."""

    def price_cad(self) -> int:
        """The offer's price in Canadian dollars, truncated to an integer."""
        price = self.offer.current_price()
        if self.offer.currency_code() == "EURO":
            return int(price * Booking.euro_rate)
        return price

    @classmethod
    def set_euro_rate(cls, rate: float) -> None:
        """Change the euro to Canadian dollar rate used by every booking."""
        Booking.euro_rate = rate

    def show(self) -> str:
        price = self.price_cad()
        print(f"   Reservation {self.offer.name}, prix total ($CA): {price}.")
        return f"   Reservation {self.offer.name}, prix total ($CA): {price}\n"

    def cancel(self) -> None:
        """A plain booking has nothing to undo."""

    def copy(self) -> Booking:
        """A plain booking of the same offer at a copy of the same moment."""
        duplicate = Booking(self.offer, replace(self.moment), self.planning)
        duplicate.name = self.name
        duplicate.seller = replace(self.seller)
        return duplicate


def iter_bookings(root: Reservation) -> Iterator[Booking]:
    """Yield the bookings under root, breadth first."""
    queue: deque[Reservation] = deque([root])
    while queue:
        item = queue.popleft()
        if isinstance(item, ReservationGroup):
            queue.extend(item.reservations)
        elif isinstance(item, Booking):
            yield item