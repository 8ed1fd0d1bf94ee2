"""A traveller's trip and its reservation tree."""

from __future__ import annotations

from .models import Traveller
from .reservations import Reservation, ReservationGroup, iter_bookings


class Trip:
    """A named trip holding a tree of reservations."""

    def __init__(self, name: str, traveller: Traveller) -> None:
        self._setup(name, traveller, ReservationGroup(name, "", True))
        print(f"{name} cree!")

    def _setup(self, name: str, traveller: Traveller, root: ReservationGroup) -> None:
        self.name = name
        self.traveller = traveller
        self.reservations = root
        self.reservations.name = name
        self.reservations.set_trip(self)

    @classmethod
    def copy_from(cls, name: str, traveller: Traveller, source: Trip) -> Trip:
        """A new trip whose reservations are a deep copy of another trip's."""
        trip = cls.__new__(cls)
        trip._setup(name, traveller, source.reservations.copy())
        print(f"{name} copie a partir du {source.name}!")
        return trip

    def add(self, reservation: Reservation) -> None:
        self.reservations.set_trip(self)
        self.reservations.add(reservation)

    def remove(self, name: str) -> None:
        self.reservations.remove(name)

    def total(self) -> int:
        """The sum of every booking's price in Canadian dollars."""
        return sum(booking.price_cad() for booking in iter_bookings(self.reservations))

    def show_total(self) -> None:
        print(f"Total des frais pour le {self.name} ($ CA): {self.total()}")