"""Offer databases loaded from comma-separated files."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, TypeVar

from .models import Activity, Aircraft, Hotel, Moment, TransportLine
from .offers import Accommodation, Excursion, Offer, Transport
from .pricing import PriceStrategy

T = TypeVar("T")

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


def _to_int(text: str) -> int:
    """Parse the integer at the start of text, ignoring what follows."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group())


def _split_row(line: str) -> list[str]:
    parts = line.split(",")
    if parts[-1] == "":
        parts.pop()
    return parts


class CsvDatabase(ABC, Generic[T]):
    """A list of elements that can be filled from a CSV file with a header."""

    def __init__(self) -> None:
        self._elements: list[T] = []

    @property
    def elements(self) -> list[T]:
        return list(self._elements)

    def load(self, path: str | Path) -> None:
        """Append one element per data row of the file; the first row is a header."""
        with open(path, encoding="utf-8") as handle:
            rows = [row for row in (_split_row(line.rstrip("\n")) for line in handle) if row]
        for row in rows[1:]:
            self._elements.append(self.create_from_row(row))

    def add(self, element: T) -> None:
        self._elements.append(element)

    @abstractmethod
    def create_from_row(self, row: list[str]) -> T:
        """Build an element from the columns of one row."""


class CategoryDatabase(CsvDatabase[Offer]):
    """The offers of one category."""

    def __init__(self, category: str) -> None:
        super().__init__()
        self.category = category
        print(f"Categorie {category} creee!")

    def add(self, element: Offer) -> None:
        print(f"Entree {element.name} rattachee a la categorie {self.category} creee!")


class ExcursionDatabase(CategoryDatabase):
    """Rows: name, city, stars, price, currency."""

    def __init__(self) -> None:
        super().__init__("Excursion")

    def create_from_row(self, row: list[str]) -> Offer:
        activity = Activity(_to_int(row[2]), row[0], row[1])
        return Excursion(activity, _to_int(row[3]), row[4])


class AccommodationDatabase(CategoryDatabase):
    """Rows: name, city, sector, rating, price, currency."""

    def __init__(self) -> None:
        super().__init__("Hebergement")

    def create_from_row(self, row: list[str]) -> Offer:
        hotel = Hotel(rating=row[3], name=row[0], sector=row[2], city=row[1])
        return Accommodation(hotel, _to_int(row[4]), row[5])


class TransportDatabase(CategoryDatabase):
    """Rows: name, carrier, number, from, to, departure date/time, arrival
    date/time, aircraft, class, wifi, price, currency."""

    def __init__(self) -> None:
        super().__init__("Transport")

    def create_from_row(self, row: list[str]) -> Offer:
        departure = Moment(row[5], row[6])
        arrival = Moment(row[7], row[8])
        aircraft = Aircraft(row[9], row[1], row[11] == "true")
        line = TransportLine(row[0], row[2], row[3], row[4], departure, arrival, aircraft)
        return Transport(line, row[10], _to_int(row[12]), row[13])


class PlanningDatabase(CsvDatabase):
    """The bookings that have been made; rows carry nothing to build from."""

    def create_from_row(self, row: list[str]) -> None:
        return None


class OfferDatabase:
    """All offer categories, by name."""

    def __init__(self) -> None:
        self._categories: dict[str, CategoryDatabase] = {}
        print("Objet BDOR cree!")

    @property
    def categories(self) -> dict[str, CategoryDatabase]:
        return dict(self._categories)

    def add_category(self, name: str, database: CategoryDatabase) -> None:
        self._categories[name] = database

    def category(self, name: str) -> CategoryDatabase | None:
        return self._categories.get(name)

    def change_prices(self, strategy: PriceStrategy, category: str) -> None:
        """Apply the strategy to every offer of a category and fold it into the price."""
        database = self.category(category)
        if database is None:
            return
        for offer in database.elements:
            offer.set_strategy(strategy)
            offer.set_price(offer.current_price())

    def count_offers(self) -> int:
        return sum(len(db.elements) for db in self._categories.values())