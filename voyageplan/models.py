"""Plain value types used by offers and reservations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Activity:
    """An activity offered on an excursion."""

    stars: int
    name: str
    city: str


@dataclass
class Aircraft:
    """The vehicle flying a transport line."""

    make: str
    carrier: str
    wifi: bool


@dataclass
class Hotel:
    """A hotel offered as accommodation."""

    rating: str
    name: str
    sector: str
    city: str


@dataclass
class Moment:
    """A date with an optional time of day."""

    date: str
    time: str = ""


@dataclass
class TransportLine:
    """A scheduled line between two destinations."""

    name: str
    number: str
    departure: str
    arrival: str
    departure_moment: Moment
    arrival_moment: Moment
    vehicle: Aircraft


@dataclass
class Seller:
    """The person who sold a reservation."""

    email: str = ""
    name: str = ""


@dataclass
class Traveller:
    """The person a trip belongs to."""

    name: str


@dataclass
class Comment:
    """A free-text comment attached to an offer or a booking."""

    text: str