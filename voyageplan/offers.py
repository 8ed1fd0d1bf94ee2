"""Reservation offers: excursions, accommodation and transport."""

from __future__ import annotations

from .models import Activity, Comment, Hotel, TransportLine
from .pricing import IncreaseStrategy, PriceStrategy


class Offer:
    """Something that can be reserved, with a price in some currency."""

    def __init__(self, name: str, price: int, currency: str) -> None:
        self.name = name
        self._price = int(price)
        self._currency = currency
        self._strategy: PriceStrategy = IncreaseStrategy(0)

    def current_price(self) -> int:
        """Base price scaled by the current strategy, truncated to an integer."""
        return int(self._price * self._strategy.factor())

    def set_price(self, price: int) -> None:
        self._price = int(price)

    def set_strategy(self, strategy: PriceStrategy) -> None:
        self._strategy = strategy

    def currency_code(self) -> str:
        """The currency with every non-letter character removed."""
        return "".join(c for c in self._currency if c.isascii() and c.isalpha())


class Excursion(Offer):
    """An offer for an activity."""

    def __init__(self, activity: Activity, price: int, currency: str) -> None:
        super().__init__(activity.name, price, currency)
        self.activity = activity


class Accommodation(Offer):
    """An offer for a night in a hotel."""

    def __init__(self, hotel: Hotel, price: int, currency: str) -> None:
        super().__init__(hotel.name, price, currency)
        self.hotel = hotel


class Transport(Offer):
    """An offer for a seat on a transport line."""

    def __init__(
        self, line: TransportLine, travel_class: str, price: int, currency: str
    ) -> None:
        super().__init__(line.name, price, currency)
        self.line = line
        self.travel_class = travel_class


class CommentedOffer(Offer):
    """A copy of an offer that also carries comments."""

    def __init__(self, offer: Offer) -> None:
        super().__init__(offer.name, offer._price, offer._currency)
        self._strategy = offer._strategy
        self.comments: list[Comment] = []

    def add_comment(self, comment: Comment) -> None:
        self.comments.append(comment)

    def remove_comment(self, comment: Comment) -> None:
        """Remove this very comment object, wherever it appears."""
        self.comments = [c for c in self.comments if c is not comment]