"""Strategies that scale an offer's price."""

from __future__ import annotations

from abc import ABC, abstractmethod


class PriceStrategy(ABC):
    """Gives the factor an offer's base price is multiplied by."""

    @abstractmethod
    def factor(self) -> float:
        """Return the price multiplier."""


class IncreaseStrategy(PriceStrategy):
    """Raises prices by a fraction of their value."""

    def __init__(self, increase: float) -> None:
        self.increase = increase

    def factor(self) -> float:
        return 1.0 + self.increase


class DiscountStrategy(PriceStrategy):
    """Lowers prices by a fraction of their value."""

    def __init__(self, discount: float) -> None:
        self.discount = discount

    def factor(self) -> float:
        return 1.0 - self.discount