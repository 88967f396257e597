"""Beverages priced and named through stacked ingredient decorators."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod


class Beverage(ABC):
    """Something that can be served, with a name and a price."""

    @property
    def name(self) -> str:
        return ""

    @property
    @abstractmethod
    def price(self) -> int:
        """The price of the beverage."""


class Espresso(Beverage):
    """A plain espresso."""

    @property
    def name(self) -> str:
        return "Expresso"

    @property
    def price(self) -> int:
        return 10


class Cappuccino(Beverage):
    """A plain cappuccino."""

    @property
    def name(self) -> str:
        return "Cappuccino"

    @property
    def price(self) -> int:
        return 11


class Ingredient(Beverage):
    """A beverage that wraps another and adds to it."""

    def __init__(self, beverage: Beverage) -> None:
        self.beverage = beverage


class Milk(Ingredient):
    """Adds milk to a beverage."""

    @property
    def name(self) -> str:
        return self.beverage.name + " With Milk"

    @property
    def price(self) -> int:
        return self.beverage.price + 2


class Caramel(Ingredient):
    """Adds caramel to a beverage."""

    @property
    def name(self) -> str:
        return self.beverage.name + " With Caramel"

    @property
    def price(self) -> int:
        return self.beverage.price + 3


def _describe(beverage: Beverage) -> None:
    print(f"Beverage Name:{beverage.name}")
    print(f"Beverage Price:{beverage.price}")


def main(argv: list[str] | None = None) -> int:
    """Build and describe a few decorated beverages."""
    argparse.ArgumentParser(description="Decorator demonstration.").parse_args(argv)
    beverage: Beverage = Espresso()
    _describe(beverage)
    beverage = Milk(beverage)
    _describe(beverage)
    beverage = Caramel(beverage)
    _describe(beverage)

    second: Beverage = Cappuccino()
    _describe(second)
    second = Milk(second)
    _describe(second)
    beverage = Caramel(second)
    _describe(second)
    return 0