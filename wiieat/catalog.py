"""Plain records describing restaurants, menus and payment cards."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Restaurant:
    name: str
    id: str


@dataclass
class Category:
    name: str
    id: str


@dataclass
class MenuItem:
    name: str
    id: str
    img_id: str
    price: float


@dataclass
class Option:
    """One selectable option within a choice."""

    name: str
    id: str
    price: float


@dataclass
class Choice:
    """A group of options from which a number may be picked."""

    name: str
    id: str
    max_options: int
    min_options: int
    options: list[Option] = field(default_factory=list)
    required: bool = False

    def add_option(self, name: str, option_id: str, price: float) -> Option:
        option = Option(name, option_id, price)
        self.options.append(option)
        return option


@dataclass
class CreditCard:
    id: str
    diner_id: str
    type: str
    last_4: str