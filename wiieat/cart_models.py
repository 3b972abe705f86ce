"""Request bodies for creating carts and adding lines to them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

BRAND = "GRUBHUB"
LINE_SOURCE = "restaurant menu section_other menu categories"


def _field(root: Mapping[str, Any], key: str, kind: type) -> Any:
    """Fetch a required field of the given JSON type."""
    if key not in root:
        raise KeyError(key)
    value = root[key]
    if kind in (int, float):
        valid = isinstance(value, (int, float) if kind is float else int)
        valid = valid and not isinstance(value, bool)
    else:
        valid = isinstance(value, kind)
    if not valid:
        raise TypeError(
            f"field {key!r} must be {kind.__name__}, got {type(value).__name__}"
        )
    return float(value) if kind is float else value


@dataclass
class LineOption:
    """A chosen option on a cart line."""

    option_id: int
    quantity: int
    child_options: list[Any] = field(default_factory=list)
    sub_option_ids: list[Any] = field(default_factory=list)

    def serialize(self) -> dict[str, Any]:
        return {
            "child_options": list(self.child_options),
            "id": self.option_id,
            "quantity": self.quantity,
            "sub_option_ids": list(self.sub_option_ids),
        }

    @classmethod
    def deserialize(cls, root: Mapping[str, Any]) -> LineOption:
        return cls(
            option_id=_field(root, "id", int),
            quantity=_field(root, "quantity", int),
        )


@dataclass
class Cart:
    """Body for creating a new cart."""

    brand: str = BRAND
    experiments: list[str] = field(
        default_factory=lambda: ["IGNORE_MINIMUM_TIP_REQUIREMENT", "LINEOPTION_ENHANCEMENTS"]
    )
    cart_attributes: list[str] = field(default_factory=list)

    def serialize(self) -> dict[str, Any]:
        return {
            "brand": self.brand,
            "experiments": list(self.experiments),
            "cart_attributes": list(self.cart_attributes),
        }

    @classmethod
    def deserialize(cls, root: Mapping[str, Any]) -> Cart:
        return cls()


@dataclass
class CartLine:
    """A menu item to add to a cart."""

    restaurant_id: str
    menu_item_id: str
    quantity: int
    cost: float
    brand: str = BRAND
    experiments: list[str] = field(default_factory=lambda: ["LINEOPTION_ENHANCEMENTS"])
    special_instructions: str = ""
    options: list[LineOption] = field(default_factory=list)
    popular: bool = False
    is_badged: bool = False
    source: str = LINE_SOURCE

    def add_option(self, option_id: int, quantity: int) -> None:
        self.options.append(LineOption(option_id, quantity))

    def serialize(self) -> dict[str, Any]:
        return {
            "menu_item_id": self.menu_item_id,
            "brand": self.brand,
            "experiments": list(self.experiments),
            "quantity": self.quantity,
            "special_instructions": self.special_instructions,
            "options": [option.serialize() for option in self.options],
            "restaurant_id": self.restaurant_id,
            "popular": self.popular,
            "isBadged": self.is_badged,
            "source": self.source,
            "cost": 0 if self.cost == 0.0 else self.cost,
        }

    @classmethod
    def deserialize(cls, root: Mapping[str, Any]) -> CartLine:
        return cls(
            restaurant_id=_field(root, "store_id", str),
            menu_item_id=_field(root, "menu_item_id", str),
            quantity=_field(root, "count", int),
            cost=_field(root, "cost", float),
        )