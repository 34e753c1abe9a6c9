"""Bag (shopping cart) state as pure functions over a tuple of line items.

A line item is keyed by (product id, size, color). At most one item exists
per key and every item has quantity >= 1.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any, Mapping, Tuple, Union

from aether.modules.catalog.product import Product

Key = Tuple[int, str, str]


@dataclass(frozen=True)
class LineItem:
    product_id: int
    size: str
    color: str
    name: str
    price: Decimal
    image: str
    quantity: int = 1

    @property
    def key(self) -> Key:
        return (self.product_id, self.size, self.color)

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity

    def to_dict(self) -> dict:
        return {
            "product_id": self.product_id,
            "size": self.size,
            "color": self.color,
            "name": self.name,
            "price": str(self.price),
            "image": self.image,
            "quantity": self.quantity,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LineItem":
        return cls(
            product_id=int(data["product_id"]),
            size=str(data["size"]),
            color=str(data["color"]),
            name=str(data["name"]),
            price=Decimal(str(data["price"])),
            image=str(data.get("image") or ""),
            quantity=int(data["quantity"]),
        )


Items = Tuple[LineItem, ...]


@dataclass(frozen=True)
class AddItem:
    product: Product
    size: str
    color: str


@dataclass(frozen=True)
class RemoveItem:
    product_id: int
    size: str
    color: str


@dataclass(frozen=True)
class SetQuantity:
    product_id: int
    size: str
    color: str
    quantity: int


Action = Union[AddItem, RemoveItem, SetQuantity]


def add_item(items: Items, product: Product, size: str, color: str) -> Items:
    # size/color are taken as given; they are not checked against the product.
    key = (product.id, size, color)
    if any(item.key == key for item in items):
        return tuple(replace(item, quantity=item.quantity + 1) if item.key == key else item for item in items)
    return items + (
        LineItem(
            product_id=product.id,
            size=size,
            color=color,
            name=product.name,
            price=product.price,
            image=product.image,
            quantity=1,
        ),
    )


def remove_item(items: Items, product_id: int, size: str, color: str) -> Items:
    key = (product_id, size, color)
    return tuple(item for item in items if item.key != key)


def set_quantity(items: Items, product_id: int, size: str, color: str, quantity: int) -> Items:
    if quantity <= 0:
        return remove_item(items, product_id, size, color)
    key = (product_id, size, color)
    return tuple(replace(item, quantity=quantity) if item.key == key else item for item in items)


def count(items: Items) -> int:
    return sum(item.quantity for item in items)


def subtotal(items: Items) -> Decimal:
    return sum((item.line_total for item in items), Decimal("0"))


def reduce(items: Items, action: Action) -> Items:
    if isinstance(action, AddItem):
        return add_item(items, action.product, action.size, action.color)
    if isinstance(action, RemoveItem):
        return remove_item(items, action.product_id, action.size, action.color)
    if isinstance(action, SetQuantity):
        return set_quantity(items, action.product_id, action.size, action.color, action.quantity)
    raise TypeError(f"Unknown bag action: {action!r}")
