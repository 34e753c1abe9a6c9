from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Tuple


class InvalidProduct(ValueError):
    """A catalog row could not be turned into a Product."""


@dataclass(frozen=True)
class Product:
    """One purchasable item of the catalog. Never mutated after loading."""

    id: int
    name: str
    designer: str
    price: Decimal
    category: str
    image: str
    description: str
    sizes: Tuple[str, ...]
    colors: Tuple[str, ...]

    def __post_init__(self) -> None:
        if self.price < 0:
            raise InvalidProduct(f"product {self.id}: price must be non-negative")
        if not self.sizes:
            raise InvalidProduct(f"product {self.id}: at least one size is required")
        if not self.colors:
            raise InvalidProduct(f"product {self.id}: at least one color is required")

    @classmethod
    def from_dict(cls, row: Mapping[str, Any]) -> "Product":
        """Build a product from a catalog endpoint row.

        Accepts both `image` and `image_url` for the picture reference.
        """
        try:
            price = Decimal(str(row["price"]))
            return cls(
                id=int(row["id"]),
                name=str(row["name"]),
                designer=str(row.get("designer") or ""),
                price=price,
                category=str(row.get("category") or ""),
                image=str(row.get("image") or row.get("image_url") or ""),
                description=str(row.get("description") or ""),
                sizes=tuple(str(s) for s in row.get("sizes") or ()),
                colors=tuple(str(c) for c in row.get("colors") or ()),
            )
        except InvalidProduct:
            raise
        except (KeyError, TypeError, ValueError, InvalidOperation) as exc:
            raise InvalidProduct(f"malformed product row: {exc!r}") from exc

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "designer": self.designer,
            "price": float(self.price),
            "category": self.category,
            "image_url": self.image,
            "description": self.description,
            "sizes": list(self.sizes),
            "colors": list(self.colors),
        }
