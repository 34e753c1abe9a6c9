"""Read-only derivations over the catalog for the listing and home pages."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Sequence

from aether.modules.catalog.product import Product

ALL = "All"


class SortKey(str, Enum):
    # No timestamp exists on a product, so "newest" keeps catalog order.
    NEWEST = "newest"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"

    @property
    def label(self) -> str:
        return SORT_LABELS[self]

    @classmethod
    def parse(cls, raw: str | None) -> "SortKey":
        try:
            return cls(raw)
        except ValueError:
            return cls.NEWEST


SORT_LABELS = {
    SortKey.NEWEST: "Newest",
    SortKey.PRICE_ASC: "Price: Low to High",
    SortKey.PRICE_DESC: "Price: High to Low",
}


def _options(values: Iterable[str]) -> List[str]:
    seen: List[str] = []
    for v in values:
        if v not in seen:
            seen.append(v)
    return [ALL, *seen]


def category_options(products: Sequence[Product]) -> List[str]:
    return _options(p.category for p in products)


def designer_options(products: Sequence[Product]) -> List[str]:
    return _options(p.designer for p in products)


def filter_products(products: Sequence[Product], category: str = ALL, designer: str = ALL) -> List[Product]:
    return [
        p
        for p in products
        if (category == ALL or p.category == category) and (designer == ALL or p.designer == designer)
    ]


def sort_products(products: Sequence[Product], sort: SortKey = SortKey.NEWEST) -> List[Product]:
    if sort is SortKey.PRICE_ASC:
        return sorted(products, key=lambda p: p.price)
    if sort is SortKey.PRICE_DESC:
        return sorted(products, key=lambda p: p.price, reverse=True)
    return list(products)


def featured(products: Sequence[Product], limit: int = 4) -> List[Product]:
    return list(products[:limit])
