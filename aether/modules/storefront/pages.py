"""View models for each storefront page.

Every builder takes the catalog provider and the bag explicitly and only
reads from them. The templates under `templates/pages/` render the result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Optional

from aether.modules.cart.store import CartStore
from aether.modules.catalog import listing
from aether.modules.catalog.product import Product
from aether.modules.catalog.provider import CatalogProvider
from aether.modules.storefront.content import INFO_PAGES
from aether.modules.storefront.router import Bag, Home, Info, InfoSlug, Listing, Page, ProductDetail

NAV_LINKS = [
    ("New Arrivals", Listing.name),
    ("Designers", Home.name),
    ("Clothing", Listing.name),
    ("Accessories", Listing.name),
    ("Journal", Home.name),
]

FOOTER_GROUPS = [
    ("Customer Service", [InfoSlug.CONTACT, InfoSlug.SHIPPING_RETURNS, InfoSlug.FAQ, InfoSlug.SIZE_GUIDE]),
    ("About Aether", [InfoSlug.OUR_STORY]),
]


@dataclass(frozen=True)
class View:
    template: str
    context: Dict[str, Any] = field(default_factory=dict)


def format_price(amount: Decimal) -> str:
    """`1200` -> `$1,200`; cents are shown only when present."""
    if amount == amount.to_integral_value():
        return f"${int(amount):,}"
    return f"${amount:,.2f}"


def home_view(catalog: CatalogProvider) -> View:
    state = catalog.state
    return View("pages/home.html", {"featured": listing.featured(state.items), "is_loading": state.is_loading})


def listing_view(catalog: CatalogProvider, page: Listing) -> View:
    items = catalog.state.items
    products = listing.sort_products(listing.filter_products(items, page.category, page.designer), page.sort)
    return View(
        "pages/products.html",
        {
            "products": products,
            "categories": listing.category_options(items),
            "designers": listing.designer_options(items),
            "filters": page,
            "sort_options": list(listing.SortKey),
            "is_loading": catalog.state.is_loading,
        },
    )


def detail_view(product: Optional[Product]) -> View:
    if product is None:
        return View("pages/product_not_found.html")
    return View(
        "pages/product_detail.html",
        {
            "product": product,
            "default_size": product.sizes[0],
            "default_color": product.colors[0],
        },
    )


def bag_view(bag: CartStore) -> View:
    return View("pages/cart.html", {"items": bag.items, "subtotal": bag.subtotal})


def info_view(page: Info) -> View:
    return View("pages/info.html", {"info": INFO_PAGES[page.slug]})


def resolve(page: Page, catalog: CatalogProvider, bag: CartStore) -> View:
    if isinstance(page, Home):
        return home_view(catalog)
    if isinstance(page, Listing):
        return listing_view(catalog, page)
    if isinstance(page, ProductDetail):
        return detail_view(catalog.find(page.product_id))
    if isinstance(page, Bag):
        return bag_view(bag)
    if isinstance(page, Info):
        return info_view(page)
    raise TypeError(f"Unknown page: {page!r}")
