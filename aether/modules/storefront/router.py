"""Which storefront page is showing.

Pages are a closed set of variants. The current one is kept per browser
session; the storefront is served from a single URL, so pages are reached
only through navigation actions, never by deep link.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Union

from aether.modules.catalog.listing import ALL, SortKey


class InfoSlug(str, Enum):
    CONTACT = "contact"
    SHIPPING_RETURNS = "shipping-returns"
    FAQ = "faq"
    SIZE_GUIDE = "size-guide"
    OUR_STORY = "our-story"


@dataclass(frozen=True)
class Home:
    name = "home"


@dataclass(frozen=True)
class Listing:
    category: str = ALL
    designer: str = ALL
    sort: SortKey = SortKey.NEWEST

    name = "products"


@dataclass(frozen=True)
class ProductDetail:
    product_id: Optional[int] = None

    name = "product-detail"


@dataclass(frozen=True)
class Bag:
    name = "cart"


@dataclass(frozen=True)
class Info:
    slug: InfoSlug = InfoSlug.OUR_STORY

    name = "info"


Page = Union[Home, Listing, ProductDetail, Bag, Info]

PAGE_NAMES = (Home.name, Listing.name, ProductDetail.name, Bag.name, Info.name)


def page_to_dict(page: Page) -> dict:
    if isinstance(page, Home):
        return {"page": Home.name}
    if isinstance(page, Listing):
        return {"page": Listing.name, "category": page.category, "designer": page.designer, "sort": page.sort.value}
    if isinstance(page, ProductDetail):
        return {"page": ProductDetail.name, "product_id": page.product_id}
    if isinstance(page, Bag):
        return {"page": Bag.name}
    if isinstance(page, Info):
        return {"page": Info.name, "slug": page.slug.value}
    raise TypeError(f"Unknown page: {page!r}")


def page_from_dict(data: Optional[Mapping[str, Any]]) -> Page:
    """Rebuild a page from its stored form. Anything unreadable is Home."""
    if not data:
        return Home()
    name = data.get("page")
    if name == Listing.name:
        return Listing(
            category=str(data.get("category") or ALL),
            designer=str(data.get("designer") or ALL),
            sort=SortKey.parse(data.get("sort")),
        )
    if name == ProductDetail.name:
        return ProductDetail(product_id=_optional_int(data.get("product_id")))
    if name == Bag.name:
        return Bag()
    if name == Info.name:
        try:
            return Info(slug=InfoSlug(data.get("slug")))
        except ValueError:
            return Home()
    return Home()


def navigation_target(name: str, product_id: Any = None, slug: Any = None) -> Optional[Page]:
    """Page for a navigation request, or None for an unknown page name.

    A product id is only meaningful for the detail page. Listing always
    starts unfiltered, the way it does when it is first shown.
    """
    if name == Home.name:
        return Home()
    if name == Listing.name:
        return Listing()
    if name == ProductDetail.name:
        return ProductDetail(product_id=_optional_int(product_id))
    if name == Bag.name:
        return Bag()
    if name == Info.name:
        try:
            return Info(slug=InfoSlug(slug))
        except ValueError:
            return None
    return None


def _optional_int(raw: Any) -> Optional[int]:
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


class ViewRouter:
    """Current page plus the scroll-to-origin side effect of navigating."""

    def __init__(self, page: Optional[Page] = None, on_navigate: Optional[Callable[[Page], None]] = None) -> None:
        self.page: Page = page if page is not None else Home()
        self._on_navigate = on_navigate

    def navigate(self, target: Page) -> Page:
        self.page = target
        if self._on_navigate is not None:
            self._on_navigate(target)
        return target

    def refine_listing(self, **changes: Any) -> Page:
        """Change listing filters in place. Not a navigation: no scroll reset."""
        if not isinstance(self.page, Listing):
            return self.page
        self.page = replace(self.page, **changes)
        return self.page
