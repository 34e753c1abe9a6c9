from decimal import Decimal

import pytest

from aether.modules.cart.store import CartStore
from aether.modules.catalog.listing import SortKey
from aether.modules.catalog.provider import CatalogProvider, StaticCatalogSource
from aether.modules.storefront import pages
from aether.modules.storefront.router import (
    Bag,
    Home,
    Info,
    InfoSlug,
    Listing,
    ProductDetail,
    ViewRouter,
    navigation_target,
    page_from_dict,
    page_to_dict,
)

ALL_PAGES = [Home(), Listing(), ProductDetail(1), ProductDetail(), Bag(), Info(InfoSlug.FAQ)]


@pytest.fixture()
def catalog():
    provider = CatalogProvider(StaticCatalogSource())
    provider.load()
    return provider


def test_initial_page_is_home():
    assert ViewRouter().page == Home()


@pytest.mark.parametrize("start", ALL_PAGES)
@pytest.mark.parametrize("target", ALL_PAGES)
def test_any_page_reaches_any_page_and_resets_scroll(start, target):
    scrolled = []
    router = ViewRouter(start, on_navigate=scrolled.append)
    router.navigate(target)
    assert router.page == target
    assert scrolled == [target]


def test_refining_listing_is_not_navigation():
    scrolled = []
    router = ViewRouter(Listing(), on_navigate=scrolled.append)
    router.refine_listing(category="Tops", sort=SortKey.PRICE_DESC)
    assert router.page == Listing(category="Tops", sort=SortKey.PRICE_DESC)
    assert scrolled == []


def test_refining_outside_listing_is_ignored():
    router = ViewRouter(Bag())
    assert router.refine_listing(category="Tops") == Bag()


@pytest.mark.parametrize("page", ALL_PAGES + [Listing("Tops", "Aura", SortKey.PRICE_ASC)])
def test_pages_survive_session_storage(page):
    assert page_from_dict(page_to_dict(page)) == page


@pytest.mark.parametrize("raw", [None, {}, {"page": "checkout"}, {"page": "info", "slug": "press"}])
def test_unreadable_stored_page_is_home(raw):
    assert page_from_dict(raw) == Home()


def test_navigation_targets():
    assert navigation_target("product-detail", product_id="5") == ProductDetail(5)
    assert navigation_target("product-detail") == ProductDetail(None)
    assert navigation_target("product-detail", product_id="abc") == ProductDetail(None)
    assert navigation_target("products") == Listing()
    assert navigation_target("info", slug="size-guide") == Info(InfoSlug.SIZE_GUIDE)
    assert navigation_target("info", slug="press") is None
    assert navigation_target("checkout") is None


def test_detail_without_product_falls_back(catalog):
    view = pages.resolve(ProductDetail(), catalog, CartStore())
    assert view.template == "pages/product_not_found.html"
    assert pages.resolve(ProductDetail(404), catalog, CartStore()).template == "pages/product_not_found.html"


def test_detail_defaults_to_first_size_and_color(catalog):
    view = pages.resolve(ProductDetail(7), catalog, CartStore())
    assert view.template == "pages/product_detail.html"
    assert view.context["default_size"] == "One Size"
    assert view.context["default_color"] == "Tortoise"


def test_listing_view_applies_filters(catalog):
    view = pages.resolve(Listing(designer="Solstice", sort=SortKey.PRICE_ASC), catalog, CartStore())
    assert [p.id for p in view.context["products"]] == [7, 3]


def test_every_page_resolves(catalog):
    for page in ALL_PAGES:
        assert pages.resolve(page, catalog, CartStore()).template.startswith("pages/")


def test_unknown_page_type_is_rejected(catalog):
    with pytest.raises(TypeError):
        pages.resolve("home", catalog, CartStore())


@pytest.mark.parametrize(
    "amount, expected",
    [("850", "$850"), ("1200", "$1,200"), ("1200.50", "$1,200.50"), ("0", "$0")],
)
def test_format_price(amount, expected):
    assert pages.format_price(Decimal(amount)) == expected
