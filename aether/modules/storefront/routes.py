from __future__ import annotations

from flask import Blueprint, flash, redirect, render_template, request, session, url_for

from aether.modules.cart.store import session_bag
from aether.modules.catalog.listing import ALL, SortKey
from aether.modules.catalog.provider import current_catalog
from aether.modules.storefront import pages
from aether.modules.storefront.router import (
    Page,
    ViewRouter,
    navigation_target,
    page_from_dict,
    page_to_dict,
)

bp = Blueprint("storefront", __name__)

VIEW_KEY = "view"
SCROLL_KEY = "scroll_reset"


def _reset_scroll(_: Page) -> None:
    # Picked up by the next render, which scrolls the window to the top.
    session[SCROLL_KEY] = True


def session_router() -> ViewRouter:
    return ViewRouter(page_from_dict(session.get(VIEW_KEY)), on_navigate=_reset_scroll)


def save_router(router: ViewRouter) -> None:
    session[VIEW_KEY] = page_to_dict(router.page)


@bp.app_context_processor
def inject_chrome():
    """Header and footer data for every storefront template."""
    return {
        "nav_links": pages.NAV_LINKS,
        "footer_groups": pages.FOOTER_GROUPS,
        "info_pages": pages.INFO_PAGES,
    }


@bp.app_template_filter("price")
def price_filter(amount):
    return pages.format_price(amount)


@bp.get("/")
def storefront():
    router = session_router()
    catalog = current_catalog()
    bag = session_bag()
    view = pages.resolve(router.page, catalog, bag)
    return render_template(
        view.template,
        page=router.page,
        bag_count=bag.count,
        scroll_reset=session.pop(SCROLL_KEY, False),
        **view.context,
    )


@bp.post("/navigate")
def navigate():
    target = navigation_target(
        (request.form.get("page") or "").strip(),
        product_id=request.form.get("product_id"),
        slug=request.form.get("slug"),
    )
    if target is None:
        flash("That page does not exist.", "error")
        return redirect(url_for("storefront.storefront"))

    router = session_router()
    router.navigate(target)
    save_router(router)
    return redirect(url_for("storefront.storefront"))


@bp.post("/listing")
def refine_listing():
    router = session_router()
    router.refine_listing(
        category=(request.form.get("category") or ALL).strip(),
        designer=(request.form.get("designer") or ALL).strip(),
        sort=SortKey.parse(request.form.get("sort")),
    )
    save_router(router)
    return redirect(url_for("storefront.storefront"))
