from __future__ import annotations

from flask import Blueprint, flash, redirect, request, url_for

from aether.app.common.errors import ApiError, abort_json
from aether.app.common.validation import get_int, require_fields
from aether.modules.cart.state import AddItem, RemoveItem, SetQuantity
from aether.modules.cart.store import save_bag, session_bag
from aether.modules.catalog.provider import current_catalog

bp = Blueprint("cart", __name__)


@bp.errorhandler(ApiError)
def bag_form_error(err: ApiError):
    # Bag actions are form posts from the storefront; report problems there.
    flash(err.message, "error")
    return redirect(url_for("storefront.storefront"))


def _line_key(form) -> tuple[int, str, str]:
    require_fields(form, ["product_id", "size", "color"])
    return get_int(form, "product_id"), form["size"].strip(), form["color"].strip()


def _bag_response(bag):
    return {
        "items": [
            {
                **item.to_dict(),
                "line_total": str(item.line_total),
            }
            for item in bag.items
        ],
        "count": bag.count,
        "subtotal": str(bag.subtotal),
    }


@bp.get("/api/bag")
def get_bag():
    return _bag_response(session_bag()), 200


@bp.post("/bag/add")
def add_to_bag():
    product_id, size, color = _line_key(request.form)
    product = current_catalog().find(product_id)
    if product is None:
        abort_json(404, "not_found", "Product not found")

    bag = session_bag()
    bag.dispatch(AddItem(product, size, color))
    save_bag(bag)

    flash(f"{product.name} has been added to your bag.", "success")
    return redirect(url_for("storefront.storefront"))


@bp.post("/bag/update")
def update_bag_item():
    product_id, size, color = _line_key(request.form)
    quantity = get_int(request.form, "quantity")

    bag = session_bag()
    # quantity <= 0 removes the line
    bag.dispatch(SetQuantity(product_id, size, color, quantity))
    save_bag(bag)
    return redirect(url_for("storefront.storefront"))


@bp.post("/bag/remove")
def remove_bag_item():
    product_id, size, color = _line_key(request.form)

    bag = session_bag()
    bag.dispatch(RemoveItem(product_id, size, color))
    save_bag(bag)
    return redirect(url_for("storefront.storefront"))

