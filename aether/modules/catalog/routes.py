from __future__ import annotations

from flask import Blueprint, current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError

from aether.app.extensions import db
from aether.app.models import ProductRecord

bp = Blueprint("catalog", __name__)


@bp.get("/products")
def list_products():
    """GET /api/products - every row of the products table.

    No filtering or pagination; the storefront filters client side.
    """
    try:
        rows = db.session.execute(db.select(ProductRecord).order_by(ProductRecord.id.asc())).scalars().all()
    except SQLAlchemyError:
        current_app.logger.exception("Database query failed")
        db.session.rollback()
        return jsonify({"error": "Failed to fetch products"}), 500

    return jsonify([r.to_dict() for r in rows]), 200
