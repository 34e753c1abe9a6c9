from __future__ import annotations

from flask import Blueprint

from aether.app.extensions import db
from aether.app.models import ProductRecord
from aether.modules.catalog.data import house_catalog

cli_bp = Blueprint("cli", __name__, cli_group=None)


@cli_bp.cli.command("init-db")
def init_db() -> None:
    """Create tables."""
    db.create_all()
    print("DB initialized (tables created).")


@cli_bp.cli.command("seed")
def seed_data() -> None:
    """Seed the products table with the house catalog.

    Safe to run multiple times; it will no-op if products exist.
    """
    db.create_all()

    if db.session.query(ProductRecord).count() > 0:
        print("Products already exist. Reset the database to reseed.")
        return

    db.session.add_all(
        [
            ProductRecord(
                id=p.id,
                name=p.name,
                designer=p.designer,
                price=p.price,
                category=p.category,
                image_url=p.image,
                description=p.description,
                sizes=list(p.sizes),
                colors=list(p.colors),
            )
            for p in house_catalog()
        ]
    )
    db.session.commit()
    print(f"Seeded {db.session.query(ProductRecord).count()} products.")
