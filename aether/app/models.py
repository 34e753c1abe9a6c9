from __future__ import annotations

from aether.app.extensions import db


class ProductRecord(db.Model):
    __tablename__ = "products"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    designer = db.Column(db.String(255), nullable=False)
    price = db.Column(db.Numeric(10, 2), nullable=False)
    category = db.Column(db.String(100), nullable=False, index=True)
    image_url = db.Column(db.String(1024), nullable=True)
    description = db.Column(db.Text, nullable=True)

    # Ordered label lists, e.g. ["XS", "S", "M"]
    sizes = db.Column(db.JSON, nullable=False, default=list)
    colors = db.Column(db.JSON, nullable=False, default=list)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "designer": self.designer,
            "price": float(self.price) if self.price is not None else None,
            "category": self.category,
            "image_url": self.image_url,
            "description": self.description,
            "sizes": list(self.sizes or []),
            "colors": list(self.colors or []),
        }
