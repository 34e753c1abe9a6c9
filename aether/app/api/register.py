from flask import Flask

from aether.modules.cart.routes import bp as cart_bp
from aether.modules.catalog.routes import bp as catalog_bp
from aether.modules.storefront.routes import bp as storefront_bp


def register_blueprints(app: Flask) -> None:
    app.register_blueprint(catalog_bp, url_prefix="/api")
    app.register_blueprint(cart_bp)
    app.register_blueprint(storefront_bp)

    # Root API document
    @app.get("/api")
    def api_index():
        return {
            "name": "AETHER Storefront API",
            "version": "0.1.0",
            "endpoints": {
                "catalog": ["/products"],
                "bag": ["/bag"],
            },
        }, 200
