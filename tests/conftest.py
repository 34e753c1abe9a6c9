import os
import sys
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from aether.app.config import Config
from aether.app.extensions import db
from aether.app.factory import create_app
from aether.modules.catalog.provider import StaticCatalogSource


class StorefrontTestConfig(Config):
    # Use SQLite in tests for simplicity.
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    CATALOG_SOURCE = "static"


class DatabaseTestConfig(StorefrontTestConfig):
    CATALOG_SOURCE = "database"


class FailingSource:
    name = "failing"

    def fetch(self):
        raise ConnectionError("catalog backend unreachable")


def _make_app(config=StorefrontTestConfig, source=None):
    app = create_app(config, catalog_source=source)
    with app.app_context():
        db.create_all()
    return app


@pytest.fixture()
def app():
    return _make_app(source=StaticCatalogSource())


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture()
def db_app():
    """Database-backed storefront with the house catalog seeded."""
    app = _make_app(DatabaseTestConfig)
    result = app.test_cli_runner().invoke(args=["seed"])
    assert result.exit_code == 0, result.output
    return app


@pytest.fixture()
def make_app():
    return _make_app


@pytest.fixture()
def empty_db_app():
    """Database-backed storefront whose products table has no rows."""
    return _make_app(DatabaseTestConfig)
