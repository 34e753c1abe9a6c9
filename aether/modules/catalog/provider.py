"""Catalog provider: loads the product list once and hands it to the pages.

The provider is created by the app factory and reached through
`current_catalog()`; pages never read a catalog source themselves.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Iterable, Optional, Protocol, Tuple

import httpx
from flask import Flask, current_app

from aether.app.extensions import db
from aether.app.models import ProductRecord
from aether.modules.catalog.data import house_catalog
from aether.modules.catalog.product import Product

logger = logging.getLogger(__name__)

EXTENSION_KEY = "aether.catalog"


class CatalogSource(Protocol):
    name: str

    def fetch(self) -> Iterable[Product]:
        ...


class StaticCatalogSource:
    """Hard-coded house catalog (no I/O)."""

    name = "static"

    def __init__(self, products: Optional[Iterable[Product]] = None) -> None:
        self._products = tuple(products) if products is not None else tuple(house_catalog())

    def fetch(self) -> Iterable[Product]:
        return self._products


class DatabaseCatalogSource:
    """Reads every row of the products table. Needs an app context."""

    name = "database"

    def fetch(self) -> Iterable[Product]:
        rows = db.session.execute(db.select(ProductRecord).order_by(ProductRecord.id.asc())).scalars()
        return [Product.from_dict(r.to_dict()) for r in rows]


class HttpCatalogSource:
    """One GET against the catalog endpoint (`/api/products`)."""

    name = "http"

    def __init__(self, url: str, timeout_seconds: float = 10.0, transport: Optional[httpx.BaseTransport] = None) -> None:
        self.url = url
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    def fetch(self) -> Iterable[Product]:
        with httpx.Client(timeout=self.timeout_seconds, transport=self._transport) as client:
            response = client.get(self.url)
            response.raise_for_status()
            payload = response.json()
        if not isinstance(payload, list):
            raise ValueError(f"catalog endpoint returned {type(payload).__name__}, expected a list")
        return [Product.from_dict(row) for row in payload]


@dataclass(frozen=True)
class CatalogState:
    items: Tuple[Product, ...] = ()
    is_loading: bool = True
    # Set when the read raised; the storefront still shows an empty catalog.
    failed: bool = False


class CatalogProvider:
    def __init__(self, source: CatalogSource) -> None:
        self.source = source
        self._state = CatalogState()
        self._lock = threading.Lock()
        self._requested = False
        self._mounted = True

    @property
    def state(self) -> CatalogState:
        return self._state

    def load(self) -> CatalogState:
        """Read the source once. Failures are logged, never raised."""
        with self._lock:
            if self._requested or not self._mounted:
                return self._state
            self._requested = True

            try:
                products = tuple(self.source.fetch())
            except Exception:
                logger.exception("Catalog load from %s source failed", self.source.name)
                self._settle(CatalogState(items=(), is_loading=False, failed=True))
                return self._state

            if not products:
                logger.warning("Catalog %s source returned no products", self.source.name)
            else:
                logger.info("Loaded %d products from %s source", len(products), self.source.name)
            self._settle(CatalogState(items=products, is_loading=False))
            return self._state

    def unmount(self) -> None:
        # Not under the lock: a read in flight must not block unmounting.
        self._mounted = False

    def find(self, product_id: Optional[int]) -> Optional[Product]:
        if product_id is None:
            return None
        for product in self._state.items:
            if product.id == product_id:
                return product
        return None

    def _settle(self, state: CatalogState) -> None:
        if not self._mounted:
            logger.info("Discarding catalog result; provider was unmounted mid-load")
            return
        self._state = state


def build_source(name: str, url: str = "", timeout_seconds: float = 10.0) -> CatalogSource:
    if name == "static":
        return StaticCatalogSource()
    if name == "database":
        return DatabaseCatalogSource()
    if name == "http":
        return HttpCatalogSource(url, timeout_seconds=timeout_seconds)
    raise ValueError(f"Unknown CATALOG_SOURCE {name!r} (expected static, database or http)")


def init_catalog(app: Flask, source: Optional[CatalogSource] = None) -> CatalogProvider:
    if source is None:
        source = build_source(
            app.config["CATALOG_SOURCE"],
            url=app.config.get("CATALOG_URL", ""),
            timeout_seconds=app.config.get("CATALOG_TIMEOUT", 10.0),
        )
    provider = CatalogProvider(source)
    app.extensions[EXTENSION_KEY] = provider
    return provider


def current_catalog() -> CatalogProvider:
    """Provider of the running app, loaded on first use."""
    provider: CatalogProvider = current_app.extensions[EXTENSION_KEY]
    provider.load()
    return provider
