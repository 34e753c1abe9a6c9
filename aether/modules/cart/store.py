from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Iterable, List

from flask import session

from aether.modules.cart import state
from aether.modules.cart.state import Action, Items, LineItem

logger = logging.getLogger(__name__)

SESSION_KEY = "bag"


class CartStore:
    """Holds the bag for one browser session and applies actions to it."""

    def __init__(self, items: Iterable[LineItem] = ()) -> None:
        self._items: Items = tuple(items)

    @property
    def items(self) -> Items:
        return self._items

    @property
    def count(self) -> int:
        return state.count(self._items)

    @property
    def subtotal(self) -> Decimal:
        return state.subtotal(self._items)

    def dispatch(self, action: Action) -> Items:
        self._items = state.reduce(self._items, action)
        return self._items

    def to_list(self) -> List[dict]:
        return [item.to_dict() for item in self._items]

    @classmethod
    def from_list(cls, raw: Any) -> "CartStore":
        items = []
        for entry in raw or []:
            try:
                items.append(LineItem.from_dict(entry))
            except (KeyError, TypeError, ValueError, ArithmeticError):
                logger.warning("Dropping unreadable bag entry from session: %r", entry)
        return cls(items)


def session_bag() -> CartStore:
    return CartStore.from_list(session.get(SESSION_KEY))


def save_bag(store: CartStore) -> None:
    session[SESSION_KEY] = store.to_list()
