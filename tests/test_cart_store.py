from decimal import Decimal

from aether.modules.cart.state import AddItem, SetQuantity
from aether.modules.cart.store import CartStore
from aether.modules.catalog.data import house_catalog


def test_dispatch_and_totals():
    blouse, trousers = house_catalog()[:2]
    store = CartStore()
    store.dispatch(AddItem(blouse, "M", "Ivory"))
    store.dispatch(AddItem(trousers, "L", "Navy"))
    store.dispatch(SetQuantity(trousers.id, "L", "Navy", 2))

    assert store.count == 3
    assert store.subtotal == Decimal(850 + 2 * 1200)
    assert [(i.key, i.quantity) for i in store.items] == [((blouse.id, "M", "Ivory"), 1), ((trousers.id, "L", "Navy"), 2)]


def test_list_form_survives_a_session_round_trip():
    store = CartStore()
    store.dispatch(AddItem(house_catalog()[0], "M", "Ivory"))

    restored = CartStore.from_list(store.to_list())
    assert restored.items == store.items


def test_unreadable_entries_are_dropped():
    store = CartStore()
    store.dispatch(AddItem(house_catalog()[0], "M", "Ivory"))
    raw = store.to_list() + [{"product_id": "x"}, {"price": "1"}]

    restored = CartStore.from_list(raw)
    assert len(restored.items) == 1


def test_missing_session_value_is_an_empty_bag():
    assert CartStore.from_list(None).items == ()
