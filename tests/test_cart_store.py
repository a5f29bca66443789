"""
Tests for the cart store.

Each class covers one operation; TestInvariants replays mixed operation
sequences and checks the state rules after every step.
"""

import random

import pytest

from models import ItemStatus, Product
from services.cart_store import CartStore


def assert_consistent(store: CartStore):
    """No product in both sections, no count below 1, total adds up."""
    pending = store.pending()
    purchased = store.purchased()

    assert not set(pending) & set(purchased)
    assert all(count > 0 for count in pending.values())
    assert all(count > 0 for count in purchased.values())
    assert store.total_count() == sum(pending.values()) + sum(purchased.values())


class TestAdd:

    def test_add_new_product_starts_at_one(self, store, milk):
        store.add(milk)

        assert store.pending() == {milk: 1}
        assert store.purchased() == {}

    def test_total_count_after_adds(self, store, milk, bread):
        store.add(milk)
        store.add(milk)
        store.add(bread)

        assert store.total_count() == 3

    def test_add_purchased_product_moves_it_back_and_increments(self, store, milk):
        store.set_quantity(milk, 3)
        store.mark_purchased(milk)

        store.add(milk)

        assert store.pending() == {milk: 4}
        assert milk not in store.purchased()

    def test_repeated_adds_after_purchase_keep_counting(self, store, milk):
        store.add(milk)
        store.mark_purchased(milk)

        store.add(milk)
        store.add(milk)

        assert store.pending() == {milk: 3}
        assert store.purchased() == {}


class TestDecrement:

    def test_decrement_pending(self, store, milk):
        store.set_quantity(milk, 2)

        store.decrement(milk)

        assert store.pending() == {milk: 1}

    def test_decrement_to_zero_removes_key(self, store, milk):
        store.add(milk)

        store.decrement(milk)

        assert milk not in store.pending()
        assert store.status_of(milk) == ItemStatus.ABSENT

    def test_decrement_purchased_when_not_pending(self, store, milk):
        store.set_quantity(milk, 2)
        store.mark_purchased(milk)

        store.decrement(milk)

        assert store.purchased() == {milk: 1}
        assert store.pending() == {}

    def test_decrement_purchased_to_zero_removes_key(self, store, milk):
        store.add(milk)
        store.mark_purchased(milk)

        store.decrement(milk)

        assert store.is_empty()

    def test_decrement_absent_is_noop(self, store, milk):
        store.decrement(milk)

        assert store.is_empty()


class TestRemove:

    def test_remove_pending(self, store, milk, bread):
        store.add(milk)
        store.add(bread)

        store.remove(milk)

        assert store.pending() == {bread: 1}

    def test_remove_purchased(self, store, milk):
        store.add(milk)
        store.mark_purchased(milk)

        store.remove(milk)

        assert store.is_empty()

    def test_remove_absent_is_noop(self, store, milk):
        store.remove(milk)

        assert store.is_empty()


class TestSetQuantity:

    def test_set_quantity_on_absent_product(self, store, milk):
        store.set_quantity(milk, 5)

        assert store.pending() == {milk: 5}

    def test_set_quantity_overrides_pending(self, store, milk):
        store.add(milk)
        store.add(milk)

        store.set_quantity(milk, 7)

        assert store.pending() == {milk: 7}

    def test_set_quantity_moves_purchased_to_pending(self, store, milk):
        store.set_quantity(milk, 2)
        store.mark_purchased(milk)

        store.set_quantity(milk, 4)

        assert store.pending() == {milk: 4}
        assert store.purchased() == {}

    @pytest.mark.parametrize("count", [0, -1])
    def test_non_positive_quantity_removes_pending(self, store, milk, count):
        store.add(milk)

        store.set_quantity(milk, count)

        assert store.is_empty()

    def test_zero_quantity_removes_purchased(self, store, milk):
        store.add(milk)
        store.mark_purchased(milk)

        store.set_quantity(milk, 0)

        assert store.is_empty()


class TestMarking:

    def test_mark_purchased_moves_exact_count(self, store, milk):
        store.set_quantity(milk, 3)

        store.mark_purchased(milk)

        assert store.purchased() == {milk: 3}
        assert store.pending() == {}
        assert store.status_of(milk) == ItemStatus.PURCHASED

    def test_round_trip_preserves_count(self, store, milk):
        store.set_quantity(milk, 6)

        store.mark_purchased(milk)
        store.mark_pending(milk)

        assert store.pending() == {milk: 6}
        assert store.purchased() == {}

    def test_mark_purchased_when_already_purchased_is_noop(self, store, milk):
        store.set_quantity(milk, 2)
        store.mark_purchased(milk)

        store.mark_purchased(milk)

        assert store.purchased() == {milk: 2}

    def test_mark_purchased_absent_is_noop(self, store, milk):
        store.mark_purchased(milk)

        assert store.is_empty()

    def test_mark_pending_when_pending_is_noop(self, store, milk):
        store.add(milk)

        store.mark_pending(milk)

        assert store.pending() == {milk: 1}


class TestClear:

    def test_clear_empties_both_sections(self, store, milk, bread):
        store.add(milk)
        store.set_quantity(bread, 2)
        store.mark_purchased(bread)

        store.clear()

        assert store.pending() == {}
        assert store.purchased() == {}
        assert store.total_count() == 0


class TestCustomProducts:

    def test_custom_product_goes_to_pending(self, store):
        product = store.add_custom_product("Milk", 2)

        assert product.is_custom
        assert product.name == "Milk"
        assert store.pending() == {product: 2}

    def test_custom_product_is_distinct_from_catalog_product(self, store, milk):
        store.add(milk)

        custom = store.add_custom_product("Milk", 2)

        assert custom != milk
        assert store.pending() == {milk: 1, custom: 2}

    def test_readding_after_clear_creates_new_identity(self, store):
        first = store.add_custom_product("Milk", 2)
        store.clear()

        second = store.add_custom_product("Milk", 2)

        assert first != second
        assert first not in store
        assert store.pending() == {second: 2}

    def test_custom_product_uses_configured_markers(self):
        store = CartStore(
            custom_icon="✍️",
            custom_description="Typed in",
            custom_category="Mine",
        )

        product = store.add_custom_product("Tea", 1)

        assert product.icon == "✍️"
        assert product.description == "Typed in"
        assert product.category == "Mine"

    def test_custom_product_defaults_from_settings(self, store):
        product = store.add_custom_product("Tea", 1)

        assert product.icon == "🛒"
        assert product.description == "Added manually"
        assert product.category == "Custom"

    def test_non_positive_count_is_not_listed(self, store):
        product = store.add_custom_product("Tea", 0)

        assert product.is_custom
        assert product not in store
        assert store.is_empty()


class TestViews:

    def test_quantity_of(self, store, milk, bread):
        store.set_quantity(milk, 2)
        store.set_quantity(bread, 3)
        store.mark_purchased(bread)

        assert store.quantity_of(milk) == 2
        assert store.quantity_of(bread) == 3
        assert store.quantity_of(Product(name="X", icon="", description="", category="")) == 0

    def test_lines_keep_insertion_order(self, store, milk, bread):
        store.add(bread)
        store.add(milk)

        lines = store.pending_lines()

        assert [line.product for line in lines] == [bread, milk]
        assert all(not line.purchased for line in lines)

    def test_purchased_lines(self, store, milk):
        store.set_quantity(milk, 2)
        store.mark_purchased(milk)

        lines = store.purchased_lines()

        assert len(lines) == 1
        assert lines[0].count == 2
        assert lines[0].purchased

    def test_snapshots_are_copies(self, store, milk):
        store.add(milk)

        snapshot = store.pending()
        snapshot[milk] = 99

        assert store.quantity_of(milk) == 1

    def test_section_counts(self, store, milk, bread):
        store.set_quantity(milk, 2)
        store.set_quantity(bread, 3)
        store.mark_purchased(bread)

        assert store.pending_count() == 2
        assert store.purchased_count() == 3
        assert store.total_count() == 5

    def test_len_and_contains(self, store, milk, bread):
        store.add(milk)
        store.add(milk)
        store.add(bread)
        store.mark_purchased(bread)

        assert len(store) == 2
        assert milk in store
        assert bread in store
        assert "milk" not in store


class TestSubscriptions:

    def test_subscriber_called_on_change(self, store, milk):
        calls = []
        store.subscribe(calls.append)

        store.add(milk)
        store.mark_purchased(milk)

        assert calls == [store, store]

    def test_subscriber_not_called_on_noop(self, store, milk):
        calls = []
        store.subscribe(calls.append)

        store.decrement(milk)
        store.remove(milk)
        store.mark_purchased(milk)
        store.mark_pending(milk)
        store.clear()

        assert calls == []

    def test_unsubscribe(self, store, milk):
        calls = []
        unsubscribe = store.subscribe(calls.append)

        unsubscribe()
        store.add(milk)

        assert calls == []

    def test_failing_subscriber_does_not_break_operation(self, store, milk):
        calls = []

        def broken(_store):
            raise RuntimeError("boom")

        store.subscribe(broken)
        store.subscribe(calls.append)

        store.add(milk)

        assert store.pending() == {milk: 1}
        assert calls == [store]

    def test_subscriber_sees_new_state(self, store, milk):
        seen = []
        store.subscribe(lambda s: seen.append(s.total_count()))

        store.add(milk)
        store.add(milk)
        store.clear()

        assert seen == [1, 2, 0]


class TestInvariants:

    def test_random_operation_sequences(self, products):
        rng = random.Random(1234)
        store = CartStore()
        operations = [
            lambda p: store.add(p),
            lambda p: store.decrement(p),
            lambda p: store.remove(p),
            lambda p: store.set_quantity(p, rng.randint(-2, 5)),
            lambda p: store.mark_purchased(p),
            lambda p: store.mark_pending(p),
        ]

        for _ in range(500):
            operation = rng.choice(operations)
            operation(rng.choice(products))
            assert_consistent(store)

            if rng.random() < 0.02:
                store.clear()
                assert store.total_count() == 0
