"""Unit tests for the cart store."""
import pytest
from pydantic import ValidationError

from app.services.cart.models import CartCustomization, CartItem, CustomizationRef
from app.services.cart.store import CartStore, customization_key


class TestCustomizationKey:
    """Test canonical customization keys."""

    def test_empty_customizations(self):
        """Test that no customizations and an empty list share a key."""
        assert customization_key(None) == customization_key([]) == ()

    def test_order_does_not_matter(self, cheese, bacon):
        """Test that selection order does not change the key."""
        assert customization_key([cheese, bacon]) == customization_key([bacon, cheese])

    def test_different_sets_differ(self, cheese, bacon):
        """Test that different sets produce different keys."""
        assert customization_key([cheese]) != customization_key([cheese, bacon])

    def test_hyphenated_ids_do_not_collide(self):
        """Test that ids containing the join character stay distinct."""
        a = CartCustomization(id="a", name="A", price=1.0)
        b = CartCustomization(id="b", name="B", price=1.0)
        a_b = CartCustomization(id="a-b", name="A-B", price=5.0)

        assert customization_key([a, b]) != customization_key([a_b])

    def test_hyphenated_ids_keep_separate_lines(self, burger):
        """Test that [a, b] and [a-b] on the same product are two lines."""
        a = CartCustomization(id="a", name="A", price=1.0)
        b = CartCustomization(id="b", name="B", price=1.0)
        a_b = CartCustomization(id="a-b", name="A-B", price=5.0)
        cart = CartStore()
        cart.add_item(burger(a, b))
        cart.add_item(burger(a_b))

        assert [(line.quantity, [c.id for c in line.customizations]) for line in cart.items] == [
            (1, ["a", "b"]),
            (1, ["a-b"]),
        ]
        assert cart.get_total_price() == (5 + 2) + (5 + 5)

    def test_refs_match_full_customizations(self, cheese, bacon):
        """Test that id-only references produce the same key."""
        refs = [CustomizationRef(id="cus-bacon"), CustomizationRef(id="cus-cheese")]

        assert customization_key(refs) == customization_key([cheese, bacon])


class TestAddItem:
    """Test adding items and merging lines."""

    def test_add_new_item(self, burger):
        """Test that the first add creates a line with quantity 1."""
        cart = CartStore()
        cart.add_item(burger())

        assert len(cart.items) == 1
        assert cart.items[0].quantity == 1

    def test_same_key_merges(self, burger, cheese, bacon):
        """Test that adding the same item twice increments quantity."""
        cart = CartStore()
        cart.add_item(burger(cheese, bacon))
        cart.add_item(burger(cheese, bacon))

        assert len(cart.items) == 1
        assert cart.items[0].quantity == 2

    def test_reordered_customizations_merge(self, burger, cheese, bacon):
        """Test that reordered customizations merge into the same line."""
        cart = CartStore()
        cart.add_item(burger(cheese, bacon))
        cart.add_item(burger(bacon, cheese))

        assert len(cart.items) == 1
        assert cart.items[0].quantity == 2

    def test_different_customizations_are_distinct(self, burger, cheese, bacon):
        """Test that the same product with other customizations gets its own line."""
        cart = CartStore()
        cart.add_item(burger(cheese))
        cart.add_item(burger(bacon))
        cart.add_item(burger())

        assert len(cart.items) == 3
        assert all(line.quantity == 1 for line in cart.items)

    def test_supplied_quantity_is_added(self, burger):
        """Test that an explicit quantity is added on merge."""
        cart = CartStore()
        cart.add_item(burger(quantity=2))
        cart.add_item(burger(quantity=3))

        assert cart.items[0].quantity == 5

    def test_insertion_order_preserved(self, burger, cheese):
        """Test that lines keep the order they were first added in."""
        cart = CartStore()
        fries = CartItem(id="fries", name="Fries", price=3.0)
        cart.add_item(fries)
        cart.add_item(burger(cheese))
        cart.add_item(fries)

        assert [line.id for line in cart.items] == ["fries", "burger"]

    def test_added_item_is_copied(self, burger):
        """Test that mutating the input does not change the cart."""
        cart = CartStore()
        item = burger()
        cart.add_item(item)
        item.quantity = 10

        assert cart.items[0].quantity == 1

    def test_zero_quantity_rejected(self):
        """Test that a cart item cannot be built with quantity 0."""
        with pytest.raises(ValidationError):
            CartItem(id="burger", name="Burger", price=5.0, quantity=0)


class TestQuantityChanges:
    """Test increase, decrease and remove."""

    def test_increase_qty(self, burger, cheese, bacon):
        """Test that increase adds one to the matching line."""
        cart = CartStore()
        cart.add_item(burger(cheese, bacon))
        cart.increase_qty("burger", [bacon, cheese])

        assert cart.items[0].quantity == 2

    def test_decrease_qty(self, burger):
        """Test that decrease subtracts one."""
        cart = CartStore()
        cart.add_item(burger(quantity=3))
        cart.decrease_qty("burger", [])

        assert cart.items[0].quantity == 2

    def test_decrease_at_one_removes_line(self, burger, cheese):
        """Test that decreasing a quantity of 1 removes the line."""
        cart = CartStore()
        cart.add_item(burger(cheese))
        cart.decrease_qty("burger", [cheese])

        assert cart.items == []
        assert cart.get_total_items() == 0

    def test_quantity_never_drops_below_one(self, burger):
        """Test that repeated decreases never leave a non-positive line."""
        cart = CartStore()
        cart.add_item(burger(quantity=2))
        for _ in range(5):
            cart.decrease_qty("burger")
            assert all(line.quantity >= 1 for line in cart.items)

        assert cart.items == []

    def test_unknown_line_is_noop(self, burger, cheese):
        """Test that changes to missing lines do nothing."""
        cart = CartStore()
        cart.add_item(burger())

        cart.increase_qty("pizza")
        cart.decrease_qty("burger", [cheese])
        cart.remove_item("pizza", [])

        assert len(cart.items) == 1
        assert cart.items[0].quantity == 1

    def test_remove_item_ignores_quantity(self, burger, cheese):
        """Test that remove deletes the whole line."""
        cart = CartStore()
        cart.add_item(burger(cheese, quantity=4))
        cart.add_item(burger())
        cart.remove_item("burger", [cheese])

        assert len(cart.items) == 1
        assert cart.items[0].customizations == []

    def test_clear_cart(self, burger, cheese):
        """Test that clear empties the cart."""
        cart = CartStore()
        cart.add_item(burger())
        cart.add_item(burger(cheese))
        cart.clear_cart()

        assert cart.items == []
        assert cart.get_total_price() == 0


class TestTotals:
    """Test derived totals."""

    def test_totals(self):
        """Test item count and price including customizations."""
        cart = CartStore()
        extra = CartCustomization(id="x", name="Extra", price=1.0, type="topping")
        cart.add_item(CartItem(id="a", name="A", price=5.0, quantity=2, customizations=[extra]))
        cart.add_item(CartItem(id="b", name="B", price=3.0))

        assert cart.get_total_items() == 3
        assert cart.get_total_price() == 2 * (5 + 1) + 1 * 3 == 15

    def test_empty_cart_totals(self):
        """Test that an empty cart totals to zero."""
        cart = CartStore()

        assert cart.get_total_items() == 0
        assert cart.get_total_price() == 0
