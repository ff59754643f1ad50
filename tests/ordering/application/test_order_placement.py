"""Application tests for placing orders."""

import pytest
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from printeez.order.order import Order
from printeez.order.placement import place_order
from printeez.product.product import Product
from printeez.shared.errors import InsufficientStock, InvalidAddress, ProductNotFound, SizeUnavailable

ADDRESS = "House 12, Street 4, F-7/2, Islamabad"


@pytest.fixture()
def shopper(make_user):
    return make_user(name="Ayesha Khan", email="ayesha@example.com")


def _line(product, size, quantity):
    return {"product_id": str(product.id), "size": size, "quantity": quantity}


def _product_state():
    """Stock per size and sales count of every product, keyed by id."""
    return {
        str(p.id): ({s.size: s.stock for s in p.sizes}, p.sales_count)
        for p in current_domain.repository_for(Product)._dao.query.all().items
    }


def _order_count():
    return current_domain.repository_for(Order)._dao.query.all().total


class TestSuccessfulPlacement:
    def test_total_is_sum_of_price_times_quantity(self, shopper, make_product):
        tee = make_product(name="Tee", price=19.99, sizes={"Large": 5})
        hoodie = make_product(name="Serif Hoodie", price=45.5, sizes={"Medium": 5}, category="typography")

        order = place_order(shopper.id, [_line(tee, "Large", 3), _line(hoodie, "Medium", 2)], ADDRESS)

        assert order.total == pytest.approx(19.99 * 3 + 45.5 * 2)
        assert order.total == pytest.approx(sum(i.unit_price * i.quantity for i in order.items))

    def test_order_is_persisted_pending(self, shopper, make_product):
        tee = make_product()
        order = place_order(shopper.id, [_line(tee, "Large", 1)], ADDRESS)

        stored = current_domain.repository_for(Order).get(order.id)
        assert stored.status == "Pending"
        assert stored.payment_method == "COD"
        assert stored.user_id == shopper.id
        assert stored.address == ADDRESS
        assert stored.created_at is not None
        assert len(stored.items) == 1

    def test_each_size_decreases_by_ordered_quantity_only(self, shopper, make_product, stock_of):
        tee = make_product(name="Tee", sizes={"Small": 4, "Large": 6})
        other = make_product(name="Untouched", sizes={"Large": 9})

        place_order(shopper.id, [_line(tee, "Large", 4), _line(tee, "Small", 1)], ADDRESS)

        assert stock_of(tee.id, "Large") == 2
        assert stock_of(tee.id, "Small") == 3
        assert stock_of(other.id, "Large") == 9

    def test_sales_count_increases_by_quantity(self, shopper, make_product):
        tee = make_product(sizes={"Small": 4, "Large": 6})
        place_order(shopper.id, [_line(tee, "Large", 4), _line(tee, "Small", 1)], ADDRESS)
        assert current_domain.repository_for(Product).get(tee.id).sales_count == 5

    def test_repeated_lines_are_checked_together(self, shopper, make_product, stock_of):
        tee = make_product(sizes={"Large": 3})

        with pytest.raises(InsufficientStock):
            place_order(shopper.id, [_line(tee, "Large", 2), _line(tee, "Large", 2)], ADDRESS)
        assert stock_of(tee.id, "Large") == 3

        place_order(shopper.id, [_line(tee, "Large", 2), _line(tee, "Large", 1)], ADDRESS)
        assert stock_of(tee.id, "Large") == 0

    def test_price_and_name_snapshot_survive_catalogue_changes(self, shopper, make_product):
        tee = make_product(name="Tee", price=20.0)
        order = place_order(shopper.id, [_line(tee, "Large", 2)], ADDRESS)

        repo = current_domain.repository_for(Product)
        product = repo.get(tee.id)
        product.price = 35.0
        product.name = "Renamed Tee"
        repo.add(product)

        stored = current_domain.repository_for(Order).get(order.id)
        assert stored.items[0].unit_price == 20.0
        assert stored.items[0].product_name == "Tee"
        assert stored.total == 40.0

    def test_order_placed_event_is_stored(self, shopper, make_product):
        tee = make_product()
        place_order(shopper.id, [_line(tee, "Large", 1)], ADDRESS)

        messages = current_domain.event_store.store.read("printeez::order")
        placed = [
            m
            for m in messages
            if m.metadata and m.metadata.headers and m.metadata.headers.type == "Printeez.OrderPlaced.v1"
        ]
        assert len(placed) == 1


class TestTeeLargeScenario:
    """A "Tee" with stock 2 for size "Large"."""

    def test_first_order_takes_both_units(self, shopper, make_product, stock_of):
        tee = make_product(name="Tee", sizes={"Large": 2})

        order = place_order(shopper.id, [_line(tee, "Large", 2)], ADDRESS)

        assert order.status == "Pending"
        assert stock_of(tee.id, "Large") == 0

    def test_next_order_fails_with_insufficient_stock(self, shopper, make_product, stock_of):
        tee = make_product(name="Tee", sizes={"Large": 2})
        place_order(shopper.id, [_line(tee, "Large", 2)], ADDRESS)

        with pytest.raises(InsufficientStock) as exc:
            place_order(shopper.id, [_line(tee, "Large", 1)], ADDRESS)

        assert exc.value.available == 0
        assert exc.value.requested == 1
        assert stock_of(tee.id, "Large") == 0
        assert _order_count() == 1


class TestRejectedPlacement:
    def test_unknown_product(self, shopper, make_product):
        tee = make_product()
        before = _product_state()

        with pytest.raises(ProductNotFound) as exc:
            place_order(
                shopper.id,
                [_line(tee, "Large", 1), {"product_id": "no-such-product", "size": "Large", "quantity": 1}],
                ADDRESS,
            )

        assert exc.value.product_id == "no-such-product"
        assert _product_state() == before
        assert _order_count() == 0

    def test_unknown_size(self, shopper, make_product):
        tee = make_product(sizes={"Large": 2})
        before = _product_state()

        with pytest.raises(SizeUnavailable):
            place_order(shopper.id, [_line(tee, "Small", 1)], ADDRESS)

        assert _product_state() == before
        assert _order_count() == 0

    def test_one_line_over_stock_fails_the_whole_order(self, shopper, make_product):
        tee = make_product(name="Tee", sizes={"Large": 5})
        hoodie = make_product(name="Hoodie", sizes={"Medium": 1})
        cap = make_product(name="Snapback", sizes={"Small": 5})
        before = _product_state()

        with pytest.raises(InsufficientStock):
            place_order(
                shopper.id,
                [_line(tee, "Large", 2), _line(hoodie, "Medium", 2), _line(cap, "Small", 1)],
                ADDRESS,
            )

        assert _product_state() == before
        assert _order_count() == 0

    @pytest.mark.parametrize("address", ["", "   ", None, "x" * 201])
    def test_invalid_address(self, shopper, make_product, address):
        tee = make_product()
        before = _product_state()

        with pytest.raises(InvalidAddress):
            place_order(shopper.id, [_line(tee, "Large", 1)], address)

        assert _product_state() == before

    def test_empty_order(self, shopper):
        with pytest.raises(ValidationError) as exc:
            place_order(shopper.id, [], ADDRESS)
        assert "items" in exc.value.messages

    @pytest.mark.parametrize("quantity", [0, -1, 1.5, "2"])
    def test_quantity_must_be_positive_integer(self, shopper, make_product, quantity):
        tee = make_product()
        with pytest.raises(ValidationError) as exc:
            place_order(shopper.id, [_line(tee, "Large", quantity)], ADDRESS)
        assert "quantity" in exc.value.messages

    def test_missing_user(self, make_product):
        tee = make_product()
        with pytest.raises(ValidationError):
            place_order(None, [_line(tee, "Large", 1)], ADDRESS)
