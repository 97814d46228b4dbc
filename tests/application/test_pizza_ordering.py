"""Integration tests for the storefront use cases."""

import pytest

from classroom.application.add_to_cart import AddToCartHandler
from classroom.application.confirm_order import ConfirmOrderHandler
from classroom.application.pizza_session import PizzaSession
from classroom.application.remove_item import RemoveItemHandler
from classroom.application.select_option import SelectOptionHandler
from classroom.application.show_cart import ShowCartHandler
from classroom.application.show_menu import ShowMenuHandler
from classroom.application.update_quantity import UpdateQuantityHandler
from classroom.domain.exceptions import EntityNotFoundError
from classroom.domain.model.pizza import Crust, Size
from tests.fakes import FakeCatalogRepository


def _setup() -> PizzaSession:
    return PizzaSession(FakeCatalogRepository())


def _add(session: PizzaSession, index: int, size: Size = Size.SMALL, crust: Crust = Crust.REGULAR):
    SelectOptionHandler(session).handle(index, size=size, crust=crust)
    return AddToCartHandler(session).handle(index)


class TestSelectOption:

    def test_one_selection_per_menu_row(self):
        session = _setup()
        assert len(session.selections) == 4

    def test_select_changes_only_that_row(self):
        session = _setup()
        SelectOptionHandler(session).handle(1, size=Size.LARGE)

        assert session.selections[1].size.value is Size.LARGE
        assert session.selections[1].crust.value is Crust.REGULAR
        assert session.selections[0].size.value is Size.SMALL

    def test_unknown_row_rejected(self):
        with pytest.raises(EntityNotFoundError, match="row 9"):
            SelectOptionHandler(_setup()).handle(9, size=Size.LARGE)

    def test_menu_shows_live_price(self):
        session = _setup()
        SelectOptionHandler(session).handle(0, size=Size.LARGE, crust=Crust.THICK)

        rows = ShowMenuHandler(session).handle()

        assert rows[0].unit_price == "$11.00"
        assert rows[0].size == "large"
        assert rows[0].crust == "thick"
        assert rows[1].unit_price == "$9.00"


class TestAddToCart:

    def test_add_snapshots_selection_and_prices(self):
        session = _setup()
        line = _add(session, 0, Size.LARGE, Crust.THICK)

        assert line.id == 0
        assert line.name == "Cheese"
        assert line.unit_price == "$11.00"
        assert line.quantity == 1
        assert line.details == "Base: $8.00 | Large: +$2.00 | Thick crust: +$1.00"

    def test_add_resets_row_to_defaults(self):
        session = _setup()
        _add(session, 2, Size.MEDIUM, Crust.THIN)

        selection = session.selections[2]
        assert selection.size.value is Size.SMALL
        assert selection.crust.value is Crust.REGULAR

    def test_add_notifies_cart_subscribers(self):
        session = _setup()
        sizes = []
        session.cart.subscribe(lambda cart: sizes.append(len(cart.items)))

        _add(session, 0)
        _add(session, 0)

        assert sizes == [1, 2]

    def test_unknown_row_rejected(self):
        with pytest.raises(EntityNotFoundError, match="No pizza"):
            AddToCartHandler(_setup()).handle(4)


class TestEditCart:

    def test_update_quantity(self):
        session = _setup()
        line = _add(session, 1)

        UpdateQuantityHandler(session).handle(line.id, "3")

        cart = ShowCartHandler(session).handle()
        assert cart.items[0].quantity == 3
        assert cart.items[0].line_total == "$27.00"
        assert cart.total == "$27.00"

    def test_malformed_quantity_defaults_to_one(self):
        session = _setup()
        line = _add(session, 1)
        UpdateQuantityHandler(session).handle(line.id, "4")

        UpdateQuantityHandler(session).handle(line.id, "")

        assert ShowCartHandler(session).handle().items[0].quantity == 1

    def test_quantity_clamped_to_widget_range(self):
        session = _setup()
        line = _add(session, 0)

        UpdateQuantityHandler(session).handle(line.id, "500")

        assert ShowCartHandler(session).handle().items[0].quantity == 99

    def test_update_unknown_id_is_noop(self):
        session = _setup()
        _add(session, 0)
        UpdateQuantityHandler(session).handle(99, "5")
        assert ShowCartHandler(session).handle().items[0].quantity == 1

    def test_remove(self):
        session = _setup()
        first = _add(session, 0)
        _add(session, 3)

        RemoveItemHandler(session).handle(first.id)

        cart = ShowCartHandler(session).handle()
        assert [item.name for item in cart.items] == ["Meatlovers"]
        assert cart.total == "$11.00"

    def test_remove_unknown_id_is_noop(self):
        session = _setup()
        _add(session, 0)
        RemoveItemHandler(session).handle(12)
        assert len(ShowCartHandler(session).handle().items) == 1


class TestShowCart:

    def test_empty_cart(self):
        cart = ShowCartHandler(_setup()).handle()
        assert cart.items == []
        assert cart.total == "$0.00"
        assert cart.can_confirm is False
        assert cart.order_message == ""

    def test_can_confirm_with_items(self):
        session = _setup()
        _add(session, 0)
        assert ShowCartHandler(session).handle().can_confirm is True


class TestConfirmOrder:

    def test_confirm_empty_cart_changes_nothing(self):
        session = _setup()
        messages = []
        session.order_message.subscribe(messages.append)

        result = ConfirmOrderHandler(session).handle()

        assert result is None
        assert messages == []
        assert session.order_message.value == ""
        assert session.cart.value.is_empty

    def test_confirm_clears_cart_and_reports_total(self):
        session = _setup()
        line = _add(session, 0, Size.LARGE, Crust.THICK)
        UpdateQuantityHandler(session).handle(line.id, 2)
        _add(session, 2, Size.MEDIUM)
        total_before = ShowCartHandler(session).handle().total

        message = ConfirmOrderHandler(session).handle()

        assert total_before == "$33.00"
        assert message == (
            "Order Confirmed!\n"
            "2x Cheese — $22.00\n"
            "1x Hawaiian — $11.00\n"
            "Total: $33.00\n"
            "\n"
            "Thank you for your order!"
        )
        assert f"Total: {total_before}" in message
        cart = ShowCartHandler(session).handle()
        assert cart.items == []
        assert cart.order_message == message

    def test_ids_not_reused_after_confirm(self):
        session = _setup()
        _add(session, 0)
        _add(session, 1)
        ConfirmOrderHandler(session).handle()

        line = _add(session, 0)

        assert line.id == 2
