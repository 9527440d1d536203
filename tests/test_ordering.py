"""Tests for turning form selections into orders."""

import pytest

from parlor.constant import NO_TOPPING_LABEL
from parlor.models import ServingOption, Size
from parlor.ordering import (
    OrderSelection,
    OrderValidationError,
    add_to_order,
    build_icecream,
    place_order,
)


def _complete_selection(**overrides) -> OrderSelection:
    values = {
        "option": ServingOption.CONE,
        "size": Size.LARGE,
        "flavor_name": "Vanilla",
        "topping_name": "Caramel",
    }
    values.update(overrides)
    return OrderSelection(**values)


class TestBuildIcecream:
    def test_builds_priced_item(self):
        item = build_icecream(_complete_selection())
        assert item.option is ServingOption.CONE
        assert item.size is Size.LARGE
        assert [str(flavor) for flavor in item.flavors] == ["Vanilla"]
        assert [str(topping) for topping in item.toppings] == ["Caramel"]
        assert item.base_price == 5.0
        assert item.calculate_price() == pytest.approx(9.0)

    @pytest.mark.parametrize("topping_name", [None, "", "   ", NO_TOPPING_LABEL])
    def test_missing_topping_means_none(self, topping_name):
        item = build_icecream(_complete_selection(size=Size.SMALL, topping_name=topping_name))
        assert item.toppings == []
        assert item.calculate_price() == pytest.approx(5.0)

    def test_names_are_case_insensitive(self):
        item = build_icecream(_complete_selection(flavor_name="vanilla", topping_name="CARAMEL"))
        assert str(item.flavors[0]) == "Vanilla"
        assert str(item.toppings[0]) == "Caramel"

    @pytest.mark.parametrize(
        ("overrides", "missing"),
        [
            ({"option": None}, "serving option"),
            ({"size": None}, "size"),
            ({"flavor_name": None}, "flavor"),
            ({"flavor_name": "  "}, "flavor"),
        ],
    )
    def test_missing_required_selection(self, overrides, missing):
        with pytest.raises(OrderValidationError) as exc_info:
            build_icecream(_complete_selection(**overrides))
        assert missing in exc_info.value.message

    def test_all_missing_fields_are_named(self):
        with pytest.raises(OrderValidationError) as exc_info:
            build_icecream(OrderSelection())
        assert exc_info.value.message == (
            "Please select a serving option, size, flavor before adding to the order."
        )

    def test_unknown_flavor(self):
        with pytest.raises(OrderValidationError, match="Unknown flavor: Durian"):
            build_icecream(_complete_selection(flavor_name="Durian"))

    def test_unknown_topping(self):
        with pytest.raises(OrderValidationError, match="Unknown topping: Ketchup"):
            build_icecream(_complete_selection(topping_name="Ketchup"))


class TestAddToOrder:
    def test_each_add_creates_a_new_single_item_order(self, history):
        first = add_to_order(history, _complete_selection())
        second = add_to_order(history, _complete_selection(size=Size.SMALL, topping_name=None))

        assert (first.number, second.number) == (1, 2)
        assert len(first.items) == 1
        assert len(second.items) == 1
        assert history.orders == (first, second)
        assert first.net_total() == pytest.approx(9.45)
        assert second.net_total() == pytest.approx(5.25)

    @pytest.mark.parametrize("overrides", [{"option": None}, {"size": None}, {"flavor_name": None}])
    def test_rejected_selection_leaves_history_untouched(self, history, overrides):
        with pytest.raises(OrderValidationError):
            add_to_order(history, _complete_selection(**overrides))
        assert len(history) == 0

    def test_rejection_does_not_consume_an_order_number(self, history):
        with pytest.raises(OrderValidationError):
            add_to_order(history, _complete_selection(option=None))
        assert add_to_order(history, _complete_selection()).number == 1

    def test_custom_base_price(self, history):
        order = add_to_order(history, _complete_selection(topping_name=None), base_price=4.0)
        assert order.total_cost() == pytest.approx(6.0)


class TestPlaceOrder:
    def test_empty_history_is_rejected(self, history):
        with pytest.raises(OrderValidationError, match="No orders to place"):
            place_order(history)

    def test_returns_session_receipt(self, history):
        add_to_order(history, _complete_selection())
        add_to_order(history, _complete_selection(option=ServingOption.CUP))
        receipt = place_order(history)
        assert receipt == history.receipt()
        assert "Order Number: 1" in receipt
        assert "Order Number: 2" in receipt

    def test_placing_does_not_clear_history(self, history):
        add_to_order(history, _complete_selection())
        place_order(history)
        place_order(history)
        assert len(history) == 1
