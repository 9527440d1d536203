"""Tests for the static menu catalog."""

import pytest

from parlor.data import (
    FLAVORS,
    SERVING_OPTIONS,
    SIZES,
    TOPPINGS,
    display_name_for_option,
    display_name_for_size,
    flavor_for_name,
    topping_for_name,
)
from parlor.models import ServingOption, Size


def test_every_option_and_size_is_offered():
    assert SERVING_OPTIONS == [ServingOption.CONE, ServingOption.CUP]
    assert set(SIZES) == set(Size)


def test_display_names():
    assert display_name_for_option(ServingOption.CUP) == "Cup"
    assert display_name_for_size(Size.MEDIUM) == "Medium"


def test_topping_prices_are_non_negative():
    assert all(topping.price >= 0 for topping in TOPPINGS.values())
    assert TOPPINGS["Caramel"].price == 1.5


def test_lookups():
    assert flavor_for_name(" mango ") is FLAVORS["Mango"]
    assert topping_for_name("sprinkles") is TOPPINGS["Sprinkles"]
    with pytest.raises(KeyError):
        flavor_for_name("Durian")
    with pytest.raises(KeyError):
        topping_for_name("Ketchup")
