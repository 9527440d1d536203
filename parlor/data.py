"""Static menu data resolved into domain values."""

from __future__ import annotations

from parlor.constant import FLAVOR_NAMES, SERVING_OPTION_NAMES, SIZE_NAMES, TOPPING_PRICES
from parlor.models import Flavor, ServingOption, Size, Topping

SERVING_OPTIONS: list[ServingOption] = [ServingOption(value) for value in SERVING_OPTION_NAMES]
SIZES: list[Size] = [Size(value) for value in SIZE_NAMES]

FLAVORS: dict[str, Flavor] = {name: Flavor(name) for name in FLAVOR_NAMES}
TOPPINGS: dict[str, Topping] = {name: Topping(name, price) for name, price in TOPPING_PRICES.items()}


def display_name_for_option(option: ServingOption) -> str:
    """Get display name for a serving option."""
    return SERVING_OPTION_NAMES.get(option.value, option.name.title())


def display_name_for_size(size: Size) -> str:
    """Get display name for a size."""
    return SIZE_NAMES.get(size.value, size.name.title())


def flavor_for_name(name: str) -> Flavor:
    """Look up a catalog flavor by name (case-insensitive); raises KeyError if unknown."""
    for flavor_name, flavor in FLAVORS.items():
        if flavor_name.lower() == name.strip().lower():
            return flavor
    raise KeyError(name)


def topping_for_name(name: str) -> Topping:
    """Look up a catalog topping by name (case-insensitive); raises KeyError if unknown."""
    for topping_name, topping in TOPPINGS.items():
        if topping_name.lower() == name.strip().lower():
            return topping
    raise KeyError(name)
