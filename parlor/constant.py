"""Editable static menu configuration."""

from __future__ import annotations

SERVING_OPTION_NAMES: dict[str, str] = {
    "cone": "Cone",
    "cup": "Cup",
}

SIZE_NAMES: dict[str, str] = {
    "large": "Large",
    "medium": "Medium",
    "small": "Small",
}

FLAVOR_NAMES: list[str] = [
    "Vanilla",
    "Chocolate",
    "Strawberry",
    "Mint Chocolate Chip",
    "Cookies and Cream",
    "Butter Pecan",
    "Pistachio",
    "Mango",
]

TOPPING_PRICES: dict[str, float] = {
    "Sprinkles": 0.5,
    "Chocolate Chips": 1.0,
    "Caramel": 1.5,
    "Hot Fudge": 1.5,
    "Whipped Cream": 0.75,
    "Nuts": 1.0,
    "Cherry": 0.25,
}

NO_TOPPING_LABEL = "No topping"
