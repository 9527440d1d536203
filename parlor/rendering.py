"""Rendering helpers for orders and the selection form."""

from __future__ import annotations

from rich.text import Text

from parlor.config import CURRENCY_SYMBOL
from parlor.data import display_name_for_option, display_name_for_size
from parlor.models import Order, ServingOption
from parlor.ordering import OrderSelection


def badge_style(option: ServingOption) -> str:
    """Return a consistent badge style for serving-option tags."""
    if option is ServingOption.CONE:
        return "bold #3b2a1a on #e8b96a"
    return "bold #ffffff on #2f6db5"


def format_money(amount: float) -> str:
    return f"{CURRENCY_SYMBOL}{amount:.2f}"


def format_order_label(order: Order) -> Text:
    """Render an order row: number, option badge per item, description and net total."""
    text = Text()
    text.append(f"#{order.number} ", style="bold")
    for idx, item in enumerate(order.items):
        if idx > 0:
            text.append("; ")
        text.append(item.option.name, style=badge_style(item.option))
        flavors = ", ".join(str(flavor) for flavor in item.flavors)
        text.append(f" {display_name_for_size(item.size)} {flavors}")
        if item.toppings:
            toppings = ", ".join(str(topping) for topping in item.toppings)
            text.append(f" + {toppings}", style="italic")
    text.append(f"  {format_money(order.net_total())}", style="bold green")
    return text


def format_selection_summary(selection: OrderSelection) -> Text:
    """Render the current form state, marking unset required fields."""
    text = Text()
    rows = [
        ("O", "Option", display_name_for_option(selection.option) if selection.option else None, True),
        ("S", "Size", display_name_for_size(selection.size) if selection.size else None, True),
        ("F", "Flavor", selection.flavor_name, True),
        ("T", "Topping", selection.topping_name, False),
    ]
    for idx, (key, label, value, required) in enumerate(rows):
        if idx > 0:
            text.append("\n")
        text.append(f"[{key}] ", style="bold")
        text.append(f"{label}: ")
        if value:
            text.append(value, style="bold")
        elif required:
            text.append("(required)", style="#ffb3b3")
        else:
            text.append("(none)", style="dim")
    return text
