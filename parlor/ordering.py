"""Turn form selections into orders and place them."""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from parlor.config import BASE_PRICE
from parlor.constant import NO_TOPPING_LABEL
from parlor.data import flavor_for_name, topping_for_name
from parlor.models import Icecream, Order, OrderHistory, ServingOption, Size, Topping


class OrderValidationError(Exception):
    """A selection is missing or unknown; the message is shown to the user as-is."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass
class OrderSelection:
    """What the user has picked so far. Any field may still be unset."""

    option: ServingOption | None = None
    size: Size | None = None
    flavor_name: str | None = None
    topping_name: str | None = None

    def missing_fields(self) -> list[str]:
        missing: list[str] = []
        if self.option is None:
            missing.append("serving option")
        if self.size is None:
            missing.append("size")
        if not (self.flavor_name or "").strip():
            missing.append("flavor")
        return missing


def _resolve_toppings(topping_name: str | None) -> list[Topping]:
    if topping_name is None or not topping_name.strip() or topping_name == NO_TOPPING_LABEL:
        return []
    try:
        return [topping_for_name(topping_name)]
    except KeyError:
        raise OrderValidationError(f"Unknown topping: {topping_name}") from None


def build_icecream(selection: OrderSelection, base_price: float = BASE_PRICE) -> Icecream:
    """Validate a selection and build the single ice cream it describes."""
    missing = selection.missing_fields()
    if missing:
        raise OrderValidationError(f"Please select a {', '.join(missing)} before adding to the order.")

    flavor_name = selection.flavor_name or ""
    try:
        flavor = flavor_for_name(flavor_name)
    except KeyError:
        raise OrderValidationError(f"Unknown flavor: {selection.flavor_name}") from None

    return Icecream(
        option=selection.option,  # type: ignore[arg-type]
        size=selection.size,  # type: ignore[arg-type]
        flavors=[flavor],
        toppings=_resolve_toppings(selection.topping_name),
        base_price=base_price,
    )


def add_to_order(history: OrderHistory, selection: OrderSelection, base_price: float = BASE_PRICE) -> Order:
    """
    Build an ice cream from the selection and record it as a new one-item order.

    Every call opens a new order, so a visit with three ice creams yields three
    orders. History is only touched once the selection has validated.
    """
    try:
        item = build_icecream(selection, base_price=base_price)
    except OrderValidationError as exc:
        logger.info("add_rejected reason={!r}", exc.message)
        raise

    order = history.new_order()
    order.add_item(item)
    logger.info("order_added number={} price={:.2f} item={!r}", order.number, item.calculate_price(), item.details())
    return order


def place_order(history: OrderHistory) -> str:
    """Render every order in the session into one receipt."""
    if not len(history):
        logger.info("place_rejected reason=no_orders")
        raise OrderValidationError("No orders to place. Add an ice cream to the order first.")
    receipt = history.receipt()
    logger.info("order_placed orders={} gross={:.2f}", len(history), history.total_cost())
    return receipt
