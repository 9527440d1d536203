"""Domain models for the ice-cream parlor: catalog values, menu items and orders."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, Iterator

from parlor.config import BASE_PRICE, CURRENCY_SYMBOL, ORDER_DATE_FORMAT, SERVICE_CHARGE_RATE

Clock = Callable[[], datetime]

_RECEIPT_BANNER_TITLE = " Ice Cream Parlor Receipt "
_RECEIPT_BANNER_WIDTH = 60
_QTY_COL_WIDTH = 5
_MONEY_COL_WIDTH = 10
_SUMMARY_LABEL_WIDTH = 24


class ServingOption(Enum):
    """How the ice cream is served."""

    CONE = "cone"
    CUP = "cup"


class Size(Enum):
    """Serving size; each size scales the base price by a fixed multiplier."""

    LARGE = "large"
    MEDIUM = "medium"
    SMALL = "small"

    @property
    def multiplier(self) -> float:
        return size_multiplier(self)


_SIZE_MULTIPLIERS: dict[Size, float] = {
    Size.LARGE: 1.5,
    Size.MEDIUM: 1.2,
    Size.SMALL: 1.0,
}


def size_multiplier(size: Size) -> float:
    """Return the price multiplier for a size; unmapped values are a configuration error."""
    try:
        return _SIZE_MULTIPLIERS[size]
    except (KeyError, TypeError):
        raise ValueError(f"No price multiplier configured for size {size!r}") from None


@dataclass(frozen=True)
class Flavor:
    """A flavor scoop. Flavors never change the price."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Topping:
    """A priced topping."""

    name: str
    price: float

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"Topping price must be non-negative, got {self.price!r} for {self.name!r}")

    def __str__(self) -> str:
        return self.name


def _bracketed(values: list[Flavor] | list[Topping]) -> str:
    return "[" + ", ".join(str(value) for value in values) + "]"


@dataclass
class Icecream:
    """A configured ice cream: serving option, size, flavors and toppings."""

    option: ServingOption
    size: Size
    flavors: list[Flavor]
    toppings: list[Topping] = field(default_factory=list)
    base_price: float = BASE_PRICE
    name: str = "Custom Ice Cream"

    def calculate_price(self) -> float:
        """Base price scaled by size, plus every topping price. Not rounded."""
        topping_price = sum(topping.price for topping in self.toppings)
        return (self.base_price * size_multiplier(self.size)) + topping_price

    def details(self) -> str:
        """One-line description, e.g. ``LARGE CONE with [Vanilla] and [Caramel] - $9.00``."""
        return (
            f"{self.size.name} {self.option.name} with {_bracketed(self.flavors)} "
            f"and {_bracketed(self.toppings)} - {CURRENCY_SYMBOL}{self.calculate_price():.2f}"
        )


@dataclass
class Order:
    """A numbered, timestamped, append-only collection of ice creams."""

    number: int
    created_at: datetime
    items: list[Icecream] = field(default_factory=list)

    def add_item(self, item: Icecream) -> None:
        self.items.append(item)

    def total_cost(self) -> float:
        return sum(item.calculate_price() for item in self.items)

    def service_charge(self) -> float:
        return self.total_cost() * SERVICE_CHARGE_RATE

    def net_total(self) -> float:
        return self.total_cost() * (1 + SERVICE_CHARGE_RATE)

    def formatted_date(self) -> str:
        return self.created_at.strftime(ORDER_DATE_FORMAT)

    def receipt_details(self) -> str:
        """Render the order as a fixed-column text receipt."""
        descriptions = [item.details() for item in self.items]
        desc_width = max([len("Description")] + [len(desc) for desc in descriptions]) + 2
        rule = "-" * (desc_width + _QTY_COL_WIDTH + 2 * _MONEY_COL_WIDTH)

        lines = [
            f"Order Number: {self.number}",
            f"Date: {self.formatted_date()}",
            "",
            f"{'Description':<{desc_width}}{'Qty':>{_QTY_COL_WIDTH}}"
            f"{'Price':>{_MONEY_COL_WIDTH}}{'Total':>{_MONEY_COL_WIDTH}}",
            rule,
        ]
        for item, desc in zip(self.items, descriptions):
            # Every add-to-order call produces its own row with quantity 1.
            lines.append(
                f"{desc:<{desc_width}}{1:>{_QTY_COL_WIDTH}}"
                f"{item.base_price:>{_MONEY_COL_WIDTH}.2f}{item.calculate_price():>{_MONEY_COL_WIDTH}.2f}"
            )
        lines.append(rule)
        lines.append(_summary_line("Total:", self.total_cost()))
        lines.append(_summary_line(f"Service Charge ({SERVICE_CHARGE_RATE:.0%}):", self.service_charge()))
        lines.append(_summary_line("Net Total:", self.net_total()))
        return "\n".join(lines)


def _summary_line(label: str, amount: float) -> str:
    return f"{label:<{_SUMMARY_LABEL_WIDTH}}{CURRENCY_SYMBOL}{amount:.2f}"


class OrderNumberSequence:
    """Monotonic order-number allocator; numbers are never reused."""

    def __init__(self, start: int = 1) -> None:
        if start < 1:
            raise ValueError("Order numbers start at 1 or above")
        self._next = start

    def allocate(self) -> int:
        number = self._next
        self._next += 1
        return number

    @property
    def next_number(self) -> int:
        return self._next


class OrderHistory:
    """Append-only list of orders for one running session."""

    def __init__(self, sequence: OrderNumberSequence | None = None, clock: Clock | None = None) -> None:
        self._sequence = sequence if sequence is not None else OrderNumberSequence()
        self._clock: Clock = clock if clock is not None else datetime.now
        self._orders: list[Order] = []

    def new_order(self) -> Order:
        """Create an empty order with the next number and the current time, and record it."""
        order = Order(number=self._sequence.allocate(), created_at=self._clock())
        self._orders.append(order)
        return order

    @property
    def orders(self) -> tuple[Order, ...]:
        return tuple(self._orders)

    def __len__(self) -> int:
        return len(self._orders)

    def __iter__(self) -> Iterator[Order]:
        return iter(tuple(self._orders))

    def total_cost(self) -> float:
        return sum(order.total_cost() for order in self._orders)

    def receipt(self) -> str:
        """Banner followed by every order's receipt, separated by blank lines."""
        banner = _RECEIPT_BANNER_TITLE.center(_RECEIPT_BANNER_WIDTH, "=")
        return "\n\n".join([banner] + [order.receipt_details() for order in self._orders])
