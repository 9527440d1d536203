"""Main Textual app class."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from loguru import logger
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Header, Static

from parlor.constant import NO_TOPPING_LABEL
from parlor.data import (
    FLAVORS,
    SERVING_OPTIONS,
    SIZES,
    TOPPINGS,
    display_name_for_option,
    display_name_for_size,
)
from parlor.message_modal import MessageModal
from parlor.models import Clock, Order, OrderHistory
from parlor.ordering import OrderSelection, OrderValidationError, add_to_order, place_order
from parlor.receipt_log import ReceiptLogError, append_receipt
from parlor.receipt_modal import ReceiptModal
from parlor.rendering import format_money, format_order_label, format_selection_summary

FIELD_KEYS: dict[str, str] = {
    "o": "option",
    "s": "size",
    "f": "flavor",
    "t": "topping",
}

FIELD_TITLES: dict[str, str] = {
    "option": "Option",
    "size": "Size",
    "flavor": "Flavor",
    "topping": "Topping",
}


class ParlorApp(App):
    """A Textual app for building ice creams, adding them to orders and placing them."""

    TITLE = "Ice Cream Parlor"
    SUB_TITLE = "Cone / Cup"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #orders-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #form-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #selection-form {
        height: auto;
        margin-bottom: 1;
    }

    #search-bar {
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
        height: 4;
    }

    #results {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #orders-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    input_state = reactive("normal")
    field = reactive("option")
    search_query = reactive("")
    selected_index = reactive(0)
    order_selected_index = reactive(None)

    BINDINGS = [
        ("tab", "cycle_results(1)", "Next choice"),
        ("up", "cycle_results(-1)", "Previous choice"),
        ("down", "cycle_results(1)", "Next choice"),
        ("enter", "pick_selected", "Pick choice"),
        ("backspace", "backspace_query", "Delete query char"),
        Binding("ctrl+s", "place_order", "Place order", priority=True),
        ("escape", "cancel_active_mode", "Exit active mode"),
        ("ctrl+c", "cancel_active_mode", "Exit active mode"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        history: OrderHistory | None = None,
        receipt_log_path: Path | str | None = None,
        clock: Clock | None = None,
    ) -> None:
        super().__init__()
        self.order_clock = clock
        self.history = history if history is not None else OrderHistory(clock=clock)
        self.receipt_log_path = receipt_log_path
        self.current_selection = OrderSelection()
        self.system_status = ""
        logger.debug("app_init")

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="orders-pane"):
                yield Static("Orders", classes="pane-title")
                yield Static("(no orders yet)", id="orders-list")
            with Vertical(id="form-pane"):
                yield Static("Your Ice Cream", classes="pane-title")
                yield Static(id="selection-form")
                yield Static(id="search-bar")
                yield Static(id="results")

    def on_mount(self) -> None:
        logger.info("app_mounted orders={}", len(self.history))
        self._refresh_all()

    def _modal_open(self) -> bool:
        return isinstance(self.screen, ModalScreen)

    def on_key(self, event: Key) -> None:
        # While a modal is active, let the modal own keyboard handling.
        if self._modal_open():
            return

        if event.key == "ctrl+s":
            self.action_place_order()
            event.stop()
            return

        if not event.is_printable or event.character is None or len(event.character) != 1:
            return

        if self.input_state == "active":
            if not (event.character.isalnum() or event.character == " "):
                return
            self.search_query += event.character
            self.selected_index = 0
            self._refresh_search()
            event.stop()
            return

        key = event.character.lower()
        if key in FIELD_KEYS:
            self.field = FIELD_KEYS[key]
            self.input_state = "active"
            self.search_query = ""
            self.selected_index = 0
            self._refresh_search()
            event.stop()
            return

        if key == "a":
            self.action_add_to_order()
            event.stop()
            return

        if key == "p":
            self.action_place_order()
            event.stop()
            return

        if key == "j":
            self._move_order_selection(1)
            event.stop()
            return

        if key == "k":
            self._move_order_selection(-1)
            event.stop()
            return

        if key == "v":
            self._open_receipt_for_selected_order()
            event.stop()
            return

    def action_cancel_active_mode(self) -> None:
        if self._modal_open():
            return
        if self.input_state == "normal":
            return

        self.input_state = "normal"
        self.search_query = ""
        self.selected_index = 0
        self._refresh_search()

    def action_cycle_results(self, delta: int) -> None:
        if self._modal_open():
            return
        if self.input_state != "active":
            return

        results = self._filtered_choices()
        if not results:
            self.selected_index = 0
            self._refresh_results(results)
            return
        self.selected_index = (self.selected_index + delta) % len(results)
        self._refresh_results(results)

    def action_pick_selected(self) -> None:
        if self._modal_open():
            return
        if self.input_state != "active":
            return

        results = self._filtered_choices()
        if not results:
            return

        label, value = results[self.selected_index]
        if self.field == "option":
            self.current_selection.option = value
        elif self.field == "size":
            self.current_selection.size = value
        elif self.field == "flavor":
            self.current_selection.flavor_name = value
        else:
            self.current_selection.topping_name = value
        logger.debug("picked field={} value={!r}", self.field, label)

        self.input_state = "normal"
        self.search_query = ""
        self.selected_index = 0
        self._refresh_all()

    def action_backspace_query(self) -> None:
        if self._modal_open():
            return
        if self.input_state != "active":
            return

        if not self.search_query:
            return
        self.search_query = self.search_query[:-1]
        self.selected_index = 0
        self._refresh_search()

    def action_add_to_order(self) -> None:
        if self._modal_open():
            return
        if self.input_state != "normal":
            return

        try:
            order = add_to_order(self.history, self.current_selection)
        except OrderValidationError as exc:
            self.system_status = "Item not added"
            self._refresh_search()
            self.push_screen(MessageModal("Invalid selection", exc.message, is_error=True))
            return

        self.order_selected_index = len(self.history) - 1
        self.system_status = f"Added order #{order.number}"
        self._refresh_all()
        item = order.items[-1]
        self.push_screen(
            MessageModal(
                "Added to order",
                f"Order #{order.number}: {item.details()}\nOrder total: {format_money(order.total_cost())}",
            )
        )

    def action_place_order(self) -> None:
        logger.debug("place_enter state={!r} orders={}", self.input_state, len(self.history))
        if self._modal_open():
            return
        if self.input_state != "normal":
            self.system_status = "Place order only in NORMAL mode (Esc to exit active)"
            self._refresh_search()
            return

        try:
            receipt = place_order(self.history)
        except OrderValidationError as exc:
            self.system_status = "Nothing to place"
            self._refresh_search()
            self.push_screen(MessageModal("Cannot place order", exc.message, is_error=True))
            return

        try:
            log_file = append_receipt(receipt, self.receipt_log_path, clock=self.order_clock)
        except ReceiptLogError as exc:
            self.system_status = "Receipt shown but not saved"
            self._refresh_search()
            self.push_screen(ReceiptModal("Receipt", receipt, status=f"Not saved: {exc}"))
            self.push_screen(MessageModal("Receipt not saved", str(exc), is_error=True))
            return

        self.system_status = f"Receipt saved to {log_file}"
        self._refresh_search()
        self.push_screen(ReceiptModal("Receipt", receipt, status=f"Saved to {log_file}"))

    def _choices(self) -> list[tuple[str, Any]]:
        if self.field == "option":
            return [(display_name_for_option(option), option) for option in SERVING_OPTIONS]
        if self.field == "size":
            return [(display_name_for_size(size), size) for size in SIZES]
        if self.field == "flavor":
            return [(name, name) for name in FLAVORS]
        choices: list[tuple[str, Any]] = [(NO_TOPPING_LABEL, None)]
        choices.extend((f"{name} (+{format_money(topping.price)})", name) for name, topping in TOPPINGS.items())
        return choices

    def _filtered_choices(self) -> list[tuple[str, Any]]:
        source = self._choices()
        if not self.search_query:
            return source
        q = self.search_query.lower()
        return [choice for choice in source if q in choice[0].lower()]

    def _refresh_all(self) -> None:
        self._refresh_orders()
        self._refresh_form()
        self._refresh_search()

    def _move_order_selection(self, delta: int) -> None:
        if not len(self.history):
            return

        if self.order_selected_index is None:
            self.order_selected_index = 0 if delta > 0 else len(self.history) - 1
        else:
            self.order_selected_index = (self.order_selected_index + delta) % len(self.history)
        self._refresh_orders()

    def _selected_order(self) -> Order | None:
        if self.order_selected_index is None:
            return None
        orders = self.history.orders
        if not (0 <= self.order_selected_index < len(orders)):
            return None
        return orders[self.order_selected_index]

    def _open_receipt_for_selected_order(self) -> None:
        order = self._selected_order()
        if order is None:
            return
        self.push_screen(ReceiptModal(f"Order #{order.number}", order.receipt_details()))

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            half = rows // 2
            start = selected - half
            start = max(0, start)
            start = min(start, total - rows)

        return (start, start + rows)

    def _refresh_orders(self) -> None:
        try:
            orders_widget = self.query_one("#orders-list", Static)
        except NoMatches:
            return
        orders = self.history.orders
        if not orders:
            self.order_selected_index = None
            orders_widget.update("(no orders yet)")
            return

        if self.order_selected_index is not None and self.order_selected_index >= len(orders):
            self.order_selected_index = len(orders) - 1

        visible_rows = self._visible_rows(orders_widget)
        start, end = self._window_bounds(len(orders), visible_rows, self.order_selected_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")

            pointer = "➤ " if idx == self.order_selected_index else "  "
            lines.append(pointer)
            lines.append_text(format_order_label(orders[idx]))

        if end < len(orders):
            lines.append("\n⋮", style="dim")

        orders_widget.update(lines)

    def _refresh_form(self) -> None:
        try:
            form_widget = self.query_one("#selection-form", Static)
        except NoMatches:
            return
        form_widget.update(format_selection_summary(self.current_selection))

    def _refresh_search(self) -> None:
        self._refresh_search_bar()
        if self.input_state == "normal":
            self._refresh_results([])
            return
        self._refresh_results(self._filtered_choices())

    def _refresh_search_bar(self) -> None:
        try:
            bar = self.query_one("#search-bar", Static)
        except NoMatches:
            return
        if self.input_state == "normal":
            status = self.system_status or "Ready"
            bar.update(Text(f"O/S/F/T choose, A add, P place order, J/K/V orders.\n{status}"))
            return

        text = Text()
        text.append(FIELD_TITLES[self.field], style="bold")
        text.append(f": {self.search_query}")
        bar.update(text)

    def _refresh_results(self, results: list[tuple[str, Any]]) -> None:
        try:
            results_widget = self.query_one("#results", Static)
        except NoMatches:
            return
        if self.input_state == "normal":
            results_widget.update("")
            return

        if not results:
            results_widget.update("No results")
            return

        if self.selected_index >= len(results):
            self.selected_index = 0

        visible_rows = self._visible_rows(results_widget)
        start, end = self._window_bounds(len(results), visible_rows, self.selected_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            pointer = "➤ " if idx == self.selected_index else "  "
            lines.append(f"{pointer}{results[idx][0]}")

        if end < len(results):
            lines.append("\n⋮", style="dim")

        results_widget.update(lines)
