"""Receipt viewer modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Static


class ReceiptModal(ModalScreen[None]):
    """Centered, scrollable modal showing a rendered receipt."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("enter", "close", "Close"),
        ("ctrl+c", "close", "Close"),
        ("j", "scroll_receipt(1)", "Down"),
        ("k", "scroll_receipt(-1)", "Up"),
        ("down", "scroll_receipt(1)", "Down"),
        ("up", "scroll_receipt(-1)", "Up"),
    ]

    CSS = """
    ReceiptModal {
        align: center middle;
        background: $background 60%;
    }

    #receipt-dialog {
        width: 90%;
        height: 80%;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #receipt-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #receipt-scroll {
        height: 1fr;
    }

    #receipt-body {
        color: white;
        width: auto;
    }

    #receipt-status {
        margin-top: 1;
        color: #dddddd;
    }
    """

    def __init__(self, title: str, receipt: str, status: str = "") -> None:
        super().__init__()
        self.title_text = title
        self.receipt_text = receipt
        self.status_text = status

    def compose(self) -> ComposeResult:
        with Container(id="receipt-dialog"):
            yield Static(Text(self.title_text), id="receipt-title")
            with VerticalScroll(id="receipt-scroll"):
                yield Static(Text(self.receipt_text, no_wrap=True), id="receipt-body")
            yield Static(id="receipt-status")

    def on_mount(self) -> None:
        status = Text()
        if self.status_text:
            status.append(self.status_text)
            status.append("\n")
        status.append("J/K/↑/↓ scroll, Enter/Esc/q close")
        self.query_one("#receipt-status", Static).update(status)

    def action_scroll_receipt(self, delta: int) -> None:
        self.query_one("#receipt-scroll", VerticalScroll).scroll_relative(y=delta, animate=False)

    def action_close(self) -> None:
        self.dismiss()
