"""Confirmation and error message modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static


class MessageModal(ModalScreen[None]):
    """Show a short confirmation or error message until dismissed."""

    CSS = """
    MessageModal {
        align: center middle;
        background: $background 60%;
    }

    #message-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #message-dialog.error {
        border: round #ffb3b3;
    }

    #message-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #message-body {
        color: white;
        margin-bottom: 1;
    }

    #message-help {
        color: #dddddd;
    }
    """

    def __init__(self, title: str, message: str, is_error: bool = False) -> None:
        super().__init__()
        self.title_text = title
        self.message_text = message
        self.is_error = is_error

    def compose(self) -> ComposeResult:
        with Container(id="message-dialog", classes="error" if self.is_error else ""):
            yield Static(Text(self.title_text), id="message-title")
            yield Static(Text(self.message_text), id="message-body")
            yield Static("Enter/Esc/q to close", id="message-help")

    def on_key(self, event: Key) -> None:
        if event.key in {"enter", "escape", "q", "ctrl+c"}:
            self.dismiss(None)
            event.stop()
