"""Entry point for the ice-cream parlor Textual app."""

from __future__ import annotations

from parlor.logging import setup_logging
from parlor.receipt_app import ParlorApp


def main() -> None:
    """Run the Textual application."""
    setup_logging()
    ParlorApp().run()


if __name__ == "__main__":
    main()
