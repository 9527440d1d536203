"""Append placed receipts to a local text file."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from loguru import logger

from parlor.config import ORDER_DATE_FORMAT, RECEIPT_RULE_WIDTH, resolve_receipt_log_path
from parlor.models import Clock


class ReceiptLogError(Exception):
    """The receipt could not be written; the order itself is unaffected."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not write receipt to {path}: {reason}")
        self.path = path


def format_log_entry(receipt: str, generated_at: datetime) -> str:
    """Wrap a receipt in rule lines with a generation timestamp."""
    rule = "=" * RECEIPT_RULE_WIDTH
    return "\n".join(
        [
            rule,
            f"Receipt generated: {generated_at.strftime(ORDER_DATE_FORMAT)}",
            receipt,
            rule,
            "",
            "",
        ]
    )


def append_receipt(receipt: str, path: Path | str | None = None, clock: Clock | None = None) -> Path:
    """Append one receipt entry and return the file it went to."""
    log_file = Path(path) if path is not None else resolve_receipt_log_path()
    now = clock() if clock is not None else datetime.now()
    entry = format_log_entry(receipt, now)

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        with log_file.open("a", encoding="utf-8") as fh:
            fh.write(entry)
    except OSError as exc:
        logger.error("receipt_append_failed path={} error={!r}", log_file, exc)
        raise ReceiptLogError(log_file, exc.strerror or str(exc)) from exc

    logger.info("receipt_appended path={} bytes={}", log_file, len(entry.encode("utf-8")))
    return log_file
