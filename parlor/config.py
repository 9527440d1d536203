"""Runtime configuration defaults for pricing, receipts and logging."""

from __future__ import annotations

import os
from pathlib import Path

BASE_PRICE = 5.0
SERVICE_CHARGE_RATE = 0.05
CURRENCY_SYMBOL = "$"

ORDER_DATE_FORMAT = "%d-%m-%Y %H:%M:%S"

RECEIPT_LOG_PATH = "order_receipts.txt"
RECEIPT_RULE_WIDTH = 72

DEBUG_LOG_PATH = "/tmp/parlor-debug.log"
DEBUG_LOG_LEVEL = "DEBUG"

_RECEIPT_LOG_OVERRIDE_ENV = "PARLOR_RECEIPT_LOG_PATH"


def resolve_receipt_log_path() -> Path:
    """
    Resolve where placed receipts are appended.

    Resolution order:
    1. PARLOR_RECEIPT_LOG_PATH (if set)
    2. RECEIPT_LOG_PATH, relative to the working directory
    """
    env_override = os.environ.get(_RECEIPT_LOG_OVERRIDE_ENV, "").strip()
    if env_override:
        return Path(env_override)
    return Path(RECEIPT_LOG_PATH)
