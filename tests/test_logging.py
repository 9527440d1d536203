"""Tests for the loguru sink configuration."""

import sys

from loguru import logger

from parlor.logging import setup_logging


def test_setup_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "logs" / "parlor.log"
    try:
        setup_logging(level="INFO", log_path=log_file)
        logger.debug("hidden message")
        logger.info("order_added number=1")
    finally:
        logger.remove()
        logger.add(sys.stderr)

    content = log_file.read_text(encoding="utf-8")
    assert "order_added number=1" in content
    assert "hidden message" not in content
