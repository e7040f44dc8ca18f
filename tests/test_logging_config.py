from __future__ import annotations

import json
from pathlib import Path

from loguru import logger

from core.logging_config import setup_logging


def test_json_logging_writes_one_object_per_line(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "service.log"
    setup_logging(level="DEBUG", json_format=True, log_file=log_file)
    try:
        logger.info("Created bucket {bucket}", bucket="odd{name}")
        logger.debug("second line")
    finally:
        logger.remove()

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    first = json.loads(lines[0])
    assert first["level"] == "INFO"
    assert first["message"] == "Created bucket odd{name}"
    assert first["bucket"] == "odd{name}"
    assert json.loads(lines[1])["level"] == "DEBUG"


def test_level_filters_records(tmp_path: Path) -> None:
    log_file = tmp_path / "service.log"
    setup_logging(level="WARNING", log_file=log_file)
    try:
        logger.info("hidden")
        logger.warning("shown")
    finally:
        logger.remove()

    text = log_file.read_text(encoding="utf-8")
    assert "shown" in text
    assert "hidden" not in text
