"""Loguru logging configuration for the API and the CLI.

Records go to stderr in a readable line format. A record bound with
``json_output=True`` (the feed import summary, for one) is written as a
serialized JSON object instead, so its bound counts stay machine-readable.
When ``log_dir`` is set every record is also kept in a rotating file.
"""

import sys
from pathlib import Path

from loguru import logger

LOG_FILE_NAME = "voter-info.log"

_LINE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} | {message}"


def _wants_json(record: dict) -> bool:
    return bool(record["extra"].get("json_output", False))


def _wants_text(record: dict) -> bool:
    return not _wants_json(record)


def setup_logging(log_level: str = "INFO", log_dir: str | None = None) -> None:
    """Replace any existing Loguru sinks with the voter-info ones.

    Args:
        log_level: Minimum level, case-insensitive.
        log_dir: Directory for ``voter-info.log``. Rotated daily and kept
            for a week. Created if missing.
    """
    level = log_level.upper()
    logger.remove()
    logger.add(sys.stderr, level=level, format=_LINE_FORMAT, filter=_wants_text)
    logger.add(sys.stderr, level=level, serialize=True, filter=_wants_json)

    if not log_dir:
        return

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_path / LOG_FILE_NAME,
        level=level,
        format=_LINE_FORMAT,
        rotation="24h",
        retention="7 days",
        encoding="utf-8",
    )
