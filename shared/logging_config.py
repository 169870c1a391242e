"""Root logging configuration for versiondiff callers."""

from __future__ import annotations

import logging

from pythonjsonlogger import json as jsonlogger


def configure_logging(log_level: str, json_output: bool = False) -> None:
    """Configure the root logger.

    JSON output format: {"ts": "...", "level": "...", "name": "...", "msg": "..."}

    Args:
        log_level: Logging level string (e.g., "info", "debug", "warning").
        json_output: Emit structured JSON lines instead of plain text.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    if json_output:
        formatter = jsonlogger.JsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={
                "asctime": "ts",
                "levelname": "level",
                "message": "msg",
            },
        )
    else:
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    # Clear any existing handlers to avoid duplicate output
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
