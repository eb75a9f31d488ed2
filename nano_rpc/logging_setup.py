"""Logging bootstrap for applications and scripts built on the Nano RPC client."""

from __future__ import annotations

import json
import logging

from nano_rpc.config import NanoConfig, default_config

EXTRA_FIELDS = ("action", "error")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
        }
        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        return json.dumps(payload)


def resolve_level(level_name: str) -> int:
    level = getattr(logging, level_name.upper(), logging.INFO)
    if not isinstance(level, int):
        return logging.INFO
    return level


def configure_logging(config: NanoConfig | None = None) -> None:
    """
    Configure root logging from the given config.

    The library itself never calls this; only entry points (scripts, services)
    should decide how records are emitted.
    """
    config = config or default_config
    level = resolve_level(config.log_level)
    if config.log_format.lower() == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logging.basicConfig(level=level, handlers=[handler], force=True)
    else:
        logging.basicConfig(level=level, force=True)
