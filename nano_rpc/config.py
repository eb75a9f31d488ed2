"""
Configuration helpers for the Nano RPC client.

This module centralizes endpoint selection, default timeouts, logging options
and the node-error policy. Defaults come from the environment so a deployment
can point the client at another node without code changes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

# Default connection settings
DEFAULT_BASE_URL = os.getenv("NANO_RPC_URL", "http://localhost:7076")
DEFAULT_TIMEOUT_SECONDS = 10.0


def _load_timeout() -> float:
    raw_timeout = os.getenv("NANO_RPC_TIMEOUT")
    if raw_timeout:
        try:
            return float(raw_timeout)
        except ValueError:
            return DEFAULT_TIMEOUT_SECONDS
    return DEFAULT_TIMEOUT_SECONDS


def _load_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


DEFAULT_TIMEOUT = _load_timeout()
RAISE_NODE_ERRORS = _load_bool("NANO_RPC_RAISE_NODE_ERRORS", True)
LOG_LEVEL = os.getenv("NANO_RPC_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("NANO_RPC_LOG_FORMAT", "plain")  # json or plain


@dataclass(frozen=True, slots=True)
class NanoConfig:
    """Runtime configuration for Nano node access."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    # When set, a body such as {"error": "Account not found"} raises NodeError
    # instead of falling through to the shape checks.
    raise_node_errors: bool = RAISE_NODE_ERRORS
    log_level: str = LOG_LEVEL
    log_format: str = LOG_FORMAT

    def with_endpoint(self, base_url: str) -> "NanoConfig":
        """Return a copy of this config that targets another node."""
        return replace(self, base_url=base_url)


default_config = NanoConfig()
