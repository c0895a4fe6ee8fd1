"""
Configuration helpers for the DeSo API client.

This module centralizes base URL selection, the default HTTP timeout and the
logging settings. Every value can be overridden through the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

NODE_URL = "https://node.deso.org/api"

# Default connection settings
DEFAULT_BASE_URL = os.getenv("DESO_BASE_URL", NODE_URL)


def _load_timeout() -> float:
    raw_timeout = os.getenv("DESO_HTTP_TIMEOUT")
    if raw_timeout:
        try:
            return float(raw_timeout)
        except ValueError:
            return 10.0
    return 10.0


DEFAULT_TIMEOUT = _load_timeout()

LOG_LEVEL = os.getenv("DESO_API_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("DESO_API_LOG_FORMAT", "plain")  # json or plain


@dataclass(slots=True, frozen=True)
class DesoConfig:
    """Runtime configuration for DeSo node access."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = LOG_LEVEL
    log_format: str = LOG_FORMAT


default_config = DesoConfig()
