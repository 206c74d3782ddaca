# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Client configuration.

Settings are layered: built-in defaults, then environment variables, then the
``[tempy]`` section of an INI file.

Example:
    Configuration file format (config.ini)::

        [tempy]
        base_url = https://tempy.email/api/v1
        timeout_ms = 60000
        poll_interval_ms = 500
        max_poll_interval_ms = 4000
        request_timeout = 15

    Loading it::

        config = load_client_config("config.ini")
        client = TempyEmailClient(config=config)
"""

from __future__ import annotations

import configparser
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .logger import get_logger

DEFAULT_BASE_URL = "https://tempy.email/api/v1"

logger = get_logger(__name__)


@dataclass
class ClientConfig:
    """Settings shared by a client and the mailboxes it returns."""

    base_url: str = DEFAULT_BASE_URL
    """Root URL of the tempy.email REST API."""

    timeout_ms: float = 30_000
    """Default deadline for the wait operations."""

    poll_interval_ms: float = 1_000
    """Delay between the first two message fetches."""

    max_poll_interval_ms: float = 5_000
    """Ceiling for the growing delay between fetches."""

    request_timeout: float = 30.0
    """Timeout in seconds for a single HTTP request."""


_SETTINGS: dict[str, tuple[str, Any]] = {
    "base_url": ("TEMPY_BASE_URL", str),
    "timeout_ms": ("TEMPY_TIMEOUT_MS", float),
    "poll_interval_ms": ("TEMPY_POLL_INTERVAL_MS", float),
    "max_poll_interval_ms": ("TEMPY_MAX_POLL_INTERVAL_MS", float),
    "request_timeout": ("TEMPY_REQUEST_TIMEOUT", float),
}


def load_client_config(config_path: str | None = None) -> ClientConfig:
    """Load client settings from the environment and an optional INI file.

    Priority: config file > environment variables > defaults.

    Environment variables:
        TEMPY_CONFIG: Path to the config file when ``config_path`` is omitted
        TEMPY_BASE_URL: API root URL
        TEMPY_TIMEOUT_MS: Default wait deadline in milliseconds
        TEMPY_POLL_INTERVAL_MS: Initial poll interval in milliseconds
        TEMPY_MAX_POLL_INTERVAL_MS: Poll interval ceiling in milliseconds
        TEMPY_REQUEST_TIMEOUT: HTTP request timeout in seconds

    Args:
        config_path: Optional path to config.ini file

    Returns:
        ClientConfig with parsed settings. Unparseable values are logged and
        the value from the previous layer is kept.
    """
    defaults = ClientConfig()
    values: dict[str, Any] = {key: getattr(defaults, key) for key in _SETTINGS}

    for key, (env_var, type_fn) in _SETTINGS.items():
        env_value = os.environ.get(env_var)
        if env_value is None:
            continue
        try:
            values[key] = type_fn(env_value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid value for {env_var}, using default")

    config_path = config_path or os.environ.get("TEMPY_CONFIG")
    if config_path and Path(config_path).exists():
        parser = configparser.ConfigParser()
        parser.read(config_path)

        if parser.has_section("tempy"):
            for key, (_, type_fn) in _SETTINGS.items():
                raw = parser.get("tempy", key, fallback=None)
                if raw is None or not raw.strip():
                    continue
                try:
                    values[key] = type_fn(raw.strip())
                except (ValueError, TypeError):
                    logger.warning(f"Invalid value for [tempy] {key} in {config_path}, ignoring")

    return ClientConfig(**values)


__all__ = ["ClientConfig", "DEFAULT_BASE_URL", "load_client_config"]
