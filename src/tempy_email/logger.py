# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Logging utilities for the tempy.email client.

The library only hands out named loggers. Handlers, levels and formats are
the responsibility of the application (or test run) using the client, which
typically calls ``logging.basicConfig()`` once at startup.

Example:
    Typical usage in a module::

        from tempy_email.logger import get_logger

        logger = get_logger(__name__)
        logger.debug("Polling mailbox")
"""

import logging


def get_logger(name: str = "tempy_email") -> logging.Logger:
    """Retrieve a logger instance.

    Args:
        name: The logger name. Defaults to "tempy_email".

    Returns:
        A ``logging.Logger`` instance bound to the given name.
    """
    return logging.getLogger(name)
