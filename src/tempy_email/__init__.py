# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Temporary mailboxes for end-to-end tests, backed by tempy.email.

Features:
    - Create and look up disposable mailboxes
    - Wait for a message filtered by subject and sender (substring or regex)
    - Read one-time codes and verification links out of received messages
    - Polling with a fixed deadline and exponential backoff

Example::

    from tempy_email import TempyEmailClient

    client = TempyEmailClient()
    mailbox = await client.create_mailbox()
    code = await mailbox.wait_for_otp(sender="noreply@example.com")
"""

from .client import TempyEmailClient
from .config import ClientConfig, load_client_config
from .errors import (
    ApiError,
    ExtractionError,
    PollingTimeoutError,
    SourceError,
    TempyEmailError,
)
from .mailbox import Mailbox
from .matchers import Pattern, Substring
from .models import CreatedMailbox, Email, MailboxStatus
from .polling import NOT_FOUND, Found, PollConfig, poll_until, wait
from .waiting import wait_for_code, wait_for_link, wait_for_message

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "ClientConfig",
    "CreatedMailbox",
    "Email",
    "ExtractionError",
    "Found",
    "Mailbox",
    "MailboxStatus",
    "NOT_FOUND",
    "Pattern",
    "PollConfig",
    "PollingTimeoutError",
    "SourceError",
    "Substring",
    "TempyEmailClient",
    "TempyEmailError",
    "load_client_config",
    "poll_until",
    "wait",
    "wait_for_code",
    "wait_for_link",
    "wait_for_message",
]
