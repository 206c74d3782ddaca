# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""A temporary mailbox and the operations a test needs on it.

Usage:
    >>> mailbox = await client.create_mailbox()
    >>> mailbox.address
    'k3v9x2@tempy.email'
    >>> code = await mailbox.wait_for_otp(sender="noreply@example.com")
    >>> link = await mailbox.wait_for_link(pattern=r"/verify")
    >>> await mailbox.delete()
"""

from __future__ import annotations

import math
import re
import time
from collections.abc import Iterable
from datetime import datetime

from .config import ClientConfig
from .errors import SourceError
from .logger import get_logger
from .matchers import MatcherLike
from .models import Email, MailboxStatus, parse_timestamp
from .transport import ApiTransport
from .waiting import wait_for_code, wait_for_link, wait_for_message

logger = get_logger(__name__)


class Mailbox:
    """A disposable inbox identified by its address.

    The mailbox lifetime is managed by the service; ``expires_at`` is the
    instant the service will drop it.

    Attributes:
        address: Email address of the mailbox.
        expires_at: Expiry instant (timezone aware).
        webhook_url: Webhook registered at creation, if any.
    """

    def __init__(
        self,
        address: str,
        expires_at: datetime | str | None,
        webhook_url: str | None = None,
        transport: ApiTransport | None = None,
        config: ClientConfig | None = None,
    ):
        self.address = address
        if isinstance(expires_at, str):
            expires_at = parse_timestamp(expires_at)
        self.expires_at = expires_at
        self.webhook_url = webhook_url
        self.config = config or ClientConfig()
        self._transport = transport or ApiTransport(
            self.config.base_url, self.config.request_timeout
        )

    @property
    def _path(self) -> str:
        return f"/mailbox/{self.address}"

    async def get_messages(self) -> list[Email]:
        """Fetch every message currently in the mailbox.

        Raises:
            ApiError: If the service refuses the request.
            SourceError: If the service cannot be reached or the answer is
                not a mailbox object.
        """
        data = await self._transport.get(self._path, action="get messages")
        if data is None:
            return []
        if not isinstance(data, dict):
            raise SourceError(f"Failed to get messages: unexpected response {type(data).__name__}")
        return [Email.from_dict(item) for item in data.get("emails") or []]

    async def wait_for_email(
        self,
        subject: MatcherLike = None,
        sender: MatcherLike = None,
        timeout_ms: float | None = None,
        poll_interval_ms: float | None = None,
    ) -> Email:
        """Wait for a message matching ``subject`` and ``sender``.

        Both filters accept a substring or a compiled regular expression.

        Raises:
            PollingTimeoutError: If no matching message arrives in time.
        """
        return await wait_for_message(
            self.get_messages,
            subject=subject,
            sender=sender,
            timeout_ms=self._timeout(timeout_ms),
            poll_interval_ms=self._interval(poll_interval_ms),
            max_interval_ms=self.config.max_poll_interval_ms,
        )

    async def wait_for_otp(
        self,
        pattern: str | re.Pattern[str] | None = None,
        sender: MatcherLike = None,
        timeout_ms: float | None = None,
    ) -> str:
        """Wait for a message and return the one-time code it contains.

        Raises:
            PollingTimeoutError: If no message arrives in time.
            ExtractionError: If the message contains no code.
        """
        return await wait_for_code(
            self.get_messages,
            sender=sender,
            pattern=pattern,
            timeout_ms=self._timeout(timeout_ms),
            poll_interval_ms=self.config.poll_interval_ms,
            max_interval_ms=self.config.max_poll_interval_ms,
        )

    async def wait_for_link(
        self,
        pattern: str | re.Pattern[str] | None = None,
        sender: MatcherLike = None,
        timeout_ms: float | None = None,
    ) -> str:
        """Wait for a message and return its verification link.

        Raises:
            PollingTimeoutError: If no message arrives in time.
            ExtractionError: If the message contains no matching link.
        """
        return await wait_for_link(
            self.get_messages,
            sender=sender,
            pattern=pattern,
            timeout_ms=self._timeout(timeout_ms),
            poll_interval_ms=self.config.poll_interval_ms,
            max_interval_ms=self.config.max_poll_interval_ms,
        )

    async def mark_as_read(self, email_ids: Iterable[str]) -> None:
        """Mark messages as read, one request per message, stopping at the first failure."""
        for email_id in email_ids:
            await self._transport.patch(
                f"{self._path}/{email_id}",
                action="mark email as read",
                payload={"isRead": True},
            )

    async def delete(self) -> None:
        """Delete the mailbox on the service."""
        await self._transport.delete(self._path, action="delete mailbox")
        logger.info(f"Deleted mailbox {self.address}")

    async def get_status(self) -> MailboxStatus:
        data = await self._transport.get(self._path, action="get mailbox status")
        return MailboxStatus.from_dict(data)

    def is_expired(self) -> bool:
        """Check whether the expiry instant has passed."""
        if self.expires_at is None:
            return False
        return time.time() > self.expires_at.timestamp()

    def seconds_remaining(self) -> int:
        """Whole seconds left before expiry, never negative."""
        if self.expires_at is None:
            return 0
        remaining = math.floor(self.expires_at.timestamp() - time.time())
        return max(0, remaining)

    def _timeout(self, timeout_ms: float | None) -> float:
        return self.config.timeout_ms if timeout_ms is None else timeout_ms

    def _interval(self, poll_interval_ms: float | None) -> float:
        return self.config.poll_interval_ms if poll_interval_ms is None else poll_interval_ms

    def __repr__(self) -> str:
        return f"Mailbox(address='{self.address}', expires_at={self.expires_at})"


__all__ = ["Mailbox"]
