# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Python client for the tempy.email temporary mailbox service.

Usage:
    >>> from tempy_email import TempyEmailClient
    >>> client = TempyEmailClient()
    >>> mailbox = await client.create_mailbox()
    >>> mailbox.address
    'k3v9x2@tempy.email'
    >>> email = await mailbox.wait_for_email(subject="Welcome", timeout_ms=60_000)

Example:
    A sign-up test::

        client = TempyEmailClient(config=load_client_config())
        mailbox = await client.create_mailbox()
        await signup_page.register(mailbox.address)
        code = await mailbox.wait_for_otp(sender="noreply@example.com")
        await signup_page.confirm(code)
        await mailbox.delete()
"""

from __future__ import annotations

from dataclasses import replace

from .config import ClientConfig
from .logger import get_logger
from .mailbox import Mailbox
from .models import CreatedMailbox, MailboxStatus
from .schemas import CreateMailboxOptions
from .transport import ApiTransport

logger = get_logger(__name__)


class TempyEmailClient:
    """Entry point for creating and looking up mailboxes.

    Attributes:
        config: Settings handed to every mailbox created by this client.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout_ms: float | None = None,
        config: ClientConfig | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: API root URL. Overrides ``config.base_url``.
            timeout_ms: Default wait deadline. Overrides ``config.timeout_ms``.
            config: Full settings; defaults to ``ClientConfig()``.
        """
        config = config or ClientConfig()
        if base_url is not None:
            config = replace(config, base_url=base_url.rstrip("/"))
        if timeout_ms is not None:
            config = replace(config, timeout_ms=timeout_ms)
        self.config = config
        self._transport = ApiTransport(config.base_url, config.request_timeout)

    @property
    def base_url(self) -> str:
        return self._transport.base_url

    @property
    def timeout_ms(self) -> float:
        return self.config.timeout_ms

    async def create_mailbox(
        self,
        domain: str | None = None,
        webhook_url: str | None = None,
        webhook_format: str | None = None,
    ) -> Mailbox:
        """Create a new temporary mailbox.

        Args:
            domain: Preferred domain for the address.
            webhook_url: URL the service posts to when a message arrives.
            webhook_format: ``json`` (default) or ``xml``.

        Returns:
            The new mailbox.

        Raises:
            pydantic.ValidationError: If the options are inconsistent.
            ApiError: If the service refuses to create the mailbox.
        """
        options = CreateMailboxOptions(
            domain=domain,
            webhook_url=webhook_url,
            webhook_format=webhook_format,
        )
        data = await self._transport.post(
            "/mailbox",
            action="create mailbox",
            params=options.to_query() or None,
        )
        created = CreatedMailbox.from_dict(data)
        logger.info(f"Created mailbox {created.email} (expires {created.expires_at})")
        return self._mailbox(created.email, created.expires_at, created.webhook_url)

    async def get_mailbox(self, address: str) -> Mailbox:
        """Look up an existing mailbox by address.

        Raises:
            ApiError: If the mailbox does not exist or the request fails.
        """
        data = await self._transport.get(f"/mailbox/{address}", action="get mailbox")
        status = MailboxStatus.from_dict(data)
        return self._mailbox(status.email, status.expires_at, status.webhook_url)

    def _mailbox(self, address, expires_at, webhook_url) -> Mailbox:
        return Mailbox(
            address,
            expires_at,
            webhook_url,
            transport=self._transport,
            config=self.config,
        )

    def __repr__(self) -> str:
        return f"<TempyEmailClient '{self.base_url}'>"


__all__ = ["TempyEmailClient"]
