# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Pydantic schemas for caller-supplied request options."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WebhookFormat(str, Enum):
    """Payload formats the service can post to a webhook.

    Attributes:
        JSON: JSON body (default).
        XML: XML body.
    """

    JSON = "json"
    XML = "xml"


class CreateMailboxOptions(BaseModel):
    """Options for creating a mailbox.

    Attributes:
        domain: Preferred mailbox domain, if the service offers several.
        webhook_url: URL the service calls when a message arrives.
        webhook_format: Payload format for the webhook. Defaults to ``json``
            when a webhook URL is given.
    """

    model_config = ConfigDict(extra="forbid")

    domain: Annotated[
        str | None,
        Field(default=None, description="Preferred mailbox domain")
    ]
    webhook_url: Annotated[
        str | None,
        Field(default=None, description="Webhook notified on new messages")
    ]
    webhook_format: Annotated[
        WebhookFormat | None,
        Field(default=None, description="Webhook payload format")
    ]

    @field_validator("webhook_url")
    @classmethod
    def webhook_url_is_http(cls, v: str | None) -> str | None:
        """Validate that the webhook URL is absolute http(s)."""
        if v is not None and not v.startswith(("http://", "https://")):
            raise ValueError("webhook_url must start with http:// or https://")
        return v

    @field_validator("webhook_format")
    @classmethod
    def format_requires_url(cls, v: WebhookFormat | None, info) -> WebhookFormat | None:
        """Validate that a format is only given together with a webhook URL."""
        if v is not None and not info.data.get("webhook_url"):
            raise ValueError("webhook_format requires webhook_url")
        return v

    def to_query(self) -> dict[str, Any]:
        """Build the query parameters for ``POST /mailbox``."""
        params: dict[str, Any] = {}
        if self.webhook_url:
            params["webhookUrl"] = self.webhook_url
            params["webhookFormat"] = (self.webhook_format or WebhookFormat.JSON).value
        if self.domain:
            params["domain"] = self.domain
        return params


__all__ = ["CreateMailboxOptions", "WebhookFormat"]
