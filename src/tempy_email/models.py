# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Records returned by the tempy.email API.

The service speaks camelCase JSON; each record exposes a ``from_dict``
constructor that maps the payload onto snake_case attributes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO-8601 timestamp from the API into an aware datetime.

    Trailing ``Z`` is accepted; naive values are taken as UTC.
    """
    if not value:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(frozen=True)
class Email:
    """A message received by (or sent from) a temporary mailbox.

    Attributes:
        id: Message identifier within the mailbox.
        from_addr: Sender address.
        to: Recipient address.
        subject: Subject line.
        body_text: Plain-text body.
        body_html: HTML body, when the message has one.
        received_at: ISO timestamp of reception.
        message_id: RFC 5322 Message-ID header, when known.
        direction: ``inbound`` or ``outbound``.
        is_read: Whether the message was marked as read.
        allow_reply: Whether the service allows replying to it.
    """

    id: str
    from_addr: str = ""
    to: str = ""
    subject: str = ""
    body_text: str = ""
    body_html: str | None = None
    received_at: str | None = None
    message_id: str | None = None
    direction: str = "inbound"
    is_read: bool = False
    allow_reply: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Email:
        """Create an Email from an API response dictionary."""
        return cls(
            id=str(data["id"]),
            from_addr=data.get("from") or "",
            to=data.get("to") or "",
            subject=data.get("subject") or "",
            body_text=data.get("bodyText") or "",
            body_html=data.get("bodyHtml"),
            received_at=data.get("receivedAt"),
            message_id=data.get("messageId"),
            direction=data.get("direction", "inbound"),
            is_read=bool(data.get("isRead", False)),
            allow_reply=bool(data.get("allowReply", False)),
        )

    def __repr__(self) -> str:
        return f"Email(id='{self.id}', from='{self.from_addr}', subject='{self.subject[:30]}')"


@dataclass(frozen=True)
class MailboxStatus:
    """Lifetime and webhook settings of a mailbox."""

    email: str
    created_at: datetime | None = None
    expires_at: datetime | None = None
    seconds_remaining: int = 0
    is_expired: bool = False
    webhook_url: str | None = None
    webhook_format: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MailboxStatus:
        return cls(
            email=data["email"],
            created_at=parse_timestamp(data.get("createdAt")),
            expires_at=parse_timestamp(data.get("expiresAt")),
            seconds_remaining=int(data.get("secondsRemaining") or 0),
            is_expired=bool(data.get("isExpired", False)),
            webhook_url=data.get("webhookUrl"),
            webhook_format=data.get("webhookFormat"),
        )


@dataclass(frozen=True)
class CreatedMailbox:
    """Payload returned when a mailbox is created."""

    email: str
    expires_at: datetime | None = None
    web_url: str | None = None
    seconds_remaining: int = 0
    webhook_url: str | None = None
    webhook_format: str | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CreatedMailbox:
        return cls(
            email=data["email"],
            expires_at=parse_timestamp(data.get("expiresAt")),
            web_url=data.get("webUrl"),
            seconds_remaining=int(data.get("secondsRemaining") or 0),
            webhook_url=data.get("webhookUrl"),
            webhook_format=data.get("webhookFormat"),
            raw=data,
        )


__all__ = ["CreatedMailbox", "Email", "MailboxStatus", "parse_timestamp"]
