# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Waiting for a message, a code or a link to show up in a mailbox.

Every function here takes a *message source*: a zero-argument coroutine
function returning the mailbox's full message list (``Mailbox.get_messages``
in practice). On each tick the whole list is fetched again and scanned in
the order the source returns it; the first message passing the subject and
sender filters wins. Timing is delegated to ``poll_until`` with backoff on.

``wait_for_code`` and ``wait_for_link`` run in two phases. The first phase
waits for a message and ends with a message, a ``PollingTimeoutError`` or
whatever the source raised. The second phase reads the code or link out of
that message and raises ``ExtractionError`` when there is none, so "nothing
arrived" and "the wrong thing arrived" stay distinguishable.

Example:
    Reading an OTP sent by a given sender::

        code = await wait_for_code(
            mailbox.get_messages,
            sender="noreply@example.com",
            timeout_ms=60_000,
        )
"""

from __future__ import annotations

import re
from typing import Awaitable, Callable, Iterable, Sequence

from .errors import ExtractionError
from .logger import get_logger
from .matchers import Matcher, MatcherLike, as_matcher
from .models import Email
from .parsers.links import extract_verification_link
from .parsers.otp import extract_by_pattern, extract_otp
from .polling import (
    DEFAULT_INTERVAL_MS,
    DEFAULT_MAX_INTERVAL_MS,
    DEFAULT_TIMEOUT_MS,
    NOT_FOUND,
    Found,
    PollConfig,
    poll_until,
)

MessageSource = Callable[[], Awaitable[Sequence[Email]]]

logger = get_logger(__name__)


def select_message(
    messages: Iterable[Email],
    subject: Matcher | None = None,
    sender: Matcher | None = None,
) -> Email | None:
    """Return the first message whose subject and sender both match.

    A missing matcher accepts every message.
    """
    for message in messages:
        if subject is not None and not subject.matches(message.subject):
            continue
        if sender is not None and not sender.matches(message.from_addr):
            continue
        return message
    return None


async def wait_for_message(
    source: MessageSource,
    *,
    subject: MatcherLike = None,
    sender: MatcherLike = None,
    timeout_ms: float = DEFAULT_TIMEOUT_MS,
    poll_interval_ms: float = DEFAULT_INTERVAL_MS,
    max_interval_ms: float = DEFAULT_MAX_INTERVAL_MS,
) -> Email:
    """Poll ``source`` until a message passes the filters.

    Args:
        source: Coroutine function returning the current message list.
        subject: Substring or compiled pattern the subject must match.
        sender: Substring or compiled pattern the sender must match.
        timeout_ms: Deadline, measured from the first fetch.
        poll_interval_ms: Delay before the second fetch.
        max_interval_ms: Ceiling for the growing delay.

    Returns:
        The first qualifying message.

    Raises:
        PollingTimeoutError: If no qualifying message shows up in time.
        SourceError: If fetching the messages fails (not retried).
    """
    subject_matcher = as_matcher(subject)
    sender_matcher = as_matcher(sender)
    config = PollConfig(
        timeout_ms=timeout_ms,
        interval_ms=poll_interval_ms,
        max_interval_ms=max_interval_ms,
        backoff=True,
    )

    async def probe():
        messages = await source()
        message = select_message(messages, subject_matcher, sender_matcher)
        if message is None:
            logger.debug(f"No matching message among {len(messages)}")
            return NOT_FOUND
        return Found(message)

    message = await poll_until(probe, config)
    logger.info(f"Matched message {message.id} from {message.from_addr}")
    return message


async def wait_for_code(
    source: MessageSource,
    *,
    sender: MatcherLike = None,
    pattern: str | re.Pattern[str] | None = None,
    timeout_ms: float = DEFAULT_TIMEOUT_MS,
    poll_interval_ms: float = DEFAULT_INTERVAL_MS,
    max_interval_ms: float = DEFAULT_MAX_INTERVAL_MS,
) -> str:
    """Wait for a message and return the verification code in its text body.

    With ``pattern`` the first match (or its first group) is the code;
    otherwise ``extract_otp`` picks it.

    Raises:
        PollingTimeoutError: If no message from ``sender`` arrives in time.
        ExtractionError: If the message holds no code.
    """
    message = await wait_for_message(
        source,
        sender=sender,
        timeout_ms=timeout_ms,
        poll_interval_ms=poll_interval_ms,
        max_interval_ms=max_interval_ms,
    )
    if pattern is not None:
        code = extract_by_pattern(message.body_text, pattern)
    else:
        code = extract_otp(message.body_text)
    if not code:
        logger.warning(f"No code in message {message.id} ({message.subject!r})")
        raise ExtractionError("code", message.subject)
    return code


async def wait_for_link(
    source: MessageSource,
    *,
    sender: MatcherLike = None,
    pattern: str | re.Pattern[str] | None = None,
    timeout_ms: float = DEFAULT_TIMEOUT_MS,
    poll_interval_ms: float = DEFAULT_INTERVAL_MS,
    max_interval_ms: float = DEFAULT_MAX_INTERVAL_MS,
) -> str:
    """Wait for a message and return the verification link it carries.

    The HTML body is searched when present, the text body otherwise.

    Raises:
        PollingTimeoutError: If no message from ``sender`` arrives in time.
        ExtractionError: If the message holds no matching link.
    """
    message = await wait_for_message(
        source,
        sender=sender,
        timeout_ms=timeout_ms,
        poll_interval_ms=poll_interval_ms,
        max_interval_ms=max_interval_ms,
    )
    body = message.body_html or message.body_text
    link = extract_verification_link(body, pattern)
    if not link:
        logger.warning(f"No link in message {message.id} ({message.subject!r})")
        raise ExtractionError("link", message.subject)
    return link


__all__ = [
    "MessageSource",
    "select_message",
    "wait_for_code",
    "wait_for_link",
    "wait_for_message",
]
