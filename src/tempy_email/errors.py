# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Exceptions raised by the tempy.email client.

Three failure modes are kept apart so a test can tell them from each other:

- ``PollingTimeoutError``: nothing qualifying arrived before the deadline.
- ``SourceError`` (and ``ApiError``): the service could not be reached or
  answered with an error status.
- ``ExtractionError``: a message arrived but no code or link could be read
  from it.
"""

from __future__ import annotations


def _format_ms(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


class TempyEmailError(Exception):
    """Base class for all client errors."""

    code = "tempy_email_error"


class PollingTimeoutError(TempyEmailError, TimeoutError):
    """Raised when a poll loop reaches its deadline without a result."""

    def __init__(self, timeout_ms: float):
        self.timeout_ms = timeout_ms
        super().__init__(f"Polling timeout after {_format_ms(timeout_ms)}ms")
        self.code = "polling_timeout"


class SourceError(TempyEmailError):
    """Raised when the service could not be reached or returned garbage."""

    def __init__(self, message: str):
        super().__init__(message)
        self.code = "source_error"


class ApiError(SourceError):
    """Raised when the service answers with a non-2xx status."""

    def __init__(self, action: str, status: int, reason: str | None = None):
        self.action = action
        self.status = status
        self.reason = reason or ""
        super().__init__(f"Failed to {action}: {status} {self.reason}".rstrip())
        self.code = "api_error"


class ExtractionError(TempyEmailError, ValueError):
    """Raised when a received message holds no code or link."""

    def __init__(self, kind: str, subject: str):
        self.kind = kind
        self.subject = subject
        if kind == "link":
            message = f'No verification link found in email. Subject: "{subject}"'
        else:
            message = f'No OTP code found in email. Subject: "{subject}"'
        super().__init__(message)
        self.code = "extraction_failed"


__all__ = [
    "ApiError",
    "ExtractionError",
    "PollingTimeoutError",
    "SourceError",
    "TempyEmailError",
]
