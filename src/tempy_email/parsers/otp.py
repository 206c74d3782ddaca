# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""One-time code extraction.

``extract_otp`` tries several shapes in a fixed order and returns the first
hit: six digits, then 4-8 digits, then a six character mix of letters and
digits, then a UUID. The order is part of the behaviour callers rely on.
"""

from __future__ import annotations

import re

_SIX_DIGITS = re.compile(r"\b([0-9]{6})\b")
_UUID = re.compile(
    r"\b[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}\b",
    re.IGNORECASE,
)


def extract_6_digit_otp(text: str) -> str | None:
    """Return the first standalone 6-digit number in ``text``."""
    match = _SIX_DIGITS.search(text)
    return match.group(1) if match else None


def extract_numeric_otp(text: str, min_length: int = 4, max_length: int = 8) -> str | None:
    """Return the first standalone number with ``min_length`` to ``max_length`` digits."""
    match = re.search(rf"\b([0-9]{{{min_length},{max_length}}})\b", text)
    return match.group(1) if match else None


def extract_alphanumeric_otp(text: str, length: int = 6) -> str | None:
    """Return the first ``length``-character token mixing letters and digits.

    Words made only of letters and numbers made only of digits are skipped.
    """
    pattern = rf"\b(?=[A-Za-z0-9]*[A-Za-z])(?=[A-Za-z0-9]*[0-9])([A-Za-z0-9]{{{length}}})\b"
    match = re.search(pattern, text)
    return match.group(1) if match else None


def extract_uuid(text: str) -> str | None:
    """Return the first UUID in ``text``."""
    match = _UUID.search(text)
    return match.group(0) if match else None


def extract_by_pattern(text: str, pattern: str | re.Pattern[str]) -> str | None:
    """Return the first match of ``pattern``.

    If the pattern has a capture group and it matched something, the group is
    returned; otherwise the whole match.
    """
    match = re.search(pattern, text)
    if not match:
        return None
    if match.re.groups and match.group(1):
        return match.group(1)
    return match.group(0)


def extract_otp(text: str) -> str | None:
    """Try the common code shapes in order of likelihood."""
    for extractor in (
        extract_6_digit_otp,
        extract_numeric_otp,
        extract_alphanumeric_otp,
        extract_uuid,
    ):
        code = extractor(text)
        if code:
            return code
    return None
