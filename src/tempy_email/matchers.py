# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Predicates over a message's subject or sender.

A matcher is either a plain substring test or a regular expression search.
Callers usually pass a ``str`` or a compiled ``re.Pattern`` and let
``as_matcher`` pick the variant once, before polling starts.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Substring:
    """Matches when ``text`` occurs in the candidate (case-sensitive)."""

    text: str

    def matches(self, candidate: str | None) -> bool:
        return self.text in (candidate or "")


@dataclass(frozen=True)
class Pattern:
    """Matches when ``regex`` finds a match anywhere in the candidate."""

    regex: re.Pattern[str]

    def matches(self, candidate: str | None) -> bool:
        return self.regex.search(candidate or "") is not None


Matcher = Union[Substring, Pattern]
MatcherLike = Union[str, re.Pattern, Substring, Pattern, None]


def as_matcher(value: MatcherLike) -> Matcher | None:
    """Turn a caller-supplied criterion into a matcher.

    Args:
        value: ``None`` (match anything), a substring, a compiled pattern,
            or an existing matcher.

    Returns:
        The matcher, or ``None`` when there is nothing to filter on.

    Raises:
        TypeError: If ``value`` is none of the accepted kinds.
    """
    if value is None:
        return None
    if isinstance(value, (Substring, Pattern)):
        return value
    if isinstance(value, str):
        return Substring(value)
    if isinstance(value, re.Pattern):
        return Pattern(value)
    raise TypeError(f"Unsupported matcher: {value!r}")


__all__ = ["Matcher", "Pattern", "Substring", "as_matcher"]
