# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Link extraction for verification, reset and magic-link emails."""

from __future__ import annotations

import re

_URL = re.compile(r"https?://[^\s<>\"']+", re.IGNORECASE)
_HREF = re.compile(r"href=[\"']([^\"']+)[\"']", re.IGNORECASE)
_TRAILING_PUNCTUATION = re.compile(r"[.,;!?)]$")

DEFAULT_LINK_PATTERNS = tuple(
    re.compile(keyword, re.IGNORECASE)
    for keyword in ("verify", "confirm", "activate", "token=", "reset", "magic")
)


def extract_links(text: str) -> list[str]:
    """Return every absolute http(s) URL in ``text``, without duplicates.

    Plain-text URLs come first, in order of appearance, followed by any
    ``href`` targets not already seen. Relative hrefs are ignored.
    """
    urls: dict[str, None] = {}
    for url in _URL.findall(text):
        urls[_TRAILING_PUNCTUATION.sub("", url)] = None
    for url in _HREF.findall(text):
        if url.startswith(("http://", "https://")):
            urls[url] = None
    return list(urls)


def extract_verification_link(text: str, pattern: str | re.Pattern[str] | None = None) -> str | None:
    """Return the first link matching ``pattern``.

    Without a pattern, the first link mentioning a usual verification
    keyword (verify, confirm, activate, token=, reset, magic) is returned.
    """
    links = extract_links(text)
    if pattern is None:
        for link in links:
            if any(p.search(link) for p in DEFAULT_LINK_PATTERNS):
                return link
        return None

    regex = re.compile(pattern)
    for link in links:
        if regex.search(link):
            return link
    return None


def extract_links_by_domain(text: str, domain: str) -> list[str]:
    """Return links whose text contains ``domain`` (case-insensitive)."""
    needle = domain.lower()
    return [link for link in extract_links(text) if needle in link.lower()]


def extract_first_link(text: str) -> str | None:
    links = extract_links(text)
    return links[0] if links else None
