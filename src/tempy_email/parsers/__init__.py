# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Extraction of verification codes and links from message bodies."""

from .links import (
    extract_first_link,
    extract_links,
    extract_links_by_domain,
    extract_verification_link,
)
from .otp import (
    extract_6_digit_otp,
    extract_alphanumeric_otp,
    extract_by_pattern,
    extract_numeric_otp,
    extract_otp,
    extract_uuid,
)

__all__ = [
    "extract_6_digit_otp",
    "extract_alphanumeric_otp",
    "extract_by_pattern",
    "extract_first_link",
    "extract_links",
    "extract_links_by_domain",
    "extract_numeric_otp",
    "extract_otp",
    "extract_uuid",
    "extract_verification_link",
]
