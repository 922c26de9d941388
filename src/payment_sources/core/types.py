"""
Enumerated vocabularies used when creating a source.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

__all__ = [
    "SourceFlow",
    "SourceType",
    "SourceUsage",
    "parse_source_type",
]


class SourceType(str, Enum):
    BANCONTACT = "bancontact"
    BITCOIN = "bitcoin"
    CARD = "card"
    GIROPAY = "giropay"
    IDEAL = "ideal"
    SEPA_DEBIT = "sepa_debit"
    SOFORT = "sofort"
    THREE_D_SECURE = "three_d_secure"


class SourceFlow(str, Enum):
    """
    Authentication flow of a source.

    ``NONE`` is a real value the API understands. An unset flow is modelled
    as ``None`` on :class:`~payment_sources.core.params.SourceParams`.
    """

    REDIRECT = "redirect"
    RECEIVER = "receiver"
    VERIFICATION = "verification"
    NONE = "none"


class SourceUsage(str, Enum):
    REUSABLE = "reusable"
    SINGLE_USE = "single_use"


def parse_source_type(value: Union[SourceType, str]) -> Union[SourceType, str]:
    """
    Map a wire string to :class:`SourceType`.

    Types this package does not enumerate are returned unchanged so newer
    payment methods can still be requested.
    """
    if isinstance(value, SourceType):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError("Source type must be a non-empty string")
    normalized = value.strip().lower()
    try:
        return SourceType(normalized)
    except ValueError:
        return normalized
