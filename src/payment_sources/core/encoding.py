"""
Form encoding for source parameters.

Nested groups are flattened into bracketed keys (``owner[address][city]``)
the way the sources endpoint expects them in an
``application/x-www-form-urlencoded`` body.
"""

from __future__ import annotations

import urllib.parse
from enum import Enum
from typing import Any, List, Mapping, Sequence, Tuple

from .params import SourceParams, SourceParamsError

__all__ = [
    "encode_form",
    "flatten_params",
    "form_fields",
]


def _scalar(key: str, value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int)):
        return str(value)
    raise SourceParamsError(
        f"Cannot form-encode value of type {type(value).__name__} for '{key}'"
    )


def _flatten(prefix: str, value: Any, pairs: List[Tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for child_key, child_value in value.items():
            if not isinstance(child_key, str):
                raise SourceParamsError(f"Keys under '{prefix}' must be strings")
            _flatten(f"{prefix}[{child_key}]", child_value, pairs)
        return
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        for index, item in enumerate(value):
            _flatten(f"{prefix}[{index}]", item, pairs)
        return
    pairs.append((prefix, _scalar(prefix, value)))


def flatten_params(params: Mapping[str, Any]) -> List[Tuple[str, str]]:
    """
    Flatten a nested mapping into ordered ``(key, value)`` string pairs.
    """
    pairs: List[Tuple[str, str]] = []
    for key, value in params.items():
        _flatten(key, value, pairs)
    return pairs


def form_fields(params: SourceParams) -> List[Tuple[str, str]]:
    return flatten_params(params.as_dict())


def encode_form(params: SourceParams) -> str:
    """Build the urlencoded request body for ``params``."""
    return urllib.parse.urlencode(form_fields(params))
