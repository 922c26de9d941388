"""
The generic parameter object sent to the source creation endpoint.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Union

from .types import SourceFlow, SourceType, SourceUsage, parse_source_type

__all__ = [
    "Address",
    "Owner",
    "Redirect",
    "SourceParams",
    "SourceParamsError",
]

_CORE_FIELDS = frozenset(
    {
        "type",
        "amount",
        "currency",
        "flow",
        "usage",
        "metadata",
        "owner",
        "redirect",
        "token",
    }
)


class SourceParamsError(ValueError):
    """Raised when source parameters have a shape the API cannot accept."""


def _drop_empty(values: Mapping[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in values.items() if value not in (None, "", {})}


@dataclass(frozen=True)
class Address:
    line1: Optional[str] = None
    line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None

    def as_dict(self) -> Dict[str, str]:
        return _drop_empty(
            {
                "line1": self.line1,
                "line2": self.line2,
                "city": self.city,
                "state": self.state,
                "postal_code": self.postal_code,
                "country": self.country,
            }
        )


@dataclass(frozen=True)
class Owner:
    """
    Information about the owner of the payment instrument.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[Address] = None

    def __post_init__(self) -> None:
        if self.address is not None and not isinstance(self.address, Address):
            raise SourceParamsError("owner.address must be an Address")

    def as_dict(self) -> Dict[str, Any]:
        address = self.address.as_dict() if self.address is not None else None
        return _drop_empty(
            {
                "name": self.name,
                "email": self.email,
                "phone": self.phone,
                "address": address,
            }
        )


@dataclass(frozen=True)
class Redirect:
    return_url: str

    def __post_init__(self) -> None:
        if not isinstance(self.return_url, str) or not self.return_url:
            raise SourceParamsError("redirect.return_url must be a non-empty string")

    def as_dict(self) -> Dict[str, str]:
        return {"return_url": self.return_url}


def _copy_metadata(metadata: Optional[Mapping[str, str]]) -> Optional[Dict[str, str]]:
    if metadata is None:
        return None
    if not isinstance(metadata, Mapping):
        raise SourceParamsError("metadata must be a mapping of strings")
    copied: Dict[str, str] = {}
    for key, value in metadata.items():
        if not isinstance(key, str) or not key:
            raise SourceParamsError(f"metadata key {key!r} must be a non-empty string")
        if not isinstance(value, str):
            raise SourceParamsError(f"metadata value for '{key}' must be a string")
        copied[key] = value
    return copied


def _copy_groups(groups: Optional[Mapping[str, Mapping[str, Any]]]) -> Dict[str, Dict[str, Any]]:
    copied: Dict[str, Dict[str, Any]] = {}
    for name, group in (groups or {}).items():
        if name in _CORE_FIELDS:
            raise SourceParamsError(
                f"'{name}' is a core source field and cannot be passed as an extra group"
            )
        if not isinstance(group, Mapping):
            raise SourceParamsError(f"Parameter group '{name}' must be a mapping")
        copied[name] = copy.deepcopy(dict(group))
    return copied


def _check_amount(amount: Any) -> Optional[int]:
    if amount is None:
        return None
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise SourceParamsError("amount must be a whole number of minor currency units")
    if amount < 0:
        raise SourceParamsError("amount must not be negative")
    return amount


def _check_type(value: Any) -> Optional[Union[SourceType, str]]:
    if value is None:
        return None
    try:
        return parse_source_type(value)
    except ValueError as exc:
        raise SourceParamsError(str(exc)) from exc


def _check_flow(value: Any) -> Optional[SourceFlow]:
    if value is None:
        return None
    try:
        return SourceFlow(value)
    except ValueError as exc:
        raise SourceParamsError(f"Unknown source flow {value!r}") from exc


def _check_usage(value: Any) -> Optional[SourceUsage]:
    if value is None:
        return None
    try:
        return SourceUsage(value)
    except ValueError as exc:
        raise SourceParamsError(f"Unknown source usage {value!r}") from exc


def _check_string(name: str) -> Callable[[Any], Optional[str]]:
    def check(value: Any) -> Optional[str]:
        if value is not None and not isinstance(value, str):
            raise SourceParamsError(f"{name} must be a string")
        return value

    return check


def _check_instance(cls: type, message: str) -> Callable[[Any], Any]:
    def check(value: Any) -> Any:
        if value is not None and not isinstance(value, cls):
            raise SourceParamsError(message)
        return value

    return check


_FIELD_CHECKS: Dict[str, Callable[[Any], Any]] = {
    "type": _check_type,
    "amount": _check_amount,
    "currency": _check_string("currency"),
    "flow": _check_flow,
    "usage": _check_usage,
    "metadata": _copy_metadata,
    "owner": _check_instance(Owner, "owner must be an Owner"),
    "redirect": _check_instance(Redirect, "redirect must be a Redirect"),
    "token": _check_string("token"),
    "additional_api_parameters": _copy_groups,
}


@dataclass
class SourceParams:
    """
    Parameters used to create a Source object.

    This is a plain carrier. The per-method factories in
    :mod:`payment_sources.core.factories` decide which fields are required.
    ``flow`` and ``usage`` left at ``None`` are not sent; the server infers
    them from ``type``. Every assignment, including those made after
    construction, is checked and caller mappings are copied.
    """

    type: Optional[Union[SourceType, str]] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    flow: Optional[SourceFlow] = None
    usage: Optional[SourceUsage] = None
    metadata: Optional[Dict[str, str]] = None
    owner: Optional[Owner] = None
    redirect: Optional[Redirect] = None
    token: Optional[str] = None
    additional_api_parameters: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def __setattr__(self, name: str, value: Any) -> None:
        check = _FIELD_CHECKS.get(name)
        if check is not None:
            value = check(value)
        super().__setattr__(name, value)

    @property
    def type_string(self) -> Optional[str]:
        if isinstance(self.type, SourceType):
            return self.type.value
        return self.type

    def copy(self) -> "SourceParams":
        return copy.deepcopy(self)

    def as_dict(self) -> Dict[str, Any]:
        """
        Return the request parameters as a nested mapping.

        Unset fields and empty groups are left out entirely.
        """
        body = _drop_empty(
            {
                "type": self.type_string,
                "amount": self.amount,
                "currency": self.currency,
                "flow": self.flow.value if self.flow is not None else None,
                "usage": self.usage.value if self.usage is not None else None,
                "metadata": dict(self.metadata) if self.metadata else None,
                "owner": self.owner.as_dict() if self.owner is not None else None,
                "redirect": self.redirect.as_dict() if self.redirect is not None else None,
                "token": self.token,
            }
        )
        for name, group in self.additional_api_parameters.items():
            group_values = _drop_empty(group)
            if group_values:
                body.setdefault(name, copy.deepcopy(group_values))
        return body
