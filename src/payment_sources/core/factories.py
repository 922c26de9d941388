"""
Per-payment-method constructors for :class:`SourceParams`.

Each factory fills in the type, flow, usage and nested groups its payment
method requires. Only the shape of the request is checked here; the API
remains responsible for business rules such as IBAN checksums or supported
currencies.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from .card import CardParams
from .params import Address, Owner, Redirect, SourceParams, SourceParamsError
from .types import SourceFlow, SourceType, SourceUsage

__all__ = [
    "bancontact_params",
    "bitcoin_params",
    "card_params",
    "giropay_params",
    "ideal_params",
    "sepa_debit_params",
    "sofort_params",
    "source_params",
    "three_d_secure_params",
]

_EUR = "EUR"


def _optional_group(**values: Optional[str]) -> Dict[str, str]:
    return {key: value for key, value in values.items() if value}


def _eur_redirect_params(
    source_type: SourceType,
    *,
    amount: int,
    return_url: str,
    owner: Optional[Owner],
    group: Dict[str, str],
) -> SourceParams:
    return SourceParams(
        type=source_type,
        amount=amount,
        currency=_EUR,
        flow=SourceFlow.REDIRECT,
        usage=SourceUsage.SINGLE_USE,
        owner=owner,
        redirect=Redirect(return_url=return_url),
        additional_api_parameters={source_type.value: group} if group else None,
    )


def bancontact_params(
    amount: int,
    name: str,
    return_url: str,
    *,
    statement_descriptor: Optional[str] = None,
) -> SourceParams:
    """
    Params for a Bancontact source, charged once in EUR after a redirect.
    """
    return _eur_redirect_params(
        SourceType.BANCONTACT,
        amount=amount,
        return_url=return_url,
        owner=Owner(name=name),
        group=_optional_group(statement_descriptor=statement_descriptor),
    )


def bitcoin_params(amount: int, currency: str, email: str) -> SourceParams:
    """Params for a Bitcoin source paid into a receiver address."""
    return SourceParams(
        type=SourceType.BITCOIN,
        amount=amount,
        currency=currency,
        flow=SourceFlow.RECEIVER,
        owner=Owner(email=email),
    )


def card_params(card: CardParams) -> SourceParams:
    """
    Params for a Card source.

    Every set card field is copied under ``card`` with its own name. The
    holder's name and billing address, when present, are also sent as the
    source owner.
    """
    owner = Owner(name=card.name, address=card.billing_address())
    return SourceParams(
        type=SourceType.CARD,
        owner=owner if owner.as_dict() else None,
        additional_api_parameters={"card": card.card_fields()},
    )


def giropay_params(
    amount: int,
    name: str,
    return_url: str,
    *,
    statement_descriptor: Optional[str] = None,
) -> SourceParams:
    return _eur_redirect_params(
        SourceType.GIROPAY,
        amount=amount,
        return_url=return_url,
        owner=Owner(name=name),
        group=_optional_group(statement_descriptor=statement_descriptor),
    )


def ideal_params(
    amount: int,
    name: str,
    return_url: str,
    *,
    statement_descriptor: Optional[str] = None,
    bank: Optional[str] = None,
) -> SourceParams:
    """
    Params for an iDEAL source.

    ``bank`` preselects the customer's bank on the redirect page.
    """
    return _eur_redirect_params(
        SourceType.IDEAL,
        amount=amount,
        return_url=return_url,
        owner=Owner(name=name),
        group=_optional_group(statement_descriptor=statement_descriptor, bank=bank),
    )


def sepa_debit_params(
    name: str,
    iban: str,
    city: str,
    postal_code: str,
    country: str,
    *,
    address_line1: Optional[str] = None,
) -> SourceParams:
    """Params for a SEPA Direct Debit source debiting ``iban``."""
    address = Address(
        line1=address_line1,
        city=city,
        postal_code=postal_code,
        country=country,
    )
    return SourceParams(
        type=SourceType.SEPA_DEBIT,
        currency=_EUR,
        owner=Owner(name=name, address=address),
        additional_api_parameters={"sepa_debit": {"iban": iban}},
    )


def sofort_params(
    amount: int,
    return_url: str,
    country: str,
    *,
    statement_descriptor: Optional[str] = None,
) -> SourceParams:
    """
    Params for a SOFORT source. ``country`` is the country of the customer's bank.
    """
    return _eur_redirect_params(
        SourceType.SOFORT,
        amount=amount,
        return_url=return_url,
        owner=None,
        group=_optional_group(country=country, statement_descriptor=statement_descriptor),
    )


def three_d_secure_params(
    amount: int,
    currency: str,
    return_url: str,
    card: str,
) -> SourceParams:
    """
    Params for a 3-D Secure source wrapping the card source ``card``.
    """
    return SourceParams(
        type=SourceType.THREE_D_SECURE,
        amount=amount,
        currency=currency,
        flow=SourceFlow.REDIRECT,
        redirect=Redirect(return_url=return_url),
        additional_api_parameters={"three_d_secure": {"card": card}},
    )


def source_params(
    type: Union[SourceType, str],
    *,
    amount: Optional[int] = None,
    currency: Optional[str] = None,
    flow: Optional[Union[SourceFlow, str]] = None,
    usage: Optional[Union[SourceUsage, str]] = None,
    metadata: Optional[Mapping[str, str]] = None,
    owner: Optional[Owner] = None,
    return_url: Optional[str] = None,
    token: Optional[str] = None,
    extra: Optional[Mapping[str, Mapping[str, Any]]] = None,
) -> SourceParams:
    """
    Build params for a combination none of the named factories covers.

    ``extra`` holds method-specific groups, e.g. ``{"alipay": {...}}``.
    """
    if amount is not None and not currency:
        raise SourceParamsError("currency is required when amount is given")
    params = SourceParams(
        type=type,
        amount=amount,
        currency=currency,
        flow=flow,
        usage=usage,
        metadata=metadata,
        owner=owner,
        redirect=Redirect(return_url=return_url) if return_url else None,
        token=token,
        additional_api_parameters=extra,
    )
    if params.flow is SourceFlow.REDIRECT and params.redirect is None:
        raise SourceParamsError("return_url is required for the redirect flow")
    return params
