"""
Core primitives for building and submitting source creation requests.
"""

from .card import CardParams
from .client import CreatedSource, SourceClient, create_source
from .config import (
    ClientConfig,
    ClientParameters,
    ConfigError,
    load_client_config,
    resolve_settings,
)
from .encoding import encode_form, flatten_params, form_fields
from .factories import (
    bancontact_params,
    bitcoin_params,
    card_params,
    giropay_params,
    ideal_params,
    sepa_debit_params,
    sofort_params,
    source_params,
    three_d_secure_params,
)
from .params import Address, Owner, Redirect, SourceParams, SourceParamsError
from .types import SourceFlow, SourceType, SourceUsage, parse_source_type

__all__ = [
    "Address",
    "CardParams",
    "ClientConfig",
    "ClientParameters",
    "ConfigError",
    "CreatedSource",
    "Owner",
    "Redirect",
    "SourceClient",
    "SourceFlow",
    "SourceParams",
    "SourceParamsError",
    "SourceType",
    "SourceUsage",
    "bancontact_params",
    "bitcoin_params",
    "card_params",
    "create_source",
    "encode_form",
    "flatten_params",
    "form_fields",
    "giropay_params",
    "ideal_params",
    "load_client_config",
    "parse_source_type",
    "resolve_settings",
    "sepa_debit_params",
    "sofort_params",
    "source_params",
    "three_d_secure_params",
]
