"""
Public facade for the payment source helper package.

Factories, the parameter object and the client are re-exported so
integrators can ``from payment_sources import ...`` directly.
"""

from .api import create_source, create_source_client
from .core import (
    Address,
    CardParams,
    ClientConfig,
    ClientParameters,
    ConfigError,
    CreatedSource,
    Owner,
    Redirect,
    SourceClient,
    SourceFlow,
    SourceParams,
    SourceParamsError,
    SourceType,
    SourceUsage,
    bancontact_params,
    bitcoin_params,
    card_params,
    encode_form,
    flatten_params,
    form_fields,
    giropay_params,
    ideal_params,
    load_client_config,
    parse_source_type,
    resolve_settings,
    sepa_debit_params,
    sofort_params,
    source_params,
    three_d_secure_params,
)

__all__ = (
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
    "create_source_client",
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
)
