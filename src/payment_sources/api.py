"""
Public, high-level helpers for creating sources.
"""

from __future__ import annotations

from typing import Mapping, Optional

import requests

from .core.client import CreatedSource, SourceClient, create_source as _create_source
from .core.config import ClientConfig, ClientParameters, load_client_config
from .core.params import SourceParams

__all__ = [
    "create_source",
    "create_source_client",
]


def _resolve_config(
    config: Optional[ClientConfig],
    *,
    env_file: Optional[str],
    overrides: Optional[Mapping[str, str]],
    base: Optional[Mapping[str, str]],
    parameters: Optional[ClientParameters],
    publishable_key: Optional[str],
    api_base: Optional[str],
    api_version: Optional[str],
    timeout_seconds: Optional[int | str],
) -> ClientConfig:
    if config is not None:
        extras = (
            overrides,
            base,
            parameters,
            publishable_key,
            api_base,
            api_version,
            timeout_seconds,
        )
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built ClientConfig or individual parameters, not both."
            )
        return config
    return load_client_config(
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
        publishable_key=publishable_key,
        api_base=api_base,
        api_version=api_version,
        timeout_seconds=timeout_seconds,
    )


def create_source_client(
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[ClientParameters] = None,
    publishable_key: Optional[str] = None,
    api_base: Optional[str] = None,
    api_version: Optional[str] = None,
    timeout_seconds: Optional[int | str] = None,
) -> SourceClient:
    """
    Construct a :class:`SourceClient`.

    Callers can either supply a ready-made :class:`ClientConfig` or let the
    helper assemble one from environment data.
    """
    cfg = _resolve_config(
        config,
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
        publishable_key=publishable_key,
        api_base=api_base,
        api_version=api_version,
        timeout_seconds=timeout_seconds,
    )
    return SourceClient(cfg, session=session)


def create_source(
    params: SourceParams,
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[ClientParameters] = None,
    publishable_key: Optional[str] = None,
    api_base: Optional[str] = None,
    api_version: Optional[str] = None,
    timeout_seconds: Optional[int | str] = None,
) -> CreatedSource:
    """
    Submit ``params`` and return the created source.
    """
    cfg = _resolve_config(
        config,
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
        publishable_key=publishable_key,
        api_base=api_base,
        api_version=api_version,
        timeout_seconds=timeout_seconds,
    )
    return _create_source(cfg, params, session=session)
