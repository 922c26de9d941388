"""
Configuration objects and helpers for the source client.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlparse

__all__ = [
    "ClientConfig",
    "ClientParameters",
    "ConfigError",
    "load_client_config",
    "resolve_settings",
]

DEFAULT_API_BASE = "https://api.stripe.com"
DEFAULT_TIMEOUT_SECONDS = 30
ENV_PREFIX = "PAYMENT_SOURCES_"

_PARAMETER_TO_ENV_KEY = {
    "publishable_key": "PAYMENT_SOURCES_PUBLISHABLE_KEY",
    "api_base": "PAYMENT_SOURCES_API_BASE",
    "api_version": "PAYMENT_SOURCES_API_VERSION",
    "timeout_seconds": "PAYMENT_SOURCES_TIMEOUT_SECONDS",
}
_KNOWN_ENV_KEYS = frozenset(_PARAMETER_TO_ENV_KEY.values())


class ConfigError(Exception):
    """Raised when the supplied configuration is invalid."""


def _known_settings(values: Mapping[str, str], source: str) -> Dict[str, str]:
    settings: Dict[str, str] = {}
    for key, value in values.items():
        if not key.startswith(ENV_PREFIX):
            continue
        if key not in _KNOWN_ENV_KEYS:
            raise ConfigError(f"Unknown setting {key} in {source}")
        settings[key] = value
    return settings


def _read_env_file(path: str) -> Dict[str, str]:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}

    values: Dict[str, str] = {}
    for number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if line.startswith("export "):
            line = line[len("export ") :].lstrip()
        if not line.startswith(ENV_PREFIX):
            continue
        key, separator, value = line.partition("=")
        if not separator:
            raise ConfigError(f"{path}:{number}: expected {key.strip()}=VALUE")
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]
        values[key.strip()] = value
    return _known_settings(values, path)


def resolve_settings(
    *,
    env_file: Optional[str] = ".env",
    base: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Collect the ``PAYMENT_SOURCES_*`` settings from every source.

    ``env_file`` only fills keys missing from ``base`` (default
    :data:`os.environ`), and ``overrides`` always win. Other variables are
    ignored; a misspelled ``PAYMENT_SOURCES_*`` key raises :class:`ConfigError`.
    """
    settings = _read_env_file(env_file) if env_file is not None else {}
    settings.update(_known_settings(os.environ if base is None else base, "environment"))
    settings.update(_known_settings(overrides or {}, "overrides"))
    return settings


@dataclass(frozen=True)
class ClientParameters:
    """
    Keyword bundle for :func:`load_client_config`.

    Every field that is not ``None`` overrides the matching environment
    variable.
    """

    publishable_key: Optional[str] = None
    api_base: Optional[str] = None
    api_version: Optional[str] = None
    timeout_seconds: Optional[int | str] = None

    def as_overrides(self) -> Dict[str, str]:
        overrides: Dict[str, str] = {}
        for field_name, env_key in _PARAMETER_TO_ENV_KEY.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            overrides[env_key] = str(value)
        return overrides


def _collect_parameter_overrides(
    parameters: Optional[ClientParameters],
    explicit: Mapping[str, Any],
) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    if parameters is not None:
        overrides.update(parameters.as_overrides())

    for key, value in explicit.items():
        if value is None:
            continue
        overrides[_PARAMETER_TO_ENV_KEY[key]] = str(value)
    return overrides


def _normalize_publishable_key(raw_key: Optional[str]) -> str:
    if raw_key is None:
        raise ConfigError("PAYMENT_SOURCES_PUBLISHABLE_KEY must be provided")
    key = raw_key.strip()
    if not key:
        raise ConfigError("PAYMENT_SOURCES_PUBLISHABLE_KEY must not be empty")
    if not key.startswith("pk_"):
        raise ConfigError("PAYMENT_SOURCES_PUBLISHABLE_KEY must be a publishable key (pk_...)")
    return key


def _normalize_api_base(raw_base: str) -> str:
    base = raw_base.strip().rstrip("/")
    parsed = urlparse(base)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"PAYMENT_SOURCES_API_BASE is not a valid http(s) URL: '{raw_base}'")
    return base


def _parse_timeout(raw_timeout: str) -> int:
    try:
        timeout = int(raw_timeout)
    except ValueError as exc:
        raise ConfigError(
            f"PAYMENT_SOURCES_TIMEOUT_SECONDS must be an integer, got '{raw_timeout}'"
        ) from exc
    if timeout <= 0:
        raise ConfigError("PAYMENT_SOURCES_TIMEOUT_SECONDS must be greater than zero")
    return timeout


@dataclass(frozen=True)
class ClientConfig:
    publishable_key: str
    api_base: str = DEFAULT_API_BASE
    api_version: Optional[str] = None
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS

    @property
    def sources_url(self) -> str:
        return f"{self.api_base}/v1/sources"

    def headers(self) -> Dict[str, str]:
        headers = {"Authorization": f"Bearer {self.publishable_key}"}
        if self.api_version:
            headers["Stripe-Version"] = self.api_version
        return headers

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "ClientConfig":
        publishable_key = _normalize_publishable_key(
            values.get("PAYMENT_SOURCES_PUBLISHABLE_KEY")
        )
        api_base = _normalize_api_base(
            values.get("PAYMENT_SOURCES_API_BASE", DEFAULT_API_BASE)
        )
        api_version = values.get("PAYMENT_SOURCES_API_VERSION") or None
        timeout_seconds = _parse_timeout(
            values.get("PAYMENT_SOURCES_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
        )
        return cls(
            publishable_key=publishable_key,
            api_base=api_base,
            api_version=api_version,
            timeout_seconds=timeout_seconds,
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        parameters: Optional[ClientParameters] = None,
        publishable_key: Optional[str] = None,
        api_base: Optional[str] = None,
        api_version: Optional[str] = None,
        timeout_seconds: Optional[int | str] = None,
    ) -> "ClientConfig":
        parameter_overrides = _collect_parameter_overrides(
            parameters,
            {
                "publishable_key": publishable_key,
                "api_base": api_base,
                "api_version": api_version,
                "timeout_seconds": timeout_seconds,
            },
        )
        merged_overrides = dict(overrides or {})
        merged_overrides.update(parameter_overrides)

        settings = resolve_settings(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(settings)


def load_client_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[ClientParameters] = None,
    publishable_key: Optional[str] = None,
    api_base: Optional[str] = None,
    api_version: Optional[str] = None,
    timeout_seconds: Optional[int | str] = None,
) -> ClientConfig:
    """
    Convenience wrapper that mirrors :meth:`ClientConfig.from_env`.
    """
    return ClientConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
        publishable_key=publishable_key,
        api_base=api_base,
        api_version=api_version,
        timeout_seconds=timeout_seconds,
    )
