"""
HTTP client for the source creation endpoint.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import requests

from .config import ClientConfig
from .encoding import form_fields
from .params import SourceParams

__all__ = [
    "CreatedSource",
    "SourceClient",
    "create_source",
]


def _post_form(
    session: requests.Session,
    config: ClientConfig,
    fields: List[Tuple[str, str]],
) -> Dict[str, Any]:
    url = config.sources_url
    response = session.post(
        url,
        data=fields,
        headers=config.headers(),
        timeout=config.timeout_seconds,
    )
    if response.status_code >= 400:
        raise RuntimeError(f"Source API responded with {response.status_code}: {response.text}")
    try:
        return response.json()
    except json.JSONDecodeError as exc:
        raise RuntimeError(f"Failed to parse JSON from source API at {url}: {response.text}") from exc


@dataclass(frozen=True)
class CreatedSource:
    id: Optional[str]
    type: Optional[str]
    status: Optional[str]
    flow: Optional[str]
    redirect_url: Optional[str]
    raw: Dict[str, Any]

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "CreatedSource":
        redirect = payload.get("redirect") or {}
        return cls(
            id=payload.get("id"),
            type=payload.get("type"),
            status=payload.get("status"),
            flow=payload.get("flow"),
            redirect_url=redirect.get("url"),
            raw=payload,
        )


class SourceClient:
    """
    Thin wrapper that submits :class:`SourceParams` to ``/v1/sources``.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()

    def build_request(self, params: SourceParams) -> List[Tuple[str, str]]:
        return form_fields(params)

    def create(self, params: SourceParams) -> CreatedSource:
        fields = self.build_request(params)
        logging.info(
            "Creating %s source at %s", params.type_string, self.config.sources_url
        )
        source = CreatedSource.from_response(_post_form(self.session, self.config, fields))
        logging.info("Created source %s with status %s", source.id, source.status)
        return source


def create_source(
    config: ClientConfig,
    params: SourceParams,
    *,
    session: Optional[requests.Session] = None,
) -> CreatedSource:
    client = SourceClient(config, session=session)
    return client.create(params)
