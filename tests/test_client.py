"""Tests for the source HTTP client."""

import json

import pytest

from payment_sources import (
    ClientConfig,
    SourceClient,
    bancontact_params,
    create_source,
    create_source_client,
    form_fields,
)

RETURN_URL = "https://example.com/return"


class _StubResponse:
    def __init__(self, status_code, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text or json.dumps(payload)

    def json(self):
        if self._payload is None:
            raise json.JSONDecodeError("Expecting value", self.text, 0)
        return self._payload


class _StubSession:
    def __init__(self, response):
        self.response = response
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        return self.response


def _config(**kwargs):
    return ClientConfig(publishable_key="pk_test_123", **kwargs)


def test_create_posts_form_fields():
    session = _StubSession(
        _StubResponse(
            200,
            {
                "id": "src_123",
                "type": "bancontact",
                "status": "pending",
                "flow": "redirect",
                "redirect": {"url": "https://hooks.example.com/redirect/src_123"},
            },
        )
    )
    params = bancontact_params(1099, "Jenny Rosen", RETURN_URL)

    source = SourceClient(_config(api_version="2017-06-05"), session=session).create(params)

    url, kwargs = session.calls[0]
    assert url == "https://api.stripe.com/v1/sources"
    assert kwargs["data"] == form_fields(params)
    assert kwargs["headers"] == {
        "Authorization": "Bearer pk_test_123",
        "Stripe-Version": "2017-06-05",
    }
    assert kwargs["timeout"] == 30
    assert source.id == "src_123"
    assert source.status == "pending"
    assert source.redirect_url == "https://hooks.example.com/redirect/src_123"


def test_http_error_is_raised():
    session = _StubSession(_StubResponse(402, text='{"error": {"code": "amount_too_small"}}'))

    with pytest.raises(RuntimeError, match="402"):
        create_source(bancontact_params(1, "Jenny Rosen", RETURN_URL), config=_config(), session=session)


def test_invalid_json_is_raised():
    session = _StubSession(_StubResponse(200, text="<html>"))

    with pytest.raises(RuntimeError, match="Failed to parse JSON"):
        create_source(
            bancontact_params(1099, "Jenny Rosen", RETURN_URL), config=_config(), session=session
        )


def test_facade_rejects_config_and_parameters():
    with pytest.raises(ValueError):
        create_source_client(config=_config(), publishable_key="pk_test_other")


def test_facade_builds_config_from_keywords():
    client = create_source_client(
        env_file=None,
        base={},
        publishable_key="pk_test_123",
        api_base="http://localhost:12111",
    )

    assert client.config.sources_url == "http://localhost:12111/v1/sources"
