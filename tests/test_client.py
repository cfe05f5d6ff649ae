import base64
import logging
from unittest.mock import patch

import httpx
import pytest

from mux_wrapper.client import build_client, payload, request, resource_path
from mux_wrapper.errors import ConfigurationError, ShapeMismatchError, TransportError
from mux_wrapper.services.params import CreateLiveStreamParams, ListParams


def test_build_client_uses_basic_auth_and_base_url(fake_mux, mux_client):
    fake_mux.add("GET", "/video/v1/assets", {"data": []})

    request(mux_client, "GET", "/video/v1/assets")

    sent = fake_mux.last_request
    expected = base64.b64encode(b"test-token-id:test-token-secret").decode()
    assert sent.headers["Authorization"] == f"Basic {expected}"
    assert str(sent.url).startswith("https://api.mux.test/video/v1/assets")


def test_build_client_reads_configured_credentials():
    with (
        patch("mux_wrapper.config.settings.MUX_ACCESS_TOKEN_ID", "env-id"),
        patch("mux_wrapper.config.settings.MUX_ACCESS_TOKEN_SECRET", "env-secret"),
        patch("mux_wrapper.client.settings.MUX_BASE_URL", "https://api.mux.example"),
    ):
        client = build_client()

    assert str(client.base_url).rstrip("/") == "https://api.mux.example"
    client.close()


def test_build_client_fills_each_missing_credential_from_settings(fake_mux):
    fake_mux.add("GET", "/video/v1/assets", {"data": []})
    with patch("mux_wrapper.config.settings.MUX_ACCESS_TOKEN_ID", "env-id"):
        client = build_client(
            token_secret="explicit-secret",
            base_url="https://api.mux.test",
            transport=httpx.MockTransport(fake_mux.handler),
        )

    request(client, "GET", "/video/v1/assets")
    expected = base64.b64encode(b"env-id:explicit-secret").decode()
    assert fake_mux.last_request.headers["Authorization"] == f"Basic {expected}"
    client.close()


def test_build_client_without_credentials_fails_fast():
    with (
        patch("mux_wrapper.config.settings.MUX_ACCESS_TOKEN_ID", ""),
        patch("mux_wrapper.config.settings.MUX_ACCESS_TOKEN_SECRET", ""),
    ):
        with pytest.raises(ConfigurationError):
            build_client()

    with pytest.raises(ConfigurationError):
        build_client("only-id", "")


def test_request_unwraps_data_member(fake_mux, mux_client):
    fake_mux.add("GET", "/video/v1/live-streams/ls-1", {"data": {"id": "ls-1"}})

    assert request(mux_client, "GET", "/video/v1/live-streams/ls-1") == {"id": "ls-1"}


def test_request_returns_none_for_empty_body(fake_mux, mux_client):
    fake_mux.add("DELETE", "/video/v1/assets/asset-1", None, status=204)

    assert request(mux_client, "DELETE", "/video/v1/assets/asset-1") is None


def test_request_preserves_vendor_error_and_logs_it(fake_mux, mux_client, caplog):
    fake_mux.add(
        "GET",
        "/video/v1/assets/missing",
        {"error": {"type": "not_found", "messages": ["Asset not found", "Check the id"]}},
        status=404,
    )

    with caplog.at_level(logging.ERROR, logger="mux_wrapper.client"):
        with pytest.raises(TransportError) as exc_info:
            request(mux_client, "GET", "/video/v1/assets/missing")

    error = exc_info.value
    assert error.reason == "not_found"
    assert error.details == ["Asset not found", "Check the id"]
    assert error.first_detail == "Asset not found"
    assert error.status_code == 404
    assert "Mux API error: not_found: Asset not found" in caplog.text


def test_request_distinguishes_rate_limits(fake_mux, mux_client):
    fake_mux.add(
        "GET",
        "/video/v1/live-streams",
        {"error": {"type": "too_many_requests", "messages": ["Rate limit exceeded"]}},
        status=429,
    )

    with pytest.raises(TransportError) as exc_info:
        request(mux_client, "GET", "/video/v1/live-streams")

    assert exc_info.value.reason == "too_many_requests"
    assert exc_info.value.status_code == 429


def test_request_handles_non_json_error_body():
    def handler(_request):
        return httpx.Response(502, text="Bad Gateway")

    client = build_client("id", "secret", base_url="https://api.mux.test", transport=httpx.MockTransport(handler))
    with pytest.raises(TransportError) as exc_info:
        request(client, "GET", "/video/v1/assets")

    assert exc_info.value.reason == "http_502"
    assert exc_info.value.details == ["Bad Gateway"]
    client.close()


def test_network_failure_becomes_transport_error(caplog):
    def handler(req):
        raise httpx.ConnectError("connection refused", request=req)

    client = build_client("id", "secret", base_url="https://api.mux.test", transport=httpx.MockTransport(handler))
    with caplog.at_level(logging.ERROR, logger="mux_wrapper.client"):
        with pytest.raises(TransportError) as exc_info:
            request(client, "GET", "/video/v1/assets")

    assert exc_info.value.reason == "transport_error"
    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
    assert "transport_error" in caplog.text
    client.close()


def test_request_rejects_non_object_success_body():
    def handler(_request):
        return httpx.Response(200, text="<html>ok</html>")

    client = build_client("id", "secret", base_url="https://api.mux.test", transport=httpx.MockTransport(handler))
    with pytest.raises(ShapeMismatchError):
        request(client, "GET", "/video/v1/assets")
    client.close()


def test_payload_accepts_models_and_mappings():
    assert payload(None) is None
    assert payload({"limit": 10, "page": None}) == {"limit": 10}
    assert payload(ListParams(limit=5)) == {"limit": 5}
    assert payload(CreateLiveStreamParams()) == {
        "playback_policy": ["public"],
        "new_asset_settings": {"playback_policy": ["public"]},
    }
    with pytest.raises(TypeError):
        payload(["limit", 10])


def test_resource_path_quotes_and_rejects_blank_ids():
    assert resource_path("/video/v1/assets", "abc", "playback-ids", "p/1") == "/video/v1/assets/abc/playback-ids/p%2F1"
    with pytest.raises(ValueError):
        resource_path("/video/v1/assets", " ")
