"""
Authenticated HTTP transport for the Mux Video API.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from .config import require_credentials, settings
from .errors import ConfigurationError, ShapeMismatchError, TransportError

logger = logging.getLogger(__name__)

Params = Union[BaseModel, Mapping[str, Any], None]


def build_client(
    token_id: Optional[str] = None,
    token_secret: Optional[str] = None,
    *,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """
    Create an ``httpx.Client`` authenticated against Mux.

    Args:
        token_id: Access token id; defaults to ``MUX_ACCESS_TOKEN_ID``.
        token_secret: Access token secret; defaults to ``MUX_ACCESS_TOKEN_SECRET``.
        base_url: API root; defaults to ``MUX_BASE_URL``.
        timeout: Seconds per request; defaults to ``MUX_TIMEOUT_SECONDS``.
        transport: Optional transport override (e.g. ``httpx.MockTransport``).
    """
    if token_id is None and token_secret is None:
        token_id, token_secret = require_credentials()
    if token_id is None:
        token_id = settings.MUX_ACCESS_TOKEN_ID
    if token_secret is None:
        token_secret = settings.MUX_ACCESS_TOKEN_SECRET
    if not token_id or not token_secret:
        raise ConfigurationError("Both token_id and token_secret are required")

    return httpx.Client(
        base_url=base_url or settings.MUX_BASE_URL,
        auth=httpx.BasicAuth(token_id, token_secret),
        timeout=timeout if timeout is not None else settings.MUX_TIMEOUT_SECONDS,
        headers={"Accept": "application/json"},
        transport=transport,
    )


def payload(params: Params) -> Optional[Dict[str, Any]]:
    """Turn a request model or mapping into a JSON-ready dict, dropping unset values."""
    if params is None:
        return None
    if isinstance(params, BaseModel):
        return params.model_dump(mode="json", exclude_none=True)
    if isinstance(params, Mapping):
        return {key: value for key, value in params.items() if value is not None}
    raise TypeError(f"Unsupported request parameters: {type(params).__name__}")


def _error_from_response(response: httpx.Response) -> TransportError:
    reason = f"http_{response.status_code}"
    details = []
    try:
        body = response.json()
    except ValueError:
        body = None

    error = body.get("error") if isinstance(body, Mapping) else None
    if isinstance(error, Mapping):
        reason = str(error.get("type") or reason)
        messages = error.get("messages")
        if isinstance(messages, list):
            details = [str(message) for message in messages]
        elif error.get("message"):
            details = [str(error["message"])]
    elif response.text:
        details = [response.text[:500]]

    return TransportError(reason, details, status_code=response.status_code)


def _log_error(error: TransportError) -> None:
    logger.error("Mux API error: %s: %s", error.reason, error.first_detail)


def request(
    client: httpx.Client,
    method: str,
    path: str,
    *,
    json: Optional[Dict[str, Any]] = None,
    params: Optional[Dict[str, Any]] = None,
) -> Any:
    """
    Issue one Mux API call and return the decoded ``data`` member.

    Returns ``None`` for bodiless success responses.

    Raises:
        TransportError: Network failure or a non-2xx response.
        ShapeMismatchError: A success body that is not a JSON object.
    """
    logger.debug("Mux request %s %s", method, path)
    try:
        response = client.request(method, path, json=json, params=params)
    except httpx.HTTPError as exc:
        error = TransportError("transport_error", [str(exc) or type(exc).__name__])
        _log_error(error)
        raise error from exc

    if response.is_error:
        error = _error_from_response(response)
        _log_error(error)
        raise error

    if not response.content.strip():
        return None
    try:
        body = response.json()
    except ValueError as exc:
        raise ShapeMismatchError("JSON object", response.text) from exc
    if not isinstance(body, Mapping):
        raise ShapeMismatchError("JSON object", body)
    return body["data"] if "data" in body else body


def resource_path(root: str, *segments: str) -> str:
    """Join ``root`` with URL-quoted id segments, rejecting blank ids."""
    parts = [root.rstrip("/")]
    for segment in segments:
        text = str(segment or "").strip()
        if not text:
            raise ValueError(f"Blank path segment for {root}")
        parts.append(quote(text, safe=""))
    return "/".join(parts)
