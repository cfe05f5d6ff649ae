"""Asset playback ID operations."""

from __future__ import annotations

from typing import Union

import httpx

from ..casting import normalize_one
from ..client import request, resource_path
from ..schemas import PlaybackID
from ..types import PlaybackPolicy
from .assets import ASSETS_PATH


def create_playback_id(
    client: httpx.Client,
    asset_id: str,
    policy: Union[PlaybackPolicy, str] = PlaybackPolicy.PUBLIC,
) -> PlaybackID:
    value = PlaybackPolicy.coerce(policy)
    data = request(
        client,
        "POST",
        resource_path(ASSETS_PATH, asset_id, "playback-ids"),
        json={"policy": value.value},
    )
    return normalize_one(data, PlaybackID)


def create_public_playback_id(client: httpx.Client, asset_id: str) -> PlaybackID:
    """Anyone with the playback URL can stream the asset."""
    return create_playback_id(client, asset_id, PlaybackPolicy.PUBLIC)


def create_signed_playback_id(client: httpx.Client, asset_id: str) -> PlaybackID:
    """Playback requires a signed JWT in addition to the playback URL."""
    return create_playback_id(client, asset_id, PlaybackPolicy.SIGNED)


def get_playback_id(client: httpx.Client, asset_id: str, playback_id: str) -> PlaybackID:
    data = request(client, "GET", resource_path(ASSETS_PATH, asset_id, "playback-ids", playback_id))
    return normalize_one(data, PlaybackID)


def delete_playback_id(client: httpx.Client, asset_id: str, playback_id: str) -> bool:
    request(client, "DELETE", resource_path(ASSETS_PATH, asset_id, "playback-ids", playback_id))
    return True
