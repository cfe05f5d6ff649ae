"""
Asset operations against the Mux Video API.

See https://docs.mux.com/api-reference/video#tag/assets
"""

from __future__ import annotations

import logging
from typing import List, Union

import httpx

from ..casting import normalize_many, normalize_one
from ..client import Params, payload, request, resource_path
from ..schemas import Asset, AssetInfo
from ..types import MasterAccess, Mp4Support, coerce_enum
from .params import CreateAssetParams

logger = logging.getLogger(__name__)

ASSETS_PATH = "/video/v1/assets"


def create_asset(client: httpx.Client, params: Union[CreateAssetParams, Params, str]) -> Asset:
    """
    Create an asset from an input URL.

    Args:
        client: Client from ``build_client``.
        params: ``CreateAssetParams``, a raw mapping, or just the input URL.
    """
    if isinstance(params, str):
        params = CreateAssetParams(input=params)
    data = request(client, "POST", ASSETS_PATH, json=payload(params))
    asset = normalize_one(data, Asset)
    logger.info("Created Mux asset %s status=%s", asset.id, asset.status)
    return asset


def list_assets(client: httpx.Client, params: Params = None) -> List[Asset]:
    """List assets; ``limit``/``page`` in ``params`` are forwarded as-is."""
    data = request(client, "GET", ASSETS_PATH, params=payload(params))
    return normalize_many(data, Asset)


def get_asset(client: httpx.Client, asset_id: str) -> Asset:
    data = request(client, "GET", resource_path(ASSETS_PATH, asset_id))
    return normalize_one(data, Asset)


def delete_asset(client: httpx.Client, asset_id: str) -> bool:
    request(client, "DELETE", resource_path(ASSETS_PATH, asset_id))
    logger.info("Deleted Mux asset %s", asset_id)
    return True


def update_mp4_support(
    client: httpx.Client,
    asset_id: str,
    mp4_support: Union[Mp4Support, str],
) -> Asset:
    """Enable (``standard``) or disable (``none``) static MP4 renditions."""
    value = coerce_enum(mp4_support, Mp4Support)
    data = request(
        client,
        "PUT",
        resource_path(ASSETS_PATH, asset_id, "mp4-support"),
        json={"mp4_support": value.value},
    )
    return normalize_one(data, Asset)


def update_master_access(
    client: httpx.Client,
    asset_id: str,
    master_access: Union[MasterAccess, str],
) -> Asset:
    """Request (``temporary``) or drop (``none``) access to the master file."""
    value = coerce_enum(master_access, MasterAccess)
    data = request(
        client,
        "PUT",
        resource_path(ASSETS_PATH, asset_id, "master-access"),
        json={"master_access": value.value},
    )
    return normalize_one(data, Asset)


def get_asset_input_info(client: httpx.Client, asset_id: str) -> List[AssetInfo]:
    """Return one ``AssetInfo`` per input (main video, watermark, ...)."""
    data = request(client, "GET", resource_path(ASSETS_PATH, asset_id, "input-info"))
    return normalize_many(data, AssetInfo)
