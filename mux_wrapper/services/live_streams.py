"""
Live stream, live stream playback ID and simulcast target operations.

See https://docs.mux.com/api-reference/video#tag/live-streams
"""

from __future__ import annotations

import logging
from typing import List, Union

import httpx

from ..casting import normalize_many, normalize_one
from ..client import Params, payload, request, resource_path
from ..schemas import LiveStream, PlaybackID, SimulcastTarget
from ..types import PlaybackPolicy
from .params import CreateLiveStreamParams, SimulcastTargetParams

logger = logging.getLogger(__name__)

LIVE_STREAMS_PATH = "/video/v1/live-streams"


def create_live_stream(
    client: httpx.Client,
    params: Union[CreateLiveStreamParams, Params] = None,
) -> LiveStream:
    """
    Create a live stream.

    Without ``params`` the stream and the assets it records are both public.
    """
    body = payload(params if params is not None else CreateLiveStreamParams())
    data = request(client, "POST", LIVE_STREAMS_PATH, json=body)
    live_stream = normalize_one(data, LiveStream)
    logger.info("Created Mux live stream %s", live_stream.id)
    return live_stream


def get_live_stream(client: httpx.Client, live_stream_id: str) -> LiveStream:
    data = request(client, "GET", resource_path(LIVE_STREAMS_PATH, live_stream_id))
    return normalize_one(data, LiveStream)


def list_live_streams(client: httpx.Client, params: Params = None) -> List[LiveStream]:
    """List live streams; ``limit``/``page`` in ``params`` are forwarded as-is."""
    data = request(client, "GET", LIVE_STREAMS_PATH, params=payload(params))
    return normalize_many(data, LiveStream)


def delete_live_stream(client: httpx.Client, live_stream_id: str) -> bool:
    request(client, "DELETE", resource_path(LIVE_STREAMS_PATH, live_stream_id))
    logger.info("Deleted Mux live stream %s", live_stream_id)
    return True


def enable_live_stream(client: httpx.Client, live_stream_id: str) -> bool:
    request(client, "PUT", resource_path(LIVE_STREAMS_PATH, live_stream_id, "enable"))
    return True


def disable_live_stream(client: httpx.Client, live_stream_id: str) -> bool:
    request(client, "PUT", resource_path(LIVE_STREAMS_PATH, live_stream_id, "disable"))
    return True


def complete_live_stream(client: httpx.Client, live_stream_id: str) -> bool:
    """Signal that the broadcast is finished so the asset is finalized now."""
    request(client, "PUT", resource_path(LIVE_STREAMS_PATH, live_stream_id, "complete"))
    return True


def reset_stream_key(client: httpx.Client, live_stream_id: str) -> LiveStream:
    """Rotate the stream key; the old key stops working immediately."""
    data = request(client, "POST", resource_path(LIVE_STREAMS_PATH, live_stream_id, "reset-stream-key"))
    return normalize_one(data, LiveStream)


def create_live_stream_playback_id(
    client: httpx.Client,
    live_stream_id: str,
    policy: Union[PlaybackPolicy, str] = PlaybackPolicy.PUBLIC,
) -> PlaybackID:
    value = PlaybackPolicy.coerce(policy)
    data = request(
        client,
        "POST",
        resource_path(LIVE_STREAMS_PATH, live_stream_id, "playback-ids"),
        json={"policy": value.value},
    )
    return normalize_one(data, PlaybackID)


def delete_live_stream_playback_id(client: httpx.Client, live_stream_id: str, playback_id: str) -> bool:
    request(client, "DELETE", resource_path(LIVE_STREAMS_PATH, live_stream_id, "playback-ids", playback_id))
    return True


def create_simulcast_target(
    client: httpx.Client,
    live_stream_id: str,
    params: Union[SimulcastTargetParams, Params],
) -> SimulcastTarget:
    data = request(
        client,
        "POST",
        resource_path(LIVE_STREAMS_PATH, live_stream_id, "simulcast-targets"),
        json=payload(params),
    )
    return normalize_one(data, SimulcastTarget)


def get_simulcast_target(client: httpx.Client, live_stream_id: str, simulcast_target_id: str) -> SimulcastTarget:
    data = request(
        client,
        "GET",
        resource_path(LIVE_STREAMS_PATH, live_stream_id, "simulcast-targets", simulcast_target_id),
    )
    return normalize_one(data, SimulcastTarget)


def delete_simulcast_target(client: httpx.Client, live_stream_id: str, simulcast_target_id: str) -> bool:
    request(
        client,
        "DELETE",
        resource_path(LIVE_STREAMS_PATH, live_stream_id, "simulcast-targets", simulcast_target_id),
    )
    return True
