import json
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest

from mux_wrapper.client import build_client


TEST_BASE_URL = "https://api.mux.test"


class FakeMux:
    """In-memory stand-in for the Mux API, served through ``httpx.MockTransport``."""

    def __init__(self) -> None:
        self.routes: Dict[Tuple[str, str], Tuple[int, Any]] = {}
        self.requests: List[httpx.Request] = []

    def add(self, method: str, path: str, body: Any = None, status: int = 200) -> None:
        self.routes[(method, path)] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(
                404,
                json={"error": {"type": "not_found", "messages": [f"No route for {request.url.path}"]}},
            )
        status, body = route
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Optional[Dict[str, Any]]:
        content = self.last_request.content
        return json.loads(content) if content else None


@pytest.fixture
def fake_mux():
    return FakeMux()


@pytest.fixture
def mux_client(fake_mux):
    client = build_client(
        "test-token-id",
        "test-token-secret",
        base_url=TEST_BASE_URL,
        transport=httpx.MockTransport(fake_mux.handler),
    )
    yield client
    client.close()


@pytest.fixture
def asset_body():
    return {
        "id": "asset-1",
        "status": "ready",
        "mp4_support": "none",
        "master_access": "none",
        "duration": 60.095011,
        "aspect_ratio": "16:9",
        "max_stored_frame_rate": 23.962,
        "max_stored_resolution": "SD",
        "created_at": "1616163184",
        "tracks": [
            {
                "id": "track-audio",
                "type": "audio",
                "duration": 60.095011,
                "max_channels": 2,
                "max_channel_layout": "stereo",
            },
            {
                "id": "track-video",
                "type": "video",
                "duration": 60.095,
                "max_width": 640,
                "max_height": 360,
                "max_frame_rate": 23.962,
            },
        ],
        "playback_ids": [{"id": "playback-1", "policy": "public"}],
    }


@pytest.fixture
def live_stream_body():
    return {
        "id": "ls-1",
        "status": "idle",
        "stream_key": "stream-key-1",
        "reconnect_window": 60,
        "created_at": "1615888766",
        "new_asset_settings": {"playback_policies": ["public"]},
        "recent_asset_ids": ["asset-a", "asset-b"],
        "playback_ids": [{"id": "playback-ls-1", "policy": "public"}],
    }
