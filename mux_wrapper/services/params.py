"""Request bodies for Mux write operations."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from ..types import MasterAccess, Mp4Support, PlaybackPolicy


class AssetInput(BaseModel):
    url: str = Field(min_length=1)
    overlay_settings: Optional[Dict[str, Any]] = None


class CreateAssetParams(BaseModel):
    input: Union[str, List[AssetInput]]
    playback_policy: List[PlaybackPolicy] = Field(default_factory=lambda: [PlaybackPolicy.PUBLIC])
    mp4_support: Optional[Mp4Support] = None
    master_access: Optional[MasterAccess] = None
    passthrough: Optional[str] = Field(default=None, max_length=255)
    test: Optional[bool] = None


class NewAssetSettings(BaseModel):
    playback_policy: List[PlaybackPolicy] = Field(default_factory=lambda: [PlaybackPolicy.PUBLIC])
    mp4_support: Optional[Mp4Support] = None


class CreateLiveStreamParams(BaseModel):
    playback_policy: List[PlaybackPolicy] = Field(default_factory=lambda: [PlaybackPolicy.PUBLIC])
    new_asset_settings: Optional[NewAssetSettings] = Field(default_factory=NewAssetSettings)
    reconnect_window: Optional[int] = Field(default=None, ge=0, le=1800)
    passthrough: Optional[str] = Field(default=None, max_length=255)
    test: Optional[bool] = None


class SimulcastTargetParams(BaseModel):
    url: str = Field(min_length=1)
    stream_key: Optional[str] = None
    passthrough: Optional[str] = Field(default=None, max_length=255)


class ListParams(BaseModel):
    """Paging forwarded verbatim; Mux defaults to limit=25, page=1."""

    limit: Optional[int] = Field(default=None, ge=1)
    page: Optional[int] = Field(default=None, ge=1)
