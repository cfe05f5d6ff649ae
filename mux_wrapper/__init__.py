"""Typed wrapper around the Mux Video REST API."""

from .casting import FieldKind, FieldSpec, normalize
from .client import build_client
from .errors import (
    CastingError,
    ConfigurationError,
    MuxWrapperError,
    ShapeMismatchError,
    TransportError,
    TypeCoercionError,
)
from .schemas import Asset, AssetInfo, File, LiveStream, OverlaySettings, PlaybackID, Settings, SimulcastTarget, Track
from .services import assets, live_streams, playbacks
from .services.params import CreateAssetParams, CreateLiveStreamParams, ListParams, SimulcastTargetParams
from .types import AssetStatus, LiveStreamStatus, MasterAccess, Mp4Support, PlaybackPolicy, coerce_epoch

__all__ = [
    "Asset",
    "AssetInfo",
    "AssetStatus",
    "CastingError",
    "ConfigurationError",
    "CreateAssetParams",
    "CreateLiveStreamParams",
    "FieldKind",
    "FieldSpec",
    "File",
    "ListParams",
    "LiveStream",
    "LiveStreamStatus",
    "MasterAccess",
    "Mp4Support",
    "MuxWrapperError",
    "OverlaySettings",
    "PlaybackID",
    "PlaybackPolicy",
    "Settings",
    "ShapeMismatchError",
    "SimulcastTarget",
    "SimulcastTargetParams",
    "Track",
    "TransportError",
    "TypeCoercionError",
    "assets",
    "build_client",
    "coerce_epoch",
    "live_streams",
    "normalize",
    "playbacks",
]
__version__ = "0.1.0"
