"""Live stream record."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar, Mapping, Optional, Tuple

from ..casting import FieldKind, FieldSpec
from .playback import PlaybackID
from .simulcast import SimulcastTarget


@dataclass(frozen=True)
class LiveStream:
    """Ingest endpoint accepting a real-time feed.

    ``status`` is one of ``idle``, ``active`` or ``disabled``
    (see ``LiveStreamStatus``).
    """

    id: Optional[str] = None
    status: Optional[str] = None
    stream_key: Optional[str] = None
    reconnect_window: Optional[int] = None
    passthrough: Optional[str] = None
    active_asset_id: Optional[str] = None
    new_asset_settings: Optional[Mapping[str, Any]] = field(default=None, hash=False)
    recent_asset_ids: Tuple[str, ...] = ()
    created_at: Optional[datetime] = None
    playback_ids: Tuple[PlaybackID, ...] = ()
    simulcast_targets: Tuple[SimulcastTarget, ...] = ()

    FIELDS: ClassVar[Tuple[FieldSpec, ...]] = (
        FieldSpec("id"),
        FieldSpec("status"),
        FieldSpec("stream_key"),
        FieldSpec("reconnect_window", FieldKind.INTEGER),
        FieldSpec("passthrough"),
        FieldSpec("active_asset_id"),
        FieldSpec("new_asset_settings", FieldKind.MAP),
        FieldSpec("recent_asset_ids", FieldKind.STRING_LIST),
        FieldSpec("created_at", FieldKind.EPOCH),
        FieldSpec("playback_ids", FieldKind.EMBED_MANY, record=PlaybackID),
        FieldSpec("simulcast_targets", FieldKind.EMBED_MANY, record=SimulcastTarget),
    )
