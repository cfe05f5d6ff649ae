"""Asset record."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Optional, Tuple

from ..casting import FieldKind, FieldSpec
from .playback import PlaybackID
from .track import Track


@dataclass(frozen=True)
class Asset:
    """Processed on-demand media object.

    ``status`` is one of ``preparing``, ``ready`` or ``errored``
    (see ``AssetStatus``); it is kept as the raw string.
    """

    id: Optional[str] = None
    status: Optional[str] = None
    mp4_support: Optional[str] = None
    master_access: Optional[str] = None
    duration: Optional[float] = None
    aspect_ratio: Optional[str] = None
    max_stored_frame_rate: Optional[float] = None
    max_stored_resolution: Optional[str] = None
    passthrough: Optional[str] = None
    live_stream_id: Optional[str] = None
    test: Optional[bool] = None
    created_at: Optional[datetime] = None
    tracks: Tuple[Track, ...] = ()
    playback_ids: Tuple[PlaybackID, ...] = ()

    FIELDS: ClassVar[Tuple[FieldSpec, ...]] = (
        FieldSpec("id"),
        FieldSpec("status"),
        FieldSpec("mp4_support"),
        FieldSpec("master_access"),
        FieldSpec("duration", FieldKind.FLOAT),
        FieldSpec("aspect_ratio"),
        FieldSpec("max_stored_frame_rate", FieldKind.FLOAT),
        FieldSpec("max_stored_resolution"),
        FieldSpec("passthrough"),
        FieldSpec("live_stream_id"),
        FieldSpec("test", FieldKind.BOOLEAN),
        FieldSpec("created_at", FieldKind.EPOCH),
        FieldSpec("tracks", FieldKind.EMBED_MANY, record=Track),
        FieldSpec("playback_ids", FieldKind.EMBED_MANY, record=PlaybackID),
    )
