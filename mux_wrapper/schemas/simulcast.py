"""Simulcast target record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from ..casting import FieldSpec


@dataclass(frozen=True)
class SimulcastTarget:
    """Secondary RTMP destination a live stream is re-broadcast to."""

    id: Optional[str] = None
    url: Optional[str] = None
    stream_key: Optional[str] = None
    passthrough: Optional[str] = None
    status: Optional[str] = None

    FIELDS: ClassVar[Tuple[FieldSpec, ...]] = (
        FieldSpec("id"),
        FieldSpec("url"),
        FieldSpec("stream_key"),
        FieldSpec("passthrough"),
        FieldSpec("status"),
    )
