"""Playback ID record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from ..casting import FieldKind, FieldSpec
from ..types import PlaybackPolicy


@dataclass(frozen=True)
class PlaybackID:
    """Public or signed viewing handle for an asset or live stream."""

    id: Optional[str] = None
    policy: Optional[PlaybackPolicy] = None

    FIELDS: ClassVar[Tuple[FieldSpec, ...]] = (
        FieldSpec("id"),
        FieldSpec("policy", FieldKind.ENUM, enum=PlaybackPolicy),
    )
