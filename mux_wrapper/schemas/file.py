"""Input file container record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from ..casting import FieldKind, FieldSpec
from .track import Track


@dataclass(frozen=True)
class File:
    container_format: Optional[str] = None
    tracks: Tuple[Track, ...] = ()

    FIELDS: ClassVar[Tuple[FieldSpec, ...]] = (
        FieldSpec("container_format"),
        FieldSpec("tracks", FieldKind.EMBED_MANY, record=Track),
    )
