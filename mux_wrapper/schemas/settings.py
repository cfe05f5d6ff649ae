"""Input source settings record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from ..casting import FieldKind, FieldSpec
from .overlay_settings import OverlaySettings


@dataclass(frozen=True)
class Settings:
    url: Optional[str] = None
    overlay_settings: Optional[OverlaySettings] = None

    FIELDS: ClassVar[Tuple[FieldSpec, ...]] = (
        FieldSpec("url"),
        FieldSpec("overlay_settings", FieldKind.EMBED_ONE, record=OverlaySettings),
    )
