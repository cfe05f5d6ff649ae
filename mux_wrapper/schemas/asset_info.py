"""Asset input-info record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from ..casting import FieldKind, FieldSpec
from .file import File
from .settings import Settings


@dataclass(frozen=True)
class AssetInfo:
    """Pre-processing description of one asset input (video or watermark)."""

    file: Optional[File] = None
    settings: Optional[Settings] = None

    FIELDS: ClassVar[Tuple[FieldSpec, ...]] = (
        FieldSpec("file", FieldKind.EMBED_ONE, record=File),
        FieldSpec("settings", FieldKind.EMBED_ONE, record=Settings),
    )
