"""Media track record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from ..casting import FieldKind, FieldSpec


@dataclass(frozen=True)
class Track:
    """One audio, video or image stream within an asset or input file.

    Assets report the ``max_*`` fields; input-info files report the plain
    ``width``/``height``/``frame_rate``/``channels`` fields.
    """

    id: Optional[str] = None
    type: Optional[str] = None
    duration: Optional[float] = None
    max_width: Optional[int] = None
    max_height: Optional[int] = None
    max_frame_rate: Optional[float] = None
    max_channels: Optional[int] = None
    max_channel_layout: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    frame_rate: Optional[float] = None
    channels: Optional[int] = None
    encoding: Optional[str] = None
    sample_rate: Optional[int] = None

    FIELDS: ClassVar[Tuple[FieldSpec, ...]] = (
        FieldSpec("id"),
        FieldSpec("type"),
        FieldSpec("duration", FieldKind.FLOAT),
        FieldSpec("max_width", FieldKind.INTEGER),
        FieldSpec("max_height", FieldKind.INTEGER),
        FieldSpec("max_frame_rate", FieldKind.FLOAT),
        FieldSpec("max_channels", FieldKind.INTEGER),
        FieldSpec("max_channel_layout"),
        FieldSpec("width", FieldKind.INTEGER),
        FieldSpec("height", FieldKind.INTEGER),
        FieldSpec("frame_rate", FieldKind.FLOAT),
        FieldSpec("channels", FieldKind.INTEGER),
        FieldSpec("encoding"),
        FieldSpec("sample_rate", FieldKind.INTEGER),
    )
