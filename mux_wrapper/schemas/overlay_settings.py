"""Watermark overlay placement record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from ..casting import FieldSpec


@dataclass(frozen=True)
class OverlaySettings:
    # Mux reports every value as a display string, e.g. "100px" or "80.000000%".
    vertical_align: Optional[str] = None
    vertical_margin: Optional[str] = None
    horizontal_align: Optional[str] = None
    horizontal_margin: Optional[str] = None
    width: Optional[str] = None
    height: Optional[str] = None
    opacity: Optional[str] = None

    FIELDS: ClassVar[Tuple[FieldSpec, ...]] = (
        FieldSpec("vertical_align"),
        FieldSpec("vertical_margin"),
        FieldSpec("horizontal_align"),
        FieldSpec("horizontal_margin"),
        FieldSpec("width"),
        FieldSpec("height"),
        FieldSpec("opacity"),
    )
