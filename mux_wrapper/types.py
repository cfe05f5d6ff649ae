"""
Closed enumerations and scalar coercions shared by records and operations.
"""

import re
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Union

from .errors import TypeCoercionError


UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_INTEGER_RE = re.compile(r"^[+-]?\d+$")


class PlaybackPolicy(str, Enum):
    PUBLIC = "public"   # anyone with the playback URL can stream
    SIGNED = "signed"   # playback requires a signed token

    @classmethod
    def coerce(cls, value: Union["PlaybackPolicy", str]) -> "PlaybackPolicy":
        """Accept an enum member, its value, or the legacy ``private`` alias."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized == "private":
                return cls.SIGNED
            try:
                return cls(normalized)
            except ValueError:
                pass
        raise TypeCoercionError(value, "playback policy must be 'public' or 'signed'")


class Mp4Support(str, Enum):
    NONE = "none"
    STANDARD = "standard"


class MasterAccess(str, Enum):
    NONE = "none"
    TEMPORARY = "temporary"


class AssetStatus(str, Enum):
    PREPARING = "preparing"
    READY = "ready"
    ERRORED = "errored"


class LiveStreamStatus(str, Enum):
    IDLE = "idle"
    ACTIVE = "active"
    DISABLED = "disabled"


def coerce_epoch(value: Any) -> datetime:
    """
    Convert Unix epoch seconds into a UTC datetime.

    Args:
        value: An ``int`` or a decimal-integer string such as ``"1616000000"``.

    Returns:
        Timezone-aware datetime in UTC.

    Raises:
        TypeCoercionError: For floats, booleans, ``None``, datetimes,
            non-numeric strings and values outside the datetime range.
    """
    if isinstance(value, bool):
        raise TypeCoercionError(value, "epoch timestamp must be an integer or numeric string")
    if isinstance(value, str):
        text = value.strip()
        if not _INTEGER_RE.match(text):
            raise TypeCoercionError(value, "epoch timestamp string is not an integer")
        try:
            seconds = int(text)
        except ValueError as exc:
            # int() refuses digit strings past sys.get_int_max_str_digits()
            raise TypeCoercionError(value, "epoch timestamp out of range") from exc
    elif isinstance(value, int):
        seconds = value
    else:
        raise TypeCoercionError(value, "epoch timestamp must be an integer or numeric string")

    try:
        return UNIX_EPOCH + timedelta(seconds=seconds)
    except OverflowError as exc:
        raise TypeCoercionError(value, "epoch timestamp out of range") from exc


def coerce_enum(value: Any, enum_type: type) -> Enum:
    """Convert ``value`` into a member of ``enum_type`` or raise."""
    if isinstance(value, enum_type):
        return value
    coerce = getattr(enum_type, "coerce", None)
    if coerce is not None:
        return coerce(value)
    try:
        return enum_type(value)
    except ValueError as exc:
        allowed = ", ".join(repr(member.value) for member in enum_type)
        raise TypeCoercionError(value, f"expected one of {allowed}") from exc
