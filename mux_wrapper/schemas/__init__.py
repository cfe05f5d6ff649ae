"""Typed records built from Mux API responses."""

from .playback import PlaybackID
from .track import Track
from .overlay_settings import OverlaySettings
from .settings import Settings
from .file import File
from .asset_info import AssetInfo
from .asset import Asset
from .simulcast import SimulcastTarget
from .live_stream import LiveStream
