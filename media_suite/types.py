from __future__ import annotations

from typing import List, Tuple


# Source type tokens (matched case-insensitively)
LOCAL = "local"
STREAM = "stream"
API = "api"

YES = "yes"

TITLE = "===== Modular Media Suite ====="

# Section banners
ADAPTER_BANNER = "[Adapter Pattern]"
BRIDGE_BANNER = "[Bridge Pattern]"
DECORATOR_BANNER = "[Decorator Pattern]"
PROXY_BANNER = "[Proxy Pattern]"
COMPOSITE_BANNER = "[Composite Pattern]"

# Prompts, in the order they are asked
PROMPT_SOURCE = "Enter media source (local/stream/api): "
PROMPT_MEDIA = "Enter media name: "
PROMPT_HARDWARE = "Use hardware rendering? (yes/no): "
PROMPT_SUBTITLES = "Enable subtitles? (yes/no): "
PROMPT_EQUALIZER = "Enable equalizer? (yes/no): "
PROMPT_WATERMARK = "Enable watermark? (yes/no): "

# Fixed contents of the demo playlist
MAIN_PLAYLIST = "Main Playlist"
BONUS_TRACK = "Bonus Track.mp3"
CHILL_MIX = "Chill Mix"
CHILL_MIX_TRACKS: Tuple[str, ...] = ("TrackA.mp3", "TrackB.mp3")

LOG_LEVELS: List[str] = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
