"""Infrastructure layer - Configuration and in-memory storage"""

from .config import LatencySettings, Settings, get_settings, reload_settings
from .repository import EntryStore, UserRepository

__all__ = ["LatencySettings", "Settings", "get_settings", "reload_settings",
           "EntryStore", "UserRepository"]
