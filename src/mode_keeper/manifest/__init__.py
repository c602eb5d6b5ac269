"""Snapshot of the host's tabs and panes."""

from .cache import ManifestCache
from .models import PaneInfo, PaneManifest, TabInfo

__all__ = [
    "ManifestCache",
    "PaneInfo",
    "PaneManifest",
    "TabInfo",
]
