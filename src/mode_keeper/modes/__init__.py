"""Input modes and the per-tab/per-pane override store."""

from .models import InputMode, mode_indicator
from .store import ModeOverrideStore, PaneKey

__all__ = [
    "InputMode",
    "ModeOverrideStore",
    "PaneKey",
    "mode_indicator",
]
