"""Plugin verbs bound to keys by the default keymap."""

from .modes import lock_selection, normalize_selection
from .navigation import activate_selection, select_next, select_prev

__all__ = [
    "activate_selection",
    "lock_selection",
    "normalize_selection",
    "select_next",
    "select_prev",
]
