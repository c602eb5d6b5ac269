"""Input mode values distinguished by the plugin."""

from __future__ import annotations

from enum import Enum


class InputMode(str, Enum):
    """Modes the plugin can ask the host to switch to.

    The host knows more modes than these; the plugin only ever stores and
    requests the two below.
    """

    NORMAL = "normal"
    LOCKED = "locked"


def mode_indicator(mode: InputMode) -> str:
    """One-character suffix shown next to every rendered item."""

    return "L" if mode is InputMode.LOCKED else "N"


__all__ = ["InputMode", "mode_indicator"]
