"""Inbound events delivered by the host to the plugin."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple, Union

from mode_keeper.keymaps.models import normalize_key
from mode_keeper.manifest import PaneManifest, TabInfo


@dataclass(frozen=True, slots=True)
class TabUpdate:
    tabs: Tuple[TabInfo, ...] = ()


@dataclass(frozen=True, slots=True)
class PaneUpdate:
    manifest: PaneManifest = field(default_factory=PaneManifest)


@dataclass(frozen=True, slots=True)
class Key:
    """Single character key press."""

    char: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "char", normalize_key(self.char))


@dataclass(frozen=True, slots=True)
class PipeMessage:
    """Opaque message piped to the plugin from outside the host UI."""

    name: str
    payload: str | None = None
    source: str = "cli"


Event = Union[TabUpdate, PaneUpdate, Key]

__all__ = ["Event", "Key", "PaneUpdate", "PipeMessage", "TabUpdate"]
