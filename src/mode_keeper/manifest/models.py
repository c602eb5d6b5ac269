"""Descriptors delivered by the host in tab and pane updates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence, Tuple


@dataclass(frozen=True, slots=True)
class PaneInfo:
    """Single pane as reported by the host."""

    id: int
    title: str = ""
    is_plugin: bool = False
    is_floating: bool = False
    is_focused: bool = False

    @property
    def is_eligible(self) -> bool:
        """Plugin panes never take part in navigation or mode control."""

        return not self.is_plugin

    @property
    def is_navigable(self) -> bool:
        return not self.is_plugin and not self.is_floating


@dataclass(frozen=True, slots=True)
class TabInfo:
    """Single tab as reported by the host."""

    position: int
    active: bool = False
    name: str = ""


@dataclass(frozen=True, slots=True)
class PaneManifest:
    """Immutable ``tab position -> panes`` mapping in host order."""

    panes: Tuple[Tuple[int, Tuple[PaneInfo, ...]], ...] = ()

    @classmethod
    def from_mapping(cls, mapping: Dict[int, Sequence[PaneInfo]]) -> "PaneManifest":
        return cls(tuple((pos, tuple(panes)) for pos, panes in mapping.items()))

    def as_dict(self) -> Dict[int, Tuple[PaneInfo, ...]]:
        return dict(self.panes)

    @property
    def positions(self) -> Tuple[int, ...]:
        return tuple(pos for pos, _ in self.panes)


__all__ = ["PaneInfo", "TabInfo", "PaneManifest"]
