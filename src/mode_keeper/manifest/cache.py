"""Latest pane manifest plus the read-only queries built on it."""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Sequence, Tuple

from mode_keeper.runtime import telemetry

from .models import PaneInfo, PaneManifest, TabInfo

_EMPTY: Tuple[PaneInfo, ...] = ()


class ManifestCache:
    """Holds the last snapshot delivered by the host.

    Every ``replace`` overwrites the previous snapshot wholesale; nothing is
    merged or diffed.
    """

    def __init__(self) -> None:
        self._panes: Dict[int, Tuple[PaneInfo, ...]] = {}
        self._tab_names: Dict[int, str] = {}
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def replace(self, manifest: PaneManifest | Mapping[int, Sequence[PaneInfo]]) -> None:
        if isinstance(manifest, PaneManifest):
            self._panes = manifest.as_dict()
        else:
            self._panes = {pos: tuple(panes) for pos, panes in manifest.items()}
        self._revision += 1
        telemetry.record_event(
            "manifest.replace",
            level="debug",
            data={"tabs": len(self._panes), "revision": self._revision},
            logger_name="mode_keeper.manifest",
        )

    def remember_tabs(self, tabs: Sequence[TabInfo]) -> None:
        self._tab_names = {tab.position: tab.name for tab in tabs if tab.name}

    def tab_name(self, pos: int) -> Optional[str]:
        return self._tab_names.get(pos)

    @property
    def positions(self) -> Tuple[int, ...]:
        """Tab positions in the order the host delivered them."""

        return tuple(self._panes)

    def panes(self, pos: int) -> Tuple[PaneInfo, ...]:
        return self._panes.get(pos, _EMPTY)

    def eligible_panes(self, pos: int) -> Tuple[PaneInfo, ...]:
        return tuple(pane for pane in self.panes(pos) if pane.is_eligible)

    def navigable_panes(self, pos: int) -> Tuple[PaneInfo, ...]:
        return tuple(pane for pane in self.panes(pos) if pane.is_navigable)

    def focused_pane_id(self, pos: int) -> Optional[int]:
        for pane in self.panes(pos):
            if pane.is_focused:
                return pane.id
        return None


__all__ = ["ManifestCache"]
