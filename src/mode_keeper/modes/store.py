"""Hierarchical mode overrides keyed by tab position and pane id.

Two explicit tables back the store:

``_tab_defaults``   tab position -> default mode for the tab
``_pane_overrides`` (tab position, pane id) -> mode for a single pane

A tab "record" exists once either table has been written for its
position. Resolution order for a pane is override, then tab default,
then ``InputMode.NORMAL``.
"""

from __future__ import annotations

from typing import Dict, Iterator, Optional, Tuple

from mode_keeper.runtime import telemetry

from .models import InputMode

PaneKey = Tuple[int, int]  # (tab position, pane id)


class ModeOverrideStore:
    """Owns tab defaults and pane overrides for the plugin lifetime."""

    def __init__(self, *, logger_name: str | None = "mode_keeper.modes") -> None:
        self._tab_defaults: Dict[int, InputMode] = {}
        self._pane_overrides: Dict[PaneKey, InputMode] = {}
        self._tab_index: Dict[int, set[int]] = {}
        self._logger_name = logger_name

    def has_record(self, pos: int) -> bool:
        return pos in self._tab_defaults

    def set_tab_mode(self, pos: int, mode: InputMode) -> None:
        """Replace the default for ``pos``.

        Every pane override under ``pos`` is discarded as part of the
        replacement, so panes fall back to the new default.
        """

        cleared = self._clear_pane_overrides(pos)
        self._tab_defaults[pos] = mode
        telemetry.record_event(
            "modes.set_tab",
            data={"tab": pos, "mode": mode.value, "cleared": cleared},
            logger_name=self._logger_name,
        )

    def set_pane_mode(self, pos: int, pane_id: int, mode: InputMode) -> None:
        # A fresh record starts with a NORMAL default.
        self._tab_defaults.setdefault(pos, InputMode.NORMAL)
        self._pane_overrides[(pos, pane_id)] = mode
        self._tab_index.setdefault(pos, set()).add(pane_id)
        telemetry.record_event(
            "modes.set_pane",
            data={"tab": pos, "pane": pane_id, "mode": mode.value},
            logger_name=self._logger_name,
        )

    def remove_tab_mode(self, pos: int) -> None:
        self.set_tab_mode(pos, InputMode.NORMAL)

    def remove_pane_mode(self, pos: int, pane_id: int) -> None:
        if self._pane_overrides.pop((pos, pane_id), None) is None:
            return
        bucket = self._tab_index.get(pos)
        if bucket is not None:
            bucket.discard(pane_id)
            if not bucket:
                self._tab_index.pop(pos, None)
        telemetry.record_event(
            "modes.remove_pane",
            data={"tab": pos, "pane": pane_id},
            logger_name=self._logger_name,
        )

    def get_tab_mode(self, pos: int) -> InputMode:
        return self._tab_defaults.get(pos, InputMode.NORMAL)

    def get_pane_mode(self, pos: int, pane_id: int) -> InputMode:
        override = self._pane_overrides.get((pos, pane_id))
        if override is not None:
            return override
        return self.get_tab_mode(pos)

    def pane_override(self, pos: int, pane_id: int) -> Optional[InputMode]:
        """Return the explicit override for a pane, ignoring the tab default."""

        return self._pane_overrides.get((pos, pane_id))

    def iter_pane_overrides(self, pos: int) -> Iterator[Tuple[int, InputMode]]:
        for pane_id in sorted(self._tab_index.get(pos, ())):
            yield pane_id, self._pane_overrides[(pos, pane_id)]

    def _clear_pane_overrides(self, pos: int) -> int:
        pane_ids = self._tab_index.pop(pos, set())
        for pane_id in pane_ids:
            self._pane_overrides.pop((pos, pane_id), None)
        return len(pane_ids)


__all__ = ["ModeOverrideStore", "PaneKey"]
