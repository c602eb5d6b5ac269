"""Actions that write mode overrides for the current selection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mode_keeper.modes import InputMode

if TYPE_CHECKING:  # pragma: no cover
    from mode_keeper.plugin.dispatcher import EventDispatcher


def _apply(dispatcher: "EventDispatcher", mode: InputMode) -> bool:
    selection = dispatcher.rebuild_navigation().selection
    if selection is None:
        return True
    store = dispatcher.state.modes
    if selection.pane_id is not None:
        store.set_pane_mode(selection.tab_position, selection.pane_id, mode)
    else:
        store.set_tab_mode(selection.tab_position, mode)
    return True


def lock_selection(dispatcher: "EventDispatcher") -> bool:
    return _apply(dispatcher, InputMode.LOCKED)


def normalize_selection(dispatcher: "EventDispatcher") -> bool:
    return _apply(dispatcher, InputMode.NORMAL)


__all__ = ["lock_selection", "normalize_selection"]
