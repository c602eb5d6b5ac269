"""Cursor movement and focus actions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mode_keeper.runtime import telemetry

if TYPE_CHECKING:  # pragma: no cover
    from mode_keeper.plugin.dispatcher import EventDispatcher


def select_next(dispatcher: "EventDispatcher") -> bool:
    dispatcher.rebuild_navigation()
    dispatcher.navigation.move_next()
    return True


def select_prev(dispatcher: "EventDispatcher") -> bool:
    dispatcher.rebuild_navigation()
    dispatcher.navigation.move_prev()
    return True


def activate_selection(dispatcher: "EventDispatcher") -> bool:
    """Focus the selected pane, or switch to the selected tab for a header."""

    selection = dispatcher.rebuild_navigation().selection
    if selection is None:
        return True
    if selection.pane_id is not None:
        telemetry.request(
            dispatcher.host.focus_terminal_pane,
            selection.pane_id,
            True,
            pane=selection.pane_id,
        )
    else:
        telemetry.request(
            dispatcher.host.go_to_tab,
            selection.tab_position,
            tab=selection.tab_position,
        )
    return True


__all__ = ["select_next", "select_prev", "activate_selection"]
