"""Built-in bindings for cursor movement, mode overrides and focus."""

from __future__ import annotations

from typing import Iterable

from mode_keeper.actions import modes as mode_actions
from mode_keeper.actions import navigation as nav_actions

from .models import KEY_ENTER, ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="navigation.next",
        handler=nav_actions.select_next,
        description="Move the cursor to the next item",
    ),
    ActionRef(
        id="navigation.prev",
        handler=nav_actions.select_prev,
        description="Move the cursor to the previous item",
    ),
    ActionRef(
        id="navigation.activate",
        handler=nav_actions.activate_selection,
        description="Focus the selected pane or go to the selected tab",
    ),
    ActionRef(
        id="modes.lock",
        handler=mode_actions.lock_selection,
        description="Lock the selected pane or tab",
    ),
    ActionRef(
        id="modes.normal",
        handler=mode_actions.normalize_selection,
        description="Return the selected pane or tab to normal mode",
    ),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding("navigation.next", KeyStroke("j"), "navigation.next", "Next item"),
    Binding("navigation.prev", KeyStroke("k"), "navigation.prev", "Previous item"),
    Binding("modes.lock", KeyStroke("L"), "modes.lock", "Lock selection"),
    Binding("modes.normal", KeyStroke("N"), "modes.normal", "Normal selection"),
    Binding(
        "navigation.activate",
        KeyStroke(KEY_ENTER),
        "navigation.activate",
        "Focus selection",
    ),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    extra_bindings: Iterable[Binding] = (),
) -> KeymapRegistry:
    """Seed ``registry`` with the default actions and bindings.

    ``extra_bindings`` replace defaults that share their key.
    """

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=True)
    for binding in DEFAULT_BINDINGS:
        registry.register_binding(binding, replace=True)
    for binding in extra_bindings:
        registry.register_binding(binding, replace=True)
    return registry


__all__ = ["DEFAULT_ACTIONS", "DEFAULT_BINDINGS", "load_default_keymaps"]
