"""Per-event entry point wiring host events to the plugin components."""

from __future__ import annotations

import sys
from types import MappingProxyType
from typing import List, Mapping, Optional, TextIO

from mode_keeper.events import Key, PaneUpdate, PipeMessage, TabUpdate
from mode_keeper.host import EventType, Host, PermissionType
from mode_keeper.keymaps import KeymapRegistry, load_default_keymaps
from mode_keeper.modes import InputMode
from mode_keeper.navigation import NavigationState, NavigationView
from mode_keeper.runtime import telemetry

from .render import RenderedLine, render_rows
from .state import PluginState

DEFAULT_PERMISSIONS: tuple[PermissionType, ...] = (
    PermissionType.READ_APPLICATION_STATE,
    PermissionType.RUN_COMMANDS,
    PermissionType.CHANGE_APPLICATION_STATE,
)

DEFAULT_SUBSCRIPTIONS: tuple[EventType, ...] = (
    EventType.PANE_UPDATE,
    EventType.TAB_UPDATE,
    EventType.KEY,
)


class EventDispatcher:
    """Handles load, update, pipe and render calls made by the host.

    Each ``update`` returns whether the host should call ``render`` next.
    """

    def __init__(
        self,
        host: Host,
        *,
        state: PluginState | None = None,
        keymap_registry: KeymapRegistry | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.host = host
        self.state = state or PluginState()
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="mode_keeper.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)

    @property
    def navigation(self) -> NavigationState:
        return self.state.navigation

    @property
    def selected_pane_id(self) -> Optional[int]:
        return self.state.selected_pane_id

    def load(self, configuration: Mapping[str, str]) -> None:
        self.state.configuration = MappingProxyType(dict(configuration))
        telemetry.request(
            self.host.request_permission,
            DEFAULT_PERMISSIONS,
            permissions=[p.value for p in DEFAULT_PERMISSIONS],
        )
        telemetry.request(
            self.host.subscribe,
            DEFAULT_SUBSCRIPTIONS,
            events=[e.value for e in DEFAULT_SUBSCRIPTIONS],
        )
        telemetry.record_event(
            "plugin.load",
            data={"config_keys": sorted(self.state.configuration)},
            logger_name="mode_keeper.plugin",
        )

    def pipe(self, message: PipeMessage) -> bool:
        telemetry.record_event(
            "plugin.pipe",
            data={
                "name": message.name,
                "payload": message.payload,
                "source": message.source,
            },
            logger_name="mode_keeper.plugin",
        )
        return True

    def update(self, event: object) -> bool:
        with telemetry.span(
            f"plugin::{type(event).__name__}",
            component="plugin",
            metadata={"active_tab": self.state.active_tab},
        ):
            if isinstance(event, TabUpdate):
                return self._on_tab_update(event)
            if isinstance(event, PaneUpdate):
                return self._on_pane_update(event)
            if isinstance(event, Key):
                return self._on_key(event)
        telemetry.record_event(
            "plugin.ignored",
            level="debug",
            data={"event": type(event).__name__},
            logger_name="mode_keeper.plugin",
        )
        return False

    def rebuild_navigation(self) -> NavigationView:
        view = self.state.navigation.rebuild(self.state.manifest, self.state.active_tab)
        if view.selection is not None and view.selection.pane_id is not None:
            self.state.selected_pane_id = view.selection.pane_id
        return view

    def render_rows(self) -> List[RenderedLine]:
        view = self.rebuild_navigation()
        return render_rows(view, self.state.modes, self.state.manifest)

    def render_lines(self) -> List[str]:
        """Rendered text, one line per item plus a trailing blank line."""

        return [row.text for row in self.render_rows()] + [""]

    def render(self, rows: int, cols: int, *, stream: TextIO | None = None) -> None:
        del rows, cols
        out = stream or sys.stdout
        for line in self.render_lines():
            print(line, file=out)

    def _on_tab_update(self, event: TabUpdate) -> bool:
        active = next((tab for tab in event.tabs if tab.active), None)
        if active is None:
            return False
        self.state.manifest.remember_tabs(event.tabs)
        self.state.active_tab = active.position
        self._switch_mode(self.state.modes.get_tab_mode(active.position))
        return True

    def _on_pane_update(self, event: PaneUpdate) -> bool:
        self.state.manifest.replace(event.manifest)
        pane_id = self.state.manifest.focused_pane_id(self.state.active_tab)
        if pane_id is None:
            return False
        self._switch_mode(self.state.modes.get_pane_mode(self.state.active_tab, pane_id))
        return True

    def _on_key(self, event: Key) -> bool:
        action = self.keymap_registry.resolve(event.char)
        if action is None:
            telemetry.record_event(
                "plugin.key_unbound",
                level="debug",
                data={"key": event.char},
                logger_name="mode_keeper.plugin",
            )
            return False
        with telemetry.span(
            "keymaps::execute",
            component="keymaps",
            metadata={"action": action.id},
        ):
            return action(self)

    def _switch_mode(self, mode: InputMode) -> None:
        telemetry.request(
            self.host.switch_to_input_mode,
            mode,
            mode=mode.value,
            tab=self.state.active_tab,
        )


__all__ = ["DEFAULT_PERMISSIONS", "DEFAULT_SUBSCRIPTIONS", "EventDispatcher"]
