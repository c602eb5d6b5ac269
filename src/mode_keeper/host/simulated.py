"""In-process stand-in for the terminal host.

``SimulatedSession`` owns a list of tabs and panes, applies the requests a
plugin issues, and queues the resulting ``TabUpdate``/``PaneUpdate`` events.
Queued events reach the plugin only when ``pump`` is called, so a handler
never sees the consequences of its own request while it is still running.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field, replace
from typing import Callable, Deque, Iterable, List, Optional, Tuple

from mode_keeper.events import Event, PaneUpdate, TabUpdate
from mode_keeper.manifest import PaneInfo, PaneManifest, TabInfo
from mode_keeper.modes import InputMode
from mode_keeper.runtime import telemetry

from .recording import RecordingHost

EventSink = Callable[[Event], bool]


@dataclass(slots=True)
class SimulatedTab:
    name: str
    panes: List[PaneInfo] = field(default_factory=list)
    focused: Optional[int] = None


class SimulatedSession(RecordingHost):
    """Tabs, panes and input mode of a fake host session."""

    def __init__(self) -> None:
        super().__init__()
        self.tabs: List[SimulatedTab] = []
        self.active_tab = 0
        self.input_mode = InputMode.NORMAL
        self._next_pane_id = 1
        self._outbox: Deque[Event] = deque()
        self._sink: Optional[EventSink] = None

    # -- owner-side API ---------------------------------------------------

    def attach(self, sink: EventSink) -> None:
        self._sink = sink

    def new_tab(
        self,
        name: str = "",
        titles: Iterable[str] = (),
        *,
        floating: Iterable[str] = (),
        with_plugin: bool = False,
    ) -> int:
        position = len(self.tabs)
        self.tabs.append(SimulatedTab(name=name or f"Tab #{position + 1}"))
        if with_plugin:
            self.new_pane(position, "mode-keeper", plugin=True)
        for title in titles:
            self.new_pane(position, title)
        for title in floating:
            self.new_pane(position, title, floating=True)
        if len(self.tabs) == 1:
            self.active_tab = 0
        return position

    def new_pane(
        self,
        position: int,
        title: str,
        *,
        floating: bool = False,
        plugin: bool = False,
    ) -> PaneInfo:
        tab = self._tab(position)
        pane = PaneInfo(
            id=self._next_pane_id,
            title=title,
            is_plugin=plugin,
            is_floating=floating,
        )
        self._next_pane_id += 1
        tab.panes.append(pane)
        if tab.focused is None and not plugin:
            tab.focused = pane.id
        return pane

    def close_pane(self, pane_id: int) -> None:
        position, pane = self._locate(pane_id)
        if pane is None:
            raise KeyError(f"Unknown pane {pane_id}")
        tab = self.tabs[position]
        tab.panes.remove(pane)
        if tab.focused == pane_id:
            remaining = [p.id for p in tab.panes if not p.is_plugin]
            tab.focused = remaining[0] if remaining else None

    def close_tab(self, position: int) -> None:
        """Remove a tab; later tabs shift down one position."""

        self._tab(position)
        del self.tabs[position]
        if self.active_tab >= len(self.tabs):
            self.active_tab = max(len(self.tabs) - 1, 0)

    def focus(self, pane_id: int) -> None:
        position, pane = self._locate(pane_id)
        if pane is None:
            raise KeyError(f"Unknown pane {pane_id}")
        self.tabs[position].focused = pane_id
        self.active_tab = position

    def tab_infos(self) -> Tuple[TabInfo, ...]:
        return tuple(
            TabInfo(position=pos, active=pos == self.active_tab, name=tab.name)
            for pos, tab in enumerate(self.tabs)
        )

    def manifest(self) -> PaneManifest:
        return PaneManifest(
            tuple(
                (
                    pos,
                    tuple(
                        replace(pane, is_focused=pane.id == tab.focused)
                        for pane in tab.panes
                    ),
                )
                for pos, tab in enumerate(self.tabs)
            )
        )

    def publish(self) -> None:
        self._outbox.append(TabUpdate(self.tab_infos()))
        self._outbox.append(PaneUpdate(self.manifest()))

    def pending(self) -> int:
        return len(self._outbox)

    def pump(self) -> bool:
        """Deliver queued events; return ``True`` if any asked for a render."""

        if self._sink is None:
            raise RuntimeError("SimulatedSession has no plugin attached")
        needs_render = False
        while self._outbox:
            event = self._outbox.popleft()
            needs_render = self._sink(event) or needs_render
        return needs_render

    # -- host services requested by the plugin ----------------------------

    def switch_to_input_mode(self, mode: InputMode) -> None:
        super().switch_to_input_mode(mode)
        self.input_mode = mode

    def focus_terminal_pane(
        self, pane_id: int, move_floating_to_front: bool = True
    ) -> None:
        super().focus_terminal_pane(pane_id, move_floating_to_front)
        _, pane = self._locate(pane_id)
        if pane is None:
            telemetry.record_event(
                "host.focus_ignored",
                level="warning",
                data={"pane": pane_id},
                logger_name="mode_keeper.host",
            )
            return
        self.focus(pane_id)
        self.publish()

    def go_to_tab(self, position: int) -> None:
        super().go_to_tab(position)
        if not 0 <= position < len(self.tabs):
            telemetry.record_event(
                "host.go_to_tab_ignored",
                level="warning",
                data={"tab": position},
                logger_name="mode_keeper.host",
            )
            return
        self.active_tab = position
        self.publish()

    # -- helpers ------------------------------------------------------------

    def _tab(self, position: int) -> SimulatedTab:
        if not 0 <= position < len(self.tabs):
            raise KeyError(f"Unknown tab position {position}")
        return self.tabs[position]

    def _locate(self, pane_id: int) -> Tuple[int, Optional[PaneInfo]]:
        for pos, tab in enumerate(self.tabs):
            for pane in tab.panes:
                if pane.id == pane_id:
                    return pos, pane
        return -1, None


__all__ = ["SimulatedSession", "SimulatedTab", "EventSink"]
