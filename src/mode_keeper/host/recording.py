"""Host that only remembers what it was asked to do."""

from __future__ import annotations

from typing import List, Sequence

from mode_keeper.modes import InputMode

from .protocol import EventType, HostCall, PermissionType


class RecordingHost:
    """Collects outbound requests in call order."""

    def __init__(self) -> None:
        self.calls: List[HostCall] = []

    def request_permission(self, permissions: Sequence[PermissionType]) -> None:
        self.calls.append(HostCall("request_permission", tuple(permissions)))

    def subscribe(self, event_types: Sequence[EventType]) -> None:
        self.calls.append(HostCall("subscribe", tuple(event_types)))

    def switch_to_input_mode(self, mode: InputMode) -> None:
        self.calls.append(HostCall("switch_to_input_mode", (mode,)))

    def focus_terminal_pane(
        self, pane_id: int, move_floating_to_front: bool = True
    ) -> None:
        self.calls.append(
            HostCall("focus_terminal_pane", (pane_id, move_floating_to_front))
        )

    def go_to_tab(self, position: int) -> None:
        self.calls.append(HostCall("go_to_tab", (position,)))

    def named(self, name: str) -> List[HostCall]:
        return [call for call in self.calls if call.name == name]

    @property
    def last_mode(self) -> InputMode | None:
        switches = self.named("switch_to_input_mode")
        if not switches:
            return None
        mode = switches[-1].args[0]
        assert isinstance(mode, InputMode)
        return mode

    def clear(self) -> None:
        self.calls.clear()


__all__ = ["RecordingHost"]
