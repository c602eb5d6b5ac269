"""Requests the plugin may issue to its host.

Every call is fire-and-forget. Nothing is returned to the plugin; any
effect comes back later as a ``TabUpdate`` or ``PaneUpdate``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Sequence, Tuple

from mode_keeper.modes import InputMode


class PermissionType(str, Enum):
    READ_APPLICATION_STATE = "ReadApplicationState"
    RUN_COMMANDS = "RunCommands"
    CHANGE_APPLICATION_STATE = "ChangeApplicationState"


class EventType(str, Enum):
    PANE_UPDATE = "PaneUpdate"
    TAB_UPDATE = "TabUpdate"
    KEY = "Key"


@dataclass(frozen=True, slots=True)
class HostCall:
    """Record of one outbound request, used by recording hosts."""

    name: str
    args: Tuple[object, ...] = ()


class Host(Protocol):
    """Protocol describing the host services the plugin relies on."""

    def request_permission(self, permissions: Sequence[PermissionType]) -> None:
        ...

    def subscribe(self, event_types: Sequence[EventType]) -> None:
        ...

    def switch_to_input_mode(self, mode: InputMode) -> None:
        ...

    def focus_terminal_pane(
        self, pane_id: int, move_floating_to_front: bool = True
    ) -> None:
        ...

    def go_to_tab(self, position: int) -> None:
        ...


__all__ = ["EventType", "Host", "HostCall", "PermissionType"]
