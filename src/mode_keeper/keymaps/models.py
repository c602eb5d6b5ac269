"""Dataclasses describing key bindings and action metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Mapping

KEY_ENTER = "\n"

_KEY_ALIASES = {
    "enter": KEY_ENTER,
    "return": KEY_ENTER,
    "<cr>": KEY_ENTER,
    "\r": KEY_ENTER,
}


def normalize_key(key: str) -> str:
    """Map host spellings of the same key onto one token."""

    if len(key) > 1 or key == "\r":
        return _KEY_ALIASES.get(key.lower(), key)
    return key


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single character key press as delivered by the host."""

    key: str

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "key", normalize_key(self.key))

    @property
    def token(self) -> str:
        return "ENTER" if self.key == KEY_ENTER else self.key


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata used during binding execution."""

    id: str
    handler: Callable[..., bool]
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def __call__(self, *args: object, **kwargs: object) -> bool:
        return bool(self.handler(*args, **kwargs))


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a key with an action."""

    id: str
    stroke: KeyStroke
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")
        if isinstance(self.stroke, str):
            object.__setattr__(self, "stroke", KeyStroke(self.stroke))

    @property
    def key_signature(self) -> str:
        return self.stroke.key


__all__ = [
    "KEY_ENTER",
    "KeyStroke",
    "ActionRef",
    "Binding",
    "normalize_key",
]
