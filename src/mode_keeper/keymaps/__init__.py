"""Declarative key bindings for the plugin's single-key commands."""

from .models import KEY_ENTER, ActionRef, Binding, KeyStroke, normalize_key
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .defaults import DEFAULT_ACTIONS, DEFAULT_BINDINGS, load_default_keymaps

__all__ = [
    "KEY_ENTER",
    "ActionRef",
    "Binding",
    "KeyStroke",
    "normalize_key",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "load_default_keymaps",
]
