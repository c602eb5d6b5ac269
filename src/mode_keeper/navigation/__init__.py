"""Flattened, cursor-driven view over tabs and their panes."""

from .state import NavigationState, NavigationView, NavItem, Selection

__all__ = [
    "NavigationState",
    "NavigationView",
    "NavItem",
    "Selection",
]
