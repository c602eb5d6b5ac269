"""Plugin entry points: state aggregate, dispatcher and rendering."""

from .dispatcher import DEFAULT_PERMISSIONS, DEFAULT_SUBSCRIPTIONS, EventDispatcher
from .render import RenderedLine, format_item, render_rows
from .state import PluginState

__all__ = [
    "DEFAULT_PERMISSIONS",
    "DEFAULT_SUBSCRIPTIONS",
    "EventDispatcher",
    "PluginState",
    "RenderedLine",
    "format_item",
    "render_rows",
]
