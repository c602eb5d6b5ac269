"""Textual adapter: controller hooks plus a runnable demo app."""

from .controller import TextualPluginAdapter, TextualUIHooks

__all__ = ["TextualPluginAdapter", "TextualUIHooks"]
