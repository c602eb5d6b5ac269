"""Per-tab and per-pane input mode keeper for terminal multiplexer hosts."""

__all__ = [
    "actions",
    "adapters",
    "events",
    "host",
    "keymaps",
    "manifest",
    "modes",
    "navigation",
    "plugin",
    "runtime",
]

__version__ = "0.1.0"
