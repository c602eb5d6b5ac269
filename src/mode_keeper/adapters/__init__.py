"""UI adapters hosting the plugin outside a real terminal multiplexer."""
