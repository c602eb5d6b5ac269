"""Single state aggregate owned by the running plugin instance."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from mode_keeper.manifest import ManifestCache
from mode_keeper.modes import ModeOverrideStore
from mode_keeper.navigation import NavigationState


@dataclass(slots=True)
class PluginState:
    """Everything the plugin remembers between host calls."""

    active_tab: int = 0
    modes: ModeOverrideStore = field(default_factory=ModeOverrideStore)
    manifest: ManifestCache = field(default_factory=ManifestCache)
    navigation: NavigationState = field(default_factory=NavigationState)
    # Host configuration, kept verbatim and never interpreted.
    configuration: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )
    selected_pane_id: Optional[int] = None
