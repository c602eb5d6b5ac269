"""Plain-text rendering of the flattened navigation list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from mode_keeper.manifest import ManifestCache
from mode_keeper.modes import ModeOverrideStore, mode_indicator
from mode_keeper.navigation import NavigationView, NavItem

SELECTED_MARKER = "> "
UNSELECTED_MARKER = "  "


@dataclass(frozen=True, slots=True)
class RenderedLine:
    text: str
    item: NavItem
    selected: bool


def tab_label(cache: ManifestCache, position: int) -> str:
    return cache.tab_name(position) or f"Tab {position + 1}"


def format_item(
    item: NavItem,
    *,
    selected: bool,
    modes: ModeOverrideStore,
    cache: ManifestCache,
) -> str:
    marker = SELECTED_MARKER if selected else UNSELECTED_MARKER
    if item.pane is None:
        mode = modes.get_tab_mode(item.tab_position)
        return f"{marker}{tab_label(cache, item.tab_position)} M: {mode_indicator(mode)}"
    mode = modes.get_pane_mode(item.tab_position, item.pane.id)
    return f"{marker}  {item.pane.title} {item.pane.id} M: {mode_indicator(mode)}"


def render_rows(
    view: NavigationView, modes: ModeOverrideStore, cache: ManifestCache
) -> List[RenderedLine]:
    rows: List[RenderedLine] = []
    for item in view.items:
        selected = view.is_selected(item)
        text = format_item(item, selected=selected, modes=modes, cache=cache)
        rows.append(RenderedLine(text=text, item=item, selected=selected))
    return rows


__all__ = [
    "RenderedLine",
    "SELECTED_MARKER",
    "UNSELECTED_MARKER",
    "format_item",
    "render_rows",
    "tab_label",
]
