"""Cursor state plus the flattened list it points into.

The list is never stored. ``NavigationState.rebuild`` derives it from the
manifest every time, so selection can't go stale between a manifest change
and a key press.

Ordering of the flattened list:

1. the active tab header, then its navigable panes;
2. every other tab in manifest order, header first, then its panes.

The active tab header is listed but takes no cursor position. Headers of
the other tabs do.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Optional, Tuple

from mode_keeper.manifest import ManifestCache, PaneInfo
from mode_keeper.runtime import telemetry


@dataclass(frozen=True, slots=True)
class Selection:
    """What the cursor points at: a tab header or a pane inside a tab."""

    tab_position: int
    pane_id: Optional[int] = None

    @property
    def is_header(self) -> bool:
        return self.pane_id is None


@dataclass(frozen=True, slots=True)
class NavItem:
    """Single row of the flattened list."""

    kind: Literal["header", "pane"]
    tab_position: int
    pane: Optional[PaneInfo] = None
    index: Optional[int] = None  # cursor position, None when not selectable

    @property
    def selection(self) -> Selection:
        pane_id = self.pane.id if self.pane is not None else None
        return Selection(self.tab_position, pane_id)


@dataclass(frozen=True, slots=True)
class NavigationView:
    """Result of one rebuild pass."""

    items: Tuple[NavItem, ...]
    items_count: int
    active_item: int
    selection: Optional[Selection]

    def is_selected(self, item: NavItem) -> bool:
        return item.index is not None and item.index == self.active_item


def _build_items(cache: ManifestCache, active_tab: int) -> Tuple[List[NavItem], int]:
    items: List[NavItem] = [NavItem("header", active_tab)]
    counter = 0
    for pane in cache.navigable_panes(active_tab):
        items.append(NavItem("pane", active_tab, pane, counter))
        counter += 1

    for pos in cache.positions:
        if pos == active_tab:
            continue
        items.append(NavItem("header", pos, None, counter))
        counter += 1
        for pane in cache.navigable_panes(pos):
            items.append(NavItem("pane", pos, pane, counter))
            counter += 1
    return items, counter


class NavigationState:
    """Tracks ``active_item`` against a list rebuilt on demand."""

    def __init__(self) -> None:
        self.active_item = 0
        self.items_count = 0
        self.selection: Optional[Selection] = None

    def rebuild(self, cache: ManifestCache, active_tab: int) -> NavigationView:
        items, count = _build_items(cache, active_tab)
        self.items_count = count
        # The list may have shrunk since the cursor last moved.
        if self.active_item >= count:
            self.active_item = max(count - 1, 0)

        self.selection = None
        for item in items:
            if item.index is not None and item.index == self.active_item:
                self.selection = item.selection
                break

        return NavigationView(
            items=tuple(items),
            items_count=count,
            active_item=self.active_item,
            selection=self.selection,
        )

    def move_next(self) -> None:
        self._step(1)

    def move_prev(self) -> None:
        self._step(-1)

    def _step(self, delta: int) -> None:
        if self.items_count == 0:
            return
        previous = self.active_item
        self.active_item = (self.active_item + delta + self.items_count) % self.items_count
        telemetry.record_event(
            "navigation.move",
            level="debug",
            data={"from": previous, "to": self.active_item, "count": self.items_count},
            logger_name="mode_keeper.navigation",
        )


__all__ = ["NavigationState", "NavigationView", "NavItem", "Selection"]
