from __future__ import annotations

from typing import Dict, Sequence

from mode_keeper.manifest import ManifestCache, PaneInfo
from mode_keeper.navigation import NavigationState, Selection


def make_pane(pane_id: int, title: str = "", **kwargs: object) -> PaneInfo:
    return PaneInfo(id=pane_id, title=title or f"pane-{pane_id}", **kwargs)  # type: ignore[arg-type]


def make_cache(mapping: Dict[int, Sequence[PaneInfo]]) -> ManifestCache:
    cache = ManifestCache()
    cache.replace(mapping)
    return cache


def test_initial_selection_is_first_pane_of_active_tab() -> None:
    cache = make_cache({0: [make_pane(10, "A"), make_pane(20, "B")]})
    nav = NavigationState()

    view = nav.rebuild(cache, 0)

    assert view.items_count == 2
    assert view.selection == Selection(0, 10)


def test_next_moves_to_following_pane() -> None:
    cache = make_cache({0: [make_pane(10, "A"), make_pane(20, "B")]})
    nav = NavigationState()
    nav.rebuild(cache, 0)

    nav.move_next()
    view = nav.rebuild(cache, 0)

    assert view.selection == Selection(0, 20)


def test_active_header_is_not_counted_current_behavior() -> None:
    cache = make_cache({0: [make_pane(10)], 1: [make_pane(30)]})
    nav = NavigationState()

    view = nav.rebuild(cache, 0)

    assert [(item.kind, item.tab_position, item.index) for item in view.items] == [
        ("header", 0, None),
        ("pane", 0, 0),
        ("header", 1, 1),
        ("pane", 1, 2),
    ]
    assert view.items_count == 3


def test_other_tab_header_is_selectable() -> None:
    cache = make_cache({0: [make_pane(10)], 1: [make_pane(30)]})
    nav = NavigationState()
    nav.rebuild(cache, 0)

    nav.move_next()
    view = nav.rebuild(cache, 0)

    assert view.selection == Selection(1, None)
    assert view.selection.is_header


def test_active_tab_comes_first_then_manifest_order() -> None:
    cache = make_cache({2: [make_pane(40)], 0: [make_pane(10)], 1: []})
    nav = NavigationState()

    view = nav.rebuild(cache, 1)

    assert [(item.kind, item.tab_position) for item in view.items] == [
        ("header", 1),
        ("header", 2),
        ("pane", 2),
        ("header", 0),
        ("pane", 0),
    ]


def test_plugin_and_floating_panes_are_not_listed() -> None:
    cache = make_cache(
        {
            0: [
                make_pane(1, is_plugin=True),
                make_pane(2),
                make_pane(3, is_floating=True),
            ]
        }
    )
    nav = NavigationState()

    view = nav.rebuild(cache, 0)

    assert view.items_count == 1
    assert [item.pane.id for item in view.items if item.pane] == [2]


def test_cycling_returns_to_start() -> None:
    cache = make_cache({0: [make_pane(1), make_pane(2)], 1: [make_pane(3)]})
    nav = NavigationState()
    view = nav.rebuild(cache, 0)
    count = view.items_count
    nav.move_next()
    start = nav.active_item

    for _ in range(count):
        nav.move_next()

    assert nav.active_item == start


def test_next_then_prev_is_identity() -> None:
    cache = make_cache({0: [make_pane(1), make_pane(2), make_pane(3)]})
    nav = NavigationState()
    nav.rebuild(cache, 0)

    for start in range(3):
        nav.active_item = start
        nav.move_next()
        nav.move_prev()
        assert nav.active_item == start


def test_prev_wraps_to_last_item() -> None:
    cache = make_cache({0: [make_pane(1), make_pane(2), make_pane(3)]})
    nav = NavigationState()
    nav.rebuild(cache, 0)

    nav.move_prev()

    assert nav.active_item == 2


def test_empty_list_makes_movement_a_noop() -> None:
    cache = make_cache({0: [make_pane(1, is_plugin=True)]})
    nav = NavigationState()

    view = nav.rebuild(cache, 0)
    nav.move_next()
    nav.move_prev()

    assert view.items_count == 0
    assert view.selection is None
    assert nav.active_item == 0


def test_cursor_is_clamped_when_list_shrinks() -> None:
    nav = NavigationState()
    nav.rebuild(make_cache({0: [make_pane(1), make_pane(2), make_pane(3)]}), 0)
    nav.active_item = 2

    view = nav.rebuild(make_cache({0: [make_pane(1)]}), 0)

    assert view.active_item == 0
    assert view.selection == Selection(0, 1)


def test_cursor_resets_when_list_empties() -> None:
    nav = NavigationState()
    nav.rebuild(make_cache({0: [make_pane(1), make_pane(2)]}), 0)
    nav.active_item = 1

    view = nav.rebuild(make_cache({}), 0)

    assert view.items_count == 0
    assert nav.active_item == 0
