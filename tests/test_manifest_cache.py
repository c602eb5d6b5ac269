from __future__ import annotations

from mode_keeper.manifest import ManifestCache, PaneInfo, PaneManifest, TabInfo


def make_pane(pane_id: int, **kwargs: object) -> PaneInfo:
    return PaneInfo(id=pane_id, title=f"pane-{pane_id}", **kwargs)  # type: ignore[arg-type]


def test_eligible_panes_exclude_plugins_only() -> None:
    cache = ManifestCache()
    cache.replace(
        {
            0: [
                make_pane(1, is_plugin=True),
                make_pane(2),
                make_pane(3, is_floating=True),
            ]
        }
    )

    assert [p.id for p in cache.eligible_panes(0)] == [2, 3]
    assert [p.id for p in cache.navigable_panes(0)] == [2]


def test_focused_pane_id() -> None:
    cache = ManifestCache()
    cache.replace({0: [make_pane(1), make_pane(2, is_focused=True)], 1: [make_pane(3)]})

    assert cache.focused_pane_id(0) == 2
    assert cache.focused_pane_id(1) is None
    assert cache.focused_pane_id(9) is None


def test_replace_is_wholesale() -> None:
    cache = ManifestCache()
    cache.replace({0: [make_pane(1)], 1: [make_pane(2)]})

    cache.replace(PaneManifest.from_mapping({3: [make_pane(5)]}))

    assert cache.positions == (3,)
    assert cache.panes(0) == ()
    assert cache.revision() == 2


def test_tab_names_come_from_tab_updates() -> None:
    cache = ManifestCache()

    cache.remember_tabs((TabInfo(0, True, "editor"), TabInfo(1, False, "")))

    assert cache.tab_name(0) == "editor"
    assert cache.tab_name(1) is None
