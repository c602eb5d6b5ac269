from __future__ import annotations

import pytest

from mode_keeper.events import Key, PaneUpdate, TabUpdate
from mode_keeper.host import SimulatedSession
from mode_keeper.keymaps import KEY_ENTER
from mode_keeper.modes import InputMode
from mode_keeper.plugin import EventDispatcher


def make_session() -> SimulatedSession:
    session = SimulatedSession()
    session.new_tab("main", ["a", "b"], with_plugin=True)  # ids 1 (plugin), 2, 3
    session.new_tab("logs", ["c"])  # id 4
    return session


def attach_plugin(session: SimulatedSession) -> EventDispatcher:
    dispatcher = EventDispatcher(session)
    session.attach(dispatcher.update)
    dispatcher.load({})
    session.publish()
    session.pump()
    return dispatcher


def test_manifest_reports_focus_per_tab() -> None:
    session = make_session()

    manifest = session.manifest().as_dict()

    assert [p.id for p in manifest[0] if p.is_focused] == [2]
    assert [p.id for p in manifest[1] if p.is_focused] == [4]
    assert manifest[0][0].is_plugin is True


def test_publish_queues_tab_then_pane_update() -> None:
    session = make_session()
    delivered = []
    session.attach(lambda event: delivered.append(event) or False)

    session.publish()
    assert session.pending() == 2
    assert session.pump() is False

    assert [type(e) for e in delivered] == [TabUpdate, PaneUpdate]
    assert session.pending() == 0


def test_pump_without_plugin_raises() -> None:
    session = make_session()
    session.publish()

    with pytest.raises(RuntimeError):
        session.pump()


def test_requests_take_effect_only_after_pump() -> None:
    session = make_session()
    dispatcher = attach_plugin(session)

    for _ in range(3):
        dispatcher.update(Key("j"))
    dispatcher.update(Key("L"))
    dispatcher.update(Key(KEY_ENTER))

    assert dispatcher.state.active_tab == 0
    assert session.active_tab == 1
    assert session.pump() is True
    assert dispatcher.state.active_tab == 1
    assert session.input_mode is InputMode.LOCKED


def test_go_to_tab_switches_to_tab_default() -> None:
    session = make_session()
    dispatcher = attach_plugin(session)
    dispatcher.state.modes.set_tab_mode(1, InputMode.LOCKED)

    dispatcher.update(Key("j"))
    dispatcher.update(Key("j"))
    dispatcher.update(Key(KEY_ENTER))
    session.pump()

    assert session.named("go_to_tab")[0].args == (1,)
    assert session.active_tab == 1
    assert session.input_mode is InputMode.LOCKED


def test_plugin_requests_for_missing_targets_are_ignored() -> None:
    session = make_session()

    session.focus_terminal_pane(99)
    session.go_to_tab(7)

    assert session.active_tab == 0
    assert session.pending() == 0
    assert len(session.calls) == 2


def test_owner_errors_raise() -> None:
    session = make_session()

    with pytest.raises(KeyError):
        session.new_pane(5, "x")
    with pytest.raises(KeyError):
        session.close_pane(99)
    with pytest.raises(KeyError):
        session.focus(99)


def test_close_tab_shifts_positions() -> None:
    session = make_session()
    session.new_tab("extra", ["d"])
    session.active_tab = 2

    session.close_tab(0)

    assert [tab.position for tab in session.tab_infos()] == [0, 1]
    assert [tab.name for tab in session.tab_infos()] == ["logs", "extra"]
    assert session.active_tab == 1


def test_close_pane_moves_focus() -> None:
    session = make_session()

    session.close_pane(2)

    assert session.tabs[0].focused == 3
