import pytest

from mode_keeper.keymaps import (
    KEY_ENTER,
    ActionRef,
    Binding,
    KeymapConflictError,
    KeymapRegistry,
    KeyStroke,
    load_default_keymaps,
)


def make_action(action_id: str = "test.action") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: True)


def make_binding(
    *, binding_id: str, key: str = "x", action_id: str = "test.action"
) -> Binding:
    return Binding(id=binding_id, stroke=KeyStroke(key), action_id=action_id)


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="test.x")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings()) == [binding]
    assert registry.resolve("x") is registry.get_action("test.action")


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="first"))

    with pytest.raises(KeymapConflictError):
        registry.register_binding(make_binding(binding_id="second"))


def test_register_binding_with_replace_takes_over_key() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="first"))
    second = make_binding(binding_id="second")

    registry.register_binding(second, replace=True)

    assert list(registry.iter_bindings()) == [second]


def test_register_binding_unknown_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="orphan"))


def test_register_action_twice_requires_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    with pytest.raises(ValueError):
        registry.register_action(make_action())


def test_unregister_binding_frees_key() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="binding")
    registry.register_binding(binding)
    before = registry.revision()

    removed = registry.unregister_binding("binding")

    assert removed == binding
    assert registry.resolve("x") is None
    assert registry.revision() == before + 1


def test_default_keymaps_cover_plugin_keys() -> None:
    registry = load_default_keymaps(KeymapRegistry())

    assert registry.resolve("j").id == "navigation.next"
    assert registry.resolve("k").id == "navigation.prev"
    assert registry.resolve("L").id == "modes.lock"
    assert registry.resolve("N").id == "modes.normal"
    assert registry.resolve(KEY_ENTER).id == "navigation.activate"
    assert registry.resolve("l") is None
    assert registry.resolve("n") is None


def test_enter_aliases_resolve_to_same_action() -> None:
    registry = load_default_keymaps(KeymapRegistry())

    for spelling in ("ENTER", "enter", "\r", "<CR>"):
        assert registry.resolve(spelling).id == "navigation.activate"


def test_extra_bindings_replace_defaults() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(
        registry,
        extra_bindings=(Binding("custom.down", KeyStroke("j"), "navigation.prev"),),
    )

    assert registry.resolve("j").id == "navigation.prev"
    assert registry.stats().binding_count == 5


def test_empty_key_rejected() -> None:
    with pytest.raises(ValueError):
        KeyStroke("")
