"""UI-agnostic bridge between a simulated session, the plugin and widgets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional

from mode_keeper.events import Event, Key, PipeMessage
from mode_keeper.host import SimulatedSession
from mode_keeper.keymaps import KEY_ENTER
from mode_keeper.plugin import EventDispatcher, RenderedLine


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_view: Callable[[List[RenderedLine]], None]
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class TextualPluginAdapter:
    """Drives one plugin instance against a ``SimulatedSession``."""

    def __init__(
        self,
        dispatcher: EventDispatcher,
        session: SimulatedSession,
        hooks: TextualUIHooks,
        *,
        configuration: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.dispatcher = dispatcher
        self.session = session
        self.hooks = hooks
        session.attach(self._deliver)
        dispatcher.load(configuration or {})
        session.publish()
        self.sync()

    def handle_textual_key(self, key: str, *, text: Optional[str] = None) -> bool:
        """Translate a Textual key name into a plugin ``Key`` and dispatch it."""

        char = KEY_ENTER if key in {"enter", "return"} else (text or key)
        self._log_state("key ->", key=key, char=char)
        needs_render = self._deliver(Key(char))
        # Requests issued by the handler come back as fresh updates.
        needs_render = self.session.pump() or needs_render
        if needs_render:
            self._refresh_view()
        self._refresh_status()
        return needs_render

    def handle_pipe(self, name: str, payload: Optional[str] = None) -> bool:
        return self.dispatcher.pipe(PipeMessage(name=name, payload=payload))

    def sync(self) -> bool:
        """Publish host state and redraw; used after host-side changes."""

        if not self.session.pending():
            self.session.publish()
        needs_render = self.session.pump()
        self._refresh_view()
        self._refresh_status()
        return needs_render

    def _deliver(self, event: Event) -> bool:
        result = self.dispatcher.update(event)
        self._log_state("event ->", event=type(event).__name__, render=result)
        return result

    def _refresh_view(self) -> None:
        self.hooks.update_view(self.dispatcher.render_rows())

    def _refresh_status(self) -> None:
        state = self.dispatcher.state
        self.hooks.update_status(
            f"mode={self.session.input_mode.value} tab={state.active_tab + 1} "
            f"item={state.navigation.active_item + 1}/{state.navigation.items_count}"
        )

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        state = self.dispatcher.state
        return {
            "active_tab": state.active_tab,
            "cursor": state.navigation.active_item,
            "selection": state.navigation.selection,
            "host_mode": self.session.input_mode.value,
        }


__all__ = ["TextualPluginAdapter", "TextualUIHooks"]
