"""Executable Textual app that hosts the plugin against a fake session."""

from __future__ import annotations

import argparse
import os
from typing import List, Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use mode_keeper.adapters.textual.app"
    ) from exc

from mode_keeper.host import SimulatedSession
from mode_keeper.plugin import EventDispatcher, RenderedLine
from mode_keeper.runtime import telemetry

from .controller import TextualPluginAdapter, TextualUIHooks

ORANGE = "#d75f00"
CYAN = "#00ffff"


def build_session(tabs: int, panes_per_tab: int) -> SimulatedSession:
    session = SimulatedSession()
    for index in range(max(tabs, 1)):
        titles = [f"shell {index + 1}.{n + 1}" for n in range(panes_per_tab)]
        session.new_tab(
            f"Tab #{index + 1}",
            titles,
            floating=("scratch",) if index == 0 else (),
            with_plugin=index == 0,
        )
    return session


def style_rows(rows: List[RenderedLine]) -> Text:
    text = Text()
    for row in rows:
        color = ORANGE if row.selected else CYAN
        style = f"bold {color}" if row.selected or row.item.pane is None else color
        text.append(row.text, style=style)
        text.append("\n")
    return text


class ModeKeeperApp(App[None]):
    """Minimal Textual UI embedding the plugin."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#plugin-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#log-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
        ("ctrl+n", "new_pane", "New pane"),
        ("ctrl+t", "new_tab", "New tab"),
        ("ctrl+w", "close_pane", "Close pane"),
    ]

    def __init__(self, *, tabs: int = 2, panes_per_tab: int = 2) -> None:
        super().__init__()
        self.session = build_session(tabs, panes_per_tab)
        self.adapter: TextualPluginAdapter | None = None
        self._view_widget: Static | None = None
        self._status_widget: Static | None = None
        self._log_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="plugin-area"):
            self._view_widget = Static("", id="plugin-view")
            yield self._view_widget
        self._status_widget = Static("", id="status-line", markup=False)
        self._log_widget = Static("", id="log-line", markup=False)
        yield self._status_widget
        yield self._log_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_view=self._update_view,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.adapter = TextualPluginAdapter(
            EventDispatcher(self.session), self.session, hooks
        )

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        if event.key.startswith("ctrl+"):
            return
        self.adapter.handle_textual_key(event.key, text=event.character)
        event.stop()

    def action_new_pane(self) -> None:
        active = self.session.active_tab
        count = len(self.session.tabs[active].panes) + 1
        self.session.new_pane(active, f"shell {active + 1}.{count}")
        self._resync()

    def action_new_tab(self) -> None:
        position = self.session.new_tab("", ["shell"])
        self.session.active_tab = position
        self._resync()

    def action_close_pane(self) -> None:
        tab = self.session.tabs[self.session.active_tab]
        if tab.focused is not None:
            self.session.close_pane(tab.focused)
            self._resync()

    def _resync(self) -> None:
        if self.adapter:
            self.adapter.sync()

    def _update_view(self, rows: List[RenderedLine]) -> None:
        if self._view_widget:
            self._view_widget.update(style_rows(rows))

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _log_line(self, line: str) -> None:
        if self._log_widget:
            self._log_widget.update(line)


def _env_int(key: str, fallback: int) -> int:
    value = os.environ.get(key)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the mode-keeper Textual demo.")
    parser.add_argument(
        "--tabs",
        type=int,
        default=_env_int("MODE_KEEPER_DEMO_TABS", 2),
        help="Number of tabs in the simulated session (default: 2)",
    )
    parser.add_argument(
        "--panes-per-tab",
        type=int,
        default=_env_int("MODE_KEEPER_DEMO_PANES", 2),
        help="Terminal panes created in each tab (default: 2)",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default="production",
        help="telelog preset; 'production' keeps logs off the terminal",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    app = ModeKeeperApp(tabs=args.tabs, panes_per_tab=args.panes_per_tab)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
