"""Main Textual app class."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.widgets import Header, Static

from dressings.config import resolve_debug_log_path
from dressings.index import DressingIndex, filter_options, initialize
from dressings.models import DressingOption
from dressings.navigation import Navigator
from dressings.rendering import build_detail

SEARCH_PLACEHOLDER = "Select a dressing…"
NO_RESULTS = "No options found."


class DressingApp(App):
    """Search dressings and browse the salads, bowls and dressings that use them."""

    TITLE = "Dressing Finder"
    SUB_TITLE = "Salads / Bowls"

    CSS = """
    Screen {
        layout: vertical;
    }

    #search-pane {
        height: 1fr;
        border: round $secondary;
        padding: 1;
    }

    #search-bar {
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
        height: auto;
    }

    #results {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #detail-pane {
        height: 1fr;
        border: round $primary;
        padding: 1 2;
        overflow-y: auto;
    }

    #detail-help {
        margin-top: 1;
        color: $text-muted;
    }
    """

    search_text = reactive("")
    selected_index = reactive(0)
    link_index = reactive(0)

    BINDINGS = [
        Binding("tab", "cycle(1)", "Next", priority=True),
        ("up", "cycle(-1)", "Previous"),
        ("down", "cycle(1)", "Next"),
        ("enter", "confirm", "Open"),
        ("backspace", "backspace", "Delete / Back"),
        ("escape", "escape", "Clear / Back"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, index: DressingIndex | None = None, debug_log_path: Path | None = None) -> None:
        super().__init__()
        self._debug_log_path = debug_log_path or resolve_debug_log_path()
        self.index = index if index is not None else initialize()
        self.navigator = Navigator(known=self.index.by_name)
        self.system_status = ""
        self._log_debug(f"app_init dressings={len(self.index.by_name)} options={len(self.index.options)}")

    def _log_debug(self, message: str) -> None:
        try:
            ts = datetime.now(timezone.utc).isoformat()
            self._debug_log_path.parent.mkdir(parents=True, exist_ok=True)
            with self._debug_log_path.open("a", encoding="utf-8") as fh:
                fh.write(f"{ts} {message}\n")
        except Exception:
            # Logging must never interfere with app flow.
            return

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="search-pane"):
            yield Static(id="search-bar")
            yield Static(id="results")
        with Vertical(id="detail-pane"):
            yield Static(id="detail")
            yield Static(id="detail-help")

    def on_mount(self) -> None:
        unused = [dressing.name for dressing in self.index.unused]
        if unused:
            self._log_debug(f"unused_dressings names={unused!r}")
            self.notify(", ".join(unused), title="Unused dressings", severity="warning")
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        if not self.navigator.state.is_browsing:
            if event.character == "j":
                self.action_cycle(1)
                event.stop()
            elif event.character == "k":
                self.action_cycle(-1)
                event.stop()
            return

        if not event.is_printable or not event.character:
            return

        self.search_text += event.character
        self.selected_index = 0
        self._refresh_search()
        event.stop()

    def action_cycle(self, delta: int) -> None:
        if self.navigator.state.is_browsing:
            results = self._filtered_results()
            if not results:
                self.selected_index = 0
            else:
                self.selected_index = (self.selected_index + delta) % len(results)
            self._refresh_results(results)
            return

        links = self._detail_links()
        if not links:
            return
        self.link_index = (self.link_index + delta) % len(links)
        self._refresh_detail()

    def action_confirm(self) -> None:
        if self.navigator.state.is_browsing:
            results = self._filtered_results()
            if not results:
                return
            if self.selected_index >= len(results):
                self.selected_index = 0
            self.open_dressing(results[self.selected_index].value)
            return

        links = self._detail_links()
        if not links:
            return
        self.open_dressing(links[min(self.link_index, len(links) - 1)])

    def action_backspace(self) -> None:
        if not self.navigator.state.is_browsing:
            self.go_back()
            return
        if not self.search_text:
            return
        self.search_text = self.search_text[:-1]
        self.selected_index = 0
        self._refresh_search()

    def action_escape(self) -> None:
        if not self.navigator.state.is_browsing:
            self.go_back()
            return
        if not self.search_text:
            return
        self.search_text = ""
        self.selected_index = 0
        self._refresh_search()

    def open_dressing(self, name: str) -> None:
        """Show a dressing, pushing the current one onto the back-stack."""
        if self.navigator.select(name):
            self.system_status = ""
            self._log_debug(f"select name={name!r} history={list(self.navigator.state.history)!r}")
        else:
            self.system_status = f"No such dressing: {name}"
            self._log_debug(f"lookup_miss name={name!r}")
        self.search_text = ""
        self.selected_index = 0
        self.link_index = 0
        self._refresh_all()

    def go_back(self) -> None:
        self.navigator.back()
        self._log_debug(f"back current={self.navigator.current!r}")
        self.link_index = 0
        self._refresh_all()

    def _filtered_results(self) -> list[DressingOption]:
        return filter_options(self.index.options, self.search_text)

    def _detail_links(self) -> list[str]:
        current = self.navigator.current
        if current is None:
            return []
        dressing = self.index.find(current)
        entry = self.index.usage_for(current)
        if dressing is None or entry is None:
            return []
        _, links = build_detail(dressing, entry, self.index.by_name)
        return links

    def _refresh_all(self) -> None:
        try:
            search_pane = self.query_one("#search-pane", Vertical)
            detail_pane = self.query_one("#detail-pane", Vertical)
        except NoMatches:
            return

        browsing = self.navigator.state.is_browsing
        search_pane.display = browsing
        detail_pane.display = not browsing
        if browsing:
            self._refresh_search()
        else:
            self._refresh_detail()

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            half = rows // 2
            start = selected - half
            start = max(0, start)
            start = min(start, total - rows)

        return (start, start + rows)

    def _refresh_search(self) -> None:
        self._refresh_search_bar()
        self._refresh_results(self._filtered_results())

    def _refresh_search_bar(self) -> None:
        bar = self.query_one("#search-bar", Static)
        text = Text()
        if self.search_text:
            text.append(f"{self.search_text}|")
        else:
            text.append(SEARCH_PLACEHOLDER, style="dim")
        if self.system_status:
            text.append(f"\n{self.system_status}", style="#ffb3b3")
        bar.update(text)

    def _refresh_results(self, results: list[DressingOption]) -> None:
        results_widget = self.query_one("#results", Static)
        if not results:
            results_widget.update(NO_RESULTS)
            return

        if self.selected_index >= len(results):
            self.selected_index = 0

        visible_rows = self._visible_rows(results_widget)
        start, end = self._window_bounds(len(results), visible_rows, self.selected_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            pointer = "➤ " if idx == self.selected_index else "  "
            lines.append(f"{pointer}{results[idx].label}", style="bold" if idx == self.selected_index else "")

        if end < len(results):
            lines.append("\n⋮", style="dim")

        results_widget.update(lines)

    def _refresh_detail(self) -> None:
        current = self.navigator.current
        dressing = self.index.find(current) if current is not None else None
        entry = self.index.usage_for(current) if current is not None else None
        if dressing is None or entry is None:
            self.system_status = f"No such dressing: {current}"
            self._log_debug(f"lookup_miss name={current!r}")
            self.navigator.reset()
            self._refresh_all()
            return

        _, links = build_detail(dressing, entry, self.index.by_name)
        if self.link_index >= len(links):
            self.link_index = 0
        content, _ = build_detail(dressing, entry, self.index.by_name, cursor=self.link_index if links else None)
        self.query_one("#detail", Static).update(content)

        history = self.navigator.state.history
        back_target = f"{history[-1]} Dressing" if history else "search"
        self.query_one("#detail-help", Static).update(
            f"J/K/↑/↓ move, Enter open link, Esc/Backspace back to {back_target}"
        )
