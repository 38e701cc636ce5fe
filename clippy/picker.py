"""Interactive fuzzy picker over pins and history."""

from __future__ import annotations

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Input, OptionList, Static
from textual.widgets.option_list import Option

from ._utils import format_timestamp, preview_text
from .manager import ClipboardManager
from .models import ImageRecord, Record
from .search import SearchHit

PICKER_CSS = """
#picker-modal {
    padding: 0 1;
}
#picker-title {
    color: $text-muted;
    height: 1;
}
#picker-results {
    height: 1fr;
}
"""


def _option_prompt(hit: SearchHit) -> Text:
    record = hit.record
    text = Text()
    if hit.pinned:
        text.append("pin ", style="bold yellow")
        if record.label:
            text.append(f"{{{record.label}}} ", style="yellow")
    if isinstance(record, ImageRecord):
        text.append("img ", style="bold cyan")
    text.append(preview_text(record.content))
    text.append(f"  {format_timestamp(record.created_at)}", style="dim")
    return text


class ClipboardPicker(App[Record | None]):
    """Type to filter, Enter selects, Escape cancels.

    Exits with the selected record (or ``None``).
    """

    CSS = PICKER_CSS
    BINDINGS = [
        Binding("escape", "cancel", show=False),
        Binding("down", "cursor_down", show=False),
        Binding("up", "cursor_up", show=False),
    ]

    def __init__(self, manager: ClipboardManager) -> None:
        super().__init__()
        self._manager = manager
        self._hits: list[SearchHit] = []

    def compose(self) -> ComposeResult:
        with Vertical(id="picker-modal"):
            yield Static(
                "Clipboard  [dim](type to filter, Enter selects, Esc cancels)[/]",
                id="picker-title",
            )
            yield Input(placeholder="Search…", id="picker-input")
            yield OptionList(id="picker-results")

    def on_mount(self) -> None:
        self._update_results("")
        self.query_one("#picker-input", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "picker-input":
            self._update_results(event.value)

    def _update_results(self, query: str) -> None:
        option_list = self.query_one("#picker-results", OptionList)
        option_list.clear_options()
        self._hits = self._manager.search(query)
        for i, hit in enumerate(self._hits):
            option_list.add_option(Option(_option_prompt(hit), id=str(i)))
        if self._hits:
            option_list.highlighted = 0

    def _select(self, option_id: str | None) -> None:
        if option_id is None:
            return
        self.exit(self._hits[int(option_id)].record)

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self._select(event.option.id)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id != "picker-input":
            return
        option_list = self.query_one("#picker-results", OptionList)
        if option_list.option_count > 0 and option_list.highlighted is not None:
            opt = option_list.get_option_at_index(option_list.highlighted)
            self._select(opt.id)
        else:
            self.exit(None)

    def action_cursor_down(self) -> None:
        self.query_one("#picker-results", OptionList).action_cursor_down()

    def action_cursor_up(self) -> None:
        self.query_one("#picker-results", OptionList).action_cursor_up()

    def action_cancel(self) -> None:
        self.exit(None)


def run_picker(manager: ClipboardManager) -> Record | None:
    """Show the picker and return the chosen record."""
    return ClipboardPicker(manager).run()
