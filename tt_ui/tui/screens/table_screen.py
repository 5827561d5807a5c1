from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from typing import Any, Callable, Generic, Iterable, TypeVar

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.mouse_events import MouseButton, MouseEventType
from prompt_toolkit.mouse_events import MouseEvent as PTMouseEvent
from prompt_toolkit.styles import Style

from tt_common.errors import DisplayError, SamplingError
from tt_ui.tui.core import theme
from tt_ui.tui.core.capabilities import supports_fullscreen_ui
from tt_ui.tui.core.theme import StyleSheet
from tt_ui.tui.system.components.data_table import DataTable
from tt_ui.tui.system.components.table import render_ansi
from tt_ui.tui.system.models import (
    MouseEvent,
    MouseKind,
    Rect,
    RowActivated,
    RowSelected,
    SortToggled,
    Status,
    TableMessage,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

STATUS_BAR_HEIGHT = 1


def translate_mouse_event(event: PTMouseEvent) -> MouseEvent:
    """Map a prompt_toolkit mouse event onto the table's event model."""
    kind = MouseKind.OTHER
    if event.event_type == MouseEventType.SCROLL_UP:
        kind = MouseKind.SCROLL_UP
    elif event.event_type == MouseEventType.SCROLL_DOWN:
        kind = MouseKind.SCROLL_DOWN
    elif (
        event.event_type == MouseEventType.MOUSE_DOWN
        and event.button == MouseButton.LEFT
    ):
        kind = MouseKind.LEFT_DOWN
    return MouseEvent(kind=kind, row=event.position.y, column=event.position.x)


def describe_message(message: TableMessage) -> str:
    if isinstance(message, RowSelected):
        return f"Selected row {message.index + 1}"
    if isinstance(message, RowActivated):
        return f"Activated row {message.index + 1}"
    if isinstance(message, SortToggled):
        return f"Sorted by column {message.column_index + 1}"
    return ""


class _TableControl(FormattedTextControl):
    def __init__(self, screen: "TableScreen[Any]") -> None:
        super().__init__(screen.render_table, focusable=True)
        self._screen = screen

    def mouse_handler(self, mouse_event: PTMouseEvent) -> object:
        status = self._screen.handle_mouse(mouse_event)
        if status is Status.IGNORED:
            return NotImplemented
        return None


class TableScreen(Generic[T]):
    """Full-screen prompt_toolkit host for a single DataTable."""

    def __init__(
        self,
        table: DataTable[T],
        *,
        refresh: Callable[[], Iterable[T]] | None = None,
        interval: float = 1.0,
        stylesheet: StyleSheet | None = None,
        on_message: Callable[[TableMessage], None] | None = None,
    ) -> None:
        self._table = table
        self._refresh = refresh
        self._interval = max(0.1, interval)
        self._stylesheet = stylesheet or StyleSheet()
        self._on_message = on_message
        self._bounds = Rect(0, 0, 0, 0)
        self._last_message = ""
        self._warning: str | None = None

        self.table_control = _TableControl(self)
        self._status_control = FormattedTextControl(self._status_fragments)
        root = HSplit(
            [
                Window(
                    content=self._status_control,
                    height=STATUS_BAR_HEIGHT,
                    style="class:status",
                ),
                Window(self.table_control),
            ]
        )
        self._app: Application[T | None] = Application(
            layout=Layout(root, focused_element=self.table_control),
            key_bindings=self._bindings(),
            style=Style.from_dict(dict(theme.prompt_toolkit_screen_style())),
            full_screen=True,
            mouse_support=True,
        )

    @property
    def table(self) -> DataTable[T]:
        return self._table

    @property
    def bounds(self) -> Rect:
        return self._bounds

    def run(self) -> T | None:
        """Run until the user quits; returns the item selected at exit."""
        if not supports_fullscreen_ui():
            raise DisplayError("The interactive table needs a terminal (TTY).")
        return self._app.run(pre_run=self._start_refresh)

    def pull(self) -> None:
        """Fetch fresh items from the refresh callable."""
        if self._refresh is None:
            return
        try:
            items = list(self._refresh())
        except SamplingError as exc:
            logger.warning("Keeping previous rows: %s", exc)
            self._warning = str(exc)
            return
        self._warning = None
        self._table.set_data(items)

    def resize(self, width: int, height: int) -> Rect:
        """Recompute the table bounds for a terminal of the given size."""
        self._bounds = Rect(0, 0, max(0, width), max(0, height - STATUS_BAR_HEIGHT))
        return self._bounds

    def render_table(self) -> ANSI:
        size = self._app.output.get_size()
        bounds = self.resize(size.columns, size.rows)
        drawn = self._table.draw(bounds)
        return ANSI(
            render_ansi(
                replace(drawn, title=None),
                width=bounds.width,
                height=bounds.height,
                stylesheet=self._stylesheet,
            )
        )

    def handle_mouse(self, mouse_event: PTMouseEvent) -> Status:
        event = translate_mouse_event(mouse_event)
        messages: list[TableMessage] = []
        status = self._table.on_event(self._bounds, event, messages)
        self._dispatch(messages)
        if status is Status.CAPTURED:
            self._app.invalidate()
        return status

    def _dispatch(self, messages: list[TableMessage]) -> None:
        for message in messages:
            self._last_message = describe_message(message)
            logger.debug("Table message: %s", message)
            if self._on_message is not None:
                self._on_message(message)

    def _page_size(self) -> int:
        return max(1, self._bounds.height - 2)

    def _cycle_sort(self) -> None:
        if not self._table.columns:
            return
        spec = self._table.sort_spec
        current = spec.active_column if spec is not None else -1
        target = (current + 1) % len(self._table.columns)
        self._table.sort_by(target)
        self._dispatch([SortToggled(target)])

    def _reverse_sort(self) -> None:
        spec = self._table.sort_spec
        if spec is None:
            return
        self._table.sort_by(spec.active_column)
        self._dispatch([SortToggled(spec.active_column)])

    def _status_fragments(self) -> list[tuple[str, str]]:
        title = self._table.title or ""
        hints = "q:quit  s:sort  r:reverse"
        text = f" {title}  {self._warning or self._last_message}"
        return [("class:status", text), ("class:status.key", f"  {hints} ")]

    def _start_refresh(self) -> None:
        self.pull()
        self._app.create_background_task(self._refresh_loop())

    async def _refresh_loop(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            self.pull()
            self._app.invalidate()

    def _bindings(self) -> KeyBindings:
        kb = KeyBindings()

        def moved(messages: list[TableMessage], status: Status, event: Any) -> None:
            self._dispatch(messages)
            if status is Status.CAPTURED:
                event.app.invalidate()

        @kb.add("down")
        @kb.add("j")
        def _(event: Any) -> None:
            messages: list[TableMessage] = []
            moved(messages, self._table.move_down(1, messages), event)

        @kb.add("up")
        @kb.add("k")
        def _(event: Any) -> None:
            messages: list[TableMessage] = []
            moved(messages, self._table.move_up(1, messages), event)

        @kb.add("pagedown")
        def _(event: Any) -> None:
            messages: list[TableMessage] = []
            moved(messages, self._table.move_down(self._page_size(), messages), event)

        @kb.add("pageup")
        def _(event: Any) -> None:
            messages: list[TableMessage] = []
            moved(messages, self._table.move_up(self._page_size(), messages), event)

        @kb.add("home")
        def _(event: Any) -> None:
            messages: list[TableMessage] = []
            moved(messages, self._table.move_up(len(self._table.items), messages), event)

        @kb.add("end")
        def _(event: Any) -> None:
            messages: list[TableMessage] = []
            moved(messages, self._table.move_down(len(self._table.items), messages), event)

        @kb.add("s")
        def _(event: Any) -> None:
            self._cycle_sort()
            event.app.invalidate()

        @kb.add("r")
        def _(event: Any) -> None:
            self._reverse_sort()
            event.app.invalidate()

        @kb.add("q")
        @kb.add("escape")
        @kb.add("c-c")
        def _(event: Any) -> None:
            event.app.exit(result=self._table.selected_item)

        return kb
