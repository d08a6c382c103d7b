"""Layout view widgets.

Renders a frame's layout tree as nested containers: a vertical split becomes
a Horizontal row of panes, a horizontal split a Vertical column.
"""

from __future__ import annotations

from typing import Any

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container, Horizontal, Vertical, VerticalScroll
from textual.widget import Widget
from textual.widgets import Static

from window_commands.models import Frame, Split, SplitAxis, Window


class PaneView(Vertical):
    """One window: a header with the buffer name above the buffer text."""

    DEFAULT_CSS = """
    PaneView {
        width: 1fr;
        height: 1fr;
        border: round $panel;
    }

    PaneView.-selected {
        border: round $accent;
    }

    PaneView .pane-header {
        height: 1;
        background: $panel;
        padding: 0 1;
    }

    PaneView.-selected .pane-header {
        background: $accent;
        text-style: bold;
    }
    """

    def __init__(self, window: Window, selected: bool = False, **kwargs: Any) -> None:
        """Initialize the pane.

        Args:
            window: The window to render.
            selected: Whether this is the frame's selected window.
            **kwargs: Additional arguments passed to Vertical.
        """
        super().__init__(id=f"pane-{window.id}", **kwargs)
        self.window = window
        self.selected = selected
        if selected:
            self.add_class("-selected")

    def compose(self) -> ComposeResult:
        buffer = self.window.buffer
        header = Text(buffer.name)
        if buffer.file_path is not None:
            header.append(f"  {buffer.file_path}", style="dim")
        yield Static(header, classes="pane-header")
        with VerticalScroll(classes="pane-body"):
            yield Static(Text(buffer.text), classes="pane-text")


def build_layout(node: Window | Split, selected: Window) -> Widget:
    """Build the widget tree for a layout node."""
    if isinstance(node, Window):
        return PaneView(node, selected=node is selected)

    children = (build_layout(node.first, selected), build_layout(node.second, selected))
    if node.axis is SplitAxis.VERTICAL:
        return Horizontal(*children, classes="split")
    return Vertical(*children, classes="split")


class LayoutView(Container):
    """Container showing the layout of one frame."""

    DEFAULT_CSS = """
    LayoutView {
        width: 1fr;
        height: 1fr;
    }

    LayoutView .split {
        width: 1fr;
        height: 1fr;
    }
    """

    async def show_frame(self, frame: Frame) -> None:
        """Replace the rendered layout with the given frame's."""
        await self.remove_children()
        await self.mount(build_layout(frame.root, frame.selected_window))
