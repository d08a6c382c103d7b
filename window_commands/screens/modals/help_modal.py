"""Help modal showing keyboard shortcuts.

Lists every bound command with its key and description.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Static


class HelpModal(ModalScreen[None]):
    """Modal showing all keyboard shortcuts."""

    BINDINGS = [
        Binding("escape", "dismiss", "Close"),
        Binding("q", "dismiss", "Close", show=False),
        Binding("question_mark", "dismiss", "Close", show=False),
    ]

    CSS = """
    HelpModal {
        align: center middle;
    }

    HelpModal > Container {
        width: 70;
        height: auto;
        max-height: 80%;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }

    HelpModal #title {
        text-align: center;
        text-style: bold;
        padding-bottom: 1;
        border-bottom: solid $primary;
    }

    HelpModal .section-title {
        text-style: bold;
        color: $primary;
        margin-top: 1;
    }

    HelpModal .shortcut-row {
        padding-left: 2;
    }

    HelpModal #footer {
        text-align: center;
        color: $text-muted;
        margin-top: 1;
        padding-top: 1;
        border-top: solid $primary;
    }
    """

    GLOBAL_SHORTCUTS = [
        ("?", "Show this help"),
        ("q", "Quit application"),
    ]

    def __init__(self, command_keys: list[tuple[str, str, str]]) -> None:
        """Initialize the modal.

        Args:
            command_keys: (key, command name, description) for each bound command.
        """
        super().__init__()
        self.command_keys = command_keys

    def compose(self) -> ComposeResult:
        """Compose the modal layout."""
        yield Container(
            Static("Keyboard Shortcuts", id="title"),
            VerticalScroll(
                *self._build_sections(),
                id="content",
            ),
            Static("Press Escape, q, or ? to close", id="footer"),
            id="dialog",
        )

    def _build_sections(self) -> list[Static]:
        widgets = [Static("Global", classes="section-title")]
        for key, description in self.GLOBAL_SHORTCUTS:
            widgets.append(
                Static(f"  {key:<8} {description}", classes="shortcut-row", markup=False)
            )

        widgets.append(Static("Commands", classes="section-title"))
        for key, name, description in self.command_keys:
            widgets.append(
                Static(
                    f"  {key:<8} {name:<28} {description}",
                    classes="shortcut-row",
                    markup=False,
                )
            )
        return widgets

    def action_dismiss(self) -> None:
        """Dismiss the modal."""
        self.dismiss(None)
