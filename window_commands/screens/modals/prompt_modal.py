"""Argument prompt modal.

Asks for the single string argument of commands such as
find-library-other-window.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, Static


class PromptModal(ModalScreen[str | None]):
    """Modal asking for one line of text.

    Returns the entered text if submitted, or None if cancelled.
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    DEFAULT_CSS = """
    PromptModal {
        align: center middle;
    }

    PromptModal #dialog {
        width: 60;
        height: auto;
        border: thick $accent;
        background: $surface;
        padding: 1 2;
    }

    PromptModal #prompt {
        text-style: bold;
        padding-bottom: 1;
    }

    PromptModal Input {
        width: 100%;
    }
    """

    def __init__(self, prompt: str, placeholder: str = "") -> None:
        """Initialize the modal.

        Args:
            prompt: Text shown above the input.
            placeholder: Placeholder shown in the empty input.
        """
        super().__init__()
        self._prompt = prompt
        self._placeholder = placeholder

    def compose(self) -> ComposeResult:
        """Compose the modal layout."""
        yield Vertical(
            Static(self._prompt, id="prompt", markup=False),
            Input(placeholder=self._placeholder, id="argument"),
            id="dialog",
        )

    def on_mount(self) -> None:
        """Focus the input when mounted."""
        self.query_one("#argument", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Return the entered text, ignoring blank input."""
        value = event.value.strip()
        if not value:
            self.notify("Please enter a value", severity="warning")
            return
        self.dismiss(value)

    def action_cancel(self) -> None:
        """Cancel and dismiss."""
        self.dismiss(None)
