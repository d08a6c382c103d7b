"""Main Textual app class.

This module provides the window-commands TUI: it renders the selected
frame of an in-memory layout store and binds every registered command to a
key.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from window_commands.exceptions import WindowCommandsError
from window_commands.layout_store import InMemoryLayoutStore
from window_commands.logging_config import log_command_error
from window_commands.models import AppConfig
from window_commands.ports import LayoutStore
from window_commands.registry import CommandRegistry, command_registry
from window_commands.widgets import LayoutView

logger = logging.getLogger(__name__)


class WindowCommandsApp(App):
    """TUI for running window commands against a layout store."""

    TITLE = "Window Commands"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("question_mark", "show_help", "Help"),
    ]

    def __init__(
        self,
        *,
        config: AppConfig | None = None,
        store: LayoutStore | None = None,
        registry: CommandRegistry | None = None,
        files: Sequence[str | Path] = (),
    ) -> None:
        """Initialize the application.

        Args:
            config: Application configuration, defaults when None.
            store: Layout store to operate on, a fresh in-memory one when None.
            registry: Command registry, the built-in one when None.
            files: Files to visit on startup, the last one shown.
        """
        super().__init__()
        self.config = config or AppConfig()
        self.store = store or InMemoryLayoutStore.from_config(self.config)
        self.registry = registry or command_registry
        self.files = list(files)
        self.command_keys: list[tuple[str, str, str]] = []
        self._key_commands: dict[str, str] = {}

        self._bind_commands()

    def _bind_commands(self) -> None:
        """Map each command's key, honouring config overrides."""
        for spec in self.registry.list_commands():
            key = self.config.keybindings.get(spec.name, spec.key)
            if not key:
                continue
            if key in self._key_commands:
                logger.warning(
                    f"Key {key} of {spec.name} already bound to {self._key_commands[key]}"
                )
                continue
            self._key_commands[key] = spec.name
            self.command_keys.append((key, spec.name, spec.description))

    async def on_key(self, event: events.Key) -> None:
        """Run the command bound to a key pressed on the layout screen."""
        if len(self.screen_stack) > 1:
            return
        name = self._key_commands.get(event.key)
        if name is None:
            return
        event.stop()
        await self.action_run_command(name)

    def compose(self) -> ComposeResult:
        yield Header()
        yield LayoutView(id="layout")
        yield Footer()

    async def on_mount(self) -> None:
        """Visit startup files and render the initial layout."""
        for path in self.files:
            try:
                buffer = self.store.find_file(path)
            except WindowCommandsError as e:
                self.notify(str(e), severity="error")
                continue
            self.store.set_window_buffer(None, buffer)
        await self.refresh_layout()

    async def refresh_layout(self) -> None:
        """Re-render the selected frame."""
        frames = self.store.frame_list()
        frame = self.store.selected_frame()
        self.sub_title = f"Frame {frames.index(frame) + 1}/{len(frames)}"
        await self.query_one("#layout", LayoutView).show_frame(frame)

    async def action_run_command(self, name: str) -> None:
        """Run a command by name, prompting for its argument if it takes one."""
        try:
            spec = self.registry.get(name)
        except WindowCommandsError as e:
            self.notify(str(e), severity="error")
            return

        if spec.takes_argument:
            from window_commands.screens.modals import PromptModal

            self.push_screen(
                PromptModal(spec.prompt),
                lambda value: self._on_prompt_dismiss(name, value),
            )
        else:
            await self.execute_command(name)

    def _on_prompt_dismiss(self, name: str, value: str | None) -> None:
        if value is not None:
            self.call_later(self.execute_command, name, value)

    async def execute_command(self, name: str, *args: str) -> None:
        """Run a command against the store and re-render.

        Host errors are reported as notifications rather than raised.
        """
        try:
            self.registry.run(name, self.store, *args)
        except WindowCommandsError as e:
            log_command_error(logger, name, e)
            self.notify(str(e), title=name, severity="error")
        await self.refresh_layout()

    def action_show_help(self) -> None:
        """Show help modal with all keyboard shortcuts."""
        from window_commands.screens.modals import HelpModal

        self.push_screen(HelpModal(self.command_keys))
