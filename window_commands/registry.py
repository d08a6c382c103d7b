"""Command dispatch table.

Commands are plain functions taking a LayoutStore as their first argument.
They are registered under an interactive name, with a description and an
optional default key, so front ends can list, bind, and run them by name.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from window_commands.exceptions import CommandArgumentError, CommandNotFoundError
from window_commands.ports import LayoutStore

logger = logging.getLogger(__name__)

CommandFunc = Callable[..., Any]


@dataclass
class CommandSpec:
    """A registered command."""

    name: str  # Interactive name, e.g. "toggle-window-split"
    func: CommandFunc
    description: str = ""
    key: str | None = None  # Default key binding (Textual key syntax)
    takes_argument: bool = False  # Whether the command needs one string argument
    prompt: str = ""  # Prompt shown when asking for the argument


class CommandRegistry:
    """Maps command names to their implementations."""

    def __init__(self) -> None:
        self._commands: dict[str, CommandSpec] = {}

    def register(
        self,
        name: str,
        func: CommandFunc,
        *,
        description: str = "",
        key: str | None = None,
        takes_argument: bool = False,
        prompt: str = "",
    ) -> CommandSpec:
        """Register a command, replacing any existing one with the same name."""
        if not description and func.__doc__:
            description = func.__doc__.strip().splitlines()[0]

        spec = CommandSpec(
            name=name,
            func=func,
            description=description,
            key=key,
            takes_argument=takes_argument,
            prompt=prompt or f"{name}: ",
        )
        self._commands[name] = spec
        return spec

    def command(
        self,
        name: str,
        *,
        description: str = "",
        key: str | None = None,
        takes_argument: bool = False,
        prompt: str = "",
    ) -> Callable[[CommandFunc], CommandFunc]:
        """Decorator form of register()."""

        def decorator(func: CommandFunc) -> CommandFunc:
            self.register(
                name,
                func,
                description=description,
                key=key,
                takes_argument=takes_argument,
                prompt=prompt,
            )
            return func

        return decorator

    def get(self, name: str) -> CommandSpec:
        """Look up a command.

        Raises:
            CommandNotFoundError: If no command has this name.
        """
        try:
            return self._commands[name]
        except KeyError:
            raise CommandNotFoundError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def names(self) -> list[str]:
        """Get all command names, sorted."""
        return sorted(self._commands)

    def list_commands(self) -> list[CommandSpec]:
        """Get all command specs, sorted by name."""
        return [self._commands[name] for name in self.names()]

    def run(self, name: str, store: LayoutStore, *args: str) -> Any:
        """Invoke a command against a store.

        Raises:
            CommandNotFoundError: If no command has this name.
            CommandArgumentError: If the argument count doesn't match.
        """
        spec = self.get(name)
        expected = 1 if spec.takes_argument else 0
        if len(args) != expected:
            raise CommandArgumentError(
                f"Expected {expected} argument(s), got {len(args)}",
                command=name,
            )

        logger.debug(f"Running command {name} {' '.join(args)}".rstrip())
        return spec.func(store, *args)


# Global registry holding the built-in commands
command_registry = CommandRegistry()
