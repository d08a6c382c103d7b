"""Entry point for python -m window_commands.

Supports both TUI mode (default) and CLI subcommands for headless operation.

Usage:
    # Launch TUI
    python -m window_commands
    python -m window_commands --file notes.txt --file todo.txt

    # CLI commands (headless)
    python -m window_commands list-commands
    python -m window_commands run --file a.py --file b.py --split right toggle-window-split
    python -m window_commands run find-library-other-frame=json --json
    python -m window_commands init-config
    python -m window_commands logs --lines 50
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from window_commands.exceptions import WindowCommandsError
from window_commands.models import AppConfig, SplitAxis

SPLIT_CHOICES = {
    "right": SplitAxis.VERTICAL,
    "below": SplitAxis.HORIZONTAL,
}


def _setup_logging(args: argparse.Namespace, config: AppConfig) -> None:
    """Configure logging from the config and command-line overrides."""
    from window_commands.logging_config import setup_logging

    setup_logging(
        config,
        level="DEBUG" if args.debug else args.log_level,
        log_to_console=args.debug,
        log_to_file=not args.no_log_file,
    )


def _print_json(data: Any) -> None:
    """Print data as JSON to stdout."""
    print(json.dumps(data, indent=2, default=str))


def _print_table(rows: list[dict[str, Any]], columns: list[str]) -> None:
    """Print data as a simple table."""
    if not rows:
        print("No results.")
        return

    widths = {col: len(col) for col in columns}
    for row in rows:
        for col in columns:
            val = str(row.get(col, ""))
            widths[col] = max(widths[col], len(val))

    header = "  ".join(col.ljust(widths[col]) for col in columns)
    print(header)
    print("-" * len(header))

    for row in rows:
        line = "  ".join(str(row.get(col, "")).ljust(widths[col]) for col in columns)
        print(line)


def _load_config() -> AppConfig:
    """Load the global config merged with overrides from the working directory."""
    from window_commands.config import load_merged_config

    return load_merged_config(Path.cwd())


def layout_snapshot(store: Any) -> list[dict[str, Any]]:
    """Describe every frame and window of a store as plain data."""
    selected_frame = store.selected_frame()
    frames = []
    for frame in store.frame_list():
        frames.append({
            "id": frame.id,
            "selected": frame is selected_frame,
            "windows": [
                {
                    "id": window.id,
                    "buffer": window.buffer.name,
                    "file": str(window.buffer.file_path) if window.buffer.file_path else None,
                    "edges": list(window.edges.as_tuple()),
                    "selected": window is frame.selected_window,
                }
                for window in store.window_list(frame)
            ],
        })
    return frames


# =============================================================================
# CLI Command Handlers
# =============================================================================


def cmd_list_commands(args: argparse.Namespace, config: AppConfig) -> int:
    """Handle list-commands command."""
    from window_commands.commands import command_registry

    specs = command_registry.list_commands()
    rows = [
        {
            "name": spec.name,
            "key": config.keybindings.get(spec.name, spec.key) or "",
            "takes_argument": spec.takes_argument,
            "description": spec.description,
        }
        for spec in specs
    ]

    if args.json:
        _print_json(rows)
    else:
        _print_table(
            [
                {
                    "Command": row["name"],
                    "Key": row["key"] or "-",
                    "Description": row["description"],
                }
                for row in rows
            ],
            ["Command", "Key", "Description"],
        )
    return 0


def cmd_run(args: argparse.Namespace, config: AppConfig) -> int:
    """Handle run command: execute commands against a fresh in-memory session."""
    from window_commands.commands import command_registry
    from window_commands.layout_store import InMemoryLayoutStore

    store = InMemoryLayoutStore.from_config(config)

    try:
        buffers = [store.find_file(path) for path in args.file]
        if buffers:
            store.set_window_buffer(None, buffers[0])
        if args.split != "none":
            new_window = store.split_window(axis=SPLIT_CHOICES[args.split])
            if len(buffers) > 1:
                store.set_window_buffer(new_window, buffers[1])

        for invocation in args.commands:
            name, sep, argument = invocation.partition("=")
            command_args = (argument,) if sep else ()
            command_registry.run(name, store, *command_args)
    except WindowCommandsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    frames = layout_snapshot(store)
    if args.json:
        _print_json(frames)
    else:
        _print_table(
            [
                {
                    "Frame": ("*" if frame["selected"] else " ") + frame["id"],
                    "Window": ("*" if window["selected"] else " ") + window["id"],
                    "Buffer": window["buffer"],
                    "Edges": " ".join(str(e) for e in window["edges"]),
                }
                for frame in frames
                for window in frame["windows"]
            ],
            ["Frame", "Window", "Buffer", "Edges"],
        )
    return 0


def cmd_init_config(args: argparse.Namespace) -> int:
    """Handle init-config command."""
    from window_commands.config import get_global_config_path, save_global_config

    path = get_global_config_path()
    if path.exists() and not args.force:
        print(f"Config already exists at {path} (use --force to overwrite)", file=sys.stderr)
        return 1

    try:
        save_global_config(AppConfig())
    except WindowCommandsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Wrote default config to {path}")
    return 0


def cmd_logs(args: argparse.Namespace) -> int:
    """Handle logs command."""
    from window_commands.logging_config import get_recent_logs

    for line in get_recent_logs(args.lines):
        print(line, end="")
    return 0


# =============================================================================
# Argument Parser Setup
# =============================================================================


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add common arguments to a parser."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format",
    )


def _create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        description="Window Commands - window, buffer, and frame commands for a pane layout",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Launch the TUI with two files loaded
  python -m window_commands --file notes.txt --file todo.txt

  # List commands and their keys
  python -m window_commands list-commands

  # Toggle a side-by-side split headlessly and print the result
  python -m window_commands run --file a.py --file b.py --split right toggle-window-split

  # Open a library's source in a new frame
  python -m window_commands run find-library-other-frame=json --json
""",
    )

    # Global arguments
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging to console",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set log level (default: from config, INFO)",
    )
    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="Disable logging to file",
    )
    parser.add_argument(
        "-f",
        "--file",
        action="append",
        default=[],
        help="File to visit on startup (repeatable)",
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # list-commands
    list_commands_parser = subparsers.add_parser(
        "list-commands",
        help="List all registered commands",
    )
    _add_common_args(list_commands_parser)

    # run
    run_parser = subparsers.add_parser(
        "run",
        help="Run commands against an in-memory session and print the layout",
    )
    run_parser.add_argument(
        "commands",
        nargs="+",
        metavar="COMMAND[=ARG]",
        help="Commands to run in order",
    )
    run_parser.add_argument(
        "-f",
        "--file",
        action="append",
        default=[],
        help="File to visit before running commands (repeatable)",
    )
    run_parser.add_argument(
        "--split",
        choices=["none", *SPLIT_CHOICES],
        default="none",
        help="Split the initial window; the second file goes in the new window",
    )
    _add_common_args(run_parser)

    # init-config
    init_config_parser = subparsers.add_parser(
        "init-config",
        help="Write the default global config",
    )
    init_config_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing config",
    )

    # logs
    logs_parser = subparsers.add_parser(
        "logs",
        help="Show recent log lines",
    )
    logs_parser.add_argument(
        "--lines",
        type=int,
        default=100,
        help="Number of lines to show (default: 100)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the window-commands application."""
    parser = _create_parser()
    args = parser.parse_args(argv)

    try:
        config = _load_config()
    except WindowCommandsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    _setup_logging(args, config)

    if args.command == "list-commands":
        return cmd_list_commands(args, config)

    if args.command == "run":
        return cmd_run(args, config)

    if args.command == "init-config":
        return cmd_init_config(args)

    if args.command == "logs":
        return cmd_logs(args)

    # No subcommand - launch TUI
    from window_commands.app import WindowCommandsApp

    app = WindowCommandsApp(config=config, files=args.file)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
