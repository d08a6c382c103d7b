"""Window Commands.

Interactive window, buffer, and frame commands for a pane-based layout:
close a window and its frame, kill a buffer and its window, move a window to
a new frame, toggle a two-window split between side-by-side and stacked, and
visit a library's source in another window or frame.

Public API Usage:
    from window_commands import InMemoryLayoutStore, command_registry

    store = InMemoryLayoutStore()
    command_registry.run("split-window-right", store)
    command_registry.run("toggle-window-split", store)

    # Or call the commands directly
    from window_commands import toggle_window_split
    toggle_window_split(store)
"""

__version__ = "0.1.0"

from window_commands.commands import (
    delete_window,
    delete_window_or_frame,
    detach_window,
    find_library_other_frame,
    find_library_other_window,
    kill_buffer_and_window,
    locate_library,
    toggle_window_split,
)
from window_commands.exceptions import (
    BufferNotFoundError,
    CommandArgumentError,
    CommandNotFoundError,
    FileVisitError,
    LastFrameError,
    LastWindowError,
    LibraryNotFoundError,
    WindowCommandsError,
    WindowTooSmallError,
)
from window_commands.layout_store import InMemoryLayoutStore
from window_commands.models import AppConfig, Buffer, Edges, Frame, SplitAxis, Window
from window_commands.ports import LayoutStore
from window_commands.registry import CommandRegistry, CommandSpec, command_registry

__all__ = [
    "__version__",
    # Commands
    "delete_window",
    "delete_window_or_frame",
    "detach_window",
    "find_library_other_frame",
    "find_library_other_window",
    "kill_buffer_and_window",
    "locate_library",
    "toggle_window_split",
    # Store
    "LayoutStore",
    "InMemoryLayoutStore",
    # Registry
    "CommandRegistry",
    "CommandSpec",
    "command_registry",
    # Models
    "AppConfig",
    "Buffer",
    "Edges",
    "Frame",
    "SplitAxis",
    "Window",
    # Errors
    "WindowCommandsError",
    "BufferNotFoundError",
    "CommandArgumentError",
    "CommandNotFoundError",
    "FileVisitError",
    "LastFrameError",
    "LastWindowError",
    "LibraryNotFoundError",
    "WindowTooSmallError",
]
