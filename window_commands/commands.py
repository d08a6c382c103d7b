"""Interactive window, buffer, and frame commands.

Each command is a short composition of LayoutStore primitives, registered in
the global command registry under its interactive name. Commands act on the
selected window of the selected frame and let the store's own errors
propagate.
"""

from __future__ import annotations

import importlib.machinery
import importlib.util
import logging
from pathlib import Path

from window_commands.exceptions import LibraryNotFoundError
from window_commands.models import SplitAxis
from window_commands.ports import LayoutStore
from window_commands.registry import command_registry

logger = logging.getLogger(__name__)


# =============================================================================
# Host Primitives
# =============================================================================


@command_registry.command("split-window-below", key="2")
def split_window_below(store: LayoutStore) -> None:
    """Split the selected window into upper and lower windows."""
    store.split_window(axis=SplitAxis.HORIZONTAL)


@command_registry.command("split-window-right", key="3")
def split_window_right(store: LayoutStore) -> None:
    """Split the selected window into left and right windows."""
    store.split_window(axis=SplitAxis.VERTICAL)


@command_registry.command("other-window", key="o")
def other_window(store: LayoutStore) -> None:
    """Select the next window in reading order."""
    store.select_window(store.next_window())


@command_registry.command("delete-other-windows", key="1")
def delete_other_windows(store: LayoutStore) -> None:
    """Make the selected window fill its frame."""
    store.delete_other_windows()


@command_registry.command("delete-window", key="0")
def delete_window(store: LayoutStore) -> None:
    """Delete the selected window."""
    store.delete_window()


@command_registry.command("other-frame", key="f")
def other_frame(store: LayoutStore) -> None:
    """Select the next frame."""
    frames = store.frame_list()
    current = frames.index(store.selected_frame())
    store.select_frame(frames[(current + 1) % len(frames)])


@command_registry.command("delete-frame", key="x")
def delete_frame(store: LayoutStore) -> None:
    """Delete the selected frame."""
    store.delete_frame()


# =============================================================================
# Convenience Commands
# =============================================================================


def _is_sole_window(store: LayoutStore) -> bool:
    return len(store.window_list()) == 1


@command_registry.command("delete-window-or-frame", key="c")
def delete_window_or_frame(store: LayoutStore) -> None:
    """Delete the selected window, and its frame if it was the last window.

    Deleting the only frame raises LastFrameError from the store.
    """
    if _is_sole_window(store):
        logger.debug("Sole window in frame, deleting the frame")
        store.delete_frame()
    else:
        delete_window(store)


@command_registry.command("kill-buffer-and-window", key="k")
def kill_buffer_and_window(store: LayoutStore) -> None:
    """Kill the current buffer and delete its window.

    When the window is the only one left anywhere, just the buffer goes and
    the window shows its replacement.
    """
    store.kill_buffer(store.window_buffer())
    if _is_sole_window(store) and len(store.frame_list()) == 1:
        return
    delete_window_or_frame(store)


@command_registry.command("detach-window", key="d")
def detach_window(store: LayoutStore) -> None:
    """Move the selected window's buffer to a new frame, deleting the window.

    Does nothing when the window is already alone in its frame.
    """
    if _is_sole_window(store):
        return

    window = store.selected_window()
    frame = store.make_frame(store.window_buffer(window))
    store.delete_window(window)
    store.select_frame(frame)


@command_registry.command("toggle-window-split", key="t")
def toggle_window_split(store: LayoutStore) -> None:
    """Switch a two-window frame between side-by-side and stacked.

    The buffer shown first (left or top) stays first, and the buffer of the
    selected window stays selected. Any window count other than two is left
    alone.
    """
    if len(store.window_list()) != 2:
        return

    this_window = store.selected_window()
    next_window = store.next_window(this_window)
    this_buffer = store.window_buffer(this_window)
    next_buffer = store.window_buffer(next_window)
    this_edges = store.window_edges(this_window)
    next_edges = store.window_edges(next_window)

    # Equal left edges mean the windows are stacked
    if this_edges.left != next_edges.left:
        current_axis = SplitAxis.VERTICAL
    else:
        current_axis = SplitAxis.HORIZONTAL
    this_is_second = not (
        this_edges.left <= next_edges.left and this_edges.top <= next_edges.top
    )

    store.delete_other_windows(this_window)
    new_window = store.split_window(this_window, current_axis.opposite)
    if this_is_second:
        this_target, next_target = new_window, this_window
    else:
        this_target, next_target = this_window, new_window

    store.set_window_buffer(this_target, this_buffer)
    store.set_window_buffer(next_target, next_buffer)
    store.select_window(this_target)
    logger.debug(
        f"Toggled split from {current_axis.value} to {current_axis.opposite.value}"
    )


# =============================================================================
# Library Lookup
# =============================================================================


def locate_library(name: str) -> Path:
    """Find the Python source file of an importable module.

    Packages resolve to their ``__init__.py``. Only the import path is
    searched: neither the module nor its parent packages are imported.

    Raises:
        LibraryNotFoundError: If the module can't be found or has no source.
    """
    name = name.strip()
    if not name:
        raise LibraryNotFoundError(name, reason="empty name")
    parts = name.split(".")
    if not all(parts):
        raise LibraryNotFoundError(name, reason="invalid module name")

    try:
        # A top-level name is looked up without importing anything
        spec = importlib.util.find_spec(parts[0])
    except (ImportError, ValueError) as e:
        raise LibraryNotFoundError(name, reason=str(e), cause=e) from e

    for part in parts[1:]:
        if spec is None:
            break
        if not spec.submodule_search_locations:
            raise LibraryNotFoundError(name, reason=f"{spec.name} is not a package")
        spec = importlib.machinery.PathFinder.find_spec(
            f"{spec.name}.{part}", list(spec.submodule_search_locations)
        )

    if spec is None:
        raise LibraryNotFoundError(name, reason="no such module")
    if not spec.has_location or not spec.origin:
        raise LibraryNotFoundError(name, reason=f"no source file ({spec.origin})")

    origin = Path(spec.origin)
    if origin.suffix != ".py":
        raise LibraryNotFoundError(name, reason=f"not Python source: {origin.name}")
    return origin


@command_registry.command(
    "find-library-other-window",
    key="l",
    takes_argument=True,
    prompt="Find library in other window: ",
)
def find_library_other_window(store: LayoutStore, name: str) -> None:
    """Visit a library's source in another window."""
    buffer = store.find_file(locate_library(name))

    if _is_sole_window(store):
        target = store.split_window(axis=store.other_window_split)
    else:
        target = store.next_window()
    store.set_window_buffer(target, buffer)
    store.select_window(target)


@command_registry.command(
    "find-library-other-frame",
    key="ctrl+l",
    takes_argument=True,
    prompt="Find library in other frame: ",
)
def find_library_other_frame(store: LayoutStore, name: str) -> None:
    """Visit a library's source in a new frame."""
    buffer = store.find_file(locate_library(name))
    store.select_frame(store.make_frame(buffer))
