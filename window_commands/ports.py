"""Layout store abstraction layer.

This module defines the protocol commands use to read and mutate the host's
window, buffer, and frame registry. Commands receive a store explicitly
instead of reaching for global editor state, so they run the same against
the in-memory store used by the TUI and against any other implementation.

The abstraction follows the "ports and adapters" (hexagonal) architecture
pattern: the port is defined here and layout_store.py provides the
in-memory adapter.
"""

from __future__ import annotations

from abc import abstractmethod
from pathlib import Path
from typing import Protocol, runtime_checkable

from window_commands.models import Buffer, Edges, Frame, SplitAxis, Window


@runtime_checkable
class LayoutStore(Protocol):
    """Protocol for the host's window/buffer/frame registry.

    Arguments typed ``Window | None`` default to the selected window of the
    selected frame.
    """

    # Axis used when an other-window command has to split a sole window
    other_window_split: SplitAxis

    # -------------------------------------------------------------------------
    # Frames
    # -------------------------------------------------------------------------

    @abstractmethod
    def selected_frame(self) -> Frame:
        """Get the frame that currently has focus."""
        ...

    @abstractmethod
    def frame_list(self) -> list[Frame]:
        """Get all frames in creation order."""
        ...

    @abstractmethod
    def select_frame(self, frame: Frame) -> None:
        """Give focus to a frame.

        Raises:
            FrameNotFoundError: If the frame is not in the store.
        """
        ...

    @abstractmethod
    def make_frame(self, buffer: Buffer | None = None) -> Frame:
        """Create a frame with a single window.

        Args:
            buffer: Buffer for the new window, or None for the current buffer.

        Returns:
            The new frame. Focus does not move to it.
        """
        ...

    @abstractmethod
    def delete_frame(self, frame: Frame | None = None) -> None:
        """Delete a frame and all of its windows.

        Raises:
            LastFrameError: If it is the only frame.
        """
        ...

    # -------------------------------------------------------------------------
    # Windows
    # -------------------------------------------------------------------------

    @abstractmethod
    def window_list(self, frame: Frame | None = None) -> list[Window]:
        """Get a frame's windows in reading order."""
        ...

    @abstractmethod
    def selected_window(self) -> Window:
        """Get the selected window of the selected frame."""
        ...

    @abstractmethod
    def select_window(self, window: Window) -> None:
        """Select a window, and its frame.

        Raises:
            WindowNotFoundError: If the window is not live.
        """
        ...

    @abstractmethod
    def next_window(self, window: Window | None = None) -> Window:
        """Get the window after ``window`` in its frame, cyclically."""
        ...

    @abstractmethod
    def window_frame(self, window: Window) -> Frame:
        """Get the frame containing a window."""
        ...

    @abstractmethod
    def window_buffer(self, window: Window | None = None) -> Buffer:
        """Get the buffer a window displays."""
        ...

    @abstractmethod
    def window_edges(self, window: Window | None = None) -> Edges:
        """Get a window's geometry."""
        ...

    @abstractmethod
    def window_prev_buffers(self, window: Window | None = None) -> list[Buffer]:
        """Get the buffers a window showed before, most recent first."""
        ...

    @abstractmethod
    def set_window_buffer(self, window: Window | None, buffer: Buffer) -> None:
        """Display a buffer in a window, recording the old one in its history."""
        ...

    @abstractmethod
    def split_window(
        self,
        window: Window | None = None,
        axis: SplitAxis = SplitAxis.HORIZONTAL,
    ) -> Window:
        """Split a window in two equal halves.

        Args:
            window: Window to split.
            axis: VERTICAL puts the new window on the right, HORIZONTAL below.

        Returns:
            The new window, which shows the same buffer. Selection is unchanged.

        Raises:
            WindowTooSmallError: If either half would have no columns or rows.
        """
        ...

    @abstractmethod
    def delete_window(self, window: Window | None = None) -> None:
        """Remove a window, giving its space to its sibling.

        Raises:
            LastWindowError: If it is the sole window of its frame.
        """
        ...

    @abstractmethod
    def delete_other_windows(self, window: Window | None = None) -> None:
        """Make a window fill its frame."""
        ...

    # -------------------------------------------------------------------------
    # Buffers
    # -------------------------------------------------------------------------

    @abstractmethod
    def buffer_list(self) -> list[Buffer]:
        """Get all live buffers."""
        ...

    @abstractmethod
    def get_buffer(self, name: str) -> Buffer | None:
        """Look up a live buffer by name."""
        ...

    @abstractmethod
    def get_buffer_create(self, name: str) -> Buffer:
        """Look up a live buffer by name, creating an empty one if missing."""
        ...

    @abstractmethod
    def kill_buffer(self, buffer: Buffer | None = None) -> None:
        """Kill a buffer, replacing it in every window that shows it.

        Raises:
            BufferNotFoundError: If the buffer is not live.
        """
        ...

    @abstractmethod
    def find_file(self, path: str | Path) -> Buffer:
        """Get a buffer visiting a file, reading the file if needed.

        Raises:
            FileVisitError: If the file cannot be read.
        """
        ...
