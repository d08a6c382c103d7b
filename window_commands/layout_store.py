"""In-memory window/buffer/frame registry.

This module provides InMemoryLayoutStore, the LayoutStore implementation the
TUI and CLI run commands against. Each frame holds a binary layout tree of
Split nodes and Window leaves; window geometry is recomputed from the tree
after every layout change.
"""

from __future__ import annotations

import itertools
import logging
from pathlib import Path

from window_commands.exceptions import (
    BufferNotFoundError,
    FileVisitError,
    FrameNotFoundError,
    LastFrameError,
    LastWindowError,
    WindowNotFoundError,
    WindowTooSmallError,
)
from window_commands.models import (
    AppConfig,
    Buffer,
    Edges,
    Frame,
    Split,
    SplitAxis,
    Window,
    iter_windows,
)

logger = logging.getLogger(__name__)

# Columns or rows each half of a split must keep
MIN_WINDOW_SIZE = 1


class InMemoryLayoutStore:
    """Window, buffer, and frame registry kept entirely in memory.

    A new store has one frame whose single window shows the scratch buffer.
    """

    def __init__(
        self,
        width: int = 160,
        height: int = 48,
        scratch_buffer_name: str = "*scratch*",
        other_window_split: SplitAxis = SplitAxis.VERTICAL,
    ) -> None:
        if width < MIN_WINDOW_SIZE * 2 or height < MIN_WINDOW_SIZE * 2:
            raise ValueError(f"Frame size {width}x{height} is too small to split")
        self.width = width
        self.height = height
        self.scratch_buffer_name = scratch_buffer_name
        self.other_window_split = other_window_split
        self._buffers: list[Buffer] = []
        self._frames: list[Frame] = []
        self._window_ids = itertools.count(1)
        self._frame_ids = itertools.count(1)

        scratch = self.get_buffer_create(scratch_buffer_name)
        frame = self._new_frame(scratch)
        self._frames.append(frame)
        self._selected_frame = frame

    @classmethod
    def from_config(cls, config: AppConfig) -> InMemoryLayoutStore:
        """Create a store sized and named according to configuration."""
        return cls(
            width=config.frame.width,
            height=config.frame.height,
            scratch_buffer_name=config.settings.scratch_buffer_name,
            other_window_split=config.settings.other_window_split,
        )

    # =========================================================================
    # Frames
    # =========================================================================

    def selected_frame(self) -> Frame:
        return self._selected_frame

    def frame_list(self) -> list[Frame]:
        return list(self._frames)

    def select_frame(self, frame: Frame) -> None:
        self._require_frame(frame)
        self._selected_frame = frame

    def make_frame(self, buffer: Buffer | None = None) -> Frame:
        if buffer is None:
            buffer = self.window_buffer()
        self._require_buffer(buffer)

        frame = self._new_frame(buffer)
        self._frames.append(frame)
        logger.info(f"Created frame {frame.id} showing '{buffer.name}'")
        return frame

    def delete_frame(self, frame: Frame | None = None) -> None:
        if frame is None:
            frame = self._selected_frame
        self._require_frame(frame)

        if len(self._frames) == 1:
            raise LastFrameError(frame_id=frame.id)

        index = self._frames.index(frame)
        self._frames.remove(frame)
        if self._selected_frame is frame:
            self._selected_frame = self._frames[index % len(self._frames)]
        logger.info(f"Deleted frame {frame.id}")

    # =========================================================================
    # Windows
    # =========================================================================

    def window_list(self, frame: Frame | None = None) -> list[Window]:
        if frame is None:
            frame = self._selected_frame
        self._require_frame(frame)
        return frame.windows()

    def selected_window(self) -> Window:
        return self._selected_frame.selected_window

    def select_window(self, window: Window) -> None:
        frame = self.window_frame(window)
        frame.selected_window = window
        self._selected_frame = frame

    def next_window(self, window: Window | None = None) -> Window:
        window = self._resolve_window(window)
        windows = self.window_frame(window).windows()
        return windows[(windows.index(window) + 1) % len(windows)]

    def window_frame(self, window: Window) -> Frame:
        for frame in self._frames:
            if window in frame.windows():
                return frame
        raise WindowNotFoundError(window.id)

    def window_buffer(self, window: Window | None = None) -> Buffer:
        return self._resolve_window(window).buffer

    def window_edges(self, window: Window | None = None) -> Edges:
        return self._resolve_window(window).edges

    def window_prev_buffers(self, window: Window | None = None) -> list[Buffer]:
        return list(self._resolve_window(window).history)

    def set_window_buffer(self, window: Window | None, buffer: Buffer) -> None:
        window = self._resolve_window(window)
        self._require_buffer(buffer)
        if window.buffer is buffer:
            return

        history = [b for b in window.history if b is not buffer and b is not window.buffer]
        window.history = [window.buffer, *history]
        window.buffer = buffer
        logger.debug(f"Window {window.id} now shows '{buffer.name}'")

    def split_window(
        self,
        window: Window | None = None,
        axis: SplitAxis = SplitAxis.HORIZONTAL,
    ) -> Window:
        window = self._resolve_window(window)
        frame = self.window_frame(window)

        if axis is SplitAxis.VERTICAL:
            size = window.edges.width
        else:
            size = window.edges.height
        if size < MIN_WINDOW_SIZE * 2:
            raise WindowTooSmallError(window.id, axis=axis.value, size=size)

        new_window = Window(
            id=self._next_window_id(),
            buffer=window.buffer,
            history=list(window.history),
        )
        self._replace_node(frame, window, Split(axis=axis, first=window, second=new_window))
        self._relayout(frame)
        logger.debug(f"Split window {window.id} ({axis.value}) into {new_window.id}")
        return new_window

    def delete_window(self, window: Window | None = None) -> None:
        window = self._resolve_window(window)
        frame = self.window_frame(window)

        # Only the root window of a live frame has no parent
        parent = self._find_parent(frame.root, window)
        if parent is None:
            raise LastWindowError(frame_id=frame.id)

        sibling = parent.second if parent.first is window else parent.first
        self._replace_node(frame, parent, sibling)

        if frame.selected_window is window:
            frame.selected_window = next(iter_windows(sibling))
        self._relayout(frame)
        logger.debug(f"Deleted window {window.id} from frame {frame.id}")

    def delete_other_windows(self, window: Window | None = None) -> None:
        window = self._resolve_window(window)
        frame = self.window_frame(window)

        frame.root = window
        frame.selected_window = window
        self._relayout(frame)
        logger.debug(f"Window {window.id} now fills frame {frame.id}")

    # =========================================================================
    # Buffers
    # =========================================================================

    def buffer_list(self) -> list[Buffer]:
        return list(self._buffers)

    def get_buffer(self, name: str) -> Buffer | None:
        for buffer in self._buffers:
            if buffer.name == name:
                return buffer
        return None

    def get_buffer_create(self, name: str) -> Buffer:
        buffer = self.get_buffer(name)
        if buffer is None:
            buffer = Buffer(name=name)
            self._buffers.append(buffer)
            logger.debug(f"Created buffer '{name}'")
        return buffer

    def kill_buffer(self, buffer: Buffer | None = None) -> None:
        if buffer is None:
            buffer = self.window_buffer()
        self._require_buffer(buffer)

        self._buffers.remove(buffer)
        for frame in self._frames:
            for window in frame.windows():
                window.history = [b for b in window.history if b is not buffer]
                if window.buffer is buffer:
                    if window.history:
                        window.buffer = window.history.pop(0)
                    else:
                        window.buffer = self._other_buffer()
        logger.info(f"Killed buffer '{buffer.name}'")

    def find_file(self, path: str | Path) -> Buffer:
        resolved = Path(path).expanduser().resolve()
        for buffer in self._buffers:
            if buffer.file_path == resolved:
                return buffer

        try:
            text = resolved.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.error(f"Failed to read {resolved}: {e}")
            raise FileVisitError(
                "Failed to read file",
                file_path=str(resolved),
                cause=e,
            ) from e

        buffer = Buffer(
            name=self._unique_buffer_name(resolved.name),
            text=text,
            file_path=resolved,
        )
        self._buffers.append(buffer)
        logger.info(f"Visited {resolved} in buffer '{buffer.name}'")
        return buffer

    # =========================================================================
    # Internals
    # =========================================================================

    def _new_frame(self, buffer: Buffer) -> Frame:
        window = Window(id=self._next_window_id(), buffer=buffer)
        frame = Frame(id=f"F{next(self._frame_ids)}", root=window, selected_window=window)
        self._relayout(frame)
        return frame

    def _next_window_id(self) -> str:
        return f"W{next(self._window_ids)}"

    def _resolve_window(self, window: Window | None) -> Window:
        if window is None:
            return self.selected_window()
        # Raises WindowNotFoundError for dead windows
        self.window_frame(window)
        return window

    def _require_frame(self, frame: Frame) -> None:
        if frame not in self._frames:
            raise FrameNotFoundError(frame.id)

    def _require_buffer(self, buffer: Buffer) -> None:
        if buffer not in self._buffers:
            raise BufferNotFoundError(buffer.name)

    def _other_buffer(self) -> Buffer:
        """Pick a replacement for a killed buffer, preferring undisplayed ones."""
        displayed = [w.buffer for f in self._frames for w in f.windows()]
        for buffer in self._buffers:
            if buffer not in displayed:
                return buffer
        if self._buffers:
            return self._buffers[0]
        return self.get_buffer_create(self.scratch_buffer_name)

    def _unique_buffer_name(self, base: str) -> str:
        if self.get_buffer(base) is None:
            return base
        n = 2
        while self.get_buffer(f"{base}<{n}>") is not None:
            n += 1
        return f"{base}<{n}>"

    def _find_parent(self, node: Window | Split, target: Window | Split) -> Split | None:
        if isinstance(node, Window):
            return None
        if node.first is target or node.second is target:
            return node
        return self._find_parent(node.first, target) or self._find_parent(node.second, target)

    def _replace_node(
        self,
        frame: Frame,
        old: Window | Split,
        new: Window | Split,
    ) -> None:
        parent = self._find_parent(frame.root, old)
        if parent is None:
            frame.root = new
        elif parent.first is old:
            parent.first = new
        else:
            parent.second = new

    def _relayout(self, frame: Frame) -> None:
        self._assign_edges(frame.root, Edges(0, 0, self.width, self.height))

    def _assign_edges(self, node: Window | Split, area: Edges) -> None:
        if isinstance(node, Window):
            node.edges = area
            return

        if node.axis is SplitAxis.VERTICAL:
            middle = area.left + area.width // 2
            first = Edges(area.left, area.top, middle, area.bottom)
            second = Edges(middle, area.top, area.right, area.bottom)
        else:
            middle = area.top + area.height // 2
            first = Edges(area.left, area.top, area.right, middle)
            second = Edges(area.left, middle, area.right, area.bottom)

        self._assign_edges(node.first, first)
        self._assign_edges(node.second, second)
