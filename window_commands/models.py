"""Core dataclasses for buffers, windows, frames, and configuration.

Layout entities (Buffer, Window, Split, Frame) are live objects owned by a
layout store and compared by identity. Configuration models are designed for
JSON serialization using dacite.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from pathlib import Path

import dacite


# =============================================================================
# Layout Models
# =============================================================================


class SplitAxis(Enum):
    """Orientation of the divider between two panes."""

    VERTICAL = "vertical"  # Vertical divider, panes side by side
    HORIZONTAL = "horizontal"  # Horizontal divider, panes stacked

    @property
    def opposite(self) -> SplitAxis:
        """The orthogonal axis."""
        if self is SplitAxis.VERTICAL:
            return SplitAxis.HORIZONTAL
        return SplitAxis.VERTICAL


@dataclass(frozen=True)
class Edges:
    """Window geometry in frame coordinates.

    ``right`` and ``bottom`` are exclusive, so a full frame of 160x48 has
    edges (0, 0, 160, 48).
    """

    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.left, self.top, self.right, self.bottom)


@dataclass(eq=False)
class Buffer:
    """A content unit that windows display."""

    name: str
    text: str = ""
    file_path: Path | None = None  # Set for buffers visiting a file

    def __repr__(self) -> str:
        return f"Buffer({self.name!r})"


@dataclass(eq=False)
class Window:
    """A pane within a frame showing one buffer."""

    id: str
    buffer: Buffer
    edges: Edges = field(default_factory=lambda: Edges(0, 0, 0, 0))
    # Previously shown buffers, most recent first, current excluded
    history: list[Buffer] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"Window({self.id!r}, buffer={self.buffer.name!r})"


@dataclass(eq=False)
class Split:
    """Internal layout node dividing its area between two children.

    ``first`` is the left child of a vertical split or the top child of a
    horizontal one.
    """

    axis: SplitAxis
    first: Window | Split
    second: Window | Split


@dataclass(eq=False)
class Frame:
    """A top-level container holding one layout tree."""

    id: str
    root: Window | Split
    selected_window: Window

    def windows(self) -> list[Window]:
        """Windows of this frame in reading order (left/top first)."""
        return list(iter_windows(self.root))

    def __repr__(self) -> str:
        return f"Frame({self.id!r}, windows={len(self.windows())})"


def iter_windows(node: Window | Split):
    """Yield the windows under ``node`` depth-first, first child before second."""
    if isinstance(node, Window):
        yield node
        return
    yield from iter_windows(node.first)
    yield from iter_windows(node.second)


# =============================================================================
# Configuration Models
# =============================================================================


@dataclass
class AppSettings:
    """Global application settings."""

    other_window_split: SplitAxis = SplitAxis.VERTICAL  # Split used by *-other-window
    scratch_buffer_name: str = "*scratch*"
    log_level: str = "INFO"


@dataclass
class FrameSettings:
    """Size of the coordinate space new frames are laid out in."""

    width: int = 160
    height: int = 48


@dataclass
class AppConfig:
    """Complete application configuration."""

    settings: AppSettings = field(default_factory=AppSettings)
    frame: FrameSettings = field(default_factory=FrameSettings)
    keybindings: dict[str, str] = field(default_factory=dict)  # command name -> key


# =============================================================================
# Serialization Helpers
# =============================================================================


def _convert_enums(obj: object) -> object:
    """Recursively convert Enum values to their string values."""
    if isinstance(obj, dict):
        return {k: _convert_enums(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_convert_enums(item) for item in obj]
    if isinstance(obj, Enum):
        return obj.value
    return obj


def model_to_dict(obj: object) -> dict:
    """Convert a dataclass model to a dictionary for JSON serialization."""
    data = asdict(obj)  # type: ignore[arg-type]
    return _convert_enums(data)  # type: ignore[return-value]


def model_from_dict(data_class: type, data: dict) -> object:
    """Load a dataclass model from a dictionary."""
    return dacite.from_dict(
        data_class=data_class,
        data=data,
        config=dacite.Config(cast=[Enum]),
    )
