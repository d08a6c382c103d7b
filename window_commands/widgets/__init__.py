"""Widgets for the window-commands TUI."""

from .layout_view import LayoutView, PaneView, build_layout

__all__ = [
    "LayoutView",
    "PaneView",
    "build_layout",
]
