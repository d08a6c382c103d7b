"""Screens for the window-commands TUI."""
