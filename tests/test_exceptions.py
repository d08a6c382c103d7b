"""Tests for the exception hierarchy."""

import pytest

from window_commands.exceptions import (
    BufferNotFoundError,
    BufferOperationError,
    CommandArgumentError,
    CommandError,
    CommandNotFoundError,
    ConfigError,
    ConfigValidationError,
    FileVisitError,
    LastFrameError,
    LastWindowError,
    LayoutError,
    LibraryNotFoundError,
    WindowCommandsError,
    WindowNotFoundError,
    WindowTooSmallError,
)


class TestWindowCommandsError:
    """Test the base exception."""

    def test_str_without_context(self):
        assert str(WindowCommandsError("plain")) == "plain"

    def test_str_with_context(self):
        error = WindowCommandsError("failed", context={"a": 1, "b": "x"})
        assert str(error) == "failed (a=1, b=x)"

    def test_cause_is_kept(self):
        cause = OSError("disk")
        error = WindowCommandsError("failed", cause=cause)
        assert error.cause is cause
        assert error.timestamp is not None


class TestHierarchy:
    """Test that specific errors can be caught by their category."""

    @pytest.mark.parametrize(
        "error, base",
        [
            (WindowNotFoundError("W1"), LayoutError),
            (LastWindowError(frame_id="F1"), LayoutError),
            (LastFrameError(), LayoutError),
            (WindowTooSmallError("W1", axis="vertical", size=1), LayoutError),
            (BufferNotFoundError("a"), BufferOperationError),
            (FileVisitError(file_path="/x"), BufferOperationError),
            (CommandNotFoundError("x"), CommandError),
            (CommandArgumentError(command="x"), CommandError),
            (LibraryNotFoundError("x"), CommandError),
            (ConfigValidationError(), ConfigError),
        ],
    )
    def test_category(self, error, base):
        assert isinstance(error, base)
        assert isinstance(error, WindowCommandsError)

    def test_last_window_context(self):
        error = LastWindowError(frame_id="F2")
        assert error.context == {"frame_id": "F2"}

    def test_window_too_small_context(self):
        error = WindowTooSmallError("W3", axis="horizontal", size=1)
        assert error.context == {"window_id": "W3", "axis": "horizontal", "size": 1}

    def test_library_not_found_context(self):
        error = LibraryNotFoundError("sys", reason="no Python source")
        assert error.context == {"library": "sys", "reason": "no Python source"}
        assert "sys" in error.message

    def test_config_validation_truncates_value(self):
        error = ConfigValidationError(value="x" * 500, field="frame.width")
        assert len(error.context["value"]) == 100
        assert error.context["field"] == "frame.width"

