"""Custom exception hierarchy for window-commands.

This module provides a structured exception hierarchy that enables:
- Consistent error handling across commands and the layout store
- Rich error context for debugging
- User-friendly error messages in the TUI and CLI
"""

from __future__ import annotations

from datetime import datetime
from typing import Any


class WindowCommandsError(Exception):
    """Base exception for all window-commands errors.

    Attributes:
        message: Human-readable error description.
        context: Additional context for debugging.
        timestamp: When the error occurred.
    """

    def __init__(
        self,
        message: str,
        *,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        self.timestamp = datetime.now()
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Layout Errors
# =============================================================================


class LayoutError(WindowCommandsError):
    """Base class for window and frame layout errors."""

    pass


class WindowNotFoundError(LayoutError):
    """Raised when a window is not part of any frame in the store."""

    def __init__(self, window_id: str) -> None:
        super().__init__(
            "Window not found",
            context={"window_id": window_id},
        )


class FrameNotFoundError(LayoutError):
    """Raised when a frame is not known to the store."""

    def __init__(self, frame_id: str) -> None:
        super().__init__(
            "Frame not found",
            context={"frame_id": frame_id},
        )


class LastWindowError(LayoutError):
    """Raised when deleting the sole window of a frame."""

    def __init__(
        self,
        message: str = "Attempt to delete the sole window of a frame",
        *,
        frame_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if frame_id:
            ctx["frame_id"] = frame_id
        super().__init__(message, context=ctx)


class LastFrameError(LayoutError):
    """Raised when deleting the only remaining frame."""

    def __init__(
        self,
        message: str = "Attempt to delete the sole frame",
        *,
        frame_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if frame_id:
            ctx["frame_id"] = frame_id
        super().__init__(message, context=ctx)


class WindowTooSmallError(LayoutError):
    """Raised when a split would leave a window with no columns or rows."""

    def __init__(self, window_id: str, *, axis: str, size: int) -> None:
        super().__init__(
            "Window too small for splitting",
            context={"window_id": window_id, "axis": axis, "size": size},
        )


# =============================================================================
# Buffer Errors
# =============================================================================


class BufferOperationError(WindowCommandsError):
    """Base class for buffer-related errors."""

    pass


class BufferNotFoundError(BufferOperationError):
    """Raised when a buffer is not live in the store."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No such buffer: {name}", context={"buffer": name})


class FileVisitError(BufferOperationError):
    """Raised when a file cannot be read into a buffer."""

    def __init__(
        self,
        message: str = "Failed to visit file",
        *,
        file_path: str | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Command Errors
# =============================================================================


class CommandError(WindowCommandsError):
    """Base class for command dispatch errors."""

    pass


class CommandNotFoundError(CommandError):
    """Raised when a command name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown command: {name}", context={"command": name})


class CommandArgumentError(CommandError):
    """Raised when a command is invoked with the wrong arguments."""

    def __init__(
        self,
        message: str = "Invalid command arguments",
        *,
        command: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if command:
            ctx["command"] = command
        super().__init__(message, context=ctx)


class LibraryNotFoundError(CommandError):
    """Raised when a library name has no Python source to visit."""

    def __init__(
        self,
        library: str,
        *,
        reason: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx: dict[str, Any] = {"library": library}
        if reason:
            ctx["reason"] = reason
        super().__init__(
            f"Can't find library source: {library}", context=ctx, cause=cause
        )


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigError(WindowCommandsError):
    """Base class for configuration-related errors."""

    pass


class ConfigLoadError(ConfigError):
    """Raised when configuration file fails to load."""

    def __init__(
        self,
        message: str = "Failed to load configuration",
        *,
        file_path: str | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(ConfigError):
    """Raised when configuration validation fails."""

    def __init__(
        self,
        message: str = "Configuration validation failed",
        *,
        field: str | None = None,
        value: Any = None,
        expected: str | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if field:
            ctx["field"] = field
        if value is not None:
            ctx["value"] = str(value)[:100]  # Truncate long values
        if expected:
            ctx["expected"] = expected
        super().__init__(message, context=ctx, cause=cause)


class ConfigSaveError(ConfigError):
    """Raised when configuration fails to save."""

    def __init__(
        self,
        message: str = "Failed to save configuration",
        *,
        file_path: str | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)
