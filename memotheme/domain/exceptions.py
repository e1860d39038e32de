"""Custom exceptions for memotheme."""

from __future__ import annotations


class MemoThemeError(Exception):
    """Base exception for memotheme."""

    pass


class ValidationError(MemoThemeError):
    """Raised when input or configuration validation fails."""

    pass


class ThemeNotFoundError(MemoThemeError):
    """Raised when a theme is not found in the supplied catalog."""

    def __init__(self, theme_id: str) -> None:
        self.theme_id = theme_id
        super().__init__(f"Theme with ID '{theme_id}' not found")


class StorageError(MemoThemeError):
    """Raised when the learning tables cannot be read or written."""

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        super().__init__(f"Storage operation on '{key}' failed: {message}")
