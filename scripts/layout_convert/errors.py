"""Exception types raised by layout loading and conversion."""

from pathlib import Path


class LayoutError(Exception):
    """Base class for all layout_convert errors."""


class LayoutDecodeError(LayoutError):
    """The input could not be read or does not describe a valid layout."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        message = super().__str__()
        if self.path is not None:
            return f"{self.path}: {message}"
        return message


class ConversionError(LayoutError):
    """The layout cannot be represented in the target format."""

    def __init__(self, target: str, message: str) -> None:
        super().__init__(message)
        self.target = target
