"""Exception classes for the bingbackground application."""

from typing import Optional


class BingBackgroundError(Exception):
    """Base exception for the bingbackground application."""

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        self.message = message
        self.details = details
        super().__init__(self.message)


class ConfigurationError(BingBackgroundError):
    """Raised when configuration is invalid or missing."""
    pass


class ConnectivityError(BingBackgroundError):
    """Raised when the image-of-the-day service cannot be reached."""
    pass


class MetadataError(BingBackgroundError):
    """Raised when the image metadata response cannot be used."""
    pass


class ImageProcessingError(BingBackgroundError):
    """Raised when image processing fails."""
    pass


class FileOperationError(BingBackgroundError):
    """Raised when file operations fail."""
    pass


class WallpaperError(BingBackgroundError):
    """Raised when the desktop background cannot be updated."""
    pass
