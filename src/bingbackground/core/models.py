"""Core domain models for the bingbackground application."""

import re
from datetime import date
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, validator

from .exceptions import ConfigurationError, MetadataError

BACKGROUNDS_FOLDER = "Bing Backgrounds"
TITLE_DELIMITER = " ("

_RESOLUTION_RE = re.compile(r"^\s*(\d+)\s*[xX]\s*(\d+)\s*$")


def derive_title(copyright_text: str) -> str:
    """Cut the copyright notice off a copyright string.

    "Example Place (© Example Corp)" becomes "Example Place". Strings
    without the " (" marker are returned unchanged.
    """
    index = copyright_text.find(TITLE_DELIMITER)
    if index == -1:
        return copyright_text
    return copyright_text[:index]


class ImageMetadata(BaseModel):
    """One entry of the image archive response."""

    urlbase: str = Field(..., description="Path fragment identifying the image")
    copyright: str = Field("", description="Caption and copyright notice")
    url: Optional[str] = Field(None, description="Path of the default image variant")
    title: Optional[str] = Field(None, description="Short headline")
    startdate: Optional[str] = Field(None, description="Publication date as yyyymmdd")
    copyrightlink: Optional[str] = Field(None, description="Link to more information")

    @validator("urlbase")
    def validate_urlbase(cls, v: str) -> str:
        if not v:
            raise ValueError("urlbase must not be empty")
        return v

    @property
    def display_title(self) -> str:
        """Title derived from the copyright text."""
        return derive_title(self.copyright)


class ImageArchive(BaseModel):
    """Response of the HPImageArchive endpoint."""

    images: List[ImageMetadata] = Field(default_factory=list)

    def first_image(self) -> ImageMetadata:
        """Return today's image, the first archive entry."""
        if not self.images:
            raise MetadataError("Image archive response contains no images")
        return self.images[0]


class Resolution(BaseModel):
    """Display size in pixels."""

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    @classmethod
    def parse(cls, value: str) -> "Resolution":
        """Parse a "<width>x<height>" string."""
        match = _RESOLUTION_RE.match(value or "")
        if not match:
            raise ConfigurationError(
                f"Invalid resolution: {value!r}",
                "Use the form <width>x<height>, e.g. 1920x1080"
            )
        width, height = int(match.group(1)), int(match.group(2))
        if width == 0 or height == 0:
            raise ConfigurationError(f"Invalid resolution: {value!r}", "Width and height must be positive")
        return cls(width=width, height=height)

    @property
    def extension(self) -> str:
        """URL suffix selecting the image variant for this size."""
        return f"_{self}.jpg"

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


DEFAULT_RESOLUTION = Resolution(width=1920, height=1080)
FALLBACK_EXTENSION = DEFAULT_RESOLUTION.extension


class PicturePosition(str, Enum):
    """How the wallpaper is laid out on the screen."""

    TILE = "tile"
    CENTER = "center"
    STRETCH = "stretch"
    FIT = "fit"
    FILL = "fill"

    @property
    def windows_style(self) -> Tuple[str, str]:
        """(PicturePosition, TileWallpaper) registry values."""
        return _WINDOWS_STYLES[self]

    @property
    def gnome_option(self) -> str:
        """Value for the org.gnome.desktop.background picture-options key."""
        return _GNOME_OPTIONS[self]


_WINDOWS_STYLES = {
    PicturePosition.TILE: ("0", "1"),
    PicturePosition.CENTER: ("0", "0"),
    PicturePosition.STRETCH: ("2", "0"),
    PicturePosition.FIT: ("6", "0"),
    PicturePosition.FILL: ("10", "0"),
}

_GNOME_OPTIONS = {
    PicturePosition.TILE: "wallpaper",
    PicturePosition.CENTER: "centered",
    PicturePosition.STRETCH: "stretched",
    PicturePosition.FIT: "scaled",
    PicturePosition.FILL: "zoom",
}


def background_image_path(pictures_dir: Path, day: Optional[date] = None) -> Path:
    """Path of the saved background for a day.

    <pictures_dir>/Bing Backgrounds/<yyyy>/<M-d-yyyy>.jpg, month and day
    without zero padding.
    """
    day = day or date.today()
    filename = f"{day.month}-{day.day}-{day.year}.jpg"
    return Path(pictures_dir) / BACKGROUNDS_FOLDER / str(day.year) / filename
