"""Desktop background backends, one per operating system."""

import platform
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional, Type

from ..core.exceptions import WallpaperError
from ..core.logging import get_logger
from ..core.models import PicturePosition

# SystemParametersInfoW arguments
SPI_SETDESKWALLPAPER = 20
SPIF_UPDATEINIFILE = 0x01
SPIF_SENDWININICHANGE = 0x02

DESKTOP_KEY = r"Control Panel\Desktop"
GNOME_SCHEMA = "org.gnome.desktop.background"


class WallpaperBackend(ABC):
    """Platform capability for changing the desktop background."""

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)

    @abstractmethod
    def set_style(self, position: PicturePosition) -> None:
        """Persist the picture position in the desktop settings."""
        pass

    @abstractmethod
    def apply_wallpaper(self, path: Path) -> None:
        """Use the image at path as the desktop background."""
        pass

    def set_background(self, path: Path, position: PicturePosition = PicturePosition.FILL) -> None:
        """Set style, then apply the wallpaper."""
        self.logger.info("Setting background...", path=str(path), position=position.value)
        self.set_style(position)
        self.apply_wallpaper(Path(path).resolve())


class WindowsWallpaperBackend(WallpaperBackend):
    """Registry and SystemParametersInfoW based backend."""

    def set_style(self, position: PicturePosition) -> None:
        import winreg

        picture_position, tile_wallpaper = position.windows_style
        try:
            with winreg.OpenKey(winreg.HKEY_CURRENT_USER, DESKTOP_KEY, 0, winreg.KEY_SET_VALUE) as key:
                winreg.SetValueEx(key, "PicturePosition", 0, winreg.REG_SZ, picture_position)
                winreg.SetValueEx(key, "TileWallpaper", 0, winreg.REG_SZ, tile_wallpaper)
        except OSError as e:
            raise WallpaperError("Failed to write desktop style to the registry", str(e))

    def apply_wallpaper(self, path: Path) -> None:
        import ctypes

        flags = SPIF_UPDATEINIFILE | SPIF_SENDWININICHANGE
        ok = ctypes.windll.user32.SystemParametersInfoW(SPI_SETDESKWALLPAPER, 0, str(path), flags)
        if not ok:
            raise WallpaperError("SystemParametersInfoW refused the wallpaper", str(path))


class CommandWallpaperBackend(WallpaperBackend):
    """Backend driving an external settings command."""

    def run(self, args: List[str]) -> None:
        self.logger.debug("Running command", args=args)
        try:
            subprocess.run(args, check=True, capture_output=True, text=True)
        except FileNotFoundError as e:
            raise WallpaperError(f"Command not found: {args[0]}", str(e))
        except subprocess.CalledProcessError as e:
            raise WallpaperError(f"Command failed: {' '.join(args)}", (e.stderr or "").strip() or None)


class GnomeWallpaperBackend(CommandWallpaperBackend):
    """gsettings based backend for GNOME desktops."""

    def set_style(self, position: PicturePosition) -> None:
        self.run(["gsettings", "set", GNOME_SCHEMA, "picture-options", position.gnome_option])

    def apply_wallpaper(self, path: Path) -> None:
        uri = path.as_uri()
        self.run(["gsettings", "set", GNOME_SCHEMA, "picture-uri", uri])
        # Only GNOME 42+ has the dark style key
        try:
            self.run(["gsettings", "set", GNOME_SCHEMA, "picture-uri-dark", uri])
        except WallpaperError as e:
            self.logger.debug("Dark style wallpaper not set", error=e.message, details=e.details)


def applescript_string(text: str) -> str:
    """Quote text as an AppleScript string literal."""
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


class MacWallpaperBackend(CommandWallpaperBackend):
    """osascript based backend for macOS."""

    def set_style(self, position: PicturePosition) -> None:
        self.logger.debug("Picture position is not scriptable on macOS", position=position.value)

    def apply_wallpaper(self, path: Path) -> None:
        script = (
            'tell application "System Events" to tell every desktop '
            f'to set picture to POSIX file {applescript_string(str(path))}'
        )
        self.run(["osascript", "-e", script])


BACKENDS: Dict[str, Type[WallpaperBackend]] = {
    "Windows": WindowsWallpaperBackend,
    "Linux": GnomeWallpaperBackend,
    "Darwin": MacWallpaperBackend,
}


def get_wallpaper_backend(system: Optional[str] = None) -> WallpaperBackend:
    """Backend for the given (default: current) operating system."""
    system = system or platform.system()
    backend_class = BACKENDS.get(system)
    if backend_class is None:
        raise WallpaperError(f"Unsupported platform: {system}", "Supported: " + ", ".join(BACKENDS))
    return backend_class()
