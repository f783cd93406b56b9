"""CLI commands for the bingbackground application."""

from datetime import date
from pathlib import Path
from typing import Optional, Tuple

import httpx
from rich.console import Console

from ..core.config import Settings
from ..core.exceptions import ConnectivityError
from ..core.models import ImageMetadata, background_image_path
from ..services.bing_service import BingService
from ..services.display_service import target_resolution
from ..services.image_processor import ImageProcessor
from ..services.wallpaper_service import WallpaperBackend, get_wallpaper_backend
from .base import BaseCommand


class ImageCommand(BaseCommand):
    """Shared steps: connectivity check, metadata and image URL."""

    def validate_settings(self) -> None:
        """Fail early on an unparsable resolution override."""
        self.settings.resolution_override

    def ensure_connection(self, service: BingService) -> None:
        if not service.check_connection():
            raise ConnectivityError(
                f"Cannot reach {service.service_url}",
                "Check your internet connection"
            )

    def resolve_image(self, service: BingService) -> Tuple[ImageMetadata, str]:
        """Today's metadata and the URL of the best fitting variant."""
        self.ensure_connection(service)
        metadata = service.fetch_metadata()
        self.logger.debug("Image of the day", title=metadata.display_title, urlbase=metadata.urlbase)

        resolution = target_resolution(self.settings.resolution_override)
        return metadata, service.resolve_image_url(metadata, resolution)


class InfoCommand(ImageCommand):
    """Show today's image without downloading it."""

    def __init__(self, settings: Settings, console: Optional[Console] = None):
        super().__init__(settings)
        self.console = console or Console()

    def execute(self, client: httpx.Client) -> str:
        """Execute info command."""
        metadata, url = self.resolve_image(BingService(self.settings, client))

        self.console.print(f"[bold]{metadata.display_title}[/bold]")
        self.console.print(metadata.copyright, markup=False)
        self.console.print(url, markup=False)
        return url


class DownloadCommand(ImageCommand):
    """Download today's image to the pictures folder."""

    def execute(self, client: httpx.Client, day: Optional[date] = None) -> Path:
        """Execute download command."""
        service = BingService(self.settings, client)
        metadata, url = self.resolve_image(service)

        image_data = service.download_image(url)
        image_processor = ImageProcessor(quality=self.settings.jpeg_quality)
        image_data = image_processor.normalize(image_data)

        path = background_image_path(self.settings.pictures_dir, day)
        self.logger.info("Saving background...", path=str(path))
        image_processor.save_image(image_data, path)
        return path


class UpdateCommand(DownloadCommand):
    """Download today's image and set it as the desktop background."""

    def __init__(self, settings: Settings, backend: Optional[WallpaperBackend] = None):
        super().__init__(settings)
        self.backend = backend

    def validate_settings(self) -> None:
        """Validate settings and pick the platform backend."""
        super().validate_settings()
        if self.backend is None:
            self.backend = get_wallpaper_backend()

    def execute(self, client: httpx.Client, day: Optional[date] = None) -> Path:
        """Execute update command."""
        path = super().execute(client, day=day)
        self.backend.set_background(path, self.settings.position)
        return path
