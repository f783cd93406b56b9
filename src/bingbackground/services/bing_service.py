"""Client for the Bing image-of-the-day service."""

import httpx
from pydantic import ValidationError

from ..core.config import Settings
from ..core.exceptions import MetadataError
from ..core.logging import get_logger
from ..core.models import (FALLBACK_EXTENSION, ImageArchive, ImageMetadata,
                           Resolution)

ARCHIVE_PATH = "/HPImageArchive.aspx"


def create_client(settings: Settings) -> httpx.Client:
    """Create the HTTP client used for one run."""
    return httpx.Client(timeout=settings.timeout, follow_redirects=True)


class BingService:
    """Service for talking to the image-of-the-day endpoints."""

    def __init__(self, settings: Settings, client: httpx.Client):
        self.settings = settings
        self.client = client
        self.logger = get_logger(__name__)

    @property
    def service_url(self) -> str:
        return self.settings.service_url

    def check_connection(self) -> bool:
        """Check that the service root answers at all."""
        try:
            with self.client.stream("GET", self.service_url):
                pass
        except httpx.HTTPError as e:
            self.logger.debug("Service unreachable", url=self.service_url, error=str(e))
            return False
        return True

    def fetch_metadata(self) -> ImageMetadata:
        """Download and parse the descriptor of today's image."""
        params = {
            "format": "js",
            "idx": "0",
            "n": "1",
            "mkt": self.settings.country_code,
        }
        self.logger.info("Downloading JSON...", market=self.settings.country_code)
        response = self.client.get(f"{self.service_url}{ARCHIVE_PATH}", params=params)
        response.raise_for_status()

        try:
            archive = ImageArchive.model_validate_json(response.content)
        except ValidationError as e:
            raise MetadataError("Invalid image archive response", str(e))

        return archive.first_image()

    def background_url_base(self, metadata: ImageMetadata) -> str:
        """Absolute URL of the image, without resolution suffix."""
        return f"{self.service_url}{metadata.urlbase}"

    def url_exists(self, url: str) -> bool:
        """Check if a URL answers a HEAD request with 200.

        Redirects are not followed and count as missing.
        """
        try:
            response = self.client.head(url, follow_redirects=False)
        except httpx.HTTPError as e:
            self.logger.debug("URL check failed", url=url, error=str(e))
            return False
        return response.status_code == httpx.codes.OK

    def resolve_extension(self, url_base: str, resolution: Resolution) -> str:
        """Pick the resolution suffix for the image URL.

        The exact resolution is used when the service has it, otherwise
        1920x1080. No other size is tried.
        """
        extension = resolution.extension
        if self.url_exists(url_base + extension):
            self.logger.info(f"Background for {resolution} found.")
            return extension

        self.logger.info(f"No background for {resolution} was found.")
        self.logger.info("Using 1920x1080 instead.")
        return FALLBACK_EXTENSION

    def download_image(self, url: str) -> bytes:
        """Download the image bytes."""
        self.logger.info("Downloading background...", url=url)
        response = self.client.get(url)
        response.raise_for_status()
        return response.content

    def resolve_image_url(self, metadata: ImageMetadata, resolution: Resolution) -> str:
        """Full URL of today's image for a display resolution."""
        url_base = self.background_url_base(metadata)
        return url_base + self.resolve_extension(url_base, resolution)
