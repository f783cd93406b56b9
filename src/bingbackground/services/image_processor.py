"""Image processing service for the bingbackground application."""

import io
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from ..core.exceptions import FileOperationError, ImageProcessingError
from ..core.logging import get_logger


class ImageProcessor:
    """Service for normalizing and saving background images."""

    def __init__(self, quality: int = 95):
        self.quality = quality
        self.logger = get_logger(__name__)

    def normalize(self, image_data: bytes) -> bytes:
        """Decode the downloaded bytes and re-encode them as JPEG."""
        try:
            image = Image.open(io.BytesIO(image_data))
            image.load()

            # JPEG has no alpha or palette modes
            if image.mode != 'RGB':
                image = image.convert('RGB')

            output = io.BytesIO()
            image.save(output, format='JPEG', quality=self.quality)
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
            raise ImageProcessingError("Failed to decode background image", str(e))

        self.logger.debug("Normalized image", size=f"{image.width}x{image.height}")
        return output.getvalue()

    def save_image(self, image_data: bytes, filepath: Path) -> None:
        """Save image data to file, replacing any existing file."""
        try:
            filepath.parent.mkdir(parents=True, exist_ok=True)
            with open(filepath, 'wb') as f:
                f.write(image_data)
        except OSError as e:
            raise FileOperationError(f"Failed to save image to {filepath}", str(e))
        self.logger.debug(f"Saved image to {filepath}")
