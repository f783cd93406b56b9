"""Configuration management for the bingbackground application."""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.exceptions import ConfigurationError
from ..core.models import PicturePosition, Resolution


def default_pictures_dir() -> Path:
    """The user's pictures folder."""
    return Path.home() / "Pictures"


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="BINGBACKGROUND_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Service
    service_url: str = Field("https://www.bing.com", description="Image-of-the-day service root")
    country_code: str = Field("en-US", description="Market used for the metadata request")
    timeout: float = Field(30.0, description="HTTP timeout in seconds")

    # Image selection
    force_resolution: Optional[str] = Field(
        None, description="Resolution override as <width>x<height>"
    )
    jpeg_quality: int = Field(95, description="JPEG quality used when saving the image")

    # Storage and desktop
    pictures_dir: Path = Field(default_factory=default_pictures_dir, description="Pictures root")
    position: PicturePosition = Field(PicturePosition.FILL, description="Wallpaper picture position")

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    @validator("service_url")
    def validate_service_url(cls, v: str) -> str:
        """Require an absolute http(s) URL, without trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Service URL must start with http:// or https://")
        return v.rstrip("/")

    @validator("country_code")
    def validate_country_code(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Country code must not be empty")
        return v.strip()

    @validator("force_resolution")
    def validate_force_resolution(cls, v: Optional[str]) -> Optional[str]:
        """Empty values mean no override, as in the original app config."""
        if v is None or not v.strip():
            return None
        try:
            return str(Resolution.parse(v))
        except ConfigurationError as e:
            raise ValueError(e.message)

    @validator("jpeg_quality")
    def validate_jpeg_quality(cls, v: int) -> int:
        if not 1 <= v <= 95:
            raise ValueError("JPEG quality must be between 1 and 95")
        return v

    @validator("pictures_dir")
    def validate_pictures_dir(cls, v: Path) -> Path:
        return Path(v).expanduser()

    @validator("position", pre=True)
    def validate_position(cls, v):
        """Accept position names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @validator("log_level")
    def validate_log_level(cls, v: str) -> str:
        """Validate logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {valid_levels}")
        return v.upper()

    @property
    def resolution_override(self) -> Optional[Resolution]:
        """The forced resolution, if one is configured."""
        if not self.force_resolution:
            return None
        return Resolution.parse(self.force_resolution)


def setup_logging(settings: Settings) -> None:
    """Configure structured logging."""
    from .logging import setup_structlog
    setup_structlog(settings.log_level)


def load_settings() -> Settings:
    """Load and return application settings."""
    # Load environment variables from .env file
    load_dotenv()

    try:
        return Settings()
    except Exception as e:
        raise ConfigurationError(f"Failed to load configuration: {e}")


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance (useful for testing)."""
    global _settings
    _settings = None
