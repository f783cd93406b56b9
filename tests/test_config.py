import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from bingbackground.core.config import (Settings, get_settings, load_settings,
                                        reset_settings, setup_logging)
from bingbackground.core.exceptions import ConfigurationError
from bingbackground.core.models import PicturePosition, Resolution


def test_settings_defaults() -> None:
    """Test that Settings has the correct default values."""
    settings = Settings(_env_file=None)

    assert settings.service_url == "https://www.bing.com"
    assert settings.country_code == "en-US"
    assert settings.force_resolution is None
    assert settings.resolution_override is None
    assert settings.pictures_dir == Path.home() / "Pictures"
    assert settings.position is PicturePosition.FILL
    assert settings.jpeg_quality == 95
    assert settings.log_level == "INFO"


@patch.dict(
    os.environ,
    {
        "BINGBACKGROUND_COUNTRY_CODE": "de-DE",
        "BINGBACKGROUND_FORCE_RESOLUTION": "2560x1440",
        "BINGBACKGROUND_POSITION": "Fit",
        "BINGBACKGROUND_SERVICE_URL": "https://cn.bing.com/",
    },
)
def test_settings_from_env() -> None:
    """Test that Settings correctly loads from environment variables."""
    settings = Settings(_env_file=None)

    assert settings.country_code == "de-DE"
    assert settings.force_resolution == "2560x1440"
    assert settings.resolution_override == Resolution(width=2560, height=1440)
    assert settings.position is PicturePosition.FIT
    assert settings.service_url == "https://cn.bing.com"


def test_empty_force_resolution_means_no_override() -> None:
    assert Settings(_env_file=None, force_resolution="  ").force_resolution is None


@pytest.mark.parametrize(
    "field, value",
    [
        ("force_resolution", "huge"),
        ("service_url", "www.bing.com"),
        ("country_code", " "),
        ("jpeg_quality", 0),
        ("log_level", "chatty"),
        ("position", "diagonal"),
    ],
)
def test_settings_rejects_invalid_values(field: str, value) -> None:
    with pytest.raises(ValueError):
        Settings(_env_file=None, **{field: value})


@patch.dict(os.environ, {"BINGBACKGROUND_JPEG_QUALITY": "500"})
def test_load_settings_wraps_validation_errors() -> None:
    with pytest.raises(ConfigurationError, match="Failed to load configuration"):
        load_settings()


def test_get_settings_is_cached_until_reset() -> None:
    first = get_settings()
    assert get_settings() is first

    reset_settings()
    assert get_settings() is not first


@pytest.mark.parametrize("level, httpx_level", [("INFO", logging.WARNING), ("DEBUG", logging.NOTSET)])
def test_setup_logging_quiets_http_stack(level: str, httpx_level: int) -> None:
    setup_logging(Settings(_env_file=None, log_level=level))

    assert logging.getLogger().level == getattr(logging, level)
    assert logging.getLogger("httpx").level == httpx_level
