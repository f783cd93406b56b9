"""Primary display detection."""

from typing import Optional

from screeninfo import ScreenInfoError, get_monitors

from ..core.logging import get_logger
from ..core.models import DEFAULT_RESOLUTION, Resolution

logger = get_logger(__name__)


def primary_resolution() -> Resolution:
    """Pixel size of the primary monitor.

    Falls back to 1920x1080 when no monitor can be enumerated, e.g. in a
    headless session.
    """
    try:
        monitors = get_monitors()
    except ScreenInfoError as e:
        logger.warning("Could not enumerate monitors", error=str(e), fallback=str(DEFAULT_RESOLUTION))
        return DEFAULT_RESOLUTION

    if not monitors:
        logger.warning("No monitors found", fallback=str(DEFAULT_RESOLUTION))
        return DEFAULT_RESOLUTION

    primary = next((m for m in monitors if m.is_primary), monitors[0])
    return Resolution(width=primary.width, height=primary.height)


def target_resolution(override: Optional[Resolution] = None) -> Resolution:
    """The forced resolution if given, otherwise the primary monitor's."""
    if override is not None:
        return override
    return primary_resolution()
