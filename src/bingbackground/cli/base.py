"""Base command interface for the bingbackground CLI."""

from abc import ABC, abstractmethod
from typing import Any

import httpx

from ..core.config import Settings
from ..core.exceptions import BingBackgroundError
from ..core.logging import get_logger
from ..services.bing_service import create_client


class BaseCommand(ABC):
    """Base class for all CLI commands."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.logger = get_logger(self.__class__.__name__)

    @abstractmethod
    def validate_settings(self) -> None:
        """Validate settings required for this command."""
        pass

    @abstractmethod
    def execute(self, client: httpx.Client, **kwargs: Any) -> Any:
        """Execute the command."""
        pass

    def run(self, **kwargs: Any) -> Any:
        """Run the command with proper error handling."""
        try:
            self.validate_settings()
            with create_client(self.settings) as client:
                return self.execute(client, **kwargs)
        except BingBackgroundError as e:
            self.logger.error("Command failed", error=e.message, details=e.details)
            raise
        except Exception as e:
            self.logger.error("Unexpected error", error=str(e), exc_info=True)
            raise
