"""Main CLI interface for the bingbackground application."""

import argparse
import sys
from pathlib import Path
from typing import Dict, List, Optional, Type

from ..core.config import Settings, get_settings, setup_logging
from ..core.exceptions import BingBackgroundError
from ..core.models import PicturePosition, Resolution
from .base import BaseCommand
from .commands import DownloadCommand, InfoCommand, UpdateCommand


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="bingbackground: set the Bing image of the day as your desktop background",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  update    Download today's image and set it as the background (default)
  download  Download today's image without touching the desktop
  info      Show today's title and image URL

Examples:
  bingbackground
  bingbackground --country-code de-DE --resolution 2560x1440
  bingbackground download --pictures-dir ~/Wallpapers
        """
    )

    # Global options
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable debug logging"
    )

    # Image selection
    parser.add_argument(
        "--country-code",
        help="Market of the image of the day, e.g. en-US (or set BINGBACKGROUND_COUNTRY_CODE)"
    )
    parser.add_argument(
        "--resolution", dest="force_resolution",
        help="Force a <width>x<height> resolution (or set BINGBACKGROUND_FORCE_RESOLUTION)"
    )

    # Storage and desktop
    parser.add_argument(
        "--pictures-dir",
        help="Pictures root folder (or set BINGBACKGROUND_PICTURES_DIR)"
    )
    parser.add_argument(
        "--position",
        choices=[p.value for p in PicturePosition],
        help="Wallpaper picture position (or set BINGBACKGROUND_POSITION)"
    )

    # Command
    parser.add_argument(
        "command",
        nargs="?",
        default="update",
        choices=["update", "download", "info"],
        help="Command to execute (default: update)"
    )

    return parser


def override_settings_from_args(settings: Settings, args: argparse.Namespace) -> None:
    """Override settings with command line arguments."""
    if args.country_code:
        settings.country_code = args.country_code.strip()
    if args.force_resolution:
        settings.force_resolution = str(Resolution.parse(args.force_resolution))
    if args.pictures_dir:
        settings.pictures_dir = Path(args.pictures_dir).expanduser()
    if args.position:
        settings.position = PicturePosition(args.position)
    if args.debug:
        settings.log_level = "DEBUG"


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        # Load settings
        settings = get_settings()

        # Override with command line arguments
        override_settings_from_args(settings, args)

        # Setup logging
        setup_logging(settings)

        # Command mapping
        commands: Dict[str, Type[BaseCommand]] = {
            "update": UpdateCommand,
            "download": DownloadCommand,
            "info": InfoCommand,
        }

        command = commands[args.command](settings)
        result = command.run()

        if args.command == "download":
            print(result)

    except BingBackgroundError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        if e.details:
            print(f"Details: {e.details}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
