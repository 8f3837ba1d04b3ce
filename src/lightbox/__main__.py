"""Entry point for Lightbox."""

import argparse
import logging
import sys
from pathlib import Path

from .app import run_app
from .config import Config


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lightbox",
        description="Browse directories of images in the terminal.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        type=Path,
        help="directory to open (default: start_directory from config)",
    )
    return parser.parse_args(argv)


def setup_logging(config: Config) -> None:
    """Log to the configured file. The terminal belongs to the TUI."""
    if not config.log.file:
        return
    logging.basicConfig(
        filename=str(Path(config.log.file).expanduser()),
        level=getattr(logging, config.log.level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for Lightbox."""
    args = parse_args(argv)
    try:
        # Load configuration
        config = Config.load()
        setup_logging(config)

        # Run the application
        run_app(config, args.directory)

        return 0
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
