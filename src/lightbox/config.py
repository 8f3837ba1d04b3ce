"""Configuration loading and defaults for Lightbox."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .listing import IMAGE_EXTENSIONS


def get_config_dir() -> Path:
    """Get the lightbox config directory (XDG-style)."""
    return Path.home() / ".config" / "lightbox"


def get_config_path() -> Path:
    """Get the config file path."""
    return get_config_dir() / "config.toml"


@dataclass
class WatchConfig:
    """Filesystem watch configuration."""

    enabled: bool = True
    debounce_seconds: float = 0.0  # 0 = reload on every event


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "WARNING"
    file: str = ""  # empty = no log file


@dataclass
class Config:
    """Application configuration."""

    start_directory: Path = field(default_factory=Path.home)
    show_hidden: bool = False
    image_extensions: list[str] = field(default_factory=lambda: sorted(IMAGE_EXTENSIONS))
    watch: WatchConfig = field(default_factory=WatchConfig)
    log: LogConfig = field(default_factory=LogConfig)

    def get_image_extensions(self) -> frozenset[str]:
        """Normalized image suffixes (lowercase, leading dot)."""
        return frozenset(
            ext.lower() if ext.startswith(".") else f".{ext.lower()}"
            for ext in self.image_extensions
        )

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file or create defaults."""
        config_path = get_config_path()

        config_dir = get_config_dir()
        config_dir.mkdir(parents=True, exist_ok=True)

        if not config_path.exists():
            default_config = cls()
            default_config.save()
            return default_config

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        start_dir = data.get("start_directory", "~")
        start_directory = Path(start_dir).expanduser()

        show_hidden = data.get("show_hidden", False)

        image_extensions = data.get("image_extensions", sorted(IMAGE_EXTENSIONS))

        watch_data = data.get("watch", {})
        watch = WatchConfig(
            enabled=watch_data.get("enabled", True),
            debounce_seconds=float(watch_data.get("debounce_seconds", 0.0)),
        )

        log_data = data.get("log", {})
        log = LogConfig(
            level=log_data.get("level", "WARNING"),
            file=log_data.get("file", ""),
        )

        return cls(
            start_directory=start_directory,
            show_hidden=show_hidden,
            image_extensions=list(image_extensions),
            watch=watch,
            log=log,
        )

    def save(self) -> None:
        """Save configuration to file."""
        config_path = get_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        extensions_str = ", ".join(f'"{ext}"' for ext in self.image_extensions)

        # Build TOML content manually (tomllib is read-only)
        lines = [
            '# Lightbox Configuration',
            '',
            '# Directory shown on startup',
            f'start_directory = "{self.start_directory}"',
            '',
            '# Show dotfiles and dot-directories',
            f'show_hidden = {str(self.show_hidden).lower()}',
            '',
            '# File suffixes treated as images',
            f'image_extensions = [{extensions_str}]',
            '',
            '# Re-list the current directory when it changes on disk',
            '[watch]',
            f'enabled = {str(self.watch.enabled).lower()}',
            f'debounce_seconds = {self.watch.debounce_seconds}  # 0 = reload on every event',
            '',
            '[log]',
            f'level = "{self.log.level}"',
            f'file = "{self.log.file}"  # empty = no log file',
        ]

        config_path.write_text("\n".join(lines) + "\n")
