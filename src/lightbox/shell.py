"""Open paths in the platform file manager."""

import logging
import os
import shutil
import subprocess
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def find_opener() -> str | None:
    """Find the command that opens a path with the desktop default application."""
    if sys.platform == "darwin":
        return shutil.which("open")
    return shutil.which("xdg-open")


def open_path(path: Path) -> bool:
    """Open a path in the OS file manager. Returns False if it could not be opened."""
    path = Path(path)
    if not path.exists():
        return False

    if sys.platform == "win32":
        try:
            os.startfile(str(path))
        except OSError as e:
            logger.warning("Failed to open %s: %s", path, e)
            return False
        return True

    opener = find_opener()
    if opener is None:
        logger.warning("No opener command found for %s", path)
        return False

    try:
        result = subprocess.run(
            [opener, str(path)],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
            timeout=10,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.warning("Failed to open %s: %s", path, e)
        return False

    return result.returncode == 0
