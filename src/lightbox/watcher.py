"""File system watcher for re-listing the current directory."""

import logging
import threading
from pathlib import Path
from typing import Callable

logger = logging.getLogger(__name__)

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer


class DirectoryEventHandler(FileSystemEventHandler):
    """Handler that reports any change inside one directory, with optional debouncing."""

    def __init__(
        self,
        on_change: Callable[[], None],
        debounce_seconds: float = 0.0,
    ):
        super().__init__()
        self.on_change = on_change
        self.debounce_seconds = debounce_seconds
        self._lock = threading.Lock()
        self._timers: set[threading.Timer] = set()
        self._closed = False

    def _schedule_update(self, path: str) -> None:
        """Hand the change off to a timer thread, restarting it when debouncing.

        on_change never runs on the observer thread, so it may block or
        re-arm the watch without holding up event dispatch.
        """
        logger.debug("Directory change detected: %s", path)
        with self._lock:
            if self._closed:
                return

            # Cancel existing timer; without debounce every event fires once
            if self.debounce_seconds > 0:
                for timer in self._timers:
                    timer.cancel()
                self._timers.clear()

            timer = threading.Timer(max(self.debounce_seconds, 0.0), self._process_pending)
            timer.args = (timer,)
            timer.daemon = True
            self._timers.add(timer)
            timer.start()

    def _process_pending(self, timer: threading.Timer) -> None:
        with self._lock:
            self._timers.discard(timer)
            if self._closed:
                return
        self.on_change()

    def cancel(self) -> None:
        """Drop any pending notification and ignore later events."""
        with self._lock:
            self._closed = True
            for timer in self._timers:
                timer.cancel()
            self._timers.clear()

    def on_created(self, event: FileSystemEvent) -> None:
        self._schedule_update(event.src_path)

    def on_deleted(self, event: FileSystemEvent) -> None:
        self._schedule_update(event.src_path)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._schedule_update(event.src_path)

    def on_moved(self, event: FileSystemEvent) -> None:
        self._schedule_update(event.src_path)


class DirectoryWatcher:
    """Holds at most one live watch, on the directory currently shown."""

    def __init__(self, debounce_seconds: float = 0.0):
        self.debounce_seconds = debounce_seconds
        self._observer: Observer | None = None
        self._handler: DirectoryEventHandler | None = None
        self._directory: Path | None = None

    @property
    def watching(self) -> Path | None:
        """Directory being watched, or None."""
        return self._directory

    @property
    def active(self) -> bool:
        return self._observer is not None

    def watch(self, directory: Path, on_change: Callable[[], None]) -> None:
        """Close any previous watch and start watching a directory.

        Raises:
            OSError: If the directory cannot be watched. The previous watch
                is closed regardless.
        """
        self.close()

        handler = DirectoryEventHandler(on_change, self.debounce_seconds)
        observer = Observer()
        # Observer.schedule does not always check the path itself
        if not Path(directory).is_dir():
            raise FileNotFoundError(f"Not a directory: {directory}")
        observer.schedule(handler, str(directory), recursive=False)
        observer.daemon = True
        observer.start()

        self._observer = observer
        self._handler = handler
        self._directory = Path(directory)
        logger.info("Directory watcher started: %s", directory)

    def close(self) -> None:
        """Stop watching. Safe to call repeatedly."""
        if self._handler is not None:
            self._handler.cancel()
        if self._observer is not None:
            self._observer.stop()
            # A thread cannot join itself
            if self._observer.is_alive() and self._observer is not threading.current_thread():
                self._observer.join(timeout=1.0)
            logger.debug("Directory watcher closed: %s", self._directory)
        self._observer = None
        self._handler = None
        self._directory = None

    def __enter__(self) -> "DirectoryWatcher":
        return self

    def __exit__(self, *args) -> None:
        self.close()
