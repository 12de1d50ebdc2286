"""Filesystem change notifications as a blocking iterator."""

import logging
import queue
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

logger = logging.getLogger(__name__)

# inotify reports reads too; they are not changes.
IGNORED_EVENT_TYPES = frozenset({"opened", "closed_no_write"})

# Bounded wait so Ctrl-C is delivered promptly on every platform.
POLL_SECONDS = 0.5


@dataclass(frozen=True)
class SourceChange:
    event_type: str
    path: str


class _QueueHandler(FileSystemEventHandler):
    """Forwards file events from the observer thread into a queue."""

    def __init__(self, changes: "queue.Queue[SourceChange]", ignore: tuple[Path, ...] = ()) -> None:
        super().__init__()
        self._changes = changes
        self._ignore = ignore

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.is_directory or event.event_type in IGNORED_EVENT_TYPES:
            return
        if any(Path(str(event.src_path)).is_relative_to(path) for path in self._ignore):
            return
        self._changes.put(SourceChange(event_type=event.event_type, path=str(event.src_path)))


def iter_source_changes(source_dir: Path, ignore: tuple[Path, ...] = ()) -> Iterator[SourceChange]:
    """Yield every change under source_dir, forever.

    Changes under any of the ignore directories are dropped; the build output
    may live inside source_dir.

    Blocks until the next change arrives. Closing the generator stops the
    observer thread.
    """
    changes: "queue.Queue[SourceChange]" = queue.Queue()
    observer = Observer()
    observer.schedule(_QueueHandler(changes, ignore), str(source_dir), recursive=True)
    observer.start()
    logger.debug("Observing %s", source_dir)
    try:
        while True:
            try:
                change = changes.get(timeout=POLL_SECONDS)
            except queue.Empty:
                continue
            yield change
    finally:
        observer.stop()
        observer.join()
