"""Rebuilds the userscript on every source change."""

import logging
from collections.abc import Iterable

from ..builder import UserscriptBuilder
from ..errors import BuildError, BundleError
from .events import SourceChange, iter_source_changes


class WatchLoop:
    """Sequential rebuild loop: Idle -> Building -> Idle, until terminated.

    A rebuild that fails with a BuildError is logged and the loop keeps
    watching. Any other exception propagates.
    """

    def __init__(self, builder: UserscriptBuilder, changes: Iterable[SourceChange] | None = None):
        self.builder = builder
        self._changes = changes
        self.logger = logging.getLogger(self.__class__.__name__)
        self.rebuilds = 0
        self.failures = 0

    def run(self) -> None:
        changes = self._changes
        if changes is None:
            changes = iter_source_changes(self.builder.source_dir, ignore=(self.builder.out_dir,))

        self.logger.info("Watching for changes")
        for change in changes:
            self.logger.debug("%s: %s", change.event_type, change.path)
            self.logger.info("Rebuilding...")
            self._rebuild()

    def _rebuild(self) -> None:
        self.rebuilds += 1
        try:
            self.builder.build()
        except BuildError as e:
            self.failures += 1
            self.logger.error(f"Rebuild failed: {e}")
            if isinstance(e, BundleError):
                for line in e.diagnostics:
                    self.logger.error(line)
