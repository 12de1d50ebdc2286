"""Watch mode."""

from .events import SourceChange, iter_source_changes
from .loop import WatchLoop

__all__ = ["SourceChange", "iter_source_changes", "WatchLoop"]
