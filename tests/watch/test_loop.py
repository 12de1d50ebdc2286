"""Tests for WatchLoop and the change iterator."""

import logging
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from watchdog.events import DirModifiedEvent, FileClosedNoWriteEvent, FileModifiedEvent, FileOpenedEvent

from userscript_build.errors import BundleError, ManifestError
from userscript_build.watch import SourceChange, WatchLoop, iter_source_changes
from userscript_build.watch.events import _QueueHandler


@pytest.fixture
def builder() -> MagicMock:
    return MagicMock()


def _changes(n: int) -> list[SourceChange]:
    return [SourceChange(event_type="modified", path=f"src/file{i}.ts") for i in range(n)]


class TestWatchLoop:
    def test_one_rebuild_per_change(self, builder: MagicMock) -> None:
        loop = WatchLoop(builder, changes=_changes(3))
        loop.run()

        assert builder.build.call_count == 3
        assert loop.rebuilds == 3
        assert loop.failures == 0

    def test_rebuilds_are_sequential(self, builder: MagicMock) -> None:
        """The next change is not requested until the current rebuild finished."""
        events: list[str] = []

        def changes():
            for change in _changes(2):
                events.append(f"yield {change.path}")
                yield change

        builder.build.side_effect = lambda: events.append("build")
        WatchLoop(builder, changes=changes()).run()

        assert events == ["yield src/file0.ts", "build", "yield src/file1.ts", "build"]

    def test_build_error_is_logged_and_watching_continues(
        self, builder: MagicMock, caplog: pytest.LogCaptureFixture
    ) -> None:
        builder.build.side_effect = [BundleError("Build failed", ["bad import"]), None]
        loop = WatchLoop(builder, changes=_changes(2))

        with caplog.at_level(logging.INFO):
            loop.run()

        assert builder.build.call_count == 2
        assert loop.failures == 1
        assert "Rebuild failed: Build failed" in caplog.text
        assert "bad import" in caplog.text

    def test_manifest_error_does_not_stop_loop(self, builder: MagicMock) -> None:
        builder.build.side_effect = [ManifestError("Invalid JSON"), None]
        loop = WatchLoop(builder, changes=_changes(2))
        loop.run()

        assert loop.rebuilds == 2
        assert loop.failures == 1

    def test_unexpected_error_propagates(self, builder: MagicMock) -> None:
        builder.build.side_effect = RuntimeError("boom")
        with pytest.raises(RuntimeError):
            WatchLoop(builder, changes=_changes(2)).run()
        assert builder.build.call_count == 1

    def test_defaults_to_watching_source_dir(self, builder: MagicMock, tmp_path: Path) -> None:
        builder.source_dir = tmp_path
        builder.out_dir = tmp_path / "dist"
        with patch("userscript_build.watch.loop.iter_source_changes", return_value=iter(_changes(1))) as it:
            WatchLoop(builder).run()

        it.assert_called_once_with(tmp_path, ignore=(tmp_path / "dist",))
        builder.build.assert_called_once()


class TestQueueHandler:
    def test_file_events_are_queued(self) -> None:
        queued = MagicMock()
        _QueueHandler(queued).dispatch(FileModifiedEvent("/src/a.ts"))

        queued.put.assert_called_once_with(SourceChange(event_type="modified", path="/src/a.ts"))

    @pytest.mark.parametrize("event", [
        DirModifiedEvent("/src"),
        FileOpenedEvent("/src/a.ts"),
        FileClosedNoWriteEvent("/src/a.ts"),
    ])
    def test_non_changes_are_skipped(self, event) -> None:
        queued = MagicMock()
        _QueueHandler(queued).dispatch(event)

        queued.put.assert_not_called()

    def test_events_under_ignored_dir_are_skipped(self, tmp_path: Path) -> None:
        """Output written inside the watched tree does not trigger a rebuild."""
        queued = MagicMock()
        handler = _QueueHandler(queued, ignore=(tmp_path / "src" / "dist",))

        handler.dispatch(FileModifiedEvent(str(tmp_path / "src" / "dist" / "index.js")))
        handler.dispatch(FileModifiedEvent(str(tmp_path / "src" / "index.ts")))

        queued.put.assert_called_once_with(
            SourceChange(event_type="modified", path=str(tmp_path / "src" / "index.ts"))
        )


class _FakeObserver:
    """Delivers one modification as soon as it is started."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.stopped = False

    def schedule(self, handler, path, recursive=False):
        self.handler = handler

    def start(self) -> None:
        self.handler.dispatch(FileModifiedEvent(str(self.path / "index.ts")))

    def stop(self) -> None:
        self.stopped = True

    def join(self) -> None:
        pass


class TestIterSourceChanges:
    def test_yields_changes_and_stops_observer_on_close(self, tmp_path: Path) -> None:
        observer = _FakeObserver(tmp_path)
        with patch("userscript_build.watch.events.Observer", return_value=observer):
            changes = iter_source_changes(tmp_path)
            change = next(changes)
            changes.close()

        assert change == SourceChange(event_type="modified", path=str(tmp_path / "index.ts"))
        assert observer.stopped is True
