"""Runs esbuild to produce a single ES-module file."""

import logging
import shutil
import subprocess
from pathlib import Path

from .contracts import BundleResult

logger = logging.getLogger(__name__)

OUTPUT_FILENAME = "index.js"


class BundleInvoker:
    """Bundles one entry module for the browser with esbuild.

    Output is ESM, unminified and without a source map so the artifact stays
    readable in a userscript manager's editor.
    """

    def __init__(self, out_dir: Path, executable: str = "esbuild", extra_args: list[str] | None = None):
        self.out_dir = out_dir
        self.executable = executable
        self.extra_args = list(extra_args or [])

    @property
    def output_path(self) -> Path:
        return self.out_dir / OUTPUT_FILENAME

    def command(self, entry: Path) -> list[str]:
        return [
            shutil.which(self.executable) or self.executable,
            str(entry),
            "--bundle",
            "--platform=browser",
            "--format=esm",
            "--log-level=warning",
            f"--outfile={self.output_path}",
            *self.extra_args,
        ]

    def _run(self, args: list[str], cwd: Path) -> subprocess.CompletedProcess:
        return subprocess.run(
            args,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )

    def invoke(self, entry: Path) -> BundleResult:
        """Bundle entry. Never raises for bundler failures; see BundleResult.logs."""
        if not entry.exists():
            return BundleResult(success=False, output_path=None, logs=[f"Entry module not found: {entry}"])

        args = self.command(entry)
        logger.debug("Running %s", " ".join(args))
        try:
            result = self._run(args, entry.parent)
        except FileNotFoundError:
            return BundleResult(
                success=False,
                output_path=None,
                logs=[f"Bundler executable not found: {self.executable}"],
            )

        logs = _diagnostics(result.stderr) + _diagnostics(result.stdout)
        if result.returncode != 0:
            return BundleResult(success=False, output_path=None, logs=logs)
        if not self.output_path.exists():
            logs.append(f"Bundler did not write {self.output_path}")
            return BundleResult(success=False, output_path=None, logs=logs)

        for line in logs:
            logger.warning(line)
        return BundleResult(success=True, output_path=self.output_path, logs=logs)


def _diagnostics(output: str | None) -> list[str]:
    if not output:
        return []
    return [line for line in output.splitlines() if line.strip()]
