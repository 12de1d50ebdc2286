"""Failures that abort a userscript build."""

from pathlib import Path


class BuildError(Exception):
    """Base class for every failure of the build pipeline."""


class ManifestError(BuildError):
    """Project manifest is missing, unparsable or incomplete."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class ConfigError(BuildError):
    """Build configuration file is unreadable or has unknown keys."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class BundleError(BuildError):
    """External bundler reported a failure."""

    def __init__(self, message: str, diagnostics: list[str] | None = None) -> None:
        super().__init__(message)
        self.diagnostics = diagnostics or []


class WriteError(BuildError):
    """Output directory or artifact could not be written."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path
