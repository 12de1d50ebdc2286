"""Single-build pipeline: manifest -> bundle -> transform -> wrap -> assemble."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

from .assemble import assemble
from .bundle import BundleInvoker
from .config import BuildConfig
from .errors import BundleError, WriteError
from .header import render_header
from .manifest import load_manifest
from .transform import find_export_clause, parse_export_bindings, transform_exports, wrap_module


@dataclass
class BuildResult:
    artifact_path: Path
    export_names: list[str] = field(default_factory=list)
    duration_seconds: float = 0.0


class UserscriptBuilder:
    """Builds the userscript artifact for one project directory."""

    def __init__(self, project_path: Path, config: BuildConfig | None = None):
        self.project_path = project_path.resolve()
        self.config = config or BuildConfig.load(self.project_path)
        self.config.validate()
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def manifest_path(self) -> Path:
        return self.config.resolve(self.project_path, self.config.manifest_file)

    @property
    def entry_path(self) -> Path:
        return self.config.resolve(self.project_path, self.config.entry)

    @property
    def source_dir(self) -> Path:
        return self.config.resolve(self.project_path, self.config.source_dir)

    @property
    def out_dir(self) -> Path:
        return self.config.resolve(self.project_path, self.config.out_dir)

    def build(self) -> BuildResult:
        """Run the whole pipeline once. Raises BuildError subclasses on failure."""
        start = time.perf_counter()

        # Re-read on every build, including watch rebuilds.
        manifest = load_manifest(self.manifest_path)

        try:
            self.out_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise WriteError(f"Cannot create {self.out_dir}: {e}", self.out_dir)

        invoker = BundleInvoker(self.out_dir, self.config.bundler, self.config.bundler_args)
        result = invoker.invoke(self.entry_path)
        if not result.success or result.output_path is None:
            raise BundleError("Build failed", result.logs)

        try:
            bundled = result.output_path.read_text(encoding="utf-8")
        except OSError as e:
            raise BundleError("Cannot read bundler output", [str(e)])
        clause = find_export_clause(bundled)
        export_names = [b.alias for b in parse_export_bindings(clause.group(0))] if clause else []

        code = wrap_module(transform_exports(bundled), self.config.global_name)
        artifact = assemble(render_header(manifest), code, self.out_dir, manifest.name)

        self.logger.info(f"Userscript built to {artifact.path}")
        return BuildResult(
            artifact_path=artifact.path,
            export_names=export_names,
            duration_seconds=time.perf_counter() - start,
        )
