from .builder import BuildResult, UserscriptBuilder
from .config import BuildConfig
from .errors import BuildError, BundleError, ConfigError, ManifestError, WriteError
from .header import render_header
from .manifest import ProjectManifest, UserscriptOptions, load_manifest
from .transform import transform_exports, wrap_module

__all__ = [
    "BuildResult",
    "UserscriptBuilder",
    "BuildConfig",
    "BuildError",
    "BundleError",
    "ConfigError",
    "ManifestError",
    "WriteError",
    "render_header",
    "ProjectManifest",
    "UserscriptOptions",
    "load_manifest",
    "transform_exports",
    "wrap_module",
]
