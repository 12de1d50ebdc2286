"""Project manifest loading."""

from .contracts import ProjectManifest, UserscriptOptions
from .reader import load_manifest, manifest_from_dict

__all__ = ["ProjectManifest", "UserscriptOptions", "load_manifest", "manifest_from_dict"]
