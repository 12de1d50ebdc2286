"""Artifact assembly."""

from .assembler import BuildArtifact, artifact_filename, assemble

__all__ = ["BuildArtifact", "artifact_filename", "assemble"]
