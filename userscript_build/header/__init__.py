"""Userscript metadata header synthesis."""

from .synthesizer import CLOSE_MARKER, OPEN_MARKER, directive, render_header

__all__ = ["CLOSE_MARKER", "OPEN_MARKER", "directive", "render_header"]
