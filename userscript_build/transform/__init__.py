"""Module-system rewriting of bundler output."""

from .exports import (
    ExportBinding,
    find_export_clause,
    find_unsupported_exports,
    parse_export_bindings,
    transform_exports,
)
from .wrapper import DEFAULT_GLOBAL_NAME, is_valid_global_name, wrap_module

__all__ = [
    "ExportBinding",
    "find_export_clause",
    "find_unsupported_exports",
    "parse_export_bindings",
    "transform_exports",
    "DEFAULT_GLOBAL_NAME",
    "is_valid_global_name",
    "wrap_module",
]
