"""Rewrites the bundler's export clause into assignments on `exports`.

This is a textual rewrite of trusted bundler output, not a parse. The only
supported form is one named-export clause at statement level:

    export { ident [as alias] (, ident [as alias])* [,] };

Only the first such clause is rewritten. Any other export syntax
(`export default`, `export const`, `export * from`, a second clause) passes
through unchanged and is reported with a warning, because its bindings never
reach the published namespace.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_CLAUSE_PATTERN = re.compile(r"export\s*\{[\s\S]*?\};")
_CLAUSE_PREFIX = re.compile(r"^export\s*\{")
_CLAUSE_SUFFIX = re.compile(r"\};?$")
_AS_PATTERN = re.compile(r"\s+as\s+")
_EXPORT_LINE = re.compile(r"^[ \t]*export\b.*$", re.MULTILINE)


@dataclass(frozen=True)
class ExportBinding:
    """One `source as alias` pair from an export clause."""

    source: str
    alias: str

    def to_assignment(self) -> str:
        return f"exports.{self.alias} = {self.source};"


def find_export_clause(source: str) -> re.Match[str] | None:
    """Return the first `export { ... };` clause in source, if any."""
    return _CLAUSE_PATTERN.search(source)


def parse_export_bindings(clause: str) -> list[ExportBinding]:
    """Split an export clause into bindings, in declaration order."""
    body = _CLAUSE_PREFIX.sub("", clause.strip())
    body = _CLAUSE_SUFFIX.sub("", body).strip()

    bindings: list[ExportBinding] = []
    for candidate in body.split(","):
        candidate = candidate.strip()
        if not candidate:
            continue
        parts = _AS_PATTERN.split(candidate)
        if len(parts) == 2:
            bindings.append(ExportBinding(source=parts[0].strip(), alias=parts[1].strip()))
        else:
            bindings.append(ExportBinding(source=parts[0].strip(), alias=parts[0].strip()))
    return bindings


def find_unsupported_exports(source: str) -> list[str]:
    """Return lines that still start with the `export` keyword."""
    return [match.group(0).strip() for match in _EXPORT_LINE.finditer(source)]


def transform_exports(source: str) -> str:
    """Replace the first export clause with `exports.<alias> = <source>;` lines.

    Source without a clause is returned unchanged.
    """
    match = find_export_clause(source)
    if match:
        bindings = parse_export_bindings(match.group(0))
        assignments = "\n".join(binding.to_assignment() for binding in bindings)
        source = source[:match.start()] + assignments + source[match.end():]
        logger.debug("Rewrote export clause with %d binding(s)", len(bindings))

    for line in find_unsupported_exports(source):
        logger.warning("Unsupported export left in bundle, not published: %s", line)

    return source
