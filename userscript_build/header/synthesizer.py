"""Renders the ==UserScript== metadata block."""

from ..manifest import ProjectManifest

OPEN_MARKER = "// ==UserScript=="
CLOSE_MARKER = "// ==/UserScript=="

_KEY_WIDTH = 13


def directive(key: str, value: str | None = None) -> str:
    """Render one header line, e.g. '// @name         foo'."""
    if value is None:
        return f"// @{key}"
    return f"// @{key:<{_KEY_WIDTH}}{value}"


def render_header(manifest: ProjectManifest) -> str:
    """Render the metadata block for manifest.

    Line order is fixed regardless of input order. The result ends with the
    closing marker and one blank line so code can be appended directly.
    """
    options = manifest.userscript
    lines = [OPEN_MARKER]

    lines.append(directive("name", options.name or manifest.name))
    lines.append(directive("version", options.version or manifest.version))

    if options.namespace:
        lines.append(directive("namespace", options.namespace))
    if manifest.description or options.description:
        lines.append(directive("description", options.description or manifest.description))
    if manifest.author or options.author:
        lines.append(directive("author", options.author or manifest.author))
    if manifest.homepage or options.homepage:
        lines.append(directive("homepage", options.homepage or manifest.homepage))
    if options.icon:
        lines.append(directive("icon", options.icon))

    for key, values in (
        ("match", options.match),
        ("include", options.include),
        ("exclude", options.exclude),
        ("require", options.require),
        ("grant", options.grant),
        ("connect", options.connect),
    ):
        for value in values:
            lines.append(directive(key, value))

    if options.run_at:
        lines.append(directive("run-at", options.run_at))
    if options.noframes:
        lines.append(directive("noframes"))

    lines.append(CLOSE_MARKER)
    lines.append("")
    lines.append("")
    return "\n".join(lines)
