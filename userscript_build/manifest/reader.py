"""Reads package.json into a ProjectManifest."""

import json
import logging
from pathlib import Path
from typing import Any

from ..errors import ManifestError
from .contracts import ProjectManifest, UserscriptOptions

logger = logging.getLogger(__name__)

_SCALAR_OPTIONS = ("name", "namespace", "version", "description", "author", "homepage", "icon")
_LIST_OPTIONS = ("match", "include", "exclude", "require", "grant", "connect")


def load_manifest(path: Path) -> ProjectManifest:
    """Load the manifest at path. Raises ManifestError on any failure."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ManifestError(f"Manifest not found: {path}", path)
    except OSError as e:
        raise ManifestError(f"Cannot read manifest {path}: {e}", path)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid JSON in {path}: {e}", path)

    if not isinstance(data, dict):
        raise ManifestError(f"Manifest must be a JSON object: {path}", path)

    logger.debug("Loaded manifest %s", path)
    return manifest_from_dict(data, path)


def manifest_from_dict(data: dict[str, Any], path: Path | None = None) -> ProjectManifest:
    """Build a ProjectManifest from decoded package.json data."""
    name = _string(data, "name", path)
    version = _string(data, "version", path)
    if not name:
        raise ManifestError("Manifest is missing 'name'", path)
    if not version:
        raise ManifestError("Manifest is missing 'version'", path)

    return ProjectManifest(
        name=name,
        version=version,
        description=_string(data, "description", path),
        author=_person(data.get("author"), path),
        homepage=_string(data, "homepage", path),
        userscript=_options_from_dict(data.get("userscript"), path),
    )


def _options_from_dict(data: Any, path: Path | None) -> UserscriptOptions:
    if data is None:
        return UserscriptOptions()
    if not isinstance(data, dict):
        raise ManifestError("'userscript' must be an object", path)

    values: dict[str, Any] = {}
    for key in _SCALAR_OPTIONS:
        values[key] = _person(data.get(key), path) if key == "author" else _string(data, key, path)
    for key in _LIST_OPTIONS:
        values[key] = _string_list(data, key, path)

    run_at_key = "run-at" if "run-at" in data else "runAt"
    values["run_at"] = _string(data, run_at_key, path)

    noframes = data.get("noframes", False)
    if not isinstance(noframes, bool):
        raise ManifestError("'userscript.noframes' must be a boolean", path)
    values["noframes"] = noframes

    return UserscriptOptions(**values)


def _string(data: dict[str, Any], key: str, path: Path | None) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ManifestError(f"'{key}' must be a string", path)
    return value


def _string_list(data: dict[str, Any], key: str, path: Path | None) -> tuple[str, ...]:
    value = data.get(key)
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ManifestError(f"'{key}' must be a list of strings", path)
    return tuple(value)


def _person(value: Any, path: Path | None) -> str | None:
    """Accept npm's "author" as a string or a {name, email, url} object."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, dict) and isinstance(value.get("name"), str):
        email = value.get("email")
        return f"{value['name']} <{email}>" if email else value["name"]
    raise ManifestError("'author' must be a string or an object with a 'name'", path)
