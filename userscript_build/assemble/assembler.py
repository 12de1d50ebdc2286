"""Writes the final .user.js artifact."""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from ..errors import WriteError

logger = logging.getLogger(__name__)

_USER_SUFFIX = re.compile(r"\.user$")


@dataclass
class BuildArtifact:
    path: Path
    content: str


def artifact_filename(name: str) -> str:
    """'foo' and 'foo.user' both become 'foo.user.js'."""
    return f"{_USER_SUFFIX.sub('', name)}.user.js"


def assemble(header: str, code: str, out_dir: Path, name: str) -> BuildArtifact:
    """Write header + code to out_dir, replacing any previous artifact."""
    artifact = BuildArtifact(path=out_dir / artifact_filename(name), content=header + code)
    try:
        artifact.path.write_text(artifact.content, encoding="utf-8")
    except OSError as e:
        raise WriteError(f"Cannot write {artifact.path}: {e}", artifact.path)
    logger.debug("Wrote %d bytes to %s", len(artifact.content), artifact.path)
    return artifact
