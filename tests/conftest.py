"""Shared fixtures: a throwaway project and a stand-in for esbuild."""

import json
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from userscript_build.bundle import BundleInvoker

BUNDLED_MODULE = """// src/index.ts
var greeting = "hello";
export {
  greeting
};
"""


@pytest.fixture
def project(tmp_path: Path) -> Path:
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "index.ts").write_text('export const greeting = "hello";\n', encoding="utf-8")
    (tmp_path / "package.json").write_text(json.dumps({
        "name": "greeter.user",
        "version": "0.1.0",
        "description": "Says hello",
        "userscript": {"match": ["https://example.com/*"], "grant": ["none"]},
    }), encoding="utf-8")
    return tmp_path


@pytest.fixture
def fake_esbuild():
    """Patch BundleInvoker._run so the bundler writes BUNDLED_MODULE to --outfile.

    Only the invoker is replaced; other subprocess calls in a test still run.
    """
    state = {"output": BUNDLED_MODULE, "returncode": 0, "stderr": "", "calls": 0}

    def run(args, cwd):
        state["calls"] += 1
        if state["returncode"] == 0:
            outfile = next(a for a in args if a.startswith("--outfile=")).split("=", 1)[1]
            Path(outfile).write_text(state["output"], encoding="utf-8")
        return subprocess.CompletedProcess(args, state["returncode"], stdout="", stderr=state["stderr"])

    with patch.object(BundleInvoker, "_run", side_effect=run):
        yield state
