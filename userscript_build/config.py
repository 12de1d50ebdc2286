"""Build configuration management."""

import json
from dataclasses import dataclass, field, asdict
from pathlib import Path

from .errors import ConfigError
from .transform import DEFAULT_GLOBAL_NAME, is_valid_global_name

CONFIG_DIR = ".userscript"
CONFIG_FILE = "build.json"

_STRING_FIELDS = ("manifest_file", "entry", "source_dir", "out_dir", "global_name", "bundler")


@dataclass
class BuildConfig:
    manifest_file: str = "package.json"
    entry: str = "src/index.ts"
    source_dir: str = "src"
    out_dir: str = "dist"
    global_name: str = DEFAULT_GLOBAL_NAME
    bundler: str = "esbuild"
    bundler_args: list[str] = field(default_factory=list)

    @classmethod
    def load(cls, project_path: Path) -> "BuildConfig":
        config_path = project_path / CONFIG_DIR / CONFIG_FILE
        if config_path.exists():
            try:
                data = json.loads(config_path.read_text(encoding="utf-8"))
            except (OSError, json.JSONDecodeError) as e:
                raise ConfigError(f"Cannot read {config_path}: {e}", config_path)
            return cls._from_dict(data, config_path)
        return cls._default()

    @classmethod
    def _default(cls) -> "BuildConfig":
        return cls()

    @classmethod
    def _from_dict(cls, data: dict, config_path: Path | None = None) -> "BuildConfig":
        if not isinstance(data, dict):
            raise ConfigError("Build config must be a JSON object", config_path)
        try:
            config = cls(**data)
        except TypeError as e:
            raise ConfigError(f"Invalid build config: {e}", config_path)
        config.validate(config_path)
        return config

    def validate(self, config_path: Path | None = None) -> None:
        for key in _STRING_FIELDS:
            if not isinstance(getattr(self, key), str):
                raise ConfigError(f"'{key}' must be a string", config_path)
        if not isinstance(self.bundler_args, list) or not all(isinstance(a, str) for a in self.bundler_args):
            raise ConfigError("'bundler_args' must be a list of strings", config_path)
        if not is_valid_global_name(self.global_name):
            raise ConfigError(f"'global_name' is not a JavaScript identifier: {self.global_name!r}", config_path)

    def save(self, project_path: Path) -> None:
        config_dir = project_path / CONFIG_DIR
        config_dir.mkdir(exist_ok=True)
        config_path = config_dir / CONFIG_FILE
        config_path.write_text(json.dumps(asdict(self), indent=2), encoding="utf-8")

    def resolve(self, project_path: Path, relative: str) -> Path:
        """Resolve a configured path against the project directory."""
        path = Path(relative)
        return path if path.is_absolute() else project_path / path
