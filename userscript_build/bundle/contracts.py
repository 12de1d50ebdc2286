from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class BundleResult:
    success: bool
    output_path: Path | None
    logs: list[str] = field(default_factory=list)
