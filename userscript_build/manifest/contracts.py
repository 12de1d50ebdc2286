"""Data contracts for the project manifest."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class UserscriptOptions:
    """Userscript-specific overrides read from the manifest's "userscript" key."""
    name: str | None = None
    namespace: str | None = None
    version: str | None = None
    description: str | None = None
    author: str | None = None
    homepage: str | None = None
    icon: str | None = None
    match: tuple[str, ...] = ()
    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()
    require: tuple[str, ...] = ()
    grant: tuple[str, ...] = ()
    connect: tuple[str, ...] = ()
    run_at: str | None = None
    noframes: bool = False


@dataclass(frozen=True)
class ProjectManifest:
    """Project metadata, loaded once per build and never mutated."""
    name: str
    version: str
    description: str | None = None
    author: str | None = None
    homepage: str | None = None
    userscript: UserscriptOptions = field(default_factory=UserscriptOptions)
