"""Data types passed between the prompt, composer, writer and installer.

``ProjectConfig`` is the single input of the composer; ``FilePlan`` and
``DependencySet`` are its outputs.  All three are immutable once built.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field


class InvalidConfig(ValueError):
    """Raised when a ``ProjectConfig`` cannot be turned into a project."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid project name {name!r}: {reason}")


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


class ProjectConfig(BaseModel):
    """Answers collected from the user, frozen after construction."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., description="Project directory and package name")
    use_typescript: bool = Field(default=False)
    use_tailwind: bool = Field(default=False)
    use_eslint: bool = Field(default=False)
    use_router: bool = Field(default=False)
    use_redux: bool = Field(default=False)
    use_testing_library: bool = Field(default=False)

    @property
    def component_ext(self) -> str:
        """Extension for JSX-bearing source files (``jsx`` or ``tsx``)."""
        return "tsx" if self.use_typescript else "jsx"

    @property
    def module_ext(self) -> str:
        """Extension for plain modules such as the store (``js`` or ``ts``)."""
        return "ts" if self.use_typescript else "js"


# ---------------------------------------------------------------------------
# Outputs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class InstallGroup:
    """One package-manager invocation."""

    label: str
    packages: tuple[str, ...]
    dev: bool = False
    subcommand: str = "install"

    def argv(self, executable: str = "npm") -> list[str]:
        """Return the command line for this group, e.g. ``npm install -D x``."""
        cmd = [executable, self.subcommand]
        if self.dev:
            cmd.append("--save-dev")
        cmd.extend(self.packages)
        return cmd


@dataclass(frozen=True)
class DependencySet:
    """Ordered install groups.  Iteration order is the install order."""

    groups: tuple[InstallGroup, ...] = ()

    def __iter__(self) -> Iterator[InstallGroup]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    def labels(self) -> list[str]:
        return [g.label for g in self.groups]

    def packages(self) -> list[str]:
        """Every package across all groups, in install order."""
        return [pkg for g in self.groups for pkg in g.packages]


@dataclass(frozen=True)
class FilePlan:
    """Relative POSIX path -> file content for one scaffolding run.

    ``warnings`` lists optional features that were replaced by a fallback
    while composing the plan.
    """

    files: Mapping[str, str] = field(default_factory=dict)
    warnings: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Freeze a private copy so callers cannot mutate the plan afterwards.
        object.__setattr__(self, "files", MappingProxyType(dict(self.files)))

    def __getitem__(self, path: str) -> str:
        return self.files[path]

    def __contains__(self, path: object) -> bool:
        return path in self.files

    def __iter__(self) -> Iterator[str]:
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilePlan):
            return NotImplemented
        return dict(self.files) == dict(other.files) and self.warnings == other.warnings

    def __hash__(self) -> int:
        return hash((tuple(sorted(self.files.items())), self.warnings))

    def paths(self) -> list[str]:
        """Sorted list of every path in the plan."""
        return sorted(self.files)
