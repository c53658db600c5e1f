"""Writes a composed ``FilePlan`` to disk."""

from __future__ import annotations

import asyncio
from pathlib import Path, PurePosixPath

from .models import FilePlan


class PlanWriteError(Exception):
    """Raised when a plan entry cannot be written under the project root."""

    def __init__(self, message: str, path: str = "") -> None:
        self.path = path
        super().__init__(message)


class PlanWriter:
    """Materialises a ``FilePlan`` under a project root directory.

    The root is only created once :meth:`write` is called, so callers that
    abort on an invalid configuration never leave an empty directory behind.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    async def write(self, plan: FilePlan, root: str | Path) -> list[Path]:
        """Write every entry of *plan* below *root*.

        Args:
            plan: The composed file plan.
            root: Project directory.  Created (with parents) if missing.

        Returns:
            The written file paths, sorted.

        Raises:
            PlanWriteError: If an entry is absolute or escapes *root*.
        """
        root_path = Path(root)
        targets = [(self.resolve(root_path, rel), plan[rel]) for rel in plan.paths()]

        await asyncio.to_thread(root_path.mkdir, parents=True, exist_ok=True)

        written: list[Path] = []
        for target, content in targets:
            await asyncio.to_thread(_write_file, target, content, self.encoding)
            written.append(target)
        return written

    @staticmethod
    def resolve(root: Path, relative: str) -> Path:
        """Map a plan path onto *root*, rejecting anything outside it."""
        rel = PurePosixPath(relative)
        if rel.is_absolute() or not rel.parts or ".." in rel.parts:
            raise PlanWriteError(
                f"Plan path {relative!r} is not inside the project root", path=relative
            )
        return root.joinpath(*rel.parts)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str, encoding: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding=encoding)
