"""Runs the ``npm install`` commands of a ``DependencySet``.

Groups are installed one at a time, in order, with npm's own output shown
to the user.  The first failing command stops the run.
"""

from __future__ import annotations

from pathlib import Path

from .scaffolder.models import DependencySet, InstallGroup
from .utils import print_step, run_command


class InstallError(Exception):
    """Raised when an install command exits with a non-zero status."""

    def __init__(self, group: InstallGroup, command: str, returncode: int, stderr: str = "") -> None:
        self.group = group
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        detail = f": {stderr}" if stderr else ""
        super().__init__(
            f"Installing {group.label} dependencies failed "
            f"(exit {returncode}): {command}{detail}"
        )


class DependencyInstaller:
    """Executes install groups with a package manager binary."""

    def __init__(self, executable: str = "npm", timeout: int = 600) -> None:
        self.executable = executable
        self.timeout = timeout

    async def install(self, deps: DependencySet, cwd: str | Path) -> list[InstallGroup]:
        """Install every group of *deps* inside *cwd*.

        Returns:
            The groups that were installed, in order.

        Raises:
            InstallError: On the first command that exits non-zero.
        """
        installed: list[InstallGroup] = []
        for group in deps:
            await self.install_group(group, cwd)
            installed.append(group)
        return installed

    async def install_group(self, group: InstallGroup, cwd: str | Path) -> None:
        argv = group.argv(self.executable)
        command = " ".join(argv)
        kind = "dev dependencies" if group.dev else "dependencies"
        print_step(f"Installing {group.label} {kind}: {', '.join(group.packages)}")

        returncode, _, stderr = await run_command(
            argv, cwd=cwd, timeout=self.timeout, capture=False
        )
        if returncode != 0:
            raise InstallError(group, command, returncode, stderr)
