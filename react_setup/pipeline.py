"""react-setup pipeline: ask, compose, write, install.

Run with ``react-setup`` or ``python -m react_setup.pipeline``.  The command
takes no flags; runtime settings come from ``REACT_SETUP_*`` environment
variables (see :class:`react_setup.config.Settings`).
"""

from __future__ import annotations

import asyncio
import sys
import time
from typing import Any

from .config import Settings
from .installer import DependencyInstaller, InstallError
from .prompts import ProjectPrompter
from .scaffolder import InvalidConfig, PlanWriteError, PlanWriter, ProjectConfig, compose
from .utils import (
    console,
    print_banner,
    print_error,
    print_step,
    print_success,
    print_summary_table,
    print_warning,
)


class Pipeline:
    """Runs one scaffolding session end to end.

    Steps:
        1. Ask the questions (skipped when a config is passed in).
        2. Compose the file plan; an invalid name stops here, before any
           directory exists.
        3. Write the plan into ``<output_dir>/<name>``.
        4. Install the dependency groups in order.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        prompter: ProjectPrompter | None = None,
        writer: PlanWriter | None = None,
        installer: DependencyInstaller | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.prompter = prompter or ProjectPrompter()
        self.writer = writer or PlanWriter()
        self.installer = installer or DependencyInstaller(
            executable=self.settings.npm_executable,
            timeout=self.settings.install_timeout,
        )

    async def run(self, config: ProjectConfig | None = None) -> dict[str, Any]:
        """Execute the session.

        Returns:
            A result dict with ``success`` and, when it got that far,
            ``project_path``, ``files``, ``installed`` and ``warnings``.
        """
        start = time.monotonic()
        result: dict[str, Any] = {"success": False}

        if config is None:
            print_banner(
                "Welcome to React Setup!",
                "This utility will help you create a new React application "
                "without create-react-app.",
            )
            config = self.prompter.ask_config()

        console.print()
        console.print("[bold]Creating your React project...[/bold]")

        try:
            plan, deps = compose(config)
        except InvalidConfig as exc:
            print_error(f"Error: {exc}")
            result["error"] = str(exc)
            return result

        for warning in plan.warnings:
            print_warning(f"Warning: {warning}")
        result["warnings"] = list(plan.warnings)

        project_path = self.settings.project_path(config.name)
        result["project_path"] = project_path

        print_step(f"Writing {len(plan)} files to {project_path}")
        try:
            written = await self.writer.write(plan, project_path)
        except (PlanWriteError, OSError) as exc:
            print_error(f"Error writing project files: {exc}")
            result["error"] = str(exc)
            return result
        result["files"] = written

        if self.settings.skip_install:
            print_warning("Skipping dependency installation (REACT_SETUP_SKIP_INSTALL).")
            result["installed"] = []
        else:
            try:
                installed = await self.installer.install(deps, project_path)
            except InstallError as exc:
                print_error(f"Error: {exc}")
                result["error"] = str(exc)
                return result
            result["installed"] = [g.label for g in installed]

        result["success"] = True
        result["duration"] = time.monotonic() - start

        console.print()
        print_summary_table(
            {
                "Project": config.name,
                "Location": str(project_path),
                "Files written": str(len(written)),
                "Install groups": ", ".join(deps.labels()),
                "Duration": f"{result['duration']:.1f}s",
            },
            title="React project",
        )
        print_success("Project created successfully!")
        console.print(f"\nTo get started:\n  cd {project_path}\n  npm start\n")
        return result


def main() -> None:
    """CLI entry point for ``react-setup``."""
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        print_error(f"Error: invalid REACT_SETUP_* environment setting: {exc}")
        sys.exit(1)

    pipeline = Pipeline(settings)
    try:
        result = asyncio.run(pipeline.run())
    except KeyboardInterrupt:
        console.print()
        print_warning("Aborted.")
        sys.exit(130)

    if not result.get("success"):
        sys.exit(1)


if __name__ == "__main__":
    main()
