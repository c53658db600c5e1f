"""Shared pytest fixtures for the react-setup test suite.

Provides reusable fixtures for:
- ProjectConfig construction
- Temporary output directories
- Scripted prompt answers
- Mocked install commands
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from react_setup.scaffolder.models import ProjectConfig

FLAG_NAMES: tuple[str, ...] = (
    "use_typescript",
    "use_tailwind",
    "use_eslint",
    "use_router",
    "use_redux",
    "use_testing_library",
)


# ---------------------------------------------------------------------------
# Configs
# ---------------------------------------------------------------------------

@pytest.fixture
def make_config() -> Callable[..., ProjectConfig]:
    """Factory: ``make_config(use_router=True)`` -> ProjectConfig named ``demo``."""
    def _make(name: str = "demo", **flags: bool) -> ProjectConfig:
        return ProjectConfig(name=name, **flags)
    return _make


@pytest.fixture
def baseline_config() -> ProjectConfig:
    return ProjectConfig(name="demo")


@pytest.fixture
def full_config() -> ProjectConfig:
    """Every optional feature enabled."""
    return ProjectConfig(name="demo", **{flag: True for flag in FLAG_NAMES})


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Parent directory that projects are generated into (auto-cleanup)."""
    out = tmp_path / "output"
    out.mkdir()
    return out


# ---------------------------------------------------------------------------
# Prompting
# ---------------------------------------------------------------------------

@pytest.fixture
def scripted_answers() -> Callable[[list[str]], Callable[[str], str]]:
    """Build an ``ask`` callable that replays *answers* in order.

    The questions received are recorded on the returned callable's
    ``questions`` attribute.
    """
    def _build(answers: list[str]) -> Callable[[str], str]:
        replies: Iterator[str] = iter(answers)
        questions: list[str] = []

        def ask(question: str) -> str:
            questions.append(question)
            return next(replies)

        ask.questions = questions  # type: ignore[attr-defined]
        return ask
    return _build


# ---------------------------------------------------------------------------
# Install commands
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_run_command():
    """Patch the installer's ``run_command`` to succeed without spawning npm."""
    with patch(
        "react_setup.installer.run_command",
        new=AsyncMock(return_value=(0, "", "")),
    ) as mocked:
        yield mocked
