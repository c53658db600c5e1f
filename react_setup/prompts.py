"""Interactive questions that produce a ``ProjectConfig``."""

from __future__ import annotations

from collections.abc import Callable

from rich.console import Console
from rich.prompt import Prompt

from .scaffolder.models import ProjectConfig
from .utils import console as default_console

DEFAULT_PROJECT_NAME = "my-react-app"

# (ProjectConfig field, question) in the order they are asked.
QUESTIONS: tuple[tuple[str, str], ...] = (
    ("use_typescript", "Would you like to use TypeScript? (y/n)"),
    ("use_tailwind", "Would you like to use Tailwind CSS? (y/n)"),
    ("use_eslint", "Would you like to use ESLint? (y/n)"),
    ("use_router", "Would you like to use React Router? (y/n)"),
    ("use_redux", "Would you like to use Redux Toolkit? (y/n)"),
    ("use_testing_library", "Would you like to use React Testing Library? (y/n)"),
)


def is_yes(answer: str | None) -> bool:
    """Only ``y`` (any case, surrounding whitespace ignored) means yes."""
    return (answer or "").strip().lower() == "y"


class ProjectPrompter:
    """Asks the scaffolding questions one after another.

    Args:
        ask: Callable taking the question text and returning the raw answer.
            Defaults to :func:`rich.prompt.Prompt.ask` on *console*.
        console: Console used by the default ``ask``.
    """

    def __init__(
        self,
        ask: Callable[[str], str] | None = None,
        console: Console | None = None,
    ) -> None:
        self.console = console or default_console
        self._ask = ask or self._rich_ask

    def _rich_ask(self, question: str) -> str:
        return Prompt.ask(question, console=self.console, default="", show_default=False)

    def ask_name(self) -> str:
        answer = (self._ask("What is the name of your project?") or "").strip()
        return answer or DEFAULT_PROJECT_NAME

    def ask_config(self) -> ProjectConfig:
        """Ask every question and return the frozen configuration."""
        answers: dict[str, object] = {"name": self.ask_name()}
        for field_name, question in QUESTIONS:
            answers[field_name] = is_yes(self._ask(question))
        return ProjectConfig(**answers)
