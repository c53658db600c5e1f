"""React project scaffolder -- composes and writes new project trees.

The composer is a pure function from a ``ProjectConfig`` to a ``FilePlan``
(path -> content) and a ``DependencySet`` (ordered ``npm install`` groups).
Writing the plan and running the installs are separate steps.

Quick usage::

    from react_setup.scaffolder import PlanWriter, ProjectConfig, compose

    config = ProjectConfig(name="demo", use_typescript=True)
    plan, deps = compose(config)
    await PlanWriter().write(plan, "./demo")
"""

from react_setup.scaffolder.composer import TemplateComposer, compose, validate_project_name
from react_setup.scaffolder.models import (
    DependencySet,
    FilePlan,
    InstallGroup,
    InvalidConfig,
    ProjectConfig,
)
from react_setup.scaffolder.templates import TemplateRenderer
from react_setup.scaffolder.writer import PlanWriteError, PlanWriter

__all__ = [
    "DependencySet",
    "FilePlan",
    "InstallGroup",
    "InvalidConfig",
    "PlanWriteError",
    "PlanWriter",
    "ProjectConfig",
    "TemplateComposer",
    "TemplateRenderer",
    "compose",
    "validate_project_name",
]
