"""Tests for scaffolder data types (react_setup.scaffolder.models)."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from react_setup.scaffolder.models import (
    DependencySet,
    FilePlan,
    InstallGroup,
    InvalidConfig,
    ProjectConfig,
)


pytestmark = pytest.mark.unit


class TestProjectConfig:
    def test_defaults_are_off(self):
        config = ProjectConfig(name="demo")
        assert config.use_typescript is False
        assert config.use_tailwind is False
        assert config.use_eslint is False
        assert config.use_router is False
        assert config.use_redux is False
        assert config.use_testing_library is False

    def test_frozen(self):
        config = ProjectConfig(name="demo")
        with pytest.raises(ValidationError):
            config.use_typescript = True

    def test_equal_configs_compare_equal(self):
        assert ProjectConfig(name="a", use_router=True) == ProjectConfig(name="a", use_router=True)

    def test_extensions(self):
        assert ProjectConfig(name="a").component_ext == "jsx"
        assert ProjectConfig(name="a").module_ext == "js"
        typed = ProjectConfig(name="a", use_typescript=True)
        assert typed.component_ext == "tsx"
        assert typed.module_ext == "ts"

    def test_name_required(self):
        with pytest.raises(ValidationError):
            ProjectConfig()

    def test_unknown_flag_rejected(self):
        with pytest.raises(ValidationError):
            ProjectConfig(name="demo", useTypeScript=True)


class TestInstallGroup:
    def test_prod_argv(self):
        group = InstallGroup("base", ("react", "react-dom"))
        assert group.argv() == ["npm", "install", "react", "react-dom"]

    def test_dev_argv(self):
        group = InstallGroup("typescript", ("typescript",), dev=True)
        assert group.argv("/usr/local/bin/npm") == [
            "/usr/local/bin/npm", "install", "--save-dev", "typescript",
        ]


class TestDependencySet:
    def test_iteration_order(self):
        a = InstallGroup("a", ("x",))
        b = InstallGroup("b", ("y", "z"), dev=True)
        deps = DependencySet((a, b))
        assert list(deps) == [a, b]
        assert len(deps) == 2
        assert deps.labels() == ["a", "b"]
        assert deps.packages() == ["x", "y", "z"]

    def test_empty(self):
        assert len(DependencySet()) == 0


class TestFilePlan:
    def test_mapping_access(self):
        plan = FilePlan({"b.txt": "B", "a.txt": "A"})
        assert plan["a.txt"] == "A"
        assert "b.txt" in plan
        assert "c.txt" not in plan
        assert len(plan) == 2
        assert plan.paths() == ["a.txt", "b.txt"]
        assert sorted(plan) == ["a.txt", "b.txt"]

    def test_source_dict_mutation_does_not_leak(self):
        files = {"a.txt": "A"}
        plan = FilePlan(files)
        files["a.txt"] = "changed"
        files["b.txt"] = "B"
        assert plan["a.txt"] == "A"
        assert "b.txt" not in plan

    def test_files_are_read_only(self):
        plan = FilePlan({"a.txt": "A"})
        with pytest.raises(TypeError):
            plan.files["a.txt"] = "B"  # type: ignore[index]

    def test_equality_includes_warnings(self):
        assert FilePlan({"a": "1"}) == FilePlan({"a": "1"})
        assert FilePlan({"a": "1"}) != FilePlan({"a": "1"}, warnings=("w",))
        assert hash(FilePlan({"a": "1"})) == hash(FilePlan({"a": "1"}))


class TestInvalidConfig:
    def test_message(self):
        exc = InvalidConfig("bad name", "spaces are not allowed")
        assert exc.name == "bad name"
        assert "spaces are not allowed" in str(exc)
