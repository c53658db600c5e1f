"""Template composer: turns a ``ProjectConfig`` into a file plan.

``compose`` is a pure function of the configuration.  It renders every file
the new project needs into a :class:`FilePlan` and derives the matching
:class:`DependencySet`; nothing is written and no process is started here.

Each optional feature contributes its own files through a dedicated method.
The only places where features meet are the entry-point render call (store
and router providers) and the webpack config, whose entry extension,
resolver list and style rule are computed independently.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any

from .dependencies import TOOLCHAIN_DEV_DEPENDENCIES, build_dependency_set
from .models import DependencySet, FilePlan, InvalidConfig, ProjectConfig
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Project name validation
# ---------------------------------------------------------------------------

MAX_NAME_LENGTH = 214  # npm's limit on package names

_NAME_PATTERN = re.compile(r"^[A-Za-z0-9._-]+$")

# Names npm refuses to publish or install under
BLACKLISTED_NAMES = frozenset({"node_modules", "favicon.ico"})


def validate_project_name(name: str) -> None:
    """Raise ``InvalidConfig`` unless *name* is usable as a directory and npm name."""
    if not name:
        raise InvalidConfig(name, "name is empty")
    if len(name) > MAX_NAME_LENGTH:
        raise InvalidConfig(name, f"name is longer than {MAX_NAME_LENGTH} characters")
    if name in (".", ".."):
        raise InvalidConfig(name, "name is a relative directory reference")
    if name[0] in "._":
        raise InvalidConfig(name, "name cannot start with '.' or '_'")
    if name.lower() in BLACKLISTED_NAMES:
        raise InvalidConfig(name, "name is reserved by npm")
    if not _NAME_PATTERN.match(name):
        raise InvalidConfig(
            name, "only letters, digits, '.', '_' and '-' are allowed"
        )


# ---------------------------------------------------------------------------
# Style modes
# ---------------------------------------------------------------------------

STYLE_INLINE = "inline"  # no stylesheet, inline style objects
STYLE_TAILWIND = "tailwind"  # Tailwind + PostCSS pipeline
STYLE_STYLESHEET = "stylesheet"  # plain CSS file, Tailwind fallback


# ---------------------------------------------------------------------------
# Provider nesting
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Provider:
    """A context provider wrapped around the root component."""

    open_tag: str
    close_tag: str
    imports: tuple[str, ...]


STORE_PROVIDER = Provider(
    open_tag="<Provider store={store}>",
    close_tag="</Provider>",
    imports=(
        "import { Provider } from 'react-redux';",
        "import { store } from './store';",
    ),
)

ROUTER_PROVIDER = Provider(
    open_tag="<BrowserRouter>",
    close_tag="</BrowserRouter>",
    imports=("import { BrowserRouter } from 'react-router-dom';",),
)

ROOT_ELEMENT = "<App />"


def providers_for(config: ProjectConfig) -> list[Provider]:
    """Providers to apply, outermost first.

    The store always encloses the router so route-aware components can read
    from the store.
    """
    providers: list[Provider] = []
    if config.use_redux:
        providers.append(STORE_PROVIDER)
    if config.use_router:
        providers.append(ROUTER_PROVIDER)
    return providers


def nest_providers(providers: list[Provider], root: str = ROOT_ELEMENT) -> str:
    """Build the argument of ``root.render(...)``.

    With no providers this is just ``<App />``; otherwise a multi-line JSX
    tree indented two spaces per level, with leading and trailing newlines
    so it sits between the parentheses of the render call.
    """
    if not providers:
        return root

    lines = [f"{'  ' * depth}{p.open_tag}" for depth, p in enumerate(providers, start=1)]
    lines.append(f"{'  ' * (len(providers) + 1)}{root}")
    for depth, p in reversed(list(enumerate(providers, start=1))):
        lines.append(f"{'  ' * depth}{p.close_tag}")
    return "\n" + "\n".join(lines) + "\n"


def provider_imports(providers: list[Provider]) -> list[str]:
    """Import lines for *providers*, innermost provider first."""
    return [line for p in reversed(providers) for line in p.imports]


# ---------------------------------------------------------------------------
# Build-tool axes
# ---------------------------------------------------------------------------

_JS_EXTENSIONS = (".js", ".jsx")
_TS_EXTENSIONS = (".ts", ".tsx")


def entry_extension(config: ProjectConfig) -> str:
    return config.component_ext


def resolve_extensions(config: ProjectConfig) -> list[str]:
    """Extensions webpack tries when resolving bare imports."""
    extensions = list(_JS_EXTENSIONS)
    if config.use_typescript:
        extensions.extend(_TS_EXTENSIONS)
    return extensions


def script_test(config: ProjectConfig) -> str:
    """Regex literal matching the files handed to babel-loader."""
    return r"/\.(t|j)sx?$/" if config.use_typescript else r"/\.jsx?$/"


def source_extensions(config: ProjectConfig) -> list[str]:
    """Bare source extensions, used for Tailwind content globs."""
    return [ext.lstrip(".") for ext in resolve_extensions(config)]


# ---------------------------------------------------------------------------
# Composer
# ---------------------------------------------------------------------------


class TemplateComposer:
    """Renders the complete file plan for one ``ProjectConfig``."""

    def __init__(
        self, config: ProjectConfig, renderer: TemplateRenderer | None = None
    ) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def compose(self) -> tuple[FilePlan, DependencySet]:
        """Return the ``(FilePlan, DependencySet)`` for the configuration.

        Raises:
            InvalidConfig: If the project name is unusable.
        """
        validate_project_name(self.config.name)

        files: dict[str, str] = {}
        warnings: list[str] = []

        style_mode = self._compose_styles(files, warnings)
        files.update(self._baseline_files(style_mode))

        if self.config.use_typescript:
            files.update(self._typescript_files())
        if self.config.use_eslint:
            files.update(self._eslint_files())
        if self.config.use_redux:
            files.update(self._redux_files())
        if self.config.use_testing_library:
            files.update(self._testing_files())

        deps = build_dependency_set(
            self.config, tailwind=style_mode == STYLE_TAILWIND
        )
        return FilePlan(files, tuple(warnings)), deps

    # -- Context -----------------------------------------------------------

    def _context(self, **extra: Any) -> dict[str, Any]:
        cfg = self.config
        return {
            "name": cfg.name,
            "typed": cfg.use_typescript,
            "eslint": cfg.use_eslint,
            "testing": cfg.use_testing_library,
            **extra,
        }

    # -- Baseline ----------------------------------------------------------

    def _baseline_files(self, style_mode: str) -> dict[str, str]:
        cfg = self.config
        providers = providers_for(cfg)
        render = self.renderer.render

        webpack_ctx = self._context(
            entry_ext=entry_extension(cfg),
            resolve_extensions=resolve_extensions(cfg),
            script_test=script_test(cfg),
            style_mode=style_mode,
        )
        index_ctx = self._context(
            provider_imports=provider_imports(providers),
            render_expression=nest_providers(providers),
        )
        ctx = self._context(style_mode=style_mode)

        ext = cfg.component_ext
        return {
            "package.json": self._package_manifest(),
            "webpack.config.js": render("base/webpack.config.js.j2", webpack_ctx),
            "babel.config.js": render("base/babel.config.js.j2", ctx),
            "public/index.html": render("base/index.html.j2", ctx),
            f"src/App.{ext}": render("base/App.jsx.j2", ctx),
            f"src/index.{ext}": render("base/index.jsx.j2", index_ctx),
            ".gitignore": render("base/gitignore.j2", ctx),
            "README.md": render("base/README.md.j2", ctx),
        }

    def _package_manifest(self) -> str:
        cfg = self.config
        scripts = {
            "start": "webpack serve",
            "build": "webpack --mode production",
        }
        if cfg.use_testing_library:
            scripts["test"] = "jest"
        if cfg.use_eslint:
            scripts["lint"] = "eslint src --ext " + ",".join(resolve_extensions(cfg))
        manifest = {
            "name": cfg.name.lower(),
            "version": "0.1.0",
            "private": True,
            "scripts": scripts,
            "devDependencies": dict(TOOLCHAIN_DEV_DEPENDENCIES),
        }
        return json.dumps(manifest, indent=2) + "\n"

    # -- Styles ------------------------------------------------------------

    def _compose_styles(self, files: dict[str, str], warnings: list[str]) -> str:
        """Add stylesheet files to *files* and return the resulting style mode.

        A failure anywhere in the Tailwind branch is contained here: none of
        its files are kept and the plain stylesheet is used instead.
        """
        if not self.config.use_tailwind:
            return STYLE_INLINE

        try:
            tailwind_files = self._tailwind_files()
        except Exception as exc:
            warnings.append(
                f"Tailwind CSS setup failed ({exc}); using a plain CSS stylesheet instead."
            )
            files.update(self._fallback_style_files())
            return STYLE_STYLESHEET

        files.update(tailwind_files)
        return STYLE_TAILWIND

    def _tailwind_files(self) -> dict[str, str]:
        exts = ",".join(source_extensions(self.config))
        ctx = self._context(content_glob=f"./src/**/*.{{{exts}}}")
        return {
            "tailwind.config.js": self.renderer.render("tailwind/tailwind.config.js.j2", ctx),
            "postcss.config.js": self.renderer.render("tailwind/postcss.config.js.j2", ctx),
            "src/styles/main.css": self.renderer.render("tailwind/main.css.j2", ctx),
        }

    def _fallback_style_files(self) -> dict[str, str]:
        return {"src/styles/main.css": _FALLBACK_STYLESHEET}

    # -- Optional features -------------------------------------------------

    def _typescript_files(self) -> dict[str, str]:
        return {
            "tsconfig.json": self.renderer.render("typescript/tsconfig.json.j2", self._context()),
        }

    def _eslint_files(self) -> dict[str, str]:
        plugins = ["react", "react-hooks"]
        if self.config.use_typescript:
            plugins.append("@typescript-eslint")
        ctx = self._context(plugins=plugins)
        return {
            ".eslintrc.js": self.renderer.render("eslint/eslintrc.js.j2", ctx),
            ".eslintignore": self.renderer.render("eslint/eslintignore.j2", ctx),
        }

    def _redux_files(self) -> dict[str, str]:
        ext = self.config.module_ext
        ctx = self._context()
        return {
            f"src/store/index.{ext}": self.renderer.render("redux/store.js.j2", ctx),
            f"src/store/slices/counterSlice.{ext}": self.renderer.render(
                "redux/counterSlice.js.j2", ctx
            ),
        }

    def _testing_files(self) -> dict[str, str]:
        setup_file = f"src/setupTests.{self.config.module_ext}"
        ctx = self._context(setup_file=setup_file)
        return {
            "jest.config.js": self.renderer.render("testing/jest.config.js.j2", ctx),
            setup_file: self.renderer.render("testing/setupTests.js.j2", ctx),
        }


# Kept as a literal rather than a template so the fallback cannot fail the
# same way the Tailwind templates did.
_FALLBACK_STYLESHEET = """\
body {
  margin: 0;
  font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
}

.app {
  display: flex;
  justify-content: center;
  align-items: center;
  min-height: 100vh;
  background-color: #f0f0f0;
}

.app-card {
  padding: 20px;
  background-color: white;
  border-radius: 8px;
  box-shadow: 0 2px 4px rgba(0, 0, 0, 0.1);
}

.app-title {
  font-size: 24px;
  font-weight: bold;
  margin-bottom: 16px;
}
"""


def compose(
    config: ProjectConfig, renderer: TemplateRenderer | None = None
) -> tuple[FilePlan, DependencySet]:
    """Compose the file plan and install groups for *config*.

    Convenience wrapper around :class:`TemplateComposer`.
    """
    return TemplateComposer(config, renderer).compose()
