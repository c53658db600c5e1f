"""Package groups installed for each optional feature.

The build toolchain (webpack, Babel, CSS loaders) is declared directly in the
generated ``package.json`` so that the first install command pulls it in
alongside React; every other package is installed through an explicit
``npm install`` group so the user sees each feature being added.
"""

from __future__ import annotations

from .models import DependencySet, InstallGroup, ProjectConfig


# ---------------------------------------------------------------------------
# Manifest toolchain (written into package.json devDependencies)
# ---------------------------------------------------------------------------

TOOLCHAIN_DEV_DEPENDENCIES: dict[str, str] = {
    "@babel/core": "latest",
    "@babel/preset-env": "latest",
    "@babel/preset-react": "latest",
    "babel-loader": "latest",
    "css-loader": "latest",
    "html-webpack-plugin": "latest",
    "style-loader": "latest",
    "webpack": "latest",
    "webpack-cli": "latest",
    "webpack-dev-server": "latest",
}


# ---------------------------------------------------------------------------
# Install groups
# ---------------------------------------------------------------------------

BASE = InstallGroup("base", ("react", "react-dom"))

TYPESCRIPT = InstallGroup(
    "typescript",
    ("typescript", "@types/react", "@types/react-dom", "@babel/preset-typescript"),
    dev=True,
)

TAILWIND = InstallGroup(
    "tailwind",
    (
        "tailwindcss",
        "@tailwindcss/postcss",
        "postcss",
        "postcss-loader",
        "autoprefixer",
    ),
    dev=True,
)

# .eslintrc.js is the legacy config format, dropped in ESLint 9.
ESLINT = InstallGroup(
    "eslint",
    ("eslint@^8", "eslint-plugin-react", "eslint-plugin-react-hooks"),
    dev=True,
)

ESLINT_TYPESCRIPT_PACKAGES: tuple[str, ...] = (
    "@typescript-eslint/parser",
    "@typescript-eslint/eslint-plugin",
)

ROUTER = InstallGroup("router", ("react-router-dom",))

REDUX = InstallGroup("redux", ("@reduxjs/toolkit", "react-redux"))

TESTING = InstallGroup(
    "testing",
    (
        "@testing-library/react",
        "@testing-library/jest-dom",
        "jest",
        "jest-environment-jsdom",
        "identity-obj-proxy",
    ),
    dev=True,
)


def build_dependency_set(config: ProjectConfig, *, tailwind: bool | None = None) -> DependencySet:
    """Derive the ordered install groups for *config*.

    Args:
        config: The project configuration.
        tailwind: Override for the Tailwind group.  The composer passes
            ``False`` when the Tailwind branch fell back to plain CSS.
            Defaults to ``config.use_tailwind``.
    """
    if tailwind is None:
        tailwind = config.use_tailwind

    groups: list[InstallGroup] = [BASE]
    if config.use_typescript:
        groups.append(TYPESCRIPT)
    if tailwind:
        groups.append(TAILWIND)
    if config.use_eslint:
        if config.use_typescript:
            groups.append(
                InstallGroup(
                    ESLINT.label,
                    ESLINT.packages + ESLINT_TYPESCRIPT_PACKAGES,
                    dev=True,
                )
            )
        else:
            groups.append(ESLINT)
    if config.use_router:
        groups.append(ROUTER)
    if config.use_redux:
        groups.append(REDUX)
    if config.use_testing_library:
        groups.append(TESTING)
    return DependencySet(tuple(groups))
