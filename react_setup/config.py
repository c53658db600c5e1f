"""react-setup runtime configuration.

Settings that are not part of the interactive questions: where projects are
created, which npm binary runs the installs, and how long an install may
take.  All values can come from environment variables so the command itself
takes no flags.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "y", "on"}


class Settings(BaseModel):
    """Global react-setup configuration.

    Instances are created once by the CLI entry point and handed to the
    ``Pipeline``.
    """

    output_dir: Path = Field(default=Path("."), description="Parent of the new project directory")
    npm_executable: str = Field(default="npm", min_length=1)
    install_timeout: int = Field(
        default=600, ge=10, description="Per-install-command timeout in seconds"
    )
    skip_install: bool = Field(
        default=False, description="Write the files but do not run npm"
    )

    def project_path(self, name: str) -> Path:
        """Directory the project called *name* is created in."""
        return self.output_dir / name

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            REACT_SETUP_OUTPUT_DIR, REACT_SETUP_NPM,
            REACT_SETUP_INSTALL_TIMEOUT, REACT_SETUP_SKIP_INSTALL.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("REACT_SETUP_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["REACT_SETUP_OUTPUT_DIR"])
        if os.environ.get("REACT_SETUP_NPM"):
            kwargs["npm_executable"] = os.environ["REACT_SETUP_NPM"]
        if os.environ.get("REACT_SETUP_INSTALL_TIMEOUT"):
            kwargs["install_timeout"] = int(os.environ["REACT_SETUP_INSTALL_TIMEOUT"])
        if os.environ.get("REACT_SETUP_SKIP_INSTALL"):
            kwargs["skip_install"] = (
                os.environ["REACT_SETUP_SKIP_INSTALL"].strip().lower() in _TRUTHY
            )
        return cls(**kwargs)
