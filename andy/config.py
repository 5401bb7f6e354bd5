"""Andy runtime configuration.

Settings that steer a generator run rather than the generated project: where
the scaffold is written, which template root is used, and whether the
greeting banner is shown.  The project-level answers live in
``andy.scaffolder.deriver.ResolvedConfig`` instead.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "scaffolder" / "templates"


class Config(BaseModel):
    """Global generator configuration.

    Instances are created once by the CLI entry point (or by tests) and
    passed to ``ProjectGenerator``.
    """

    output_dir: Path = Field(default=Path("."), description="Project output root")
    template_dir: Path | None = Field(
        default=None,
        description="Template root; the bundled templates are used when unset",
    )
    show_greeting: bool = Field(default=True)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def resolved_template_dir(self) -> Path:
        """Template root actually used for rendering and copying."""
        return self.template_dir or _DEFAULT_TEMPLATE_DIR

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            ANDY_OUTPUT_DIR, ANDY_TEMPLATE_DIR, ANDY_NO_GREETING.
        """
        template_dir = os.environ.get("ANDY_TEMPLATE_DIR")
        no_greeting = os.environ.get("ANDY_NO_GREETING", "").strip().lower()
        return cls(
            output_dir=Path(os.environ.get("ANDY_OUTPUT_DIR", ".")),
            template_dir=Path(template_dir) if template_dir else None,
            show_greeting=no_greeting not in ("1", "true", "yes"),
        )
