"""scgen configuration.

Typed configuration for a single generator run. Settings use a Pydantic v2
model so they are validated at construction time and can be filled from the
command line or from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_CONVENTIONAL_ROOTS: list[str] = ["clients", "frameworks"]


class GeneratorConfig(BaseModel):
    """Settings shared by the name resolver, manifest builder and executor.

    Instances are created once by the CLI entry point (or by tests) and then
    passed explicitly to every component; nothing is read from global state.
    """

    project_root: Path = Field(default=Path("."), description="Directory the generator runs in")
    location_override: Optional[str] = Field(
        default=None,
        description="Explicit base directory; skips the clients/frameworks search",
    )
    conventional_roots: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CONVENTIONAL_ROOTS),
        min_length=1,
        description="Roots probed, in order, when no location override is given",
    )
    separator: str = Field(default="/", min_length=1, max_length=1)
    author: Optional[str] = Field(default=None, description="Author name passed to templates")
    template_dir: Optional[Path] = Field(
        default=None, description="Template directory; defaults to the packaged templates"
    )
    pretend: bool = Field(default=False, description="Print the manifest without writing")
    quiet: bool = Field(default=False, description="Suppress per-file progress output")

    @field_validator("conventional_roots")
    @classmethod
    def _strip_roots(cls, value: list[str]) -> list[str]:
        roots = [r.strip().strip("/") for r in value if r.strip().strip("/")]
        if not roots:
            raise ValueError("at least one conventional root is required")
        return roots

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    @property
    def root_paths(self) -> list[Path]:
        """Absolute-or-relative paths of every conventional root."""
        return [self.project_root / root for root in self.conventional_roots]

    def is_valid_project_root(self) -> bool:
        """Return ``True`` if at least one conventional root exists as a directory."""
        return any(path.is_dir() for path in self.root_paths)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, **overrides: Any) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            SCGEN_PROJECT_ROOT, SCGEN_LOC, SCGEN_AUTHOR, SCGEN_ROOTS.

        Keyword arguments whose value is not ``None`` take precedence over the
        environment, which lets the CLI layer its flags on top.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("SCGEN_PROJECT_ROOT"):
            kwargs["project_root"] = Path(os.environ["SCGEN_PROJECT_ROOT"])
        if os.environ.get("SCGEN_LOC"):
            kwargs["location_override"] = os.environ["SCGEN_LOC"]
        if os.environ.get("SCGEN_AUTHOR"):
            kwargs["author"] = os.environ["SCGEN_AUTHOR"]
        if os.environ.get("SCGEN_ROOTS"):
            kwargs["conventional_roots"] = [
                r.strip() for r in os.environ["SCGEN_ROOTS"].split(",") if r.strip()
            ]

        kwargs.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**kwargs)
