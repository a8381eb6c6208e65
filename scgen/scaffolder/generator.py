"""Model generator orchestrator.

Ties the pieces together for one invocation: validate the inputs, resolve the
name, plan the manifest, then either preview it or execute it by creating
directories and rendering templates in order.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from scgen.config import GeneratorConfig
from scgen.utils import print_action, print_manifest_table

from .manifest import ManifestBuilder, ManifestEntry
from .naming import NameResolver, StructuredName
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class GeneratorUsageError(Exception):
    """Raised when the generator is invoked incorrectly; the CLI prints usage."""


class EmptyNameError(GeneratorUsageError):
    """Raised when no name (or only a module prefix) was supplied."""

    def __init__(self, raw_name: str = "") -> None:
        self.raw_name = raw_name
        if raw_name:
            message = f"Model name is missing in '{raw_name}'"
        else:
            message = "A model name is required"
        super().__init__(message)


class InvalidProjectRootError(GeneratorUsageError):
    """Raised when the working directory does not look like a project root."""

    def __init__(self, project_root: Path, roots: list[str]) -> None:
        self.project_root = project_root
        super().__init__(
            f"{project_root} does not look like a project root "
            f"(expected one of: {', '.join(roots)})"
        )


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ModelGenerator:
    """Generates the model, fixture and test stub for one model name.

    The generator owns a ``NameResolver`` and a ``ManifestBuilder`` built from
    the configuration; the ``TemplateRenderer`` can be injected for tests.
    """

    def __init__(
        self,
        config: GeneratorConfig,
        renderer: Optional[TemplateRenderer] = None,
    ) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer(config.template_dir)
        self.resolver = NameResolver(config.separator)
        self.builder = ManifestBuilder(
            config.project_root,
            config.conventional_roots,
            config.separator,
        )

    # -- Public API --------------------------------------------------------

    def check_preconditions(self, raw_name: str) -> None:
        """Raise a ``GeneratorUsageError`` if the run cannot start."""
        if not raw_name or raw_name.endswith(self.config.separator):
            raise EmptyNameError(raw_name)
        if not self.config.is_valid_project_root():
            raise InvalidProjectRootError(
                self.config.project_root, self.config.conventional_roots
            )

    def plan(
        self, raw_name: str, class_name: Optional[str] = None
    ) -> tuple[StructuredName, list[ManifestEntry]]:
        """Resolve *raw_name* and build its manifest without writing anything."""
        self.check_preconditions(raw_name)
        identity = self.resolver.resolve(raw_name, class_name)
        manifest = self.builder.build(identity, self.config.location_override)
        return identity, manifest

    def generate(self, raw_name: str, class_name: Optional[str] = None) -> list[Path]:
        """Plan and execute a full run.

        In pretend mode the manifest is printed and nothing is written.

        Returns:
            Paths of the rendered files (empty in pretend mode).
        """
        identity, manifest = self.plan(raw_name, class_name)
        if self.config.pretend:
            print_manifest_table(manifest, title=f"Manifest for {identity.full_class_name}")
            return []
        return self.execute(identity, manifest)

    def execute(self, identity: StructuredName, manifest: list[ManifestEntry]) -> list[Path]:
        """Create directories and render templates, entry by entry.

        Errors propagate immediately; entries already written are left in
        place.
        """
        context = self._build_context(identity)
        root = self.config.project_root
        written: list[Path] = []

        for entry in manifest:
            for directory in entry.directories_to_create:
                (root / directory).mkdir(parents=True, exist_ok=True)
                self._report("create", directory)

            path = self.renderer.render_to_file(
                entry.template_id, root / entry.target_path, context
            )
            self._report("create", entry.target_path)
            written.append(path)

        return written

    # -- Internal helpers --------------------------------------------------

    def _build_context(self, identity: StructuredName) -> dict[str, Any]:
        context: dict[str, Any] = identity.as_context()
        context["author"] = self.config.author
        return context

    def _report(self, action: str, path: Path) -> None:
        if not self.config.quiet:
            print_action(action, path)
