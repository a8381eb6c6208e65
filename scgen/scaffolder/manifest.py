"""Manifest planning for the model/fixture/test trio.

The ``ManifestBuilder`` decides where each artifact goes and which
directories must be created first. It only inspects the file system; the
returned manifest is executed later by ``ModelGenerator`` so the full plan
(or a ``LocationNotFound`` failure) is known before anything is written.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from scgen.config import DEFAULT_CONVENTIONAL_ROOTS

from .naming import StructuredName


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class LocationNotFound(Exception):
    """Raised when no conventional root holds a directory for the module segment."""

    def __init__(self, module_segment: str, searched: Sequence[Path]) -> None:
        self.module_segment = module_segment
        self.searched = list(searched)
        where = ", ".join(str(p) for p in self.searched)
        label = module_segment or "<no module>"
        super().__init__(
            f"Could not find a client or framework for '{label}' (searched: {where}). "
            "Create it first or pass --loc."
        )


# ---------------------------------------------------------------------------
# Artifact specs
# ---------------------------------------------------------------------------


class ArtifactKind(str, Enum):
    MODEL = "model"
    FIXTURE = "fixture"
    TEST = "test"


class ArtifactSpec(BaseModel):
    """Fixed description of one generated file role."""

    model_config = ConfigDict(frozen=True)

    kind: ArtifactKind
    template_id: str
    subdirectory: str
    extension: str
    nest_under_module: bool = False

    def filename(self, base_name: str) -> str:
        return f"{base_name}.{self.extension}"


MODEL_SPEC = ArtifactSpec(
    kind=ArtifactKind.MODEL,
    template_id="model.js.j2",
    subdirectory="models",
    extension="js",
)

FIXTURE_SPEC = ArtifactSpec(
    kind=ArtifactKind.FIXTURE,
    template_id="fixture.js.j2",
    subdirectory="fixtures",
    extension="js",
)

# Tests mirror the models layout one level deeper, under the module segment.
TEST_SPEC = ArtifactSpec(
    kind=ArtifactKind.TEST,
    template_id="test.rhtml.j2",
    subdirectory="tests/models",
    extension="rhtml",
    nest_under_module=True,
)

ARTIFACT_SPECS: tuple[ArtifactSpec, ...] = (MODEL_SPEC, FIXTURE_SPEC, TEST_SPEC)


# ---------------------------------------------------------------------------
# Manifest
# ---------------------------------------------------------------------------


class ManifestEntry(BaseModel):
    """One planned render action and the directories it needs."""

    kind: ArtifactKind
    target_path: Path
    template_id: str
    directories_to_create: list[Path] = Field(default_factory=list)


class ManifestBuilder:
    """Resolves target paths for every artifact kind.

    Paths in the returned entries are relative to *project_root* unless the
    location override is absolute. Existence checks are always made against
    *project_root*.
    """

    def __init__(
        self,
        project_root: str | Path = ".",
        conventional_roots: Sequence[str] | None = None,
        separator: str = "/",
    ) -> None:
        self.project_root = Path(project_root)
        self.conventional_roots = list(conventional_roots or DEFAULT_CONVENTIONAL_ROOTS)
        self.separator = separator

    # -- Public API --------------------------------------------------------

    def build(
        self,
        identity: StructuredName,
        location_override: Optional[str] = None,
    ) -> list[ManifestEntry]:
        """Plan the model, fixture and test artifacts for *identity*.

        Args:
            identity: Resolved name of the model.
            location_override: Base directory to use verbatim instead of
                searching the conventional roots.

        Returns:
            Exactly three entries, in model, fixture, test order.

        Raises:
            LocationNotFound: No override was given and no conventional root
                contains the module segment. No entries are produced.
        """
        if location_override:
            base_dir = Path(location_override)
        else:
            base_dir = self.find_location(identity.module_segment)

        planned: set[Path] = set()
        entries: list[ManifestEntry] = []
        for spec in ARTIFACT_SPECS:
            target = self.target_path(base_dir, spec, identity)
            entries.append(
                ManifestEntry(
                    kind=spec.kind,
                    target_path=target,
                    template_id=spec.template_id,
                    directories_to_create=self._plan_directories(base_dir, target, planned),
                )
            )
        return entries

    def find_location(self, module_segment: str) -> Path:
        """Return the first ``<root>/<module_segment>`` directory that exists."""
        searched: list[Path] = []
        for root in self.conventional_roots:
            candidate = Path(root) / self._module_path(module_segment)
            searched.append(candidate)
            if (self.project_root / candidate).is_dir():
                return candidate
        raise LocationNotFound(module_segment, searched)

    def target_path(
        self, base_dir: Path, spec: ArtifactSpec, identity: StructuredName
    ) -> Path:
        """Compose the output path of *spec* under *base_dir*."""
        directory = base_dir / spec.subdirectory
        if spec.nest_under_module and identity.module_segment:
            directory = directory / self._module_path(identity.module_segment)
        return directory / spec.filename(identity.base_name)

    # -- Internal helpers --------------------------------------------------

    def _module_path(self, module_segment: str) -> Path:
        return Path(*[part for part in module_segment.split(self.separator) if part])

    def _plan_directories(
        self, base_dir: Path, target: Path, planned: set[Path]
    ) -> list[Path]:
        """Missing directories from *base_dir* down to the target's parent."""
        chain = [base_dir]
        for part in target.parent.relative_to(base_dir).parts:
            chain.append(chain[-1] / part)

        missing: list[Path] = []
        for directory in chain:
            if directory in planned or (self.project_root / directory).is_dir():
                continue
            planned.add(directory)
            missing.append(directory)
        return missing
