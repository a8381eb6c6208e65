"""scgen scaffolder -- plans and renders the model/fixture/test trio.

Quick usage::

    from scgen.config import GeneratorConfig
    from scgen.scaffolder import ModelGenerator

    generator = ModelGenerator(GeneratorConfig(project_root="/path/to/app"))
    written = generator.generate("widgets/button")
"""

from scgen.scaffolder.generator import (
    EmptyNameError,
    GeneratorUsageError,
    InvalidProjectRootError,
    ModelGenerator,
)
from scgen.scaffolder.manifest import (
    ARTIFACT_SPECS,
    ArtifactKind,
    ArtifactSpec,
    LocationNotFound,
    ManifestBuilder,
    ManifestEntry,
)
from scgen.scaffolder.naming import NameResolver, StructuredName, to_class_name
from scgen.scaffolder.templates import TemplateRenderer

__all__ = [
    "ARTIFACT_SPECS",
    "ArtifactKind",
    "ArtifactSpec",
    "EmptyNameError",
    "GeneratorUsageError",
    "InvalidProjectRootError",
    "LocationNotFound",
    "ManifestBuilder",
    "ManifestEntry",
    "ModelGenerator",
    "NameResolver",
    "StructuredName",
    "TemplateRenderer",
    "to_class_name",
]
