"""Shared pytest fixtures for the scgen test suite.

Provides reusable fixtures for:
- Temporary project trees with clients/ and frameworks/ roots
- Generator configuration pointing at those trees
- A mocked TemplateRenderer that writes marker files
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from scgen.config import GeneratorConfig
from scgen.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Project trees
# ---------------------------------------------------------------------------

@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Project with ``clients/widgets`` and ``frameworks/core`` present."""
    root = tmp_path / "app"
    (root / "clients" / "widgets").mkdir(parents=True)
    (root / "frameworks" / "core").mkdir(parents=True)
    yield root


@pytest.fixture
def empty_root(tmp_path: Path) -> Path:
    """Directory without any conventional root."""
    root = tmp_path / "not-a-project"
    root.mkdir()
    yield root


@pytest.fixture
def config(project_root: Path) -> GeneratorConfig:
    """Quiet configuration rooted at ``project_root``."""
    return GeneratorConfig(project_root=project_root, quiet=True)


# ---------------------------------------------------------------------------
# Mock renderer
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_renderer() -> MagicMock:
    """A mock TemplateRenderer that writes marker files."""
    renderer = MagicMock(spec=TemplateRenderer)

    def mock_render_to_file(template_id: str, output_path, context: dict[str, Any]):
        out = Path(output_path)
        out.write_text(f"// Rendered from {template_id}\n", encoding="utf-8")
        return out

    renderer.render_to_file = MagicMock(side_effect=mock_render_to_file)
    return renderer
