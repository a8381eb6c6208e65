"""Jinja2 template rendering for generated artifacts.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``scgen/scaffolder/templates/`` directory and renders them with the resolved
model name as context.  Supports single-template rendering and rendering
straight to a file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for the model, fixture and test artifacts.

    Templates are ``.j2`` files under a configurable template directory and
    are addressed by their path relative to it (e.g. ``"model.js.j2"``).
    Undefined variables raise instead of rendering as empty strings.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    # -- Rendering -----------------------------------------------------------

    def render(self, template_id: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_id: Path relative to the template directory.
            context: Variables available inside the template.

        Returns:
            The rendered content as text. The bytes on disk are this text
            encoded as UTF-8 by :meth:`render_to_file`.
        """
        template = self.env.get_template(template_id)
        return template.render(**context)

    def render_to_file(
        self,
        template_id: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path* as UTF-8.

        An existing file is overwritten. The parent directory must already
        exist; creating it is the caller's job.
        """
        content = self.render(template_id, context)
        out = Path(output_path)
        out.write_text(content, encoding="utf-8")
        return out

    # -- Utility -----------------------------------------------------------

    def list_templates(self) -> list[str]:
        """Return a sorted list of all ``.j2`` template paths."""
        if not self.template_dir.is_dir():
            return []
        return sorted(
            str(p.relative_to(self.template_dir).as_posix())
            for p in self.template_dir.rglob("*.j2")
        )
