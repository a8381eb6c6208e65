"""Name resolution for generated artifacts.

Turns a raw ``client/model`` argument into a ``StructuredName``: the module
segment that locates the owning client, the file stem, and the class names
templates refer to. Everything here is pure string work; no file-system access.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SEPARATOR = "/"


class StructuredName(BaseModel):
    """Identity of the model being generated, derived once per run."""

    model_config = ConfigDict(frozen=True)

    raw_name: str = Field(..., description="Name exactly as supplied by the user")
    module_segment: str = Field(default="", description="Client/module part; empty means search")
    base_name: str = Field(..., min_length=1, description="File stem of every artifact")
    class_name: str = Field(..., description="Type name used inside generated content")
    namespace: str = Field(default="", description="Module segment in class casing, dot-joined")

    @property
    def full_class_name(self) -> str:
        """``Namespace.ClassName``, or just the class name without a module."""
        if self.namespace:
            return f"{self.namespace}.{self.class_name}"
        return self.class_name

    def as_context(self) -> dict[str, str]:
        """Template context: every field plus ``full_class_name``."""
        context = self.model_dump()
        context["full_class_name"] = self.full_class_name
        return context


def to_class_name(value: str) -> str:
    """Convert ``some_thing`` to ``SomeThing``.

    Only underscores separate words. The first character of each word is
    upper-cased and the rest is kept as-is, so an existing class name maps to
    itself. Any other character is passed through unchanged.
    """
    return "".join(word[:1].upper() + word[1:] for word in value.split("_") if word)


class NameResolver:
    """Splits raw names on the last separator and derives class names."""

    def __init__(self, separator: str = DEFAULT_SEPARATOR) -> None:
        self.separator = separator

    def resolve(self, raw_name: str, class_name: Optional[str] = None) -> StructuredName:
        """Resolve *raw_name* into a ``StructuredName``.

        Args:
            raw_name: Non-empty name such as ``"widgets/button"`` or ``"button"``.
            class_name: Explicit class name; used verbatim instead of the
                derived one when given.
        """
        module_segment, sep, base_name = raw_name.rpartition(self.separator)
        if not sep:
            module_segment, base_name = "", raw_name

        namespace = ".".join(
            to_class_name(part) for part in module_segment.split(self.separator) if part
        )
        return StructuredName(
            raw_name=raw_name,
            module_segment=module_segment,
            base_name=base_name,
            class_name=class_name or to_class_name(base_name),
            namespace=namespace,
        )
