"""Port: template engine."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class CompiledTemplate(Protocol):
    """A parsed template, immutable and safe to render from many threads."""

    def render(self, context: Mapping[str, Any]) -> str:
        """Render against *context*. Raises RenderError on evaluation failure."""
        ...


class TemplateEngine(Protocol):
    """Abstract template engine. Zero framework types leak through."""

    def compile(self, source: str) -> CompiledTemplate:
        """Parse *source*. Raises ConfigError on invalid syntax."""
        ...
