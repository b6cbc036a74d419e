"""Gateway: Jinja2 template engine -- implements TemplateEngine port."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import jinja2
from jinja2.sandbox import ImmutableSandboxedEnvironment

from chat_to_prompt.l1_entities.errors import ConfigError, RenderError

log = logging.getLogger('ctp.engine')


def _none_as_empty(value: Any) -> Any:
    return '' if value is None else value


class JinjaCompiledTemplate:
    """Wraps a jinja2.Template to implement the CompiledTemplate protocol."""

    def __init__(self, template: jinja2.Template) -> None:
        self._template = template

    def render(self, context: Mapping[str, Any]) -> str:
        try:
            return self._template.render(context)
        except jinja2.TemplateError as e:
            raise RenderError(f'Chat template failed to render: {e}') from e
        except Exception as e:  # noqa: BLE001 -- template expressions can raise arbitrary Python errors
            raise RenderError(f'Chat template failed to render: {type(e).__name__}: {e}') from e


class JinjaTemplateEngine:
    """Compiles chat templates in a sandboxed, strict Jinja2 environment.

    - Immutable sandbox: templates cannot mutate the records bound into them.
    - StrictUndefined: referencing a missing variable or field is an error
      instead of silently rendering an empty string.
    - A None value prints as an empty string, never as the text "None".
    - Output is returned verbatim, trailing newline included.
    """

    def __init__(self) -> None:
        self._env = ImmutableSandboxedEnvironment(
            undefined=jinja2.StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
            finalize=_none_as_empty,
        )

    def compile(self, source: str) -> JinjaCompiledTemplate:
        try:
            template = self._env.from_string(source)
        except jinja2.TemplateSyntaxError as e:
            log.error('Invalid chat template at line %s: %s', e.lineno, e.message)
            raise ConfigError(f'Invalid chat template (line {e.lineno}): {e.message}') from e
        return JinjaCompiledTemplate(template)
