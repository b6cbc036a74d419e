"""Use case: flatten a chat conversation into a completion prompt via a template."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import assert_never

from chat_to_prompt.l1_entities.chat_message import (
    AssistantMessage,
    ChatMessage,
    RenderRecord,
    SystemMessage,
    ToolMessage,
    UserMessage,
)
from chat_to_prompt.l1_entities.errors import RenderError
from chat_to_prompt.l2_use_cases.ports.template_engine import CompiledTemplate, TemplateEngine
from chat_to_prompt.l2_use_cases.utils.content_normalizer import normalize

log = logging.getLogger('ctp.builder')

DEFAULT_TEMPLATE = '{% for item in items %}{{ item.role }}: {{ item.content }}\n{% endfor %}assistant:'


def to_render_record(message: ChatMessage) -> RenderRecord:
    """Map one message to the record exposed to templates. Tool messages carry no name."""
    if isinstance(message, (SystemMessage, UserMessage, AssistantMessage)):
        return RenderRecord(role=message.role, content=normalize(message.content), name=message.name)
    if isinstance(message, ToolMessage):
        return RenderRecord(role='tool', content=normalize(message.content))
    assert_never(message)


class ChatBuilder:
    """Compiles a chat template once, then renders it for each conversation.

    The compiled template is never mutated after construction, so one builder
    may serve concurrent callers without locking.
    """

    def __init__(self, engine: TemplateEngine, template_source: str | None = None) -> None:
        self._uses_default = template_source is None
        self._source = DEFAULT_TEMPLATE if template_source is None else template_source
        # ConfigError propagates: a failed compile leaves no builder behind.
        self._template: CompiledTemplate = engine.compile(self._source)
        log.info(
            'Chat template compiled (%s, %d chars)',
            'default' if self._uses_default else 'custom',
            len(self._source),
        )

    @property
    def template_source(self) -> str:
        return self._source

    @property
    def uses_default_template(self) -> bool:
        return self._uses_default

    def build(self, messages: Sequence[ChatMessage]) -> str:
        """Render *messages* into a prompt string. Raises RenderError on template failure."""
        items = [to_render_record(m).as_template_item() for m in messages]
        try:
            prompt = self._template.render({'items': items})
        except RenderError as e:
            log.warning('Chat template render failed for %d messages: %s', len(items), e)
            raise
        log.debug('Rendered prompt (%d messages, %d chars)', len(items), len(prompt))
        return prompt
