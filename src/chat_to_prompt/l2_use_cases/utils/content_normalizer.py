"""Pure function reducing message content to a single string."""

from __future__ import annotations

from typing import assert_never

from chat_to_prompt.l1_entities.chat_message import MessageContent, PartsContent, TextContent


def normalize(content: MessageContent) -> str:
    """Return *content* as one string; multi-part text is joined with newlines."""
    if isinstance(content, TextContent):
        return content.text
    if isinstance(content, PartsContent):
        return '\n'.join(part.text for part in content.parts)
    assert_never(content)
