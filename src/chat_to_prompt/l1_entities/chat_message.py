"""Chat message entities -- role-tagged messages with text or multi-part content."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class ContentPart(BaseModel):
    """One text segment of a multi-part message content."""

    model_config = ConfigDict(frozen=True)

    type: Literal['text'] = 'text'
    text: str


class TextContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal['text'] = 'text'
    text: str


class PartsContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal['parts'] = 'parts'
    parts: tuple[ContentPart, ...] = ()


MessageContent = Annotated[TextContent | PartsContent, Field(discriminator='kind')]


class _BaseMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: MessageContent

    @field_validator('content', mode='before')
    @classmethod
    def _coerce_wire_content(cls, value: Any) -> Any:
        # Chat requests carry either a plain string or a list of parts.
        if isinstance(value, str):
            return {'kind': 'text', 'text': value}
        if isinstance(value, (list, tuple)):
            return {'kind': 'parts', 'parts': value}
        return value


class SystemMessage(_BaseMessage):
    role: Literal['system'] = 'system'
    name: str | None = None


class UserMessage(_BaseMessage):
    role: Literal['user'] = 'user'
    name: str | None = None


class AssistantMessage(_BaseMessage):
    """Assistant turn. ``tool_calls`` is accepted for wire compatibility but is not
    part of the record templates see, so custom templates cannot render tool calls.
    """

    role: Literal['assistant'] = 'assistant'
    name: str | None = None
    tool_calls: list[dict[str, Any]] | None = None  # not exposed to templates


class ToolMessage(_BaseMessage):
    """Tool result. ``tool_call_id`` is accepted but not exposed to templates."""

    role: Literal['tool'] = 'tool'
    tool_call_id: str = ''  # not exposed to templates


ChatMessage = Annotated[
    SystemMessage | UserMessage | AssistantMessage | ToolMessage,
    Field(discriminator='role'),
]

_MESSAGE_LIST = TypeAdapter(list[ChatMessage])


def parse_messages(data: Any) -> list[ChatMessage]:
    """Validate plain data (e.g. decoded JSON) into typed chat messages.

    Raises pydantic.ValidationError on unknown roles or malformed content.
    """
    return _MESSAGE_LIST.validate_python(data)


class RenderRecord(BaseModel):
    """Per-message view handed to the chat template."""

    model_config = ConfigDict(frozen=True)

    role: Literal['system', 'user', 'assistant', 'tool']
    content: str
    name: str | None = None

    def as_template_item(self) -> dict[str, Any]:
        """Plain dict for the template context; ``name`` only when it was set."""
        return self.model_dump(exclude_unset=True)
