"""Configuration Pydantic models -- pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel, model_validator


class ChatConfig(BaseModel):
    template: str | None = None  # inline template source; None → built-in default
    template_file: str | None = None

    @model_validator(mode='after')
    def _validate_single_template_source(self) -> ChatConfig:
        if self.template is not None and self.template_file is not None:
            raise ValueError('Set at most one of chat.template and chat.template_file')
        return self


class AppConfig(BaseModel):
    chat: ChatConfig
