"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pytest

from chat_to_prompt.l1_entities.chat_message import SystemMessage, UserMessage
from chat_to_prompt.l1_entities.errors import ConfigError, RenderError
from chat_to_prompt.l2_use_cases.chat_builder import ChatBuilder
from chat_to_prompt.l3_interface_adapters.gateways.jinja_template_engine import JinjaTemplateEngine

# --- Protocol-conforming Fakes ---


class FakeCompiledTemplate:
    """Fake compiled template: records contexts, optionally fails on selected calls."""

    def __init__(self, source: str, output: str = 'fake prompt') -> None:
        self.source = source
        self._output = output
        self.render_calls: list[Mapping[str, Any]] = []
        self._fail_next = 0

    def render(self, context: Mapping[str, Any]) -> str:
        self.render_calls.append(context)
        if self._fail_next:
            self._fail_next -= 1
            raise RenderError('fake render failure')
        return self._output

    def fail_next(self, times: int = 1) -> None:
        self._fail_next = times


class FakeTemplateEngine:
    """Fake template engine for L2 use case tests."""

    def __init__(self, output: str = 'fake prompt') -> None:
        self._output = output
        self.compile_calls: list[str] = []
        self.compiled: list[FakeCompiledTemplate] = []
        self._invalid: set[str] = set()

    def compile(self, source: str) -> FakeCompiledTemplate:
        self.compile_calls.append(source)
        if source in self._invalid:
            raise ConfigError(f'fake syntax error in {source!r}')
        template = FakeCompiledTemplate(source, self._output)
        self.compiled.append(template)
        return template

    def mark_invalid(self, source: str) -> None:
        self._invalid.add(source)


# --- Standard Fixtures ---


@pytest.fixture
def jinja_engine() -> JinjaTemplateEngine:
    return JinjaTemplateEngine()


@pytest.fixture
def default_builder(jinja_engine: JinjaTemplateEngine) -> ChatBuilder:
    return ChatBuilder(jinja_engine)


@pytest.fixture
def fake_engine() -> FakeTemplateEngine:
    return FakeTemplateEngine()


@pytest.fixture
def sample_messages() -> list:
    return [
        SystemMessage(content='You are helpful'),
        UserMessage(content='Hi'),
    ]


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
chat:
  template: "{% for item in items %}<{{ item.role }}>{{ item.content }}{% endfor %}"
logging:
  level: "ERROR"
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p


@pytest.fixture
def sample_messages_json(tmp_path: Path) -> Path:
    content = """\
[
  {"role": "system", "content": "You are helpful"},
  {"role": "user", "content": [{"type": "text", "text": "line1"}, {"type": "text", "text": "line2"}]}
]
"""
    p = tmp_path / 'messages.json'
    p.write_text(content, encoding='utf-8')
    return p
