"""Dependency container -- composition root for wiring all layers together."""

from __future__ import annotations

from chat_to_prompt.l1_entities.config import AppConfig
from chat_to_prompt.l2_use_cases.chat_builder import ChatBuilder
from chat_to_prompt.l2_use_cases.ports.template_engine import TemplateEngine
from chat_to_prompt.l3_interface_adapters.gateways.jinja_template_engine import JinjaTemplateEngine
from chat_to_prompt.l3_interface_adapters.gateways.template_file_loader import load_template_source


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing.

    Raises ConfigError when the configured template cannot be loaded or compiled.
    """

    def __init__(self, config: AppConfig, engine: TemplateEngine | None = None) -> None:
        self.config = config
        self.engine: TemplateEngine = engine or JinjaTemplateEngine()
        self.template_source = load_template_source(config.chat)
        self.chat_builder = ChatBuilder(self.engine, self.template_source)
