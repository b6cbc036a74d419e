"""Infrastructure configs -- lives in L4, not domain."""

from __future__ import annotations

import copy
from typing import Literal

from pydantic import BaseModel, Field

from chat_to_prompt.l1_entities.config import AppConfig
from chat_to_prompt.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'chat': {
        'template': None,
        'template_file': None,
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)


class LoggingConfig(BaseModel):
    level: Literal['DEBUG', 'INFO', 'WARNING', 'ERROR'] = 'WARNING'
    file: str | None = None  # None → stderr


class InfraConfig(BaseModel):
    """Groups process-level settings outside the domain layer."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
