"""Gateway: resolve the configured chat template source from inline text or a file."""

from __future__ import annotations

from pathlib import Path

from chat_to_prompt.l1_entities.config import ChatConfig
from chat_to_prompt.l1_entities.errors import ConfigError
from chat_to_prompt.l3_interface_adapters.gateways.paths import USER_TEMPLATES_DIR


def candidate_paths(template_file: str) -> list[Path]:
    """Absolute paths are used as-is; relative ones are tried in cwd, then the user templates dir."""
    path = Path(template_file).expanduser()
    if path.is_absolute():
        return [path]
    return [Path.cwd() / path, USER_TEMPLATES_DIR / path]


def load_template_source(chat: ChatConfig) -> str | None:
    """Return the template text to compile, or None to use the built-in default.

    Raises ConfigError when a configured template file cannot be read.
    """
    if chat.template is not None:
        return chat.template
    if chat.template_file is None:
        return None
    candidates = candidate_paths(chat.template_file)
    for candidate in candidates:
        if candidate.is_file():
            try:
                return candidate.read_text(encoding='utf-8')
            except OSError as e:
                raise ConfigError(f'Cannot read chat template {candidate}: {e}') from e
    searched = ', '.join(str(c) for c in candidates)
    raise ConfigError(f"Chat template file not found: '{chat.template_file}'. Searched: {searched}")
