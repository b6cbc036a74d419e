"""CLI entry point for chat-to-prompt."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import IO, Any, NoReturn

import click
import yaml
from pydantic import ValidationError

from chat_to_prompt import __version__
from chat_to_prompt.l1_entities.errors import ChatPromptError


def _read_messages(stream: IO[str]) -> Any:
    """Decode a JSON/YAML message list; a chat request body with a ``messages`` key also works."""
    data = yaml.safe_load(stream.read())
    if data is None:
        return []
    if isinstance(data, dict) and 'messages' in data:
        return data['messages']
    return data


def _fail(message: str) -> NoReturn:
    click.echo(f'Error: {message}', err=True)
    sys.exit(1)


@click.command()
@click.argument('messages', type=click.File('r', encoding='utf-8'), default='-')
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Path to YAML config file.',
)
@click.option(
    '-t',
    '--template-file',
    default=None,
    type=click.Path(dir_okay=False),
    help='Chat template file (overrides the config file).',
)
@click.option(
    '--log-file',
    default=None,
    type=click.Path(dir_okay=False),
    help='Write logs to this file instead of stderr.',
)
@click.option('-v', '--verbose', is_flag=True, help='Log at DEBUG level.')
@click.option('--check', is_flag=True, help='Only compile the chat template and report the result.')
@click.version_option(version=__version__)
def cli(messages, config_path, template_file, log_file, verbose, check):
    """chat-to-prompt -- render a chat message list (JSON or YAML) into a completion prompt."""
    from chat_to_prompt.l1_entities.chat_message import (  # noqa: PLC0415 -- deferred: pydantic models not built on --help
        parse_messages,
    )
    from chat_to_prompt.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: not needed for --help
        YamlConfigLoader,
    )
    from chat_to_prompt.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: jinja2 not loaded on --help
        DependencyContainer,
    )
    from chat_to_prompt.l4_frameworks_and_drivers.infra_config import (  # noqa: PLC0415 -- deferred: not needed for --help
        InfraConfig,
        build_app_config,
    )
    from chat_to_prompt.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: not needed for --help
        setup_logging,
    )

    try:
        overrides: dict = {}
        if template_file:
            overrides['chat'] = {'template': None, 'template_file': template_file}
        raw = YamlConfigLoader().load_raw(config_path, overrides=overrides if overrides else None)
        config = build_app_config(raw)
        infra = InfraConfig.model_validate(raw)
    except FileNotFoundError as e:
        _fail(str(e))
    except ValidationError as e:
        _fail(f'Invalid configuration:\n{e}')

    level = 'DEBUG' if verbose else infra.logging.level
    target = log_file or infra.logging.file
    setup_logging(level, Path(target) if target else None)

    try:
        container = DependencyContainer(config)
    except ChatPromptError as e:
        _fail(str(e))

    if check:
        kind = 'default' if container.chat_builder.uses_default_template else 'custom'
        click.echo(f'Template OK ({kind})')
        return

    try:
        parsed = parse_messages(_read_messages(messages))
    except (UnicodeDecodeError, yaml.YAMLError) as e:
        _fail(f'Cannot decode messages: {e}')
    except ValidationError as e:
        _fail(f'Invalid messages:\n{e}')

    try:
        prompt = container.chat_builder.build(parsed)
    except ChatPromptError as e:
        _fail(str(e))
    click.echo(prompt, nl=False)
