"""Main CLI entry point for Launcher AI.

Exercises the AI module outside the launcher GUI:
    launcher-ai prompts
    launcher-ai ask <query> --prompt <label>
    launcher-ai chat --prompt <label>
"""

import json
import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from .. import __version__
from ..ai import AIConfig, BaseProvider, Conversation, PromptConfig, create_providers
from ..ai.config import default_config_path
from ..ai.exceptions import AIConfigurationError
from ..entries import Entry

_logger = logging.getLogger(__name__)


def load_config(config_path: str | None) -> AIConfig:
    """Load the AI config, exiting with an error message if it is invalid.

    An explicit path must exist; a missing default config means "no prompts".
    """
    path = Path(config_path) if config_path else default_config_path()
    if config_path is None and not path.exists():
        _logger.info("No config at %s, using defaults", path)
        return AIConfig()

    try:
        return AIConfig.from_yaml(path)
    except (AIConfigurationError, ValidationError) as e:
        click.echo(f"Error: {e}")
        sys.exit(1)


def build_catalog(config: AIConfig) -> tuple[dict[str, BaseProvider], list[Entry]]:
    """Create active providers and collect their launcher entries.

    Activating an entry starts a Conversation for its prompt.
    """
    providers: dict[str, BaseProvider] = {}

    def start_conversation(provider_name: str, prompt: PromptConfig) -> Conversation:
        return Conversation(providers[provider_name], prompt)

    providers.update(create_providers(config, special_func=start_conversation))

    entries: list[Entry] = []
    for provider in providers.values():
        entries.extend(provider.setup_data())
    return providers, entries


def _close_all(providers: dict[str, BaseProvider]) -> None:
    for provider in providers.values():
        provider.close()


def _start(config_path: str | None, prompt_label: str) -> tuple[dict[str, BaseProvider], Conversation]:
    config = load_config(config_path)
    providers, entries = build_catalog(config)

    if not providers:
        click.echo("Error: No AI provider is active. Set GROK_API_KEY.")
        sys.exit(1)

    entry = next((e for e in entries if e.label == prompt_label), None)
    if entry is None:
        _close_all(providers)
        click.echo(f"Error: Prompt '{prompt_label}' not found.")
        if entries:
            click.echo(f"Available prompts: {', '.join(e.label for e in entries)}")
        sys.exit(1)

    return providers, entry.activate()


@click.group()
@click.version_option(version=__version__, prog_name="launcher-ai")
@click.option("--verbose", "-v", is_flag=True, help="Show informational log messages")
def cli(verbose: bool) -> None:
    """Launcher AI - talk to chat-completion providers from the launcher.

    \b
    Commands:
        launcher-ai prompts
        launcher-ai ask <query> --prompt <label>
        launcher-ai chat --prompt <label>
    """
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# =============================================================================
# Prompts Command
# =============================================================================


@cli.command()
@click.option("--config", "-c", "config_path", type=click.Path(), help="Path to config YAML")
@click.option(
    "--format", "-f", "output_format", type=click.Choice(["text", "json"]), default="text"
)
def prompts(config_path: str | None, output_format: str) -> None:
    """List the launcher entries of all active providers.

    \b
    Examples:
        launcher-ai prompts
        launcher-ai prompts --format json
    """
    config = load_config(config_path)
    providers, entries = build_catalog(config)
    _close_all(providers)

    if output_format == "json":
        data = [
            {
                "label": e.label,
                "sub": e.sub,
                "matching": e.matching.value,
                "single_module_only": e.single_module_only,
            }
            for e in entries
        ]
        click.echo(json.dumps(data, indent=2))
        return

    if not entries:
        click.echo("No prompts found.")
        return

    click.echo(f"{'LABEL':<30} {'PROVIDER':<10}")
    click.echo("-" * 41)
    for e in entries:
        click.echo(f"{e.label:<30} {e.sub:<10}")


# =============================================================================
# Ask Command
# =============================================================================


@cli.command()
@click.argument("query")
@click.option("--prompt", "-p", "prompt_label", required=True, help="Prompt label to use")
@click.option("--config", "-c", "config_path", type=click.Path(), help="Path to config YAML")
@click.option(
    "--format", "-f", "output_format", type=click.Choice(["text", "json"]), default="text"
)
def ask(query: str, prompt_label: str, config_path: str | None, output_format: str) -> None:
    """Send a single query and print the reply.

    \b
    Examples:
        launcher-ai ask "What is a monad?" --prompt "Ask Grok"
        launcher-ai ask "hi" -p "Ask Grok" --format json
    """
    providers, conversation = _start(config_path, prompt_label)
    try:
        result = conversation.ask(query)
    finally:
        _close_all(providers)

    if not result.ok:
        click.echo(f"Error: {result.error}")
        sys.exit(1)

    if output_format == "json":
        click.echo(json.dumps([m.model_dump() for m in result.messages], indent=2))
    else:
        for reply in result.replies:
            click.echo(reply.content)


# =============================================================================
# Chat Command
# =============================================================================


@cli.command()
@click.option("--prompt", "-p", "prompt_label", required=True, help="Prompt label to use")
@click.option("--config", "-c", "config_path", type=click.Path(), help="Path to config YAML")
def chat(prompt_label: str, config_path: str | None) -> None:
    """Hold a conversation with a prompt.

    Type /reset to start over and /exit (or Ctrl-D) to quit.
    """
    providers, conversation = _start(config_path, prompt_label)
    name = conversation.provider.name

    try:
        while True:
            try:
                line = click.prompt("you", prompt_suffix="> ", default="", show_default=False)
            except click.Abort:
                click.echo()
                break

            line = line.strip()
            if not line:
                continue
            if line == "/exit":
                break
            if line == "/reset":
                conversation.reset()
                click.echo("Conversation cleared.")
                continue

            result = conversation.ask(line)
            if not result.ok:
                click.echo(f"Error: {result.error}")
                continue
            for reply in result.replies:
                click.echo(f"{name}> {reply.content}")
    finally:
        _close_all(providers)


if __name__ == "__main__":
    cli()
