"""Greeting commands composing the person and message providers.

Contents:
    * :func:`cli_greet` - Greet every provided person, then print copyrights.
    * :func:`cli_hello` - Greet a single, arbitrary name.
    * :func:`cli_names` - List the provided names.
    * :func:`cli_copyright` - Print the copyright notice.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from gullfoss.application.greetings import build_report
from gullfoss.domain.enums import Language
from gullfoss.domain.errors import ConfigurationError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_language_option = click.option(
    "--language",
    type=click.Choice([lang.value for lang in Language], case_sensitive=False),
    default=None,
    help="Greeting language (defaults to [greeting] language from configuration)",
)


def _resolve_language(cli_ctx: CLIContext, language: str | None) -> Language:
    """Like :meth:`CLIContext.greeting_language`, exiting with 78 on bad configuration."""
    try:
        return cli_ctx.greeting_language(language)
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


@click.command("greet", context_settings=CLICK_CONTEXT_SETTINGS)
@_language_option
@click.pass_context
def cli_greet(ctx: click.Context, language: str | None) -> None:
    """Greet every provided person, then print both copyright notices.

    This is also what runs when ``gullfoss`` is called without a command.
    """
    cli_ctx = get_cli_context(ctx)
    selected = _resolve_language(cli_ctx, language)

    with lib_log_rich.runtime.bind(job_id="cli-greet", extra={"command": "greet", "language": selected.value}):
        logger.info("Greeting provided persons", extra={"language": selected.value})
        for line in build_report(cli_ctx.services.persons, cli_ctx.services.messages, selected):
            click.echo(line)


@click.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
@_language_option
@click.pass_context
def cli_hello(ctx: click.Context, name: str, language: str | None) -> None:
    """Greet NAME in the selected language."""
    cli_ctx = get_cli_context(ctx)
    selected = _resolve_language(cli_ctx, language)

    with lib_log_rich.runtime.bind(job_id="cli-hello", extra={"command": "hello", "language": selected.value}):
        logger.info("Greeting a single person")
        click.echo(cli_ctx.services.messages.say_hello_to(name, selected))


@click.command("names", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_names(ctx: click.Context) -> None:
    """List the provided names, one per line."""
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-names", extra={"command": "names"}):
        for name in cli_ctx.services.persons.get_names():
            click.echo(name)


@click.command("copyright", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_copyright(ctx: click.Context) -> None:
    """Print the copyright notice."""
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-copyright", extra={"command": "copyright"}):
        click.echo(cli_ctx.services.persons.get_copyright())


__all__ = ["cli_copyright", "cli_greet", "cli_hello", "cli_names"]
