"""``gullfoss config``: show the merged configuration."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config

from gullfoss.adapters.config.overrides import apply_overrides
from gullfoss.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _resolve_config(cli_ctx: CLIContext, profile: str | None) -> tuple[Config, str | None]:
    # A profile given here wins over the root one; root --set values still apply.
    if not profile:
        return cli_ctx.config, cli_ctx.profile
    config = cli_ctx.services.get_config(profile=profile)
    return apply_overrides(config, cli_ctx.set_overrides), profile


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Print as annotated text or as JSON",
)
@click.option(
    "--section",
    default=None,
    metavar="NAME",
    help="Print only one section, for example greeting",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Profile to show instead of the one given to gullfoss",
)
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Show configuration after merging every layer.

    Later layers win: packaged defaults, app, host, user, .env, environment.
    An unknown --section exits with 22.
    """
    cli_ctx = get_cli_context(ctx)
    config, effective_profile = _resolve_config(cli_ctx, profile)
    fmt = OutputFormat(output_format.lower())

    extra = {"command": "config", "format": fmt.value, "profile": effective_profile}
    with lib_log_rich.runtime.bind(job_id="cli-config", extra=extra):
        logger.info("Displaying configuration", extra={"section": section})
        try:
            cli_ctx.services.display_config(config, output_format=fmt, section=section, profile=effective_profile)
        except ValueError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
