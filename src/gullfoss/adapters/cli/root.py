"""The ``gullfoss`` command group.

The group resolves configuration (profile, then ``--set`` overrides), starts
logging and builds the :class:`CLIContext` every subcommand reads. Called
without a subcommand it prints the greeting report.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from gullfoss import __init__conf__
from gullfoss.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, TracebackState

if TYPE_CHECKING:
    from gullfoss.composition import AppServices


def _build_services(ctx: click.Context) -> AppServices:
    factory: Callable[[], AppServices] | None = ctx.obj if callable(ctx.obj) else None
    if factory is None:
        raise RuntimeError("gullfoss CLI started without a services factory in ctx.obj; use cli.main(obj=...).")
    return factory()


def _load_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    config = services.get_config(profile=profile)
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Print the complete Python traceback when a command fails",
)
@click.option(
    "--profile",
    default=None,
    metavar="NAME",
    help="Read configuration from the profile NAME as well",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one configuration value; may be given several times",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Greet the provided persons in English or French."""
    services = _build_services(ctx)
    config = _load_config(services, profile, set_overrides)
    services.init_logging(config)

    ctx.obj = CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    TracebackState.enable(traceback)

    if ctx.invoked_subcommand is None:
        from .commands import cli_greet

        ctx.invoke(cli_greet)


def _register_commands() -> None:
    # Deferred: the command modules import this package.
    from .commands import (
        cli_config,
        cli_copyright,
        cli_greet,
        cli_hello,
        cli_info,
        cli_names,
    )

    for command in (cli_greet, cli_hello, cli_names, cli_copyright, cli_info, cli_config):
        cli.add_command(command)


_register_commands()


__all__ = ["cli"]
