"""Per-invocation CLI state and the shared traceback switch.

Contents:
    * :class:`CLIContext` - what the root command hands to every subcommand.
    * :class:`TracebackState` - snapshot of ``lib_cli_exit_tools`` traceback flags.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from gullfoss.domain.enums import Language

if TYPE_CHECKING:
    from gullfoss.composition import AppServices


@dataclass(slots=True)
class CLIContext:
    """State built once by the root command.

    Attributes:
        traceback: ``--traceback`` was given.
        config: Configuration with ``--set`` overrides already applied.
        services: Wired application services.
        profile: ``--profile`` value, if any.
        set_overrides: Raw ``--set`` strings, reapplied when a subcommand
            reloads configuration under another profile.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()

    def greeting_language(self, choice: str | None = None) -> Language:
        """Return ``choice`` as a :class:`Language`, else the configured one.

        Raises:
            ConfigurationError: If no choice is given and ``[greeting]``
                holds an unsupported language.
        """
        if choice is not None:
            return Language(choice.lower())
        return self.services.load_greeting_config_from_dict(self.config.as_dict()).language


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` the root command stored on ``ctx``.

    Raises:
        RuntimeError: If a subcommand runs without the root group.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock()
        >>> ctx.obj = CLIContext(traceback=True, config=MagicMock(), services=MagicMock())
        >>> get_cli_context(ctx).traceback
        True
    """
    if isinstance(ctx.obj, CLIContext):
        return ctx.obj
    raise RuntimeError("Subcommand invoked without the root gullfoss group; CLI context missing.")


class TracebackState(NamedTuple):
    """Traceback flags of ``lib_cli_exit_tools.config``.

    Example:
        >>> previous = TracebackState.capture()
        >>> TracebackState.enable(True)
        >>> TracebackState.capture()
        TracebackState(enabled=True, force_color=True)
        >>> previous.restore()
    """

    enabled: bool
    force_color: bool

    @classmethod
    def capture(cls) -> TracebackState:
        """Read the current flags."""
        config = lib_cli_exit_tools.config
        return cls(
            enabled=bool(getattr(config, "traceback", False)),
            force_color=bool(getattr(config, "traceback_force_color", False)),
        )

    @staticmethod
    def enable(enabled: bool) -> None:
        """Turn full, coloured tracebacks on or off together."""
        TracebackState(bool(enabled), bool(enabled)).restore()

    def restore(self) -> None:
        """Write these flags back to ``lib_cli_exit_tools.config``."""
        lib_cli_exit_tools.config.traceback = self.enabled
        lib_cli_exit_tools.config.traceback_force_color = self.force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "get_cli_context",
]
