"""Command-line interface for gullfoss.

Import from here rather than from the individual modules: ``cli`` is the
root group, ``main`` runs it with exit-code handling, and the ``cli_*``
names are the registered subcommands.
"""

from __future__ import annotations

from .commands import (
    cli_config,
    cli_copyright,
    cli_greet,
    cli_hello,
    cli_info,
    cli_names,
)
from .constants import CLICK_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import CLIContext, TracebackState, get_cli_context
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "CLIContext",
    "ExitCode",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    "TracebackState",
    "cli",
    "cli_config",
    "cli_copyright",
    "cli_greet",
    "cli_hello",
    "cli_info",
    "cli_names",
    "get_cli_context",
    "main",
]
