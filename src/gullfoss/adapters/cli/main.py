"""Process-level CLI runner shared by the console script and ``python -m``.

Contents:
    * :func:`main` - run the root group and return an exit code.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from gullfoss import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import TracebackState

if TYPE_CHECKING:
    from gullfoss.composition import AppServices


def _report_failure(exc: BaseException) -> int:
    """Print ``exc`` through lib_cli_exit_tools and map it to an exit code."""
    verbose = TracebackState.capture().enabled
    TracebackState.enable(verbose)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    # The factory travels in ``obj``, which lib_cli_exit_tools.run_cli cannot pass.
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:
        # Includes SystemExit raised by commands and KeyboardInterrupt.
        return _report_failure(exc)
    return 0


def _shutdown_logging() -> None:
    # Only the main thread owns the runtime.
    if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the ``gullfoss`` command line and return its exit code.

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` when None.
        restore_traceback: Put the traceback flags back as they were before the run.
        services_factory: Returns the services to run against. Entry points
            pass ``build_production``; tests pass their own wiring.

    Raises:
        ValueError: If ``services_factory`` is missing.

    Example:
        >>> from gullfoss.composition import build_production
        >>> main(["hello", "Ada", "--language", "english"], services_factory=build_production)  # doctest: +SKIP
        Hello Ada !
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required; entry points pass composition.build_production.")

    args = list(argv) if argv is not None else sys.argv[1:]
    previous = TracebackState.capture()
    try:
        return _invoke(args, services_factory)
    finally:
        if restore_traceback:
            previous.restore()
        _shutdown_logging()


__all__ = ["main"]
