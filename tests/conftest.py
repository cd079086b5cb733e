"""Shared pytest fixtures for CLI, provider and module-entry tests.

Fixtures use descriptive names that read as plain English and are picked up
implicitly through pytest's conftest discovery.
"""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Callable, Iterator
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from gullfoss.composition import AppServices


def _load_dotenv() -> None:
    """Load .env file when it exists for local test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for exact output checks so log records written to
    stderr never leak into the assertion.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for CLI invocations."""
    from gullfoss.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before the test.

    Only clears before: a test may monkeypatch ``get_config`` and lose
    ``cache_clear`` in the process.
    """
    from gullfoss.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from plain dicts, without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def inject_config(
    clear_config_cache: None,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory that wires production services around a fixed Config.

    Only the ``get_config`` I/O boundary is replaced; logging, display and the
    providers stay real.

    Example:
        def test_english(cli_runner, config_factory, inject_config) -> None:
            factory = inject_config(config_factory({"greeting": {"language": "english"}}))
            result = cli_runner.invoke(cli, ["greet"], obj=factory)
    """
    from gullfoss.composition import AppServices, build_production

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = dataclasses.replace(build_production(), get_config=_fake_get_config)
        return lambda: services

    return _inject


@pytest.fixture
def inject_services() -> Callable[..., Callable[[], AppServices]]:
    """Return a factory that swaps selected production services.

    Keyword arguments name ``AppServices`` fields, e.g. ``persons=`` or
    ``messages=``; everything else comes from ``build_production``.

    Example:
        def test_failure(cli_runner, inject_services) -> None:
            factory = inject_services(persons=StubPersonProvider(raise_exception=RuntimeError("boom")))
            result = cli_runner.invoke(cli, ["greet"], obj=factory)
    """
    from gullfoss.composition import AppServices, build_production

    def _inject(**overrides: Any) -> Callable[[], AppServices]:
        services = dataclasses.replace(build_production(), **overrides)
        return lambda: services

    return _inject
