"""Where gullfoss gets wired together.

:func:`build_production` is what the console script and ``python -m`` run
with; :func:`build_testing` swaps every I/O edge for the in-memory adapters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.greeting import load_greeting_config_from_dict
from ..adapters.config.loader import get_config
from ..adapters.logging.setup import init_logging
from ..domain.copyright import CopyrightProvider
from ..domain.persons import PersonProvider
from ..domain.translator import MessageProvider

# Type checkers flag any adapter that drifts from its port.
if TYPE_CHECKING:
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        Greeter,
        InitLogging,
        LoadGreetingConfigFromDict,
        PersonSource,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_load_greeting_config: LoadGreetingConfigFromDict = load_greeting_config_from_dict
    _assert_init_logging: InitLogging = init_logging
    _assert_person_source: PersonSource = PersonProvider()
    _assert_greeter: Greeter = MessageProvider()


@dataclass(frozen=True, slots=True)
class AppServices:
    """One implementation per port, fixed for the lifetime of a CLI run."""

    get_config: GetConfig
    display_config: DisplayConfig
    load_greeting_config_from_dict: LoadGreetingConfigFromDict
    init_logging: InitLogging
    persons: PersonSource
    messages: Greeter


def build_providers() -> tuple[PersonProvider, MessageProvider]:
    """Build both providers around one shared :class:`CopyrightProvider`.

    Example:
        >>> persons, messages = build_providers()
        >>> persons.copyright_provider is messages.copyright_provider
        True
    """
    copyright_provider = CopyrightProvider()
    return PersonProvider(copyright_provider), MessageProvider(copyright_provider)


def build_production() -> AppServices:
    """Real configuration files, lib_log_rich logging and the reference providers."""
    persons, messages = build_providers()
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        load_greeting_config_from_dict=load_greeting_config_from_dict,
        init_logging=init_logging,
        persons=persons,
        messages=messages,
    )


def build_testing(
    *,
    persons: PersonSource | None = None,
    messages: Greeter | None = None,
) -> AppServices:
    """No file or logging side effects; providers are stubs unless given.

    Args:
        persons: Optional person source, e.g. a ``StubPersonProvider``.
            Defaults to a fresh stub returning the reference names.
        messages: Optional greeter, e.g. a ``GreeterSpy`` you keep a
            reference to for assertions. Defaults to a fresh spy.
    """
    from ..adapters.memory import (
        GreeterSpy,
        StubPersonProvider,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        load_greeting_config_from_dict=load_greeting_config_from_dict,
        init_logging=init_logging_in_memory,
        persons=persons if persons is not None else StubPersonProvider(),
        messages=messages if messages is not None else GreeterSpy(),
    )


__all__ = [
    "display_config",
    "get_config",
    "load_greeting_config_from_dict",
    "init_logging",
    "AppServices",
    "build_production",
    "build_providers",
    "build_testing",
]
