"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports that operate entirely
in memory -- no filesystem, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.logging` - In-memory logging adapter
    * :mod:`.providers` - Person/greeter doubles
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import display_config_in_memory, get_config_in_memory
from .logging import init_logging_in_memory
from .providers import GreeterSpy, StubPersonProvider

# Static conformance assertions
if TYPE_CHECKING:
    from gullfoss.application.ports import (
        DisplayConfig,
        GetConfig,
        Greeter,
        InitLogging,
        PersonSource,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_person_source: PersonSource = StubPersonProvider()
    _assert_greeter: Greeter = GreeterSpy()

__all__ = [
    "GreeterSpy",
    "StubPersonProvider",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
